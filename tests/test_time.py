# tests/test_time.py

import pytest

from jornada_clt.core.time import (
    hour_difference,
    minutes_to_hours,
    time_to_minutes,
    worked_minutes,
)


@pytest.mark.parametrize(
    "horario, minutos",
    [("00:00", 0), ("08:30", 510), ("14:15", 855), ("23:59", 1439)],
)
def test_time_to_minutes(horario, minutos):
    assert time_to_minutes(horario) == minutos


def test_worked_minutes_desconta_intervalo():
    assert worked_minutes("08:00", "17:00", 1) == 480
    assert worked_minutes("08:00", "12:00", 0) == 240
    assert worked_minutes("08:00", "12:00", 0.5) == 210


def test_worked_minutes_nunca_negativo():
    # 1h de trabalho com 2h de intervalo não vira -60
    assert worked_minutes("08:00", "09:00", 2) == 0


def test_hour_difference_nao_trata_virada_de_dia():
    assert hour_difference("23:00", "23:30") == 30
    assert hour_difference("17:00", "08:00") == -540


@pytest.mark.parametrize(
    "minutos, horas",
    [(0, 0.0), (60, 1.0), (90, 1.5), (510, 8.5), (20, 0.33), (40, 0.67)],
)
def test_minutes_to_hours_arredonda_duas_casas(minutos, horas):
    assert minutes_to_hours(minutos) == horas
