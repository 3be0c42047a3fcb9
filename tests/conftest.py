# tests/conftest.py

from datetime import date

import pytest

from jornada_clt.core.month import generate_month_days, holidays_from_dates
from jornada_clt.core.types import PayrollConfig

# Junho/2026 começa numa segunda: 4 domingos, 26 dias úteis.
# 04/06/2026 é Corpus Christi (quinta-feira).
CORPUS_CHRISTI_2026 = date(2026, 6, 4)


@pytest.fixture
def config_padrao() -> PayrollConfig:
    return PayrollConfig(
        monthly_salary=2200.00,
        default_clock_in="08:00",
        default_clock_out="17:00",
        default_break_hours=1.0,
    )


@pytest.fixture
def dias_junho(config_padrao):
    return generate_month_days(2026, 6, config_padrao)


@pytest.fixture
def dias_junho_com_feriado(config_padrao):
    return generate_month_days(
        2026, 6, config_padrao, holidays_from_dates([CORPUS_CHRISTI_2026])
    )
