# tests/test_payroll.py

import pytest

from jornada_clt.core.calculations import summarize_month
from jornada_clt.core.payroll import (
    hourly_rate,
    monthly_payroll,
    overtime_breakdown,
    value_per_day,
)
from jornada_clt.core.types import (
    DailyHoursResult,
    DayValuation,
    MonthlySummary,
    OvertimeBreakdown,
    PayrollResult,
)


@pytest.mark.parametrize(
    "salario, valor_hora",
    [(2200.00, 10.00), (3300.00, 15.00), (2500.00, 11.36), (0.0, 0.0)],
)
def test_valor_hora(salario, valor_hora):
    assert hourly_rate(salario) == valor_hora


def test_valor_do_dia():
    resultado = DailyHoursResult(normal=8, premium50=2, premium100=0)
    assert value_per_day(resultado, 10.00) == DayValuation(80.00, 30.00, 0.00)


def test_valor_do_dia_em_feriado():
    resultado = DailyHoursResult(premium100=4.0)
    assert value_per_day(resultado, 12.34) == DayValuation(0.0, 0.0, 98.72)


def test_detalhamento_horas_extras():
    assert overtime_breakdown(10, 2, 10.00) == OvertimeBreakdown(
        amount50=150.00, amount100=40.00, total=190.00
    )


def test_folha_usa_inss_do_resumo():
    # Arrange
    resumo = MonthlySummary(
        normal_hours=176,
        premium50_hours=10,
        premium100_hours=2,
        dsr=50.00,
        gross=2440.00,
        withholding=200.00,
        net=2240.00,
    )
    # Act
    folha = monthly_payroll(resumo, 2200.00)
    # Assert: 2200 + 10 x 15 + 2 x 20 + 50
    assert folha == PayrollResult(gross=2440.00, withholding=200.00, net=2240.00)


def test_folha_com_inss_informado_manualmente(dias_junho, config_padrao):
    resumo = summarize_month(dias_junho, config_padrao)

    folha = monthly_payroll(resumo, config_padrao.monthly_salary, 150.00)

    assert folha.gross == resumo.gross
    assert folha.withholding == 150.00
    assert folha.net == 2349.94


def test_folha_reproduz_o_bruto_do_resumo(dias_junho_com_feriado, config_padrao):
    resumo = summarize_month(dias_junho_com_feriado, config_padrao)

    folha = monthly_payroll(resumo, config_padrao.monthly_salary)

    assert folha.gross == resumo.gross
    assert folha.withholding == resumo.withholding
    assert folha.net == pytest.approx(resumo.net, abs=0.01)
