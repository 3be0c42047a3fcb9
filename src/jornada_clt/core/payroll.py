# src/jornada_clt/core/payroll.py

"""
Converte horas em valores monetários (R$).

- Valor hora = salário mensal / 220
- Hora extra 50% = valor hora x 1.5
- Hora extra 100% = valor hora x 2.0
- Líquido = bruto - INSS (o INSS pode vir de fora, ex: informado pelo contador)
"""

from typing import Optional

from jornada_clt.core.constants import (
    HORAS_MENSAIS_CLT,
    MULTIPLICADOR_EXTRA_50,
    MULTIPLICADOR_EXTRA_100,
)
from jornada_clt.core.types import (
    DailyHoursResult,
    DayValuation,
    MonthlySummary,
    OvertimeBreakdown,
    PayrollResult,
)
from jornada_clt.shared.utils import arredondar


def hourly_rate(monthly_salary: float) -> float:
    """Valor de uma hora normal, em centavos (2200.00 -> 10.00)."""
    return arredondar(monthly_salary / HORAS_MENSAIS_CLT)


def value_per_day(daily_result: DailyHoursResult, hourly: float) -> DayValuation:
    rate50 = hourly * MULTIPLICADOR_EXTRA_50
    rate100 = hourly * MULTIPLICADOR_EXTRA_100
    return DayValuation(
        normal_amount=arredondar(daily_result.normal * hourly),
        premium50_amount=arredondar(daily_result.premium50 * rate50),
        premium100_amount=arredondar(daily_result.premium100 * rate100),
    )


def monthly_payroll(
    summary: MonthlySummary,
    monthly_salary: float,
    override_withholding: Optional[float] = None,
) -> PayrollResult:
    """
    Refaz bruto e líquido a partir do resumo mensal.

    O bruto é montado como em summarize_month (valor hora sem arredondar),
    então bate centavo a centavo com o do resumo. Se `override_withholding`
    for informado ele substitui o INSS calculado.
    """
    hourly = monthly_salary / HORAS_MENSAIS_CLT
    rate50 = hourly * MULTIPLICADOR_EXTRA_50
    rate100 = hourly * MULTIPLICADOR_EXTRA_100

    gross = (
        monthly_salary
        + summary.premium50_hours * rate50
        + summary.premium100_hours * rate100
        + summary.dsr
    )
    withholding = (
        override_withholding
        if override_withholding is not None
        else summary.withholding
    )
    return PayrollResult(
        gross=arredondar(gross),
        withholding=arredondar(withholding),
        net=arredondar(gross - withholding),
    )


def overtime_breakdown(
    hours50: float, hours100: float, hourly: float
) -> OvertimeBreakdown:
    """Detalhamento das horas extras para exibição e auditoria."""
    amount50 = hours50 * (hourly * MULTIPLICADOR_EXTRA_50)
    amount100 = hours100 * (hourly * MULTIPLICADOR_EXTRA_100)
    return OvertimeBreakdown(
        amount50=arredondar(amount50),
        amount100=arredondar(amount100),
        total=arredondar(amount50 + amount100),
    )
