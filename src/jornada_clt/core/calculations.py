# src/jornada_clt/core/calculations.py

"""
Cálculos de jornada CLT: classificação diária, DSR, INSS e resumo mensal.

Regras de negócio:
- Feriado gera 100% para TODAS as horas trabalhadas (mesmo caindo na folga)
- Dia de folga (não feriado) gera 50% para todas as horas
- Dia normal: até a jornada padrão são horas normais, o excedente é 50%
- Domingo NÃO gera 100% automaticamente, apenas se for feriado
- Não há escalonamento de 50% para 100% dentro de um dia normal
- DSR calculado sobre o valor das horas extras do mês inteiro
"""

from typing import Iterable, Sequence

from jornada_clt.core.constants import (
    HORAS_MENSAIS_CLT,
    INSS_TABLE_2026,
    JORNADA_PADRAO_DIARIA,
    MULTIPLICADOR_EXTRA_50,
    MULTIPLICADOR_EXTRA_100,
)
from jornada_clt.core.time import minutes_to_hours, worked_minutes
from jornada_clt.core.types import (
    DailyHoursResult,
    DayRecord,
    InssBracket,
    MonthlySummary,
    PayrollConfig,
)
from jornada_clt.logging_config import log
from jornada_clt.shared.utils import arredondar


def classify_day(
    clock_in: str,
    clock_out: str,
    break_hours: float,
    is_holiday: bool,
    is_rest_day: bool,
    standard_daily_hours: float,
) -> DailyHoursResult:
    """
    Separa as horas de um dia em normais, 50% e 100%.

    Ordem de precedência:
    1. Sem entrada ou saída: tudo zero
    2. Feriado: todas as horas em 100% (tem precedência sobre a folga)
    3. Folga: todas as horas em 50%
    4. Dia normal: até `standard_daily_hours` normais, o resto em 50%
    """
    if not clock_in or not clock_out:
        return DailyHoursResult()

    worked = minutes_to_hours(worked_minutes(clock_in, clock_out, break_hours))

    if is_holiday:
        return DailyHoursResult(premium100=worked)

    if is_rest_day:
        return DailyHoursResult(premium50=worked)

    if worked <= standard_daily_hours:
        return DailyHoursResult(normal=worked)

    return DailyHoursResult(
        normal=standard_daily_hours,
        premium50=worked - standard_daily_hours,
    )


def calculate_dsr(
    hours50: float,
    hours100: float,
    rate50: float,
    rate100: float,
    rest_days: int,
    working_days: int,
) -> float:
    """
    DSR (Descanso Semanal Remunerado) sobre as horas extras do período.

    Fórmula simplificada:
    DSR = (horas 50% * valor 50% + horas 100% * valor 100%) * (dias de repouso / dias úteis)

    É uma aproximação sobre o mês inteiro, não semana a semana.
    Sem dias úteis ou sem dias de repouso o DSR é zero.
    """
    if working_days == 0 or rest_days == 0:
        return 0.0

    overtime_value = hours50 * rate50 + hours100 * rate100
    return arredondar(overtime_value * (rest_days / working_days))


def calculate_withholding(
    gross: float, table: Sequence[InssBracket] = INSS_TABLE_2026
) -> float:
    """
    Desconto de INSS pela tabela progressiva.

    Cada faixa aplica sua alíquota apenas sobre a parte do bruto que cai
    dentro dela. Acima do último limite o desconto fica no teto.
    Não arredonda: quem chama decide quando arredondar.
    """
    withholding = 0.0
    lower_bound = 0.0
    for bracket in table:
        if gross <= lower_bound:
            break
        slice_top = min(gross, bracket.upper_bound)
        withholding += (slice_top - lower_bound) * bracket.rate
        lower_bound = bracket.upper_bound
    return withholding


def summarize_month(
    days: Iterable[DayRecord],
    config: PayrollConfig,
    table: Sequence[InssBracket] = INSS_TABLE_2026,
) -> MonthlySummary:
    """
    Resumo mensal completo a partir dos dias registrados.

    Premissas:
    - Jornada padrão = 220h / 30 dias = 7.33h/dia
    - Valor hora = salário / 220, adicional 50% = x1.5, 100% = x2.0
    - Folgas e feriados contam como dias de repouso para o DSR

    Os totais de horas são arredondados antes do DSR, e DSR, bruto, INSS e
    líquido são arredondados cada um no fim: assim quem recalcula a folha com
    outro INSS (ver payroll.monthly_payroll) chega no mesmo bruto.
    """
    hourly = config.monthly_salary / HORAS_MENSAIS_CLT
    rate50 = hourly * MULTIPLICADOR_EXTRA_50
    rate100 = hourly * MULTIPLICADOR_EXTRA_100

    normal_total = 0.0
    premium50_total = 0.0
    premium100_total = 0.0
    rest_days = 0
    working_days = 0

    for day in days:
        result = classify_day(
            day.clock_in,
            day.clock_out,
            day.break_hours,
            day.is_holiday,
            day.is_rest_day,
            JORNADA_PADRAO_DIARIA,
        )
        normal_total += result.normal
        premium50_total += result.premium50
        premium100_total += result.premium100

        if day.is_rest_day or day.is_holiday:
            rest_days += 1
        else:
            working_days += 1

    normal_total = arredondar(normal_total)
    premium50_total = arredondar(premium50_total)
    premium100_total = arredondar(premium100_total)

    dsr = calculate_dsr(
        premium50_total, premium100_total, rate50, rate100, rest_days, working_days
    )

    gross = (
        config.monthly_salary
        + premium50_total * rate50
        + premium100_total * rate100
        + dsr
    )
    withholding = calculate_withholding(gross, table)
    net = gross - withholding

    log.debug(
        f"[Cálculo] Mês: {working_days} dias úteis, {rest_days} de repouso | "
        f"Normais {normal_total}h, 50% {premium50_total}h, 100% {premium100_total}h | "
        f"DSR R$ {dsr}, Bruto R$ {gross:.2f}, INSS R$ {withholding:.2f}"
    )

    return MonthlySummary(
        normal_hours=normal_total,
        premium50_hours=premium50_total,
        premium100_hours=premium100_total,
        dsr=arredondar(dsr),
        gross=arredondar(gross),
        withholding=arredondar(withholding),
        net=arredondar(net),
    )
