# src/jornada_clt/core/month.py

"""
Montagem dos dias de um mês a partir da configuração do trabalhador.

Feriados não são calculados aqui: quem chama injeta um `HolidayLookup`
(qualquer função date -> bool) vindo do calendário que preferir.
"""

import calendar
from dataclasses import replace
from datetime import date
from typing import Callable, Iterable, List

from jornada_clt.core.types import DayRecord, PayrollConfig, WeekDay
from jornada_clt.logging_config import log

HolidayLookup = Callable[[date], bool]


def no_holidays(day: date) -> bool:
    return False


def holidays_from_dates(dates: Iterable[date]) -> HolidayLookup:
    """Cria um HolidayLookup a partir de uma lista fixa de datas."""
    feriados = frozenset(dates)

    def is_holiday(day: date) -> bool:
        return day in feriados

    return is_holiday


def _default_day(
    day: date, config: PayrollConfig, is_holiday: HolidayLookup
) -> DayRecord:
    is_rest_day = WeekDay.from_date(day) == config.rest_day
    return DayRecord(
        date=day,
        clock_in="" if is_rest_day else config.default_clock_in,
        clock_out="" if is_rest_day else config.default_clock_out,
        break_hours=0.0 if is_rest_day else config.default_break_hours,
        is_rest_day=is_rest_day,
        is_holiday=is_holiday(day),
    )


def generate_month_days(
    year: int,
    month: int,
    config: PayrollConfig,
    is_holiday: HolidayLookup = no_holidays,
) -> List[DayRecord]:
    """
    Gera um DayRecord para cada dia do mês (month de 1 a 12).

    - Dias comuns recebem os horários e o intervalo padrão
    - O dia de folga configurado vem sem horários e sem intervalo
    - O feriado é marcado pelo `is_holiday`, mas mantém os horários padrão:
      se o trabalhador não trabalhou, o chamador limpa os horários
    """
    total_dias = calendar.monthrange(year, month)[1]
    days = [
        _default_day(date(year, month, numero), config, is_holiday)
        for numero in range(1, total_dias + 1)
    ]
    log.debug(f"Gerados {len(days)} dias para {month:02d}/{year}.")
    return days


def apply_settings_change(
    days: Iterable[DayRecord],
    old_config: PayrollConfig,
    new_config: PayrollConfig,
    is_holiday: HolidayLookup,
) -> List[DayRecord]:
    """
    Reaplica uma configuração nova sobre um mês já editado.

    `is_holiday` é obrigatório e deve ser o mesmo usado para gerar o mês:
    sem ele todo feriado pareceria uma mudança de status e seria refeito.

    - Dia que mudou de folga/feriado é refeito com os novos padrões
    - Dia que ainda está com os horários padrão antigos recebe os novos
    - Qualquer outro dia foi editado pelo usuário e é mantido
    """
    updated = []
    for day in days:
        is_rest_day = WeekDay.from_date(day.date) == new_config.rest_day
        feriado = is_holiday(day.date)

        if day.is_rest_day != is_rest_day or day.is_holiday != feriado:
            updated.append(_default_day(day.date, new_config, is_holiday))
            continue

        is_default_time = (
            day.clock_in == old_config.default_clock_in
            and day.clock_out == old_config.default_clock_out
        )
        if is_default_time and not is_rest_day:
            updated.append(
                replace(
                    day,
                    clock_in=new_config.default_clock_in,
                    clock_out=new_config.default_clock_out,
                    break_hours=new_config.default_break_hours,
                )
            )
            continue

        updated.append(day)
    return updated


def replace_day(days: Iterable[DayRecord], updated: DayRecord) -> List[DayRecord]:
    """Troca por inteiro o registro com a mesma data de `updated`."""
    days = list(days)
    if not any(day.date == updated.date for day in days):
        log.warning(
            f"Dia {updated.date.strftime('%d/%m/%Y')} não pertence ao período; nada foi alterado."
        )
        return days
    return [updated if day.date == updated.date else day for day in days]


def group_by_week(days: Iterable[DayRecord]) -> List[List[DayRecord]]:
    """Agrupa os dias em semanas de domingo a sábado, na ordem recebida."""
    weeks: List[List[DayRecord]] = []
    current: List[DayRecord] = []
    for day in days:
        if WeekDay.from_date(day.date) == WeekDay.DOMINGO and current:
            weeks.append(current)
            current = []
        current.append(day)
    if current:
        weeks.append(current)
    return weeks
