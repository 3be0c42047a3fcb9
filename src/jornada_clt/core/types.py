# src/jornada_clt/core/types.py

"""
Tipos do controle de jornada CLT (escala 6x1).

Todos os registros são imutáveis: a configuração e os dias pertencem ao
chamador, e os cálculos só produzem valores novos a partir deles.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class WeekDay(str, Enum):
    """Dias da semana em português, usados para definir a folga."""

    SEGUNDA = "segunda"
    TERCA = "terca"
    QUARTA = "quarta"
    QUINTA = "quinta"
    SEXTA = "sexta"
    SABADO = "sabado"
    DOMINGO = "domingo"

    @classmethod
    def from_date(cls, day: date) -> "WeekDay":
        return list(cls)[day.weekday()]


class WorkSchedule(str, Enum):
    # Por enquanto só existe a escala 6 dias de trabalho, 1 de folga.
    SEIS_POR_UM = "6x1"


@dataclass(frozen=True)
class PayrollConfig:
    """Configuração do trabalhador, base de todos os cálculos."""

    monthly_salary: float
    default_clock_in: str = "08:00"
    default_clock_out: str = "17:00"
    default_break_hours: float = 1.0
    rest_day: WeekDay = WeekDay.DOMINGO
    schedule: WorkSchedule = WorkSchedule.SEIS_POR_UM


@dataclass(frozen=True)
class DayRecord:
    """Registro de um dia do mês.

    Entrada e saída vazias significam "sem trabalho registrado". A data é a
    identidade do registro dentro do período.
    """

    date: date
    clock_in: str = ""
    clock_out: str = ""
    break_hours: float = 0.0
    is_rest_day: bool = False
    is_holiday: bool = False


@dataclass(frozen=True)
class DailyHoursResult:
    normal: float = 0.0
    premium50: float = 0.0
    premium100: float = 0.0


@dataclass(frozen=True)
class MonthlySummary:
    """Totais do mês, já arredondados para 2 casas."""

    normal_hours: float
    premium50_hours: float
    premium100_hours: float
    dsr: float
    gross: float
    withholding: float
    net: float


@dataclass(frozen=True)
class DayValuation:
    normal_amount: float
    premium50_amount: float
    premium100_amount: float


@dataclass(frozen=True)
class PayrollResult:
    gross: float
    withholding: float
    net: float


@dataclass(frozen=True)
class OvertimeBreakdown:
    amount50: float
    amount100: float
    total: float


@dataclass(frozen=True)
class InssBracket:
    """Faixa da tabela progressiva do INSS (limite inclusivo)."""

    upper_bound: float
    rate: float
