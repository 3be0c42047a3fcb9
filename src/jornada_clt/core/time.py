# src/jornada_clt/core/time.py

"""
Operações puras com horários no formato "HH:mm".

Não implementa regras CLT, apenas aritmética de tempo. Horários inválidos
são responsabilidade do chamador (ver data_validation).
"""

from jornada_clt.shared.utils import arredondar


def time_to_minutes(time: str) -> int:
    """Converte "HH:mm" em minutos desde 00:00 ("08:30" -> 510)."""
    hours, minutes = time.split(":")
    return int(hours) * 60 + int(minutes)


def hour_difference(clock_in: str, clock_out: str) -> int:
    """Diferença bruta entre entrada e saída, em minutos.

    Considera apenas horários no mesmo dia: se a saída for antes da entrada
    o resultado é negativo.
    """
    return time_to_minutes(clock_out) - time_to_minutes(clock_in)


def worked_minutes(clock_in: str, clock_out: str, break_hours: float) -> float:
    """Minutos efetivamente trabalhados, descontando o intervalo.

    Nunca negativo: intervalo maior que o período resulta em 0.
    """
    total = hour_difference(clock_in, clock_out) - break_hours * 60
    return max(0, total)


def minutes_to_hours(minutes: float) -> float:
    """Minutos para horas decimais com 2 casas (90 -> 1.5)."""
    return arredondar(minutes / 60)
