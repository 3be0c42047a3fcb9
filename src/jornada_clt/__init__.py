"""Controle de jornada CLT: horas, DSR, INSS e folha mensal (escala 6x1)."""

__version__ = "1.0.0"

from jornada_clt.core import (  # noqa: E402
    DailyHoursResult,
    DayRecord,
    DayValuation,
    InssBracket,
    MonthlySummary,
    OvertimeBreakdown,
    PayrollConfig,
    PayrollResult,
    WeekDay,
    WorkSchedule,
    apply_settings_change,
    calculate_dsr,
    calculate_withholding,
    classify_day,
    generate_month_days,
    group_by_week,
    holidays_from_dates,
    hour_difference,
    hourly_rate,
    minutes_to_hours,
    monthly_payroll,
    no_holidays,
    overtime_breakdown,
    replace_day,
    summarize_month,
    time_to_minutes,
    value_per_day,
    worked_minutes,
)
