from jornada_clt.core.calculations import (
    calculate_dsr,
    calculate_withholding,
    classify_day,
    summarize_month,
)
from jornada_clt.core.month import (
    apply_settings_change,
    generate_month_days,
    group_by_week,
    holidays_from_dates,
    no_holidays,
    replace_day,
)
from jornada_clt.core.payroll import (
    hourly_rate,
    monthly_payroll,
    overtime_breakdown,
    value_per_day,
)
from jornada_clt.core.time import (
    hour_difference,
    minutes_to_hours,
    time_to_minutes,
    worked_minutes,
)
from jornada_clt.core.types import (
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
)
