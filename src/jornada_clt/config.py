# src/jornada_clt/config.py
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from jornada_clt.core.types import PayrollConfig, WeekDay, WorkSchedule


class Settings(BaseSettings):
    # --- Identificação ---
    APP_NAME: str = "Controle de Jornada CLT"

    # --- Padrões do trabalhador (escala 6x1) ---
    # Usados quando o chamador não informa uma configuração própria.
    SALARIO_MENSAL: float = 2200.00
    HORA_ENTRADA_PADRAO: str = "08:00"
    HORA_SAIDA_PADRAO: str = "17:00"
    INTERVALO_PADRAO_HORAS: float = 1.0
    FOLGA_PADRAO: WeekDay = WeekDay.DOMINGO

    # --- API ---
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000

    # --- Logs ---
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="JORNADA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def default_payroll_config(settings: Optional[Settings] = None) -> PayrollConfig:
    """Monta a configuração de cálculo a partir das variáveis de ambiente."""
    settings = settings or get_settings()
    return PayrollConfig(
        monthly_salary=settings.SALARIO_MENSAL,
        default_clock_in=settings.HORA_ENTRADA_PADRAO,
        default_clock_out=settings.HORA_SAIDA_PADRAO,
        default_break_hours=settings.INTERVALO_PADRAO_HORAS,
        rest_day=settings.FOLGA_PADRAO,
        schedule=WorkSchedule.SEIS_POR_UM,
    )
