# Este módulo garante que os dados que chegam de fora (formulário, planilha,
# API) estejam no formato esperado antes de irem para o cálculo. O núcleo não
# valida nada: horário mal escrito ou intervalo negativo viram números errados
# na folha, então barramos aqui com o pydantic.

# src/jornada_clt/data_validation.py

import datetime
import re
from typing import Any, List, Tuple

import pandas as pd
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from jornada_clt.core.types import DayRecord, PayrollConfig, WeekDay, WorkSchedule
from jornada_clt.logging_config import log
from jornada_clt.shared.utils import safe_decimal

HORARIO_REGEX = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _to_python(v: Any) -> Any:
    """Converte escalares do numpy/pandas (np.int64, np.bool_) para nativos."""
    if hasattr(v, "item") and not isinstance(v, (str, bytes)):
        return v.item()
    return v


def _is_vazio(v: Any) -> bool:
    return v is None or (isinstance(v, float) and pd.isna(v))


def _check_horario(value: str) -> str:
    if value and not HORARIO_REGEX.match(value):
        raise ValueError(f"Horário inválido '{value}', use HH:mm")
    return value


def _check_nao_negativo(value: Any, campo: str) -> float:
    numero = safe_decimal(_to_python(value))
    if numero is None:
        raise ValueError(f"{campo} inválido: {value!r}")
    if numero < 0:
        raise ValueError(f"{campo} não pode ser negativo")
    return float(numero)


class PayrollConfigModel(BaseModel):
    monthly_salary: float
    default_clock_in: str = "08:00"
    default_clock_out: str = "17:00"
    default_break_hours: float = 1.0
    rest_day: WeekDay = WeekDay.DOMINGO
    schedule: WorkSchedule = WorkSchedule.SEIS_POR_UM

    @field_validator("monthly_salary", mode="before")
    @classmethod
    def salario_valido(cls, v: Any):
        return _check_nao_negativo(v, "Salário")

    @field_validator("default_break_hours", mode="before")
    @classmethod
    def intervalo_valido(cls, v: Any):
        return _check_nao_negativo(v, "Intervalo")

    @field_validator("default_clock_in", "default_clock_out")
    @classmethod
    def horario_valido(cls, v: str):
        if not v:
            raise ValueError("Horário padrão é obrigatório")
        return _check_horario(v)

    def to_domain(self) -> PayrollConfig:
        return PayrollConfig(**self.model_dump())


class DayRecordModel(BaseModel):
    date: datetime.date
    clock_in: str = ""
    clock_out: str = ""
    break_hours: float = 0.0
    is_rest_day: bool = False
    is_holiday: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def so_a_data(cls, v: Any):
        # pd.Timestamp e datetime chegam com hora; só a data interessa.
        if isinstance(v, datetime.datetime):
            return v.date()
        return v

    @field_validator("clock_in", "clock_out", mode="before")
    @classmethod
    def limpa_horario(cls, v: Any):
        # Células vazias do pandas chegam como NaN/None.
        if _is_vazio(v):
            return ""
        return _check_horario(str(v).strip())

    @field_validator("break_hours", mode="before")
    @classmethod
    def intervalo_valido(cls, v: Any):
        if _is_vazio(v):
            return 0.0
        return _check_nao_negativo(v, "Intervalo")

    @field_validator("is_rest_day", "is_holiday", mode="before")
    @classmethod
    def flag_nativa(cls, v: Any):
        if _is_vazio(v):
            return False
        return _to_python(v)

    @model_validator(mode="after")
    def entrada_e_saida_juntas(self):
        if bool(self.clock_in) != bool(self.clock_out):
            raise ValueError("Entrada e saída devem ser preenchidas juntas")
        return self

    def to_domain(self) -> DayRecord:
        return DayRecord(**self.model_dump())


def validate_config(data: dict) -> PayrollConfig:
    """Valida a configuração. Levanta ValidationError se algo estiver errado."""
    return PayrollConfigModel(**data).to_domain()


def validate_day_records(df: pd.DataFrame) -> Tuple[List[DayRecord], pd.DataFrame]:
    """
    Valida cada linha do DataFrame de dias.

    Linhas com problema são logadas e devolvidas à parte (com a coluna
    'Observacoes'), sem interromper a validação das demais. Datas repetidas
    também são rejeitadas: a data é a identidade do dia.
    """
    log.info("Iniciando validação dos registros de jornada...")

    validos: List[DayRecord] = []
    rejeitados = []
    datas_vistas = set()

    for _, row in df.iterrows():
        row_data = row.to_dict()
        try:
            record = DayRecordModel(**row_data).to_domain()
        except ValidationError as e:
            log.error(f"Erro de validação no dia {row_data.get('date', 'N/A')}: {e}")
            row_data["Observacoes"] = "; ".join(err["msg"] for err in e.errors())
            rejeitados.append(row_data)
            continue

        if record.date in datas_vistas:
            log.error(f"Dia {record.date.strftime('%d/%m/%Y')} informado mais de uma vez.")
            row_data["Observacoes"] = "Data duplicada no período"
            rejeitados.append(row_data)
            continue

        datas_vistas.add(record.date)
        validos.append(record)

    if rejeitados:
        log.warning(f"{len(rejeitados)} registro(s) rejeitado(s) na validação.")
    else:
        log.success("Validação dos registros concluída.")

    colunas = list(df.columns)
    if "Observacoes" not in colunas:
        colunas.append("Observacoes")
    return validos, pd.DataFrame(rejeitados, columns=colunas)
