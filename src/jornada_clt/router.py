# src/jornada_clt/router.py

from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, Field

from jornada_clt.core.calculations import classify_day, summarize_month
from jornada_clt.core.constants import JORNADA_PADRAO_DIARIA
from jornada_clt.core.month import generate_month_days, holidays_from_dates
from jornada_clt.core.payroll import hourly_rate, monthly_payroll, overtime_breakdown
from jornada_clt.core.types import MonthlySummary
from jornada_clt.data_validation import DayRecordModel, PayrollConfigModel
from jornada_clt.logging_config import log
from jornada_clt.report_generator import (
    build_day_report,
    build_summary_report,
    report_to_csv,
)

router = APIRouter(prefix="/api/v1/jornada", tags=["Jornada CLT"])

# --- MODELOS ---


class ResumoRequest(BaseModel):
    config: PayrollConfigModel
    days: List[DayRecordModel]


class RelatorioResumoRequest(ResumoRequest):
    override_withholding: Optional[float] = None


class MonthlySummaryModel(BaseModel):
    normal_hours: float = Field(ge=0)
    premium50_hours: float = Field(ge=0)
    premium100_hours: float = Field(ge=0)
    dsr: float
    gross: float
    withholding: float
    net: float


class FolhaRequest(BaseModel):
    summary: MonthlySummaryModel
    monthly_salary: float = Field(ge=0)
    # INSS informado manualmente (ex: pelo contador)
    override_withholding: Optional[float] = None


class HorasExtrasRequest(BaseModel):
    hours50: float = Field(ge=0)
    hours100: float = Field(ge=0)
    hourly_rate: float = Field(ge=0)


class MesRequest(BaseModel):
    year: int = Field(ge=1900, le=2100)
    month: int = Field(ge=1, le=12)
    config: PayrollConfigModel
    holidays: List[date] = []


class DiaRequest(BaseModel):
    day: DayRecordModel
    standard_daily_hours: float = Field(default=JORNADA_PADRAO_DIARIA, ge=0)


# --- ENDPOINTS ---


def _dias_sem_repeticao(request: ResumoRequest):
    days = [day.to_domain() for day in request.days]
    datas = [day.date for day in days]
    if len(datas) != len(set(datas)):
        raise HTTPException(status_code=422, detail="Há datas repetidas no período.")
    return days


def _csv_response(df, nome: str) -> Response:
    return Response(
        content=report_to_csv(df),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={nome}"},
    )


@router.post("/resumo")
async def calcular_resumo(request: ResumoRequest):
    days = _dias_sem_repeticao(request)
    summary = summarize_month(days, request.config.to_domain())
    log.info(
        f"[Router] Resumo de {len(days)} dias: bruto R$ {summary.gross}, líquido R$ {summary.net}"
    )
    return asdict(summary)


@router.post("/folha")
async def calcular_folha(request: FolhaRequest):
    summary = MonthlySummary(**request.summary.model_dump())
    result = monthly_payroll(
        summary, request.monthly_salary, request.override_withholding
    )
    return asdict(result)


@router.get("/valor-hora")
async def valor_hora(salario: float):
    if salario < 0:
        raise HTTPException(status_code=422, detail="Salário não pode ser negativo.")
    return {"valor_hora": hourly_rate(salario)}


@router.post("/horas-extras")
async def detalhar_horas_extras(request: HorasExtrasRequest):
    return asdict(
        overtime_breakdown(request.hours50, request.hours100, request.hourly_rate)
    )


@router.post("/mes")
async def gerar_mes(request: MesRequest):
    days = generate_month_days(
        request.year,
        request.month,
        request.config.to_domain(),
        holidays_from_dates(request.holidays),
    )
    return [asdict(day) for day in days]


@router.post("/dia")
async def classificar_dia(request: DiaRequest):
    day = request.day
    result = classify_day(
        day.clock_in,
        day.clock_out,
        day.break_hours,
        day.is_holiday,
        day.is_rest_day,
        request.standard_daily_hours,
    )
    return asdict(result)


@router.post("/relatorio")
async def relatorio_dias(request: ResumoRequest):
    """Relatório dia a dia em CSV (separador ';' e decimal ',')."""
    days = _dias_sem_repeticao(request)
    df = build_day_report(days, request.config.to_domain())
    return _csv_response(df, "relatorio_jornada.csv")


@router.post("/relatorio/resumo")
async def relatorio_resumo(request: RelatorioResumoRequest):
    days = _dias_sem_repeticao(request)
    config = request.config.to_domain()
    summary = summarize_month(days, config)
    df = build_summary_report(summary, config, request.override_withholding)
    return _csv_response(df, "resumo_jornada.csv")
