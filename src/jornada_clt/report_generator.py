# src/jornada_clt/report_generator.py
"""
Relatórios da jornada (dia a dia e resumo do mês) e formatação no padrão brasileiro.
"""

from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from jornada_clt.core.calculations import classify_day
from jornada_clt.core.constants import JORNADA_PADRAO_DIARIA
from jornada_clt.core.payroll import (
    hourly_rate,
    monthly_payroll,
    overtime_breakdown,
    value_per_day,
)
from jornada_clt.core.types import DayRecord, MonthlySummary, PayrollConfig
from jornada_clt.logging_config import log
from jornada_clt.shared.utils import arredondar

DIAS_SEMANA = ["Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom"]
MESES = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]

COLUNAS_RELATORIO = [
    "Data",
    "Dia",
    "Entrada",
    "Saida",
    "Intervalo",
    "Folga",
    "Feriado",
    "HorasNormais",
    "HorasExtra50",
    "HorasExtra100",
    "ValorNormal",
    "ValorExtra50",
    "ValorExtra100",
]

COLUNAS_RESUMO = ["Item", "Valor", "Formatado"]

# Mesmo layout para arquivo e para a API
CSV_OPTIONS = {"index": False, "sep": ";", "decimal": ","}


def formatar_valor(valor: float) -> str:
    """Formata valor monetário no padrão brasileiro (R$ 1.234,56)."""
    sinal = "-" if valor < 0 else ""
    texto = f"{abs(arredondar(valor)):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sinal}R$ {texto}"


def formatar_horas(horas: float) -> str:
    return f"{arredondar(horas):.2f}"


def formatar_data(dia: date) -> str:
    """Ex: "Seg, 01/06/2026"."""
    return f"{DIAS_SEMANA[dia.weekday()]}, {dia.strftime('%d/%m/%Y')}"


def formatar_mes_ano(dia: date) -> str:
    return f"{MESES[dia.month - 1]} {dia.year}"


def build_day_report(days: Iterable[DayRecord], config: PayrollConfig) -> pd.DataFrame:
    """
    Monta um DataFrame com uma linha por dia: horas separadas por adicional
    e o valor de cada faixa, usando o valor hora arredondado.
    """
    days = list(days)
    if not days:
        log.warning("Nenhum dia informado - relatório vazio")
        return pd.DataFrame(columns=COLUNAS_RELATORIO)

    valor_hora = hourly_rate(config.monthly_salary)
    linhas = []
    for day in days:
        horas = classify_day(
            day.clock_in,
            day.clock_out,
            day.break_hours,
            day.is_holiday,
            day.is_rest_day,
            JORNADA_PADRAO_DIARIA,
        )
        valores = value_per_day(horas, valor_hora)
        linhas.append(
            {
                "Data": day.date,
                "Dia": formatar_data(day.date),
                "Entrada": day.clock_in,
                "Saida": day.clock_out,
                "Intervalo": day.break_hours,
                "Folga": day.is_rest_day,
                "Feriado": day.is_holiday,
                "HorasNormais": arredondar(horas.normal),
                "HorasExtra50": arredondar(horas.premium50),
                "HorasExtra100": arredondar(horas.premium100),
                "ValorNormal": valores.normal_amount,
                "ValorExtra50": valores.premium50_amount,
                "ValorExtra100": valores.premium100_amount,
            }
        )

    log.info(f"Relatório de {formatar_mes_ano(days[0].date)} com {len(linhas)} dias.")
    return pd.DataFrame(linhas, columns=COLUNAS_RELATORIO)


def export_day_report(df: pd.DataFrame, caminho: Union[str, Path]) -> Path:
    """Salva o relatório em CSV (separador ';' e decimal ',')."""
    caminho = Path(caminho)
    try:
        caminho.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(caminho, **CSV_OPTIONS)
    except OSError as e:
        log.error(f"Erro ao gerar o arquivo {caminho}: {e}")
        raise
    log.success(f"Relatório gerado com sucesso em: {caminho}")
    return caminho


def report_to_csv(df: pd.DataFrame) -> str:
    """Mesmo CSV do export_day_report, mas em texto (para download)."""
    return df.to_csv(**CSV_OPTIONS)


def build_summary_report(
    summary: MonthlySummary,
    config: PayrollConfig,
    override_withholding: Optional[float] = None,
) -> pd.DataFrame:
    """
    Resumo do mês no formato de holerite: horas, valor hora, horas extras,
    DSR, salário base, bruto, INSS e líquido.

    Se `override_withholding` for informado (ex: INSS passado pelo contador),
    ele substitui o INSS calculado e o líquido é refeito com ele.
    """
    valor_hora = hourly_rate(config.monthly_salary)
    extras = overtime_breakdown(
        summary.premium50_hours, summary.premium100_hours, valor_hora
    )
    folha = monthly_payroll(summary, config.monthly_salary, override_withholding)

    horas = [
        ("Horas normais", summary.normal_hours),
        ("Horas extras 50%", summary.premium50_hours),
        ("Horas extras 100%", summary.premium100_hours),
    ]
    valores = [
        ("Valor hora", valor_hora),
        ("Valor extras 50%", extras.amount50),
        ("Valor extras 100%", extras.amount100),
        ("Total extras", extras.total),
        ("DSR sobre extras", summary.dsr),
        ("Salário base", config.monthly_salary),
        ("Valor bruto", folha.gross),
        ("Desconto INSS", folha.withholding),
        ("Valor líquido", folha.net),
    ]

    linhas = [
        {"Item": item, "Valor": valor, "Formatado": f"{formatar_horas(valor)}h"}
        for item, valor in horas
    ]
    linhas += [
        {"Item": item, "Valor": valor, "Formatado": formatar_valor(valor)}
        for item, valor in valores
    ]

    if override_withholding is not None:
        log.info(
            f"Resumo com INSS informado manualmente: {formatar_valor(folha.withholding)} "
            f"(calculado {formatar_valor(summary.withholding)})"
        )
    return pd.DataFrame(linhas, columns=COLUNAS_RESUMO)
