# tests/test_report_generator.py

from datetime import date

import pytest

from jornada_clt.core.types import MonthlySummary
from jornada_clt.report_generator import (
    COLUNAS_RELATORIO,
    COLUNAS_RESUMO,
    build_day_report,
    build_summary_report,
    export_day_report,
    formatar_data,
    formatar_horas,
    formatar_mes_ano,
    formatar_valor,
    report_to_csv,
)


@pytest.mark.parametrize(
    "valor, texto",
    [
        (1234.56, "R$ 1.234,56"),
        (0, "R$ 0,00"),
        (1000000, "R$ 1.000.000,00"),
        (-10.5, "-R$ 10,50"),
        (2.675, "R$ 2,68"),
    ],
)
def test_formatar_valor(valor, texto):
    assert formatar_valor(valor) == texto


def test_formatar_horas_e_datas():
    assert formatar_horas(7.3333) == "7.33"
    assert formatar_horas(8) == "8.00"
    assert formatar_data(date(2026, 6, 1)) == "Seg, 01/06/2026"
    assert formatar_data(date(2026, 6, 7)) == "Dom, 07/06/2026"
    assert formatar_mes_ano(date(2026, 6, 1)) == "Junho 2026"


def test_relatorio_uma_linha_por_dia(dias_junho_com_feriado, config_padrao):
    # Act
    df = build_day_report(dias_junho_com_feriado, config_padrao)
    # Assert
    assert list(df.columns) == COLUNAS_RELATORIO
    assert len(df) == 30

    segunda = df.iloc[0]
    assert segunda["HorasNormais"] == 7.33
    assert segunda["HorasExtra50"] == 0.67
    assert segunda["ValorNormal"] == 73.33
    assert segunda["ValorExtra50"] == 10.00

    feriado = df.iloc[3]
    assert feriado["Feriado"]
    assert feriado["HorasExtra100"] == 8.0
    assert feriado["ValorExtra100"] == 160.00

    domingo = df.iloc[6]
    assert domingo["Folga"]
    assert domingo["HorasNormais"] == 0
    assert domingo["Dia"] == "Dom, 07/06/2026"


def test_relatorio_vazio(config_padrao):
    df = build_day_report([], config_padrao)
    assert df.empty
    assert list(df.columns) == COLUNAS_RELATORIO


def test_exporta_csv_no_padrao_brasileiro(tmp_path, dias_junho, config_padrao):
    df = build_day_report(dias_junho, config_padrao)

    caminho = export_day_report(df, tmp_path / "relatorios" / "junho.csv")

    conteudo = caminho.read_text(encoding="utf-8").splitlines()
    assert conteudo[0].startswith("Data;Dia;Entrada;Saida")
    assert "7,33" in conteudo[1]
    assert len(conteudo) == 31


def test_csv_em_texto_igual_ao_arquivo(tmp_path, dias_junho, config_padrao):
    df = build_day_report(dias_junho, config_padrao)

    caminho = export_day_report(df, tmp_path / "junho.csv")

    assert report_to_csv(df).splitlines() == caminho.read_text(encoding="utf-8").splitlines()


def criar_resumo(**kwargs):
    valores = dict(
        normal_hours=176,
        premium50_hours=10,
        premium100_hours=2,
        dsr=50.0,
        gross=2440.0,
        withholding=200.0,
        net=2240.0,
    )
    valores.update(kwargs)
    return MonthlySummary(**valores)


def test_resumo_do_mes(config_padrao):
    # Arrange
    resumo = criar_resumo()
    # Act
    df = build_summary_report(resumo, config_padrao)
    # Assert
    assert list(df.columns) == COLUNAS_RESUMO
    linhas = df.set_index("Item")
    assert linhas.loc["Horas normais", "Formatado"] == "176.00h"
    assert linhas.loc["Valor hora", "Valor"] == pytest.approx(10.0)
    assert linhas.loc["Total extras", "Valor"] == pytest.approx(190.0)
    assert linhas.loc["DSR sobre extras", "Formatado"] == "R$ 50,00"
    assert linhas.loc["Salário base", "Formatado"] == "R$ 2.200,00"
    assert linhas.loc["Valor bruto", "Formatado"] == "R$ 2.440,00"
    assert linhas.loc["Desconto INSS", "Valor"] == pytest.approx(200.0)
    assert linhas.loc["Valor líquido", "Formatado"] == "R$ 2.240,00"


def test_resumo_com_inss_informado(config_padrao):
    resumo = criar_resumo()

    df = build_summary_report(resumo, config_padrao, override_withholding=180.0)

    linhas = df.set_index("Item")
    assert linhas.loc["Desconto INSS", "Formatado"] == "R$ 180,00"
    assert linhas.loc["Valor líquido", "Valor"] == pytest.approx(2260.0)
    assert linhas.loc["Valor bruto", "Valor"] == pytest.approx(2440.0)


def test_resumo_separa_horas_extras_50_e_100(config_padrao):
    df = build_summary_report(criar_resumo(), config_padrao)

    linhas = df.set_index("Item")["Formatado"]
    assert linhas["Horas extras 50%"] == "10.00h"
    assert linhas["Valor extras 50%"] == "R$ 150,00"
    assert linhas["Horas extras 100%"] == "2.00h"
    assert linhas["Valor extras 100%"] == "R$ 40,00"
    assert df["Item"].is_unique
