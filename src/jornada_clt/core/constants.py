# src/jornada_clt/core/constants.py

"""
Constantes da jornada CLT usadas pelos cálculos.

Ficam todas aqui para que a troca de tabela (ex: INSS de outro ano) seja
feita em um único lugar, sem caçar números soltos pela lógica.
"""

from jornada_clt.core.types import InssBracket

# CLT: 44 horas semanais = 220 horas mensais
HORAS_MENSAIS_CLT = 220

# Divisor fixo de dias do mês. Não usa o calendário real: 220 / 30 = 7.33h/dia
DIAS_DIVISOR_JORNADA = 30

JORNADA_PADRAO_DIARIA = HORAS_MENSAIS_CLT / DIAS_DIVISOR_JORNADA

MULTIPLICADOR_EXTRA_50 = 1.5
MULTIPLICADOR_EXTRA_100 = 2.0

# --- TABELA INSS 2026 ---
# Formato: (limite superior da faixa, alíquota marginal)
# Acima do último limite o desconto fica no teto.
INSS_TABLE_2026 = (
    InssBracket(upper_bound=1412.00, rate=0.075),
    InssBracket(upper_bound=2666.68, rate=0.09),
    InssBracket(upper_bound=4000.03, rate=0.12),
    InssBracket(upper_bound=7786.02, rate=0.14),
)
