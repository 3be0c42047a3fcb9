# src/jornada_clt/shared/utils.py
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any, Optional

CENTAVOS = Decimal("0.01")


def arredondar(valor: float) -> float:
    """Arredonda para 2 casas decimais com meio para cima (centavos).

    O round() nativo do Python arredonda para o par mais próximo, o que
    geraria centavos diferentes da folha. Passamos pelo Decimal via str()
    para arredondar o valor que o usuário enxerga, e não a representação
    binária do float.
    """
    return float(Decimal(str(valor)).quantize(CENTAVOS, rounding=ROUND_HALF_UP))


def safe_decimal(value: Any) -> Optional[Decimal]:
    """Converte entrada suja (planilha, formulário) para Decimal.

    Aceita números e textos no padrão brasileiro ("1.234,56") ou americano
    ("1234.56"). Retorna None quando não dá para interpretar o valor, para
    que a validação decida o que fazer com a linha.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (float, int)):
        if value != value:  # NaN vindo do pandas
            return None
        return Decimal(str(value))
    if isinstance(value, str):
        cleaned = value.strip().replace("R$", "").strip()
        if not cleaned:
            return None
        if "," in cleaned:
            cleaned = cleaned.replace(".", "").replace(",", ".")
        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return None
    return None
