from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

_QUANT = Decimal("0.01")


def parse_price(value: str) -> Decimal:
    """
    Parse strict depuis string.
    Autorise "12.34", "12", "1E+3". Pas de virgule: les sources sont en format machine.
    """
    if not isinstance(value, str):
        raise TypeError("Price must be provided as a string")

    raw = value.strip()
    if raw == "":
        raise ValueError("Price cannot be empty")

    try:
        dec = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid decimal price: {value!r}") from exc

    if not dec.is_finite():
        raise ValueError(f"Price must be finite: {value!r}")
    return dec


def round_half_up(value: Decimal) -> Decimal:
    # utilise le contexte courant: l'appelant fixe la précision pour les grandes valeurs
    return value.quantize(_QUANT, rounding=ROUND_HALF_UP)


def normalize_price(value: Decimal) -> Decimal:
    """Retire les zéros de fin sans passer en notation exponentielle: 10.000 -> 10, 46813.2100 -> 46813.21."""
    if value == value.to_integral_value():
        return value.quantize(Decimal(1))
    return value.normalize()
