from __future__ import annotations

from decimal import Decimal, MAX_EMAX, MIN_EMIN, ROUND_DOWN, localcontext

from app.domain.observation import Observation
from app.domain.price import round_half_up


def _exponent(value: Decimal) -> int:
    return value.as_tuple().exponent


def normalized_range(
    *,
    minimum: Observation | None,
    maximum: Observation | None,
) -> Decimal | None:
    """
    (max - min) / min, arrondi à 2 décimales (ROUND_HALF_UP).
    None si une borne manque, ou si min == 0 (ratio non défini).
    """
    if minimum is None or maximum is None:
        return None
    if minimum.price == 0:
        return None

    mn, mx = minimum.price, maximum.price

    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.rounding = ROUND_DOWN

        # soustraction exacte: assez de chiffres pour couvrir les deux opérandes
        ctx.prec = max(50, max(mx.adjusted(), mn.adjusted()) - min(_exponent(mx), _exponent(mn)) + 2)
        diff = mx - mn

        # division tronquée au-delà de la 3e décimale, puis un seul arrondi HALF_UP
        ratio_digits = diff.adjusted() - mn.adjusted() + 2
        ctx.prec = max(50, ratio_digits + 10)
        ratio = diff / mn
        return round_half_up(ratio)
