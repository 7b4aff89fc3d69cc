"""Formatage lisible des nombres d'octets.

Arrondi fixe : le quotient est calculé exactement (arithmétique entière)
puis arrondi au dixième, demi vers le haut (1050 o → "1.1 KB").
"""

import operator

from reprsize.exceptions import InvalidSize
from reprsize.units import DECIMAL, Unit, Units, units_for

# Largeur maximale : entier non signé 64 bits
MAX_BYTES = 2**64 - 1


def as_count(value) -> int:
    """Valide et convertit une valeur en nombre d'octets."""
    if isinstance(value, bool):
        raise InvalidSize(value, "booléen refusé")
    try:
        count = operator.index(value)
    except TypeError:
        raise InvalidSize(
            value, f"type {type(value).__name__} non entier",
        ) from None
    if count < 0:
        raise InvalidSize(value, "négative")
    if count > MAX_BYTES:
        raise InvalidSize(value, "dépasse 2**64 - 1")
    return count


def select_unit(count: int, family: str = DECIMAL) -> Unit:
    """Plus grande unité de la famille dont le quotient est >= 1.

    Zéro reste en octets ; au-delà du dernier échelon, on garde le dernier.
    """
    count = as_count(count)
    selected = Units.BYTES
    for unit in units_for(family):
        if count >= unit.bytes:
            selected = unit
    return selected


def format_auto(count: int, family: str = DECIMAL) -> str:
    """Formate avec l'unité la mieux adaptée ("54.2 KB", "53.0 KiB")."""
    count = as_count(count)
    if count == 0:
        return f"0 {Units.BYTES}"
    unit = select_unit(count, family)
    return f"{_one_decimal(count, unit.bytes)} {unit}"


def format_explicit(count: int, unit: Unit) -> str:
    """Formate dans l'unité demandée.

    En octets, le nombre entier sans décimale ("54222 B") ; sinon un
    chiffre après la virgule ("21.5 KiB").
    """
    count = as_count(count)
    if unit.exponent == 0:
        return f"{count} {unit}"
    return f"{_one_decimal(count, unit.bytes)} {unit}"


def _one_decimal(count: int, divisor: int) -> str:
    """Quotient exact arrondi au dixième (demi vers le haut)."""
    tenths, rest = divmod(count * 10, divisor)
    if rest * 2 >= divisor:
        tenths += 1
    return f"{tenths // 10}.{tenths % 10}"
