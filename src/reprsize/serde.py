"""Sérialisation optionnelle : Size <-> entier brut (nombre d'octets).

Module séparé, non importé par `reprsize` : seuls les consommateurs qui
en ont besoin le chargent.
"""

import json

from reprsize.size import Size


def serialize(size: Size) -> int:
    """Size → nombre d'octets."""
    return size.bytes


def deserialize(value) -> Size:
    """Nombre d'octets → Size (lève InvalidSize si invalide)."""
    return Size(value)


class SizeEncoder(json.JSONEncoder):
    """Encodeur JSON qui écrit les Size comme des entiers."""

    def default(self, o):
        if isinstance(o, Size):
            return serialize(o)
        return super().default(o)


def dumps(size: Size, **kwargs) -> str:
    """Sérialise en JSON (nombre entier)."""
    return json.dumps(size, cls=SizeEncoder, **kwargs)


def loads(text: str) -> Size:
    """Désérialise un nombre JSON en Size."""
    return deserialize(json.loads(text))
