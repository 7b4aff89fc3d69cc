"""Exceptions de reprsize."""


class InvalidSize(ValueError):
    """Valeur ne pouvant pas représenter un nombre d'octets."""

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Taille invalide {value!r} : {reason}")
