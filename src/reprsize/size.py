"""Size — nombre d'octets immuable et ses représentations."""

from dataclasses import dataclass

from reprsize.formatter import as_count, format_auto, format_explicit, select_unit
from reprsize.units import BINARY, DECIMAL, Unit


@dataclass(frozen=True, order=True)
class Size:
    """Quantité d'octets (entier non signé 64 bits).

    Exemple pour Size(54222) :
    - str(size)              → "54.2 KB"
    - size.to_si_string()    → "53.0 KiB"
    - size.repr(Units.BYTES) → "54222 B"
    """

    bytes: int

    def __post_init__(self):
        # frozen : passe par object.__setattr__ pour normaliser la valeur
        object.__setattr__(self, "bytes", as_count(self.bytes))

    @classmethod
    def from_int(cls, count) -> "Size":
        return cls(count)

    @classmethod
    def from_units(cls, amount, unit: Unit) -> "Size":
        """Taille correspondant à `amount` fois l'unité donnée."""
        return cls(as_count(amount) * unit.bytes)

    def __int__(self) -> int:
        return self.bytes

    def __index__(self) -> int:
        return self.bytes

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.bytes})"

    def get_units(self) -> Unit:
        """Unité décimale retenue par le formatage automatique."""
        return select_unit(self.bytes, DECIMAL)

    def get_si_units(self) -> Unit:
        """Unité binaire retenue par le formatage automatique."""
        return select_unit(self.bytes, BINARY)

    def to_string(self) -> str:
        """Représentation décimale (base 1000), ex. "54.2 KB"."""
        return format_auto(self.bytes, DECIMAL)

    def to_si_string(self) -> str:
        """Représentation binaire (base 1024), ex. "53.0 KiB".

        Le nom est historique : le résultat utilise bien les unités
        binaires (KiB, MiB...), pas les unités SI.
        """
        return format_auto(self.bytes, BINARY)

    to_binary_string = to_si_string

    def repr(self, unit: Unit) -> str:
        """Représentation dans l'unité donnée, ex. "54222 B"."""
        return format_explicit(self.bytes, unit)
