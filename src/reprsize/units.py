"""Unités d'affichage des tailles (familles décimale et binaire)."""

from dataclasses import dataclass

DECIMAL = "decimal"
BINARY = "binary"
FAMILIES = (DECIMAL, BINARY)


@dataclass(frozen=True)
class Unit:
    """Un échelon d'unité : libellé, base et exposant."""

    label: str
    base: int
    exponent: int

    def __post_init__(self):
        if self.base not in (1000, 1024):
            raise ValueError(
                f"Base invalide : {self.base!r} (attendu : 1000 ou 1024)"
            )
        if not isinstance(self.exponent, int) or self.exponent < 0:
            raise ValueError(f"Exposant invalide : {self.exponent!r}")

    @property
    def bytes(self) -> int:
        """Nombre d'octets représentés par une unité."""
        return self.base ** self.exponent

    @property
    def family(self) -> str | None:
        """Famille de l'unité (None pour l'octet, commun aux deux)."""
        if self.exponent == 0:
            return None
        return DECIMAL if self.base == 1000 else BINARY

    def __str__(self) -> str:
        return self.label


class Units:
    """Ensemble fermé des unités disponibles."""

    BYTES = Unit("B", 1000, 0)

    KILOBYTES = Unit("KB", 1000, 1)
    MEGABYTES = Unit("MB", 1000, 2)
    GIGABYTES = Unit("GB", 1000, 3)
    TERABYTES = Unit("TB", 1000, 4)
    PETABYTES = Unit("PB", 1000, 5)
    EXABYTES = Unit("EB", 1000, 6)

    KIBIBYTES = Unit("KiB", 1024, 1)
    MEBIBYTES = Unit("MiB", 1024, 2)
    GIBIBYTES = Unit("GiB", 1024, 3)
    TEBIBYTES = Unit("TiB", 1024, 4)
    PEBIBYTES = Unit("PiB", 1024, 5)
    EXBIBYTES = Unit("EiB", 1024, 6)

    @classmethod
    def from_label(cls, label: str) -> Unit:
        """Retrouve une unité par son libellé exact ("KiB", "MB"...)."""
        unit = _BY_LABEL.get(label)
        if unit is None:
            known = ", ".join(u.label for u in ALL_UNITS)
            raise ValueError(f"Unité inconnue : {label!r} (attendu : {known})")
        return unit


# Échelles ordonnées, de l'exposant le plus petit au plus grand
DECIMAL_UNITS = (
    Units.BYTES,
    Units.KILOBYTES,
    Units.MEGABYTES,
    Units.GIGABYTES,
    Units.TERABYTES,
    Units.PETABYTES,
    Units.EXABYTES,
)
BINARY_UNITS = (
    Units.BYTES,
    Units.KIBIBYTES,
    Units.MEBIBYTES,
    Units.GIBIBYTES,
    Units.TEBIBYTES,
    Units.PEBIBYTES,
    Units.EXBIBYTES,
)
ALL_UNITS = DECIMAL_UNITS + BINARY_UNITS[1:]

_BY_LABEL = {u.label: u for u in ALL_UNITS}
# Ancien libellé minuscule du kilooctet
_BY_LABEL["kB"] = Units.KILOBYTES


def units_for(family: str) -> tuple[Unit, ...]:
    """Retourne l'échelle d'unités d'une famille."""
    if family == DECIMAL:
        return DECIMAL_UNITS
    if family == BINARY:
        return BINARY_UNITS
    raise ValueError(
        f"Famille inconnue : {family!r} (attendu : {', '.join(FAMILIES)})"
    )
