"""
Enumerations used by brewcalc records.

Each member's value is its canonical BeerXML token, so the value is
used both for serialisation and for display. Decoding is an exact,
case-sensitive match against those tokens.
"""

from enum import Enum

from brewcalc.exceptions import UnknownVariantError


class BrewEnum(str, Enum):
    """
    Base class for enums with a fixed display token per member.

    The first declared member is the default variant.
    """

    def __str__(self) -> str:
        return self.value

    @property
    def display(self) -> str:
        """Canonical display string of this member."""
        return self.value

    @classmethod
    def from_display(cls, text: str) -> "BrewEnum":
        """
        Decode a canonical display string.

        Args:
            text: The token to decode, e.g. ``"Dry Extract"``

        Returns:
            The matching member

        Raises:
            UnknownVariantError: If no member has this token
        """
        for member in cls:
            if member.value == text:
                return member
        raise UnknownVariantError(cls.__name__, text)

    @classmethod
    def default(cls) -> "BrewEnum":
        """Get the default variant."""
        return next(iter(cls))

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        """All canonical display strings, in declaration order."""
        return tuple(member.value for member in cls)


class FermentableType(BrewEnum):
    """Type of fermentable."""

    GRAIN = "Grain"
    SUGAR = "Sugar"
    EXTRACT = "Extract"
    DRY_EXTRACT = "Dry Extract"
    ADJUNCT = "Adjunct"


class HopUse(BrewEnum):
    """How a hop is used in the brewing process."""

    BOIL = "Boil"
    DRY_HOP = "Dry Hop"
    MASH = "Mash"
    FIRST_WORT = "First Wort"
    AROMA = "Aroma"


class HopType(BrewEnum):
    """Hop type classification."""

    BITTERING = "Bittering"
    AROMA = "Aroma"
    BOTH = "Both"


class HopForm(BrewEnum):
    """Hop form/packaging."""

    PELLET = "Pellet"
    PLUG = "Plug"
    LEAF = "Leaf"


class YeastType(BrewEnum):
    """Yeast type classification."""

    ALE = "Ale"
    LAGER = "Lager"
    WHEAT = "Wheat"
    WINE = "Wine"
    CHAMPAGNE = "Champagne"


class YeastForm(BrewEnum):
    """Yeast packaging form."""

    LIQUID = "Liquid"
    DRY = "Dry"
    SLANT = "Slant"
    CULTURE = "Culture"


class YeastFlocculation(BrewEnum):
    """Yeast flocculation level."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class MiscType(BrewEnum):
    """Miscellaneous ingredient type."""

    SPICE = "Spice"
    FINING = "Fining"
    WATER_AGENT = "Water Agent"
    HERB = "Herb"
    FLAVOR = "Flavor"
    OTHER = "Other"


class MiscUse(BrewEnum):
    """When a misc ingredient is used."""

    BOIL = "Boil"
    MASH = "Mash"
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    BOTTLING = "Bottling"


class StyleType(BrewEnum):
    """Beer style type."""

    LAGER = "Lager"
    ALE = "Ale"
    MEAD = "Mead"
    WHEAT = "Wheat"
    MIXED = "Mixed"
    CIDER = "Cider"


ALL_ENUMS: tuple[type[BrewEnum], ...] = (
    FermentableType,
    HopUse,
    HopType,
    HopForm,
    YeastType,
    YeastForm,
    YeastFlocculation,
    MiscType,
    MiscUse,
    StyleType,
)
