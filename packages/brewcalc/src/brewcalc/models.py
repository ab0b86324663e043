"""
Record models for brewing ingredients and documents.

All models use Pydantic v2 for validation and are immutable once built.
Amounts follow BeerXML units: kilograms or litres, minutes, Celsius.

Optional fields default to ``None``; an absent value is distinct from
zero or an empty string and is left out of the written document.
Comments such as "Grain/Adjunct only" are documentation: the value is
kept and written whatever the record's type.
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from brewcalc.enums import (
    FermentableType,
    HopForm,
    HopType,
    HopUse,
    MiscType,
    MiscUse,
    StyleType,
    YeastFlocculation,
    YeastForm,
    YeastType,
)
from brewcalc.exceptions import RecordSetError


class RecordKind(str, Enum):
    """Kind of record. Each record class names its kind in ``kind``."""

    FERMENTABLE = "fermentable"
    HOP = "hop"
    YEAST = "yeast"
    MISC = "misc"
    WATER = "water"
    RECIPE = "recipe"
    STYLE = "style"
    MASH = "mash"
    EQUIPMENT = "equipment"

    @property
    def model(self) -> type["Record"]:
        """Record class for this kind."""
        return _MODELS[self]

    @property
    def record_tag(self) -> str:
        """BeerXML element name of a single record, e.g. ``HOP``."""
        return self.value.upper()

    @property
    def container_tag(self) -> str:
        """BeerXML element name wrapping all records, e.g. ``HOPS``."""
        return self.value.upper() + "S"

    @classmethod
    def of(cls, record: "Record") -> "RecordKind":
        """Get the kind of a record instance."""
        kind = getattr(type(record), "kind", None)
        if not isinstance(kind, RecordKind):
            raise RecordSetError(f"Not a brewcalc record: {type(record).__name__}")
        return kind


class Record(BaseModel):
    """Base model for all records. The name is the collection key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ClassVar[RecordKind]

    name: str = Field(..., description="Record name, unique within a set")
    version: int = Field(default=1, description="Record format version (normally 1)")


# === Ingredients ===


class Fermentable(Record):
    """A grain, extract, sugar or adjunct."""

    kind: ClassVar[RecordKind] = RecordKind.FERMENTABLE

    type: FermentableType = Field(default=FermentableType.GRAIN)
    amount: float = Field(default=0.0, ge=0, description="Amount in kg")
    yield_: float = Field(
        default=0.0,
        ge=0,
        alias="yield",
        description="Percent dry yield (fine grain), or raw yield by weight",
    )
    color: float = Field(
        default=0.0,
        ge=0,
        description="Colour in Lovibond (SRM for liquid extracts)",
    )
    add_after_boil: bool = Field(
        default=False,
        description="Normally added after the boil",
    )

    origin: str | None = None
    supplier: str | None = None
    notes: str | None = None

    # Grain/Adjunct only
    coarse_fine_diff: float | None = Field(
        default=None,
        description="Percent difference between coarse and fine grain yield",
    )
    moisture: float | None = Field(default=None, description="Percent moisture")
    diastatic_power: float | None = Field(
        default=None,
        description="Diastatic power in Lintner",
    )
    protein: float | None = Field(default=None, description="Percent protein")

    max_in_batch: float | None = Field(
        default=None,
        description="Recommended maximum percentage of the grist by weight",
    )
    recommend_mash: bool = Field(
        default=False,
        description="Recommended to be mashed rather than steeped",
    )
    # Extract only
    ibu_gal_per_lb: float | None = Field(
        default=None,
        description="IBUs per pound of hopped extract in a gallon of water",
    )

    # BeerSmith extensions
    display_amount: str | None = None
    inventory: str | None = None
    potential: float | None = Field(default=None, description="Extract potential")
    display_color: str | None = None


class Hop(Record):
    """A hop addition or hop variety."""

    kind: ClassVar[RecordKind] = RecordKind.HOP

    alpha: float = Field(default=0.0, ge=0, le=100, description="Alpha acid %")
    amount: float = Field(default=0.0, ge=0, description="Amount in kg")
    use: HopUse = Field(default=HopUse.BOIL)
    time: float = Field(default=0.0, ge=0, description="Contact time in minutes")
    notes: str | None = None
    type: HopType | None = None
    form: HopForm | None = None
    beta: float | None = Field(default=None, ge=0, le=100, description="Beta acid %")
    hsi: float | None = Field(default=None, description="Hop Stability Index")
    origin: str | None = None
    substitutes: str | None = None
    humulene: float | None = None
    caryophyllene: float | None = None
    cohumulone: float | None = None
    myrcene: float | None = None


class Yeast(Record):
    """A yeast strain or culture."""

    kind: ClassVar[RecordKind] = RecordKind.YEAST

    type: YeastType = Field(default=YeastType.ALE)
    form: YeastForm = Field(default=YeastForm.LIQUID)
    amount: float = Field(default=0.0, ge=0, description="Amount in litres or kg")
    amount_is_weight: bool = Field(default=False, description="Amount is in kg")
    laboratory: str | None = None
    product_id: str | None = None
    min_temperature: float | None = Field(default=None, description="Celsius")
    max_temperature: float | None = Field(default=None, description="Celsius")
    flocculation: YeastFlocculation | None = None
    attenuation: float | None = Field(default=None, description="Attenuation %")
    notes: str | None = None
    best_for: str | None = None
    times_cultured: int | None = Field(default=None, ge=0)
    max_reuse: int | None = Field(default=None, ge=0)
    add_to_secondary: bool = Field(
        default=False,
        description="Added for a secondary (or later) fermentation",
    )
    display_amount: str | None = None
    display_min_temp: str | None = None
    display_max_temp: str | None = None
    inventory: str | None = None
    culture_date: str | None = None


class Misc(Record):
    """A miscellaneous additive: spices, finings, water agents and so on."""

    kind: ClassVar[RecordKind] = RecordKind.MISC

    type: MiscType = Field(default=MiscType.SPICE)
    use: MiscUse = Field(default=MiscUse.BOIL)
    time: float = Field(default=0.0, ge=0, description="Minutes")
    amount: float = Field(default=0.0, ge=0, description="Amount in litres or kg")
    amount_is_weight: bool = Field(default=False, description="Amount is in kg")
    use_for: str | None = None
    notes: str | None = None
    display_time: str | None = None
    display_amount: str | None = None
    inventory: str | None = None


class Water(Record):
    """A water profile. Mineral levels are in ppm."""

    kind: ClassVar[RecordKind] = RecordKind.WATER

    amount: float = Field(default=0.0, ge=0, description="Volume in litres")
    calcium: float = Field(default=0.0, ge=0)
    bicarbonate: float = Field(default=0.0, ge=0)
    sulfate: float = Field(default=0.0, ge=0)
    chloride: float = Field(default=0.0, ge=0)
    sodium: float = Field(default=0.0, ge=0)
    magnesium: float = Field(default=0.0, ge=0)
    ph: float | None = Field(default=None, ge=0, le=14)
    notes: str | None = None


# === Documents ===
# These have no BeerXML writer yet.


class Style(Record):
    """Beer style guideline."""

    kind: ClassVar[RecordKind] = RecordKind.STYLE

    category: str = ""
    category_number: str = ""
    style_letter: str = ""
    style_guide: str = ""
    type: StyleType = Field(default=StyleType.LAGER)
    og_min: float = 1.0
    og_max: float = 1.0
    fg_min: float = 1.0
    fg_max: float = 1.0
    ibu_min: float = Field(default=0.0, ge=0)
    ibu_max: float = Field(default=0.0, ge=0)
    color_min: float = Field(default=0.0, ge=0)
    color_max: float = Field(default=0.0, ge=0)
    notes: str | None = None


class Mash(Record):
    """Mash profile."""

    kind: ClassVar[RecordKind] = RecordKind.MASH

    grain_temp: float = Field(default=20.0, description="Celsius")
    tun_temp: float | None = None
    sparge_temp: float | None = None
    ph: float | None = Field(default=None, ge=0, le=14)
    notes: str | None = None


class Equipment(Record):
    """Equipment profile."""

    kind: ClassVar[RecordKind] = RecordKind.EQUIPMENT

    batch_size: float = Field(default=0.0, ge=0, description="Litres")
    boil_size: float = Field(default=0.0, ge=0, description="Litres")
    boil_time: float | None = Field(default=None, ge=0, description="Minutes")
    tun_volume: float | None = Field(default=None, ge=0)
    notes: str | None = None


class Recipe(Record):
    """Recipe header. Ingredient lists are not modelled here."""

    kind: ClassVar[RecordKind] = RecordKind.RECIPE

    type: str = Field(default="All Grain", description="Extract, Partial Mash or All Grain")
    brewer: str | None = None
    style: str | None = None
    batch_size: float = Field(default=0.0, ge=0, description="Litres")
    boil_size: float = Field(default=0.0, ge=0, description="Litres")
    boil_time: float = Field(default=60.0, ge=0, description="Minutes")
    efficiency: float | None = Field(default=None, ge=0, le=100)
    notes: str | None = None


_MODELS: dict[RecordKind, type[Record]] = {
    model.kind: model
    for model in (Fermentable, Hop, Yeast, Misc, Water, Recipe, Style, Mash, Equipment)
}
