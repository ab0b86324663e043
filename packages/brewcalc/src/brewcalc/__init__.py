"""
brewcalc: brewing ingredient records and their BeerXML serialisation.

Provides record models, name-keyed record sets, and writers for the
BeerXML exchange format and for YAML.
"""

# Defined before the submodule imports: beerxml embeds it in its output.
__version__ = "0.1.0"

from brewcalc.enums import (
    BrewEnum,
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
from brewcalc.models import (
    Record,
    Fermentable,
    Hop,
    Yeast,
    Misc,
    Water,
    Recipe,
    Style,
    Mash,
    Equipment,
)
from brewcalc.recordset import RecordKind, RecordSet
from brewcalc.config import BrewcalcConfig, OutputFormat, get_config
from brewcalc.export import export
from brewcalc.exceptions import (
    BrewcalcError,
    UnknownVariantError,
    RecordKindNotImplementedError,
    RecordSetError,
    ConfigurationError,
    InvalidCharacterError,
)

__all__ = [
    # Enums
    "BrewEnum",
    "FermentableType",
    "HopUse",
    "HopType",
    "HopForm",
    "YeastType",
    "YeastForm",
    "YeastFlocculation",
    "MiscType",
    "MiscUse",
    "StyleType",
    # Records
    "Record",
    "Fermentable",
    "Hop",
    "Yeast",
    "Misc",
    "Water",
    "Recipe",
    "Style",
    "Mash",
    "Equipment",
    "RecordKind",
    "RecordSet",
    # Export
    "BrewcalcConfig",
    "OutputFormat",
    "get_config",
    "export",
    # Exceptions
    "BrewcalcError",
    "UnknownVariantError",
    "RecordKindNotImplementedError",
    "RecordSetError",
    "ConfigurationError",
    "InvalidCharacterError",
]
