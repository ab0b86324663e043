"""Configuration for brewcalc file export."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from brewcalc.exceptions import ConfigurationError


class OutputFormat(str, Enum):
    """Document format written by export()."""

    XML = "xml"
    YAML = "yaml"


@dataclass
class BrewcalcConfig:
    """Configuration for brewcalc exports."""

    output_dir: Path
    output_format: OutputFormat = OutputFormat.XML

    def __post_init__(self):
        # Expand user paths
        self.output_dir = Path(self.output_dir).expanduser()
        self.output_format = OutputFormat(self.output_format)


def get_config() -> BrewcalcConfig:
    """
    Get brewcalc configuration from environment.

    Environment variables:
        BREWCALC_OUTPUT_DIR: Directory for relative export paths
            (default: current directory)
        BREWCALC_FORMAT: ``xml`` (default) or ``yaml``

    Returns:
        BrewcalcConfig instance

    Raises:
        ConfigurationError: If BREWCALC_FORMAT is not a known format
    """
    output_dir = os.environ.get("BREWCALC_OUTPUT_DIR") or "."
    fmt = (os.environ.get("BREWCALC_FORMAT") or OutputFormat.XML.value).strip().lower()

    try:
        output_format = OutputFormat(fmt)
    except ValueError as e:
        valid = ", ".join(f.value for f in OutputFormat)
        raise ConfigurationError(
            f"BREWCALC_FORMAT must be one of: {valid} (got {fmt!r})"
        ) from e

    return BrewcalcConfig(output_dir=Path(output_dir), output_format=output_format)
