"""
Export record sets to files using the configured format and directory.
"""

import logging
from os import PathLike
from pathlib import Path

from brewcalc import beerxml, yaml_export
from brewcalc.config import BrewcalcConfig, OutputFormat, get_config
from brewcalc.recordset import RecordSet

logger = logging.getLogger(__name__)

SUFFIX_FORMATS: dict[str, OutputFormat] = {
    ".xml": OutputFormat.XML,
    ".yaml": OutputFormat.YAML,
    ".yml": OutputFormat.YAML,
}

FILE_WRITERS = {
    OutputFormat.XML: beerxml.write_file,
    OutputFormat.YAML: yaml_export.write_file,
}


def export(
    records: RecordSet,
    filename: str | PathLike,
    config: BrewcalcConfig | None = None,
) -> Path:
    """
    Write a record set to a file.

    The format comes from the filename suffix when it is one of
    ``.xml``, ``.yaml`` or ``.yml``, and from the configuration
    otherwise. Relative filenames are resolved under the configured
    output directory.

    Args:
        records: The records to write
        filename: Destination file
        config: Configuration to use (default: from environment)

    Returns:
        Path of the written file
    """
    if config is None:
        config = get_config()

    path = Path(filename).expanduser()
    if not path.is_absolute():
        path = config.output_dir / path

    fmt = SUFFIX_FORMATS.get(path.suffix.lower(), config.output_format)
    logger.info("Exporting %r to %s as %s", records, path, fmt.value)
    FILE_WRITERS[fmt](path, records)
    return path
