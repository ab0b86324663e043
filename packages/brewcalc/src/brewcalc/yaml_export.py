"""
YAML export of record sets.

Only fermentable sets are written; the other kinds and the empty set
produce no output. Records are written as a mapping from name to
fields, with absent optional fields left out.
"""

import io
import logging
from os import PathLike
from typing import Any, TextIO

import yaml

from brewcalc.models import Record
from brewcalc.recordset import RecordKind, RecordSet

logger = logging.getLogger(__name__)

SUPPORTED_KINDS = frozenset({RecordKind.FERMENTABLE})


def record_to_dict(record: Record) -> dict[str, Any]:
    """Plain field mapping for a record, without its name."""
    return record.model_dump(
        mode="json",
        by_alias=True,
        exclude={"name"},
        exclude_none=True,
    )


def write(sink: TextIO, records: RecordSet) -> None:
    """
    Write a record set as YAML.

    Raises:
        OSError: If writing to the sink fails
    """
    if records.kind not in SUPPORTED_KINDS:
        logger.debug("No YAML output for record set %r", records)
        return
    data = {record.name: record_to_dict(record) for record in records}
    yaml.safe_dump(
        data,
        sink,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def write_file(filename: str | PathLike, records: RecordSet) -> None:
    """Write a record set to a YAML file, creating or truncating it."""
    logger.debug("Writing YAML to %s", filename)
    with open(filename, "w", encoding="utf-8") as f:
        write(f, records)


def to_string(records: RecordSet) -> str:
    buf = io.StringIO()
    write(buf, records)
    return buf.getvalue()
