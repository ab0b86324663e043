"""
BeerXML writer for record sets.

Each record kind has a writer emitting its fields in the order BeerXML
consumers expect. Recipe, style, mash and equipment records have no
writer yet and raise RecordKindNotImplementedError before anything is
written.
"""

import io
import logging
from collections.abc import Callable
from os import PathLike
from typing import TextIO

from brewcalc import __version__
from brewcalc.exceptions import RecordKindNotImplementedError
from brewcalc.models import (
    Equipment,
    Fermentable,
    Hop,
    Mash,
    Misc,
    Recipe,
    Record,
    Style,
    Water,
    Yeast,
)
from brewcalc.primitives import write_block, write_bool, write_map, write_opt, write_tag
from brewcalc.recordset import RecordKind, RecordSet

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
GENERATOR_COMMENT = f"<!-- written by brewcalc {__version__}: http://brewcalc.org/ -->\n"

RecordWriter = Callable[[TextIO, Record, int], None]


def write_fermentable(sink: TextIO, f: Fermentable, depth: int) -> None:
    def body(sink: TextIO, depth: int) -> None:
        write_tag(sink, depth, "NAME", f.name)
        write_tag(sink, depth, "VERSION", f.version)
        write_tag(sink, depth, "TYPE", f.type)
        write_tag(sink, depth, "AMOUNT", f.amount)
        write_tag(sink, depth, "YIELD", f.yield_)
        write_tag(sink, depth, "COLOR", f.color)
        write_bool(sink, depth, "ADD_AFTER_BOIL", f.add_after_boil)
        write_opt(sink, depth, "ORIGIN", f.origin)
        write_opt(sink, depth, "SUPPLIER", f.supplier)
        write_opt(sink, depth, "NOTES", f.notes)
        write_opt(sink, depth, "COARSE_FINE_DIFF", f.coarse_fine_diff)
        write_opt(sink, depth, "MOISTURE", f.moisture)
        write_opt(sink, depth, "DIASTATIC_POWER", f.diastatic_power)
        write_opt(sink, depth, "PROTEIN", f.protein)
        write_opt(sink, depth, "MAX_IN_BATCH", f.max_in_batch)
        write_bool(sink, depth, "RECOMMEND_MASH", f.recommend_mash)
        write_opt(sink, depth, "IBU_GAL_PER_LB", f.ibu_gal_per_lb)
        write_opt(sink, depth, "DISPLAY_AMOUNT", f.display_amount)
        write_opt(sink, depth, "INVENTORY", f.inventory)
        write_opt(sink, depth, "POTENTIAL", f.potential)
        write_opt(sink, depth, "DISPLAY_COLOR", f.display_color)

    write_block(sink, depth, "FERMENTABLE", body)


def write_hop(sink: TextIO, h: Hop, depth: int) -> None:
    def body(sink: TextIO, depth: int) -> None:
        write_tag(sink, depth, "NAME", h.name)
        write_tag(sink, depth, "VERSION", h.version)
        write_tag(sink, depth, "ALPHA", h.alpha)
        write_tag(sink, depth, "AMOUNT", h.amount)
        write_tag(sink, depth, "USE", h.use)
        write_tag(sink, depth, "TIME", h.time)
        write_opt(sink, depth, "NOTES", h.notes)
        write_opt(sink, depth, "TYPE", h.type.display if h.type is not None else None)
        write_opt(sink, depth, "FORM", h.form.display if h.form is not None else None)
        write_opt(sink, depth, "BETA", h.beta)
        write_opt(sink, depth, "HSI", h.hsi)
        write_opt(sink, depth, "ORIGIN", h.origin)
        write_opt(sink, depth, "SUBSTITUTES", h.substitutes)
        write_opt(sink, depth, "HUMULENE", h.humulene)
        write_opt(sink, depth, "CARYOPHYLLENE", h.caryophyllene)
        write_opt(sink, depth, "COHUMULONE", h.cohumulone)
        write_opt(sink, depth, "MYRCENE", h.myrcene)

    write_block(sink, depth, "HOP", body)


def write_yeast(sink: TextIO, y: Yeast, depth: int) -> None:
    def body(sink: TextIO, depth: int) -> None:
        write_tag(sink, depth, "NAME", y.name)
        write_tag(sink, depth, "VERSION", y.version)
        write_tag(sink, depth, "TYPE", y.type)
        write_tag(sink, depth, "FORM", y.form)
        write_tag(sink, depth, "AMOUNT", y.amount)
        write_bool(sink, depth, "AMOUNT_IS_WEIGHT", y.amount_is_weight)
        write_opt(sink, depth, "LABORATORY", y.laboratory)
        write_opt(sink, depth, "PRODUCT_ID", y.product_id)
        write_opt(sink, depth, "MIN_TEMPERATURE", y.min_temperature)
        write_opt(sink, depth, "MAX_TEMPERATURE", y.max_temperature)
        write_opt(
            sink,
            depth,
            "FLOCCULATION",
            y.flocculation.display if y.flocculation is not None else None,
        )
        write_opt(sink, depth, "ATTENUATION", y.attenuation)
        write_opt(sink, depth, "NOTES", y.notes)
        write_opt(sink, depth, "BEST_FOR", y.best_for)
        write_opt(sink, depth, "TIMES_CULTURED", y.times_cultured)
        write_opt(sink, depth, "MAX_REUSE", y.max_reuse)
        write_bool(sink, depth, "ADD_TO_SECONDARY", y.add_to_secondary)
        write_opt(sink, depth, "DISPLAY_AMOUNT", y.display_amount)
        write_opt(sink, depth, "DISP_MIN_TEMP", y.display_min_temp)
        write_opt(sink, depth, "DISP_MAX_TEMP", y.display_max_temp)
        write_opt(sink, depth, "INVENTORY", y.inventory)
        write_opt(sink, depth, "CULTURE_DATE", y.culture_date)

    write_block(sink, depth, "YEAST", body)


def write_misc(sink: TextIO, m: Misc, depth: int) -> None:
    def body(sink: TextIO, depth: int) -> None:
        write_tag(sink, depth, "NAME", m.name)
        write_tag(sink, depth, "VERSION", m.version)
        write_tag(sink, depth, "TYPE", m.type)
        write_tag(sink, depth, "USE", m.use)
        write_tag(sink, depth, "TIME", m.time)
        write_tag(sink, depth, "AMOUNT", m.amount)
        write_bool(sink, depth, "AMOUNT_IS_WEIGHT", m.amount_is_weight)
        write_opt(sink, depth, "USE_FOR", m.use_for)
        write_opt(sink, depth, "NOTES", m.notes)
        write_opt(sink, depth, "DISPLAY_TIME", m.display_time)
        write_opt(sink, depth, "DISPLAY_AMOUNT", m.display_amount)
        write_opt(sink, depth, "INVENTORY", m.inventory)

    write_block(sink, depth, "MISC", body)


def write_water(sink: TextIO, w: Water, depth: int) -> None:
    def body(sink: TextIO, depth: int) -> None:
        write_tag(sink, depth, "NAME", w.name)
        write_tag(sink, depth, "VERSION", w.version)
        write_tag(sink, depth, "AMOUNT", w.amount)
        write_tag(sink, depth, "CALCIUM", w.calcium)
        write_tag(sink, depth, "BICARBONATE", w.bicarbonate)
        write_tag(sink, depth, "SULFATE", w.sulfate)
        write_tag(sink, depth, "CHLORIDE", w.chloride)
        write_tag(sink, depth, "SODIUM", w.sodium)
        write_tag(sink, depth, "MAGNESIUM", w.magnesium)
        write_opt(sink, depth, "PH", w.ph)
        write_opt(sink, depth, "NOTES", w.notes)

    write_block(sink, depth, "WATER", body)


def write_recipe(sink: TextIO, r: Recipe, depth: int) -> None:
    raise RecordKindNotImplementedError(RecordKind.RECIPE.value)


def write_style(sink: TextIO, s: Style, depth: int) -> None:
    raise RecordKindNotImplementedError(RecordKind.STYLE.value)


def write_mash(sink: TextIO, m: Mash, depth: int) -> None:
    raise RecordKindNotImplementedError(RecordKind.MASH.value)


def write_equipment(sink: TextIO, e: Equipment, depth: int) -> None:
    raise RecordKindNotImplementedError(RecordKind.EQUIPMENT.value)


# Every RecordKind must appear here.
WRITERS: dict[RecordKind, RecordWriter] = {
    RecordKind.FERMENTABLE: write_fermentable,
    RecordKind.HOP: write_hop,
    RecordKind.YEAST: write_yeast,
    RecordKind.MISC: write_misc,
    RecordKind.WATER: write_water,
    RecordKind.RECIPE: write_recipe,
    RecordKind.STYLE: write_style,
    RecordKind.MASH: write_mash,
    RecordKind.EQUIPMENT: write_equipment,
}

UNIMPLEMENTED_KINDS = frozenset(
    {RecordKind.RECIPE, RecordKind.STYLE, RecordKind.MASH, RecordKind.EQUIPMENT}
)


def writer_for(kind: RecordKind) -> RecordWriter:
    """
    Get the record writer for a kind.

    Raises:
        RecordKindNotImplementedError: If the kind has no writer yet
    """
    if kind in UNIMPLEMENTED_KINDS:
        raise RecordKindNotImplementedError(kind.value)
    return WRITERS[kind]


def _check_writable(records: RecordSet) -> None:
    if records.kind is not None:
        writer_for(records.kind)


def write(sink: TextIO, records: RecordSet) -> None:
    """
    Write a record set as a BeerXML document.

    Args:
        sink: Open text stream to write to
        records: The records to write

    Raises:
        RecordKindNotImplementedError: If the set holds recipe, style,
            mash or equipment records. Nothing is written in that case.
        OSError: If writing to the sink fails; output is then partial
    """
    _check_writable(records)

    sink.write(XML_DECLARATION)
    sink.write(GENERATOR_COMMENT)
    if records.kind is None:
        return
    logger.debug("Writing %d %s records as BeerXML", len(records), records.kind.value)
    write_map(sink, 0, records.kind.container_tag, records, writer_for(records.kind))


def write_file(filename: str | PathLike, records: RecordSet) -> None:
    """
    Write a record set to a file, creating or truncating it.

    An unimplemented record kind is rejected before the file is opened.
    A failed write leaves whatever was written so far in place.
    """
    _check_writable(records)
    logger.debug("Writing BeerXML to %s", filename)
    with open(filename, "w", encoding="utf-8", newline="\n") as f:
        write(f, records)


def to_string(records: RecordSet) -> str:
    """Render a record set as a BeerXML document string."""
    buf = io.StringIO()
    write(buf, records)
    return buf.getvalue()
