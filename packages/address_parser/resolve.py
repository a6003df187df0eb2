from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Tuple

from packages.address_parser.reference_data import ReferenceData
from packages.address_parser.types import AreaLevel, AreaMatch, gazetteer_key, zip_prefix_width
from packages.address_parser.variants import get_variants

logger = logging.getLogger(__name__)

ZIP_LENGTH = 6


def area_options(level: AreaLevel, reference: ReferenceData, zip_prefix: str = "") -> List[Tuple[str, str]]:
    return [(code, name) for code, name in reference.areas(gazetteer_key(level)).items() if code.startswith(zip_prefix)]


def resolve_area(
    level: AreaLevel,
    text: str,
    reference: ReferenceData,
    zip_prefix: str = "",
    variant_index: Optional[Mapping[str, Tuple[str, ...]]] = None,
) -> AreaMatch:
    """Match the head of ``text`` against one gazetteer level.

    Candidates are restricted to codes starting with ``zip_prefix`` and tried in
    code order; the first variant that is a prefix of the text wins. Only a
    prefix at position 0 counts, the rest of the text is never searched.
    """
    text = (text or "").strip()
    for code, name in area_options(level, reference, zip_prefix):
        variants = variant_index.get(name) if variant_index is not None else None
        for variant in variants or get_variants(name, reference):
            if text.startswith(variant):
                logger.debug("resolved %s %s (%s) via '%s'", level.value, name, code, variant)
                return AreaMatch(
                    zip=code,
                    name=name,
                    rest=" " + text[len(variant) :],
                    zip_prefix=code[: zip_prefix_width(level)],
                )
    return AreaMatch(zip="", name="", rest=text, zip_prefix=zip_prefix)


def parent_zip(level: AreaLevel, child_zip: str) -> str:
    return child_zip[: zip_prefix_width(level)].ljust(ZIP_LENGTH, "0")


def backfill_parent(level: AreaLevel, child_zip: str, reference: ReferenceData) -> AreaMatch:
    """Infer ``level`` from a finer code, e.g. city 440300 from region 440306."""
    code = parent_zip(level, child_zip)
    name = reference.areas(gazetteer_key(level)).get(code, "")
    if name:
        logger.debug("backfilled %s %s (%s) from %s", level.value, name, code, child_zip)
    return AreaMatch(zip=code, name=name, rest="", zip_prefix=code[: zip_prefix_width(level)])
