from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple

from packages.address_parser.reference_data import ReferenceData

MIN_STEM_LENGTH = 2


def _is_postfix_chain(tail: str, postfixes: Sequence[str]) -> bool:
    if not tail:
        return True
    return any(tail.startswith(postfix) and _is_postfix_chain(tail[len(postfix) :], postfixes) for postfix in postfixes)


def trim_postfix(name: str, postfixes: Iterable[str]) -> str:
    """Strip trailing administrative postfixes, keeping a stem of at least two characters.

    The shortest stem whose tail is made up entirely of postfix tokens wins,
    e.g. "广西壮族自治区" -> "广西", "浦东新区" -> "浦东", "北京市" -> "北京".
    """
    tokens = tuple(postfix for postfix in postfixes if postfix)
    if len(name) < MIN_STEM_LENGTH or not tokens:
        return name
    for stem_length in range(MIN_STEM_LENGTH, len(name)):
        if _is_postfix_chain(name[stem_length:], tokens):
            return name[:stem_length]
    return name


def get_variants(name: str, reference: ReferenceData) -> Tuple[str, ...]:
    """All spellings tried for a gazetteer name, longest first."""
    base = [name, trim_postfix(name, reference.postfixes)]
    variants = list(base)
    for item in base:
        variants.extend(reference.synonyms(item))
    unique = dict.fromkeys(item for item in variants if item)
    return tuple(sorted(unique, key=len, reverse=True))


def build_variant_index(reference: ReferenceData) -> Dict[str, Tuple[str, ...]]:
    index: Dict[str, Tuple[str, ...]] = {}
    for table in reference.gazetteer.values():
        for name in table.values():
            if name not in index:
                index[name] = get_variants(name, reference)
    return index
