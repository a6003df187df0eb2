from __future__ import annotations

import re
from typing import Iterable, List

# ASCII word semantics: CJK characters count as boundaries around the number.
_PHONE_RE = re.compile(r"\b1\d{10}\b", re.ASCII)
_ID_NUMBER_RE = re.compile(r"[0-9]{17}[0-9Xx]")
_NAME_DELIMITER_RE = re.compile(r"[0-9A-Za-z\s（）()]+")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 4


def guess_phone_number(text: str) -> str:
    """Return the first standalone Chinese mobile number, or ``""``."""
    match = _PHONE_RE.search(text or "")
    return match.group(0) if match else ""


def guess_id_number(text: str) -> str:
    """Return the first 18-character resident ID number, lowercased, or ``""``."""
    match = _ID_NUMBER_RE.search(text or "")
    return match.group(0).lower() if match else ""


def name_candidates(text: str) -> List[str]:
    """Split text into name candidates, ordered from the ends towards the middle.

    Tokens farther from the middle index come first; equally distant tokens
    keep their original order, so five tokens are visited as 0, 4, 1, 3, 2.
    """
    words = [word for word in _NAME_DELIMITER_RE.split(text or "") if word]
    middle = (len(words) - 1) / 2
    ordered = sorted(enumerate(words), key=lambda item: -abs(item[0] - middle))
    return [word for _, word in ordered]


def guess_name(text: str, lastnames: Iterable[str]) -> str:
    surnames = tuple(name for name in lastnames if name)
    if not surnames:
        return ""
    for word in name_candidates(text):
        if NAME_MIN_LENGTH <= len(word) <= NAME_MAX_LENGTH and word.startswith(surnames):
            return word
    return ""
