from __future__ import annotations

from typing import Iterable

from packages.address_parser.reference_data import DEFAULT_PUNCTUATION


def remove_ignore_words(text: str, ignore_words: Iterable[str]) -> str:
    # One left-to-right pass; at each position the longest ignore word wins.
    words = sorted({word for word in ignore_words if word}, key=len, reverse=True)
    if not words or not text:
        return text
    first_chars = {word[0] for word in words}
    kept: list[str] = []
    index = 0
    while index < len(text):
        if text[index] in first_chars:
            hit = next((word for word in words if text.startswith(word, index)), "")
            if hit:
                index += len(hit)
                continue
        kept.append(text[index])
        index += 1
    return "".join(kept)


def remove_punctuation(text: str, punctuation: str = DEFAULT_PUNCTUATION) -> str:
    if not punctuation:
        return text
    return text.translate({ord(char): None for char in punctuation})


def trim_ignores(text: str, ignore_words: Iterable[str], punctuation: str = DEFAULT_PUNCTUATION) -> str:
    return remove_punctuation(remove_ignore_words(str(text or ""), ignore_words), punctuation)
