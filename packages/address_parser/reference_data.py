from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from packages.address_parser.errors import ReferenceDataError

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "ADDRESS_PARSER_DATA_DIR"

DEFAULT_PUNCTUATION = ",.，。:：;；\"'‘’“”"

_GAZETTEER_KEYS = ("province_list", "city_list", "county_list")


def _default_data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


def resolve_data_dir(data_dir: Optional[str] = None) -> Path:
    if data_dir:
        return Path(data_dir)
    env_dir = str(os.getenv(DATA_DIR_ENV) or "").strip()
    if env_dir:
        return Path(env_dir)
    return _default_data_dir()


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ReferenceDataError(f"reference data file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ReferenceDataError(f"cannot read reference data file {path}: {exc}") from exc


def _string_list(payload: Any, source: str) -> Tuple[str, ...]:
    if not isinstance(payload, list) or not all(isinstance(item, str) for item in payload):
        raise ReferenceDataError(f"{source} must be a list of strings")
    return tuple(item for item in payload if item)


def _build_synonym_index(groups: Tuple[Tuple[str, ...], ...]) -> Dict[str, Tuple[str, ...]]:
    index: Dict[str, Tuple[str, ...]] = {}
    for group in groups:
        for word in group:
            index[word] = group
    return index


@dataclass(frozen=True)
class ReferenceData:
    """Static lookup tables consumed by the parser.

    Gazetteer tables map 6-digit area codes to canonical names and are kept in
    ascending code order. The synonym index is derived once from the groups.
    """

    gazetteer: Mapping[str, Mapping[str, str]]
    synonym_groups: Tuple[Tuple[str, ...], ...] = ()
    postfixes: Tuple[str, ...] = ()
    ignore_words: Tuple[str, ...] = ()
    punctuation: str = DEFAULT_PUNCTUATION
    lastnames: Tuple[str, ...] = ()
    _synonym_index: Mapping[str, Tuple[str, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered = {
            key: MappingProxyType(dict(sorted(dict(self.gazetteer.get(key) or {}).items())))
            for key in _GAZETTEER_KEYS
        }
        object.__setattr__(self, "gazetteer", MappingProxyType(ordered))
        object.__setattr__(self, "_synonym_index", MappingProxyType(_build_synonym_index(self.synonym_groups)))

    def areas(self, key: str) -> Mapping[str, str]:
        return self.gazetteer.get(key, MappingProxyType({}))

    def synonyms(self, name: str) -> Tuple[str, ...]:
        return self._synonym_index.get(name, ())


def _load_gazetteer(path: Path) -> Dict[str, Dict[str, str]]:
    payload = _read_json(path)
    if not isinstance(payload, dict):
        raise ReferenceDataError(f"{path.name} must be an object")
    gazetteer: Dict[str, Dict[str, str]] = {}
    for key in _GAZETTEER_KEYS:
        table = payload.get(key)
        if not isinstance(table, dict):
            raise ReferenceDataError(f"{path.name} is missing table '{key}'")
        gazetteer[key] = {str(code): str(name) for code, name in table.items() if name}
    return gazetteer


def _load_ignores(path: Path) -> Tuple[Tuple[str, ...], str]:
    payload = _read_json(path)
    if not isinstance(payload, dict):
        raise ReferenceDataError(f"{path.name} must be an object")
    words = _string_list(payload.get("words") or [], f"{path.name}:words")
    punctuation = payload.get("punctuation", DEFAULT_PUNCTUATION)
    if not isinstance(punctuation, str):
        raise ReferenceDataError(f"{path.name}:punctuation must be a string")
    return words, punctuation


def _load_synonyms(path: Path) -> Tuple[Tuple[str, ...], ...]:
    payload = _read_json(path)
    if not isinstance(payload, list):
        raise ReferenceDataError(f"{path.name} must be a list of groups")
    return tuple(_string_list(group, path.name) for group in payload)


@lru_cache(maxsize=8)
def _load_from_dir(data_dir: str) -> ReferenceData:
    root = Path(data_dir)
    ignore_words, punctuation = _load_ignores(root / "ignores.json")
    reference = ReferenceData(
        gazetteer=_load_gazetteer(root / "areas.json"),
        synonym_groups=_load_synonyms(root / "synonyms.json"),
        postfixes=_string_list(_read_json(root / "postfixes.json"), "postfixes.json"),
        ignore_words=ignore_words,
        punctuation=punctuation,
        lastnames=_string_list(_read_json(root / "lastnames.json"), "lastnames.json"),
    )
    logger.info(
        "loaded reference data from %s: %d provinces, %d cities, %d regions, %d synonym groups",
        root,
        len(reference.areas("province_list")),
        len(reference.areas("city_list")),
        len(reference.areas("county_list")),
        len(reference.synonym_groups),
    )
    return reference


def load_reference_data(data_dir: Optional[str] = None) -> ReferenceData:
    """Load (once per directory) the reference tables.

    An explicit ``data_dir`` wins over ``ADDRESS_PARSER_DATA_DIR``, which wins
    over the bundled data directory.
    """
    return _load_from_dir(str(resolve_data_dir(data_dir).resolve()))
