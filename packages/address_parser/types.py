from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AreaLevel(str, Enum):
    PROVINCE = "province"
    CITY = "city"
    REGION = "region"


# gazetteer table key and the zip prefix width handed to the next level
LEVEL_TABLE: dict[AreaLevel, tuple[str, int]] = {
    AreaLevel.PROVINCE: ("province_list", 2),
    AreaLevel.CITY: ("city_list", 4),
    AreaLevel.REGION: ("county_list", 6),
}


def gazetteer_key(level: AreaLevel) -> str:
    return LEVEL_TABLE[level][0]


def zip_prefix_width(level: AreaLevel) -> int:
    return LEVEL_TABLE[level][1]


@dataclass(frozen=True)
class AreaMatch:
    zip: str = ""
    name: str = ""
    rest: str = ""
    zip_prefix: str = ""

    @property
    def found(self) -> bool:
        return bool(self.name)
