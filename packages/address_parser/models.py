from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class ParsedAddress(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    phone_number: str = Field(default="", alias="phoneNumber")
    name: str = ""
    id_number: str = Field(default="", alias="idNumber")
    street: str = ""
    zip: str = ""
    province: str = ""
    city: str = ""
    region: str = ""

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)
