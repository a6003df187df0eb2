from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Optional

from packages.address_parser.extract import guess_id_number, guess_name, guess_phone_number
from packages.address_parser.models import ParsedAddress
from packages.address_parser.normalize import trim_ignores
from packages.address_parser.reference_data import ReferenceData, load_reference_data, resolve_data_dir
from packages.address_parser.resolve import backfill_parent, resolve_area
from packages.address_parser.types import AreaLevel
from packages.address_parser.variants import build_variant_index

logger = logging.getLogger(__name__)


def _consume(text: str, value: str) -> str:
    return text.replace(value, " ", 1) if value else text


class AddressParser:
    """Extract contact and area fields from a free-text Chinese mailing address.

    Instances are immutable and hold the reference tables plus the variant
    index derived from them, so one parser can be shared between threads.
    """

    def __init__(self, reference: Optional[ReferenceData] = None) -> None:
        self._reference = reference if reference is not None else load_reference_data()
        self._variant_index = MappingProxyType(build_variant_index(self._reference))

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    def parse(self, address: str) -> ParsedAddress:
        reference = self._reference
        text = trim_ignores(str(address or ""), reference.ignore_words, reference.punctuation)

        phone_number = guess_phone_number(text)
        text = _consume(text, phone_number)

        name = guess_name(text, reference.lastnames)
        text = _consume(text, name)

        id_number = guess_id_number(text)
        text = _consume(text, id_number)
        logger.debug("extracted phone=%r name=%r id=%r", phone_number, name, id_number)

        province = resolve_area(AreaLevel.PROVINCE, text, reference, variant_index=self._variant_index)
        city = resolve_area(AreaLevel.CITY, province.rest, reference, province.zip_prefix, self._variant_index)
        region = resolve_area(AreaLevel.REGION, city.rest, reference, city.zip_prefix, self._variant_index)

        if region.found and not city.found:
            city = backfill_parent(AreaLevel.CITY, region.zip, reference)
        if city.zip and not province.found:
            province = backfill_parent(AreaLevel.PROVINCE, city.zip, reference)

        street = (region.rest or city.rest or province.rest or text).strip()
        return ParsedAddress(
            phone_number=phone_number,
            name=name,
            id_number=id_number,
            street=street,
            zip=region.zip or city.zip or province.zip,
            province=province.name,
            city=city.name,
            region=region.name,
        )


@lru_cache(maxsize=8)
def _parser_for(data_dir: str) -> AddressParser:
    return AddressParser(load_reference_data(data_dir))


def get_default_parser() -> AddressParser:
    return _parser_for(str(resolve_data_dir().resolve()))


def parse(address: str) -> ParsedAddress:
    return get_default_parser().parse(address)
