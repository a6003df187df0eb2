from __future__ import annotations

from typing import Any, Dict, List, Optional

from packages.address_parser.parser import AddressParser, get_default_parser


def run(records: List[Dict[str, Any]], parser: Optional[AddressParser] = None) -> List[Dict[str, Any]]:
    active = parser or get_default_parser()
    outputs: List[Dict[str, Any]] = []
    for item in records:
        parsed = active.parse(str(item.get("raw_text", "") or ""))
        outputs.append({"raw_id": item.get("raw_id"), **parsed.to_dict()})
    return outputs
