"""``tokenURI``-style metadata documents."""
from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Mapping

from checksim.errors import MalformedInputRecord
from .attributes import Attribute, map_check_attributes
from .check import Check
from .render import generate_svg

JSON_PREFIX = "data:application/json;base64,"
SVG_PREFIX = "data:image/svg+xml;base64,"


@dataclass
class ParsedTokenURI:
    name: str
    svg: str
    attributes: list[Attribute] = field(default_factory=list)


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def build_token_uri(check: Check, virtual_map: Mapping[int, Check], name: str) -> str:
    svg = generate_svg(check, virtual_map)
    document = {
        "name": name,
        "description": "This artwork may or may not be notable.",
        "image": SVG_PREFIX + _b64(svg),
        "attributes": [a.to_dict() for a in map_check_attributes(check)],
    }
    return JSON_PREFIX + _b64(json.dumps(document))


def parse_token_uri(data_uri: str) -> ParsedTokenURI:
    payload = data_uri.removeprefix(JSON_PREFIX)
    try:
        document = json.loads(base64.b64decode(payload, validate=True).decode("utf-8"))
        svg = base64.b64decode(document["image"].removeprefix(SVG_PREFIX)).decode("utf-8")
        attributes = [Attribute(str(a["trait_type"]), str(a["value"])) for a in document.get("attributes") or []]
        return ParsedTokenURI(name=str(document["name"]), svg=svg, attributes=attributes)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError, AttributeError) as exc:
        raise MalformedInputRecord(f"invalid token URI: {exc}") from exc
