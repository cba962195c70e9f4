from __future__ import annotations

import json
from typing import Any, Literal, Optional

from llm.errors import ResponseParseError

JsonKind = Literal["object", "array"]

_OPENERS = {"object": "{", "array": "["}
_decoder = json.JSONDecoder()


def _first_opening(text: str, kind: Optional[JsonKind]) -> int:
    if kind is not None:
        return text.find(_OPENERS[kind])
    positions = [p for p in (text.find("{"), text.find("[")) if p != -1]
    return min(positions) if positions else -1


def extract_json(text: str, kind: Optional[JsonKind] = None) -> Any:
    """Decode the first bracketed JSON value embedded in free-form text.

    Models often wrap the JSON in prose or code fences ("Sure! Here it is:
    {...} Thanks."). We locate the first opening bracket (`{` for objects,
    `[` for arrays, whichever comes first when kind is None) and decode one
    balanced value from that point; trailing text is ignored.

    Raises ResponseParseError when there is no bracket or when the region at
    that bracket is not valid JSON.
    """
    if not isinstance(text, str):
        raise ResponseParseError("Response is not text")

    start = _first_opening(text, kind)
    if start == -1:
        raise ResponseParseError("No JSON found in response")

    try:
        value, _end = _decoder.raw_decode(text, start)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Invalid JSON in response: {e.msg}") from e

    return value
