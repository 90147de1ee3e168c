"""Strict JSON decoding and the on-disk pretty-print format."""

import json
import math
from typing import Any, Union

INDENT = 2


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    # 1e400 and friends overflow to inf, which cannot be written back as JSON
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def parse_json(data: Union[bytes, str]) -> Any:
    """
    Decode JSON text, refusing anything a strict parser would.

    Raises:
        ValueError: on invalid UTF-8, malformed JSON, NaN/Infinity
            literals, numbers that overflow a double, or nesting too
            deep to decode
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    try:
        return json.loads(data, parse_constant=_reject_constant, parse_float=_finite_float)
    except RecursionError as e:
        raise ValueError("JSON nesting too deep") from e


def format_json(value: Any) -> bytes:
    """Serialize with two-space indentation, keys in received order, no trailing newline."""
    text = json.dumps(value, indent=INDENT, ensure_ascii=False, allow_nan=False)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        # lone surrogates from \ud800-style escapes cannot be written as UTF-8
        return json.dumps(value, indent=INDENT, ensure_ascii=True, allow_nan=False).encode("ascii")
