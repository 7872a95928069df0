# convoso_client/params.py
"""Query parameter normalization and pagination clamping.

Many endpoints accept comma-separated values when filtering by several ids,
so callers may pass lists (``campaign_id=[102, 104]``) and get
``campaign_id="102,104"`` on the wire. ``None`` stands for an omitted value:
it survives normalization and is skipped when the URL is built.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

Scalar = Union[str, int, float, bool]
ParamValue = Union[Scalar, Sequence[Scalar], None]
QueryValue = Optional[Scalar]

DEFAULT_OFFSET_MAX = 50000
DEFAULT_LIMIT_MAX = 1000
DEFAULT_LIMIT = 1000


def stringify(value: Any) -> str:
    # booleans use the lowercase JSON spelling; whole floats drop their ".0"
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_params(raw: Mapping[str, Any]) -> dict[str, QueryValue]:
    """Flatten list/tuple values to comma-joined strings; drop values that
    cannot be sent as a single query value (mappings, sets, objects)."""
    normalized: dict[str, QueryValue] = {}
    for key, value in raw.items():
        if isinstance(value, (list, tuple)):
            normalized[key] = ",".join(stringify(v) for v in value)
        elif value is None or isinstance(value, (str, int, float, bool)):
            normalized[key] = value
        # anything else is skipped
    return normalized


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def clamp_offset(offset: Optional[float], max_offset: int = DEFAULT_OFFSET_MAX):
    if offset is None:
        return 0
    return max(0, min(offset, max_offset))


def clamp_limit(
    limit: Optional[float],
    max_limit: int = DEFAULT_LIMIT_MAX,
    default: int = DEFAULT_LIMIT,
):
    if limit is None:
        return default
    return max(1, min(limit, max_limit))


@dataclass(frozen=True)
class PaginationPolicy:
    offset_max: int = DEFAULT_OFFSET_MAX
    limit_max: int = DEFAULT_LIMIT_MAX
    limit_default: int = DEFAULT_LIMIT


DEFAULT_PAGINATION = PaginationPolicy()


def apply_pagination_policy(
    raw: Optional[Mapping[str, Any]],
    policy: Optional[PaginationPolicy] = None,
) -> dict[str, Any]:
    """Clamp numeric ``offset``/``limit`` entries; other values pass through."""
    if not raw:
        return {}
    policy = policy or DEFAULT_PAGINATION
    validated = dict(raw)
    if "offset" in validated and _is_number(validated["offset"]):
        validated["offset"] = clamp_offset(validated["offset"], policy.offset_max)
    if "limit" in validated and _is_number(validated["limit"]):
        validated["limit"] = clamp_limit(
            validated["limit"], policy.limit_max, policy.limit_default
        )
    return validated


def normalize_hex_color(hex_color: Optional[str]) -> Optional[str]:
    if not hex_color:
        return None
    return hex_color[1:] if hex_color.startswith("#") else hex_color
