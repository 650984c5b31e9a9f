"""Best-effort JSON extraction from free-form provider replies.

Providers are asked for bare JSON but routinely wrap it in markdown fences or
surround it with prose. Extraction strips fences, takes the first array/object
substring and parses it strictly. No repair is attempted: a reply that does not
parse contributes nothing.
"""

import json
import re
from typing import Any, Literal

import structlog

from ..models.project import CATEGORY_LENGTH, ESTIMATED_TIME_LENGTH, TITLE_LENGTH
from ..providers.base import ProviderResult
from ..schemas.generation import Difficulty

logger = structlog.get_logger()

JsonShape = Literal["array", "object"]

_FENCE_PATTERN = re.compile(r"^\s*```[\w-]*\s*\n?(.*?)\n?\s*```\s*$", re.DOTALL)
_ARRAY_PATTERN = re.compile(r"\[.*\]", re.DOTALL)
_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)
_SPLIT_PATTERN = re.compile(r"[,;\n]")

DEFAULT_ESTIMATED_TIME = "4-6 weeks"
DEFAULT_MARKET_DEMAND = "Medium"
DEFAULT_CATEGORY = "General"
MARKET_DEMAND_LEVELS = ("Low", "Medium", "High")
RESOURCE_TYPES = ("tutorial", "course", "documentation", "book", "community")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if the whole reply is fenced."""
    match = _FENCE_PATTERN.match(text)
    return match.group(1).strip() if match else text.strip()


def extract_json(text: str, expect: JsonShape) -> Any | None:
    """Parse the first array (or object) found in ``text``.

    Returns None when nothing matching is found or the match is not valid JSON.
    """
    if not text:
        return None

    cleaned = strip_code_fences(text)
    pattern = _ARRAY_PATTERN if expect == "array" else _OBJECT_PATTERN
    match = pattern.search(cleaned)
    if not match:
        return None

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None

    if expect == "array" and not isinstance(parsed, list):
        return None
    if expect == "object" and not isinstance(parsed, dict):
        return None
    return parsed


def _pick(record: dict[str, Any], *names: str) -> Any:
    for name in names:
        value = record.get(name)
        if value not in (None, "", []):
            return value
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        return "\n".join(_as_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, indent=2, ensure_ascii=False)
    return str(value)


def _as_string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in _SPLIT_PATTERN.split(value) if part.strip()]
    if not isinstance(value, list):
        return [str(value)]

    items = []
    for item in value:
        if isinstance(item, dict):
            item = _pick(item, "url", "link", "href", "name", "title")
        if item is not None and str(item).strip():
            items.append(str(item).strip())
    return items


def _clip(text: str, limit: int) -> str:
    return text[:limit].rstrip()


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _as_difficulty(value: Any, default: str) -> str:
    if isinstance(value, str):
        for level in Difficulty:
            if value.strip().lower() == level.value.lower():
                return level.value
    return default


def _as_choice(value: Any, choices: tuple[str, ...], default: str) -> str:
    if isinstance(value, str):
        for choice in choices:
            if value.strip().lower() == choice.lower():
                return choice
    return default


def _unparseable(reply: ProviderResult, expect: JsonShape) -> None:
    logger.warning(
        "provider_reply_unparseable",
        provider=reply.source,
        expected=expect,
        reply_chars=len(reply.text or ""),
    )


def normalize_projects(
    reply: ProviderResult,
    default_difficulty: str = Difficulty.INTERMEDIATE.value,
) -> list[dict[str, Any]] | None:
    """Project records from one reply, tagged with its source. None if unparseable.

    Entries without a title are dropped; empty optional fields get fixed defaults.
    """
    parsed = extract_json(reply.text or "", "array")
    if parsed is None:
        _unparseable(reply, "array")
        return None

    records = []
    for item in parsed:
        if not isinstance(item, dict):
            continue
        title = _clip(_as_text(_pick(item, "title", "name")), TITLE_LENGTH)
        if not title:
            continue
        records.append(
            {
                "title": title,
                "description": _as_text(item.get("description")),
                "difficulty": _as_difficulty(item.get("difficulty"), default_difficulty),
                "tags": _as_string_list(_pick(item, "tags", "technologies")),
                "category": _clip(_as_text(item.get("category")), CATEGORY_LENGTH)
                or DEFAULT_CATEGORY,
                "estimated_time": _clip(
                    _as_text(_pick(item, "estimatedTime", "estimated_time")),
                    ESTIMATED_TIME_LENGTH,
                )
                or DEFAULT_ESTIMATED_TIME,
                "market_demand": _as_choice(
                    _pick(item, "marketDemand", "market_demand"),
                    MARKET_DEMAND_LEVELS,
                    DEFAULT_MARKET_DEMAND,
                ),
                "source_provider": reply.source,
            }
        )
    return records


def normalize_detail(reply: ProviderResult) -> dict[str, Any] | None:
    """One project detail record from a reply. None if unparseable or empty."""
    parsed = extract_json(reply.text or "", "object")
    if parsed is None:
        _unparseable(reply, "object")
        return None

    detail = {
        "structure": _as_text(parsed.get("structure")),
        "flow": _as_text(parsed.get("flow")),
        "roadmap": _as_text(parsed.get("roadmap")),
        "pseudo_code": _as_text(_pick(parsed, "pseudoCode", "pseudo_code")),
        "resources": _unique(_as_string_list(parsed.get("resources"))),
        "github_links": _unique(_as_string_list(_pick(parsed, "githubLinks", "github_links"))),
        "source_provider": reply.source,
    }
    if not any(detail[k] for k in ("structure", "flow", "roadmap", "pseudo_code")):
        _unparseable(reply, "object")
        return None
    return detail


def _as_rating(value: Any) -> float | None:
    try:
        rating = float(str(value).split("/")[0])
    except (TypeError, ValueError):
        return None
    return min(max(rating, 0.0), 5.0)


def normalize_resources(reply: ProviderResult) -> list[dict[str, Any]] | None:
    """Learning resource records from one reply. None if unparseable."""
    parsed = extract_json(reply.text or "", "array")
    if parsed is None:
        _unparseable(reply, "array")
        return None

    records = []
    for item in parsed:
        if not isinstance(item, dict):
            continue
        title = _as_text(_pick(item, "title", "name"))
        if not title:
            continue
        is_free = _pick(item, "isFree", "is_free", "free")
        records.append(
            {
                **{k: v for k, v in item.items() if k not in ("isFree", "is_free", "free")},
                "title": title,
                "description": _as_text(item.get("description")),
                "url": _as_text(_pick(item, "url", "link")),
                "type": _as_choice(item.get("type"), RESOURCE_TYPES, "tutorial"),
                "difficulty": _as_text(item.get("difficulty")) or None,
                "rating": _as_rating(item.get("rating")),
                "is_free": is_free if isinstance(is_free, bool) else None,
                "source": reply.source,
            }
        )
    return records
