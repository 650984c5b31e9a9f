"""Order-stable deduplication of pooled provider records."""

from collections.abc import Callable, Iterable, Sequence
import re
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9]")

KeyFunc = Callable[[dict[str, Any]], str]


def title_key(record: dict[str, Any]) -> str:
    """Lower-cased title with everything but letters and digits removed."""
    return _NON_ALNUM.sub("", str(record.get("title") or "").lower())


def url_key(record: dict[str, Any]) -> str:
    """Exact URL."""
    return str(record.get("url") or "").strip()


def dedupe(
    records: Iterable[dict[str, Any]],
    keys: Sequence[KeyFunc] = (title_key,),
) -> list[dict[str, Any]]:
    """Keep the first record for every key; later records sharing any key are dropped.

    With several key functions a record is a duplicate when any one of its keys
    was already seen. Empty keys never match.
    """
    seen: set[tuple[int, str]] = set()
    unique = []
    for record in records:
        record_keys = {(i, value) for i, key in enumerate(keys) if (value := key(record))}
        if record_keys & seen:
            continue
        seen |= record_keys
        unique.append(record)
    return unique
