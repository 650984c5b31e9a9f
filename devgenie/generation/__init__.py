"""Generation pipeline: prompts, fan-out, normalization, deduplication, fallbacks."""

from .dedupe import dedupe, title_key, url_key
from .fanout import FanOutCoordinator
from .normalizer import extract_json, normalize_detail, normalize_projects, normalize_resources

__all__ = [
    "FanOutCoordinator",
    "dedupe",
    "extract_json",
    "normalize_detail",
    "normalize_projects",
    "normalize_resources",
    "title_key",
    "url_key",
]
