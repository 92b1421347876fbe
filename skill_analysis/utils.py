# skill_analysis/utils.py
from typing import Hashable, Iterable, List, TypeVar

from skill_analysis.models import Posting

T = TypeVar("T", bound=Hashable)


def combined_text(posting: Posting) -> str:
    """
    Searchable text for a posting: full_text, title, then responsibilities,
    requirements and nice_to_have items, space-joined.
    """
    parts: List[str] = [posting.full_text or "", posting.title or ""]
    parts.extend(posting.responsibilities or [])
    parts.extend(posting.requirements or [])
    parts.extend(posting.nice_to_have or [])
    return " ".join(parts)


def unique_in_order(items: Iterable[T]) -> List[T]:
    out = []
    seen = set()
    for x in items or []:
        if x in seen:
            continue
        seen.add(x)
        out.append(x)
    return out
