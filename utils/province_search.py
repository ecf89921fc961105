# utils/province_search.py — substring search over the province list
from __future__ import annotations

from typing import List, Sequence, TypeVar, Union

from utils.metadata_loader import Province

P = TypeVar("P", bound=Union[str, Province])


def _normalize(s: str) -> str:
    return " ".join(str(s).split()).casefold()


def _haystacks(entry: Union[str, Province]) -> List[str]:
    if isinstance(entry, Province):
        return [_normalize(entry.name), _normalize(entry.name_en)] if entry.name_en else [_normalize(entry.name)]
    return [_normalize(entry)]


def filter_provinces(provinces: Sequence[P], query: str) -> List[P]:
    """
    Case-insensitive substring filter that keeps catalog order.

    An empty (or whitespace-only) query returns every candidate unchanged.
    Province entries also match on their romanized name, so "chiang" finds
    เชียงใหม่ and เชียงราย.
    """
    if not query or not query.strip():
        return list(provinces)
    q = _normalize(query)
    return [p for p in provinces if any(q in h for h in _haystacks(p))]
