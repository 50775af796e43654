from __future__ import annotations
from typing import Dict, Iterable

from ..models.token import Token


def frequency(tokens: Iterable[Token]) -> Dict[Token, int]:
    m: Dict[Token, int] = {}
    for t in tokens:
        m[t] = m.get(t, 0) + 1
    return m


def format_frequency(freq: Dict[Token, int]) -> str:
    """
    Render a frequency table for debug logs, highest count first.
    Ties keep first-seen order (sorted() is stable).
    """
    if not freq:
        return ""
    ranked = sorted(freq.items(), key=lambda kv: -kv[1])
    return "\n".join(
        f"\t{i}、{tok.text}={count}" for i, (tok, count) in enumerate(ranked, start=1)
    )
