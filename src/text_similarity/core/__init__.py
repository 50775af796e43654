"""Similarity strategy registry."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type

from .cosine import CosineTextSimilarity
from .overlap import OverlapTextSimilarity, SimpleTextSimilarity
from .similarity import TextSimilarity
from .tokens import Tokenizer

_SCORERS: Dict[str, Type[TextSimilarity]] = {
    "cosine": CosineTextSimilarity,
    "overlap": OverlapTextSimilarity,
}

_ALIASES = {"simple": "overlap"}


def get_scorer(key: str, tokenizer: Optional[Tokenizer] = None) -> TextSimilarity:
    try:
        cls = _SCORERS[_ALIASES.get(key, key)]
    except KeyError as exc:
        raise ValueError(f"Unknown similarity strategy '{key}'") from exc
    return cls(tokenizer=tokenizer)


def available_scorers() -> Iterable[str]:
    return _SCORERS.keys()


def describe_scorers() -> List[dict]:
    return [
        {"key": key, "name": cls.name, "description": cls.description}
        for key, cls in _SCORERS.items()
    ]


__all__ = [
    "TextSimilarity",
    "CosineTextSimilarity",
    "OverlapTextSimilarity",
    "SimpleTextSimilarity",
    "get_scorer",
    "available_scorers",
    "describe_scorers",
]
