from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List

from ..models.token import Token

Tokenizer = Callable[[str], List[Token]]

_ws = re.compile(r"\s+")
_WORD = re.compile(r"\w+", re.UNICODE)


def char_tokenize(text: str) -> List[Token]:
    """One token per non-whitespace character (suits unsegmented CJK text)."""
    return [Token(c) for c in (text or "") if not c.isspace()]


def whitespace_tokenize(text: str) -> List[Token]:
    if not text:
        return []
    return [Token(t) for t in _ws.split(text.strip()) if t]


def word_tokenize(text: str) -> List[Token]:
    return [Token(t) for t in _WORD.findall(text or "")]


_TOKENIZERS: Dict[str, Tokenizer] = {
    "chars": char_tokenize,
    "whitespace": whitespace_tokenize,
    "words": word_tokenize,
}


def get_tokenizer(key: str) -> Tokenizer:
    try:
        return _TOKENIZERS[key]
    except KeyError as exc:
        raise ValueError(f"Unknown tokenizer '{key}'") from exc


def available_tokenizers() -> Iterable[str]:
    return _TOKENIZERS.keys()


def tokenizer_name(tokenizer: Tokenizer) -> str:
    for key, fn in _TOKENIZERS.items():
        if fn is tokenizer:
            return key
    return getattr(tokenizer, "__name__", type(tokenizer).__name__)
