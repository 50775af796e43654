from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    text: str  # literal text as produced by the tokenizer

    @property
    def length(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text
