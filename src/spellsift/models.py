from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WordPosition(Enum):
    """Position inside a word that a character is being classified for."""

    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(slots=True, frozen=True)
class Token:
    """A word found in a line and the code-point offset where it begins."""

    word: str
    start_offset: int

    @property
    def end_offset(self) -> int:
        """Exclusive end offset of the word in its source line."""
        return self.start_offset + len(self.word)


@dataclass(slots=True, frozen=True)
class Misspelling:
    """A token rejected by the spelling dictionary."""

    word: str
    line_number: int
    offset: int
