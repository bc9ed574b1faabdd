from __future__ import annotations

from typing import BinaryIO, Iterable, Iterator, List

from .dictionaries import SpellingDictionary
from .models import Misspelling
from .textio import read_lines
from .tokenization import tokenize_line


def find_misspellings(
    line: str, dictionary: SpellingDictionary, line_number: int = 0
) -> List[Misspelling]:
    """Return the words of one line that the dictionary does not know."""
    return [
        Misspelling(
            word=token.word, line_number=line_number, offset=token.start_offset
        )
        for token in tokenize_line(line, dictionary.classifier)
        if not dictionary.check(token.word)
    ]


def check_lines(
    lines: Iterable[str], dictionary: SpellingDictionary
) -> Iterator[Misspelling]:
    """Check each line independently, numbering lines from 1."""
    for line_number, line in enumerate(lines, start=1):
        if not line:
            continue
        yield from find_misspellings(line, dictionary, line_number)


def check_stream(
    stream: BinaryIO, dictionary: SpellingDictionary, charset: str
) -> Iterator[Misspelling]:
    """Decode a byte stream line by line and check every line."""
    return check_lines(read_lines(stream, charset), dictionary)


def format_misspelling(misspelling: Misspelling, show_lines: bool = False) -> str:
    """Render a misspelling the way the CLI prints it."""
    if show_lines:
        return f"{misspelling.line_number} {misspelling.word}"
    return misspelling.word
