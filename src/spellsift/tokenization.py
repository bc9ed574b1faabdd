from __future__ import annotations

from typing import List

from .classifier import ClassifierLike, as_predicate
from .models import Token, WordPosition


def tokenize_line(line: str, classifier: ClassifierLike) -> List[Token]:
    """
    Split one line into words with their code-point offsets.

    Characters that cannot start a word are skipped, the word is extended
    over every character allowed in the middle, then trailing characters that
    cannot end a word are trimmed off. Scanning resumes where the extension
    stopped, not at the trimmed end.
    """
    is_word_character = as_predicate(classifier)
    tokens: List[Token] = []
    length = len(line)
    cursor = 0

    while cursor < length:
        while cursor < length and not is_word_character(
            line[cursor], WordPosition.START
        ):
            cursor += 1
        if cursor == length:
            break
        start = cursor

        # The start character is already accepted, so the cursor always moves.
        cursor += 1
        while cursor < length and is_word_character(line[cursor], WordPosition.MIDDLE):
            cursor += 1

        end = cursor - 1
        while end > start and not is_word_character(line[end], WordPosition.END):
            end -= 1

        if end > start:
            tokens.append(Token(word=line[start : end + 1], start_offset=start))

    return tokens
