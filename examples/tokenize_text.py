"""
Tiny helper script showing the tokenizer with a custom classifier and the
default Unicode rules side by side.
"""

from __future__ import annotations

from spellsift import UnicodeWordClassifier, WordPosition, tokenize_line


def letters_and_inner_apostrophes(char: str, position: WordPosition) -> bool:
    if char == "'":
        return position is WordPosition.MIDDLE
    return char.isascii() and char.isalpha()


def main() -> None:
    samples = [
        "don't stop, won't-stop",
        "rock'n' roll",
        "Über-cool café ☕ au naturel",
    ]

    for sample in samples:
        print("-" * 40)
        print(sample)
        custom = tokenize_line(sample, letters_and_inner_apostrophes)
        unicode_rules = tokenize_line(sample, UnicodeWordClassifier())
        print("custom: ", [(token.word, token.start_offset) for token in custom])
        print("unicode:", [(token.word, token.start_offset) for token in unicode_rules])


if __name__ == "__main__":
    main()
