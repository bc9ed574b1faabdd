from __future__ import annotations

from pathlib import Path
from typing import Iterable

from spellsift.classifier import CallableClassifier
from spellsift.models import WordPosition


def write_hunspell_dictionary(
    directory: Path,
    tag: str,
    entries: Iterable[str],
    wordchars: str = "",
    encoding: str = "UTF-8",
) -> Path:
    """
    Create a minimal hunspell .dic/.aff pair and return the .dic path.

    Flag ``S`` adds a plural "s" and flag ``D`` a past tense "ed".
    """
    directory.mkdir(parents=True, exist_ok=True)
    entries = list(entries)
    aff_lines = [
        f"SET {encoding}",
        "TRY esiarntolcdugmphbyfvkwz",
        "SFX S Y 1",
        "SFX S 0 s .",
        "SFX D Y 1",
        "SFX D 0 ed .",
    ]
    if wordchars:
        aff_lines.append(f"WORDCHARS {wordchars}")
    codec = "latin-1" if encoding.upper().startswith("ISO8859-1") else "utf-8"
    (directory / f"{tag}.aff").write_bytes(("\n".join(aff_lines) + "\n").encode(codec))
    dic_body = "\n".join([str(len(entries)), *entries]) + "\n"
    dic_path = directory / f"{tag}.dic"
    dic_path.write_bytes(dic_body.encode(codec))
    return dic_path


def write_word_list(directory: Path, tag: str, words: Iterable[str]) -> Path:
    """Create a plain word list dictionary and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{tag}.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


def ascii_classifier(
    apostrophe_end: bool = False, digits_start: bool = True
) -> CallableClassifier:
    """Letters everywhere, apostrophes inside words, digits optionally not first."""

    def classify(char: str, position: WordPosition) -> bool:
        if char.isascii() and char.isalpha():
            return True
        if char == "'":
            return position is WordPosition.MIDDLE or (
                apostrophe_end and position is WordPosition.END
            )
        if char.isdigit() and char.isascii():
            return digits_start or position is not WordPosition.START
        return False

    return CallableClassifier(classify)
