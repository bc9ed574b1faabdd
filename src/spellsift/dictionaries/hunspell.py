from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Callable, Dict, Sequence

import hunspell  # pylint: disable=c-extension-no-member

from .base import Provider, SpellingDictionary, find_by_suffix

logger = logging.getLogger(__name__)

DIC_SUFFIX = ".dic"
AFF_SUFFIX = ".aff"
DEFAULT_ENCODING = "utf-8"


class HunspellProvider(Provider):
    """
    Hunspell/MySpell ``.dic`` + ``.aff`` pairs checked by libhunspell.

    Affix rules, compounding and case handling are hunspell's own. The
    ``.aff`` file is also read for its extra word characters (``WORDCHARS``).
    """

    name = "hunspell"
    description = "Hunspell spell checker"

    def list_dictionaries(self, search_dirs: Sequence[Path]) -> Dict[str, Path]:
        return {
            tag: path
            for tag, path in find_by_suffix(search_dirs, DIC_SUFFIX).items()
            if path.with_suffix(AFF_SUFFIX).is_file()
        }

    def load(self, tag: str, path: Path) -> SpellingDictionary:
        aff_path = path.with_suffix(AFF_SUFFIX)
        checker = hunspell.HunSpell(str(path), str(aff_path))
        encoding, wordchars = read_affix_settings(aff_path)
        logger.info("Loaded hunspell dictionary %s from %s (%s)", tag, path, encoding)
        return SpellingDictionary(
            tag=tag,
            provider_name=self.name,
            path=path,
            extra_word_characters=wordchars,
            speller=_spell_function(checker),
        )


def _spell_function(checker: hunspell.HunSpell) -> Callable[[str], bool]:
    def spell(word: str) -> bool:
        try:
            return bool(checker.spell(word))
        except UnicodeEncodeError:
            # Words the dictionary's charset cannot express are unknown to it.
            return False

    return spell


def read_affix_settings(aff_path: Path) -> tuple[str, str]:
    """Return the (encoding, WORDCHARS) pair declared by an affix file."""
    raw = aff_path.read_bytes()
    encoding = DEFAULT_ENCODING
    for raw_line in raw.splitlines():
        parts = raw_line.split()
        if len(parts) >= 2 and parts[0] == b"SET":
            encoding = _python_codec(parts[1].decode("ascii", errors="ignore"))
            break

    wordchars = ""
    for line in raw.decode(encoding, errors="replace").splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[0] == "WORDCHARS":
            wordchars = parts[1]
    return encoding, wordchars


def _python_codec(name: str) -> str:
    candidate = name.strip().lower()
    if candidate.startswith("microsoft-"):
        candidate = candidate[len("microsoft-") :]
    try:
        return codecs.lookup(candidate).name
    except LookupError:
        logger.debug("Unknown affix encoding %r; assuming %s", name, DEFAULT_ENCODING)
        return DEFAULT_ENCODING
