"""
spellsift splits lines into words with language-aware rules and lists the
words a spelling dictionary does not know.
"""

from __future__ import annotations

from .checker import check_lines, check_stream, find_misspellings
from .classifier import CallableClassifier, CharacterClassifier, UnicodeWordClassifier
from .config import SpellsiftConfig, config_from_dict, config_from_yaml, load_config
from .models import Misspelling, Token, WordPosition
from .tokenization import tokenize_line

__all__ = [
    "CallableClassifier",
    "CharacterClassifier",
    "Misspelling",
    "SpellsiftConfig",
    "Token",
    "UnicodeWordClassifier",
    "WordPosition",
    "check_lines",
    "check_stream",
    "config_from_dict",
    "config_from_yaml",
    "find_misspellings",
    "load_config",
    "tokenize_line",
]

__version__ = "0.1.0"
