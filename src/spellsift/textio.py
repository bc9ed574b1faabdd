from __future__ import annotations

import locale
import logging
import os
from typing import BinaryIO, Iterator, Mapping

logger = logging.getLogger(__name__)

LANGUAGE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
FALLBACK_LANGUAGE = "en"


def resolve_charset(encoding: str | None = None) -> str:
    """Return the explicit encoding, or the locale's preferred one."""
    if encoding:
        return encoding
    return locale.getpreferredencoding(False)


def decode_line(raw: bytes, charset: str) -> str:
    """Decode one line, assuming UTF-8 when the locale charset does not fit."""
    try:
        return raw.decode(charset)
    except UnicodeDecodeError:
        logger.debug("Line is not valid %s; decoding as UTF-8", charset)
        return raw.decode("utf-8", errors="replace")


def read_lines(stream: BinaryIO, charset: str) -> Iterator[str]:
    """Yield decoded lines from a binary stream without their line endings."""
    for raw in stream:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield decode_line(raw, charset)


def default_language(environ: Mapping[str, str] | None = None) -> str:
    """Return the user's language tag from the locale environment variables."""
    env = os.environ if environ is None else environ
    value = ""
    for name in LANGUAGE_VARIABLES:
        value = env.get(name, "")
        if name == "LANGUAGE":
            value = value.split(":", 1)[0]
        if value:
            break
    tag = value.split(".", 1)[0].split("@", 1)[0]
    if tag in ("", "C", "POSIX"):
        return FALLBACK_LANGUAGE
    return tag
