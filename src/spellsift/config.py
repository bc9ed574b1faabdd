from __future__ import annotations

import codecs
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

DEFAULT_DICTIONARY_DIRS = [
    "~/.local/share/spellsift/dicts",
    "/usr/share/hunspell",
    "/usr/share/myspell/dicts",
]
DEFAULT_PROVIDERS = ["hunspell", "wordlist"]


class ConfigError(ValueError):
    """Raised when a configuration file cannot be interpreted."""


@dataclass(slots=True)
class SpellsiftConfig:
    """Configuration options for the misspelling lister."""

    dictionary: str | None = None
    personal_word_list: str | None = None
    dictionary_dirs: List[str] = field(
        default_factory=lambda: list(DEFAULT_DICTIONARY_DIRS)
    )
    dictionary_path_env: str = "SPELLSIFT_DICT_PATH"
    providers: List[str] = field(default_factory=lambda: list(DEFAULT_PROVIDERS))
    encoding: str | None = None
    show_lines: bool = False
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(SpellsiftConfig)}
    # Empty YAML keys load as None and fall back to the defaults.
    kwargs = {
        key: data[key] for key in data if key in allowed and data[key] is not None
    }
    for key in ("dictionary_dirs", "providers"):
        value = kwargs.get(key)
        if isinstance(value, str):
            kwargs[key] = [value]
        elif value is not None:
            kwargs[key] = [str(item) for item in value]
    encoding = kwargs.get("encoding")
    if encoding is not None:
        try:
            codecs.lookup(str(encoding))
        except LookupError as exc:
            raise ConfigError(f"Unknown encoding '{encoding}'.") from exc
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> SpellsiftConfig:
    """Build a SpellsiftConfig from a dictionary-like input."""
    if data is None:
        return SpellsiftConfig()
    return SpellsiftConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> SpellsiftConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ConfigError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> SpellsiftConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return SpellsiftConfig()
    return config_from_yaml(path)
