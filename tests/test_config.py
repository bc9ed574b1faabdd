from pathlib import Path

import pytest

from spellsift.config import (
    ConfigError,
    SpellsiftConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    config = load_config()

    assert config == SpellsiftConfig()
    assert config.providers == ["hunspell", "wordlist"]
    assert config.log_level == "WARNING"
    assert "/usr/share/hunspell" in config.to_dict()["dictionary_dirs"]


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict(
        {"dictionary": "en_GB", "dictionary_dirs": "/opt/dicts", "colour": "blue"}
    )

    assert config.dictionary == "en_GB"
    assert config.dictionary_dirs == ["/opt/dicts"]


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "spellsift.yaml"
    path.write_text(
        "dictionary: de\nshow_lines: true\nproviders:\n  - wordlist\n",
        encoding="utf-8",
    )

    config = config_from_yaml(path)

    assert config.dictionary == "de"
    assert config.show_lines is True
    assert config.providers == ["wordlist"]


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        config_from_yaml(path)


def test_config_from_dict_empty_values_use_defaults():
    config = config_from_dict(
        {"dictionary_dirs": None, "providers": None, "log_level": None}
    )

    assert config == SpellsiftConfig()


def test_config_from_dict_rejects_unknown_encoding():
    with pytest.raises(ConfigError, match="Unknown encoding 'bogus'"):
        config_from_dict({"encoding": "bogus"})

    assert config_from_dict({"encoding": "latin-1"}).encoding == "latin-1"
