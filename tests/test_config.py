from pathlib import Path

import pytest

from comment_converter.config import (
    ConverterConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults_match_block_comment_style():
    config = load_config()
    assert config.open_delimiter == "/**"
    assert config.close_delimiter == "*/"
    assert config.line_marker == "///"
    assert config.autolink_prefixes == ["https://"]


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict({"symbol_prefix": "Gr", "window_size": 10})
    assert config.symbol_prefix == "Gr"
    assert config_from_dict(None) == ConverterConfig()


def test_config_from_dict_accepts_single_autolink_prefix():
    config = config_from_dict({"autolink_prefixes": "http://"})
    assert config.autolink_prefixes == ["http://"]


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "converter.yaml"
    path.write_text(
        "line_marker: '//!'\nautolink_prefixes:\n  - https://\n  - http://\n",
        encoding="utf-8",
    )
    config = config_from_yaml(path)
    assert config.line_marker == "//!"
    assert config.autolink_prefixes == ["https://", "http://"]


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "converter.yaml"
    path.write_text("- not\n- a mapping\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_decoration_char_must_be_single_ascii_character():
    with pytest.raises(ValueError):
        ConverterConfig(decoration_char="**")
    with pytest.raises(ValueError):
        ConverterConfig(decoration_char="•")


def test_to_dict_round_trips_through_config_from_dict():
    config = ConverterConfig(return_label="Return value:")
    assert config_from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "data",
    [
        {"symbol_prefix": 5},
        {"line_marker": None},
        {"autolink_prefixes": 7},
        {"autolink_prefixes": ["https://", 3]},
        {"autolink_prefixes": [""]},
        {"tag_line_marker": ""},
    ],
)
def test_config_rejects_invalid_values(data: dict):
    with pytest.raises(ValueError):
        config_from_dict(data)
