from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class ConverterConfig:
    """Markers recognized in the source comment and emitted in the target one."""

    open_delimiter: str = "/**"
    close_delimiter: str = "*/"
    tag_line_marker: str = "\\"
    decoration_char: str = "*"
    line_marker: str = "///"
    symbol_prefix: str = "Sk"
    scope_separator: str = "::"
    param_tag: str = "@param"
    return_tag: str = "@return"
    return_label: str = "Returns:"
    autolink_prefixes: List[str] = field(default_factory=lambda: ["https://"])

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name == "autolink_prefixes":
                if not isinstance(value, list) or not all(
                    isinstance(prefix, str) and prefix for prefix in value
                ):
                    raise ValueError(
                        f"autolink_prefixes must be a list of non-empty strings, got {value!r}."
                    )
            elif not isinstance(value, str):
                raise ValueError(f"{item.name} must be a string, got {value!r}.")
        # The indent trim counts bytes, so the decoration must be one byte wide.
        if len(self.decoration_char) != 1 or not self.decoration_char.isascii():
            raise ValueError(
                f"decoration_char must be a single ASCII character, got {self.decoration_char!r}."
            )
        if not self.open_delimiter:
            raise ValueError("open_delimiter must not be empty.")
        if not self.line_marker:
            raise ValueError("line_marker must not be empty.")
        if not self.tag_line_marker:
            raise ValueError("tag_line_marker must not be empty.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> ConverterConfig:
    """Build a ConverterConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return ConverterConfig()
    allowed = {item.name for item in fields(ConverterConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if isinstance(kwargs.get("autolink_prefixes"), str):
        kwargs["autolink_prefixes"] = [kwargs["autolink_prefixes"]]
    return ConverterConfig(**kwargs)


def config_from_yaml(path: str | Path) -> ConverterConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ConverterConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ConverterConfig()
    return config_from_yaml(path)
