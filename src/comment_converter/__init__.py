"""
comment_converter turns block documentation comments into line documentation comments.
"""

from __future__ import annotations

from .config import ConverterConfig, config_from_dict, config_from_yaml, load_config
from .errors import ConverterInternalError
from .models import Token, TokenClass
from .pipeline import convert, normalize_indent
from .tokenization import tokenize

__all__ = [
    "ConverterConfig",
    "ConverterInternalError",
    "Token",
    "TokenClass",
    "config_from_dict",
    "config_from_yaml",
    "convert",
    "load_config",
    "normalize_indent",
    "tokenize",
]

__version__ = "0.1.0"
