"""
Token stream rewriting.

Each rule looks at the unconsumed tokens and either declines (returns None) or
returns how many tokens it consumed together with the text to emit. Rules are
tried in order and the first match wins; every token kind has a catch-all rule,
so a non-empty stream always makes progress.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from .casing import is_lower_camel_case, is_upper_camel_case, to_snake_case
from .config import ConverterConfig
from .errors import ConverterInternalError
from .models import Token

Consumed = Tuple[int, str]
# No rule looks further ahead than this many tokens.
LOOKAHEAD = 3
Rule = Callable[[Sequence[Token], ConverterConfig], Optional[Consumed]]


def param_tag_rule(tokens: Sequence[Token], config: ConverterConfig) -> Consumed | None:
    """``@param name`` -> ``- `name` ``; the description is left in the stream."""
    if len(tokens) < 3:
        return None
    tag, gap, name = tokens[0], tokens[1], tokens[2]
    if (
        tag.is_word
        and tag.text == config.param_tag
        and gap.is_whitespace
        and gap.text == " "
        and name.is_word
    ):
        return 3, f"- `{name.text}` "
    return None


def return_tag_rule(tokens: Sequence[Token], config: ConverterConfig) -> Consumed | None:
    """``@return word`` -> ``Returns: ``; only the tag and the gap are consumed."""
    if len(tokens) < 3:
        return None
    tag, gap, following = tokens[0], tokens[1], tokens[2]
    if tag.is_word and tag.text == config.return_tag and gap.is_whitespace and following.is_word:
        return 2, f"{config.return_label} "
    return None


def symbol_reference_rule(
    tokens: Sequence[Token], config: ConverterConfig
) -> Consumed | None:
    token = tokens[0]
    if not token.is_word or not token.text.startswith(config.symbol_prefix):
        return None
    reference = token.text[len(config.symbol_prefix) :]
    converted = convert_symbol_reference(reference, config.scope_separator)
    return 1, f"[`{converted}`]"


def autolink_rule(tokens: Sequence[Token], config: ConverterConfig) -> Consumed | None:
    token = tokens[0]
    if token.is_word and token.text.startswith(tuple(config.autolink_prefixes)):
        return 1, f"<{token.text}>"
    return None


def boolean_rule(tokens: Sequence[Token], config: ConverterConfig) -> Consumed | None:
    token = tokens[0]
    if token.is_word and token.text in ("true", "false"):
        return 1, f"`{token.text}`"
    return None


def function_call_rule(tokens: Sequence[Token], config: ConverterConfig) -> Consumed | None:
    token = tokens[0]
    if not token.is_word:
        return None
    converted = convert_c_function(token.text)
    if converted is None:
        return None
    return 1, f"`{converted}`"


def passthrough_rule(tokens: Sequence[Token], config: ConverterConfig) -> Consumed | None:
    # Words, whitespace and separators that nothing else claimed.
    return 1, tokens[0].text


RULES: List[Rule] = [
    param_tag_rule,
    return_tag_rule,
    symbol_reference_rule,
    autolink_rule,
    boolean_rule,
    function_call_rule,
    passthrough_rule,
]


def consume_tokens(
    tokens: Sequence[Token], config: ConverterConfig | None = None
) -> Consumed:
    """Apply the first matching rule to the head of ``tokens``."""
    if not tokens:
        raise ConverterInternalError("Token rewriting reached an empty token sequence")
    cfg = config or ConverterConfig()
    for rule in RULES:
        result = rule(tokens, cfg)
        if result is not None:
            return result
    raise ConverterInternalError(f"No rule matched token {tokens[0]!r}")


def process_tokens(tokens: Sequence[Token], config: ConverterConfig | None = None) -> str:
    """Rewrite the whole token stream, left to right."""
    cfg = config or ConverterConfig()
    fragments: List[str] = []
    current = 0
    while current != len(tokens):
        consumed, fragment = consume_tokens(tokens[current : current + LOOKAHEAD], cfg)
        current += consumed
        if current > len(tokens):
            raise ConverterInternalError("Token rewriting consumed past the end of the stream")
        fragments.append(fragment)
    return "".join(fragments)


def convert_c_function(word: str) -> str | None:
    """``getBounds()`` -> ``get_bounds()``; None unless the name is lowerCamelCase."""
    if not word.endswith("()"):
        return None
    name = word[: -len("()")]
    if not is_lower_camel_case(name):
        return None
    return to_snake_case(name) + "()"


def convert_symbol_reference(reference: str, scope_separator: str = "::") -> str:
    """Convert ``Path::Verb`` to ``path::Verb`` and ``Path::updateBoundsCache``
    to ``Path::update_bounds_cache``; anything else is returned unchanged."""
    type_name, found, sub_name = reference.partition(scope_separator)
    if not found:
        return reference
    if is_upper_camel_case(sub_name):
        return f"{to_snake_case(type_name)}{scope_separator}{sub_name}"
    if is_lower_camel_case(sub_name):
        return f"{type_name}{scope_separator}{to_snake_case(sub_name)}"
    return reference
