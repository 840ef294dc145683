from comment_converter.models import Token, TokenClass, separator, whitespace, word
from comment_converter.tokenization import tokenize


def test_tokenize_splits_into_maximal_runs():
    tokens = tokenize("@param foo the foo value.")

    assert tokens == [
        word("@param"),
        whitespace(" "),
        word("foo"),
        whitespace(" "),
        word("the"),
        whitespace(" "),
        word("foo"),
        whitespace(" "),
        word("value"),
        separator("."),
    ]


def test_tokenize_groups_separators_and_unicode_whitespace():
    tokens = tokenize("a,;b \n\tc...")

    assert [token.kind for token in tokens] == [
        TokenClass.WORD,
        TokenClass.SEPARATOR,
        TokenClass.WORD,
        TokenClass.WHITESPACE,
        TokenClass.WORD,
        TokenClass.SEPARATOR,
    ]
    assert tokens[1].text == ",;"
    assert tokens[3].text == " \n\t"


def test_tokenize_is_lossless():
    text = "  Returns SkPath::Verb, or getBounds();\n\n see https://example.com/x  "
    tokens = tokenize(text)

    assert "".join(token.text for token in tokens) == text
    assert all(
        previous.kind is not current.kind for previous, current in zip(tokens, tokens[1:])
    )


def test_tokenize_empty_text():
    assert tokenize("") == []


def test_classify_is_context_free():
    assert TokenClass.classify(".") is TokenClass.SEPARATOR
    assert TokenClass.classify(" ") is TokenClass.WHITESPACE
    assert TokenClass.classify(":") is TokenClass.WORD
    assert Token(TokenClass.WORD, "x").is_word


def test_only_unicode_white_space_separates_words():
    # Information separators U+001C..U+001F are not White_Space.
    assert tokenize("a\x1fb\x1cc") == [word("a\x1fb\x1cc")]
    assert tokenize("a\u3000b\xa0c") == [
        word("a"),
        whitespace("\u3000"),
        word("b"),
        whitespace("\xa0"),
        word("c"),
    ]
