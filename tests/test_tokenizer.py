from __future__ import annotations

import pytest

from modal_engine.errors import InvalidPatternConfiguration
from modal_engine.syntax import (
    DEFAULT_RULE_SET,
    RuleSet,
    Token,
    TokenKind,
    Tokenizer,
    classify,
)


def make_rule_set(**overrides: str) -> RuleSet:
    sources = {
        "keyword": r"^(fn|let|mut|pub|const|static)\b",
        "identifier": r"^[A-Za-z_][A-Za-z0-9_]*",
        "delimiter": r"^(\(|\)|\||\{|\}|\[|\]|;|:|,|<|>)",
        "literal": r'^(\"\")',
        "type": r"^[A-Z][A-Za-z0-9_]*",
        "extra": r"^(==|!=|<=|>=|=|\+|-|\*|/)",
        "function": r"^[98]",
        "comment": r"^thisshouldneverbematched",
    }
    sources.update(overrides)
    return RuleSet.compile(**sources)


@pytest.fixture
def tokenizer() -> Tokenizer:
    return Tokenizer(make_rule_set())


def non_whitespace(tokens: list[Token]) -> list[Token]:
    return [token for token in tokens if token.kind is not TokenKind.WHITESPACE]


def kinds(tokens: list[Token]) -> set[TokenKind]:
    return {token.kind for token in non_whitespace(tokens)}


def test_keywords(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("fn let mut pub const static")

    assert kinds(tokens) == {TokenKind.KEYWORD}
    assert len(non_whitespace(tokens)) == 6


def test_tokens_concatenate_back_to_line(tokenizer: Tokenizer) -> None:
    line = "fn let thing = 3;"

    tokens = tokenizer.classify(line)

    assert "".join(token.text for token in tokens) == line


def test_identifiers(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("hello world foo_bar x1 _hidden")

    assert kinds(tokens) == {TokenKind.IDENTIFIER}


def test_delimiters(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("( ) { } [ ] ; : , < > |")

    assert kinds(tokens) == {TokenKind.DELIMITER}


def test_types(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("String MyType HTTPResponse")

    assert kinds(tokens) == {TokenKind.TYPE}


def test_extra_operators(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("+ - * / = == != <=")

    assert kinds(tokens) == {TokenKind.EXTRA}


def test_full_snippet(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("pub fn greet(name: String) { let msg = name + 1; }")

    for expected in (
        ("pub", TokenKind.KEYWORD),
        ("fn", TokenKind.KEYWORD),
        ("greet", TokenKind.IDENTIFIER),
        ("name", TokenKind.IDENTIFIER),
        ("String", TokenKind.TYPE),
        ("=", TokenKind.EXTRA),
        ("+", TokenKind.EXTRA),
        ("{", TokenKind.DELIMITER),
        ("}", TokenKind.DELIMITER),
    ):
        assert expected in tokens


def test_unknown_tokens_are_single_characters(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("@$?")

    assert tokens == [
        ("@", TokenKind.UNKNOWN),
        ("$", TokenKind.UNKNOWN),
        ("?", TokenKind.UNKNOWN),
    ]


def test_whitespace_runs_are_single_tokens(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("fn  \tfoo")

    assert tokens == [
        ("fn", TokenKind.KEYWORD),
        ("  \t", TokenKind.WHITESPACE),
        ("foo", TokenKind.IDENTIFIER),
    ]


def test_empty_line_has_no_tokens(tokenizer: Tokenizer) -> None:
    assert tokenizer.classify("") == []


def test_rule_order_prefers_earlier_rules() -> None:
    tokenizer = Tokenizer(make_rule_set(comment=r"^//.*"))

    tokens = tokenizer.classify("// fn let")

    assert tokens == [("// fn let", TokenKind.COMMENT)]


def test_zero_length_match_falls_back_to_unknown() -> None:
    tokenizer = Tokenizer(make_rule_set(comment=r"^x*"))

    tokens = tokenizer.classify("@")

    assert tokens == [("@", TokenKind.UNKNOWN)]


def test_keyword_needs_word_boundary(tokenizer: Tokenizer) -> None:
    tokens = tokenizer.classify("fnord")

    assert tokens == [("fnord", TokenKind.IDENTIFIER)]


def test_default_rule_set_highlights_rust() -> None:
    tokens = classify('let name: &str = "hi"; // greet')

    assert ("let", TokenKind.KEYWORD) in tokens
    assert ("str", TokenKind.TYPE) in tokens
    assert ('"hi"', TokenKind.LITERAL) in tokens
    assert ("// greet", TokenKind.COMMENT) in tokens
    assert (":", TokenKind.DELIMITER) in tokens


def test_default_function_rule_requires_call() -> None:
    tokens = classify("main()")

    assert tokens[0] == ("main", TokenKind.FUNCTION)


def test_classify_uses_given_rule_set() -> None:
    custom = make_rule_set(keyword=r"^(def)\b")

    assert classify("def", custom) == [("def", TokenKind.KEYWORD)]
    assert classify("def", DEFAULT_RULE_SET) == [("def", TokenKind.IDENTIFIER)]


def test_classify_text_splits_lines(tokenizer: Tokenizer) -> None:
    lines = tokenizer.classify_text("fn\nfoo")

    assert lines == [[("fn", TokenKind.KEYWORD)], [("foo", TokenKind.IDENTIFIER)]]


def test_invalid_pattern_raises_with_rule_name() -> None:
    with pytest.raises(InvalidPatternConfiguration) as excinfo:
        make_rule_set(keyword=r"^(fn")

    assert excinfo.value.rule == "keyword"


def test_keyword_beats_identifier() -> None:
    tokenizer = Tokenizer(make_rule_set(keyword="fn|let", identifier="[A-Za-z_]+"))

    assert tokenizer.classify("fn foo") == [
        ("fn", TokenKind.KEYWORD),
        (" ", TokenKind.WHITESPACE),
        ("foo", TokenKind.IDENTIFIER),
    ]


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "fn main() { println!(\"héllo\"); } // done",
        "@@ ?? ~~ \t ünïcödé",
        "let x: Vec<u8> = vec![1, 2, 3];",
    ],
)
def test_tokenization_is_lossless(line: str) -> None:
    for tokens in (classify(line), Tokenizer(make_rule_set()).classify(line)):
        assert "".join(token.text for token in tokens) == line
