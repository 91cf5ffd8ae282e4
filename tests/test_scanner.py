"""Tests for the Lox scanner."""

from typing import List

import pytest

from loxi.diagnostics import Diagnostic, Diagnostics
from loxi.errors import UnexpectedCharacter, UnterminatedString
from loxi.literal import LiteralValue
from loxi.scanner import Scanner, scan
from loxi.token import Token
from loxi.token_type import TokenType

# ###############
# Test Helpers
# ###############


def _tokens(source: str) -> List[Token]:
    """Return all tokens including the terminal EOF, asserting no errors."""
    tokens, diagnostics = scan(source)
    assert diagnostics == []
    return tokens


def _types(source: str) -> List[TokenType]:
    """Return the token types for all tokens except EOF."""
    tokens = _tokens(source)
    assert tokens[-1].type is TokenType.EOF
    return [token.type for token in tokens[:-1]]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_source_produces_eof(self) -> None:
        tokens = _tokens("")
        assert tokens == [Token(TokenType.EOF, "", None, 1)]

    def test_whitespace_only_produces_eof(self) -> None:
        tokens = _tokens(" \t\r ")
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.EOF

    def test_comment_only_produces_eof(self) -> None:
        tokens = _tokens("// nothing to see here")
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.EOF

    def test_eof_is_on_last_line(self) -> None:
        tokens = _tokens("1\n2\n")
        assert tokens[-1] == Token(TokenType.EOF, "", None, 3)

    def test_exactly_one_eof(self) -> None:
        tokens = _tokens("1 + 2")
        assert [token.type for token in tokens].count(TokenType.EOF) == 1


# ###############
# Single Tokens
# ###############


class TestSingleTokens:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("(", TokenType.LEFT_PAREN),
            (")", TokenType.RIGHT_PAREN),
            ("{", TokenType.LEFT_BRACE),
            ("}", TokenType.RIGHT_BRACE),
            (",", TokenType.COMMA),
            (".", TokenType.DOT),
            ("-", TokenType.MINUS),
            ("+", TokenType.PLUS),
            (";", TokenType.SEMICOLON),
            ("/", TokenType.SLASH),
            ("*", TokenType.STAR),
            ("!", TokenType.BANG),
            ("!=", TokenType.BANG_EQUAL),
            ("=", TokenType.EQUAL),
            ("==", TokenType.EQUAL_EQUAL),
            (">", TokenType.GREATER),
            (">=", TokenType.GREATER_EQUAL),
            ("<", TokenType.LESS),
            ("<=", TokenType.LESS_EQUAL),
            ("and", TokenType.AND),
            ("class", TokenType.CLASS),
            ("else", TokenType.ELSE),
            ("false", TokenType.FALSE),
            ("fun", TokenType.FUN),
            ("for", TokenType.FOR),
            ("if", TokenType.IF),
            ("nil", TokenType.NIL),
            ("or", TokenType.OR),
            ("print", TokenType.PRINT),
            ("return", TokenType.RETURN),
            ("super", TokenType.SUPER),
            ("this", TokenType.THIS),
            ("true", TokenType.TRUE),
            ("var", TokenType.VAR),
            ("while", TokenType.WHILE),
        ],
    )
    def test_lexeme_scans_to_one_token(
        self, source: str, expected_type: TokenType
    ) -> None:
        tokens = _tokens(source)
        assert tokens == [
            Token(expected_type, source, None, 1),
            Token(TokenType.EOF, "", None, 1),
        ]


# ###############
# Operators
# ###############


class TestOperators:
    def test_two_char_operator_is_greedy(self) -> None:
        assert _types("!==") == [TokenType.BANG_EQUAL, TokenType.EQUAL]

    def test_separated_operators_stay_single(self) -> None:
        assert _types("! =") == [TokenType.BANG, TokenType.EQUAL]

    def test_comment_stops_at_newline(self) -> None:
        tokens = _tokens("1 // one\n2")
        assert [(token.lexeme, token.line) for token in tokens] == [
            ("1", 1),
            ("2", 2),
            ("", 2),
        ]

    def test_slash_followed_by_other(self) -> None:
        assert _types("4 / 2") == [TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER]


# ###############
# Numbers
# ###############


class TestNumbers:
    def test_integer(self) -> None:
        token = _tokens("42")[0]
        assert token == Token(TokenType.NUMBER, "42", LiteralValue.number(42.0), 1)

    def test_fraction(self) -> None:
        token = _tokens("123.456")[0]
        assert token.lexeme == "123.456"
        assert token.literal == LiteralValue.number(123.456)

    def test_trailing_dot_is_separate(self) -> None:
        tokens = _tokens("10.")
        assert tokens == [
            Token(TokenType.NUMBER, "10", LiteralValue.number(10.0), 1),
            Token(TokenType.DOT, ".", None, 1),
            Token(TokenType.EOF, "", None, 1),
        ]

    def test_leading_dot_is_separate(self) -> None:
        assert _types(".5") == [TokenType.DOT, TokenType.NUMBER]

    def test_second_dot_starts_new_token(self) -> None:
        tokens = _tokens("1.2.3")
        assert [token.lexeme for token in tokens] == ["1.2", ".", "3", ""]


# ###############
# Strings
# ###############


class TestStrings:
    def test_literal_excludes_quotes(self) -> None:
        token = _tokens('"foo"')[0]
        assert token == Token(TokenType.STRING, '"foo"', LiteralValue.string("foo"), 1)

    def test_empty_string(self) -> None:
        token = _tokens('""')[0]
        assert token.literal == LiteralValue.string("")

    def test_no_escape_processing(self) -> None:
        token = _tokens('"a\\nb"')[0]
        assert token.literal == LiteralValue.string("a\\nb")

    def test_multiline_string_starts_on_first_line(self) -> None:
        tokens = _tokens('"foo\nbar" 1')
        assert tokens[0].line == 1
        assert tokens[0].literal == LiteralValue.string("foo\nbar")
        assert tokens[1].line == 2

    def test_unterminated_string(self) -> None:
        tokens, diagnostics = scan('"abc')
        assert tokens == [Token(TokenType.EOF, "", None, 1)]
        assert diagnostics == [Diagnostic(1, "", "Unterminated string.")]

    def test_unterminated_string_reports_last_line(self) -> None:
        scanner = Scanner('1\n"abc\ndef')
        tokens = scanner.scan_tokens()
        assert [token.type for token in tokens] == [TokenType.NUMBER, TokenType.EOF]
        [error] = scanner.diagnostics.errors
        assert isinstance(error, UnterminatedString)
        assert error.line == 3


# ###############
# Identifiers
# ###############


class TestIdentifiers:
    @pytest.mark.parametrize("source", ["foo", "_foo", "foo_bar1", "orchid", "classy"])
    def test_identifier(self, source: str) -> None:
        tokens = _tokens(source)
        assert tokens[0] == Token(TokenType.IDENTIFIER, source, None, 1)

    def test_keywords_are_case_sensitive(self) -> None:
        assert _types("And NIL") == [TokenType.IDENTIFIER, TokenType.IDENTIFIER]

    def test_digit_ends_number_not_identifier(self) -> None:
        assert _types("1abc") == [TokenType.NUMBER, TokenType.IDENTIFIER]


# ###############
# Errors
# ###############


class TestErrors:
    def test_unexpected_character_is_skipped(self) -> None:
        tokens, diagnostics = scan("1 @ 2")
        assert [token.lexeme for token in tokens] == ["1", "2", ""]
        assert diagnostics == [Diagnostic(1, "", "Unexpected character.")]

    def test_errors_accumulate(self) -> None:
        diagnostics = Diagnostics()
        Scanner("@\n#\n$", diagnostics).scan_tokens()
        assert [error.line for error in diagnostics.errors] == [1, 2, 3]
        assert [error.char for error in diagnostics.errors] == ["@", "#", "$"]
        assert all(isinstance(error, UnexpectedCharacter) for error in diagnostics.errors)

    def test_non_ascii_letter_is_unexpected(self) -> None:
        tokens, diagnostics = scan("é")
        assert len(tokens) == 1
        assert len(diagnostics) == 1

    def test_scan_continues_after_error(self) -> None:
        tokens, diagnostics = scan('# "abc')
        assert len(tokens) == 1
        assert [diagnostic.message for diagnostic in diagnostics] == [
            "Unexpected character.",
            "Unterminated string.",
        ]
