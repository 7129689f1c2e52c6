#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_escape.py
"""Unit and property-based tests for LaTeX escaping and delimiter selection.

Test Coverage:
- Special character substitution table
- Smart quote toggling across calls
- Basic mode passthrough of double quotes
- Property: reversing the substitutions restores the input
- Property: the selected delimiter never occurs in the literal
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ast2latex.constants import LATEX_QUOTE_CLOSE, LATEX_QUOTE_OPEN, LATEX_SPECIAL_CHARS
from ast2latex.utils.escape import LatexEscaper, escape_latex, select_inline_delimiter

SPECIAL_ALPHABET = "".join(LATEX_SPECIAL_CHARS) + '"'

# Every candidate delimiter: '!' .. ')' then '+' .. DEL
ALL_DELIMITERS = "".join(chr(c) for c in range(ord("!"), ord("*"))) + "".join(chr(c) for c in range(ord("+"), 128))

_REVERSE_TABLE = {escaped: char for char, escaped in LATEX_SPECIAL_CHARS.items()}
_REVERSE_RE = re.compile(
    "|".join(re.escape(token) for token in sorted([*_REVERSE_TABLE, LATEX_QUOTE_OPEN], key=len, reverse=True))
    + "|"
    + re.escape(LATEX_QUOTE_CLOSE)
)


def _unescape(escaped: str) -> str:
    """Reverse the escaper's substitutions, longest token first."""

    def _replace(match: re.Match) -> str:
        token = match.group(0)
        if token in (LATEX_QUOTE_OPEN, LATEX_QUOTE_CLOSE):
            return '"'
        return _REVERSE_TABLE[token]

    return _REVERSE_RE.sub(_replace, escaped)


@pytest.mark.unit
class TestEscapeTable:
    """Tests for the fixed substitution table."""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("#", r"\#"),
            ("$", r"\$"),
            ("%", r"\%"),
            ("&", r"\&"),
            ("_", r"\_"),
            ("{", r"\{"),
            ("}", r"\}"),
            ("~", r"\textasciitilde{}"),
            ("\\", r"\textbackslash{}"),
        ],
    )
    def test_special_characters(self, char: str, expected: str) -> None:
        """Test each special character substitution."""
        assert escape_latex(char) == expected

    def test_plain_text_unchanged(self) -> None:
        """Test that ordinary text passes through."""
        assert escape_latex("Hello, World! (1+2=3) ^ <>") == "Hello, World! (1+2=3) ^ <>"

    def test_non_ascii_unchanged(self) -> None:
        """Test that non-ASCII text passes through."""
        assert escape_latex("Grüße – 日本語") == "Grüße – 日本語"

    def test_substitutions_not_rescanned(self) -> None:
        """Test that replacement text is not escaped again."""
        assert escape_latex("\\{") == r"\textbackslash{}\{"

    def test_empty_string(self) -> None:
        """Test escaping an empty string."""
        assert escape_latex("") == ""

    def test_mixed_text(self) -> None:
        """Test a realistic sentence."""
        assert escape_latex("Save 50% on C# & F_1") == r"Save 50\% on C\# \& F\_1"


@pytest.mark.unit
class TestSmartQuotes:
    """Tests for double quote handling."""

    def test_quote_pair(self) -> None:
        """Test that a quote pair becomes an enquote span."""
        assert escape_latex('say "hi" now') == r"say \enquote{hi} now"

    def test_state_persists_across_calls(self) -> None:
        """Test that an open quote is closed by a later call."""
        escaper = LatexEscaper()
        assert escaper.escape('"open') == r"\enquote{open"
        assert escaper.quoted is True
        assert escaper.escape(" middle ") == " middle "
        assert escaper.escape('close"') == "close}"
        assert escaper.quoted is False

    def test_reset_closes_state(self) -> None:
        """Test that reset() forgets an open quote."""
        escaper = LatexEscaper()
        escaper.escape('"dangling')
        escaper.reset()
        assert escaper.escape('"x"') == r"\enquote{x}"

    def test_separate_escapers_are_independent(self) -> None:
        """Test that quote state is per escaper instance."""
        first = LatexEscaper()
        second = LatexEscaper()
        first.escape('"')
        assert second.escape('"') == r"\enquote{"

    def test_basic_mode_passes_quotes(self) -> None:
        """Test that basic mode leaves double quotes alone."""
        escaper = LatexEscaper("basic")
        assert escaper.escape('"a" & b') == r'"a" \& b'
        assert escaper.quoted is False

    def test_invalid_mode(self) -> None:
        """Test that an unknown mode is rejected."""
        with pytest.raises(ValueError, match="Invalid escape mode"):
            LatexEscaper("fancy")  # type: ignore[arg-type]


@pytest.mark.unit
class TestEscapeProperties:
    """Property-based tests for the escaper."""

    @given(st.text(alphabet=SPECIAL_ALPHABET, max_size=60))
    def test_round_trip_over_special_alphabet(self, text: str) -> None:
        """Test that reversing the substitutions restores the original text."""
        assert _unescape(escape_latex(text)) == text

    @given(st.text(alphabet=SPECIAL_ALPHABET + "abc 123", max_size=60))
    def test_round_trip_with_ordinary_text(self, text: str) -> None:
        """Test the round trip with ordinary characters mixed in."""
        assert _unescape(escape_latex(text)) == text

    @given(st.text(max_size=80))
    def test_no_raw_specials_survive(self, text: str) -> None:
        """Test that no unescaped special character is left in the output."""
        escaped = escape_latex(text, mode="basic")
        stripped = escaped
        for replacement in LATEX_SPECIAL_CHARS.values():
            stripped = stripped.replace(replacement, "")
        assert not any(char in stripped for char in LATEX_SPECIAL_CHARS)

    @given(st.text(alphabet='"x', max_size=40))
    def test_quote_state_matches_parity(self, text: str) -> None:
        """Test that the quote flag tracks the parity of quotes seen."""
        escaper = LatexEscaper()
        escaper.escape(text)
        assert escaper.quoted is (text.count('"') % 2 == 1)


@pytest.mark.unit
class TestSelectInlineDelimiter:
    """Tests for inline code delimiter selection."""

    def test_backtick_literal_selects_bang(self) -> None:
        """Test that the first candidate is used when free."""
        assert select_inline_delimiter("a`b") == "!"

    def test_skips_used_characters(self) -> None:
        """Test that characters in the literal are skipped in order."""
        assert select_inline_delimiter('!"#') == "$"

    def test_star_never_selected(self) -> None:
        """Test that '*' is skipped after exhausting the first band."""
        assert select_inline_delimiter("!\"#$%&'()") == "+"

    def test_space_never_selected(self) -> None:
        """Test that space is not a candidate."""
        assert select_inline_delimiter(" ") == "!"

    def test_last_candidate_is_del(self) -> None:
        """Test that DEL is the final candidate."""
        assert select_inline_delimiter(ALL_DELIMITERS[:-1]) == "\x7f"

    def test_all_candidates_used(self) -> None:
        """Test that no delimiter is found when every candidate occurs."""
        assert select_inline_delimiter(ALL_DELIMITERS) is None

    def test_empty_literal(self) -> None:
        """Test an empty literal."""
        assert select_inline_delimiter("") == "!"

    @given(st.text(alphabet=st.characters(min_codepoint=0, max_codepoint=0x10FFFF), max_size=200))
    def test_delimiter_absent_from_literal(self, literal: str) -> None:
        """Test that any returned delimiter does not occur in the literal."""
        delimiter = select_inline_delimiter(literal)
        if delimiter is not None:
            assert delimiter not in literal
            assert delimiter not in (" ", "*")

    @given(st.sets(st.sampled_from(ALL_DELIMITERS), max_size=len(ALL_DELIMITERS) - 1))
    def test_found_when_a_candidate_is_free(self, used: set) -> None:
        """Test that a delimiter exists whenever fewer than all candidates are used."""
        literal = "".join(sorted(used))
        delimiter = select_inline_delimiter(literal)
        assert delimiter is not None
        assert delimiter == min(set(ALL_DELIMITERS) - used, key=ALL_DELIMITERS.index)
