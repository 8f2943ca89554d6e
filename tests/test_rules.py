"""Tests for loginkit.validation.rules — rule factories and chains."""

import pytest

from loginkit.validation import messages
from loginkit.validation.rules import (
    PERMISSIVE_EMAIL,
    STRICT_EMAIL,
    Rule,
    RuleChain,
    age_chain,
    at_least,
    email_chain,
    full_name_chain,
    matches,
    min_length,
    min_tokens,
    non_empty,
    password_chain,
    tokens,
    tokens_match,
)

# ---------------------------------------------------------------------------
# Individual rule tests
# ---------------------------------------------------------------------------


class TestRule:
    def test_pass_returns_none(self) -> None:
        rule = Rule("always", lambda v: True, "never shown")
        assert rule.check("x") is None

    def test_fail_returns_message(self) -> None:
        rule = Rule("never", lambda v: False, "Falhou.")
        assert rule.check("x") == "Falhou."

    def test_empty_message_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty message"):
            Rule("bad", lambda v: True, "")


class TestNonEmpty:
    def test_empty(self) -> None:
        assert non_empty("Obrigatório.").check("") == "Obrigatório."

    def test_whitespace_is_not_empty(self) -> None:
        assert non_empty("Obrigatório.").check(" ") is None


class TestMinLength:
    def test_at_minimum(self) -> None:
        assert min_length(3, "curto").check("abc") is None

    def test_below_minimum(self) -> None:
        assert min_length(3, "curto").check("ab") == "curto"


class TestMatches:
    def test_whole_value_must_match(self) -> None:
        rule = matches(r"[0-9]+", "só dígitos")
        assert rule.check("123") is None
        assert rule.check("123a") == "só dígitos"

    def test_trailing_newline_rejected(self) -> None:
        assert matches(r"[0-9]+", "só dígitos").check("12\n") == "só dígitos"

    def test_custom_name(self) -> None:
        assert matches(r"x", "m", name="custom").name == "custom"


class TestTokens:
    def test_min_tokens_counts_whitespace_runs(self) -> None:
        rule = min_tokens(2, "dois")
        assert rule.check("  a \t  b  ") is None
        assert rule.check("  a   ") == "dois"
        assert rule.check("") == "dois"

    def test_tokens_match_every_token(self) -> None:
        rule = tokens_match(r"[a-z]+", "letras")
        assert rule.check("ab cd") is None
        assert rule.check("ab c1") == "letras"

    @pytest.mark.parametrize("separator", ["\u00a0", "\u2003", "\u2028", "\u3000", "\ufeff"])
    def test_unicode_separators_split(self, separator: str) -> None:
        assert tokens(f"Maria{separator}Silva") == ["Maria", "Silva"]

    @pytest.mark.parametrize("separator", ["\x1c", "\x1f", "\x85"])
    def test_control_separators_do_not_split(self, separator: str) -> None:
        assert tokens(f"Maria{separator}Silva") == [f"Maria{separator}Silva"]

    def test_full_name_with_byte_order_mark(self) -> None:
        assert full_name_chain().evaluate("Maria\ufeffSilva") is None
        assert full_name_chain().evaluate("Maria\x1cSilva") == messages.FULL_NAME_REQUIRED


class TestAtLeast:
    def test_boundary(self) -> None:
        rule = at_least(18, "menor")
        assert rule.check("18") is None
        assert rule.check("17") == "menor"

    def test_leading_zeros(self) -> None:
        assert at_least(18, "menor").check("018") is None

    def test_non_digits_fail_without_raising(self) -> None:
        assert at_least(18, "menor").check("abc") == "menor"
        assert at_least(18, "menor").check("") == "menor"


# ---------------------------------------------------------------------------
# RuleChain
# ---------------------------------------------------------------------------


class TestRuleChain:
    def test_first_failure_wins(self) -> None:
        chain = RuleChain(
            Rule("a", lambda v: False, "first"),
            Rule("b", lambda v: False, "second"),
        )
        assert chain.evaluate("x") == "first"

    def test_stops_at_first_failure(self) -> None:
        seen: list[str] = []

        def spy(value: str) -> bool:
            seen.append(value)
            return True

        chain = RuleChain(Rule("a", lambda v: False, "first"), Rule("spy", spy, "never"))
        chain.evaluate("x")
        assert seen == []

    def test_all_pass(self) -> None:
        assert RuleChain(Rule("a", lambda v: True, "m")).evaluate("x") is None

    def test_empty_chain_passes(self) -> None:
        assert RuleChain().evaluate("") is None

    def test_names_in_order(self) -> None:
        assert age_chain().names == ("non_empty", "digits", "at_least")

    def test_len_and_iter(self) -> None:
        chain = email_chain()
        assert len(chain) == 2
        assert [rule.name for rule in chain] == ["min_length", "email"]


# ---------------------------------------------------------------------------
# Login chains
# ---------------------------------------------------------------------------


class TestFullNameChain:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("John", messages.FULL_NAME_REQUIRED),
            ("", messages.FULL_NAME_REQUIRED),
            ("   ", messages.FULL_NAME_REQUIRED),
            ("John Smith", None),
            ("  John   Smith  ", None),
            ("John3 Smith", messages.FULL_NAME_LETTERS_ONLY),
            ("João da Conceição", None),
            ("Zoë Ørsted", None),
            ("Mary-Jane Watson", messages.FULL_NAME_LETTERS_ONLY),
            ("Ana × Silva", messages.FULL_NAME_LETTERS_ONLY),
            ("3 4", messages.FULL_NAME_LETTERS_ONLY),
        ],
    )
    def test_messages(self, value: str, expected: str | None) -> None:
        assert full_name_chain().evaluate(value) == expected


class TestAgeChain:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", "Informe sua idade."),
            ("17", "Idade mínima: 18 anos."),
            ("0", "Idade mínima: 18 anos."),
            ("18", None),
            ("018", None),
            ("120", None),
        ],
    )
    def test_messages(self, value: str, expected: str | None) -> None:
        assert age_chain().evaluate(value) == expected

    def test_unnormalized_input_hits_pattern_rule(self) -> None:
        assert age_chain().evaluate("1a") == "Idade inválida."

    def test_custom_minimum(self) -> None:
        assert age_chain(21).evaluate("20") == "Idade mínima: 21 anos."
        assert age_chain(21).evaluate("21") is None


class TestEmailChain:
    def test_short_value_reports_length(self) -> None:
        assert email_chain().evaluate("a@b") == "Mínimo de 5 caracteres."

    def test_long_enough_but_malformed(self) -> None:
        assert email_chain().evaluate("abcdef") == "Email inválido."

    def test_valid(self) -> None:
        assert email_chain().evaluate("user@example.com") is None

    def test_custom_length(self) -> None:
        assert email_chain(8).evaluate("a@b.com") == "Mínimo de 8 caracteres."

    def test_permissive_pattern(self) -> None:
        assert email_chain(pattern="permissive").evaluate("user@localhost.c") is None
        assert email_chain(pattern="strict").evaluate("user@localhost.c") == "Email inválido."


class TestEmailPatterns:
    @pytest.mark.parametrize(
        "value",
        [
            "user@example.com",
            "first.last@sub.domain.org",
            "user+tag@example.co",
            '"john doe"@example.com',
            "user@[192.168.0.1]",
        ],
    )
    def test_strict_accepts(self, value: str) -> None:
        assert STRICT_EMAIL.fullmatch(value)

    @pytest.mark.parametrize(
        "value",
        [
            "user@example",
            "user@example.c",
            "user@@example.com",
            "us er@example.com",
            "user.@example.com",
            "user@exa_mple.com",
            "user@example.com\n",
        ],
    )
    def test_strict_rejects(self, value: str) -> None:
        assert STRICT_EMAIL.fullmatch(value) is None

    def test_permissive_accepts_what_strict_rejects(self) -> None:
        assert PERMISSIVE_EMAIL.fullmatch("user@exa_mple.c")
        assert STRICT_EMAIL.fullmatch("user@exa_mple.c") is None

    def test_permissive_rejects_whitespace(self) -> None:
        assert PERMISSIVE_EMAIL.fullmatch("us er@example.com") is None


class TestPasswordChain:
    def test_short(self) -> None:
        assert password_chain().evaluate("12345") == "Senha precisa de 6+ caracteres."

    def test_at_minimum(self) -> None:
        assert password_chain().evaluate("123456") is None

    def test_custom_minimum(self) -> None:
        assert password_chain(8).evaluate("1234567") == "Senha precisa de 8+ caracteres."
