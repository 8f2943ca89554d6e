"""Validation rules and rule chains.

A rule is a named predicate over a *normalized* value plus the fixed
message reported when the predicate fails::

    Rule("min_length", lambda v: len(v) >= 6, "Senha precisa de 6+ caracteres.")

Parameterized rules are factory functions that return a ``Rule``::

    def min_length(n: int, message: str) -> Rule:
        return Rule("min_length", lambda v: len(v) >= n, message)

A ``RuleChain`` evaluates its rules in order and stops at the first
failure, so the first failing rule's message wins.
"""

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from loginkit.validation import messages

Predicate = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class Rule:
    """A single check: ``predicate(value)`` must hold, else ``message``.

    ``name`` identifies the rule in schema errors and CLI listings.
    """

    name: str
    predicate: Predicate
    message: str

    def __post_init__(self) -> None:
        if not self.message:
            msg = f"Rule {self.name!r} has an empty message"
            raise ValueError(msg)

    def check(self, value: str) -> str | None:
        """Return the message if the rule fails, or None if it passes."""
        if self.predicate(value):
            return None
        return self.message


class RuleChain:
    """An ordered, short-circuiting sequence of rules for one field."""

    __slots__ = ("_rules",)

    def __init__(self, *rules: Rule) -> None:
        self._rules = rules

    def evaluate(self, value: str) -> str | None:
        """Return the first failing rule's message, or None if all pass."""
        for rule in self._rules:
            error = rule.check(value)
            if error is not None:
                return error
        return None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleChain({', '.join(self.names)})"


# ---------------------------------------------------------------------------
# Presence / length
# ---------------------------------------------------------------------------


def non_empty(message: str) -> Rule:
    """Value must not be the empty string."""
    return Rule("non_empty", lambda value: value != "", message)


def min_length(n: int, message: str) -> Rule:
    """String must be at least *n* characters."""
    return Rule("min_length", lambda value: len(value) >= n, message)


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Token separators: ASCII whitespace, Unicode space separators, line and
# paragraph separators, and U+FEFF. Information separators (U+001C-U+001F)
# and NEL (U+0085) are not separators, unlike ``str.split()``.
_WHITESPACE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def tokens(value: str) -> list[str]:
    """Split on whitespace runs; leading and trailing whitespace yields no tokens."""
    return [token for token in _WHITESPACE.split(value) if token]


def matches(pattern: str | re.Pattern[str], message: str, *, name: str = "matches") -> Rule:
    """Whole value must match the given regex pattern."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Rule(name, lambda value: compiled.fullmatch(value) is not None, message)


def min_tokens(n: int, message: str) -> Rule:
    """Value must split on whitespace runs into at least *n* tokens.

    Leading and trailing whitespace never produce empty tokens.
    """
    return Rule("min_tokens", lambda value: len(tokens(value)) >= n, message)


def tokens_match(pattern: str | re.Pattern[str], message: str) -> Rule:
    """Every whitespace-separated token must match *pattern* in full."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check(value: str) -> bool:
        return all(compiled.fullmatch(token) for token in tokens(value))

    return Rule("tokens_match", check, message)


# ---------------------------------------------------------------------------
# Numeric
# ---------------------------------------------------------------------------


def at_least(n: int, message: str) -> Rule:
    """Digit string must parse to an integer >= *n* (leading zeros allowed)."""

    def check(value: str) -> bool:
        if not (value.isascii() and value.isdigit()):
            return False
        return int(value) >= n

    return Rule("at_least", check, message)


# ---------------------------------------------------------------------------
# Login form chains
# ---------------------------------------------------------------------------

# ASCII letters plus Latin-1 accented letters; excludes × (U+00D7) and ÷ (U+00F7)
LETTERS_ONLY = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ]+")

DIGITS = re.compile(r"[0-9]+")

# Local part of dot-separated atoms or a quoted string; domain of labels with
# an alphabetic TLD, or a bracketed IPv4 literal.
STRICT_EMAIL = re.compile(
    r'(?:[^<>()\[\]\\.,;:\s@"]+(?:\.[^<>()\[\]\\.,;:\s@"]+)*|".+")'
    r"@"
    r"(?:\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\]|(?:[a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,})"
)

PERMISSIVE_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

EMAIL_PATTERNS: dict[str, re.Pattern[str]] = {
    "strict": STRICT_EMAIL,
    "permissive": PERMISSIVE_EMAIL,
}


def full_name_chain() -> RuleChain:
    return RuleChain(
        min_tokens(2, messages.FULL_NAME_REQUIRED),
        tokens_match(LETTERS_ONLY, messages.FULL_NAME_LETTERS_ONLY),
    )


def age_chain(min_age: int = 18) -> RuleChain:
    """Chain for the age field; expects digits-only input.

    The pattern check is redundant after ``digits_only`` but keeps the
    chain correct when run against unnormalized input.
    """
    return RuleChain(
        non_empty(messages.AGE_REQUIRED),
        matches(DIGITS, messages.AGE_INVALID, name="digits"),
        at_least(min_age, messages.age_minimum(min_age)),
    )


def email_chain(min_chars: int = 5, pattern: str = "strict") -> RuleChain:
    return RuleChain(
        min_length(min_chars, messages.email_min_length(min_chars)),
        matches(EMAIL_PATTERNS[pattern], messages.EMAIL_INVALID, name="email"),
    )


def password_chain(min_chars: int = 6) -> RuleChain:
    return RuleChain(min_length(min_chars, messages.password_min_length(min_chars)))
