"""Input normalizers — applied to raw input before any rule runs.

Each normalizer is a callable with the signature::

    def normalize(raw: str) -> str: ...

Normalizers are stateless, total (never raise on a string) and
idempotent: ``normalize(normalize(x)) == normalize(x)``.
"""

import re
from collections.abc import Callable

Normalizer = Callable[[str], str]

_NON_DIGITS = re.compile(r"[^0-9]")


def identity(raw: str) -> str:
    """Return the input unchanged (text, email and secret fields)."""
    return raw


def digits_only(raw: str) -> str:
    """Drop every character outside ``[0-9]``, keeping digit order.

    ``"1a8"`` becomes ``"18"``; ``"abc"`` becomes ``""``.
    Non-ASCII digits (e.g. Arabic-Indic) are dropped too.
    """
    return _NON_DIGITS.sub("", raw)
