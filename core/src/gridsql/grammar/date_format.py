"""Canonical date-format translation.

Non-native grammars receive date formats written in the canonical alphabet
(``gridsql.constants.DateToken``) and have to rewrite them into their own
format language before interpolating them into SQL.

Translation rules:
    1. Tokens are matched longest first, so a token that is a prefix of a
       longer one never splits it.
    2. The input is scanned once, left to right. Output of one substitution
       is never scanned again, and ``%%`` is consumed as a unit so ``%%Y``
       stays a literal percent followed by ``Y``.
    3. Anything that is not a known token is copied through as literal text.

Rule 3 is lenient on purpose: a typo such as ``%Q`` reaches the database
unchanged. ``find_unknown_tokens`` lets strict callers reject those formats
up front instead.
"""

import re
from functools import lru_cache
from typing import Iterable, List, Mapping, Pattern, Tuple

from gridsql.constants import CANONICAL_TOKENS, TOKEN_PREFIX

# Any prefix character followed by one more character, including a
# second prefix (the percent escape).
_TOKEN_SCAN = re.compile(re.escape(TOKEN_PREFIX) + r".", re.DOTALL)


def order_by_length(mapping: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Return mapping entries sorted by token length, longest first.

    The sort is stable, so tokens of equal length keep their mapping order.
    """
    return sorted(mapping.items(), key=lambda item: len(item[0]), reverse=True)


@lru_cache(maxsize=32)
def _compile(entries: Tuple[Tuple[str, str], ...]) -> Pattern[str]:
    alternation = "|".join(re.escape(token) for token, _ in entries)
    return re.compile(alternation)


def translate_date_format(date_format: str, mapping: Mapping[str, str]) -> str:
    """Translate a canonical date format with a token mapping.

    Args:
        date_format: Canonical format (e.g., '%d-%b-%Y')
        mapping: Canonical token -> native token

    Returns:
        Native format string (e.g., 'DD-Mon-YYYY' for PostgreSQL)

    Example:
        >>> translate_date_format("%d-%b-%Y", {"%d": "DD", "%b": "Mon", "%Y": "YYYY"})
        'DD-Mon-YYYY'
    """
    if not date_format or not mapping:
        return date_format

    entries = tuple(order_by_length(mapping))
    native = dict(entries)
    pattern = _compile(entries)
    return pattern.sub(lambda match: native[match.group(0)], date_format)


def find_unknown_tokens(date_format: str, known: Iterable[str] = CANONICAL_TOKENS) -> List[str]:
    """Return prefixed tokens in ``date_format`` that are not in ``known``.

    Tokens are read pairwise from left to right, so ``%%`` is one token.
    A trailing lone prefix character is reported as unknown.

    Args:
        date_format: Format to inspect
        known: Accepted tokens (defaults to the canonical alphabet)

    Returns:
        Unknown tokens in order of appearance, duplicates included
    """
    known_tokens = set(known)
    unknown = [token for token in _TOKEN_SCAN.findall(date_format) if token not in known_tokens]
    remainder = _TOKEN_SCAN.sub("", date_format)
    if remainder.endswith(TOKEN_PREFIX):
        unknown.append(TOKEN_PREFIX)
    return unknown
