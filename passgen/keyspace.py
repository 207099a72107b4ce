"""
Keyspace construction: turn selector characters into a concrete alphabet.
"""

from __future__ import annotations

from typing import Mapping

from loguru import logger

from .constants import CHARACTER_SETS, DEFAULT_SETS, MAX_RANDOM_RANGE
from .errors import InvalidKeyspace, KeyspaceOverflow


def error_too_long(variable: str) -> str:
    """
    Message used when a value is longer than the sampling range allows
    and the default is used instead.
    """
    return (
        f"Sorry the {variable} is too long. "
        f"The maximum length is {MAX_RANDOM_RANGE} characters. "
        f"The default {variable} is currently being used."
    )


def has_known_selector(selectors: object, sets: Mapping[str, str] = CHARACTER_SETS) -> bool:
    """Return True if `selectors` is a string with at least one key of `sets`."""
    if not isinstance(selectors, str):
        return False
    return any(ch in sets for ch in selectors)


def _concat_sets(selectors: str, sets: Mapping[str, str]) -> str:
    # Unknown selector characters are skipped; duplicates are kept.
    return "".join(sets[ch] for ch in selectors if ch in sets)


def build_keyspace(
    selectors: object = DEFAULT_SETS,
    default_selectors: str = DEFAULT_SETS,
    sets: Mapping[str, str] = CHARACTER_SETS,
) -> str:
    """
    Build a keyspace by concatenating the character sets named by
    `selectors`, in the order given.

    - Selectors that name no known set fall back to `default_selectors`.
    - A result longer than MAX_RANDOM_RANGE is discarded and rebuilt from
      `default_selectors` (never truncated).

    Raises KeyspaceOverflow / InvalidKeyspace only when the default
    selectors themselves cannot produce a usable keyspace, which can only
    happen with a custom `sets` table.
    """
    candidates = [selectors, default_selectors]

    for attempt, candidate in enumerate(candidates):
        if not has_known_selector(candidate, sets):
            continue

        keyspace = _concat_sets(candidate, sets)
        if len(keyspace) <= MAX_RANDOM_RANGE:
            logger.debug("Built keyspace of {} characters from {!r}", len(keyspace), candidate)
            return keyspace

        if attempt == 0:
            logger.warning(error_too_long("keyspace"))

    if has_known_selector(default_selectors, sets):
        raise KeyspaceOverflow(
            f"Default selectors {default_selectors!r} build a keyspace longer "
            f"than {MAX_RANDOM_RANGE} characters."
        )
    raise InvalidKeyspace(
        f"Default selectors {default_selectors!r} name no known character set."
    )


def validate_keyspace(candidate: object) -> str:
    """
    Check a caller-supplied literal keyspace and return it unchanged.

    Raises InvalidKeyspace if it is not a string, is empty, or is longer
    than MAX_RANDOM_RANGE characters.
    """
    if not isinstance(candidate, str):
        raise InvalidKeyspace(
            f"Keyspace must be a string, got {type(candidate).__name__}."
        )
    if not candidate:
        raise InvalidKeyspace("Keyspace must not be empty.")
    if len(candidate) > MAX_RANDOM_RANGE:
        raise InvalidKeyspace(
            f"Keyspace of {len(candidate)} characters is too long; "
            f"the maximum length is {MAX_RANDOM_RANGE} characters."
        )
    return candidate
