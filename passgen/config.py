"""
Configuration for the password generator.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from loguru import logger

from .constants import DEFAULT_LENGTH, DEFAULT_SETS, MINIMUM_LENGTH
from .errors import InvalidKeyspace, InvalidLength
from .keyspace import build_keyspace, validate_keyspace


def validate_length(value: object, minimum: int = MINIMUM_LENGTH) -> int:
    """
    Return `value` if it is an integer of at least `minimum`,
    otherwise raise InvalidLength.
    """
    # bool is an int subclass but never a meaningful length.
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidLength(
            f"Password length must be an integer, got {type(value).__name__}."
        )
    if value < minimum:
        raise InvalidLength(
            f"Password length {value} is below the minimum of {minimum}."
        )
    return value


@dataclass
class GeneratorConfig:
    # Shortest length set_length will accept. Declared first so it is in
    # place before `length` is checked against it.
    minimum_length: int = field(default=MINIMUM_LENGTH, kw_only=True)

    # Desired password length in characters.
    length: int = DEFAULT_LENGTH

    # Characters to sample from. May contain duplicates; at most
    # MAX_RANDOM_RANGE characters.
    keyspace: str = field(default_factory=lambda: build_keyspace(DEFAULT_SETS))

    def __setattr__(self, name: str, value: object) -> None:
        # Every assignment is checked, including plain `config.length = n`,
        # so a config can never hold a value generation would trip over.
        if name == "minimum_length":
            value = validate_length(value, minimum=1)
            current = self.__dict__.get("length")
            if current is not None and current < value:
                raise InvalidLength(
                    f"Minimum length {value} is above the current length {current}."
                )
        elif name == "length":
            value = validate_length(value, self.minimum_length)
        elif name == "keyspace":
            value = validate_keyspace(value)
        super().__setattr__(name, value)

    # --- validated setters ---
    #
    # Invalid input leaves the previous value in place. With strict=True the
    # validation error is raised instead of being logged.

    def set_length(self, value: object, strict: bool = False) -> bool:
        try:
            self.length = value
        except InvalidLength as exc:
            if strict:
                raise
            logger.warning("Ignoring password length {!r}: {}", value, exc)
            return False
        return True

    def set_keyspace_literal(self, candidate: object, strict: bool = False) -> bool:
        """
        Use `candidate` verbatim as the keyspace.

        Returns False (and keeps the current keyspace) if it is empty, not a
        string, or longer than MAX_RANDOM_RANGE.
        """
        try:
            self.keyspace = candidate
        except InvalidKeyspace as exc:
            if strict:
                raise
            logger.warning("Keeping the current keyspace: {}", exc)
            return False
        return True

    def generate_keyspace(self, selectors: object = DEFAULT_SETS) -> str:
        """Rebuild the keyspace from selector characters and return it."""
        self.keyspace = build_keyspace(selectors)
        return self.keyspace

    def snapshot(self) -> GeneratorConfig:
        """Independent copy for a generation run to read from."""
        return copy.copy(self)


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
