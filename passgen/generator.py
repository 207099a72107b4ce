"""
Password generation: sample uniformly random characters from a keyspace.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass

from loguru import logger

from .config import DEFAULT_CONFIG, GeneratorConfig
from .constants import DEFAULT_SETS
from .entropy import SecureByteSource, SystemByteSource, sample_uniform_index
from .errors import InvalidKeyspace


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """

    password: str
    keyspace: str
    length: int

    # Shannon entropy of the whole password, in bits.
    entropy_bits: float


def estimate_entropy_bits(length: int, keyspace: str) -> float:
    """
    Entropy of a `length`-character password drawn uniformly from the
    positions of `keyspace`.

    Characters that appear more than once in the keyspace are more likely
    to be picked, so this is below `length * log2(len(keyspace))` whenever
    the keyspace has duplicates.
    """
    if not keyspace:
        return 0.0
    total = len(keyspace)
    per_char = -sum(
        (count / total) * math.log2(count / total)
        for count in Counter(keyspace).values()
    )
    return length * per_char


def generate_password(
    config: GeneratorConfig | None = None,
    source: SecureByteSource | None = None,
) -> str:
    """
    Draw `config.length` characters from `config.keyspace`, one unbiased
    index at a time.
    """
    cfg = (config if config is not None else DEFAULT_CONFIG).snapshot()
    src = source if source is not None else SystemByteSource()
    last_index = len(cfg.keyspace) - 1

    return "".join(
        cfg.keyspace[sample_uniform_index(0, last_index, src)]
        for _ in range(cfg.length)
    )


def generate_password_with_meta(
    config: GeneratorConfig | None = None,
    source: SecureByteSource | None = None,
) -> GenerationMeta:
    cfg = (config if config is not None else DEFAULT_CONFIG).snapshot()
    password = generate_password(cfg, source)
    return GenerationMeta(
        password=password,
        keyspace=cfg.keyspace,
        length=cfg.length,
        entropy_bits=estimate_entropy_bits(cfg.length, cfg.keyspace),
    )


class PasswordGenerator:
    """
    Fluent front end over GeneratorConfig and generate_password.

        PasswordGenerator().set_length(24).generate_keyspace("lun").password

    Configuration calls return the generator so they can be chained. By
    default invalid lengths or keyspaces are logged and ignored, keeping
    the last valid value; with strict=True they raise InvalidLength or
    InvalidKeyspace instead.

    Entropy source failures are never ignored: EntropySourceUnavailable
    always propagates out of generate_password.
    """

    def __init__(
        self,
        source: SecureByteSource | None = None,
        *,
        strict: bool = False,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.config = config if config is not None else GeneratorConfig()
        self.source = source if source is not None else SystemByteSource()
        self.strict = strict

    # --- configuration ---

    def set_length(self, value: int = 0) -> PasswordGenerator:
        self.config.set_length(value, strict=self.strict)
        return self

    def set_keyspace(
        self,
        keyspace: str | None = None,
        *,
        selectors: str | None = None,
    ) -> PasswordGenerator:
        """
        Set the keyspace either from selector characters (`selectors`) or
        verbatim from a literal string (`keyspace`). Passing both is rejected
        and leaves the keyspace unchanged.
        """
        if selectors is not None and keyspace is not None:
            exc = InvalidKeyspace("Pass either a literal keyspace or selectors, not both.")
            if self.strict:
                raise exc
            logger.warning("Keeping the current keyspace: {}", exc)
            return self
        if selectors is not None:
            return self.generate_keyspace(selectors)
        self.config.set_keyspace_literal(keyspace, strict=self.strict)
        return self

    def generate_keyspace(self, selectors: str = DEFAULT_SETS) -> PasswordGenerator:
        self.config.generate_keyspace(selectors)
        return self

    # --- accessors ---

    @property
    def length(self) -> int:
        return self.config.length

    @property
    def keyspace(self) -> str:
        return self.config.keyspace

    @property
    def entropy_bits(self) -> float:
        return estimate_entropy_bits(self.config.length, self.config.keyspace)

    # --- generation ---

    def generate_password(self) -> str:
        return generate_password(self.config, self.source)

    def generate_password_with_meta(self) -> GenerationMeta:
        return generate_password_with_meta(self.config, self.source)

    @property
    def password(self) -> str:
        """A freshly generated password on every access."""
        return self.generate_password()
