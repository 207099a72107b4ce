"""
Uniform password generator over configurable character keyspaces.
"""

from loguru import logger

from .config import DEFAULT_CONFIG, GeneratorConfig
from .constants import (
    CHARACTER_SETS,
    DEFAULT_LENGTH,
    DEFAULT_SETS,
    MAX_RANDOM_RANGE,
    MINIMUM_LENGTH,
)
from .entropy import SecureByteSource, SystemByteSource, sample_uniform_index
from .errors import (
    EntropySourceUnavailable,
    InvalidKeyspace,
    InvalidLength,
    KeyspaceOverflow,
    PasswordGenError,
    RangeTooLarge,
)
from .generator import (
    GenerationMeta,
    PasswordGenerator,
    generate_password,
    generate_password_with_meta,
)
from .keyspace import build_keyspace

# Library logging stays quiet unless the application opts in with
# logger.enable("passgen").
logger.disable("passgen")


def __getattr__(name: str):
    # qiskit is only imported when the quantum source is actually asked for.
    if name == "QuantumByteSource":
        from .quantum_engine import QuantumByteSource

        return QuantumByteSource
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CHARACTER_SETS",
    "DEFAULT_CONFIG",
    "DEFAULT_LENGTH",
    "DEFAULT_SETS",
    "MAX_RANDOM_RANGE",
    "MINIMUM_LENGTH",
    "EntropySourceUnavailable",
    "GenerationMeta",
    "GeneratorConfig",
    "InvalidKeyspace",
    "InvalidLength",
    "KeyspaceOverflow",
    "PasswordGenError",
    "PasswordGenerator",
    "QuantumByteSource",
    "RangeTooLarge",
    "SecureByteSource",
    "SystemByteSource",
    "build_keyspace",
    "generate_password",
    "generate_password_with_meta",
    "sample_uniform_index",
]
