"""
Error types raised by the password generator.
"""


class PasswordGenError(Exception):
    """Base class for every password generator error."""


class InvalidLength(PasswordGenError, ValueError):
    """Password length is not an integer or is below the minimum."""


class InvalidKeyspace(PasswordGenError, ValueError):
    """Literal keyspace is empty, not a string, or too long."""


class KeyspaceOverflow(PasswordGenError, ValueError):
    """
    A keyspace built from selectors is too long even after falling back
    to the default selectors.
    """


class RangeTooLarge(PasswordGenError, ValueError):
    """A sampling range covers more values than one byte can address."""


class EntropySourceUnavailable(PasswordGenError, RuntimeError):
    """The secure byte source could not produce random bytes."""
