"""Exceptions raised by the signing-key derivation core."""


class SigningKeyError(Exception):
    """Base class for errors raised by sigkeys."""


class KeyDerivationError(SigningKeyError, RuntimeError):
    """A SigV4a private scalar could not be derived within the attempt limit."""
