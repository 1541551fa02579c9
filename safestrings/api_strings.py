"""String codec convenience wrappers."""

from .main import safestrings


def encode(string: str, password: str):
    """
    Encrypt a string with a password.

    Args:
        string: Plain text to encrypt
        password: Password used to derive the AES-256 key

    Returns:
        ``x-enc:`` prefixed Base64 string, or ``""`` when either argument is
        blank or encryption fails
    """
    return safestrings.encrypt(string, password)


def decode(string: str, password: str):
    """
    Decrypt an ``x-enc:`` string with a password.

    Args:
        string: Encrypted (or plain) text
        password: Password the value was encrypted with

    Returns:
        The plain text, or ``string`` unchanged when it is not encrypted,
        the password is blank or wrong, or the payload is damaged
    """
    return safestrings.decrypt(string, password)


def encrypt_using_password(string: str, password: str):
    return safestrings.encrypt(string, password)


def decrypt_using_password(string: str, password: str):
    return safestrings.decrypt(string, password)


def is_encrypted(string: str):
    return safestrings.is_encrypted(string)


__all__ = [
    "decode",
    "decrypt_using_password",
    "encode",
    "encrypt_using_password",
    "is_encrypted",
]
