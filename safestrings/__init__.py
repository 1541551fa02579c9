"""
SAFESTRINGS - password-based encryption for strings stored in configuration files

Encrypted values look like ``x-enc:<base64>`` and carry their own IV and salt.
``decode`` can be called on any string: plain values pass through untouched.
"""

from .main import *
from .api_strings import (
    decode,
    decrypt_using_password,
    encode,
    encrypt_using_password,
    is_encrypted,
)
from .version import __version__

PREFIX = safestrings.PREFIX

__all__ = [
    "PREFIX",
    "__version__",
    "cli",
    "decode",
    "decrypt_using_password",
    "encode",
    "encrypt_using_password",
    "is_encrypted",
    "main",
    "safestrings",
]
