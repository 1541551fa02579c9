# SAFESTRINGS ENCRYPTION ENGINE ->

import os as _os_module


class safestrings:
    """Password-based string encryption for values kept in configuration files.

    Encrypted strings start with ``PREFIX`` followed by the Base64 encoding of
    ``IV || salt || ciphertext``. The IV and salt are generated on every call
    and travel with the data, so the encrypted string is self sufficient:
    the password is the only other thing needed to decrypt it.

    Decryption is safe to call on any string. Values that are not encrypted,
    or that cannot be decrypted with the given password, come back unchanged.
    """

    import base64
    import binascii
    import os
    import sys
    import typing
    from cryptography.hazmat.primitives import hashes, padding
    from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
    from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

    ENGINE_VERSION = "1.0.0"
    PREFIX = "x-enc:"
    SALT_SIZE = 8
    BLOCK_SIZE = 128  # AES block size in bits
    BLOCK_BYTES = BLOCK_SIZE // 8
    IV_SIZE = BLOCK_BYTES
    KEY_SIZE = 32  # 256 bits
    KEY_ITERATIONS = 4096
    HEADER_SIZE = IV_SIZE + SALT_SIZE
    DEBUG_ENV = "SAFESTRINGS_DEBUG"

    @staticmethod
    def _env_flag(name: str) -> bool:
        return _os_module.getenv(name, "0").strip() == "1"

    @staticmethod
    def _warn(message: str, exc: "safestrings.typing.Optional[BaseException]" = None) -> None:
        if not safestrings._env_flag(safestrings.DEBUG_ENV):
            return
        if exc is not None:
            message = f"{message} ({type(exc).__name__}: {exc})"
        print(f"⚠️  {message}", file=safestrings.sys.stderr)

    @staticmethod
    def _is_blank(value: "safestrings.typing.Optional[str]") -> bool:
        return value is None or not value.strip()

    @staticmethod
    def is_encrypted(text: "safestrings.typing.Optional[str]") -> bool:
        """True when ``text`` carries the encrypted-string prefix. No decryption is attempted."""
        return isinstance(text, str) and text.startswith(safestrings.PREFIX)

    @staticmethod
    def _generate_random_bytes(size: int) -> bytes:
        return safestrings.os.urandom(size)

    @staticmethod
    def _generate_key(password: str, salt: bytes, size: int = KEY_SIZE) -> bytes:
        """Derives a key from ``password`` with PBKDF2 (HMAC-SHA1, 4096 rounds)."""
        kdf = safestrings.PBKDF2HMAC(
            algorithm=safestrings.hashes.SHA1(),
            length=size,
            salt=salt,
            iterations=safestrings.KEY_ITERATIONS
        )
        return kdf.derive(password.encode("utf-8"))

    @staticmethod
    def _b64decode_payload(payload: str) -> bytes:
        compact = "".join(payload.split())
        try:
            return safestrings.base64.b64decode(compact, validate=True)
        except (safestrings.binascii.Error, ValueError) as exc:
            raise ValueError("Invalid x-enc payload encoding") from exc

    @staticmethod
    def _split_blob(blob: bytes) -> "safestrings.typing.Tuple[bytes, bytes, bytes]":
        if len(blob) < safestrings.HEADER_SIZE:
            raise ValueError("x-enc payload too short")
        iv = blob[:safestrings.IV_SIZE]
        salt = blob[safestrings.IV_SIZE:safestrings.HEADER_SIZE]
        data = blob[safestrings.HEADER_SIZE:]
        if not data or len(data) % safestrings.BLOCK_BYTES:
            raise ValueError("x-enc ciphertext is not block aligned")
        return iv, salt, data

    @staticmethod
    def encrypt(string: "safestrings.typing.Optional[str]", password: "safestrings.typing.Optional[str]") -> str:
        """Encrypts ``string`` with ``password``.

        The result looks like ``x-enc:fzN2O8y7UraR6zk03XSYLZE9A4rSDWHsYNFFlik8+A3s...``
        and holds everything needed for decryption except the password.
        Returns an empty string when either argument is blank or when
        anything goes wrong during encryption.
        """
        if safestrings._is_blank(string) or safestrings._is_blank(password):
            return ""
        try:
            salt = safestrings._generate_random_bytes(safestrings.SALT_SIZE)
            key = safestrings._generate_key(password, salt, safestrings.KEY_SIZE)
            iv = safestrings._generate_random_bytes(safestrings.IV_SIZE)

            padder = safestrings.padding.PKCS7(safestrings.BLOCK_SIZE).padder()
            padded = padder.update(string.encode("utf-8")) + padder.finalize()
            encryptor = safestrings.Cipher(
                safestrings.algorithms.AES(key),
                safestrings.modes.CBC(iv)
            ).encryptor()
            data = encryptor.update(padded) + encryptor.finalize()

            blob = iv + salt + data
            return safestrings.PREFIX + safestrings.base64.b64encode(blob).decode("ascii")
        except Exception as exc:
            safestrings._warn("Encryption failed; returning an empty string.", exc)
            return ""

    @staticmethod
    def decrypt(string: "safestrings.typing.Optional[str]", password: "safestrings.typing.Optional[str]") -> "safestrings.typing.Optional[str]":
        """Decrypts an ``x-enc:`` string with ``password``.

        Safe to call on strings that were never encrypted: anything without
        the prefix, a blank password, a wrong password or a damaged payload
        all return ``string`` unchanged.
        """
        if (
            safestrings._is_blank(string)
            or not string.startswith(safestrings.PREFIX)
            or safestrings._is_blank(password)
        ):
            return string
        try:
            blob = safestrings._b64decode_payload(string.replace(safestrings.PREFIX, ""))
            iv, salt, data = safestrings._split_blob(blob)
            key = safestrings._generate_key(password, salt, safestrings.KEY_SIZE)

            decryptor = safestrings.Cipher(
                safestrings.algorithms.AES(key),
                safestrings.modes.CBC(iv)
            ).decryptor()
            padded = decryptor.update(data) + decryptor.finalize()
            unpadder = safestrings.padding.PKCS7(safestrings.BLOCK_SIZE).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()
            return plaintext.decode("utf-8")
        except Exception as exc:
            safestrings._warn("Decryption failed; returning the input unchanged.", exc)
            return string


__all__ = ["safestrings", "cli", "main", "usage"]

USAGE = """
SafeStrings
-----------
Encode and decode your strings using the SafeStrings toolset.

Usage :
    safestrings [Options] [String to encode] [Password]

Options :
    encrypt|enc|e : Encode the string using the provided password
    decrypt|dec|d : Decode the string using the provided password

Examples :
> safestrings enc "Short string to encode" "MyPassword123"
x-enc:vNFWG2xadwyApHLxZ9XHbCtf65Xl+HudgO6JxWWyt0S+5UeRiypoz/MIx6xVv3CIxD6cAjWlo6E=

> safestrings d "x-enc:vNFWG2xadwyApHLxZ9XHbCtf65Xl+HudgO6JxWWyt0S+5UeRiypoz/MIx6xVv3CIxD6cAjWlo6E=" "MyPassword123"
Short string to encode
"""

ENCRYPT_MODES = ("encrypt", "enc", "e")
DECRYPT_MODES = ("decrypt", "dec", "d")


def usage() -> None:
    print(USAGE)


def cli(argv=None) -> int:
    import sys

    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        usage()
        return 1

    mode, text, password = args
    mode = mode.lower()
    if mode in ENCRYPT_MODES:
        print(safestrings.encrypt(text, password))
    elif mode in DECRYPT_MODES:
        print(safestrings.decrypt(text, password))
    else:
        usage()
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
