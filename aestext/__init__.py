"""Configurable AES text encryption: ECB/CBC/CTR/OFB/CFB, PKCS#5/#7, Base64/hex."""
from aestext.cipher import AES, new
from aestext.common.options import Mode, Options, Output, Padding, new_options
from aestext.crypto.errors import (
    BlockLengthError,
    BlockModeMisuse,
    BlockUnpaddingError,
    CipherError,
    IVLengthError,
    KeySizeError,
    UnknownModeError,
    UnknownOutputError,
    UnknownPaddingError,
)

__all__ = [
    "AES",
    "new",
    "new_options",
    "Mode",
    "Options",
    "Output",
    "Padding",
    "BlockLengthError",
    "BlockModeMisuse",
    "BlockUnpaddingError",
    "CipherError",
    "IVLengthError",
    "KeySizeError",
    "UnknownModeError",
    "UnknownOutputError",
    "UnknownPaddingError",
]
