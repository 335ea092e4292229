"""Pydantic models and selectors: Mode, Padding, Output, Options."""
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Mode(IntEnum):
    """Block-cipher mode. ECB is the only mode that takes no IV."""
    ECB = 0
    CBC = 1
    CTR = 2
    OFB = 3
    CFB = 4


class Padding(IntEnum):
    """Padding scheme. Both schemes pad identically for 16-byte blocks."""
    PKCS5 = 0
    PKCS7 = 1


class Output(IntEnum):
    """Text encoding of the ciphertext."""
    BASE64 = 0
    HEX = 1


class Options(BaseModel):
    """
    Immutable cipher configuration.

    Selectors are stored as plain integers and only checked when a cipher
    uses them, so an out-of-range value surfaces as UnknownModeError,
    UnknownPaddingError or UnknownOutputError rather than here. Key and IV
    lengths are likewise checked at use time.
    """
    model_config = ConfigDict(frozen=True)

    mode: int = Field(default=Mode.CBC, description="Block-cipher mode (Mode)")
    padding: int = Field(default=Padding.PKCS7, description="Padding scheme (Padding)")
    output: int = Field(default=Output.BASE64, description="Ciphertext text encoding (Output)")
    key: bytes = Field(description="AES key: 16, 24 or 32 bytes")
    iv: bytes = Field(default=b"", description="Initialization vector: 16 bytes, unused by ECB")


def new_options(key: bytes, iv: bytes) -> Options:
    """
    Create options with the default CBC + PKCS#7 + Base64 configuration.

    The default is for convenience only. None of the available modes is
    authenticated, so pair the output with a MAC when integrity matters.
    """
    return Options(
        mode=Mode.CBC,
        padding=Padding.PKCS7,
        output=Output.BASE64,
        key=key,
        iv=iv,
    )
