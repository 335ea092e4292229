"""Ciphertext <-> text for the configured Output."""
from aestext.common.options import Output
from aestext.common.utils import b64d, b64e, hexd, hexe
from aestext.crypto.errors import UnknownOutputError


def encode(data: bytes, output: int) -> str:
    """
    Serialize raw ciphertext as text.

    Args:
        data: Raw ciphertext
        output: Output value selecting Base64 or hex

    Returns:
        Encoded ciphertext

    Raises:
        UnknownOutputError: If output is not an Output value
    """
    if output == Output.BASE64:
        return b64e(data)
    elif output == Output.HEX:
        return hexe(data)
    else:
        raise UnknownOutputError()


def decode(text: str, output: int) -> bytes:
    """
    Parse textual ciphertext back into raw bytes.

    Decoder errors (binascii.Error) are not wrapped.

    Raises:
        UnknownOutputError: If output is not an Output value
    """
    if output == Output.BASE64:
        return b64d(text)
    elif output == Output.HEX:
        return hexd(text)
    else:
        raise UnknownOutputError()
