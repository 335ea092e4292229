"""PKCS#5/PKCS#7 padding for the fixed 16-byte AES block."""
from cryptography.hazmat.primitives import padding

from aestext.common.options import Padding
from aestext.crypto.block import BLOCK_SIZE
from aestext.crypto.errors import BlockUnpaddingError, UnknownPaddingError


def pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Pad data with PKCS#7 padding.

    Always appends between 1 and block_size bytes, each holding the pad
    length, so an already aligned buffer gains a whole block.

    Args:
        data: Data to pad
        block_size: Block size in bytes (default: 16 for AES)

    Returns:
        Padded data
    """
    padder = padding.PKCS7(block_size * 8).padder()
    padded_data = padder.update(bytes(data))
    padded_data += padder.finalize()
    return padded_data


def unpad(data: bytes) -> bytes:
    """
    Remove padding added by pad().

    The last byte is read as the pad length. Only the length is checked,
    the pad bytes themselves are not compared.

    Args:
        data: Padded data; an empty buffer is returned unchanged

    Returns:
        Unpadded data

    Raises:
        BlockUnpaddingError: If the pad length exceeds the buffer length
    """
    if len(data) == 0:
        return data
    pad_len = data[-1]
    if pad_len > len(data):
        raise BlockUnpaddingError()
    return data[:len(data) - pad_len]


def apply_padding(scheme: int, data: bytes) -> bytes:
    """
    Pad data according to the configured scheme.

    PKCS#5 is only defined for 8-byte blocks; with the 16-byte AES block it
    is the same transform as PKCS#7.

    Raises:
        UnknownPaddingError: If scheme is not a Padding value
    """
    if scheme == Padding.PKCS5:
        return pad(data, BLOCK_SIZE)
    elif scheme == Padding.PKCS7:
        return pad(data, BLOCK_SIZE)
    else:
        raise UnknownPaddingError()
