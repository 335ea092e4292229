"""Mode dispatch: ECB via the adapter, CBC/CTR/OFB/CFB via cryptography."""
from typing import Protocol

from cryptography.hazmat.primitives.ciphers import Cipher, modes
from cryptography.hazmat.backends import default_backend

try:
    from cryptography.hazmat.decrepit.ciphers.modes import CFB, OFB
except ImportError:  # older cryptography releases keep them in modes
    from cryptography.hazmat.primitives.ciphers.modes import CFB, OFB

from aestext.common.options import Mode
from aestext.crypto.block import BLOCK_SIZE, BlockPrimitive
from aestext.crypto.ecb import ECBMode
from aestext.crypto.errors import BlockLengthError, IVLengthError, UnknownModeError


class BlockTransform(Protocol):
    """Whole-buffer encrypt/decrypt shared by every supported mode."""

    def encrypt(self, data: bytes) -> bytes:
        ...

    def decrypt(self, data: bytes) -> bytes:
        ...


class LibraryMode:
    """
    A mode constructed by the cryptography package.

    CBC works on whole blocks; CTR, OFB and CFB are stream modes and accept
    any length. Each call runs the full buffer through a fresh context.
    """

    def __init__(self, primitive: BlockPrimitive, mode: modes.Mode):
        self.cipher = Cipher(primitive.algorithm, mode, backend=default_backend())

    def encrypt(self, data: bytes) -> bytes:
        encryptor = self.cipher.encryptor()
        return encryptor.update(data) + encryptor.finalize()

    def decrypt(self, data: bytes) -> bytes:
        decryptor = self.cipher.decryptor()
        return decryptor.update(data) + decryptor.finalize()


def _check_iv(iv: bytes) -> bytes:
    if len(iv) != BLOCK_SIZE:
        raise IVLengthError(len(iv), BLOCK_SIZE)
    return bytes(iv)


def new_block_mode(primitive: BlockPrimitive, mode: int, iv: bytes) -> BlockTransform:
    """
    Build the transform for the configured mode.

    The IV is used exactly as given; it is never generated or derived.
    ECB ignores it.

    Args:
        primitive: AES primitive bound to the key
        mode: Mode value
        iv: 16-byte IV for every mode except ECB

    Returns:
        Transform with encrypt() and decrypt()

    Raises:
        UnknownModeError: If mode is not a Mode value
        IVLengthError: If a mode that needs an IV gets one of the wrong length
    """
    if mode == Mode.ECB:
        return ECBMode(primitive)
    elif mode == Mode.CBC:
        return LibraryMode(primitive, modes.CBC(_check_iv(iv)))
    elif mode == Mode.CTR:
        return LibraryMode(primitive, modes.CTR(_check_iv(iv)))
    elif mode == Mode.OFB:
        return LibraryMode(primitive, OFB(_check_iv(iv)))
    elif mode == Mode.CFB:
        return LibraryMode(primitive, CFB(_check_iv(iv)))
    else:
        raise UnknownModeError()


def encrypt_blocks(primitive: BlockPrimitive, mode: int, iv: bytes, data: bytes) -> bytes:
    """
    Encrypt a padded buffer.

    Raises:
        BlockLengthError: If data is not a multiple of the block size
        UnknownModeError: If mode is not a Mode value
    """
    if len(data) % BLOCK_SIZE != 0:
        raise BlockLengthError()
    return new_block_mode(primitive, mode, iv).encrypt(data)


def decrypt_blocks(primitive: BlockPrimitive, mode: int, iv: bytes, data: bytes) -> bytes:
    """
    Decrypt a ciphertext buffer; the result still carries its padding.

    Raises:
        BlockLengthError: If data is not a multiple of the block size
        UnknownModeError: If mode is not a Mode value
    """
    if len(data) % BLOCK_SIZE != 0:
        raise BlockLengthError()
    return new_block_mode(primitive, mode, iv).decrypt(data)
