"""AES single-block primitive on top of the cryptography package."""
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from aestext.crypto.errors import KeySizeError


# AES block size in bytes (128 bits)
BLOCK_SIZE = 16

KEY_SIZES = (16, 24, 32)


class BlockPrimitive:
    """
    Encrypts and decrypts exactly one AES block at a time.

    The cryptography package only exposes AES through a mode, so a single
    block is run through a codebook context, which carries no state between
    blocks.
    """

    def __init__(self, key: bytes):
        self.algorithm = algorithms.AES(key)
        cipher = Cipher(self.algorithm, modes.ECB(), backend=default_backend())
        self._encryptor = cipher.encryptor()
        self._decryptor = cipher.decryptor()

    @property
    def block_size(self) -> int:
        return self.algorithm.block_size // 8

    def encrypt_block(self, dst, src: bytes) -> None:
        """Encrypt the first block of src into the first block of dst."""
        bs = self.block_size
        dst[:bs] = self._encryptor.update(bytes(src[:bs]))

    def decrypt_block(self, dst, src: bytes) -> None:
        """Decrypt the first block of src into the first block of dst."""
        bs = self.block_size
        dst[:bs] = self._decryptor.update(bytes(src[:bs]))


def new_cipher(key: bytes) -> BlockPrimitive:
    """
    Create an AES primitive for the given key.

    The key length selects AES-128, AES-192 or AES-256.

    Args:
        key: 16, 24 or 32 byte key

    Returns:
        BlockPrimitive bound to the key

    Raises:
        KeySizeError: If the key length is not 16, 24 or 32 bytes
    """
    if len(key) not in KEY_SIZES:
        raise KeySizeError(len(key))
    return BlockPrimitive(bytes(key))
