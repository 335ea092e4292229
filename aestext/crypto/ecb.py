"""Electronic Codebook block mode adapter over a single-block primitive."""
from aestext.crypto.block import BlockPrimitive
from aestext.crypto.errors import BlockModeMisuse


class ECBMode:
    """
    ECB block mode: every block is processed independently.

    No IV and no chaining, so identical plaintext blocks produce identical
    ciphertext blocks. Provided for interoperability, not as a default.
    """

    def __init__(self, primitive: BlockPrimitive):
        self.primitive = primitive
        self.block_size = primitive.block_size

    def _check(self, dst, src) -> None:
        if len(src) % self.block_size != 0:
            raise BlockModeMisuse("ecb: input not full blocks")
        if len(dst) < len(src):
            raise BlockModeMisuse("ecb: output smaller than input")

    def encrypt_blocks(self, dst, src: bytes) -> None:
        """
        Encrypt src into dst block by block.

        Args:
            dst: Writable buffer at least as long as src
            src: Plaintext, a whole number of blocks

        Raises:
            BlockModeMisuse: If src is not block-aligned or dst is too short
        """
        self._check(dst, src)
        bs = self.block_size
        out = memoryview(dst)
        for i in range(0, len(src), bs):
            self.primitive.encrypt_block(out[i:i + bs], src[i:i + bs])

    def decrypt_blocks(self, dst, src: bytes) -> None:
        """Decrypt src into dst block by block (same preconditions as encrypt_blocks)."""
        self._check(dst, src)
        bs = self.block_size
        out = memoryview(dst)
        for i in range(0, len(src), bs):
            self.primitive.decrypt_block(out[i:i + bs], src[i:i + bs])

    def encrypt(self, data: bytes) -> bytes:
        out = bytearray(len(data))
        self.encrypt_blocks(out, data)
        return bytes(out)

    def decrypt(self, data: bytes) -> bytes:
        out = bytearray(len(data))
        self.decrypt_blocks(out, data)
        return bytes(out)
