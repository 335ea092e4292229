"""Cipher error hierarchy: unknown selectors, padding, block length, key/IV size."""
from typing import Optional


class CipherError(Exception):
    """Base exception for recoverable encryption/decryption errors."""
    reason = "cipher error"

    def __init__(self, reason: Optional[str] = None):
        if reason is not None:
            self.reason = reason
        super().__init__(self.reason)


class UnknownModeError(CipherError):
    """Raised when the configured block-cipher mode is not recognized."""
    reason = "unknown mode"


class UnknownPaddingError(CipherError):
    """Raised when the configured padding scheme is not recognized."""
    reason = "unknown padding way"


class UnknownOutputError(CipherError):
    """Raised when the configured output encoding is not recognized."""
    reason = "unknown output way"


class BlockUnpaddingError(CipherError):
    """Raised when the trailing pad byte is larger than the buffer."""
    reason = "block unPadding error"


class BlockLengthError(CipherError):
    """Raised when a buffer is not a multiple of the block size."""
    reason = "data block length error"


class KeySizeError(CipherError):
    """Raised when the key is not 16, 24 or 32 bytes long."""
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"invalid key size {size}: must be 16, 24 or 32 bytes")


class IVLengthError(CipherError):
    """Raised when the IV does not match the block size."""
    def __init__(self, size: int, block_size: int):
        self.size = size
        self.block_size = block_size
        super().__init__(f"invalid IV length {size}: must be {block_size} bytes")


class BlockModeMisuse(RuntimeError):
    """
    Raised by block-mode adapters when called with malformed buffers.

    This is a programming error, not a recoverable cipher error: the public
    API always hands adapters block-aligned input and a large enough output
    buffer.
    """
    pass
