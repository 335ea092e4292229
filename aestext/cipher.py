"""AES text cipher: Options in, encrypt/decrypt strings out."""
import logging
from typing import Optional, Tuple

from aestext.common.options import Options
from aestext.crypto.block import new_cipher
from aestext.crypto.encoding import decode, encode
from aestext.crypto.errors import CipherError
from aestext.crypto.modes import decrypt_blocks, encrypt_blocks
from aestext.crypto.padding import apply_padding, unpad


logger = logging.getLogger(__name__)


class AES:
    """
    Encrypts and decrypts UTF-8 text under a fixed configuration.

    Every call rebuilds the AES primitive from the options, so one instance
    can be shared freely; nothing is cached between calls.
    """

    def __init__(self, options: Options):
        self.options = options

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext and return the encoded ciphertext.

        Process:
        1. Build the AES primitive from the key
        2. Pad the UTF-8 bytes of the plaintext
        3. Run the padded buffer through the configured mode
        4. Encode the ciphertext as Base64 or hex

        Args:
            plaintext: Text to encrypt

        Returns:
            Encoded ciphertext

        Raises:
            CipherError: On a bad key size, IV length or unknown selector
        """
        opts = self.options
        block = new_cipher(opts.key)
        padded = apply_padding(opts.padding, plaintext.encode('utf-8'))
        ciphertext = encrypt_blocks(block, opts.mode, opts.iv, padded)
        logger.debug("encrypted %d bytes (mode=%s)", len(ciphertext), opts.mode)
        return encode(ciphertext, opts.output)

    def decrypt(self, text: str) -> str:
        """
        Decrypt encoded ciphertext back into text.

        Process:
        1. Build the AES primitive from the key
        2. Decode the text into raw ciphertext
        3. Check block alignment and run the inverse mode transform
        4. Strip the padding and decode UTF-8

        Args:
            text: Base64 or hex ciphertext, matching options.output

        Returns:
            Decrypted text

        Raises:
            CipherError: On a bad key size, IV length, unknown selector,
                misaligned ciphertext or malformed padding
            binascii.Error: If text is not valid for the output encoding
            UnicodeDecodeError: If the plaintext is not UTF-8
        """
        opts = self.options
        block = new_cipher(opts.key)
        ciphertext = decode(text, opts.output)
        padded = decrypt_blocks(block, opts.mode, opts.iv, ciphertext)
        logger.debug("decrypted %d bytes (mode=%s)", len(ciphertext), opts.mode)
        return unpad(padded).decode('utf-8')

    def try_encrypt(self, plaintext: str) -> Tuple[str, Optional[Exception]]:
        """
        Encrypt without raising.

        Returns:
            Tuple of (ciphertext, error) where error is None on success.
            On failure ciphertext is an empty string and error is the
            CipherError or ValueError that was raised.
        """
        try:
            return self.encrypt(plaintext), None
        except (CipherError, ValueError) as e:
            return "", e

    def try_decrypt(self, text: str) -> Tuple[str, Optional[Exception]]:
        """
        Decrypt without raising.

        Returns:
            Tuple of (plaintext, error) where error is None on success.
            On failure plaintext is an empty string and error is the
            CipherError or ValueError that was raised.
        """
        try:
            return self.decrypt(text), None
        except (CipherError, ValueError) as e:
            return "", e


def new(options: Options) -> AES:
    """Bind options to a new AES cipher."""
    return AES(options)
