"""Helper signatures: b64e, b64d, hexe, hexd."""
import base64
import binascii


def b64e(b: bytes) -> str:
    """
    Base64 encode bytes to string.
    
    Args:
        b: Bytes to encode
        
    Returns:
        Base64 encoded string (standard alphabet, padded)
    """
    return base64.b64encode(b).decode('ascii')


def b64d(s: str) -> bytes:
    """
    Base64 decode string to bytes.

    Line breaks (CR, LF) are skipped; any other character outside the
    standard alphabet and bad padding are rejected.
    
    Args:
        s: Base64 encoded string
        
    Returns:
        Decoded bytes

    Raises:
        binascii.Error: If s is not valid Base64
    """
    s = s.replace('\r', '').replace('\n', '')
    return base64.b64decode(s.encode('utf-8'), validate=True)


def hexe(b: bytes) -> str:
    """Hex encode bytes to a lowercase string without separators."""
    return b.hex()


def hexd(s: str) -> bytes:
    """
    Hex decode string to bytes.

    Upper and lower case digits are accepted, whitespace is not.

    Raises:
        binascii.Error: If s has odd length or non-hex characters
    """
    return binascii.unhexlify(s.encode('utf-8'))
