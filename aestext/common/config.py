"""
Optional helper: load cipher Options from environment variables (.env supported).

Nothing in the cipher reads the environment on its own; callers that want
environment-driven options call load_options() and pass the result to new().
"""
import os
from pathlib import Path
from typing import Optional, Type

from dotenv import load_dotenv

from aestext.common.options import Mode, Options, Output, Padding
from aestext.crypto.errors import (
    CipherError,
    KeySizeError,
    UnknownModeError,
    UnknownOutputError,
    UnknownPaddingError,
)


def _parse_selector(value: str, enum_cls, error: Type[CipherError]) -> int:
    try:
        return enum_cls[value.strip().upper()]
    except KeyError:
        raise error(f"{error.reason}: {value!r}")


def load_options(env_path: Optional[Path] = None) -> Options:
    """
    Build Options from the environment.

    Variables:
        AES_KEY: key text, 16/24/32 bytes once UTF-8 encoded (required)
        AES_IV: IV text, 16 bytes (default: empty, fine for ECB)
        AES_MODE: ECB, CBC, CTR, OFB or CFB (default: CBC)
        AES_PADDING: PKCS5 or PKCS7 (default: PKCS7)
        AES_OUTPUT: BASE64 or HEX (default: BASE64)

    Values already in the environment win over the .env file.

    Args:
        env_path: .env file to load (default: ./.env if it exists)

    Returns:
        Options

    Raises:
        KeySizeError: If AES_KEY is missing
        UnknownModeError, UnknownPaddingError, UnknownOutputError:
            If a selector name is not recognized
    """
    env_path = env_path or Path.cwd() / '.env'
    if env_path.exists():
        load_dotenv(env_path)

    key = os.getenv('AES_KEY')
    if not key:
        raise KeySizeError(0)

    return Options(
        mode=_parse_selector(os.getenv('AES_MODE', 'CBC'), Mode, UnknownModeError),
        padding=_parse_selector(os.getenv('AES_PADDING', 'PKCS7'), Padding, UnknownPaddingError),
        output=_parse_selector(os.getenv('AES_OUTPUT', 'BASE64'), Output, UnknownOutputError),
        key=key.encode('utf-8'),
        iv=os.getenv('AES_IV', '').encode('utf-8'),
    )
