import string
from typing import Union

ROTATION = 13


def _rotated(alphabet: str, shift: int = ROTATION) -> str:
    return alphabet[shift:] + alphabet[:shift]


_PLAIN = string.ascii_uppercase + string.ascii_lowercase
_CIPHER = _rotated(string.ascii_uppercase) + _rotated(string.ascii_lowercase)

TEXT_TABLE = str.maketrans(_PLAIN, _CIPHER)
BYTES_TABLE = bytes.maketrans(_PLAIN.encode("ascii"), _CIPHER.encode("ascii"))


def rotate(content: Union[str, bytes, bytearray]) -> Union[str, bytes]:
    """
    Apply ROT13 to content.
    Only the ASCII letters A-Z and a-z are rotated, everything else (including
    non-ASCII letters) is passed through unchanged. Applying it twice returns the input.
    """
    if isinstance(content, str):
        return content.translate(TEXT_TABLE)

    if isinstance(content, (bytes, bytearray)):
        return bytes(content).translate(BYTES_TABLE)

    raise TypeError(f"Cannot rotate object of type {type(content).__name__}")
