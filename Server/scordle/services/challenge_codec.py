"""
Challenge Codec

Turns a target word into a short URL-safe string and back, so a player can
send a specific word to a friend. The codec only checks that the string is
decodable into letters; dictionary validity is the caller's concern.
"""

import base64
import binascii


class DecodeError(ValueError):
    """Raised when a challenge string is not a valid encoding."""


def encode(word: str) -> str:
    """URL-safe base64 of the word, padding stripped."""
    return base64.urlsafe_b64encode(word.encode("ascii")).decode("ascii").rstrip("=")


def decode(challenge: str) -> str:
    """
    Decode a challenge string into a lowercase word.

    Raises:
        DecodeError: If the string is not URL-safe base64 of ASCII letters
    """
    if not challenge or not isinstance(challenge, str):
        raise DecodeError("Empty challenge string")

    if not challenge.isascii():
        raise DecodeError(f"Challenge contains non-ASCII characters: {challenge!r}")

    if len(challenge) % 4 == 1:
        raise DecodeError(f"Invalid challenge length: {challenge!r}")

    padded = challenge + "=" * (-len(challenge) % 4)
    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
        word = raw.decode("ascii")
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid challenge string: {challenge!r}") from e

    if not word.isalpha():
        raise DecodeError(f"Challenge does not decode to a word: {challenge!r}")

    return word.lower()
