"""Decode framed hex coordinate strings into canonical field elements."""

from __future__ import annotations

import logging
import re

from babygiant.core.errors import DecodeError
from babygiant.utils.constants import FIELD_HEX_DIGITS, FIELD_MODULUS, HEX_PREFIX

BYTE_ORDERS = ("big", "little")

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class FieldDecoder:
    """Convert ``0x``-framed hex strings to integers reduced modulo p.

    The framing is fixed: the string must start with exactly ``0x``,
    which is stripped once. The remaining 1 to 64 hex digits are
    left-padded to the field width, read as 32 bytes in ``byteorder``
    and reduced modulo p. The Noir harness prints coordinates
    little-endian; plain hex literals are big-endian. Digits are
    matched before conversion because ``int(s, 16)`` would also accept
    whitespace, signs and underscores.
    """

    def __init__(
        self,
        modulus: int = FIELD_MODULUS,
        width: int = FIELD_HEX_DIGITS,
        prefix: str = HEX_PREFIX,
        byteorder: str = "big",
    ) -> None:
        if byteorder not in BYTE_ORDERS:
            raise ValueError(f"byteorder must be one of {BYTE_ORDERS}, got {byteorder!r}")
        if width % 2:
            raise ValueError(f"width must be a whole number of bytes, got {width} digits")
        self.modulus = modulus
        self.width = width
        self.prefix = prefix
        self.byteorder = byteorder

    def strip_prefix(self, text: str) -> str:
        """Remove the framing marker, rejecting strings that lack it."""
        if not isinstance(text, str):
            raise DecodeError(f"Expected str, got {type(text).__name__}")
        if not text.startswith(self.prefix):
            raise DecodeError(f"Missing {self.prefix!r} prefix: {text!r}")
        return text[len(self.prefix):]

    def decode(self, text: str) -> int:
        digits = self.strip_prefix(text)
        if not digits:
            raise DecodeError(f"No hex digits after {self.prefix!r} prefix")
        if _HEX_DIGITS.fullmatch(digits) is None:
            raise DecodeError(f"Invalid hex digits: {digits!r}")
        if len(digits) > self.width:
            raise DecodeError(
                f"Hex value has {len(digits)} digits, field width is {self.width}"
            )

        padded = digits.rjust(self.width, "0")
        value = int.from_bytes(bytes.fromhex(padded), self.byteorder) % self.modulus
        if not 0 <= value < self.modulus:
            raise DecodeError(f"Value does not reduce into the field: {text!r}")

        logger.debug("Decoded %s -> %d", text, value)
        return value

    def encode(self, value: int) -> str:
        """Render a field element in the framing ``decode`` accepts."""
        raw = (value % self.modulus).to_bytes(self.width // 2, self.byteorder)
        return f"{self.prefix}{raw.hex()}"


_default_decoder = FieldDecoder()


def decode_field_element(text: str) -> int:
    """Decode with the default Baby Jubjub base-field decoder."""
    return _default_decoder.decode(text)
