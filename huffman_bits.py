# filename: huffman_bits.py
"""Packing of '0'/'1' symbol strings into bytes, most significant bit first."""

from typing import Tuple

_BYTE_BITS = [format(value, "08b") for value in range(256)]


def encode(bits: str) -> Tuple[bytes, int]:
    """
    Pack a string of '0'/'1' symbols into bytes.

    Args:
        bits (str): The symbol sequence.

    Returns:
        Tuple[bytes, int]: Packed bytes and the number of zero bits appended to the last byte.
    """
    if bits.strip("01"):
        raise ValueError("bit string may only contain '0' and '1'")

    # Calculate padding needed for byte alignment
    padding = (8 - len(bits) % 8) % 8
    bits += "0" * padding

    packed = bytearray()
    for i in range(0, len(bits), 8):
        packed.append(int(bits[i:i + 8], 2))
    return bytes(packed), padding


def decode(data: bytes, padding: int) -> str:
    """
    Expand packed bytes back into '0'/'1' symbols, dropping `padding` trailing bits.
    """
    if not 0 <= padding <= 7:
        raise ValueError(f"padding must be between 0 and 7, got {padding}")
    if padding and not data:
        raise ValueError("padding bits declared for an empty bitstream")

    bits = "".join(_BYTE_BITS[byte] for byte in data)
    if padding:
        bits = bits[:-padding]
    return bits
