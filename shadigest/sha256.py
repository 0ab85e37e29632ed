"""SHA-256 message digest."""

from __future__ import annotations

import struct
from typing import Union

Message = Union[str, bytes, bytearray, memoryview]

_MASK = 0xFFFFFFFF

_INITIAL_STATE = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_BLOCK_BYTES = 64


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _to_bytes(message: Message) -> bytes:
    """Return the bytes that are hashed: text is UTF-8, and the message ends at its first NUL."""
    if isinstance(message, str):
        data = message.encode("utf-8")
    elif isinstance(message, (bytes, bytearray, memoryview)):
        data = bytes(message)
    else:
        raise TypeError(f"message must be str or bytes-like, not {type(message).__name__}")
    return data.partition(b"\x00")[0]


def _pad(data: bytes) -> bytes:
    bit_length = len(data) * 8
    zeros = (55 - len(data)) % _BLOCK_BYTES
    # The length occupies 64 bits, but only its low 32 bits are stored.
    return data + b"\x80" + bytes(zeros) + struct.pack(">II", 0, bit_length & _MASK)


def _compress(state: list[int], block: tuple[int, ...]) -> None:
    w = list(block)
    for j in range(16, 64):
        x15, x2 = w[j - 15], w[j - 2]
        s0 = _rotr(x15, 7) ^ _rotr(x15, 18) ^ (x15 >> 3)
        s1 = _rotr(x2, 17) ^ _rotr(x2, 19) ^ (x2 >> 10)
        w.append((w[j - 16] + s0 + w[j - 7] + s1) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, wj in zip(_K, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        temp1 = (h + big_s1 + ch + k + wj) & _MASK
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = (big_s0 + maj) & _MASK
        h, g, f, e = g, f, e, (d + temp1) & _MASK
        d, c, b, a = c, b, a, (temp1 + temp2) & _MASK

    for i, value in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + value) & _MASK


class SHA256:
    """Computes SHA-256 digests as lowercase hexadecimal strings."""

    digest_size = 32
    block_size = _BLOCK_BYTES

    def hash(self, message: Message) -> str:
        """Return the hex digest of ``message``."""
        state = list(_INITIAL_STATE)
        for block in struct.iter_unpack(">16I", _pad(_to_bytes(message))):
            _compress(state, block)
        return "".join(f"{word:08x}" for word in state)


def sha256(message: Message) -> str:
    """Return the SHA-256 hex digest of ``message``."""
    return SHA256().hash(message)