"""SHA-256 message digest."""

from __future__ import annotations

__all__ = ["BLOCK_SIZE", "Sha256", "hash_data", "hashes_equal"]

#: Size in bytes of a SHA-256 digest.
BLOCK_SIZE = 32

_CHUNK = 64
_MASK = 0xFFFFFFFF

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

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotr(value: int, rotation: int) -> int:
    return ((value >> rotation) | (value << (32 - rotation))) & _MASK


def _transform(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    w = [int.from_bytes(block[offset:offset + 4], "big") for offset in range(0, _CHUNK, 4)]
    for index in range(16, 64):
        s0 = _rotr(w[index - 15], 7) ^ _rotr(w[index - 15], 18) ^ (w[index - 15] >> 3)
        s1 = _rotr(w[index - 2], 17) ^ _rotr(w[index - 2], 19) ^ (w[index - 2] >> 10)
        w.append((w[index - 16] + s0 + w[index - 7] + s1) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, word in zip(_K, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        temp1 = (h + big_s1 + ch + k + word) & _MASK
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = (big_s0 + maj) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + temp1) & _MASK, c, b, a, (temp1 + temp2) & _MASK

    return tuple((old + new) & _MASK for old, new in zip(state, (a, b, c, d, e, f, g, h)))


class Sha256:
    """Incremental SHA-256 hasher."""

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._bit_count = 0
        if data:
            self.update(data)

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more bytes into the hash."""
        self._buffer += bytes(data)
        full = len(self._buffer) - len(self._buffer) % _CHUNK
        for offset in range(0, full, _CHUNK):
            self._state = _transform(self._state, bytes(self._buffer[offset:offset + _CHUNK]))
            self._bit_count += _CHUNK * 8
        del self._buffer[:full]

    def final(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        bit_count = (self._bit_count + len(self._buffer) * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytearray(self._buffer)
        tail.append(0x80)
        tail += bytes((56 - len(tail)) % _CHUNK)
        tail += bit_count.to_bytes(8, "big")

        state = self._state
        for offset in range(0, len(tail), _CHUNK):
            state = _transform(state, bytes(tail[offset:offset + _CHUNK]))
        return b"".join(word.to_bytes(4, "big") for word in state)


def hash_data(data: bytes | bytearray | memoryview) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return Sha256(data).final()


def hashes_equal(lhs: bytes, rhs: bytes) -> bool:
    """Tell whether two digests are the same; both must be 32 bytes long."""
    if len(lhs) != BLOCK_SIZE or len(rhs) != BLOCK_SIZE:
        raise ValueError(f"SHA-256 digests must be {BLOCK_SIZE} bytes long")
    return bytes(lhs) == bytes(rhs)