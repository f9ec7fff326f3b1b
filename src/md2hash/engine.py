"""
Pure-Python MD2 (RFC 1319).

MD2 is cryptographically broken; it is kept for legacy interoperability and
test vectors only.
"""

from __future__ import annotations

from .sbox import PI_SUBST

_MASK_8 = 0xFF
_BLOCK_SIZE = 16
_STATE_SIZE = 48
_ROUNDS = 18


def _as_bytes(data: bytes, name: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like")
    return bytes(data)


def _require_blocks(data: bytes, name: str) -> bytes:
    raw = _as_bytes(data, name)
    if len(raw) % _BLOCK_SIZE:
        raise ValueError(f"{name} length must be a multiple of {_BLOCK_SIZE}")
    return raw


def _update_checksum(checksum: bytearray, carry: int, block: bytes) -> int:
    """Fold one block into ``checksum`` and return the new carry."""
    for j in range(_BLOCK_SIZE):
        checksum[j] ^= PI_SUBST[block[j] ^ carry]
        carry = checksum[j]
    return carry


def _compress_block(state: bytearray, block: bytes) -> None:
    """Mix one block into the 48-byte state in place."""
    for j in range(_BLOCK_SIZE):
        state[_BLOCK_SIZE + j] = block[j]
        state[2 * _BLOCK_SIZE + j] = state[j] ^ block[j]

    t = 0
    for round_index in range(_ROUNDS):
        for k in range(_STATE_SIZE):
            state[k] ^= PI_SUBST[t]
            t = state[k]
        t = (t + round_index) & _MASK_8


def pad(message: bytes) -> bytes:
    """Append 1..16 bytes, each equal to the pad length, to reach a block boundary."""
    raw = _as_bytes(message, "message")
    pad_len = _BLOCK_SIZE - (len(raw) % _BLOCK_SIZE)
    return raw + bytes([pad_len]) * pad_len


def append_checksum(padded: bytes) -> bytes:
    """
    Append the 16-byte MD2 checksum of ``padded``.

    The carry byte runs across block boundaries, so the checksum depends on
    block order.

    Raises:
        TypeError: If ``padded`` is not bytes-like
        ValueError: If its length is not a multiple of 16
    """
    raw = _require_blocks(padded, "padded")
    checksum = bytearray(_BLOCK_SIZE)
    carry = 0
    for offset in range(0, len(raw), _BLOCK_SIZE):
        carry = _update_checksum(checksum, carry, raw[offset:offset + _BLOCK_SIZE])
    return raw + bytes(checksum)


def compress(data: bytes) -> bytes:
    """
    Run the 18-round compression over every block and return the 16-byte digest.

    Raises:
        TypeError: If ``data`` is not bytes-like
        ValueError: If its length is not a multiple of 16
    """
    raw = _require_blocks(data, "data")
    state = bytearray(_STATE_SIZE)
    for offset in range(0, len(raw), _BLOCK_SIZE):
        _compress_block(state, raw[offset:offset + _BLOCK_SIZE])
    return bytes(state[:_BLOCK_SIZE])


def digest(message: bytes) -> str:
    """
    Return the MD2 digest of ``message`` as 32 lowercase hex characters.

    Text must be encoded by the caller; ``str`` input raises ``TypeError``.
    """
    return compress(append_checksum(pad(message))).hex()


class MD2:
    """
    Streaming MD2 with a hashlib-style interface.

    Full blocks are checksummed and compressed as they arrive, so memory use
    does not grow with the input.
    """

    name = "md2"
    digest_size = 16
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b""):
        self._checksum = bytearray(_BLOCK_SIZE)
        self._carry = 0
        self._state = bytearray(_STATE_SIZE)
        self._tail = b""
        self.update(data)

    def copy(self) -> "MD2":
        dup = self.__class__.__new__(self.__class__)
        dup._checksum = bytearray(self._checksum)
        dup._carry = self._carry
        dup._state = bytearray(self._state)
        dup._tail = self._tail
        return dup

    def update(self, data: bytes) -> "MD2":
        raw = self._tail + _as_bytes(data, "data")

        offset_limit = len(raw) - (len(raw) % _BLOCK_SIZE)
        for offset in range(0, offset_limit, _BLOCK_SIZE):
            self._process(raw[offset:offset + _BLOCK_SIZE])

        self._tail = raw[offset_limit:]
        return self

    def digest(self) -> bytes:
        return self.copy()._finalize()

    def hexdigest(self) -> str:
        return self.digest().hex()

    # Internal helpers -------------------------------------------------
    def _process(self, block: bytes) -> None:
        self._carry = _update_checksum(self._checksum, self._carry, block)
        _compress_block(self._state, block)

    def _finalize(self) -> bytes:
        # The tail is always shorter than a block, so padding yields exactly one.
        self._process(pad(self._tail))
        _compress_block(self._state, bytes(self._checksum))
        return bytes(self._state[:_BLOCK_SIZE])


def md2(data: bytes = b"") -> MD2:
    """Convenience constructor matching hashlib-style usage."""
    return MD2(data)


__all__ = ["MD2", "append_checksum", "compress", "digest", "md2", "pad"]
