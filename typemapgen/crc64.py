"""CRC-64 stable hash used to derive package names for non-platform assemblies

CRC-64/Jones in its reflected form, starting from an all-ones register and
folding the input length into the final value. The output must not change
between runs or machines: the same namespace and assembly always hash to the
same Java package.
"""

import struct

POLYNOMIAL = 0x95AC9329AC4BC9B5  # 0xAD93D23594C935A9 reflected
INITIAL = 0xFFFFFFFFFFFFFFFF
MASK = 0xFFFFFFFFFFFFFFFF


def _make_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ POLYNOMIAL
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


TABLE = _make_table()


class Crc64:
    """Incremental CRC-64 with a hashlib-like interface"""

    digest_size = 8

    def __init__(self, data: bytes = b""):
        self._crc = INITIAL
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        crc = self._crc
        for b in data:
            crc = TABLE[(crc ^ b) & 0xFF] ^ (crc >> 8)
        self._crc = crc
        self._length += len(data)

    def digest(self) -> bytes:
        """8 bytes, least significant first"""
        return struct.pack("<Q", (self._crc ^ self._length) & MASK)


def crc64(data: bytes) -> bytes:
    return Crc64(data).digest()


def to_hex(digest: bytes) -> str:
    """Render bytes as lowercase hex, two characters per byte"""
    return "".join(f"{b:02x}" for b in digest)
