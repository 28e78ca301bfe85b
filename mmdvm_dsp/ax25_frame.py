"""AX.25 frame buffer with the HDLC frame check sequence (CRC-16/X.25)."""

from collections.abc import Iterable

AX25_MAX_PACKET_LEN = 300

# HDLC framing constants fixed by the AX.25 link layer.
AX25_FRAME_START = 0x7E
AX25_FRAME_END = 0x7E
AX25_FRAME_ABORT = 0xFE
AX25_MAX_ONES = 5
# Two address fields, a control byte and the two FCS bytes.
AX25_MIN_FRAME_LENGTH = 17


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ 0x8408 if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


CCITT_TABLE = _build_table()


def crc16_ccitt(data: Iterable[int]) -> int:
    """Return the AX.25 frame check sequence of ``data``."""
    crc = 0xFFFF
    for byte in data:
        crc = (crc >> 8) ^ CCITT_TABLE[(crc ^ byte) & 0xFF]
    return ~crc & 0xFFFF


class AX25Frame:
    """A frame of at most ``AX25_MAX_PACKET_LEN`` bytes and its FCS."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(bytes(data)[: AX25_MAX_PACKET_LEN - 2])
        self.fcs = 0

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AX25Frame(data={self.data!r}, fcs=0x{self.fcs:04X})"

    def append(self, c: int) -> None:
        """Append one byte; raise OverflowError when the frame is full."""
        if len(self._data) >= AX25_MAX_PACKET_LEN:
            raise OverflowError("AX.25 frame is full")
        self._data.append(c & 0xFF)

    def check_crc(self) -> bool:
        """Verify the trailing FCS; on success store it in ``fcs``."""
        if len(self._data) < 2:
            return False
        crc = crc16_ccitt(self._data[:-2])
        if self._data[-2:] == crc.to_bytes(2, "little"):
            self.fcs = crc
            return True
        return False

    def add_crc(self) -> None:
        """Compute the FCS and append it, low byte first."""
        if len(self._data) > AX25_MAX_PACKET_LEN - 2:
            raise OverflowError("no room for the frame check sequence")
        self.fcs = crc16_ccitt(self._data)
        self._data += self.fcs.to_bytes(2, "little")