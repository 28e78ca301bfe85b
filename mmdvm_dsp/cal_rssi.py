"""RSSI calibration: one-second maximum, minimum and average reports."""

from collections.abc import Iterable

REPORT_SAMPLES = 24000


class CalRSSI:
    """Collects RSSI readings and sends six-byte reports via ``serial.write_rssi_data``.

    Each report is the maximum, minimum and average as big-endian 16-bit values.
    """

    def __init__(self, serial) -> None:
        self._serial = serial
        self._reset()

    def _reset(self) -> None:
        self._count = 0
        self._accum = 0
        self._min = 0xFFFF
        self._max = 0x0000

    def samples(self, rssi: Iterable[int]) -> None:
        """Add readings; a report goes out after every ``REPORT_SAMPLES`` of them."""
        for value in rssi:
            value &= 0xFFFF
            self._accum = (self._accum + value) & 0xFFFFFFFF
            self._max = max(self._max, value)
            self._min = min(self._min, value)

            self._count += 1
            if self._count >= REPORT_SAMPLES:
                average = (self._accum // self._count) & 0xFFFF
                report = b"".join(
                    v.to_bytes(2, "big") for v in (self._max, self._min, average)
                )
                self._serial.write_rssi_data(report)
                self._reset()