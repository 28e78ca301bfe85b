"""M17 calibration: a continuous preamble pattern."""

from .defines import M17_FRAME_LENGTH_BYTES

PREAMBLE_BYTE = 0x77

# Zero control byte followed by one frame of preamble.
PREAMBLE = bytes([0x00]) + bytes([PREAMBLE_BYTE]) * M17_FRAME_LENGTH_BYTES

MIN_SPACE = 2


class CalM17:
    """Drives ``m17_tx`` (``process()``, ``space()``, ``write_data(bytes)``) with preamble frames."""

    def __init__(self, m17_tx) -> None:
        self._tx = m17_tx
        self._transmit = False

    @property
    def transmitting(self) -> bool:
        return self._transmit

    def process(self) -> None:
        """Run the transmitter and queue a preamble frame while enabled and there is room."""
        self._tx.process()

        if not self._transmit:
            return

        if self._tx.space() < MIN_SPACE:
            return

        self._tx.write_data(PREAMBLE)

    def write(self, data) -> None:
        """Start (``b"\\x01"``) or stop (any other byte) the pattern."""
        if len(data) != 1:
            raise ValueError("calibration command must be exactly one byte")
        self._transmit = data[0] == 1