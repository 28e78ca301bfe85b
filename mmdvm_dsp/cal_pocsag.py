"""POCSAG calibration: a continuous alternating-bit pattern."""

import enum

CAL_BYTE = 0xAA

# Output space, in samples, that must be free before another byte is sent.
MIN_SPACE = 165


class POCSAGCalState(enum.Enum):
    IDLE = 0
    TX = 1


class CalPOCSAG:
    """Sends ``CAL_BYTE`` through ``pocsag_tx.write_byte`` while ``io.get_space()`` allows."""

    def __init__(self, io, pocsag_tx) -> None:
        self._io = io
        self._tx = pocsag_tx
        self._state = POCSAGCalState.IDLE

    @property
    def state(self) -> POCSAGCalState:
        return self._state

    def process(self) -> None:
        """Queue one calibration byte when enabled and the output has room."""
        if self._state is POCSAGCalState.IDLE:
            return

        if self._io.get_space() <= MIN_SPACE:
            return

        self._tx.write_byte(CAL_BYTE)

    def write(self, data) -> None:
        """Start (``b"\\x01"``) or stop (any other byte) the pattern."""
        if len(data) != 1:
            raise ValueError("calibration command must be exactly one byte")
        self._state = POCSAGCalState.TX if data[0] == 1 else POCSAGCalState.IDLE