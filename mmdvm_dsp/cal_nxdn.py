"""NXDN calibration: a repeating four-frame 1031 Hz test pattern."""

import enum

_COMMON_TAIL = (
    "4C AA DE 8B 26 E4 F2 82 88"
    "C6 8A 74 29 A4 EC D0 08 22"
    "CE A2 FC 01 8C EC DA 0A A0"
    "EE 8A 7E 2B 26 CC F8 8A 08"
)

# RAN 1, unit 1, group 1, outbound; each frame prefixed by a zero control byte.
NXDN_CAL1K = tuple(
    bytes.fromhex("00" + head + _COMMON_TAIL)
    for head in (
        "CD F5 9D 5D 7C FA 0A 6E 8A 23 56 E8",
        "CD F5 9D 5D 7C 6D BB 0E B3 A4 26 A8",
        "CD F5 9D 5D 76 3A 1B 4A 81 A8 E2 80",
        "CD F5 9D 5D 74 28 83 02 B0 2D 07 E2",
    )
)


class NXDNCalState(enum.Enum):
    IDLE = 0
    TX = 1


class CalNXDN:
    """Drives ``nxdn_tx`` (``process()``, ``space()``, ``write_data(bytes)``) with the test pattern."""

    def __init__(self, nxdn_tx) -> None:
        self._tx = nxdn_tx
        self._transmit = False
        self._state = NXDNCalState.IDLE
        self._audio_seq = 0

    @property
    def state(self) -> NXDNCalState:
        return self._state

    def process(self) -> None:
        """Run the transmitter and queue the next frame when there is room."""
        self._tx.process()

        if self._tx.space() < 1:
            return

        if self._state is NXDNCalState.TX:
            self._tx.write_data(NXDN_CAL1K[self._audio_seq])
            self._audio_seq = (self._audio_seq + 1) % len(NXDN_CAL1K)
            if not self._transmit:
                self._state = NXDNCalState.IDLE
        else:
            self._state = NXDNCalState.IDLE
            self._audio_seq = 0

    def write(self, data) -> None:
        """Start (``b"\\x01"``) or stop (any other byte) the pattern."""
        if len(data) != 1:
            raise ValueError("calibration command must be exactly one byte")

        self._transmit = data[0] == 1
        if self._transmit and self._state is NXDNCalState.IDLE:
            self._state = NXDNCalState.TX