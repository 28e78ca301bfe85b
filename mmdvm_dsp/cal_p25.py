"""P25 Phase 1 calibration: a continuous 1011 Hz test pattern of alternating LDU1/LDU2 frames."""

import enum

from .defines import P25_LDU_FRAME_LENGTH_BYTES

# Recommended 1011 Hz test pattern (NAC 0x293, source 1, talkgroup 1),
# prefixed by a zero control byte.
LDU1_1K = bytes.fromhex(
    "00"
    "55 75 F5 FF 77 FF 29 35 54 7B CB 19 4D 0D CE 24 A1 24"
    "0D 43 3C 0B E1 B9 18 44 FC C1 62 96 27 60 E4 E2 4A 10"
    "90 D4 33 C0 BE 1B 91 84 4C FC 16 29 62 76 0E C0 00 00"
    "00 00 03 89 28 49 0D 43 3C 02 F8 6E 46 11 3F C1 62 94"
    "89 D8 39 00 00 00 00 1C 38 24 A1 24 35 0C F0 2F 86 E4"
    "18 44 FF 05 8A 58 9D 83 B0 00 00 00 00 70 E2 4A 12 40"
    "D4 33 C0 BE 1B 91 84 4F F0 16 29 62 76 0E 6D E5 D5 48"
    "AD E3 89 28 49 0D 43 3C 08 F8 6E 46 11 3F C1 62 96 24"
    "D8 3B A1 41 C2 D2 BA 38 90 A1 24 35 0C F0 2F 86 E4 60"
    "44 FF 05 8A 58 9D 83 94 C8 FB 02 35 A4 E2 4A 12 43 50"
    "33 C0 BE 1B 91 84 4F F0 58 29 62 76 0E C0 00 00 00 0C"
    "89 28 49 0D 43 3C 0B E1 B8 46 11 3F C1 62 96 27 60 E4"
)

LDU2_1K = bytes.fromhex(
    "00"
    "55 75 F5 FF 77 FF 29 3A B8 A4 EF B0 9A 8A CE 24 A1 24"
    "0D 43 3C 0B E1 B9 18 44 FC C1 62 96 27 60 EC E2 4A 10"
    "90 D4 33 C0 BE 1B 91 84 4C FC 16 29 62 76 0E 40 00 00"
    "00 00 03 89 28 49 0D 43 3C 02 F8 6E 46 11 3F C1 62 94"
    "89 D8 3B 00 00 00 00 00 38 24 A1 24 35 0C F0 2F 86 E4"
    "18 44 FF 05 8A 58 9D 83 90 00 00 00 00 00 E2 4A 12 40"
    "D4 33 C0 BE 1B 91 84 4F F0 16 29 62 76 0E E0 E0 00 00"
    "00 03 89 28 49 0D 43 3C 08 F8 6E 46 11 3F C1 62 96 24"
    "D8 39 AE 8B 48 B6 49 38 90 A1 24 35 0C F0 2F 86 E4 60"
    "44 FF 05 8A 58 9D 83 B9 A8 F4 F1 FD 60 E2 4A 12 43 50"
    "33 C0 BE 1B 91 84 4F F0 58 29 62 76 0E 40 00 00 00 0C"
    "89 28 49 0D 43 3C 0B E1 B8 46 11 3F C1 62 96 27 60 EC"
)

assert len(LDU1_1K) == len(LDU2_1K) == P25_LDU_FRAME_LENGTH_BYTES + 1


class P25CalState(enum.Enum):
    IDLE = 0
    LDU1 = 1
    LDU2 = 2


class CalP25:
    """Drives ``p25_tx`` (``process()``, ``space()``, ``write_data(bytes)``) with the test pattern."""

    def __init__(self, p25_tx) -> None:
        self._tx = p25_tx
        self._transmit = False
        self._state = P25CalState.IDLE

    @property
    def state(self) -> P25CalState:
        return self._state

    def process(self) -> None:
        """Run the transmitter and queue the next frame when there is room."""
        self._tx.process()

        if self._tx.space() < 1:
            return

        if self._state is P25CalState.LDU1:
            self._tx.write_data(LDU1_1K)
            self._state = P25CalState.LDU2
        elif self._state is P25CalState.LDU2:
            self._tx.write_data(LDU2_1K)
            self._state = P25CalState.LDU1 if self._transmit else P25CalState.IDLE
        else:
            self._state = P25CalState.IDLE

    def write(self, data) -> None:
        """Start (``b"\\x01"``) or stop (any other byte) the pattern."""
        if len(data) != 1:
            raise ValueError("calibration command must be exactly one byte")

        self._transmit = data[0] == 1
        if self._transmit and self._state is P25CalState.IDLE:
            self._state = P25CalState.LDU1