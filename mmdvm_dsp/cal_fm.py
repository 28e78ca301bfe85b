"""FM deviation calibration: continuous sine tones whose level marks a given deviation."""

import enum
import math

from .filters import saturate

# Tone frequency (Hz) -> (samples per tone cycle buffer, Q31 phase increment per sample).
TONE_TABLE = {
    2495: (10, 223248821),
    2079: (12, 186025772),
    1633: (15, 146118367),
    1247: (19, 111579672),
    1039: (23, 93012886),
    956: (25, 85541432),
}

DEFAULT_LEVEL = 128 * 12

_Q31_FULL_TURN = 1 << 31


class FMCalState(enum.Enum):
    """Modem states that select an FM calibration tone."""

    FMCAL10K = "fmcal10k"
    FMCAL12K = "fmcal12k"
    FMCAL15K = "fmcal15k"
    FMCAL20K = "fmcal20k"
    FMCAL25K = "fmcal25k"
    FMCAL30K = "fmcal30k"

    @property
    def frequency(self) -> int:
        return _FREQUENCIES[self]


_FREQUENCIES = {
    FMCalState.FMCAL10K: 956,
    FMCalState.FMCAL12K: 1039,
    FMCalState.FMCAL15K: 1247,
    FMCalState.FMCAL20K: 1633,
    FMCalState.FMCAL25K: 2079,
    FMCalState.FMCAL30K: 2495,
}


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _sin_q31(arg: int) -> int:
    """Q31 sine of a Q31 phase where a full turn is 2**31."""
    if arg < 0:
        arg += _Q31_FULL_TURN
    value = round(math.sin(2.0 * math.pi * arg / _Q31_FULL_TURN) * _Q31_FULL_TURN)
    return saturate(value, 32)


def make_tone(frequency: int, level: int) -> list[int]:
    """Return one buffer of Q15 samples of the calibration tone at ``frequency``."""
    try:
        length, increment = TONE_TABLE[frequency]
    except KeyError:
        raise ValueError(f"no calibration tone at {frequency} Hz") from None

    tone = []
    arg = 0
    for _ in range(length):
        value = _sin_q31(arg) * level
        tone.append(saturate(value >> 31, 16))
        arg = _wrap32(arg + increment)
    return tone


class CalFM:
    """Writes a calibration tone to ``io`` (``get_space()``, ``write(mode, samples)``)."""

    def __init__(self, io) -> None:
        self._io = io
        self.level = DEFAULT_LEVEL
        self._tone: list[int] | None = None
        self._transmit = False
        self._last_state = None

    @property
    def transmitting(self) -> bool:
        return self._transmit

    @property
    def tone(self) -> list[int] | None:
        return None if self._tone is None else list(self._tone)

    def process(self, modem_state) -> None:
        """Regenerate the tone on a state change, then fill the output while enabled."""
        if modem_state != self._last_state:
            frequency = _FREQUENCIES.get(modem_state) if isinstance(modem_state, FMCalState) else None
            if frequency is None:
                return
            self._tone = make_tone(frequency, self.level)
            self._last_state = modem_state

        if not self._transmit or not self._tone:
            return

        length = len(self._tone)
        space = self._io.get_space()
        while space > length:
            self._io.write(modem_state, list(self._tone))
            space -= length

    def write(self, data) -> None:
        """Start (``b"\\x01"``) or stop (any other byte) the tone."""
        if len(data) != 1:
            raise ValueError("calibration command must be exactly one byte")
        self._transmit = data[0] == 1