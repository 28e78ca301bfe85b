"""1200 baud AFSK demodulator: delay-line discriminator, PLL clock recovery and HDLC deframing."""

import enum
from collections import deque
from collections.abc import Sequence

from .ax25_frame import (
    AX25_FRAME_ABORT,
    AX25_FRAME_END,
    AX25_MAX_ONES,
    AX25_MIN_FRAME_LENGTH,
    AX25Frame,
)
from .ax25_twist import Twist
from .filters import FirF32, FirQ15

SAMPLE_RATE = 24000.0
SYMBOL_RATE = 1200.0

DELAY_LEN = 11

SAMPLES_PER_SYMBOL = SAMPLE_RATE / SYMBOL_RATE
PLL_LIMIT = SAMPLES_PER_SYMBOL / 2.0

LPF_FILTER_COEFFS = (
    -2, -8, -17, -28, -40, -47, -47, -34,
    -5, 46, 122, 224, 354, 510, 689, 885,
    1092, 1302, 1506, 1693, 1856, 1987, 2077, 2124,
    2124, 2077, 1987, 1856, 1693, 1506, 1302, 1092,
    885, 689, 510, 354, 224, 122, 46, -5,
    -34, -47, -47, -40, -28, -17, -8, -2,
)

# Lock detector low-pass: 4th order 80 Hz Bessel at the symbol rate.
PLL_LOCK_B = (1.077063e-03, 4.308253e-03, 6.462379e-03, 4.308253e-03, 1.077063e-03)
PLL_LOCK_A = (1.000000e00, -2.774567e00, 2.962960e00, -1.437990e00, 2.668296e-01)

# 64 Hz loop filter.
PLL_FILTER_COEFFS = (
    3.196252e-02, 1.204223e-01, 2.176819e-01, 2.598666e-01,
    2.176819e-01, 1.204223e-01, 3.196252e-02,
)


class HdlcState(enum.Enum):
    IDLE = 0
    SYNC = 1
    RECEIVE = 2


class AX25Demodulator:
    """Recovers AX.25 frames from a stream of Q15 audio samples."""

    def __init__(self, twist: int) -> None:
        self._frame = AX25Frame()
        self._twist = Twist(twist)
        self._lpf = FirQ15(LPF_FILTER_COEFFS)
        self._delay_line: deque[bool] = deque([False] * DELAY_LEN, maxlen=DELAY_LEN)
        self._nrzi_state = False
        self._pll_filter = FirF32(PLL_FILTER_COEFFS)
        self._pll_last = False
        self._pll_bits = 1
        self._pll_count = 0.0
        self._pll_jitter = 0.0
        self._pll_dcd = False
        self._iir_history = [0.0] * len(PLL_LOCK_B)
        self._hdlc_ones = 0
        self._hdlc_flag = False
        self._hdlc_buffer = 0
        self._hdlc_bits = 0
        self._hdlc_state = HdlcState.IDLE

    def process(self, samples: Sequence[int]) -> AX25Frame | None:
        """Demodulate a block; return the first valid frame completed in it, if any."""
        result: AX25Frame | None = None

        filtered = self._twist.process(samples)
        discriminated = []
        for value in filtered:
            level = value >= 0
            delayed = self._delay(level)
            discriminated.append(2 * (level ^ delayed) - 1)

        for value in self._lpf.process(discriminated):
            bit = value >= 0
            if not self._pll(bit):
                continue
            complete = self._hdlc(self._nrzi(bit))
            if complete and result is None:
                result = self._frame
                self._frame = AX25Frame()

        return result

    def set_twist(self, twist: int) -> None:
        self._twist.set_twist(twist)

    def is_dcd(self) -> bool:
        """Carrier detect with hysteresis on the PLL jitter."""
        if self._pll_jitter <= SAMPLES_PER_SYMBOL * 0.03:
            self._pll_dcd = True
        elif self._pll_jitter >= SAMPLES_PER_SYMBOL * 0.15:
            self._pll_dcd = False
        return self._pll_dcd

    def _delay(self, b: bool) -> bool:
        oldest = self._delay_line[0]
        self._delay_line.append(b)
        return oldest

    def _nrzi(self, b: bool) -> bool:
        result = b == self._nrzi_state
        self._nrzi_state = b
        return result

    def _pll(self, bit: bool) -> bool:
        sample = False

        if bit != self._pll_last or self._pll_bits > 16:
            self._pll_last = bit

            if self._pll_count > PLL_LIMIT:
                self._pll_count -= SAMPLES_PER_SYMBOL

            adjust = 5.0 if self._pll_bits > 16 else 0.0
            offset = self._pll_count / self._pll_bits
            jitter = self._pll_filter.process([offset])[0]

            self._pll_jitter = self._iir(adjust + abs(offset))

            self._pll_count -= jitter / 2.0
            self._pll_bits = 1
        elif self._pll_count > PLL_LIMIT:
            sample = True
            self._pll_count -= SAMPLES_PER_SYMBOL
            self._pll_bits += 1

        self._pll_count += 1.0
        return sample

    def _hdlc(self, b: bool) -> bool:
        if self._hdlc_ones == AX25_MAX_ONES:
            if b:
                self._hdlc_flag = True
            else:
                # A stuffed zero: drop it.
                self._hdlc_flag = False
                self._hdlc_ones = 0
                return False

        self._hdlc_buffer = (self._hdlc_buffer >> 1) | (0x80 if b else 0x00)
        self._hdlc_bits += 1
        self._hdlc_ones = self._hdlc_ones + 1 if b else 0

        if self._hdlc_flag:
            result = False
            if self._hdlc_buffer == AX25_FRAME_END:
                if len(self._frame) >= AX25_MIN_FRAME_LENGTH:
                    result = self._frame.check_crc()
                    if not result:
                        self._frame = AX25Frame()
                else:
                    self._frame = AX25Frame()
                self._hdlc_state = HdlcState.SYNC
                self._hdlc_flag = False
                self._hdlc_bits = 0
            elif self._hdlc_buffer == AX25_FRAME_ABORT:
                self._frame = AX25Frame()
                self._hdlc_state = HdlcState.IDLE
                self._hdlc_flag = False
                self._hdlc_bits = 0
            return result

        if self._hdlc_state is not HdlcState.IDLE and self._hdlc_bits == 8:
            self._hdlc_state = HdlcState.RECEIVE
            try:
                self._frame.append(self._hdlc_buffer)
            except OverflowError:
                pass
            self._hdlc_bits = 0

        return False

    def _iir(self, value: float) -> float:
        history = self._iir_history
        history.insert(0, value)
        history.pop()
        history[0] = value - sum(a * h for a, h in zip(PLL_LOCK_A[1:], history[1:]))
        return sum(b * h for b, h in zip(PLL_LOCK_B, history))