"""AX.25 receiver: band-pass filtering, three parallel demodulators and p-persistent channel access."""

import logging
from collections.abc import Iterable

from .ax25_demodulator import AX25Demodulator
from .ax25_twist import TWIST_COEFFS
from .filters import FirQ15

log = logging.getLogger(__name__)

# 1100-2300 Hz band-pass, Hann window, Q15.
FILTER_COEFFS = (
    5, 12, 18, 21, 19, 11, -2, -15, -25, -27,
    -21, -11, -3, -5, -19, -43, -69, -83, -73, -35,
    27, 98, 155, 180, 163, 109, 39, -20, -45, -26,
    23, 74, 89, 39, -81, -247, -407, -501, -480, -334,
    -92, 175, 388, 479, 429, 275, 99, 5, 68, 298,
    626, 913, 994, 740, 115, -791, -1770, -2544, -2847, -2509,
    -1527, -76, 1518, 2875, 3653, 3653, 2875, 1518, -76, -1527,
    -2509, -2847, -2544, -1770, -791, 115, 740, 994, 913, 626,
    298, 68, 5, 99, 275, 429, 479, 388, 175, -92,
    -334, -480, -501, -407, -247, -81, 39, 89, 74, 23,
    -26, -45, -20, 39, 109, 163, 180, 155, 98, 27,
    -35, -73, -83, -69, -43, -19, -5, -3, -11, -21,
    -27, -25, -15, -2, 11, 19, 21, 18, 12, 5,
)

# One slot-time unit is 10 ms at 24 kHz.
SLOT_TIME_UNIT = 240

# The three demodulators run at the configured twist and 3 dB either side.
TWIST_SPREAD = 3


class XabcRandom:
    """Small 8-bit X-ABC pseudorandom generator; not suitable for cryptography."""

    def __init__(self) -> None:
        self._x = 1
        self._a = 0xB7
        self._b = 0x73
        self._c = 0xF6
        self._mix()

    def _mix(self) -> None:
        self._a = self._a ^ self._c ^ self._x
        self._b = (self._b + self._a) & 0xFF
        self._c = ((self._c + (self._b >> 1)) ^ self._a) & 0xFF

    def next_byte(self) -> int:
        """Return the next value in the range 0..255."""
        self._x = (self._x + 1) & 0xFF
        self._mix()
        return self._c


class AX25RX:
    """Feeds received audio to the demodulators and reports frames and carrier state.

    ``io`` must provide ``set_decode(bool)`` and ``set_adc_detection(bool)``;
    ``serial`` must provide ``write_ax25_data(bytes)``.
    """

    def __init__(self, io, serial) -> None:
        self._io = io
        self._serial = serial
        self._filter = FirQ15(FILTER_COEFFS)
        self._demods = (AX25Demodulator(3), AX25Demodulator(6), AX25Demodulator(9))
        self._last_fcs = 0
        self._count = 0
        self._slot_time = 30
        self._slot_count = 0
        self._p_persist = 128
        self._dcd = False
        self._can_tx = False
        self._rand = XabcRandom()

    def samples(self, samples: Iterable[int]) -> None:
        """Process one block of Q15 audio samples."""
        block = list(samples)
        output = self._filter.process(block)

        self._count += 1

        for number, demod in enumerate(self._demods, start=1):
            frame = demod.process(output)
            if frame is None:
                continue
            if frame.fcs != self._last_fcs or self._count > 2:
                self._last_fcs = frame.fcs
                self._count = 0
                self._serial.write_ax25_data(frame.data[:-2])
            log.debug("decoder %d reported", number)

        self._slot_count += len(block)
        if self._slot_count < self._slot_time:
            return
        self._slot_count = 0

        # Every demodulator updates its own hysteresis, so query all of them.
        carrier = [demod.is_dcd() for demod in self._demods]

        if any(carrier):
            if not self._dcd:
                self._io.set_decode(True)
                self._io.set_adc_detection(True)
                self._dcd = True
            self._can_tx = False
        else:
            if self._dcd:
                self._io.set_decode(False)
                self._io.set_adc_detection(False)
                self._dcd = False
            self._can_tx = self._p_persist >= self._rand.next_byte()

    def set_params(self, twist: int, slot_time: int, p_persist: int) -> None:
        """Set the twist, the slot time in 10 ms units and the persistence (0..255)."""
        for value in (twist - TWIST_SPREAD, twist + TWIST_SPREAD):
            if value not in TWIST_COEFFS:
                raise ValueError(f"twist {twist} is out of range")
        if not 0 <= p_persist <= 255:
            raise ValueError("p_persist must be between 0 and 255")
        if slot_time < 0:
            raise ValueError("slot_time must not be negative")

        self._demods[0].set_twist(twist - TWIST_SPREAD)
        self._demods[1].set_twist(twist)
        self._demods[2].set_twist(twist + TWIST_SPREAD)

        self._slot_time = slot_time * SLOT_TIME_UNIT
        self._p_persist = p_persist

    def can_tx(self) -> bool:
        """Whether the channel was clear and the persistence draw allowed sending."""
        return self._can_tx