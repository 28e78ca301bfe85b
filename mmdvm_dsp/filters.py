"""Fixed- and floating-point filters used by the modem signal chain.

The FIR filters keep their delay line between calls, so a signal may be
fed in blocks of any size. Coefficients are applied in the order the
modem tables store them: ``coeffs[-1]`` weights the newest sample.
"""

from collections import deque
from collections.abc import Iterable, Sequence


def saturate(value: int, bits: int) -> int:
    """Clamp ``value`` to the range of a signed integer of ``bits`` bits."""
    if bits < 1:
        raise ValueError("bits must be at least 1")
    upper = (1 << (bits - 1)) - 1
    lower = -(1 << (bits - 1))
    return max(lower, min(upper, value))


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a two's-complement 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class _Fir:
    """Shared delay-line handling for the direct-form FIR filters."""

    def __init__(self, coeffs: Sequence) -> None:
        if not coeffs:
            raise ValueError("a filter needs at least one coefficient")
        self._coeffs = tuple(coeffs)
        self._state: deque = deque([0] * len(self._coeffs), maxlen=len(self._coeffs))

    @property
    def coeffs(self) -> tuple:
        return self._coeffs

    @coeffs.setter
    def coeffs(self, coeffs: Sequence) -> None:
        """Swap the taps; the delay line is kept when the length is unchanged."""
        if not coeffs:
            raise ValueError("a filter needs at least one coefficient")
        new = tuple(coeffs)
        if len(new) != len(self._coeffs):
            self._state = deque([0] * len(new), maxlen=len(new))
        self._coeffs = new

    def reset(self) -> None:
        """Clear the delay line."""
        self._state = deque([0] * len(self._coeffs), maxlen=len(self._coeffs))

    def _accumulate(self, sample):
        self._state.append(sample)
        return sum(c * x for c, x in zip(self._coeffs, self._state))


class FirQ15(_Fir):
    """Q15 FIR filter: products summed, shifted by 15 and saturated to 16 bits."""

    def __init__(self, coeffs: Sequence[int]) -> None:
        super().__init__(coeffs)

    def process(self, samples: Iterable[int]) -> list[int]:
        return [saturate(self._accumulate(int(s)) >> 15, 16) for s in samples]

    def reset(self) -> None:
        super().reset()


class FirF32(_Fir):
    """Floating-point FIR filter."""

    def __init__(self, coeffs: Sequence[float]) -> None:
        super().__init__([float(c) for c in coeffs])

    def process(self, samples: Iterable[float]) -> list[float]:
        return [float(self._accumulate(float(s))) for s in samples]

    def reset(self) -> None:
        self._state = deque([0.0] * len(self._coeffs), maxlen=len(self._coeffs))


class InterpolatorQ15:
    """Q15 polyphase interpolating FIR filter producing ``factor`` outputs per input."""

    def __init__(self, coeffs: Sequence[int], factor: int) -> None:
        if factor < 1:
            raise ValueError("interpolation factor must be positive")
        if not coeffs or len(coeffs) % factor != 0:
            raise ValueError("number of coefficients must be a non-zero multiple of the factor")
        self.factor = factor
        self._coeffs = tuple(coeffs)
        self._phase_length = len(self._coeffs) // factor
        self.reset()

    def reset(self) -> None:
        """Clear the delay line."""
        self._state = deque([0] * self._phase_length, maxlen=self._phase_length)

    def process(self, samples: Iterable[int]) -> list[int]:
        out: list[int] = []
        factor = self.factor
        for sample in samples:
            self._state.append(int(sample))
            for phase in range(factor):
                taps = self._coeffs[factor - 1 - phase::factor]
                acc = sum(c * x for c, x in zip(taps, self._state))
                out.append(saturate(acc >> 15, 16))
        return out


class DirectFormI:
    """Second-order fixed-point IIR section in direct form I.

    The coefficients are Q15 scaled; ``a0`` is accepted for symmetry with
    filter design tools and ignored. Output is saturated to 15 bits.
    """

    def __init__(self, b0: int, b1: int, b2: int, a0: int, a1: int, a2: int) -> None:
        self.b0, self.b1, self.b2 = b0, b1, b2
        self.a1, self.a2 = a1, a2
        self.reset()

    def reset(self) -> None:
        """Clear the delay lines."""
        self._x1 = self._x2 = 0
        self._y1 = self._y2 = 0

    def filter(self, sample: int) -> int:
        """Filter one sample and return one sample."""
        acc = _wrap32(
            self.b0 * sample
            + self.b1 * self._x1
            + self.b2 * self._x2
            - self.a1 * self._y1
            - self.a2 * self._y2
        )
        out = saturate(acc >> 15, 15)
        self._x2, self._x1 = self._x1, sample
        self._y2, self._y1 = self._y1, out
        return out