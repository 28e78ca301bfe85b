"""Morse code station identification."""

MODE = "cwid"

TONE = (
    0, 518, 1000, 1414, 1732, 1932, 2000, 1932, 1732, 1414, 1000, 518,
    0, -518, -1000, -1414, -1732, -1932, -2000, -1932, -1732, -1414, -1000, -518,
)
SILENCE = (0,) * len(TONE)

CYCLE_LENGTH = len(TONE)
DOT_LENGTH = 50

LEADING_SILENCE = 8
TRAILING_SILENCE = 5
MAX_BITS = 995

# Character -> (left-aligned 32-bit on/off pattern, number of bits).
SYMBOLS = {
    "A": (0xB8000000, 8), "B": (0xEA800000, 12), "C": (0xEBA00000, 14),
    "D": (0xEA000000, 10), "E": (0x80000000, 4), "F": (0xAE800000, 12),
    "G": (0xEE800000, 12), "H": (0xAA000000, 10), "I": (0xA0000000, 6),
    "J": (0xBBB80000, 16), "K": (0xEB800000, 12), "L": (0xBA800000, 12),
    "M": (0xEE000000, 10), "N": (0xE8000000, 8), "O": (0xEEE00000, 14),
    "P": (0xBBA00000, 14), "Q": (0xEEB80000, 16), "R": (0xBA000000, 10),
    "S": (0xA8000000, 8), "T": (0xE0000000, 6), "U": (0xAE000000, 10),
    "V": (0xAB800000, 12), "W": (0xBB800000, 12), "X": (0xEAE00000, 14),
    "Y": (0xEBB80000, 16), "Z": (0xEEA00000, 14),
    "1": (0xBBBB8000, 20), "2": (0xAEEE0000, 18), "3": (0xABB80000, 16),
    "4": (0xAAE00000, 14), "5": (0xAA800000, 12), "6": (0xEAA00000, 14),
    "7": (0xEEA80000, 16), "8": (0xEEEA0000, 18), "9": (0xEEEE8000, 20),
    "0": (0xEEEEE000, 22),
    "/": (0xEAE80000, 16), "?": (0xAEEA0000, 18), ",": (0xEEAEE000, 22),
    "-": (0xEAAE0000, 18), "=": (0xEAB80000, 16), ".": (0xBAEB8000, 20),
    " ": (0x00000000, 4),
}


def morse_bits(text) -> list[bool]:
    """Return the dot-timed on/off sequence for ``text``, with silence either side.

    Characters without a Morse symbol are skipped. Raises ValueError when
    nothing can be sent or the message is too long.
    """
    chars = text if isinstance(text, str) else bytes(text).decode("latin-1")

    bits = [False] * LEADING_SILENCE
    for char in chars:
        symbol = SYMBOLS.get(char)
        if symbol is None:
            continue
        pattern, length = symbol
        for k in range(length):
            if len(bits) >= MAX_BITS:
                raise ValueError("CW identification message is too long")
            bits.append(bool(pattern & (0x80000000 >> k)))

    if len(bits) == LEADING_SILENCE:
        raise ValueError("CW identification message is empty")

    bits.extend([False] * TRAILING_SILENCE)
    return bits


class CWIdTX:
    """Sends a Morse identification through ``io`` (``get_space()``, ``write(mode, samples)``)."""

    def __init__(self, io) -> None:
        self._io = io
        self._bits: list[bool] = []
        self._ptr = 0
        self._n = 0

    def process(self) -> None:
        """Write tone or silence cycles while the output has room."""
        if not self._bits:
            return

        space = self._io.get_space()
        while space > CYCLE_LENGTH:
            self._io.write(MODE, TONE if self._bits[self._ptr] else SILENCE)
            space -= CYCLE_LENGTH

            self._n += 1
            if self._n >= DOT_LENGTH:
                self._ptr += 1
                self._n = 0

            if self._ptr >= len(self._bits):
                self.reset()
                return

    def write(self, data) -> None:
        """Queue a new message; an invalid one clears the queue and raises ValueError."""
        try:
            bits = morse_bits(data)
        except ValueError:
            self.reset()
            raise
        self._bits = bits
        self._ptr = 0
        self._n = 0

    def reset(self) -> None:
        """Drop any message in progress."""
        self._bits = []
        self._ptr = 0
        self._n = 0