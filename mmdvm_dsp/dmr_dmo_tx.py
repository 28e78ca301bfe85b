"""DMR direct-mode (simplex) transmitter: 4FSK symbol mapping and root-raised-cosine shaping."""

from collections import deque

from .defines import DMR_FRAME_LENGTH_BYTES, DMR_RADIO_SYMBOL_LENGTH
from .filters import InterpolatorQ15

MODE = "dmr"

# Root raised cosine, alpha 0.2, span 8 symbols, 5 samples per symbol.
RRC_0_2_FILTER = (
    0, 0, 0, 0, 850, 219, -720, -1548, -1795, -1172, 237, 1927, 3120, 3073, 1447,
    -1431, -4544, -6442, -5735, -1633, 5651, 14822, 23810, 30367, 32767, 30367,
    23810, 14822, 5651, -1633, -5735, -6442, -4544, -1431, 1447, 3073, 3120,
    1927, 237, -1172, -1795, -1548, -720, 219, 850,
)

DMR_LEVELA = 1362
DMR_LEVELB = 454
DMR_LEVELC = -454
DMR_LEVELD = -1362

_LEVELS = {0b11: DMR_LEVELA, 0b10: DMR_LEVELB, 0b00: DMR_LEVELC, 0b01: DMR_LEVELD}

PR_FILL = bytes((
    0x63, 0xEA, 0x00, 0x76, 0x6C, 0x76, 0xC4, 0x52, 0xC8, 0x78,
    0x09, 0x2D, 0xB8, 0x79, 0x27, 0x57, 0x9B, 0x31, 0xBC, 0x3E,
    0xEA, 0x45, 0xC3, 0x30, 0x49, 0x17, 0x93, 0xAE, 0x8B, 0x6D,
    0xA4, 0xA5, 0xAD, 0xA2, 0xF1, 0x35, 0xB5, 0x3C, 0x1E,
))

DMR_SYNC = 0x5F

FIFO_LENGTH = 1000

SAMPLES_PER_BYTE = 4 * DMR_RADIO_SYMBOL_LENGTH

DEFAULT_TX_DELAY = 240
MIN_TX_DELAY = 600
MAX_TX_DELAY = 1200
TX_DELAY_UNIT = 12


class FifoFullError(BufferError):
    """The transmit queue has no room for another frame."""


def byte_to_levels(c: int) -> list[int]:
    """Map a byte to four 4FSK deviation levels, most significant dibit first."""
    return [_LEVELS[(c >> shift) & 0b11] for shift in (6, 4, 2, 0)]


class DMRDMOTX:
    """Queues DMR frames and writes shaped audio to ``io``.

    ``io`` must provide ``get_space()``, ``write(mode, samples)`` and a boolean
    ``tx`` attribute that is true while the transmitter is keyed.
    """

    def __init__(self, io) -> None:
        self._io = io
        self._fifo: deque[int] = deque()
        self._mod_filter = InterpolatorQ15(RRC_0_2_FILTER, DMR_RADIO_SYMBOL_LENGTH)
        self._po_buffer = b""
        self._po_ptr = 0
        self._tx_delay = DEFAULT_TX_DELAY

    @property
    def tx_delay(self) -> int:
        """Preamble length in bytes."""
        return self._tx_delay

    def write_data(self, data) -> None:
        """Queue one frame: a control byte followed by ``DMR_FRAME_LENGTH_BYTES`` bytes."""
        if len(data) != DMR_FRAME_LENGTH_BYTES + 1:
            raise ValueError(f"DMR frame must be {DMR_FRAME_LENGTH_BYTES + 1} bytes")
        if FIFO_LENGTH - len(self._fifo) < DMR_FRAME_LENGTH_BYTES:
            raise FifoFullError("DMR transmit queue is full")
        self._fifo.extend(bytes(data[1:]))

    def process(self) -> None:
        """Load the next preamble or frame, then write bytes while the output has room."""
        if not self._po_buffer and self._fifo:
            if not self._io.tx:
                self._po_buffer = bytes([DMR_SYNC]) * self._tx_delay
            else:
                frame = bytes(self._fifo.popleft() for _ in range(min(DMR_FRAME_LENGTH_BYTES, len(self._fifo))))
                self._po_buffer = frame + PR_FILL
            self._po_ptr = 0

        if not self._po_buffer:
            return

        space = self._io.get_space()
        while space > SAMPLES_PER_BYTE:
            c = self._po_buffer[self._po_ptr]
            self._po_ptr += 1
            self._write_byte(c)
            space -= SAMPLES_PER_BYTE

            if self._po_ptr >= len(self._po_buffer):
                self._po_buffer = b""
                self._po_ptr = 0
                return

    def set_tx_delay(self, delay: int) -> None:
        """Set the preamble to 500 ms plus ``delay`` times 10 ms, at most one second."""
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._tx_delay = min(MIN_TX_DELAY + delay * TX_DELAY_UNIT, MAX_TX_DELAY)

    def space(self) -> int:
        """Number of whole frames the queue can still take."""
        return (FIFO_LENGTH - len(self._fifo)) // (DMR_FRAME_LENGTH_BYTES + 2)

    def _write_byte(self, c: int) -> None:
        self._io.write(MODE, self._mod_filter.process(byte_to_levels(c)))