"""AX.25 transmitter: HDLC framing, bit stuffing, NRZI and 1200/2200 Hz AFSK synthesis."""

from .ax25_demodulator import SAMPLES_PER_SYMBOL
from .ax25_frame import AX25_FRAME_END, AX25_FRAME_START, AX25_MAX_ONES, AX25Frame

AX25_RADIO_SYMBOL_LENGTH = int(SAMPLES_PER_SYMBOL)

MODE = "ax25"

# One cycle of a sine wave in 120 steps; stepping 6 gives 1200 Hz, 11 gives 2200 Hz.
AUDIO_TABLE = (
    0, 214, 428, 641, 851, 1060, 1265, 1468, 1666, 1859, 2048, 2230, 2407, 2577, 2740, 2896,
    3043, 3182, 3313, 3434, 3546, 3649, 3741, 3823, 3895, 3955, 4006, 4045, 4073, 4089, 4095,
    4089, 4073, 4045, 4006, 3955, 3895, 3823, 3741, 3649, 3546, 3434, 3313, 3182, 3043, 2896,
    2740, 2577, 2407, 2230, 2048, 1859, 1666, 1468, 1265, 1060, 851, 641, 428, 214, 0, -214,
    -428, -641, -851, -1060, -1265, -1468, -1666, -1859, -2047, -2230, -2407, -2577, -2740,
    -2896, -3043, -3182, -3313, -3434, -3546, -3649, -3741, -3823, -3895, -3955, -4006, -4045,
    -4073, -4089, -4095, -4089, -4073, -4045, -4006, -3955, -3895, -3823, -3741, -3649, -3546,
    -3434, -3313, -3182, -3043, -2896, -2740, -2577, -2407, -2230, -2047, -1859, -1666, -1468,
    -1265, -1060, -851, -641, -428, -214,
)

MARK_STEP = 6
SPACE_STEP = 11

# Each unit of TX delay is 10 ms, i.e. twelve bits at 1200 baud.
TX_DELAY_UNIT = 12


def _msb_first(byte: int) -> list[bool]:
    return [bool(byte & (0x80 >> i)) for i in range(8)]


def _lsb_first(byte: int) -> list[bool]:
    return [bool(byte & (1 << i)) for i in range(8)]


class AX25TX:
    """Queues one frame at a time and writes its audio to ``io``.

    ``io`` must provide ``get_space()`` and ``write(mode, samples)``. In
    half duplex, ``rx.can_tx()`` must allow the start of each frame.
    """

    def __init__(self, io, rx=None, duplex: bool = False) -> None:
        self._io = io
        self._rx = rx
        self.duplex = duplex
        self._bits: list[bool] = []
        self._ptr = 0
        self._tx_delay = 360
        self._table_ptr = 0
        self._nrzi_state = False

    def write_data(self, data: bytes) -> None:
        """Frame ``data`` and queue it, replacing anything not yet sent."""
        frame = AX25Frame(data)
        frame.add_crc()

        self._bits = []
        self._ptr = 0
        self._nrzi_state = False
        self._table_ptr = 0

        bits = self._bits
        bits.extend(self._nrzi(False) for _ in range(self._tx_delay))
        bits.extend(self._nrzi(b) for b in _msb_first(AX25_FRAME_START))

        ones = 0
        for byte in frame.data:
            for b in _lsb_first(byte):
                bits.append(self._nrzi(b))
                if not b:
                    ones = 0
                    continue
                ones += 1
                if ones == AX25_MAX_ONES:
                    bits.append(self._nrzi(False))
                    ones = 0

        bits.extend(self._nrzi(b) for b in _msb_first(AX25_FRAME_END))

    def process(self) -> None:
        """Write as many queued bits as the output has room for."""
        if not self._bits:
            return

        if not self.duplex and self._ptr == 0:
            if self._rx is None or not self._rx.can_tx():
                return

        space = self._io.get_space()
        while space > AX25_RADIO_SYMBOL_LENGTH:
            b = self._bits[self._ptr]
            self._ptr += 1
            self._write_bit(b)
            space -= AX25_RADIO_SYMBOL_LENGTH

            if self._ptr >= len(self._bits):
                self._bits = []
                self._ptr = 0
                return

    def set_tx_delay(self, delay: int) -> None:
        """Set the preamble length in 10 ms units."""
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._tx_delay = delay * TX_DELAY_UNIT

    def space(self) -> int:
        """255 when a new frame may be queued, otherwise 0."""
        return 0 if self._bits else 255

    def _write_bit(self, b: bool) -> None:
        buffer = []
        for _ in range(AX25_RADIO_SYMBOL_LENGTH):
            value = AUDIO_TABLE[self._table_ptr]
            if b:
                # The lower tone is sent 12 dB down.
                value >>= 2
                self._table_ptr += MARK_STEP
            else:
                self._table_ptr += SPACE_STEP
            buffer.append(value >> 1)
            if self._table_ptr >= len(AUDIO_TABLE):
                self._table_ptr -= len(AUDIO_TABLE)
        self._io.write(MODE, buffer)

    def _nrzi(self, b: bool) -> bool:
        if not b:
            self._nrzi_state = not self._nrzi_state
        return self._nrzi_state