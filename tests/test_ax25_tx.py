from mmdvm_dsp.ax25_tx import AUDIO_TABLE, AX25_RADIO_SYMBOL_LENGTH, AX25TX


class FakeIO:
    def __init__(self, space=10**7):
        self.space = space
        self.samples = []
        self.writes = 0

    def get_space(self):
        return self.space

    def write(self, mode, samples):
        self.writes += 1
        self.samples.extend(samples)


class FakeRX:
    def __init__(self, clear):
        self.clear = clear

    def can_tx(self):
        return self.clear


def _samples(payload, delay=None):
    io = FakeIO()
    tx = AX25TX(io, FakeRX(True), duplex=False)
    if delay is not None:
        tx.set_tx_delay(delay)
    tx.write_data(payload)
    tx.process()
    return io.samples


def test_space_reflects_queue():
    io = FakeIO()
    tx = AX25TX(io, FakeRX(True))
    assert tx.space() == 255
    tx.write_data(b"hello world frame")
    assert tx.space() == 0
    tx.process()
    assert tx.space() == 255


def test_output_is_whole_symbols():
    samples = _samples(b"abcdefghijklmnopq")
    assert samples
    assert len(samples) % AX25_RADIO_SYMBOL_LENGTH == 0


def test_tx_delay_adds_twelve_bits_per_unit():
    short = _samples(b"abcdefghijklmnopq", delay=0)
    longer = _samples(b"abcdefghijklmnopq", delay=1)
    assert len(longer) - len(short) == 12 * AX25_RADIO_SYMBOL_LENGTH


def test_half_duplex_waits_for_clear_channel():
    io = FakeIO()
    rx = FakeRX(False)
    tx = AX25TX(io, rx, duplex=False)
    tx.write_data(b"abcdefghijklmnopq")
    tx.process()
    assert io.samples == []
    assert tx.space() == 0
    rx.clear = True
    tx.process()
    assert io.samples
    assert tx.space() == 255


def test_duplex_ignores_channel_state():
    io = FakeIO()
    tx = AX25TX(io, FakeRX(False), duplex=True)
    tx.write_data(b"abcdefghijklmnopq")
    tx.process()
    assert tx.space() == 255
    assert len(io.samples) == len(_samples(b"abcdefghijklmnopq"))


def test_transmission_in_progress_continues_when_channel_busy():
    io = FakeIO(space=10 * AX25_RADIO_SYMBOL_LENGTH + 1)
    rx = FakeRX(True)
    tx = AX25TX(io, rx, duplex=False)
    tx.write_data(b"abcdefghijklmnopq")
    tx.process()
    written = len(io.samples)
    rx.clear = False
    tx.process()
    assert len(io.samples) > written


def test_limited_space_writes_only_what_fits():
    io = FakeIO(space=2 * AX25_RADIO_SYMBOL_LENGTH + 1)
    tx = AX25TX(io, FakeRX(True))
    tx.write_data(b"abcdefghijklmnopq")
    tx.process()
    assert len(io.samples) == 2 * AX25_RADIO_SYMBOL_LENGTH
    assert io.writes == 2


def test_bit_stuffing_lengthens_runs_of_ones():
    ones = _samples(b"\xFF" * 20)
    zeros = _samples(b"\x00" * 20)
    assert len(ones) > len(zeros)


def test_oversized_payload_is_truncated():
    payload = bytes(range(200)) * 2
    assert _samples(payload) == _samples(payload[:298])