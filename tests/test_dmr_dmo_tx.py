import pytest

from mmdvm_dsp.defines import DMR_FRAME_LENGTH_BYTES
from mmdvm_dsp.dmr_dmo_tx import (
    DMR_LEVELA,
    DMR_LEVELB,
    DMR_LEVELC,
    DMR_LEVELD,
    FIFO_LENGTH,
    MODE,
    PR_FILL,
    SAMPLES_PER_BYTE,
    DMRDMOTX,
    FifoFullError,
    byte_to_levels,
)

FRAME = b"\x00" + bytes(range(DMR_FRAME_LENGTH_BYTES))


class FakeIO:
    def __init__(self, space=100000, tx=False):
        self.space = space
        self.tx = tx
        self.writes = []

    def get_space(self):
        return self.space

    def write(self, mode, samples):
        self.writes.append((mode, list(samples)))


def test_byte_to_levels():
    assert byte_to_levels(0xFF) == [DMR_LEVELA] * 4
    assert byte_to_levels(0x00) == [DMR_LEVELC] * 4
    assert byte_to_levels(0x55) == [DMR_LEVELD] * 4
    assert byte_to_levels(0b11100001) == [DMR_LEVELA, DMR_LEVELB, DMR_LEVELC, DMR_LEVELD]


@pytest.mark.parametrize("length", [0, DMR_FRAME_LENGTH_BYTES, DMR_FRAME_LENGTH_BYTES + 2])
def test_write_rejects_wrong_length(length):
    with pytest.raises(ValueError):
        DMRDMOTX(FakeIO()).write_data(bytes(length))


def test_space_decreases_after_write():
    tx = DMRDMOTX(FakeIO())
    before = tx.space()
    assert before == FIFO_LENGTH // (DMR_FRAME_LENGTH_BYTES + 2)
    tx.write_data(FRAME)
    assert tx.space() < before


def test_fifo_full_raises():
    tx = DMRDMOTX(FakeIO())
    with pytest.raises(FifoFullError):
        for _ in range(FIFO_LENGTH):
            tx.write_data(FRAME)
    assert tx.space() == 0


def test_empty_queue_writes_nothing():
    io = FakeIO()
    DMRDMOTX(io).process()
    assert io.writes == []


def test_preamble_when_not_keyed():
    io = FakeIO(tx=False)
    tx = DMRDMOTX(io)
    tx.write_data(FRAME)
    space = tx.space()
    tx.process()
    assert len(io.writes) == tx.tx_delay
    assert tx.space() == space


def test_frame_sent_when_keyed():
    io = FakeIO(tx=True)
    tx = DMRDMOTX(io)
    before = tx.space()
    tx.write_data(FRAME)
    tx.process()
    assert len(io.writes) == DMR_FRAME_LENGTH_BYTES + len(PR_FILL)
    assert tx.space() == before
    assert all(mode == MODE and len(s) == SAMPLES_PER_BYTE for mode, s in io.writes)
    assert all(-32768 <= v <= 32767 for _, s in io.writes for v in s)


def test_output_limited_by_space():
    io = FakeIO(space=100, tx=True)
    tx = DMRDMOTX(io)
    tx.write_data(FRAME)
    tx.process()
    first = len(io.writes)
    assert first == 4
    tx.process()
    assert len(io.writes) == 2 * first


def test_opposite_levels_give_opposite_audio():
    outputs = []
    for byte in (0xFF, 0x55):
        io = FakeIO(tx=True)
        tx = DMRDMOTX(io)
        tx.write_data(b"\x00" + bytes([byte]) * DMR_FRAME_LENGTH_BYTES)
        tx.process()
        outputs.append(io.writes[5][1])
    assert any(v != 0 for v in outputs[0])
    assert all(abs(a + b) <= 1 for a, b in zip(*outputs))


def test_set_tx_delay():
    tx = DMRDMOTX(FakeIO())
    assert tx.tx_delay == 240
    tx.set_tx_delay(10)
    assert tx.tx_delay == 720
    tx.set_tx_delay(255)
    assert tx.tx_delay == 1200


def test_set_tx_delay_changes_preamble():
    io = FakeIO(tx=False)
    tx = DMRDMOTX(io)
    tx.set_tx_delay(0)
    tx.write_data(FRAME)
    tx.process()
    assert len(io.writes) == 600


def test_negative_tx_delay_rejected():
    with pytest.raises(ValueError):
        DMRDMOTX(FakeIO()).set_tx_delay(-1)