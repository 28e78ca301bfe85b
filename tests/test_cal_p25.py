import pytest

from mmdvm_dsp.cal_p25 import LDU1_1K, LDU2_1K, CalP25, P25CalState
from mmdvm_dsp.defines import P25_LDU_FRAME_LENGTH_BYTES, P25_SYNC_BYTES


class FakeP25TX:
    def __init__(self, space=10):
        self.free = space
        self.frames = []
        self.process_calls = 0

    def process(self):
        self.process_calls += 1

    def space(self):
        return self.free

    def write_data(self, data):
        self.frames.append(bytes(data))


def test_frames_carry_sync_and_length():
    tx = FakeP25TX()
    cal = CalP25(tx)
    cal.write(b"\x01")
    cal.process()
    cal.process()
    assert len(tx.frames) == 2
    for frame in tx.frames:
        assert len(frame) == P25_LDU_FRAME_LENGTH_BYTES + 1
        assert frame[0] == 0
        assert frame[1:7] == P25_SYNC_BYTES


def test_idle_sends_nothing():
    tx = FakeP25TX()
    cal = CalP25(tx)
    cal.process()
    assert tx.frames == []
    assert tx.process_calls == 1
    assert cal.state is P25CalState.IDLE


def test_alternates_ldu1_ldu2_while_transmitting():
    tx = FakeP25TX()
    cal = CalP25(tx)
    cal.write(b"\x01")
    for _ in range(4):
        cal.process()
    assert tx.frames == [LDU1_1K, LDU2_1K, LDU1_1K, LDU2_1K]


def test_stop_finishes_with_ldu2():
    tx = FakeP25TX()
    cal = CalP25(tx)
    cal.write(b"\x01")
    cal.process()
    cal.write(b"\x00")
    cal.process()
    cal.process()
    assert tx.frames == [LDU1_1K, LDU2_1K]
    assert cal.state is P25CalState.IDLE


def test_no_space_holds_state():
    tx = FakeP25TX(space=0)
    cal = CalP25(tx)
    cal.write(b"\x01")
    cal.process()
    assert tx.frames == []
    assert tx.process_calls == 1
    assert cal.state is P25CalState.LDU1


@pytest.mark.parametrize("data", [b"", b"\x01\x01"])
def test_bad_length_raises(data):
    cal = CalP25(FakeP25TX())
    with pytest.raises(ValueError):
        cal.write(data)
    assert cal.state is P25CalState.IDLE