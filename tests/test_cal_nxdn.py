import pytest

from mmdvm_dsp.cal_nxdn import NXDN_CAL1K, CalNXDN, NXDNCalState


class FakeNXDNTX:
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


def test_frames_share_length_and_prefix():
    tx = FakeNXDNTX()
    cal = CalNXDN(tx)
    cal.write(b"\x01")
    for _ in range(4):
        cal.process()
    assert len({len(frame) for frame in tx.frames}) == 1
    assert all(frame[0] == 0 for frame in tx.frames)
    assert len(set(tx.frames)) == 4


def test_cycles_through_four_frames():
    tx = FakeNXDNTX()
    cal = CalNXDN(tx)
    cal.write(b"\x01")
    for _ in range(6):
        cal.process()
    assert tx.frames == list(NXDN_CAL1K) + list(NXDN_CAL1K[:2])


def test_stop_sends_one_more_then_restarts_from_first():
    tx = FakeNXDNTX()
    cal = CalNXDN(tx)
    cal.write(b"\x01")
    cal.process()
    cal.write(b"\x00")
    cal.process()
    assert cal.state is NXDNCalState.IDLE
    cal.process()  # idle: sequence rewinds
    cal.write(b"\x01")
    cal.process()
    assert tx.frames == [NXDN_CAL1K[0], NXDN_CAL1K[1], NXDN_CAL1K[0]]


def test_no_space_sends_nothing():
    tx = FakeNXDNTX(space=0)
    cal = CalNXDN(tx)
    cal.write(b"\x01")
    cal.process()
    assert tx.frames == []
    assert tx.process_calls == 1


def test_bad_length_raises():
    cal = CalNXDN(FakeNXDNTX())
    with pytest.raises(ValueError):
        cal.write(b"\x01\x00")
    assert cal.state is NXDNCalState.IDLE