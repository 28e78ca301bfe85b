import math
import random

import pytest

from mmdvm_dsp.ax25_demodulator import AX25Demodulator
from mmdvm_dsp.ax25_frame import AX25Frame, crc16_ccitt

FLAG_BITS = [0, 1, 1, 1, 1, 1, 1, 0]


def _hdlc_bits(wire, preamble=40, tail=4):
    bits = FLAG_BITS * preamble
    ones = 0
    for byte in wire:
        for i in range(8):
            b = (byte >> i) & 1
            bits.append(b)
            if b:
                ones += 1
                if ones == 5:
                    bits.append(0)
                    ones = 0
            else:
                ones = 0
    bits += FLAG_BITS * tail
    return bits


def _afsk(bits, amplitude=8000):
    samples = []
    state = False
    phase = 0.0
    for b in bits:
        if not b:
            state = not state
        freq = 1200.0 if state else 2200.0
        for _ in range(20):
            phase += 2 * math.pi * freq / 24000.0
            samples.append(round(amplitude * math.sin(phase)))
    return samples


def _run(demod, samples, block=20):
    frames = []
    for start in range(0, len(samples), block):
        frame = demod.process(samples[start:start + block])
        if frame is not None:
            frames.append(frame)
    return frames


def _wire(payload):
    frame = AX25Frame(payload)
    frame.add_crc()
    return frame.data


def test_decodes_clean_signal():
    payload = bytes(range(0x40, 0x54))
    wire = _wire(payload)
    frames = _run(AX25Demodulator(6), _afsk(_hdlc_bits(wire)))
    assert len(frames) == 1
    assert frames[0].data == wire
    assert frames[0].fcs == crc16_ccitt(payload)


def test_decodes_payload_needing_bit_stuffing():
    payload = b"\xff\xff\x7e\x7e" + bytes(range(16))
    wire = _wire(payload)
    frames = _run(AX25Demodulator(6), _afsk(_hdlc_bits(wire)))
    assert [f.data for f in frames] == [wire]


def test_bad_crc_is_not_reported():
    wire = bytearray(_wire(bytes(range(0x40, 0x54))))
    wire[-1] ^= 0xFF
    frames = _run(AX25Demodulator(6), _afsk(_hdlc_bits(bytes(wire))))
    assert frames == []


def test_short_block_yields_nothing():
    assert AX25Demodulator(6).process([0] * 20) is None


def test_fresh_demodulator_reports_carrier():
    assert AX25Demodulator(6).is_dcd() is True


def test_noise_drops_carrier_detect():
    rng = random.Random(1234)
    demod = AX25Demodulator(6)
    _run(demod, [rng.randint(-8000, 8000) for _ in range(24000)])
    assert demod.is_dcd() is False


def test_invalid_twist_rejected():
    with pytest.raises(ValueError):
        AX25Demodulator(20)
    demod = AX25Demodulator(6)
    with pytest.raises(ValueError):
        demod.set_twist(-10)