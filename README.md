# mmdvm_dsp

Sample-level signal processing for a multi-mode digital radio modem, in pure
Python with no dependencies. It works on blocks of 16-bit fixed-point (Q15)
audio samples at 24 kHz.

## Modules

| Module | Contents |
| --- | --- |
| `mmdvm_dsp.defines` | Frame lengths, sync patterns and data-type codes for DMR, P25, M17 and YSF |
| `mmdvm_dsp.filters` | `saturate`, `FirQ15`, `FirF32`, `InterpolatorQ15`, `DirectFormI` |
| `mmdvm_dsp.ax25_frame` | `AX25Frame`, `crc16_ccitt` (the AX.25 / X.25 frame check sequence) |
| `mmdvm_dsp.ax25_twist` | `Twist`: nine-tap filters balancing the 1200 Hz and 2200 Hz tones, twist -6 to 12 |
| `mmdvm_dsp.ax25_demodulator` | `AX25Demodulator`: delay-line discriminator, PLL clock recovery, NRZI and HDLC deframing; `HdlcState` |
| `mmdvm_dsp.ax25_rx` | `AX25RX`: band-pass filter, three demodulators at different twists, p-persistent channel access; `XabcRandom` |
| `mmdvm_dsp.ax25_tx` | `AX25TX`: HDLC framing, bit stuffing, NRZI and AFSK tone synthesis |
| `mmdvm_dsp.cwid` | `morse_bits`, `CWIdTX`: Morse station identification |
| `mmdvm_dsp.cal_p25` | `CalP25`: alternating LDU1/LDU2 1011 Hz test pattern |
| `mmdvm_dsp.cal_nxdn` | `CalNXDN`: four-frame 1031 Hz test pattern |
| `mmdvm_dsp.cal_m17` | `CalM17`: continuous preamble frames |
| `mmdvm_dsp.cal_pocsag` | `CalPOCSAG`: continuous `0xAA` bytes |
| `mmdvm_dsp.cal_fm` | `CalFM`, `FMCalState`, `make_tone`: FM deviation calibration tones |
| `mmdvm_dsp.cal_rssi` | `CalRSSI`: max/min/average RSSI report every 24000 readings |
| `mmdvm_dsp.dmr_dmo_tx` | `DMRDMOTX`: DMR direct-mode 4FSK with root-raised-cosine shaping; `FifoFullError` |

## Supplying the hardware side

Classes that emit audio or report data take objects you provide:

- `io` for `AX25TX`, `CWIdTX`, `CalFM`, `CalPOCSAG` and `DMRDMOTX`:
  `get_space()` returning free output samples, and `write(mode, samples)`.
  `DMRDMOTX` also reads a boolean `io.tx` (true while keyed).
- `io` for `AX25RX`: `set_decode(bool)` and `set_adc_detection(bool)`.
- `serial` for `AX25RX`: `write_ax25_data(bytes)`; for `CalRSSI`:
  `write_rssi_data(bytes)`.
- The transmitter given to `CalP25`, `CalNXDN` and `CalM17`: `process()`,
  `space()` and `write_data(bytes)`; the one given to `CalPOCSAG`:
  `write_byte(int)`.

Errors are raised, not returned: bad lengths or values raise `ValueError`, a
full frame raises `OverflowError`, and a full DMR queue raises `FifoFullError`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Frame check sequence:

```python
from mmdvm_dsp.ax25_frame import AX25Frame, crc16_ccitt

assert crc16_ccitt(b"123456789") == 0x906E

frame = AX25Frame(b"hello")
frame.add_crc()
assert frame.check_crc()
```

Sending an AX.25 frame into a list:

```python
from mmdvm_dsp.ax25_tx import AX25TX

class Sink:
    def __init__(self):
        self.samples = []

    def get_space(self):
        return 1000

    def write(self, mode, samples):
        self.samples.extend(samples)

sink = Sink()
tx = AX25TX(sink, duplex=True)
tx.write_data(b"packet payload")
while tx.space() == 0:
    tx.process()
```

Morse identification:

```python
from mmdvm_dsp.cwid import morse_bits

bits = morse_bits("CQ")   # dot-timed on/off steps with silence either side
```

## What this package does not do

It has no command-line program and talks to no hardware, sound device or
serial port; audio and reports pass only through the objects you supply.
There is no DMR receiver, no D-Star, YSF, P25, NXDN, M17 or POCSAG
modulator or demodulator, and no host protocol. The calibration classes
drive a transmitter object of your own for those modes.