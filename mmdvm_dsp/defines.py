"""Frame geometry and synchronisation patterns of the digital voice modes.

All sample counts assume a 24 kHz sample rate.
"""

# --- DMR ---------------------------------------------------------------------

DMR_RADIO_SYMBOL_LENGTH = 5

DMR_FRAME_LENGTH_BYTES = 33
DMR_FRAME_LENGTH_BITS = DMR_FRAME_LENGTH_BYTES * 8
DMR_FRAME_LENGTH_SYMBOLS = DMR_FRAME_LENGTH_BYTES * 4
DMR_FRAME_LENGTH_SAMPLES = DMR_FRAME_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_SYNC_LENGTH_BYTES = 6
DMR_SYNC_LENGTH_BITS = DMR_SYNC_LENGTH_BYTES * 8
DMR_SYNC_LENGTH_SYMBOLS = DMR_SYNC_LENGTH_BYTES * 4
DMR_SYNC_LENGTH_SAMPLES = DMR_SYNC_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_EMB_LENGTH_BITS = 16
DMR_EMB_LENGTH_SYMBOLS = 8
DMR_EMB_LENGTH_SAMPLES = DMR_EMB_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_EMBSIG_LENGTH_BITS = 32
DMR_EMBSIG_LENGTH_SYMBOLS = 16
DMR_EMBSIG_LENGTH_SAMPLES = DMR_EMBSIG_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_SLOT_TYPE_LENGTH_BITS = 20
DMR_SLOT_TYPE_LENGTH_SYMBOLS = 10
DMR_SLOT_TYPE_LENGTH_SAMPLES = DMR_SLOT_TYPE_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_INFO_LENGTH_BITS = 196
DMR_INFO_LENGTH_SYMBOLS = 98
DMR_INFO_LENGTH_SAMPLES = DMR_INFO_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_AUDIO_LENGTH_BITS = 216
DMR_AUDIO_LENGTH_SYMBOLS = 108
DMR_AUDIO_LENGTH_SAMPLES = DMR_AUDIO_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_CACH_LENGTH_BYTES = 3
DMR_CACH_LENGTH_BITS = DMR_CACH_LENGTH_BYTES * 8
DMR_CACH_LENGTH_SYMBOLS = DMR_CACH_LENGTH_BYTES * 4
DMR_CACH_LENGTH_SAMPLES = DMR_CACH_LENGTH_SYMBOLS * DMR_RADIO_SYMBOL_LENGTH

DMR_SYNC_BYTES_LENGTH = 7
DMR_MS_DATA_SYNC_BYTES = bytes((0x0D, 0x5D, 0x7F, 0x77, 0xFD, 0x75, 0x70))
DMR_MS_VOICE_SYNC_BYTES = bytes((0x07, 0xF7, 0xD5, 0xDD, 0x57, 0xDF, 0xD0))
DMR_BS_DATA_SYNC_BYTES = bytes((0x0D, 0xFF, 0x57, 0xD7, 0x5D, 0xF5, 0xD0))
DMR_BS_VOICE_SYNC_BYTES = bytes((0x07, 0x55, 0xFD, 0x7D, 0xF7, 0x5F, 0x70))
DMR_SYNC_BYTES_MASK = bytes((0x0F, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xF0))

DMR_MS_DATA_SYNC_BITS = 0x0000D5D7F77FD757
DMR_MS_VOICE_SYNC_BITS = 0x00007F7D5DD57DFD
DMR_BS_DATA_SYNC_BITS = 0x0000DFF57D75DF5D
DMR_BS_VOICE_SYNC_BITS = 0x0000755FD7DF75F7
DMR_SYNC_BITS_MASK = 0x0000FFFFFFFFFFFF

DMR_MS_DATA_SYNC_SYMBOLS = 0x0076286E
DMR_MS_VOICE_SYNC_SYMBOLS = 0x0089D791
DMR_BS_DATA_SYNC_SYMBOLS = 0x00439B4D
DMR_BS_VOICE_SYNC_SYMBOLS = 0x00BC64B2
DMR_SYNC_SYMBOLS_MASK = 0x00FFFFFF

DMR_MS_DATA_SYNC_SYMBOLS_VALUES = (
    -3, +3, +3, +3, -3, +3, +3, -3, -3, -3, +3, -3,
    +3, -3, -3, -3, -3, +3, +3, -3, +3, +3, +3, -3,
)

DMR_MS_VOICE_SYNC_SYMBOLS_VALUES = (
    +3, -3, -3, -3, +3, -3, -3, +3, +3, +3, -3, +3,
    -3, +3, +3, +3, +3, -3, -3, +3, -3, -3, -3, +3,
)

DT_VOICE_PI_HEADER = 0
DT_VOICE_LC_HEADER = 1
DT_TERMINATOR_WITH_LC = 2
DT_CSBK = 3
DT_DATA_HEADER = 6
DT_RATE_12_DATA = 7
DT_RATE_34_DATA = 8
DT_IDLE = 9
DT_RATE_1_DATA = 10

# --- P25 ---------------------------------------------------------------------

P25_RADIO_SYMBOL_LENGTH = 5

P25_HDR_FRAME_LENGTH_BYTES = 99
P25_HDR_FRAME_LENGTH_BITS = P25_HDR_FRAME_LENGTH_BYTES * 8
P25_HDR_FRAME_LENGTH_SYMBOLS = P25_HDR_FRAME_LENGTH_BYTES * 4
P25_HDR_FRAME_LENGTH_SAMPLES = P25_HDR_FRAME_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_LDU_FRAME_LENGTH_BYTES = 216
P25_LDU_FRAME_LENGTH_BITS = P25_LDU_FRAME_LENGTH_BYTES * 8
P25_LDU_FRAME_LENGTH_SYMBOLS = P25_LDU_FRAME_LENGTH_BYTES * 4
P25_LDU_FRAME_LENGTH_SAMPLES = P25_LDU_FRAME_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_TERMLC_FRAME_LENGTH_BYTES = 54
P25_TERMLC_FRAME_LENGTH_BITS = P25_TERMLC_FRAME_LENGTH_BYTES * 8
P25_TERMLC_FRAME_LENGTH_SYMBOLS = P25_TERMLC_FRAME_LENGTH_BYTES * 4
P25_TERMLC_FRAME_LENGTH_SAMPLES = P25_TERMLC_FRAME_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_TERM_FRAME_LENGTH_BYTES = 18
P25_TERM_FRAME_LENGTH_BITS = P25_TERM_FRAME_LENGTH_BYTES * 8
P25_TERM_FRAME_LENGTH_SYMBOLS = P25_TERM_FRAME_LENGTH_BYTES * 4
P25_TERM_FRAME_LENGTH_SAMPLES = P25_TERM_FRAME_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_TSDU_FRAME_LENGTH_BYTES = 45
P25_TSDU_FRAME_LENGTH_BITS = P25_TSDU_FRAME_LENGTH_BYTES * 8
P25_TSDU_FRAME_LENGTH_SYMBOLS = P25_TSDU_FRAME_LENGTH_BYTES * 4
P25_TSDU_FRAME_LENGTH_SAMPLES = P25_TSDU_FRAME_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_PDU_HDR_FRAME_LENGTH_BYTES = 45
P25_PDU_HDR_FRAME_LENGTH_BITS = P25_PDU_HDR_FRAME_LENGTH_BYTES * 8
P25_PDU_HDR_FRAME_LENGTH_SYMBOLS = P25_PDU_HDR_FRAME_LENGTH_BYTES * 4
P25_PDU_HDR_FRAME_LENGTH_SAMPLES = P25_PDU_HDR_FRAME_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_SYNC_LENGTH_BYTES = 6
P25_SYNC_LENGTH_BITS = P25_SYNC_LENGTH_BYTES * 8
P25_SYNC_LENGTH_SYMBOLS = P25_SYNC_LENGTH_BYTES * 4
P25_SYNC_LENGTH_SAMPLES = P25_SYNC_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_NID_LENGTH_BYTES = 8
P25_NID_LENGTH_BITS = P25_NID_LENGTH_BYTES * 8
P25_NID_LENGTH_SYMBOLS = P25_NID_LENGTH_BYTES * 4
P25_NID_LENGTH_SAMPLES = P25_NID_LENGTH_SYMBOLS * P25_RADIO_SYMBOL_LENGTH

P25_SYNC_BYTES = bytes((0x55, 0x75, 0xF5, 0xFF, 0x77, 0xFF))
P25_SYNC_BYTES_LENGTH = 6

P25_SYNC_BITS = 0x00005575F5FF77FF
P25_SYNC_BITS_MASK = 0x0000FFFFFFFFFFFF

P25_SYNC_SYMBOLS_VALUES = (
    +3, +3, +3, +3, +3, -3, +3, +3, -3, -3, +3, +3,
    -3, -3, -3, -3, +3, -3, +3, -3, -3, -3, -3, -3,
)

P25_SYNC_SYMBOLS = 0x00FB30A0
P25_SYNC_SYMBOLS_MASK = 0x00FFFFFF

P25_DUID_HDU = 0x00
P25_DUID_TDU = 0x03
P25_DUID_LDU1 = 0x05
P25_DUID_TSDU = 0x07
P25_DUID_LDU2 = 0x0A
P25_DUID_PDU = 0x0C
P25_DUID_TDULC = 0x0F

# --- M17 ---------------------------------------------------------------------

M17_RADIO_SYMBOL_LENGTH = 5

M17_FRAME_LENGTH_BITS = 384
M17_FRAME_LENGTH_BYTES = M17_FRAME_LENGTH_BITS // 8
M17_FRAME_LENGTH_SYMBOLS = M17_FRAME_LENGTH_BITS // 2
M17_FRAME_LENGTH_SAMPLES = M17_FRAME_LENGTH_SYMBOLS * M17_RADIO_SYMBOL_LENGTH

M17_SYNC_LENGTH_BITS = 16
M17_SYNC_LENGTH_BYTES = M17_SYNC_LENGTH_BITS // 8
M17_SYNC_LENGTH_SYMBOLS = M17_SYNC_LENGTH_BITS // 2
M17_SYNC_LENGTH_SAMPLES = M17_SYNC_LENGTH_SYMBOLS * M17_RADIO_SYMBOL_LENGTH

M17_LINK_SETUP_SYNC_BYTES = bytes((0x55, 0xF7))
M17_STREAM_SYNC_BYTES = bytes((0xFF, 0x5D))
M17_EOF_SYNC_BYTES = bytes((0x55, 0x5D))

M17_LINK_SETUP_SYNC_BITS = 0x55F7
M17_STREAM_SYNC_BITS = 0xFF5D
M17_EOF_SYNC_BITS = 0x555D

M17_LINK_SETUP_SYNC_SYMBOLS_VALUES = (+3, +3, +3, +3, -3, -3, +3, -3)
M17_LINK_SETUP_SYNC_SYMBOLS = 0xF2

M17_STREAM_SYNC_SYMBOLS_VALUES = (-3, -3, -3, -3, +3, +3, -3, +3)
M17_STREAM_SYNC_SYMBOLS = 0x0D

M17_EOF_SYNC_SYMBOLS_VALUES = (+3, +3, +3, +3, +3, +3, -3, +3)
M17_EOF_SYNC_SYMBOLS = 0xFD

# --- YSF ---------------------------------------------------------------------

YSF_RADIO_SYMBOL_LENGTH = 5

YSF_FRAME_LENGTH_BYTES = 120
YSF_FRAME_LENGTH_BITS = YSF_FRAME_LENGTH_BYTES * 8
YSF_FRAME_LENGTH_SYMBOLS = YSF_FRAME_LENGTH_BYTES * 4
YSF_FRAME_LENGTH_SAMPLES = YSF_FRAME_LENGTH_SYMBOLS * YSF_RADIO_SYMBOL_LENGTH

YSF_SYNC_LENGTH_BYTES = 5
YSF_SYNC_LENGTH_BITS = YSF_SYNC_LENGTH_BYTES * 8
YSF_SYNC_LENGTH_SYMBOLS = YSF_SYNC_LENGTH_BYTES * 4
YSF_SYNC_LENGTH_SAMPLES = YSF_SYNC_LENGTH_SYMBOLS * YSF_RADIO_SYMBOL_LENGTH

YSF_FICH_LENGTH_BITS = 200
YSF_FICH_LENGTH_SYMBOLS = 100
YSF_FICH_LENGTH_SAMPLES = YSF_FICH_LENGTH_SYMBOLS * YSF_RADIO_SYMBOL_LENGTH

YSF_SYNC_BYTES = bytes((0xD4, 0x71, 0xC9, 0x63, 0x4D))
YSF_SYNC_BYTES_LENGTH = 5

YSF_SYNC_BITS = 0x000000D471C9634D
YSF_SYNC_BITS_MASK = 0x000000FFFFFFFFFF

YSF_SYNC_SYMBOLS_VALUES = (
    -3, +3, +3, +1, +3, -3, +1, +3, -3, +1,
    -1, +3, +3, -1, +3, -3, +3, +1, -3, +3,
)

YSF_SYNC_SYMBOLS = 0x0007B5AD
YSF_SYNC_SYMBOLS_MASK = 0x000FFFFF