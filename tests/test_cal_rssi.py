from mmdvm_dsp.cal_rssi import REPORT_SAMPLES, CalRSSI


class FakeSerial:
    def __init__(self):
        self.reports = []

    def write_rssi_data(self, data):
        self.reports.append(bytes(data))


def test_no_report_before_full_period():
    serial = FakeSerial()
    cal = CalRSSI(serial)
    cal.samples([100] * (REPORT_SAMPLES - 1))
    assert serial.reports == []


def test_constant_signal_report():
    serial = FakeSerial()
    cal = CalRSSI(serial)
    cal.samples([100] * REPORT_SAMPLES)
    assert serial.reports == [bytes([0x00, 0x64, 0x00, 0x64, 0x00, 0x64])]


def test_report_holds_max_min_average():
    serial = FakeSerial()
    cal = CalRSSI(serial)
    half = REPORT_SAMPLES // 2
    cal.samples([10] * half + [30] * half)
    assert len(serial.reports) == 1
    report = serial.reports[0]
    assert int.from_bytes(report[0:2], "big") == 30
    assert int.from_bytes(report[2:4], "big") == 10
    assert int.from_bytes(report[4:6], "big") == 20


def test_blocks_accumulate_across_calls():
    serial = FakeSerial()
    cal = CalRSSI(serial)
    for _ in range(REPORT_SAMPLES // 1000):
        cal.samples([500] * 1000)
    assert len(serial.reports) == 1
    assert int.from_bytes(serial.reports[0][4:6], "big") == 500


def test_statistics_reset_after_report():
    serial = FakeSerial()
    cal = CalRSSI(serial)
    cal.samples([1000] * REPORT_SAMPLES)
    cal.samples([5] * REPORT_SAMPLES)
    assert len(serial.reports) == 2
    second = serial.reports[1]
    assert int.from_bytes(second[0:2], "big") == 5
    assert int.from_bytes(second[2:4], "big") == 5


def test_large_values_fit():
    serial = FakeSerial()
    cal = CalRSSI(serial)
    cal.samples([0xFFFF] * REPORT_SAMPLES)
    report = serial.reports[0]
    assert report == b"\xff\xff" * 3