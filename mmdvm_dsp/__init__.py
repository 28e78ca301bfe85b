"""Modem signal processing for packet and digital voice radio: AX.25 AFSK, CW ID, calibration patterns and DMR direct-mode transmit."""

__version__ = "0.1.0"