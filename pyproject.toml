[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mmdvm_dsp"
version = "0.1.0"
description = "Sample-level modem signal processing for packet and digital voice radio: AX.25 AFSK, CW ID, calibration patterns and DMR direct-mode transmit"
requires-python = ">=3.10"
dependencies = []
keywords = ["ham radio", "amateur radio", "ax25", "afsk", "hdlc", "dmr", "p25", "nxdn", "m17", "pocsag", "modem", "dsp", "morse"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mmdvm_dsp"]

[tool.pytest.ini_options]
addopts = "-ra"
