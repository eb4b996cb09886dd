import logging

from otpx import Algorithm
from otpx.config import Settings, load_settings


def test_defaults():
    assert load_settings({}) == Settings(digits=6, period=30, algorithm=Algorithm.SHA1, log_level="WARNING")


def test_overrides():
    settings = load_settings({
        "OTPX_DIGITS": "8",
        "OTPX_PERIOD": " 60 ",
        "OTPX_ALGORITHM": "sha-512",
        "OTPX_LOG_LEVEL": "debug",
    })
    assert settings == Settings(digits=8, period=60, algorithm=Algorithm.SHA512, log_level="DEBUG")


def test_invalid_values_fall_back(caplog):
    with caplog.at_level(logging.WARNING, logger="otpx.config"):
        settings = load_settings({
            "OTPX_DIGITS": "six",
            "OTPX_PERIOD": "0",
            "OTPX_ALGORITHM": "md5",
            "OTPX_LOG_LEVEL": "chatty",
        })
    assert settings == Settings()
    assert len(caplog.records) == 4
    assert "OTPX_DIGITS" in caplog.records[0].getMessage()


def test_blank_values_are_ignored():
    assert load_settings({"OTPX_DIGITS": "  "}) == Settings()
