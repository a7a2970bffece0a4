"""Shared CLI constants."""

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    INPUT_ERROR = 10


APP_NAME = "lpfg-spectra"
