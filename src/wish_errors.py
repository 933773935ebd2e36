from __future__ import annotations


class ExtractError(Exception):
    exit_code = 1


class InvalidInstallDirectory(ExtractError):
    exit_code = 2


class LogFileNotFound(ExtractError):
    exit_code = 3


class ReadError(ExtractError):
    """The cache file exists but could not be read."""

    exit_code = 4


class UrlNotFound(ExtractError):
    exit_code = 5
