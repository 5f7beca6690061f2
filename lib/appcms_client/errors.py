from __future__ import annotations


class AppCMSClientError(Exception):
    """Base client error."""


class ConfigurationError(AppCMSClientError):
    """Client was constructed with an unusable configuration."""


class NetworkError(AppCMSClientError):
    """Transport/network layer error."""


class ResponseParseError(AppCMSClientError):
    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
