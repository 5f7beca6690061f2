from .client import AppCMSClient
from .config_types import DEFAULT_BASE_URL, ClientConfig
from .errors import AppCMSClientError, ConfigurationError, NetworkError, ResponseParseError
from .forms import FormData

__all__ = [
    "AppCMSClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "FormData",
    "AppCMSClientError",
    "ConfigurationError",
    "NetworkError",
    "ResponseParseError",
]
