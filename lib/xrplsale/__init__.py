from .client import XrplSaleClient
from .config import ClientBuilder
from .config_types import SDK_VERSION, ClientConfig, Environment, user_agent
from .errors import (
    ApiError,
    BadRequestError,
    ConfigurationError,
    NotFoundError,
    ParseError,
    RateLimitError,
    TransportError,
    UnauthorizedError,
    WebhookSignatureError,
    XrplSaleError,
)
from .logging_ import setup_logging
from .pagination import paginate
from .webhook import WebhookEvent, WebhookSignatureValidator, parse_event

__version__ = SDK_VERSION

__all__ = [
    "XrplSaleClient",
    "ClientBuilder",
    "ClientConfig",
    "Environment",
    "user_agent",
    "ApiError",
    "BadRequestError",
    "ConfigurationError",
    "NotFoundError",
    "ParseError",
    "RateLimitError",
    "TransportError",
    "UnauthorizedError",
    "WebhookSignatureError",
    "XrplSaleError",
    "setup_logging",
    "paginate",
    "WebhookEvent",
    "WebhookSignatureValidator",
    "parse_event",
]
