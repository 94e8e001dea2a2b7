from __future__ import annotations

from typing import Any, Mapping

from .errors_utils import parse_api_error_detail, parse_retry_after


class XrplSaleError(Exception):
    """Base client error."""


class ConfigurationError(XrplSaleError):
    """Invalid client setup: missing API key, bad environment, unparsable URL."""


class TransportError(XrplSaleError):
    """Transport/network layer error."""


class ParseError(XrplSaleError):
    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class ApiError(XrplSaleError):
    def __init__(self, status_code: int, message: str, url: str | None = None):
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message
        self.url = url

    @property
    def details(self) -> Any:
        return parse_api_error_detail(self.message)


class BadRequestError(ApiError):
    """400 Bad Request."""


class UnauthorizedError(ApiError):
    """401 Unauthorized."""


class NotFoundError(ApiError):
    """404 Not Found."""


class RateLimitError(ApiError):
    def __init__(
            self,
            status_code: int,
            message: str,
            url: str | None = None,
            *,
            retry_after: int | None = None,
    ):
        super().__init__(status_code, message, url)
        self.retry_after = retry_after


class WebhookSignatureError(XrplSaleError):
    """Inbound webhook signature did not match."""


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    404: NotFoundError,
}


def error_for_status(
        status_code: int,
        body: str,
        *,
        url: str | None = None,
        headers: Mapping[str, str] | None = None,
) -> ApiError:
    if status_code == 429:
        retry_after = parse_retry_after((headers or {}).get("retry-after"))
        return RateLimitError(status_code, body, url, retry_after=retry_after)
    cls = _STATUS_ERRORS.get(status_code, ApiError)
    return cls(status_code, body, url)
