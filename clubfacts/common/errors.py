"""Domain errors and failure typing."""


class CrawlError(Exception):
    """Base class for crawl failures."""

    error_code = "CRAWL_ERROR"


class ConfigError(CrawlError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class HttpRequestError(CrawlError):
    """Raised for transport errors and non-success responses."""

    error_code = "FETCH_ERROR"


class DecodeError(CrawlError):
    """Raised when fetched bytes are not a readable image."""

    error_code = "DECODE_ERROR"


class ParseMismatch(CrawlError):
    """Raised when coordinate text does not follow degree/minute/second notation."""

    error_code = "PARSE_MISMATCH"


class StageError(CrawlError):
    """Raised when the crawl cannot proceed at all."""

    error_code = "STAGE_ERROR"
