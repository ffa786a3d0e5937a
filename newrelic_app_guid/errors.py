class NewRelicError(Exception):
    """Base exception for New Relic lookup errors."""
    pass


class ConfigError(NewRelicError):
    """Raised when a required input is missing or invalid."""
    pass


class LookupFailedError(NewRelicError):
    """Raised when the API answered with a non-200 status."""

    def __init__(self, status_code):
        self.status_code = status_code
        super().__init__(f"HTTP status code is not 200 (got {status_code})")


class GraphQLError(NewRelicError):
    """Raised when the response body carries GraphQL errors."""
    pass


class ResponseDecodeError(NewRelicError):
    """Raised when the response body does not have the expected shape."""
    pass


class NoEntityFoundError(NewRelicError):
    """Raised when the entity search returned no entities."""
    pass
