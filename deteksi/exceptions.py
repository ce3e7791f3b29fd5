class AuthenticationError(Exception):
    """Raised when the Google AI API key is missing or rejected."""


class InvalidInputError(Exception):
    """Raised when user input is empty or unusable, before any network call."""


class IntegrationError(Exception):
    """Raised when an external API call fails."""


class ServiceBusyError(IntegrationError):
    """Raised when the upstream model is overloaded (HTTP 503)."""


class RateLimitError(IntegrationError):
    """Raised when an external API rate limit is hit (HTTP 429)."""


class NotFoundError(IntegrationError):
    """Raised when the country API has no match for a name."""
