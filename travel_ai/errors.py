class TravelAIError(RuntimeError):
    """Base error for plan and recommendation generation failures."""


class ConfigurationError(TravelAIError):
    """Raised when the model client cannot be configured (missing API key)."""


class TransportError(TravelAIError):
    """Raised when the call to the generative model fails."""


class ExtractionError(TravelAIError):
    """Raised when no JSON-shaped text can be recovered from a model response."""


class ParseError(TravelAIError):
    """Raised when the extracted JSON text is malformed."""


class SchemaError(TravelAIError):
    """Raised when parsed JSON does not have the expected shape."""


class InvalidDateRangeError(TravelAIError, ValueError):
    """Raised when a trip ends before it starts."""
