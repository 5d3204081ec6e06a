"""
Exceptions raised by the OpenAPI condenser.
"""


class CondenserError(Exception):
    """Base exception for every condenser error."""

    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.message = message
        self.code = code or "unknown_error"
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"[{self.code}] {self.message} - details: {self.details}"
        return f"[{self.code}] {self.message}"


class SpecParseError(CondenserError):
    """The source text is neither valid JSON nor valid YAML."""

    def __init__(self, message, source=None):
        super().__init__(
            message=message,
            code="parse_error",
            details={"source": source} if source else {}
        )


class UnsupportedVersionError(CondenserError):
    """The document does not declare an OpenAPI 3.x version."""

    def __init__(self, message, version=None):
        super().__init__(
            message=message,
            code="version_error",
            details={"version": version} if version is not None else {}
        )


class ConfigurationError(CondenserError):
    """Invalid configuration (missing file, unknown value)."""

    def __init__(self, message, config_key=None):
        super().__init__(
            message=message,
            code="config_error",
            details={"key": config_key} if config_key else {}
        )
