"""Exceptions raised while serving a salary estimate."""


class SalaryServiceError(Exception):
    def __init__(self, message, original_exception=None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception

    def __str__(self):
        return self.message


class ValidationError(SalaryServiceError):
    """A required request field is missing, blank or not a string."""

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field


class ConfigurationError(SalaryServiceError):
    """The server is missing configuration it needs to answer (the API key)."""


class RemoteCallError(SalaryServiceError):
    """The model provider failed: network, auth, quota or unknown model."""

    def __init__(self, message, model=None, original_exception=None):
        super().__init__(message, original_exception=original_exception)
        self.model = model


class ResponseParseError(SalaryServiceError):
    """The model answered, but not with a usable JSON object."""

    def __init__(self, message, raw_text=None):
        super().__init__(message)
        self.raw_text = raw_text
