class SchemaGenieError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SchemaGenieError):
    """Required input is missing or an option value is unknown."""

    status_code = 400


class InternalError(SchemaGenieError):
    """Unexpected failure while generating a response."""

    status_code = 500


class TransportError(Exception):
    """Client side failure: network error, bad status or non-JSON body."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
