"""Error taxonomy for the NOVA API.

Every error carries the HTTP status it maps to and a message that is safe to
show to the client. Internal details stay in the logs.
"""


class NovaError(Exception):
    """Base class for errors rendered as a failed API envelope."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(NovaError):
    """The client supplied malformed or incomplete data."""

    status_code = 400
    default_message = "Invalid request body"


class MethodNotAllowed(NovaError):
    """Wrong HTTP verb for the endpoint."""

    status_code = 405
    default_message = "Method not allowed"


class StorageError(NovaError):
    """The durable store could not be opened, read or written."""

    status_code = 500
    default_message = "Storage failure"
