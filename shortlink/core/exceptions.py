"""Typed failures raised by the link services.

Each error carries the HTTP status the API layer answers with, so routers can
translate them without a lookup table.
"""


class LinkError(Exception):
    status_code = 400
    default_message = "Invalid request"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class InvalidTarget(LinkError):
    default_message = "Please provide a valid URL"


class InvalidLength(LinkError):
    default_message = "Custom alias must be between 3 and 20 characters"


class ReservedAlias(LinkError):
    default_message = "Custom alias is reserved"


class AliasTaken(LinkError):
    default_message = "Custom alias already exists"


class AllocationExhausted(LinkError):
    status_code = 500
    default_message = "Unable to generate unique alias"


class LinkNotFound(LinkError):
    status_code = 404
    default_message = "Short URL not found"


class StoreUnavailable(LinkError):
    status_code = 503
    default_message = "Link store unavailable"
