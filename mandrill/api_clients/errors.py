from typing import Any, Optional

from pydantic import BaseModel, ValidationError


class MandrillError(Exception):
    """Base class for every error raised by the Mandrill client."""


class TransportError(MandrillError):
    """
    The request never produced an HTTP response (DNS failure, refused
    connection, timeout). The underlying `requests` exception is kept on
    `original` and as `__cause__`.
    """

    def __init__(self, endpoint: str, original: Exception):
        super().__init__(f"mandrill: request to {endpoint} failed: {original}")
        self.endpoint = endpoint
        self.original = original


class _ErrorBody(BaseModel):
    status: str
    code: int
    name: str
    message: str


class ApiError(MandrillError):
    """Mandrill answered with a structured error (invalid key, bad parameters, ...)."""

    def __init__(self, status: str, code: int, name: str, message: str):
        super().__init__(f"mandrill: {name}: {message}")
        self.status = status
        self.code = code
        self.name = name
        self.message = message

    @classmethod
    def from_response(cls, body: Any) -> Optional["ApiError"]:
        """Returns None when `body` is not a Mandrill error object."""
        try:
            parsed = _ErrorBody.model_validate(body)
        except ValidationError:
            return None
        return cls(parsed.status, parsed.code, parsed.name, parsed.message)


class UnknownResponseError(MandrillError):
    """Non-200 response whose body could not be read as a Mandrill error."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"mandrill: unknown error happened (HTTP {status_code})")
        self.status_code = status_code
        self.body = body
