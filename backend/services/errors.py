"""Error taxonomy for match scoring.

Only ``RecordNotFound`` is meant to escape to the HTTP layer. Everything
else is caught at the evaluator boundary and recorded as an ``ErrorKind``
on a fallback result.
"""

from enum import Enum


class ErrorKind(str, Enum):
    SERVICE_UNAVAILABLE = "service_unavailable"
    SCHEMA_MISMATCH = "schema_mismatch"
    INSUFFICIENT_DATA = "insufficient_data"
    UPSTREAM_TIMEOUT = "upstream_timeout"
    UPSTREAM_ERROR = "upstream_error"


class MatchingError(Exception):
    """Base class for match scoring errors."""


class SchemaMismatch(MatchingError):
    """Text-generation output did not parse into the expected result shape."""


class ExternalServiceUnavailable(MatchingError):
    """No credential configured, or the service cannot be reached."""


class UpstreamError(MatchingError):
    """The text-generation provider returned an error response."""


class RecordNotFound(MatchingError, KeyError):
    """A document-store lookup by id found nothing."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} not found: {record_id}")
        self.kind = kind
        self.record_id = record_id

    def __str__(self) -> str:
        return f"{self.kind} not found: {self.record_id}"
