"""Domain errors raised by the repositories and the reference checks."""

from __future__ import annotations


class CRMError(Exception):
    """Base class for failures surfaced to the RPC boundary."""

    kind = "error"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(CRMError):
    """The record addressed by an update or publish call does not exist."""

    kind = "not_found"
    status_code = 404


class ReferenceInvalid(CRMError):
    """A referenced agency, contact or user does not exist."""

    kind = "reference_invalid"
    status_code = 422


class ReferenceMismatch(CRMError):
    """A referenced record exists but belongs to another agency."""

    kind = "reference_mismatch"
    status_code = 409


class ConstraintViolation(CRMError):
    """The store rejected a write (uniqueness, foreign key, not-null)."""

    kind = "constraint_violation"
    status_code = 409
