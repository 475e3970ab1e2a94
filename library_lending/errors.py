"""Error taxonomy of the lending core.

All errors derive from ``ValueError`` so callers that only care about
"the operation was rejected" can keep catching ``ValueError``.
"""


class LendingError(ValueError):
    """Base class for rejected lending operations."""

    status_code = 400


class NotFoundError(LendingError):
    """A referenced reader, book, author, category, borrow or fine is absent."""

    status_code = 404


class ConflictError(LendingError):
    """The operation clashes with current state (double return, duplicate fine,
    borrowing an unavailable book, duplicate category name)."""

    status_code = 409


class ValidationError(LendingError):
    """Input is malformed: due date not after borrow date, negative amounts,
    blank names."""

    status_code = 400
