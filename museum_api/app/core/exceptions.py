"""Errors raised by the service layer.

Every rejected request surfaces as a :class:`MuseumError` whose message
is meant for the end user.  Validation failures may concatenate several
violated rules into one message.  :class:`NotFoundError` is the same
error for a missing record; the API layer answers it with 404 instead
of 400.
"""


class MuseumError(ValueError):
    """A request was rejected by a business rule."""


class NotFoundError(MuseumError):
    """The loan, visitor, artefact or open day does not exist."""
