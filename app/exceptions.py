"""Domain exceptions raised by the service layer."""


class SmartAddError(Exception):
    """Base class for Smart-Add failures surfaced to the caller."""


class PersistenceError(SmartAddError):
    """An insert failed and the whole batch was rolled back."""


class CommitError(PersistenceError):
    """Every insert succeeded but the transaction could not be committed."""
