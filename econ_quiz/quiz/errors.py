"""Exceptions raised by the quiz core."""


class InvalidStateError(RuntimeError):
    """Raised when a submission does not fit the session's current state."""
    pass


class BankLoadError(Exception):
    """Raised when a question bank file cannot be read or parsed."""
    pass
