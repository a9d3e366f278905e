"""Exception types shared across the client, assertions and reporting."""


class TransportError(Exception):
    """A request never produced an HTTP response (connection, DNS, timeout)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class AssertionFailure(AssertionError):
    """An expectation on a response was not met."""


class NotificationError(Exception):
    """The chat webhook rejected a message."""
