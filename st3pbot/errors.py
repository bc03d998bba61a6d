"""Error types raised while parsing protocol input."""


class St3pError(ValueError):
    """Base class for recoverable protocol parsing errors."""


class InvalidPosition(St3pError):
    """Malformed or out-of-range position string."""


class InvalidBoardState(St3pError):
    """Board-state string that does not describe a valid square board."""


class InvalidCommand(St3pError):
    """Protocol line missing required fields or carrying bad values."""
