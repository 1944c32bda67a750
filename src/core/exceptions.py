"""Custom exceptions raised by the replay layers. Callers can catch ReplayError to handle any of them."""


class ReplayError(Exception):
    """Base class of every error raised by this package."""


class ArchiveFormatError(ReplayError):
    """The archive container or the document stored in it cannot be read."""


class TurnOutOfRangeError(ReplayError):
    """Requested turn has no frame in the replay."""


class SnakeNotFoundError(ReplayError):
    """Requested snake is not on the board for the requested turn."""


class InvalidFrameError(ReplayError):
    """Frame data that cannot be translated (e.g. a snake without a body)."""


class RepositoryError(ReplayError):
    """Stored replay could not be found."""


class InvalidRequestError(ReplayError):
    """Incoming request did not pass validation."""
