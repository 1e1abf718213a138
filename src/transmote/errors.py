"""Exception types raised by transmote."""


class TransmoteError(Exception):
    """Base class for all transmote errors."""

    pass


class TorrentFileError(TransmoteError):
    """Exception raised when a local .torrent file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read torrent file '{path}': {reason}")
        self.path = path


class CommandEncodeError(TransmoteError):
    """Exception raised when a command cannot be serialized."""

    pass


class TransportError(TransmoteError):
    """Exception raised when a request body cannot be delivered."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(TransmoteError):
    """Exception raised when a daemon reply is not a well-formed command."""

    pass


class NoResultsError(TransmoteError):
    """Exception raised when a lookup did not return exactly one torrent."""

    pass
