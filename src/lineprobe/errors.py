"""Exceptions raised by the input stream, the parser, and the probe checks."""

from __future__ import annotations

MSG_EOF = "expect more characters before EOF"


class StreamError(Exception):
    """Error while reading from an input stream."""

    pass


class UnexpectedEOF(StreamError):
    """Input ended before the requested read could be satisfied."""

    def __init__(self, message: str = MSG_EOF):
        super().__init__(message)


class ParseError(StreamError):
    """A token could not be converted to the requested value."""

    def __init__(self, token: str, reason: str, target: str = "u64"):
        self.token = token
        self.reason = reason
        self.target = target
        super().__init__(
            f"error during converting a string {token!r} to a value of "
            f"{target}: {reason}"
        )


class InputError(StreamError):
    """Reading from the underlying text stream raised an I/O or decoding error."""

    pass


class StreamFailure(StreamError):
    """An operation was attempted on a stream already in the failed state."""

    pass


class StreamCheckError(AssertionError):
    """A probe validity check found the stream in the failed state."""

    def __init__(self, check: str, cause: BaseException | None = None):
        self.check = check
        self.cause = cause
        super().__init__(f"stream invalid {check}")


__all__ = [
    "MSG_EOF",
    "InputError",
    "ParseError",
    "StreamCheckError",
    "StreamError",
    "StreamFailure",
    "UnexpectedEOF",
]
