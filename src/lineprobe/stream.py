"""C++-style input stream over a text stream.

``InputStream`` keeps one physical line of input in a buffer together with a
cursor into it, and tracks ``eof``/``fail`` flags the way ``std::istream``
tracks its iostate:

- ``skip_ws``   behaves like ``is >> std::ws``
- ``read_u64``  behaves like ``is >> std::uint64_t``
- ``get_line``  behaves like ``std::getline(is, s)``, except that reaching end
  of input with nothing left to read yields ``""`` instead of failing

A stream is valid (truthy) while ``fail`` is clear, matching ``bool(is)``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, TextIO

from .errors import InputError, StreamError, StreamFailure, UnexpectedEOF
from .parse import parse_u64

logger = logging.getLogger(__name__)

# Characters matched by C isspace() in the "C" locale
WHITESPACE = " \t\n\v\f\r"


@dataclass
class StreamState:
    """State flags of an input stream."""

    eof: bool = False
    fail: bool = False

    @property
    def good(self) -> bool:
        return not (self.eof or self.fail)

    def describe(self) -> str:
        """Return a short label such as ``good`` or ``eof|fail``."""
        flags = [name for name in ("eof", "fail") if getattr(self, name)]
        return "|".join(flags) or "good"


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class InputStream:
    """Line-buffered cursor over a readable text stream."""

    def __init__(self, source: TextIO):
        self._source = source
        self._line = ""
        self._cursor = 0
        self.state = StreamState()
        self.last_error: Optional[StreamError] = None

    def __bool__(self) -> bool:
        return not self.state.fail

    def good(self) -> bool:
        return self.state.good

    def eof(self) -> bool:
        return self.state.eof

    def fail(self) -> bool:
        return self.state.fail

    def clear(self) -> None:
        """Reset the state flags, keeping the buffered input."""
        self.state = StreamState()
        self.last_error = None

    def is_eol(self) -> bool:
        """Check whether the current line buffer is fully consumed."""
        return self._cursor >= len(self._line)

    def cur_line(self) -> str:
        """Return the unconsumed part of the current line buffer."""
        return self._line[self._cursor :]

    def read_buf(self) -> bool:
        """Replace the line buffer with the next line of input.

        Returns:
            True if a line was read, False at end of input

        Raises:
            InputError: If the underlying stream fails; the stream is marked
                failed
        """
        self._line = ""
        self._cursor = 0
        try:
            self._line = self._source.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise self._failing(InputError(str(e))) from e
        return bool(self._line)

    def fill_buf(self) -> None:
        """Read the next line of input, raising UnexpectedEOF at end of input."""
        if not self.read_buf():
            self.state.eof = True
            raise UnexpectedEOF()

    def _fill_buf_if_eol(self) -> None:
        if not self.is_eol():
            return
        # once eof is set the source is not read again until clear()
        if self.state.eof:
            raise UnexpectedEOF()
        self.fill_buf()

    def _failing(self, error: StreamError) -> StreamError:
        self.state.fail = True
        self.last_error = error
        logger.debug("stream failed (%s): %s", self.state.describe(), error)
        return error

    def _check_not_failed(self) -> None:
        if self.state.fail:
            raise StreamFailure("stream is in the failed state")

    def get(self) -> str:
        """Consume and return the next character, crossing line boundaries."""
        self._fill_buf_if_eol()
        char = self._line[self._cursor]
        self._cursor += 1
        return char

    def peek(self) -> str:
        """Return the next character without consuming it."""
        self._fill_buf_if_eol()
        return self._line[self._cursor]

    def skip_ws(self) -> int:
        """Skip whitespace until a non-whitespace character or end of input.

        Reaching end of input sets ``eof`` but never ``fail``. An I/O error
        marks the stream failed instead of raising, as ``std::ws`` sets
        ``failbit``. Does nothing on a failed stream.

        Returns:
            Number of characters skipped
        """
        if self.state.fail:
            return 0

        skipped = 0
        while True:
            rest = self.cur_line()
            remaining = rest.lstrip(WHITESPACE)
            skipped += len(rest) - len(remaining)
            self._cursor = len(self._line) - len(remaining)
            if remaining or self.state.eof:
                return skipped
            try:
                more = self.read_buf()
            except InputError:
                return skipped
            if not more:
                self.state.eof = True
                return skipped

    def read_token(self) -> str:
        """Skip leading whitespace and return the next whitespace-delimited token.

        Raises:
            StreamFailure: If the stream is already failed
            UnexpectedEOF: If no token remains; the stream is marked failed
            InputError: If the underlying stream fails while skipping
        """
        self._check_not_failed()
        self.skip_ws()
        if self.state.fail:
            # skip_ws() hit an I/O error
            raise self.last_error or StreamFailure(
                "stream is in the failed state"
            )
        if self.is_eol():
            raise self._failing(UnexpectedEOF())

        rest = self.cur_line()
        end = next(
            (i for i, char in enumerate(rest) if char in WHITESPACE), len(rest)
        )
        self._cursor += end
        return rest[:end]

    def read_u64(self) -> int:
        """Read the next token as an unsigned 64-bit integer.

        Raises:
            StreamFailure: If the stream is already failed
            UnexpectedEOF: If no token remains
            ParseError: If the token is not a valid u64
        """
        token = self.read_token()
        try:
            return parse_u64(token)
        except StreamError as e:
            raise self._failing(e) from None

    def get_line(self) -> str:
        """Return the rest of the current line without its terminator.

        If the current line is used up, the next line is read first. At end
        of input the result is ``""`` and ``eof`` is set; the stream stays
        valid. Once ``eof`` is set the source is not read again.

        Raises:
            StreamFailure: If the stream is already failed
        """
        self._check_not_failed()
        if self.is_eol() and self.state.eof:
            return ""
        if self.is_eol() and not self.read_buf():
            self.state.eof = True
            return ""

        rest = self.cur_line()
        self._cursor = len(self._line)
        if not rest.endswith("\n"):
            # readline() only returns an unterminated line at end of input
            self.state.eof = True
        return _strip_eol(rest)

    def get_line_some(self) -> str:
        """Return the next non-empty line, skipping empty ones.

        Raises:
            UnexpectedEOF: If input ends before a non-empty line
        """
        while True:
            line = self.get_line()
            if line:
                return line
            if self.state.eof:
                raise self._failing(UnexpectedEOF())

    def get_line_trimmed(self) -> str:
        """Return ``get_line()`` with trailing whitespace removed."""
        return self.get_line().rstrip(WHITESPACE)

    def tokens(self) -> Iterator[str]:
        """Iterate over the remaining whitespace-delimited tokens."""
        while True:
            self.skip_ws()
            if self.state.fail:
                raise self.last_error or StreamFailure(
                    "stream is in the failed state"
                )
            if self.state.eof and self.is_eol():
                return
            yield self.read_token()


__all__ = ["WHITESPACE", "InputStream", "StreamState"]
