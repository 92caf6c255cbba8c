"""Token-then-line read probe.

Reads an unsigned integer token, skips the whitespace after it (including
the newline that would otherwise make the next line read come back empty),
reads the rest of the line, and writes ``{<integer>}{<line>}``.

Every contract violation is fatal: the stream is checked after the skip and
after the line read, and a failed check raises ``StreamCheckError``.
"""

from __future__ import annotations

import logging
from typing import TextIO

from .errors import StreamCheckError, StreamError
from .models import ProbeResult
from .stream import InputStream

logger = logging.getLogger(__name__)

CHECK_AFTER_SKIP = "after skipping whitespace"
CHECK_AFTER_LINE = "after reading the line"


def _check(stream: InputStream, check: str) -> None:
    if not stream:
        raise StreamCheckError(check, stream.last_error)


def run_probe(input_stream: TextIO, output_stream: TextIO) -> ProbeResult:
    """Run the probe over ``input_stream`` and write the result.

    Args:
        input_stream: Text stream positioned at the integer token
        output_stream: Text stream receiving ``{<integer>}{<line>}``

    Returns:
        The integer and line that were written

    Raises:
        StreamCheckError: If the stream is failed after the whitespace skip
            (bad or missing integer) or after the line read
    """
    stream = InputStream(input_stream)

    value = 0
    try:
        value = stream.read_u64()
    except StreamError as e:
        # Recorded on the stream; the check below aborts
        logger.debug("integer read failed: %s", e)
    else:
        logger.debug("read integer token %d", value)

    skipped = stream.skip_ws()
    logger.debug("skipped %d whitespace characters", skipped)
    _check(stream, CHECK_AFTER_SKIP)

    try:
        line = stream.get_line()
    except StreamError as e:
        raise StreamCheckError(CHECK_AFTER_LINE, e) from e
    logger.debug("read line %r (state %s)", line, stream.state.describe())

    result = ProbeResult(value=value, line=line)
    output_stream.write(result.render())

    _check(stream, CHECK_AFTER_LINE)
    return result


__all__ = ["CHECK_AFTER_LINE", "CHECK_AFTER_SKIP", "run_probe"]
