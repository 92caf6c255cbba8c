"""lineprobe: token-then-line stdin read probe."""

from .errors import ParseError, StreamCheckError, StreamError, UnexpectedEOF
from .models import ProbeResult
from .probe import run_probe
from .stream import InputStream

__all__ = [
    "__version__",
    "InputStream",
    "ParseError",
    "ProbeResult",
    "StreamCheckError",
    "StreamError",
    "UnexpectedEOF",
    "run_probe",
]

__version__ = "0.1.0"
