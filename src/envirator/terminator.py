"""Process termination.

Fatal conditions (a required variable is missing, an env file cannot be
loaded) end the process rather than raising. The ending is delegated to a
``Terminator`` so it can be replaced in tests; see ``envirator.testing``.
"""

import os
import sys
from typing import NoReturn, Protocol, runtime_checkable


@runtime_checkable
class Terminator(Protocol):
    """Ends the process with a status code."""

    def terminate(self, code: int) -> NoReturn: ...


class ProcessTerminator:
    """Exit immediately via ``os._exit``.

    No ``atexit`` handlers, ``finally`` blocks or context managers run.
    Standard streams are flushed first so the preceding log line is not lost.
    """

    def terminate(self, code: int) -> NoReturn:
        for stream in (sys.stdout, sys.stderr):
            try:
                stream.flush()
            except (AttributeError, OSError, ValueError):
                pass
        os._exit(code)
