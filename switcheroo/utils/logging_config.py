"""
Logging setup shared by the CLI and the API server.

Engine modules never configure logging themselves; they ask get_logger
for a named logger and stay silent until an entry point calls
setup_logging. Rejected commands log at DEBUG, session and match
lifecycle at INFO.
"""

import logging
import sys

PACKAGE_PREFIX = "switcheroo."

LOG_FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    # Adds timestamps and source lines for server logs
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Route all engine logs to stderr.

    stdout is left to the CLI's board rendering. Unknown level names
    fall back to INFO, unknown styles to "simple".
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMATS.get(format_style, LOG_FORMATS["simple"]),
        stream=sys.stderr,
    )
    # One line per HTTP request drowns out the game log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, named without the package prefix (e.g. 'engine_core.reducer')."""
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
