import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """
    Route all flipfish loggers through Rich on stderr.

    stdout is reserved for protocol replies, so nothing is ever logged there.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
