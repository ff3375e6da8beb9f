"""Logging filters that split console output between stdout and stderr."""

import logging


class StreamRoutingFilter(logging.Filter):
    """Pass only the records that belong on one console stream.

    Records at WARNING and above go to stderr, everything else to stdout.
    A record may force its destination with ``extra={"stream": "stderr"}``.

    Parameters
    ----------
    stream : str
        ``"stdout"`` or ``"stderr"``
    """

    def __init__(self, stream: str) -> None:
        if stream not in ("stdout", "stderr"):
            raise ValueError(f"Unknown stream: {stream}")

        super().__init__()
        self.stream = stream

    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "stream", None)

        if target is None:
            target = "stderr" if record.levelno >= logging.WARNING else "stdout"

        return target == self.stream
