"""Logging formatters for console output."""

import logging


class StreamFormatter(logging.Formatter):
    """Logging formatter that prefixes warnings and errors with their level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a level prefix for WARNING and above.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message, prefixed with ``Warning:`` or ``Error:``
            when the record is at least WARNING
        """
        msg = super().format(record)

        if record.levelno >= logging.ERROR:
            return f"Error: {msg}"
        elif record.levelno >= logging.WARNING:
            return f"Warning: {msg}"

        return msg
