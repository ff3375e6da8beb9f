"""Global constants for ah.

Values here are shared by the directory, presentation and CLI layers.
"""

NAME_TAG_KEY = "Name"
"""Tag key whose value is treated as the human-readable instance name."""

CONFIG_ENV_VAR = "AH_CONFIG"
"""Environment variable pointing at an alternative YAML config file."""

DEFAULT_CONFIG_FILE = "ah.yaml"
"""Config file looked up in the working directory when AH_CONFIG is unset."""

DEBUG_ENV_VAR = "AH_DEBUG"
"""Set to ``1`` to re-raise errors with tracebacks and enable debug logging."""

TABLE_HEADERS = (
    "Name",
    "ID",
    "Type",
    "Private Address",
    "Public Address",
    "State",
)
"""Column headers of the instance listing, in display order."""

TABLE_COLUMN_GAP = 2
"""Number of spaces separating adjacent table columns."""

NOISY_LOGGERS = ("botocore", "boto3", "urllib3")
"""Third-party loggers pinned to WARNING so debug output stays readable."""
