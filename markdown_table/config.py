"""
markdown-table shared configuration and constants.
Standalone module — no imports from other project files.
"""

import os


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

CELL_OPEN = "| "
CELL_CLOSE = " "
LINE_CLOSE = "|"
SEPARATOR_CHAR = "-"

# ---------------------------------------------------------------------------
# Module-level state (loaded from the environment)
# ---------------------------------------------------------------------------

LOG_ENABLED = _env_bool("MARKDOWN_TABLE_LOG", False)
