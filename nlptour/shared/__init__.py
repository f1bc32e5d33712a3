# Import key utilities so they are accessible at package level
from .io_utils import bracket_join, safe_filename, write_summary, write_table
from .log_utils import setup_logging

__all__ = [
    "bracket_join",
    "safe_filename",
    "write_summary",
    "write_table",
    "setup_logging",
]
