"""CLI helpers for testing-example.

OSC-8 terminal hyperlinks when supported, a NAME=LEVEL option parser, and
message emitters that write to stderr with emoji to ASCII fallbacks.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "parse_log_level", "success", "warn"]
