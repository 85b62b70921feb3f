"""CLI helpers for TRASHPANDA.

Option parsing for ``KEY=VALUE`` pairs and message emitters that write to
stderr with emoji→ASCII fallbacks.
"""

from .messages import warn
from .params import parse_param_pairs

__all__ = ["warn", "parse_param_pairs"]
