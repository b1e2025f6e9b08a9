"""Helpers shared by the UNDERBAR CLI commands."""

from .json_args import JSON, dumps
from .log_level_parser import parse_log_level
from .messages import error_glyph

__all__ = ["JSON", "dumps", "error_glyph", "parse_log_level"]
