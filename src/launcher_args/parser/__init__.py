"""Launcher argument vector parsing."""

from .service import CLASSIC_SWITCH, VERSION_SWITCH, parse_args

__all__ = ["CLASSIC_SWITCH", "VERSION_SWITCH", "parse_args"]
