"""CLI 출력 구성."""

from .render import describe_launch, format_usage, format_version

__all__ = ["describe_launch", "format_usage", "format_version"]
