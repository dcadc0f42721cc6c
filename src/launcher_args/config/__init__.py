"""Parser configuration."""

from .loader import DEFAULT_PARSER_CONFIG, load_parser_config
from .models import ParserConfig

__all__ = ["DEFAULT_PARSER_CONFIG", "ParserConfig", "load_parser_config"]
