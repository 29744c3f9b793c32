from .format import format_
from .parse import parse
from .validate import validate

__all__ = ["format_", "parse", "validate"]
