from .arn import Arn, format_arn, parse_arn
from .errors import ArnParseError, ArnParseErrorKind

__all__ = ["Arn", "ArnParseError", "ArnParseErrorKind", "format_arn", "parse_arn"]
