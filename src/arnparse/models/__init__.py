from .ParseReport import ParseReport, ParseResult

__all__ = ["ParseReport", "ParseResult"]
