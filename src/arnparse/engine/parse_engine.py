import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

from ..arn import Arn
from ..errors import ArnParseError
from ..models import ParseReport, ParseResult

logger = logging.getLogger(__name__)


def read_arn_file(path: str | Path) -> List[str]:
    """
    Lê um arquivo com um ARN por linha.
    Linhas vazias e comentários (`#`) são ignorados.
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [
        line.strip()
        for line in lines
        if line.strip() and not line.strip().startswith("#")
    ]


def parse_arns(values: Iterable[str]) -> ParseReport:
    """
    Faz o parse de cada entrada sem interromper na primeira falha.

    Cada entrada vira um ParseResult (com Arn ou com o erro), na mesma
    ordem de entrada. O valor é usado como veio: limpeza de linhas fica
    com read_arn_file.
    """
    results: List[ParseResult] = []

    for value in values:
        try:
            arn = Arn.parse(value)
        except ArnParseError as exc:
            logger.debug("Invalid ARN %r: %s", value, exc)
            results.append(
                ParseResult(
                    input=value,
                    error=str(exc),
                    error_kind=exc.kind.name,
                )
            )
            continue

        results.append(ParseResult(input=value, arn=arn))

    valid = sum(1 for r in results if r.ok)
    summary = {
        "total": len(results),
        "valid": valid,
        "invalid": len(results) - valid,
    }
    logger.info(
        "Parsed %d ARN(s): %d valid, %d invalid",
        summary["total"],
        summary["valid"],
        summary["invalid"],
    )

    return ParseReport(
        checked_at=datetime.now(timezone.utc).isoformat(),
        summary=summary,
        results=results,
    )
