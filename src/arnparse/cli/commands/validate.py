import json
from typing import List

import typer
import typer_di
import yaml

from arnparse.engine.parse_engine import parse_arns

from .console import BOLD, GREEN, GREY, RED, RESET
from ..params import output_params


def validate(
    arns: List[str] = typer.Argument(
        ...,
        help="ARN(s) to validate.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Verifica se os ARNs são estruturalmente válidos.

    Sai com código 1 se qualquer um for inválido.
    """
    report = parse_arns(arns)

    rows = [
        {"arn": r.input, "valid": r.ok, **({"error": r.error} if r.error else {})}
        for r in report.results
    ]

    if output == "json":
        typer.echo(json.dumps(rows, indent=2, ensure_ascii=False))
    elif output == "yaml":
        typer.echo(yaml.safe_dump(rows, sort_keys=False, allow_unicode=True))
    else:
        for r in report.results:
            if r.ok:
                print(f"{GREEN}{BOLD}OK{RESET} {r.input}")
            else:
                print(f"{RED}{BOLD}INVALID:{RESET} {r.error} {GREY}({r.input}){RESET}")

    if report.invalid:
        raise typer.Exit(code=1)
