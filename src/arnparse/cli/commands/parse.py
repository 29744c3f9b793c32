import logging
from pathlib import Path
from typing import List, Optional

import typer
import typer_di
import yaml
from jinja2 import TemplateError

from arnparse.engine.parse_engine import parse_arns, read_arn_file
from arnparse.models import ParseReport
from arnparse.template_engine import load_template, render_arn

from .console import BOLD, CYAN, GREEN, GREY, RED, RESET, RULE
from ..params import output_params

logger = logging.getLogger(__name__)


def _print_report(report: ParseReport, output: str) -> None:
    if output == "json":
        typer.echo(report.to_json())
        return

    if output == "yaml":
        typer.echo(report.to_yaml())
        return

    for r in report.results:
        print()
        print(RULE)
        print(f"{CYAN}{BOLD}INPUT:     {RESET} {r.input}")
        print(RULE)

        if r.arn is None:
            print(f"{RED}{BOLD}INVALID:   {RESET} {r.error}")
            continue

        arn = r.arn
        print(f"{CYAN}{BOLD}PARTITION: {RESET} {arn.partition}")
        print(f"{CYAN}{BOLD}SERVICE:   {RESET} {arn.service}")
        print(f"{CYAN}{BOLD}REGION:    {RESET} {arn.region or GREY + '(none)' + RESET}")
        print(f"{CYAN}{BOLD}ACCOUNT:   {RESET} {arn.account_id or GREY + '(none)' + RESET}")
        print(f"{CYAN}{BOLD}RESOURCE:  {RESET} {arn.resource}")

    print()
    print(RULE)
    summary = report.summary
    print(
        f"{GREEN}{BOLD}{summary['valid']} valid{RESET}, "
        f"{RED}{BOLD}{summary['invalid']} invalid{RESET} "
        f"{GREY}(total {summary['total']}){RESET}"
    )
    print(RULE)
    print()


def _print_rendered(report: ParseReport, expr: str) -> None:
    for r in report.results:
        if r.arn is None:
            typer.echo(f"{r.input}: {r.error}", err=True)
            continue

        try:
            typer.echo(render_arn(r.arn, expr))
        except TemplateError as exc:
            raise typer.BadParameter(f"Template inválido: {exc}") from exc


def parse(
    arns: Optional[List[str]] = typer.Argument(
        None,
        help="ARN(s) to parse.",
    ),
    arn_file: Optional[Path] = typer.Option(
        None,
        "--arn-file",
        help="File with one ARN per line.",
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        help="Jinja2 expression rendered for each valid ARN, e.g. '{{ service }}/{{ resource }}'.",
    ),
    template_file: Optional[Path] = typer.Option(
        None,
        "--template-file",
        help="YAML/JSON file with a 'format' key holding the Jinja2 expression.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Decompõe ARNs em partition, service, region, account-id e resource.

    Sai com código 1 se qualquer entrada for inválida.
    """
    values: List[str] = list(arns or [])
    if arn_file:
        values.extend(read_arn_file(arn_file))

    if not values:
        raise typer.BadParameter(
            "Você precisa passar pelo menos um ARN ou um --arn-file."
        )

    if template and template_file:
        raise typer.BadParameter("Use apenas uma opção: --template ou --template-file.")

    if template_file:
        try:
            template = str(load_template(template_file)["format"])
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise typer.BadParameter(f"Template inválido: {exc}") from exc

    report = parse_arns(values)

    if template:
        _print_rendered(report, template)
    else:
        _print_report(report, output)

    if report.invalid:
        logger.debug("%d invalid ARN(s), exiting with code 1", len(report.invalid))
        raise typer.Exit(code=1)
