import json
from typing import Optional

import typer
import typer_di
import yaml

from arnparse.arn import Arn
from arnparse.errors import ArnParseError

from ..params import output_params


def _build_arn(
    partition: str,
    service: str,
    region: Optional[str],
    account_id: Optional[str],
    resource: str,
) -> Arn:
    """
    Monta o Arn a partir dos campos e confere se o texto gerado
    volta para os mesmos campos no parse.
    """
    arn = Arn(
        partition=partition,
        service=service,
        region=region or None,
        account_id=account_id or None,
        resource=resource,
    )

    try:
        parsed = Arn.parse(arn.format())
    except ArnParseError as exc:
        raise typer.BadParameter(str(exc)) from exc

    # ':' fora do resource desloca os campos
    if parsed != arn:
        raise typer.BadParameter(
            "Somente o resource pode conter ':' (partition, service, region e account-id não)."
        )

    return arn


def format_(
    partition: str = typer.Option(
        ...,
        "--partition",
        help="Partition, e.g. aws, aws-cn, aws-us-gov.",
    ),
    service: str = typer.Option(
        ...,
        "--service",
        "-s",
        help="Service namespace, e.g. s3, ec2, iam.",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="AWS region, e.g. sa-east-1. Omit for global resources.",
    ),
    account_id: Optional[str] = typer.Option(
        None,
        "--account-id",
        help="Account ID. Omit for resources without account.",
    ),
    resource: str = typer.Option(
        ...,
        "--resource",
        "-r",
        help="Resource part, e.g. vpc/vpc-fd580e98. Kept as-is.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Monta um ARN canônico a partir dos campos informados.
    """
    arn = _build_arn(partition, service, region, account_id, resource)

    if output == "json":
        typer.echo(json.dumps(arn.to_dict(), indent=2, ensure_ascii=False))
        return

    if output == "yaml":
        typer.echo(yaml.safe_dump(arn.to_dict(), sort_keys=False, allow_unicode=True))
        return

    typer.echo(str(arn))
