from importlib.metadata import PackageNotFoundError, version

import typer

PACKAGE_NAME = "arnparse"


def get_version(package: str = PACKAGE_NAME) -> str:
    """
    Versão instalada da distribuição; "unknown" quando rodando direto do src/.
    """
    try:
        return version(package)
    except PackageNotFoundError:
        return "unknown"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()
