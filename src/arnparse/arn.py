from dataclasses import dataclass
from typing import Any, Dict

from .errors import ArnParseError, ArnParseErrorKind

PREFIX = "arn"


@dataclass(frozen=True)
class Arn:
    """
    ARN no formato `arn:partition:service:region:account-id:resource`.

    - region / account_id ficam None quando o segmento veio vazio
      (ex.: `arn:aws:s3:::bucket`).
    - resource é opaco: pode conter `:`, `/`, `*` e espaços, nunca é subdividido.
    """

    partition: str
    service: str
    region: str | None
    account_id: str | None
    resource: str

    @classmethod
    def parse(cls, arn: str) -> "Arn":
        if not isinstance(arn, str):
            raise TypeError(f"ARN must be a str, got {type(arn).__name__}")

        # no máximo 6 partes: a última absorve todos os ':' restantes
        elements = iter(arn.split(":", 5))

        if next(elements) != PREFIX:
            raise ArnParseError(ArnParseErrorKind.MISSING_PREFIX)

        partition = _required(elements, ArnParseErrorKind.MISSING_PARTITION)
        service = _required(elements, ArnParseErrorKind.MISSING_SERVICE)
        region = _optional(elements)
        account_id = _optional(elements)
        resource = _required(elements, ArnParseErrorKind.MISSING_RESOURCE)

        return cls(
            partition=partition,
            service=service,
            region=region,
            account_id=account_id,
            resource=resource,
        )

    def format(self) -> str:
        # region/account_id None e "" geram o mesmo texto
        return (
            f"{PREFIX}:{self.partition}:{self.service}:"
            f"{self.region or ''}:{self.account_id or ''}:{self.resource}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "arn": self.format(),
            "partition": self.partition,
            "service": self.service,
            "region": self.region,
            "account_id": self.account_id,
            "resource": self.resource,
        }

    def __str__(self) -> str:
        return self.format()


def _next_element(elements) -> str:
    element = next(elements, None)
    if element is None:
        raise ArnParseError(ArnParseErrorKind.NOT_ENOUGH_ELEMENTS)
    return element


def _required(elements, missing: ArnParseErrorKind) -> str:
    element = _next_element(elements)
    if not element:
        raise ArnParseError(missing)
    return element


def _optional(elements) -> str | None:
    return _next_element(elements) or None


def parse_arn(arn: str) -> Arn:
    return Arn.parse(arn)


def format_arn(arn: Arn) -> str:
    return arn.format()
