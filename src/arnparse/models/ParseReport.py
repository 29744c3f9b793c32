import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import yaml

if TYPE_CHECKING:
    from ..arn import Arn


@dataclass
class ParseResult:
    """
    Resultado do parse de uma única entrada: ou um Arn, ou o erro.
    """

    input: str
    arn: Optional["Arn"] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.arn is not None

    def to_dict(self) -> Dict[str, Any]:
        if self.arn is not None:
            return {"input": self.input, "valid": True, **self.arn.to_dict()}
        return {
            "input": self.input,
            "valid": False,
            "error": self.error,
            "error_kind": self.error_kind,
        }


@dataclass
class ParseReport:
    checked_at: str
    summary: Dict[str, int]
    results: List[ParseResult]

    @property
    def valid(self) -> List[ParseResult]:
        return [r for r in self.results if r.ok]

    @property
    def invalid(self) -> List[ParseResult]:
        return [r for r in self.results if not r.ok]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "checked_at": self.checked_at,
            "summary": self.summary,
            "results": [r.to_dict() for r in self.results],
        }

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
