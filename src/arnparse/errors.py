from enum import Enum


class ArnParseErrorKind(Enum):
    """
    Motivos possíveis de falha no parse de um ARN.
    O valor de cada membro é a mensagem legível exibida ao usuário.
    """

    NOT_ENOUGH_ELEMENTS = "Not enough elements"
    MISSING_PREFIX = "Missing 'arn:' prefix"
    MISSING_PARTITION = "Missing partition element"
    MISSING_SERVICE = "Missing service element"
    MISSING_RESOURCE = "Missing resource element"


class ArnParseError(ValueError):
    def __init__(self, kind: ArnParseErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArnParseError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"ArnParseError({self.kind.name})"
