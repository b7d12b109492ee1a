from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from . import transforms
from .cli_shared import UnknownOperation


class OperationKind(Enum):
    """Closed set of transforms; the value is the name accepted on the command line."""

    CAMEL_CASE = "camelcase"
    LOWER_CASE = "lowercase"
    NO_SPACES = "nospaces"
    SLUGIFY = "slugify"
    SNAKE_CASE = "snakecase"
    UPPER_CASE = "uppercase"


_TRANSFORMS: dict[OperationKind, Callable[[str], str]] = {
    OperationKind.CAMEL_CASE: transforms.camel_case,
    OperationKind.LOWER_CASE: transforms.lower_case,
    OperationKind.NO_SPACES: transforms.no_spaces,
    OperationKind.SLUGIFY: transforms.slugify,
    OperationKind.SNAKE_CASE: transforms.snake_case,
    OperationKind.UPPER_CASE: transforms.upper_case,
}

if set(_TRANSFORMS) != set(OperationKind):
    raise RuntimeError("every operation kind needs a transform")


@dataclass(frozen=True)
class TransformResult:
    kind: OperationKind
    input: str
    output: str

    def render(self) -> str:
        return f"{self.input} -> {self.output}"

    def to_doc(self) -> dict[str, Any]:
        return {
            "kind": "textops.transform.v1",
            "operation": self.kind.value,
            "input": self.input,
            "output": self.output,
        }


def list_kinds() -> list[OperationKind]:
    return list(OperationKind)


def parse_kind(name: str | None) -> OperationKind:
    key = str(name or "").strip().lower()
    for kind in OperationKind:
        if kind.value == key:
            return kind
    raise UnknownOperation(str(name or ""))


def available_operations_text() -> str:
    lines = ["Available operations are:"]
    lines.extend(f"  {kind.value}" for kind in list_kinds())
    return "\n".join(lines)


def apply(kind: OperationKind, text: str) -> str:
    return _TRANSFORMS[kind](text)


def transform(kind: OperationKind, text: str) -> TransformResult:
    return TransformResult(kind=kind, input=text, output=apply(kind, text))
