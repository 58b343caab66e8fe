from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel

from zvdo.util.assertx import ValidationError

T = TypeVar("T", bound=BaseModel)


class _IndentedSequenceDumper(yaml.SafeDumper):
    # Nests block sequences under their key ("sections:\n  - title: ...").
    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def dump_yaml(model: BaseModel) -> str:
    return yaml.dump(
        model.model_dump(mode="json"),
        Dumper=_IndentedSequenceDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )


def write_yaml(path: Path, model: BaseModel) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        handle.write(dump_yaml(model))


def read_yaml(path: Path, model_type: type[T]) -> T:
    if not path.is_file():
        raise ValidationError(f"Expected file to exist: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)
    return model_type.model_validate(payload)
