"""Step models for parsed path patterns."""

from __future__ import annotations

import re
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")


class _StepNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class FieldStep(_StepNode):
    kind: Literal["field"] = "field"
    name: str

    def render(self) -> str:
        if _BARE_KEY.fullmatch(self.name):
            return self.name
        escaped = self.name.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


class IndexStep(_StepNode):
    kind: Literal["index"] = "index"
    index: int

    def render(self) -> str:
        return f"[{self.index}]"


Step: TypeAlias = Annotated[FieldStep | IndexStep, Field(discriminator="kind")]


class Pattern(_StepNode):
    """An ordered, immutable sequence of navigation steps.

    A pattern with no steps selects the whole document.
    """

    steps: tuple[Step, ...] = ()

    def prefix(self, count: int) -> Pattern:
        return Pattern(steps=self.steps[:count])

    def render(self) -> str:
        parts: list[str] = []
        for step in self.steps:
            if isinstance(step, FieldStep) and parts:
                parts.append(".")
            parts.append(step.render())
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


__all__ = ["FieldStep", "IndexStep", "Pattern", "Step"]
