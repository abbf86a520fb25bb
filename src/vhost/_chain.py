"""Chain — ordered composition of (request, response, next) stages.

A Chain is itself a stage, so chains nest. Each stage decides whether
to continue: calling its ``next_`` runs the following stage, not calling
it ends the chain there. After the last stage the outer ``next_`` runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vhost._types import Next, Stage


@dataclass(frozen=True, slots=True)
class Chain:
    """Run stages in order with explicit continuations."""

    stages: tuple[Stage, ...] = ()

    def __call__(self, request: Any, response: Any, next_: Next) -> Any:
        return self._dispatch(0, request, response, next_)

    def _dispatch(self, index: int, request: Any, response: Any, next_: Next) -> Any:
        if index >= len(self.stages):
            return next_()
        stage = self.stages[index]
        return stage(
            request,
            response,
            lambda: self._dispatch(index + 1, request, response, next_),
        )

    def __len__(self) -> int:
        return len(self.stages)


def chain(*stages: Stage) -> Chain:
    """Build a Chain from stages given in order."""
    return Chain(stages=stages)
