"""Stage registry — every filter stage is a standalone function registered via decorator.

Usage:
    @stage(id="S05", name="Object Spread", dependencies=["S04"])
    def object_spread(ctx: VerificationContext) -> StageVerdict:
        ctx.spread_score = spread_score(ctx.furniture)
        return StageVerdict(ctx.spread_score >= 0.03, "...", f"Score: {ctx.spread_score:.2f}")

Execution order is resolved from dependencies, so each stage names the stage
it must follow. Adding a stage = creating one module with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from interiorsight.engine.context import VerificationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageVerdict:
    """What a stage returns: pass/fail plus a message and a readable measurement."""

    passed: bool
    message: str
    value: str = ""


StageFn = Callable[["VerificationContext"], StageVerdict]


@dataclass
class StageSpec:
    id: str
    name: str
    fn: StageFn
    dependencies: list[str] = field(default_factory=list)
    # Informational stages are recorded but never stop the chain
    gating: bool = True
    description: str = ""


class StageRegistry:
    """Registry of filter stages."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: s.id)

    def resolve_order(self) -> list[StageSpec]:
        """Topological sort over stage dependencies, ties broken by stage ID."""
        pool = self._stages

        # Kahn's algorithm
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[sid] += 1

        queue = sorted([sid for sid, d in in_degree.items() if d == 0])
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level default registry
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    name: str,
    dependencies: list[str] | None = None,
    gating: bool = True,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: StageFn) -> StageFn:
        spec = StageSpec(
            id=id,
            name=name,
            fn=fn,
            dependencies=dependencies or [],
            gating=gating,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
