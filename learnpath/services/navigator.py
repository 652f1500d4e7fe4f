"""
Step navigation for interactive demos.

The navigator is an immutable value: transitions return a new state and
never fail. At either boundary the transition is a no-op.
"""

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from learnpath.models.knowledge_point import DemoStep, KnowledgePoint


class NavigatorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    steps: Tuple[DemoStep, ...] = ()
    cursor: int = 0

    @property
    def current(self) -> Optional[DemoStep]:
        if not self.steps:
            return None
        return self.steps[self.cursor]

    @property
    def has_next(self) -> bool:
        return self.cursor < len(self.steps) - 1

    @property
    def has_previous(self) -> bool:
        return self.cursor > 0


def start(steps: Sequence[DemoStep]) -> NavigatorState:
    return NavigatorState(steps=tuple(steps), cursor=0)


def next_step(state: NavigatorState) -> NavigatorState:
    if not state.has_next:
        return state
    return state.model_copy(update={"cursor": state.cursor + 1})


def previous_step(state: NavigatorState) -> NavigatorState:
    if not state.has_previous:
        return state
    return state.model_copy(update={"cursor": state.cursor - 1})


def navigator_for(knowledge_point: KnowledgePoint) -> NavigatorState:
    """Start a navigator over the knowledge point's demo steps (empty without a demo)."""
    if knowledge_point.demoConfig is None:
        return start([])
    return start(knowledge_point.demoConfig.content.steps)
