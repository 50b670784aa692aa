"""
Animation schedule for replaying a search result.

The timeline is computed once from a SearchResult and is pure data: every
step carries the time offset at which the presentation layer should apply
it. Search ordering never depends on the timeline.

Schedule:
    - visited node i at i * visited_delay_ms
    - one terminal step at len(visited) * visited_delay_ms that either
      reports that no path exists or starts the path animation
    - path node j at terminal_time + j * path_delay_ms

The start and end markers are never highlighted.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from .constants import Coord, VISITED_STEP_DELAY_MS, PATH_STEP_DELAY_MS, NO_PATH_MESSAGE
from .pathfinding.engine import SearchResult


class StepKind(IntEnum):
    VISITED = 0
    PATH = 1
    NO_PATH = 2


@dataclass(frozen=True)
class AnimationStep:
    time_ms: int
    kind: StepKind
    coord: Optional[Coord] = None  # None for NO_PATH
    message: Optional[str] = None


@dataclass
class AnimationTimeline:
    steps: List[AnimationStep] = field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        result: SearchResult,
        visited_delay_ms: int = VISITED_STEP_DELAY_MS,
        path_delay_ms: int = PATH_STEP_DELAY_MS,
    ) -> "AnimationTimeline":
        steps = []
        for i, node in enumerate(result.visited):
            if node.is_marker:
                continue
            steps.append(AnimationStep(i * visited_delay_ms, StepKind.VISITED, node.coord))

        terminal_ms = len(result.visited) * visited_delay_ms
        if not result.found:
            steps.append(
                AnimationStep(terminal_ms, StepKind.NO_PATH, message=NO_PATH_MESSAGE)
            )
            return cls(steps)

        for j, node in enumerate(result.path):
            if node.is_marker:
                continue
            steps.append(
                AnimationStep(terminal_ms + j * path_delay_ms, StepKind.PATH, node.coord)
            )
        return cls(steps)

    @property
    def duration_ms(self) -> int:
        return self.steps[-1].time_ms if self.steps else 0

    def __len__(self) -> int:
        return len(self.steps)


class TimelinePlayer:
    """Releases timeline steps as elapsed time passes them."""

    def __init__(self, timeline: AnimationTimeline):
        self.timeline = timeline
        self.elapsed_ms = 0
        self._cursor = 0

    @property
    def finished(self) -> bool:
        return self._cursor >= len(self.timeline.steps)

    def advance(self, delta_ms: int) -> List[AnimationStep]:
        """Move the clock forward and return the steps that became due."""
        self.elapsed_ms += delta_ms
        steps = self.timeline.steps
        start = self._cursor
        while self._cursor < len(steps) and steps[self._cursor].time_ms <= self.elapsed_ms:
            self._cursor += 1
        return steps[start:self._cursor]

    def skip_to_end(self) -> List[AnimationStep]:
        return self.advance(max(0, self.timeline.duration_ms - self.elapsed_ms))
