"""
Tests for the replay timeline built from search results.
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gridpath.animation import AnimationTimeline, StepKind, TimelinePlayer
from gridpath.ascii_map import parse_ascii_map
from gridpath.constants import NO_PATH_MESSAGE
from gridpath.pathfinding import SearchAlgorithm, run_search

SMALL_MAP = "S..\n.#.\n..E"
BLOCKED_MAP = "S.#\n.##\n#.E"


class TestAnimationTimeline:
    """Test suite for AnimationTimeline."""

    def test_bfs_schedule(self):
        grid = parse_ascii_map(SMALL_MAP)
        result = run_search(SearchAlgorithm.BFS, grid)
        timeline = AnimationTimeline.from_result(result)

        visited = [step for step in timeline.steps if step.kind == StepKind.VISITED]
        path = [step for step in timeline.steps if step.kind == StepKind.PATH]

        # Eight visited nodes, markers are not highlighted
        assert [step.time_ms for step in visited] == [10, 20, 30, 40, 50, 60]
        assert [step.coord for step in visited] == [(1, 0), (0, 1), (2, 0), (0, 2), (2, 1), (1, 2)]
        assert [step.time_ms for step in path] == [130, 180, 230]
        assert [step.coord for step in path] == [(1, 0), (2, 0), (2, 1)]
        assert timeline.duration_ms == 230

    def test_custom_delays(self):
        grid = parse_ascii_map(SMALL_MAP)
        result = run_search(SearchAlgorithm.BFS, grid)
        timeline = AnimationTimeline.from_result(result, visited_delay_ms=1, path_delay_ms=2)
        assert timeline.steps[0].time_ms == 1
        assert timeline.duration_ms == 8 + 3 * 2

    def test_no_path_step_comes_last(self):
        grid = parse_ascii_map(BLOCKED_MAP)
        result = run_search(SearchAlgorithm.DIJKSTRA, grid)
        timeline = AnimationTimeline.from_result(result)

        last = timeline.steps[-1]
        assert last.kind == StepKind.NO_PATH
        assert last.message == NO_PATH_MESSAGE
        assert last.time_ms == len(result.visited) * 10
        assert not any(step.kind == StepKind.PATH for step in timeline.steps)

    def test_dfs_has_no_path_steps(self):
        grid = parse_ascii_map(SMALL_MAP)
        result = run_search(SearchAlgorithm.DFS, grid)
        timeline = AnimationTimeline.from_result(result)
        assert {step.kind for step in timeline.steps} == {StepKind.VISITED}

    def test_steps_are_time_ordered(self):
        grid = parse_ascii_map(SMALL_MAP)
        for algorithm in SearchAlgorithm:
            result = run_search(algorithm, grid)
            times = [step.time_ms for step in AnimationTimeline.from_result(result).steps]
            assert times == sorted(times)


class TestTimelinePlayer:
    """Test suite for TimelinePlayer."""

    def setup_method(self):
        grid = parse_ascii_map(SMALL_MAP)
        self.timeline = AnimationTimeline.from_result(run_search(SearchAlgorithm.BFS, grid))
        self.player = TimelinePlayer(self.timeline)

    def test_releases_due_steps(self):
        assert self.player.advance(0) == []
        first = self.player.advance(15)
        assert [step.coord for step in first] == [(1, 0)]
        second = self.player.advance(30)
        assert len(second) == 3
        assert not self.player.finished

    def test_plays_every_step_once(self):
        released = []
        while not self.player.finished:
            released.extend(self.player.advance(16))
        assert released == self.timeline.steps
        assert self.player.advance(1000) == []

    def test_skip_to_end(self):
        self.player.advance(20)
        rest = self.player.skip_to_end()
        assert len(rest) == len(self.timeline) - 2
        assert self.player.finished

    def test_empty_timeline_is_finished(self):
        player = TimelinePlayer(AnimationTimeline())
        assert player.finished
        assert player.skip_to_end() == []
