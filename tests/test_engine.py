import asyncio

import pytest

from algorithms import REGISTRY, algorithms_by_family, algorithms_by_tag, get_algorithm
from algorithms.step import ArrayStep
from engine.controller import MAX_SPEED_MS
from engine import (
    AsyncioScheduler,
    EmptyProducerError,
    MonotonicScheduler,
    PlaybackState,
    Recorder,
    StepSequence,
    UnknownAlgorithmError,
    materialize,
    record,
)
from conftest import make_sequence


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------
class TestMaterialize:
    def test_empty_producer_raises(self):
        with pytest.raises(EmptyProducerError):
            materialize(iter(()))

    def test_sequence_needs_a_step(self):
        with pytest.raises(EmptyProducerError):
            StepSequence([])

    def test_keeps_order(self):
        seq = materialize(ArrayStep(array=[i]) for i in range(3))
        assert [s.array for s in seq] == [(0,), (1,), (2,)]
        assert seq.last_index == 2
        assert seq.family == "array"

    def test_to_list_is_json_ready(self):
        data = make_sequence(2).to_list()
        assert data[1]["array"] == [1]
        assert data[1]["family"] == "array"


# ---------------------------------------------------------------------------
# Timers
# ---------------------------------------------------------------------------
class TestManualScheduler:
    def test_fires_once_per_interval(self, scheduler):
        hits = []
        scheduler.call_every(100, lambda: hits.append(scheduler.now_ms))
        assert scheduler.advance(350) == 3
        assert hits == [100, 200, 300]

    def test_cancel_stops_firing(self, scheduler):
        hits = []
        handle = scheduler.call_every(50, lambda: hits.append(1))
        scheduler.advance(50)
        scheduler.cancel(handle)
        scheduler.advance(500)
        assert hits == [1]
        assert scheduler.active_count == 0

    def test_due_timers_fire_in_order(self, scheduler):
        order = []
        scheduler.call_every(30, lambda: order.append("slow"))
        scheduler.call_every(20, lambda: order.append("fast"))
        scheduler.advance(60)
        assert order == ["fast", "slow", "fast", "slow", "fast"]

    def test_cancel_from_inside_a_callback(self, scheduler):
        hits = []
        handles = {}

        def first():
            hits.append("first")
            scheduler.cancel(handles["second"])

        handles["first"] = scheduler.call_every(10, first)
        handles["second"] = scheduler.call_every(10, lambda: hits.append("second"))
        scheduler.advance(10)
        assert hits == ["first"]


class TestMonotonicScheduler:
    def test_poll_fires_elapsed_ticks(self):
        now = [0.0]
        sched = MonotonicScheduler(clock=lambda: now[0])
        hits = []
        sched.call_every(100, lambda: hits.append(1))
        now[0] = 0.25
        assert sched.poll() == 2
        now[0] = 0.375
        assert sched.poll() == 1
        assert len(hits) == 3


class TestAsyncioScheduler:
    def test_repeats_until_cancelled(self):
        async def scenario():
            sched = AsyncioScheduler()
            hits = []
            handle = sched.call_every(5, lambda: hits.append(1))
            await asyncio.sleep(0.05)
            sched.cancel(handle)
            count = len(hits)
            await asyncio.sleep(0.03)
            return count, len(hits), sched.active_count

        count, later, active = asyncio.run(scenario())
        assert count >= 2
        assert later == count
        assert active == 0


# ---------------------------------------------------------------------------
# Playback controller
# ---------------------------------------------------------------------------
class TestPlaybackLifecycle:
    def test_idle_until_loaded(self, controller):
        assert controller.state is PlaybackState.IDLE
        assert controller.current() is None
        controller.play()
        controller.seek(3)
        controller.step_forward()
        assert controller.state is PlaybackState.IDLE

    def test_load_shows_first_step_paused(self, controller, ten_steps):
        controller.load(ten_steps)
        assert controller.state is PlaybackState.PAUSED
        assert controller.cursor == 0
        assert controller.current() is ten_steps[0]

    def test_load_accepts_plain_iterables(self, controller):
        controller.load([ArrayStep(array=[1]), ArrayStep(array=[2])])
        assert controller.total_steps == 2

    def test_load_replaces_running_session(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        controller.load(make_sequence(3))
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.active_count == 0

    def test_unload(self, controller, ten_steps):
        controller.load(ten_steps)
        controller.unload()
        assert controller.state is PlaybackState.IDLE


class TestPlayback:
    def test_monotonic_playback_to_the_end(self, controller, scheduler, ten_steps):
        seen = []
        controller.on_step = lambda step: seen.append(controller.cursor)
        controller.load(ten_steps)
        controller.play()
        scheduler.advance(100 * 20)
        assert seen == list(range(10))
        assert controller.state is PlaybackState.PAUSED
        assert controller.is_finished
        assert scheduler.active_count == 0

    def test_one_step_per_tick(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        scheduler.advance(99)
        assert controller.cursor == 0
        scheduler.advance(1)
        assert controller.cursor == 1
        scheduler.advance(300)
        assert controller.cursor == 4

    def test_pause_and_resume_keep_cursor(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        scheduler.advance(300)
        controller.pause()
        scheduler.advance(1000)
        assert controller.cursor == 3
        controller.play()
        scheduler.advance(100)
        assert controller.cursor == 4

    def test_play_at_last_step_is_noop(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.jump_to_end()
        controller.play()
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.active_count == 0

    def test_play_twice_keeps_one_timer(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        controller.play()
        controller.toggle_play()
        controller.toggle_play()
        assert scheduler.active_count == 1

    def test_reset(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        scheduler.advance(500)
        controller.reset()
        assert controller.cursor == 0
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.active_count == 0


class TestSeek:
    @pytest.mark.parametrize("index,expected", [(-5, 0), (999, 9), (4, 4), ("7", 7)])
    def test_clamped(self, controller, ten_steps, index, expected):
        controller.load(ten_steps)
        controller.seek(index)
        assert controller.cursor == expected

    def test_seek_pauses(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        controller.seek(5)
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.active_count == 0

    def test_garbage_index_is_ignored(self, controller, ten_steps):
        controller.load(ten_steps)
        controller.seek(3)
        controller.seek("abc")
        controller.seek(None)
        assert controller.cursor == 3

    @pytest.mark.parametrize("index,expected", [(float("inf"), 9), (float("-inf"), 0), (10 ** 400, 9)])
    def test_unbounded_index_is_clamped(self, controller, ten_steps, index, expected):
        controller.load(ten_steps)
        controller.seek(4)
        controller.seek(index)
        assert controller.cursor == expected

    def test_nan_index_is_ignored(self, controller, ten_steps):
        controller.load(ten_steps)
        controller.seek(4)
        controller.seek(float("nan"))
        assert controller.cursor == 4

    def test_step_backward_and_forward(self, controller, ten_steps):
        controller.load(ten_steps)
        controller.step_backward()
        assert controller.cursor == 0
        controller.step_forward()
        controller.step_forward()
        assert controller.cursor == 2


class TestSpeed:
    def test_set_speed_rearms_live_timer(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        scheduler.advance(50)
        controller.set_speed(500)
        assert scheduler.active_count == 1
        scheduler.advance(499)
        assert controller.cursor == 0
        scheduler.advance(1)
        assert controller.cursor == 1

    @pytest.mark.parametrize("bad", [0, -100, "fast", None, True, float("inf"), float("nan")])
    def test_invalid_speed_is_ignored(self, controller, ten_steps, bad):
        controller.load(ten_steps)
        controller.set_speed(bad)
        assert controller.speed_ms == 100

    def test_huge_speed_is_clamped(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.play()
        controller.set_speed(10 ** 400)
        assert controller.speed_ms == MAX_SPEED_MS
        assert scheduler.active_count == 1

    def test_presets(self, controller, ten_steps):
        controller.load(ten_steps)
        controller.set_speed_preset("turbo")
        assert controller.speed_ms == 50
        controller.set_speed_preset("warp")
        assert controller.speed_ms == 50

    def test_set_speed_while_paused_does_not_start(self, controller, scheduler, ten_steps):
        controller.load(ten_steps)
        controller.set_speed(20)
        scheduler.advance(1000)
        assert controller.cursor == 0

    def test_snapshot(self, controller, ten_steps):
        controller.load(ten_steps)
        controller.seek(2)
        snap = controller.snapshot()
        assert snap["state"] == "paused"
        assert snap["cursor"] == 2
        assert snap["total_steps"] == 10
        assert snap["step"]["message"] == "step 2"


# ---------------------------------------------------------------------------
# Recorder & registry
# ---------------------------------------------------------------------------
class TestRecorder:
    def test_record_uses_defaults(self):
        rec = record("bubble_sort")
        assert rec.metrics.algo_key == "bubble_sort"
        assert rec.metrics.family == "array"
        assert rec.metrics.total_steps == len(rec.sequence)
        assert list(rec.sequence.last.array) == sorted(REGISTRY["bubble_sort"].defaults["array"])

    def test_params_override_defaults(self):
        rec = record("bubble_sort", array=[2, 1])
        assert rec.params == {"array": [2, 1]}
        assert rec.sequence.last.array == (1, 2)

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError) as info:
            Recorder().start("bogo_sort")
        assert info.value.key == "bogo_sort"
        assert isinstance(info.value, ValueError)

    def test_run_before_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()

    def test_export(self):
        data = record("bfs").export()
        assert data["algo_key"] == "bfs"
        assert data["metrics"]["family"] == "graph"
        assert data["steps"][0]["family"] == "graph"


class TestRegistry:
    @pytest.mark.parametrize("key", sorted(REGISTRY))
    def test_every_default_run_produces_its_family(self, key):
        info = get_algorithm(key)
        rec = record(key)
        assert rec.sequence.family == info.family
        for step in rec.sequence:
            assert step.line_number is None or 0 <= step.line_number < len(info.pseudocode)

    @pytest.mark.parametrize("key", sorted(REGISTRY))
    def test_every_producer_restarts_identically(self, key):
        first, second = record(key).sequence, record(key).sequence
        assert first == second
        assert hash(first) == hash(second)

    def test_lookup_helpers(self):
        assert get_algorithm("nope") is None
        assert {a.key for a in algorithms_by_family("graph")} == {
            "bfs", "dfs", "dijkstra", "topological_sort", "kosaraju",
            "bellman_ford", "prim", "kruskal",
        }
        assert "kmp" in {a.key for a in algorithms_by_tag("pattern-matching")}
