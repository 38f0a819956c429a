"""
Unit tests for the Stepper animation driver and the frames it builds.
"""

from graph import Graph
from algorithms import Done, run_shortest_path
from engine import SPEED_PRESETS, Stepper, StepperState

import pytest


def _triangle():
    g = Graph()
    for i in range(4):
        g.add_node(i * 30, 0)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 1, 1)
    return g


def _started(target=1):
    stepper = Stepper()
    stepper.start(run_shortest_path(_triangle(), 0, target))
    return stepper


def test_start_shows_init_frame():
    stepper = _started()
    frame = stepper.current_frame

    assert stepper.state == StepperState.PAUSED
    assert stepper.current_idx == 0
    assert frame.step_number == 0
    assert frame.distances[0] == 0
    assert frame.distances[1] == float("inf")
    assert frame.frontier == [0]
    assert frame.pseudocode_line == 3
    assert not frame.is_final
    assert stepper.current_event is None


def test_next_and_prev_walk_the_buffer():
    stepper = _started()
    assert stepper.next_step()
    assert stepper.current_frame.current_node == 0
    assert stepper.current_frame.node_states[0] == "current"
    assert stepper.next_step()
    assert stepper.current_frame.edge_states[0] == "active"
    assert stepper.next_step()
    assert stepper.current_frame.edge_states[0] == "relaxed"

    assert stepper.prev_step()
    assert stepper.current_idx == 2
    assert stepper.total_events_fetched == 3
    assert stepper.prev_step() and stepper.prev_step()
    assert not stepper.prev_step()


def test_jump_to_end_marks_chosen_path():
    stepper = _started()
    stepper.jump_to_end()
    frame = stepper.current_frame

    assert stepper.is_finished
    assert frame.is_final
    assert frame.path == [0, 2, 1]
    assert frame.edge_states[1] == "chosen"
    assert frame.edge_states[2] == "chosen"
    assert frame.edge_states[0] == "relaxed"
    assert frame.node_states[3] == "unvisited"
    assert "0 → 2 → 1" in frame.explanation
    assert isinstance(stepper.current_event, Done)
    assert not stepper.next_step()


def test_unreachable_target_final_frame():
    stepper = _started(target=3)
    stepper.jump_to_end()
    frame = stepper.current_frame
    assert frame.path == []
    assert "not reachable" in frame.explanation
    assert frame.to_dict()["distances"]["3"] is None


def test_goto_step_pulls_events_forward():
    stepper = _started()
    assert stepper.goto_step(5)
    assert stepper.current_idx == 5
    assert len(stepper.frames) == 6
    assert not stepper.goto_step(500)
    assert stepper.current_idx == 5


def test_rewind_returns_to_init():
    stepper = _started()
    stepper.jump_to_end()
    stepper.rewind()
    assert stepper.current_idx == 0
    assert stepper.state == StepperState.PAUSED


def test_log_has_one_line_per_event():
    stepper = _started()
    stepper.jump_to_end()
    assert len(stepper.log) == len(stepper.events)
    assert stepper.log.lines[0] == "Visiting node 0 (distance 0)"


def test_tick_respects_delay():
    stepper = _started()
    stepper.set_delay(100)
    stepper.play()
    start = stepper._last_tick

    assert not stepper.tick(now=start + 0.05)
    assert stepper.tick(now=start + 0.2)
    assert stepper.current_idx == 1


def test_tick_does_nothing_when_paused():
    stepper = _started()
    assert not stepper.tick(now=10 ** 9)


def test_play_through_sleeps_between_events():
    slept = []
    stepper = _started()
    stepper.set_speed("fast")

    shown = stepper.play_through(sleep=slept.append)

    assert shown == len(stepper.events)
    assert stepper.is_finished
    assert slept == [SPEED_PRESETS["fast"] / 1000] * (shown - 1)


def test_reset_cancels_midway():
    frames_seen = []
    stepper = Stepper(on_step=frames_seen.append)
    stepper.start(run_shortest_path(_triangle(), 0, 1))

    def cancel_after_two(_seconds):
        if len(frames_seen) >= 3:
            stepper.reset()

    stepper.play_through(sleep=cancel_after_two)

    assert stepper.state == StepperState.IDLE
    assert stepper.current_frame is None
    assert stepper.events == []
    assert not stepper.next_step()


def test_restart_after_cancel_begins_at_init():
    g = _triangle()
    stepper = Stepper()
    stepper.start(run_shortest_path(g, 0, 1))
    stepper.goto_step(4)
    stepper.reset()

    stepper.start(run_shortest_path(g, 0, 1))
    stepper.jump_to_end()
    assert stepper.current_frame.distances == {0: 0, 1: 2, 2: 1, 3: float("inf")}


def test_pause_and_toggle():
    stepper = _started()
    stepper.toggle_play()
    assert stepper.is_playing
    stepper.toggle_play()
    assert stepper.state == StepperState.PAUSED


def test_idle_stepper_does_not_play():
    stepper = Stepper()
    stepper.play()
    assert stepper.state == StepperState.IDLE
    assert stepper.play_through(sleep=lambda s: None) == 0


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Stepper().set_delay(-1)


def test_unknown_speed_falls_back_to_medium():
    stepper = Stepper()
    stepper.set_speed("warp")
    assert stepper.delay_ms == SPEED_PRESETS["medium"]
