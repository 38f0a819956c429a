"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the animation driver: the ONLY object that introduces
time between algorithm events.  It owns a ShortestPathRun, buffers every
event it has pulled (enabling rewind), folds them into Frames and exposes
a play/pause/next/prev/speed API.

State machine:
    IDLE  →  start()  →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (Done reached) → FINISHED
    any     →  reset()  →  IDLE          (cancellation)

Frames are indexed by the number of events applied: frames[0] is the
state right after Init, frames[k] the state after the k-th event.

Cancellation: reset() just drops the run.  Its RunState belongs to the
run, not to the graph, so nothing needs undoing; the next start() gets
a fresh run with a fresh Init.

Thread safety:
  This class is NOT thread-safe.  Call it from a single thread (the
  Flask request, a timer callback, or play_through()).
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional

from algorithms.dijkstra import ShortestPathRun
from algorithms.events import AlgorithmEvent
from engine.frame import Frame, FrameBuilder
from engine.log import EventLog

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (milliseconds between events)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1000,   # teaching mode
    "medium": 400,
    "fast":   150,    # demo mode
    "turbo":  50,
}


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        events      : Every event pulled from the run so far.
        frames      : frames[k] = picture after k events (frames[0] = Init).
        current_idx : Index into `frames` that is currently displayed.
        delay_ms    : Milliseconds between auto-advance ticks.
        log         : EventLog with one narration line per pulled event.
        on_step     : Optional callback(Frame) fired every time the current
                      frame changes.  The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Frame], None]] = None):
        self._run:        Optional[ShortestPathRun] = None
        self._builder:    Optional[FrameBuilder]    = None
        self.events:      List[AlgorithmEvent] = []
        self.frames:      List[Frame]          = []
        self.current_idx: int                  = -1
        self.state:       StepperState         = StepperState.IDLE
        self.delay_ms:    float                = SPEED_PRESETS["medium"]
        self.log:         EventLog             = EventLog()
        self.on_step:     Optional[Callable[[Frame], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, run: ShortestPathRun) -> None:
        """Attach a freshly initialised run and show its Init frame."""
        self._run        = run
        self._builder    = FrameBuilder(run.graph, run.source, run.target)
        self.events      = []
        self.frames      = [self._builder.build()]
        self.log.clear()
        self.state       = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Abandon the run — back to IDLE; caller must start() again."""
        if self._run is not None and not self._run.finished:
            logger.info("run cancelled after %d events", len(self.events))
        self._run        = None
        self._builder    = None
        self.events      = []
        self.frames      = []
        self.current_idx = -1
        self.log.clear()
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one event forward.  Returns False if already at the end."""
        if self.state == StepperState.IDLE:
            return False
        target = self.current_idx + 1
        if target >= len(self.frames):
            if not self._fetch_next():
                self.state = StepperState.FINISHED
                return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one event.  Returns False if already at the Init frame."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to frame `idx`, pulling events forward if needed."""
        while idx >= len(self.frames):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.frames):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to the Init frame."""
        if self.frames:
            self._goto(0)
            if self.state == StepperState.FINISHED:
                self.state = StepperState.PAUSED

    def jump_to_end(self) -> None:
        """Exhaust the run and jump to the final frame."""
        while self._fetch_next():
            pass
        if self.frames:
            self._goto(len(self.frames) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 20 ms).  If playing and at least
        `delay_ms` has elapsed, advances one event.  Returns True if a
        step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if (now - self._last_tick) * 1000 >= self.delay_ms:
            self._last_tick = now
            return self.next_step()
        return False

    def play_through(self, sleep: Callable[[float], None] = time.sleep) -> int:
        """
        Blocking playback: advance, wait `delay_ms`, advance, … until the
        run is finished or something (usually on_step) pauses or resets
        the stepper.  Returns the number of events shown.
        """
        self.play()
        shown = 0
        while self.state == StepperState.PLAYING:
            if not self.next_step():
                break
            shown += 1
            if self.state != StepperState.PLAYING:
                break
            if self.delay_ms > 0:
                sleep(self.delay_ms / 1000)
        return shown

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.delay_ms = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_delay(self, ms: float) -> None:
        if ms < 0:
            raise ValueError(f"Delay must be non-negative, got {ms}")
        self.delay_ms = ms

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_frame(self) -> Optional[Frame]:
        if 0 <= self.current_idx < len(self.frames):
            return self.frames[self.current_idx]
        return None

    @property
    def current_event(self) -> Optional[AlgorithmEvent]:
        """The event that produced the current frame (None on the Init frame)."""
        if 1 <= self.current_idx <= len(self.events):
            return self.events[self.current_idx - 1]
        return None

    @property
    def total_events_fetched(self) -> int:
        return len(self.events)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Pull one event from the run into the buffer."""
        if self._run is None:
            return False
        try:
            event = next(self._run)
        except StopIteration:
            return False
        self.events.append(event)
        self.log.write(event)
        self.frames.append(self._builder.apply(event))
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        frame = self.frames[idx]
        if frame.is_final and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
        self._notify(frame)

    def _notify(self, frame: Optional[Frame]) -> None:
        if self.on_step and frame is not None:
            self.on_step(frame)
