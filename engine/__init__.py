"""
engine/
-------
Playback, rendering-frame & recording layer.

    from engine import Stepper, Recorder, compare
    from engine import Frame, FrameBuilder, EventLog
"""

from engine.log      import EventLog, describe, fmt_distance
from engine.frame    import Frame, FrameBuilder
from engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "EventLog",
    "describe",
    "fmt_distance",
    "Frame",
    "FrameBuilder",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
