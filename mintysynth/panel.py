"""Front-panel controls of the expansion board: encoders, step buttons and display.

Five rotary encoders set tempo, pitch, note length, envelope and swing.
A 4x4 matrix of step buttons toggles the sixteen steps. Three direct
buttons give play/stop, voice select and clear. The display shows the
current settings and the step grid.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .engine import midi_to_frequency

__all__ = ["PanelState", "FrontPanel", "TestTone"]

NUM_ENCODERS = 5
NUM_STEPS = 16
NUM_DIRECT_BUTTONS = 3
NUM_BUTTONS = NUM_STEPS + NUM_DIRECT_BUTTONS
NUM_VOICES = 4

BUTTON_PLAY_STOP = NUM_STEPS
BUTTON_VOICE_SELECT = NUM_STEPS + 1
BUTTON_CLEAR = NUM_STEPS + 2

TONE_SAMPLE_RATE = 44100.0
TONE_BUFFER_LENGTH = 64
TONE_AMPLITUDE = 8000

_TWO_PI = 2.0 * math.pi


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _initial_step_notes() -> list[int]:
    return [60] + [0] * (NUM_STEPS - 1)


@dataclass
class PanelState:
    """Settings the front panel edits."""

    tempo: int = 120
    pitch: int = 60
    length: int = 50
    envelope: int = 2
    swing: int = 0
    current_step: int = 0
    current_voice: int = 0
    step_active: list[bool] = field(default_factory=lambda: [False] * NUM_STEPS)
    step_notes: list[int] = field(default_factory=_initial_step_notes)


class FrontPanel:
    """Turns encoder movements and button presses into panel state changes."""

    def __init__(self, state: PanelState | None = None) -> None:
        self.state = state if state is not None else PanelState()
        self._last_pressed = [False] * NUM_BUTTONS

    def apply_encoder_changes(self, changes: Sequence[int]) -> None:
        """Apply the counts turned on the five encoders since the last read.

        The order is tempo, pitch, length, envelope, swing. A pitch change
        also stores the new pitch in the current step.
        """
        if len(changes) != NUM_ENCODERS:
            raise ValueError(
                f"expected {NUM_ENCODERS} encoder changes, got {len(changes)}")
        tempo, pitch, length, envelope, swing = changes
        state = self.state
        if tempo:
            state.tempo = _clamp(state.tempo + tempo, 60, 200)
        if pitch:
            state.pitch = _clamp(state.pitch + pitch, 24, 96)
            state.step_notes[state.current_step] = state.pitch
        if length:
            state.length = _clamp(state.length + length, 10, 100)
        if envelope:
            state.envelope = _clamp(state.envelope + envelope, 0, 4)
        if swing:
            state.swing = _clamp(state.swing + swing, 0, 50)

    def scan_buttons(self, pressed: Sequence[bool]) -> list[int]:
        """Act on one scan of the nineteen buttons and return those newly pressed.

        Indices 0-15 are the step buttons (row * 4 + column), 16 is
        play/stop, 17 voice select and 18 clear. Only a button that was up
        on the previous scan and is down now counts as pressed.
        """
        if len(pressed) != NUM_BUTTONS:
            raise ValueError(f"expected {NUM_BUTTONS} button states, got {len(pressed)}")
        now = [bool(p) for p in pressed]
        fresh = [i for i, (down, was) in enumerate(zip(now, self._last_pressed))
                 if down and not was]
        self._last_pressed = now
        state = self.state
        for button in fresh:
            if button < NUM_STEPS:
                state.current_step = button
                state.step_active[button] = not state.step_active[button]
            elif button == BUTTON_VOICE_SELECT:
                state.current_voice = (state.current_voice + 1) % NUM_VOICES
            elif button == BUTTON_CLEAR:
                state.step_active[state.current_step] = False
            # Play/stop has no action on this panel.
        return fresh

    def display_lines(self) -> list[str]:
        """Return the text the display shows, top to bottom.

        The step grid shows ``#`` for an active step and ``.`` for an
        inactive one, with the current step in brackets.
        """
        state = self.state
        cells = []
        for index, active in enumerate(state.step_active):
            mark = "#" if active else "."
            cells.append(f"[{mark}]" if index == state.current_step else mark)
        return [
            f"TEMPO: {state.tempo}",
            f"PITCH: {state.pitch}",
            f"LENGTH: {state.length}",
            f"ENVELOPE: {state.envelope}",
            f"SWING: {state.swing}",
            "STEPS: " + "".join(cells),
            f"Voice: {state.current_voice + 1}",
            f"Step: {state.current_step + 1}",
        ]


class TestTone:
    """Sine test tone rendered as interleaved stereo 16-bit samples."""

    __test__ = False

    def __init__(self) -> None:
        self.phase = 0.0

    def fill(self, pitch: int) -> list[int]:
        """Render one buffer of the tone at MIDI note ``pitch``.

        The buffer holds 64 values: 32 left/right pairs at 44.1 kHz. The
        phase carries over from one buffer to the next.
        """
        step = _TWO_PI * midi_to_frequency(pitch) / TONE_SAMPLE_RATE
        buffer: list[int] = []
        for _ in range(TONE_BUFFER_LENGTH // 2):
            value = int(math.sin(self.phase) * TONE_AMPLITUDE)
            buffer.extend((value, value))
            self.phase += step
            if self.phase > _TWO_PI:
                self.phase -= _TWO_PI
        return buffer