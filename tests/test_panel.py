import math

import pytest

from mintysynth.panel import FrontPanel, PanelState, TestTone


def _buttons(*down):
    states = [False] * 19
    for index in down:
        states[index] = True
    return states


def test_default_state_values():
    state = PanelState()
    assert (state.tempo, state.pitch, state.length, state.envelope, state.swing) == (
        120, 60, 50, 2, 0)
    assert state.step_notes[0] == 60
    assert state.step_notes[1:] == [0] * 15
    assert state.step_active == [False] * 16


def test_encoder_changes_clamp_to_limits():
    panel = FrontPanel()
    panel.apply_encoder_changes([1000, 1000, 1000, 1000, 1000])
    s = panel.state
    assert (s.tempo, s.pitch, s.length, s.envelope, s.swing) == (200, 96, 100, 4, 50)
    panel.apply_encoder_changes([-1000, -1000, -1000, -1000, -1000])
    assert (s.tempo, s.pitch, s.length, s.envelope, s.swing) == (60, 24, 10, 0, 0)


def test_encoder_small_changes_add():
    panel = FrontPanel()
    panel.apply_encoder_changes([5, -2, 3, 1, 7])
    s = panel.state
    assert (s.tempo, s.pitch, s.length, s.envelope, s.swing) == (125, 58, 53, 3, 7)


def test_pitch_change_stored_in_current_step():
    panel = FrontPanel()
    panel.scan_buttons(_buttons(5))
    panel.apply_encoder_changes([0, 4, 0, 0, 0])
    assert panel.state.step_notes[5] == panel.state.pitch == 64


def test_zero_pitch_change_leaves_step_notes():
    panel = FrontPanel()
    panel.scan_buttons(_buttons(3))
    panel.apply_encoder_changes([1, 0, 0, 0, 0])
    assert panel.state.step_notes[3] == 0


def test_encoder_changes_wrong_length():
    with pytest.raises(ValueError):
        FrontPanel().apply_encoder_changes([1, 2, 3])


def test_step_button_toggles_only_on_new_press():
    panel = FrontPanel()
    assert panel.scan_buttons(_buttons(3)) == [3]
    assert panel.state.step_active[3] is True
    assert panel.state.current_step == 3
    assert panel.scan_buttons(_buttons(3)) == []
    assert panel.state.step_active[3] is True
    panel.scan_buttons(_buttons())
    panel.scan_buttons(_buttons(3))
    assert panel.state.step_active[3] is False


def test_voice_select_cycles_through_four_voices():
    panel = FrontPanel()
    seen = []
    for _ in range(4):
        panel.scan_buttons(_buttons(17))
        seen.append(panel.state.current_voice)
        panel.scan_buttons(_buttons())
    assert seen == [1, 2, 3, 0]


def test_clear_button_clears_current_step():
    panel = FrontPanel()
    panel.scan_buttons(_buttons(7))
    panel.scan_buttons(_buttons())
    panel.scan_buttons(_buttons(18))
    assert panel.state.step_active[7] is False
    assert panel.state.current_step == 7


def test_play_button_changes_nothing():
    panel = FrontPanel()
    before = PanelState()
    assert panel.scan_buttons(_buttons(16)) == [16]
    assert panel.state == before


def test_scan_buttons_wrong_length():
    with pytest.raises(ValueError):
        FrontPanel().scan_buttons([False] * 16)


def test_display_lines_defaults():
    lines = FrontPanel().display_lines()
    assert lines[:5] == ["TEMPO: 120", "PITCH: 60", "LENGTH: 50", "ENVELOPE: 2", "SWING: 0"]
    assert lines[-2:] == ["Voice: 1", "Step: 1"]


def test_display_step_grid_follows_state():
    panel = FrontPanel()
    panel.scan_buttons(_buttons(0, 2))
    line = panel.display_lines()[5]
    assert line.startswith("STEPS: ")
    grid = line[len("STEPS: "):]
    assert grid.count("#") == 2
    assert grid.count("[") == 1
    assert panel.display_lines()[-1] == "Step: 3"


def test_tone_buffer_shape_and_range():
    tone = TestTone()
    buffer = tone.fill(69)
    assert len(buffer) == 64
    assert buffer[0] == 0
    assert buffer[0::2] == buffer[1::2]
    assert all(-8000 <= v <= 8000 for v in buffer)


def test_tone_phase_continues_and_wraps():
    tone = TestTone()
    tone.fill(60)
    first_phase = tone.phase
    assert 0.0 < first_phase <= 2 * math.pi
    second = tone.fill(60)
    assert second[0] == int(math.sin(first_phase) * 8000)
    for _ in range(200):
        tone.fill(96)
        assert 0.0 <= tone.phase <= 2 * math.pi + 1e-9


def test_tone_higher_pitch_advances_faster():
    low, high = TestTone(), TestTone()
    low.fill(40)
    high.fill(52)
    assert high.phase > low.phase