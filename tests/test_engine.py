import math
import random

import pytest

from mintysynth.engine import (
    EnvelopeType,
    GlobalParam,
    MintySynth,
    VoiceParam,
    WaveformType,
    envelope_sample,
    midi_to_frequency,
    waveform_sample,
)


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def synth(clock):
    s = MintySynth(clock=clock, rng=random.Random(1))
    s.begin()
    return s


def test_midi_to_frequency_reference_and_octave():
    assert midi_to_frequency(69) == pytest.approx(440.0)
    for note in (20, 60, 100):
        assert midi_to_frequency(note + 12) == pytest.approx(2 * midi_to_frequency(note))


def test_voice_params_are_clamped(synth):
    synth.set_voice_param(0, VoiceParam.WAVEFORM, 200)
    assert synth.get_voice_param(0, VoiceParam.WAVEFORM) == 14
    synth.set_voice_param(1, VoiceParam.PITCH, 250)
    assert synth.get_voice_param(1, VoiceParam.PITCH) == 127
    synth.set_voice_param(2, VoiceParam.ENVELOPE, 9)
    assert synth.get_voice_param(2, VoiceParam.ENVELOPE) == 4
    synth.set_voice_param(3, VoiceParam.VOLUME, 55)
    assert synth.get_voice_param(3, VoiceParam.VOLUME) == 55


def test_unknown_voice_param_reads_zero(synth):
    synth.set_voice_param(0, 42, 10)
    assert synth.get_voice_param(0, 42) == 0


def test_voice_out_of_range_raises(synth):
    with pytest.raises(IndexError):
        synth.set_voice_param(4, VoiceParam.PITCH, 60)
    with pytest.raises(IndexError):
        synth.trigger_voice(-1, 60)
    with pytest.raises(IndexError):
        synth.set_step(0, 16, 60)


def test_pitch_change_retunes_voice(synth):
    synth.set_voice_param(0, VoiceParam.PITCH, 69)
    assert synth.voice_freq[0] == pytest.approx(440.0)


def test_tempo_is_clamped(synth):
    synth.set_tempo(30)
    assert synth.get_global_param(GlobalParam.TEMPO) == 60
    synth.set_global_param(GlobalParam.TEMPO, 500)
    assert synth.get_global_param(GlobalParam.TEMPO) == 200


def test_faster_tempo_shortens_steps(synth):
    synth.set_tempo(60)
    slow = synth.step_duration
    synth.set_tempo(200)
    assert synth.step_duration < slow


def test_transpose_reads_offset_and_handles_signed_values(synth):
    synth.set_global_param(GlobalParam.TRANSPOSE, 0)
    assert synth.get_global_param(GlobalParam.TRANSPOSE) == 12
    synth.set_global_param(GlobalParam.TRANSPOSE, 0xFFFF)
    assert synth.globals.transpose == -1
    synth.set_global_param(GlobalParam.TRANSPOSE, 100)
    assert synth.globals.transpose == 12


def test_transpose_retunes_voices(synth):
    before = synth.voice_freq[0]
    synth.set_global_param(GlobalParam.TRANSPOSE, 12)
    assert synth.voice_freq[0] == pytest.approx(2 * before)


def test_other_globals_are_clamped(synth):
    synth.set_global_param(GlobalParam.SCALE, 20)
    assert synth.get_global_param(GlobalParam.SCALE) == 8
    synth.set_global_param(GlobalParam.SWING, 300)
    assert synth.get_global_param(GlobalParam.SWING) == 127
    synth.set_global_param(GlobalParam.VOLUME, 300)
    assert synth.get_global_param(GlobalParam.VOLUME) == 127
    assert synth.get_global_param(99) == 0


def test_steps_set_and_clear(synth):
    synth.set_step(1, 5, 72)
    assert synth.is_step_active(1, 5)
    assert synth.sequence[1][5].note == 72
    synth.clear_step(1, 5)
    assert not synth.is_step_active(1, 5)
    assert synth.sequence[1][5].note == 72


def test_start_stop(synth):
    assert not synth.is_playing()
    synth.start()
    assert synth.is_playing()
    synth.trigger_voice(0, 60)
    synth.stop()
    assert not synth.is_playing()
    assert synth.process_audio(8) == [0] * 8


def test_sequencer_waits_for_step_duration(synth, clock):
    synth.set_step(0, 1, 72)
    synth.start()
    clock.now += synth.step_duration - 1
    synth.update_sequencer()
    assert synth.current_step == 0
    assert not synth.voice_active[0]
    clock.now += 1
    synth.update_sequencer()
    assert synth.current_step == 1
    assert synth.voice_active[0]
    assert synth.get_voice_param(0, VoiceParam.PITCH) == 72


def test_sequencer_applies_transpose(synth, clock):
    synth.set_step(2, 1, 60)
    synth.set_global_param(GlobalParam.TRANSPOSE, 2)
    synth.start()
    clock.now += synth.step_duration
    synth.update_sequencer()
    assert synth.get_voice_param(2, VoiceParam.PITCH) == 62


def test_sequencer_idle_when_stopped(synth, clock):
    synth.set_step(0, 1, 72)
    clock.now += 10_000
    synth.update_sequencer()
    assert synth.current_step == 0
    assert not synth.voice_active[0]


def test_sequencer_wraps_after_sixteen_steps(synth, clock):
    synth.start()
    for _ in range(16):
        clock.now += synth.step_duration
        synth.update_sequencer()
    assert synth.current_step == 0


def test_process_audio_silent_without_voices(synth):
    assert synth.process_audio(16) == [0] * 16


def test_process_audio_rejects_odd_length(synth):
    with pytest.raises(ValueError):
        synth.process_audio(5)


def test_triggered_voice_is_stereo_and_bounded(synth):
    synth.trigger_voice(0, 69)
    out = synth.process_audio(256)
    assert len(out) == 256
    assert out[0::2] == out[1::2]
    assert any(out)
    assert all(-32767 <= s <= 32767 for s in out)


def test_zero_length_voice_stops_after_first_frame(synth):
    synth.set_voice_param(0, VoiceParam.WAVEFORM, WaveformType.SQUARE)
    synth.set_voice_param(0, VoiceParam.LENGTH, 0)
    synth.trigger_voice(0, 60)
    out = synth.process_audio(8)
    assert out[0] > 0
    assert out[2:] == [0] * 6
    assert not synth.voice_active[0]


def test_release_voice_silences(synth):
    synth.trigger_voice(1, 60)
    synth.release_voice(1)
    assert synth.process_audio(4) == [0] * 4


def test_waveform_samples():
    assert waveform_sample(WaveformType.SQUARE, 0.0) == 1.0
    assert waveform_sample(WaveformType.SQUARE, math.pi + 0.1) == -1.0
    assert waveform_sample(WaveformType.SAW, 0.0) == -1.0
    assert waveform_sample(WaveformType.TRIANGLE, 0.0) == -1.0
    assert waveform_sample(WaveformType.TRIANGLE, math.pi) == pytest.approx(1.0)
    assert waveform_sample(WaveformType.SINE, math.pi / 2) == pytest.approx(1.0)
    assert waveform_sample(WaveformType.B, 1.0) == pytest.approx(math.sin(1.0))


def test_noise_is_bounded_and_seeded():
    a = [waveform_sample(WaveformType.NOISE, 0.0, random.Random(7)) for _ in range(3)]
    b = [waveform_sample(WaveformType.NOISE, 0.0, random.Random(7)) for _ in range(3)]
    assert a == b
    rng = random.Random(3)
    assert all(-1.0 <= waveform_sample(WaveformType.NOISE, 0.0, rng) < 1.0
               for _ in range(200))


def test_envelope_samples():
    assert envelope_sample(EnvelopeType.ATTACK, 0) == 0.0
    assert envelope_sample(EnvelopeType.ATTACK, 5000) == 1.0
    assert envelope_sample(EnvelopeType.DECAY, 500) == pytest.approx(0.5)
    assert envelope_sample(EnvelopeType.REVERSE, 2000) == 0.0
    assert envelope_sample(EnvelopeType.PLUCK, 0) == 1.0
    assert envelope_sample(EnvelopeType.LONG, 1500) == 1.0
    assert envelope_sample(EnvelopeType.LONG, 3000) < 1.0


def test_pluck_decays_monotonically():
    values = [envelope_sample(EnvelopeType.PLUCK, p) for p in range(0, 5000, 250)]
    assert values == sorted(values, reverse=True)