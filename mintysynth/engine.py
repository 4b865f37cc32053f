"""Floating-point synthesis engine with a four-voice, sixteen-step sequencer.

Voices are rendered at 44.1 kHz into interleaved stereo 16-bit samples. The
sequencer advances one sixteenth note at a time against a millisecond clock.
"""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "WaveformType",
    "EnvelopeType",
    "VoiceParam",
    "GlobalParam",
    "VoiceParams",
    "SequencerStep",
    "SynthParams",
    "MintySynth",
    "midi_to_frequency",
    "waveform_sample",
    "envelope_sample",
]

SAMPLE_RATE = 44100
AUDIO_BUFFER_SIZE = 128
NUM_VOICES = 4
NUM_STEPS = 16
NUM_WAVEFORMS = 15

_TWO_PI = 2.0 * math.pi
_FULL_SCALE = 32767


class WaveformType(IntEnum):
    """Waveform numbers shared with the wavetable synthesizer."""

    SINE = 0
    RAMP = 1
    TRIANGLE = 2
    SQUARE = 3
    NOISE = 4
    SAW = 5
    A = 6
    B = 7
    C = 8
    D = 9
    E = 10
    F = 11
    G = 12
    H = 13
    I = 14  # noqa: E741


class EnvelopeType(IntEnum):
    """Amplitude envelope shapes."""

    ATTACK = 0
    DECAY = 1
    PLUCK = 2
    LONG = 3
    REVERSE = 4


class VoiceParam(IntEnum):
    """Per-voice parameters for :meth:`MintySynth.set_voice_param`."""

    WAVEFORM = 0
    PITCH = 1
    ENVELOPE = 2
    LENGTH = 3
    MODULATION = 4
    VOLUME = 5


class GlobalParam(IntEnum):
    """Global parameters for :meth:`MintySynth.set_global_param`."""

    TEMPO = 0
    SWING = 1
    SCALE = 2
    TRANSPOSE = 3
    VOLUME = 4


@dataclass
class VoiceParams:
    """Settings of one voice."""

    waveform: int = WaveformType.SINE
    pitch: int = 60
    envelope: int = EnvelopeType.PLUCK
    length: int = 50
    modulation: int = 64
    volume: int = 100
    active: bool = False


@dataclass
class SequencerStep:
    """One step of one voice's sequence."""

    note: int = 60
    active: bool = False
    velocity: int = 127
    length: int = 50


@dataclass
class SynthParams:
    """Global synthesis settings."""

    tempo: int = 120
    swing: int = 0
    scale: int = 0
    transpose: int = 0
    master_volume: int = 100


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def midi_to_frequency(note: float) -> float:
    """Return the equal-tempered frequency in hertz of a MIDI note (69 is A 440)."""
    return 440.0 * 2.0 ** ((note - 69) / 12.0)


def waveform_sample(waveform: int, phase: float, rng: random.Random | None = None) -> float:
    """Return the value (-1..1) of a waveform at a phase in radians (0..2*pi).

    Only sine, square, saw, triangle and noise are computed; every other
    waveform falls back to a sine. ``rng`` supplies the noise values.
    """
    if waveform == WaveformType.SQUARE:
        return 1.0 if phase < math.pi else -1.0
    if waveform == WaveformType.SAW:
        return (2.0 * phase / _TWO_PI) - 1.0
    if waveform == WaveformType.TRIANGLE:
        if phase < math.pi:
            return (2.0 * phase / math.pi) - 1.0
        return 3.0 - (2.0 * phase / math.pi)
    if waveform == WaveformType.NOISE:
        source = rng if rng is not None else random
        return source.randrange(-_FULL_SCALE, _FULL_SCALE) / float(_FULL_SCALE)
    return math.sin(phase)


def envelope_sample(envelope: int, phase: int) -> float:
    """Return the envelope gain after ``phase`` samples of a note."""
    t = phase / 1000.0
    if envelope == EnvelopeType.ATTACK:
        return t if t < 1.0 else 1.0
    if envelope in (EnvelopeType.DECAY, EnvelopeType.REVERSE):
        return (1.0 - t) if t < 1.0 else 0.0
    if envelope == EnvelopeType.PLUCK:
        return math.exp(-t * 3.0)
    if envelope == EnvelopeType.LONG:
        return 1.0 if t < 2.0 else math.exp(-(t - 2.0))
    return math.exp(-t * 2.0)


_VOICE_LIMITS = {
    VoiceParam.WAVEFORM: ("waveform", NUM_WAVEFORMS - 1),
    VoiceParam.PITCH: ("pitch", 127),
    VoiceParam.ENVELOPE: ("envelope", 4),
    VoiceParam.LENGTH: ("length", 127),
    VoiceParam.MODULATION: ("modulation", 127),
    VoiceParam.VOLUME: ("volume", 127),
}


class MintySynth:
    """Four-voice synthesizer driven by a sixteen-step sequencer."""

    def __init__(self, clock: Callable[[], int] | None = None,
                 rng: random.Random | None = None) -> None:
        self._clock = clock if clock is not None else _monotonic_ms
        self._rng = rng if rng is not None else random.Random()
        self.voices = [VoiceParams() for _ in range(NUM_VOICES)]
        self.sequence = [[SequencerStep() for _ in range(NUM_STEPS)]
                         for _ in range(NUM_VOICES)]
        self.globals = SynthParams()
        self.playing = False
        self.current_step = 0
        self.last_step_time = 0
        self.step_duration = 0
        self.voice_phase = [0.0] * NUM_VOICES
        self.voice_freq = [440.0] * NUM_VOICES
        self.voice_env_phase = [0] * NUM_VOICES
        self.voice_active = [False] * NUM_VOICES
        self._calculate_step_duration()

    def begin(self) -> None:
        """Prepare the engine: tune every voice to its pitch."""
        self._update_voice_frequencies()

    # ------------------------------------------------------------------
    # Voices
    # ------------------------------------------------------------------

    def set_voice_param(self, voice: int, param: int, value: int) -> None:
        """Set a voice parameter, clamped to its range; unknown params are ignored."""
        self._check_voice(voice)
        if param in _VOICE_LIMITS:
            name, high = _VOICE_LIMITS[VoiceParam(param)]
            setattr(self.voices[voice], name, int(_clamp(value, 0, high)))
        self._update_voice_frequencies()

    def get_voice_param(self, voice: int, param: int) -> int:
        """Return a voice parameter; unknown params read as 0."""
        self._check_voice(voice)
        if param not in _VOICE_LIMITS:
            return 0
        name, _ = _VOICE_LIMITS[VoiceParam(param)]
        return getattr(self.voices[voice], name)

    def trigger_voice(self, voice: int, note: int, velocity: int = 127) -> None:
        """Start a note on a voice from the top of its envelope."""
        self._check_voice(voice)
        self.voices[voice].pitch = note
        self.voice_active[voice] = True
        self.voice_env_phase[voice] = 0
        self.voice_phase[voice] = 0.0
        self.voice_freq[voice] = midi_to_frequency(note)

    def release_voice(self, voice: int) -> None:
        """Silence a voice."""
        self._check_voice(voice)
        self.voice_active[voice] = False

    # ------------------------------------------------------------------
    # Sequencer
    # ------------------------------------------------------------------

    def set_step(self, voice: int, step: int, note: int, active: bool = True) -> None:
        """Store a note in a step and switch the step on or off."""
        cell = self._step(voice, step)
        cell.note = note
        cell.active = active

    def clear_step(self, voice: int, step: int) -> None:
        """Switch a step off, keeping its note."""
        self._step(voice, step).active = False

    def is_step_active(self, voice: int, step: int) -> bool:
        """Return whether a step is switched on."""
        return self._step(voice, step).active

    def set_tempo(self, bpm: int) -> None:
        """Set the tempo, clamped to 60-200 BPM."""
        self.globals.tempo = int(_clamp(bpm, 60, 200))
        self._calculate_step_duration()

    def start(self) -> None:
        """Start the sequencer from the first step."""
        self.playing = True
        self.current_step = 0
        self.last_step_time = self._clock()

    def stop(self) -> None:
        """Stop the sequencer and silence every voice."""
        self.playing = False
        self.voice_active = [False] * NUM_VOICES

    def is_playing(self) -> bool:
        """Return whether the sequencer is running."""
        return self.playing

    def update_sequencer(self) -> None:
        """Advance one step when a step's time has passed, triggering its notes."""
        if not self.playing:
            return
        now = self._clock()
        if now - self.last_step_time < self.step_duration:
            return
        self.current_step = (self.current_step + 1) % NUM_STEPS
        self.last_step_time = now
        for voice, row in enumerate(self.sequence):
            cell = row[self.current_step]
            if cell.active:
                note = (cell.note + self.globals.transpose) & 0xFF
                self.trigger_voice(voice, note, cell.velocity)

    # ------------------------------------------------------------------
    # Global parameters
    # ------------------------------------------------------------------

    def set_global_param(self, param: int, value: int) -> None:
        """Set a global parameter, clamped to its range; unknown params are ignored.

        Transpose takes a 16-bit value read as signed, so 0xFFFF means -1.
        """
        if param == GlobalParam.TEMPO:
            self.set_tempo(value)
        elif param == GlobalParam.SWING:
            self.globals.swing = int(_clamp(value, 0, 127))
            self._calculate_step_duration()
        elif param == GlobalParam.SCALE:
            self.globals.scale = int(_clamp(value, 0, 8))
        elif param == GlobalParam.TRANSPOSE:
            signed = value & 0xFFFF
            if signed >= 0x8000:
                signed -= 0x10000
            self.globals.transpose = int(_clamp(signed, -12, 12))
            self._update_voice_frequencies()
        elif param == GlobalParam.VOLUME:
            self.globals.master_volume = int(_clamp(value, 0, 127))

    def get_global_param(self, param: int) -> int:
        """Return a global parameter; transpose reads offset by 12 (0-24)."""
        if param == GlobalParam.TEMPO:
            return self.globals.tempo
        if param == GlobalParam.SWING:
            return self.globals.swing
        if param == GlobalParam.SCALE:
            return self.globals.scale
        if param == GlobalParam.TRANSPOSE:
            return self.globals.transpose + 12
        if param == GlobalParam.VOLUME:
            return self.globals.master_volume
        return 0

    # ------------------------------------------------------------------
    # Audio
    # ------------------------------------------------------------------

    def process_audio(self, length: int = AUDIO_BUFFER_SIZE) -> list[int]:
        """Render ``length`` interleaved stereo 16-bit samples (left, right, ...)."""
        if length < 0 or length % 2:
            raise ValueError(f"length must be a non-negative even number, got {length}")
        master = self.globals.master_volume / 127.0
        buffer: list[int] = []
        for _ in range(length // 2):
            mix = 0.0
            for voice, params in enumerate(self.voices):
                if not self.voice_active[voice]:
                    continue
                value = waveform_sample(params.waveform, self.voice_phase[voice], self._rng)
                value *= envelope_sample(params.envelope, self.voice_env_phase[voice])
                value *= params.volume / 127.0
                mix += value

                self.voice_phase[voice] += (self.voice_freq[voice] * _TWO_PI) / SAMPLE_RATE
                if self.voice_phase[voice] > _TWO_PI:
                    self.voice_phase[voice] -= _TWO_PI

                self.voice_env_phase[voice] = (self.voice_env_phase[voice] + 1) & 0xFFFF
                env_length = (params.length * SAMPLE_RATE) // 1000
                if self.voice_env_phase[voice] > env_length:
                    self.voice_active[voice] = False
            out = int(_clamp(mix * master * 16000, -_FULL_SCALE, _FULL_SCALE))
            buffer.extend((out, out))
        return buffer

    # ------------------------------------------------------------------

    def _calculate_step_duration(self) -> None:
        self.step_duration = (60000 // self.globals.tempo) // 4

    def _update_voice_frequencies(self) -> None:
        self.voice_freq = [midi_to_frequency(v.pitch + self.globals.transpose)
                           for v in self.voices]

    def _step(self, voice: int, step: int) -> SequencerStep:
        self._check_voice(voice)
        if not 0 <= step < NUM_STEPS:
            raise IndexError(f"step must be in 0..{NUM_STEPS - 1}, got {step}")
        return self.sequence[voice][step]

    @staticmethod
    def _check_voice(voice: int) -> None:
        if not 0 <= voice < NUM_VOICES:
            raise IndexError(f"voice must be in 0..{NUM_VOICES - 1}, got {voice}")