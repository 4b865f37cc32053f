"""Four-voice wavetable synthesizer with envelope and pitch modulation engines.

Every call to :meth:`WaveSynth.sample` does the work of one audio interrupt
at the 20 kHz sample rate. It advances the phase accumulators of all four
voices and mixes them into one unsigned 8-bit output value. It also runs the
envelope and modulation engines for one voice, taking the voices in turn,
so each voice's envelope moves every fourth sample.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .tuning import envelope_table, envelope_word, pitch_word
from .wavetables import Waveform, wavetable

__all__ = ["OutputMode", "MidiMessage", "WaveSynth"]

FS = 20000.0
VOICES = 4
PERCUSSION_CHANNEL = 10
_MIDPOINT = 127


class OutputMode(IntEnum):
    """Where the PWM audio signal is sent."""

    DIFF = 1
    CHA = 2
    CHB = 3


@dataclass(frozen=True)
class MidiMessage:
    """A MIDI message sent alongside a triggered note.

    ``kind`` is ``"note_on"``, ``"note_off"`` or ``"program_change"``.
    For a program change ``data1`` is the program and ``data2`` is 0.
    """

    kind: str
    channel: int
    data1: int
    data2: int = 0


def _lookup(table: tuple[int, ...], index: int) -> int:
    return table[index] if index < len(table) else 0


def _arduino_map(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    numerator = (x - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    quotient = numerator // denominator if numerator >= 0 else -((-numerator) // denominator)
    return quotient + out_min


class WaveSynth:
    """Wavetable synthesizer with four voices and MIDI note output."""

    def __init__(self) -> None:
        self.phase = [0] * VOICES
        self.increment = [1000, 200, 300, 400]
        self.amplitude = [255] * VOICES
        self.pitch = [500] * VOICES
        self.mod = [20, 0, 64, 127]
        self.waves = [wavetable(Waveform.SINE)] * VOICES
        self.envelopes = [envelope_table(0)] * VOICES
        self.envelope_phase = [0x8000] * VOICES
        self.envelope_increment = [10] * VOICES
        self.volume = [8] * VOICES
        self.midi_on = [False] * VOICES
        self.midi_note_playing = [0] * VOICES
        self.midi_channel = [1] * VOICES
        self.midi_instrument = [1] * VOICES
        self.midi_messages: list[MidiMessage] = []
        self.output_mode: OutputMode | None = None
        self.output = _MIDPOINT
        self.ticks = 0
        self._divider = 4
        self._tik = False
        self._running = False

    # ------------------------------------------------------------------
    # Start, stop and timing
    # ------------------------------------------------------------------

    def begin(self, mode: int = OutputMode.CHA) -> None:
        """Start producing audio in the given output mode.

        Any mode other than DIFF or CHB selects CHA.
        """
        try:
            chosen = OutputMode(mode)
        except ValueError:
            chosen = OutputMode.CHA
        self.output_mode = chosen
        self.output = _MIDPOINT
        self._running = True

    def suspend(self) -> None:
        """Stop the audio clock; samples can no longer be produced."""
        self._running = False

    def resume(self) -> None:
        """Restart the audio clock after :meth:`suspend`."""
        self._running = True

    def synth_tick(self) -> bool:
        """Return True once for every four samples produced."""
        if self._tik:
            self._tik = False
            return True
        return False

    def voice_free(self, voice: int) -> bool:
        """Return True when the voice's envelope has run to its end."""
        self._check_voice(voice)
        return self._is_free(voice)

    # ------------------------------------------------------------------
    # Voice set-up
    # ------------------------------------------------------------------

    def setup_voice(self, voice: int, wave: int, pitch: int, envelope: int,
                    length: int, mod: int) -> None:
        """Set wave, pitch (MIDI note), envelope, length and modulation at once."""
        self.set_wave(voice, wave)
        self.set_pitch(voice, pitch)
        self.set_envelope(voice, envelope)
        self.set_length(voice, length)
        self.set_mod(voice, mod)

    def set_wave(self, voice: int, wave: int) -> None:
        """Select the voice's wave shape; unknown numbers select wave I."""
        self._check_voice(voice)
        self.waves[voice] = wavetable(wave)

    def set_pitch(self, voice: int, note: int) -> None:
        """Tune the voice to MIDI note 0-127."""
        self._check_voice(voice)
        self.pitch[voice] = pitch_word(note)

    def set_envelope(self, voice: int, envelope: int) -> None:
        """Select envelope 0-4; other numbers select envelope 0."""
        self._check_voice(voice)
        self.envelopes[voice] = envelope_table(envelope)

    def set_length(self, voice: int, length: int) -> None:
        """Set the note length, 0 (shortest) to 127 (longest)."""
        self._check_voice(voice)
        self.envelope_increment[voice] = envelope_word(length)

    def set_mod(self, voice: int, mod: int) -> None:
        """Set pitch modulation: 64 is none, below bends down, above bends up."""
        self._check_voice(voice)
        self.mod[voice] = (mod & 0xFF) - 64

    def set_frequency(self, voice: int, frequency: float) -> None:
        """Tune the voice directly to a frequency in hertz."""
        self._check_voice(voice)
        self.pitch[voice] = int(frequency / (FS / 65535.0)) & 0xFFFF

    def set_time(self, voice: int, seconds: float) -> None:
        """Set the note length directly in seconds."""
        self._check_voice(voice)
        if seconds <= 0:
            raise ValueError(f"note time must be positive, got {seconds}")
        word = (1.0 / seconds) / (FS / (32767.5 * 10.0))
        self.envelope_increment[voice] = int(word) & 0xFFFF

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def trigger(self, voice: int) -> None:
        """Start the voice's envelope at its current pitch."""
        self._check_voice(voice)
        self.envelope_phase[voice] = 0
        self.increment[voice] = self.pitch[voice]

    def m_trigger(self, voice: int, note: int) -> None:
        """Play MIDI note ``note`` on the voice and send it as MIDI too."""
        self._check_voice(voice)
        self.pitch[voice] = pitch_word(note)
        self.envelope_phase[voice] = 0
        # The tuning word refreshed here is that of the voice whose turn it
        # is in the modulation engine, not necessarily the triggered voice.
        target = self._divider & 3
        self.increment[target] = (self.pitch[voice] + self._modulation(voice)) & 0xFFFF

        channel = self.midi_channel[voice]
        if self.midi_on[voice]:
            self.midi_messages.append(
                MidiMessage("note_off", channel, self.midi_note_playing[voice], 0))
        self.midi_messages.append(
            MidiMessage("program_change", channel, self.midi_instrument[voice]))
        level = self.volume[voice]
        velocity = (155 - level * (level - 4)) & 0xFF
        if channel != PERCUSSION_CHANNEL:
            sent = note
        else:
            sent = min(max(_arduino_map(note, 20, 105, 25, 88), 25), 87)
        self.midi_messages.append(MidiMessage("note_on", channel, sent, velocity))
        self.midi_note_playing[voice] = note
        self.midi_on[voice] = True

    # ------------------------------------------------------------------
    # Audio
    # ------------------------------------------------------------------

    def sample(self) -> int:
        """Produce the next 8-bit output sample (0-255, 127 is silence)."""
        if not self._running:
            raise RuntimeError("synth is not running")

        self._divider = (self._divider + 1) & 3
        turn = self._divider
        if turn == 0:
            self._tik = True

        if not self._is_free(turn):
            self.envelope_phase[turn] = (
                self.envelope_phase[turn] + self.envelope_increment[turn]) & 0xFFFF
            self.amplitude[turn] = _lookup(self.envelopes[turn], self.envelope_phase[turn] >> 8)
        else:
            self.amplitude[turn] = 0

        mix = 0
        for voice in range(VOICES):
            self.phase[voice] = (self.phase[voice] + self.increment[voice]) & 0xFFFF
            value = _lookup(self.waves[voice], self.phase[voice] >> 8)
            mix += (value * self.amplitude[voice]) >> self.volume[voice]
        self.output = (_MIDPOINT + (mix >> 2)) & 0xFF

        self.increment[turn] = (self.pitch[turn] + self._modulation(turn)) & 0xFFFF
        self.ticks = (self.ticks + 1) & 0xFFFF
        return self.output

    def render(self, count: int) -> bytes:
        """Produce ``count`` consecutive output samples."""
        return bytes(self.sample() for _ in range(count))

    # ------------------------------------------------------------------

    def _modulation(self, voice: int) -> int:
        product = ((self.pitch[voice] >> 6) * (self.envelope_phase[voice] >> 6)) & 0xFFFF
        return (product // 128) * self.mod[voice]

    def _is_free(self, voice: int) -> bool:
        return bool((self.envelope_phase[voice] >> 8) & 0x80)

    @staticmethod
    def _check_voice(voice: int) -> None:
        if not 0 <= voice < VOICES:
            raise IndexError(f"voice must be in 0..{VOICES - 1}, got {voice}")