"""The built-in demo song and the voice settings that go with it."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["VoicePreset", "default_voice_prefs", "default_songs"]

SONG_COUNT = 6
VOICE_COUNT = 4
STEP_COUNT = 16


@dataclass
class VoicePreset:
    """Settings of one voice in one song.

    ``mod`` is 0-127 with 64 meaning no modulation.
    """

    wave: int = 0
    pitch: int = 0
    envelope: int = 0
    length: int = 0
    mod: int = 0
    midi_channel: int = 0
    midi_instrument: int = 0


_EMPTY_VOICES = ((0, 0, 0, 0, 0, 0, 0),) * VOICE_COUNT

_VOICE_PREFS = (
    # First half of the demo song.
    (
        (0, 87, 1, 38, 64, 1, 1),
        (4, 63, 1, 22, 64, 1, 26),
        (1, 63, 1, 60, 64, 10, 0),
        (2, 75, 2, 80, 64, 10, 0),
    ),
    # Second half of the demo song.
    (
        (10, 62, 1, 60, 64, 1, 1),
        (0, 43, 1, 35, 64, 10, 0),
        (4, 80, 1, 35, 64, 10, 0),
        (2, 75, 2, 60, 64, 10, 0),
    ),
    # The song edited by the sequencer, set up to play each voice's reference note.
    (
        (10, 60, 1, 60, 64, 1, 0),
        (10, 64, 1, 60, 64, 1, 0),
        (10, 67, 1, 60, 64, 1, 0),
        (10, 72, 1, 60, 64, 1, 0),
    ),
    # Slots for songs appended from storage.
    _EMPTY_VOICES,
    _EMPTY_VOICES,
    _EMPTY_VOICES,
)

_EMPTY_SONG = ((0,) * STEP_COUNT,) * VOICE_COUNT

_SONGS = (
    (
        (39, 67, 31, 75, 87, 72, 0, 79, 0, 72, 43, 75, 99, 63, 55, 72),
        (65, 67, 0, 72, 63, 67, 0, 72, 63, 0, 63, 0, 0, 60, 0, 72),
        (0, 0, 0, 0, 0, 0, 0, 0, 63, 48, 55, 46, 67, 0, 0, 0),
        (87, 0, 75, 54, 87, 27, 39, 87, 87, 48, 55, 0, 99, 0, 60, 75),
    ),
    (
        (62, 62, 0, 67, 67, 51, 36, 24, 0, 72, 27, 39, 0, 48, 39, 51),
        (43, 0, 43, 0, 43, 0, 0, 43, 43, 0, 43, 0, 43, 0, 0, 43),
        (0, 43, 0, 43, 0, 80, 0, 80, 80, 80, 0, 80, 80, 80, 0, 80),
        (60, 79, 48, 75, 0, 67, 0, 96, 0, 60, 0, 75, 60, 0, 43, 91),
    ),
    (
        (60, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 64, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 67, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 72, 0, 0, 0),
    ),
    _EMPTY_SONG,
    _EMPTY_SONG,
    _EMPTY_SONG,
)


def default_voice_prefs() -> list[list[VoicePreset]]:
    """Return fresh voice settings for the six songs, four voices each."""
    return [[VoicePreset(*voice) for voice in song] for song in _VOICE_PREFS]


def default_songs() -> list[list[list[int]]]:
    """Return fresh note grids: six songs of four voices of sixteen steps.

    Each step holds a MIDI note; zero is a rest.
    """
    return [[list(voice) for voice in song] for song in _SONGS]