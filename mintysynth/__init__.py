"""Four-voice wavetable synthesizer, step sequencer engine and front-panel logic."""

__version__ = "0.1.0"
__all__ = ["engine", "panel", "songs", "tuning", "wavesynth", "wavetables"]