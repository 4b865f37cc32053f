# mintysynth

A small four-voice synthesizer and 16-step sequencer in pure Python. It needs
nothing beyond the standard library.

The package has two engines:

- `mintysynth.wavesynth.WaveSynth` is a fixed-point wavetable synthesizer. It
  uses 8-bit wave tables, 8-bit envelope tables and 16-bit phase accumulators
  at a 20 kHz sample rate. Each voice has a wave (`Waveform`), a MIDI pitch,
  an envelope shape (0-4), a length (0-127) and a pitch modulation amount
  (0-127, where 64 means none). Each call to `sample()` produces one unsigned
  8-bit output value, where 127 is silence. `render(count)` returns `count`
  values as `bytes`. `m_trigger()` also adds the MIDI messages that the note
  would send (`MidiMessage`: note off, program change, note on) to the list
  `synth.midi_messages`.
- `mintysynth.engine.MintySynth` is a floating-point engine at 44.1 kHz. It
  has per-voice parameters (`VoiceParam`), global parameters (`GlobalParam`),
  a 4-voice by 16-step sequencer, and interleaved stereo 16-bit output.
  Its clock (milliseconds) and its random source for noise can be passed in,
  so playback can be driven step by step.

The supporting modules are:

- `mintysynth.wavetables`: the wave tables, through `wavetable()`.
- `mintysynth.tuning`: pitch and envelope tuning words (`pitch_word`,
  `envelope_word`), envelope tables (`envelope_table`), scale quantisation
  (`quantize`) and reference scales (`sample_scale`).
- `mintysynth.songs`: the built-in demo song and voice presets
  (`default_songs()`, `default_voice_prefs()`, `VoicePreset`).
- `mintysynth.panel`: front-panel logic for encoders and buttons.
  `FrontPanel.apply_encoder_changes()` applies tempo, pitch, length, envelope
  and swing changes. `FrontPanel.scan_buttons()` handles the 16 step buttons
  and the play/stop, voice select and clear buttons. `FrontPanel.display_lines()`
  gives the display text. `TestTone` renders a sine test tone.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Fixed-point wavetable synth

```python
from mintysynth.wavesynth import WaveSynth
from mintysynth.wavetables import Waveform

synth = WaveSynth()
synth.begin()                       # samples can only be produced once started
synth.setup_voice(0, Waveform.SINE, 60, 1, 60, 64)
synth.m_trigger(0, 60)
samples = synth.render(2000)        # unsigned 8-bit levels around 127
print(synth.midi_messages)          # program change and note on for voice 0
```

## Step sequencer engine

```python
from mintysynth.engine import MintySynth, VoiceParam, GlobalParam

now = [0]
synth = MintySynth(clock=lambda: now[0])
synth.begin()
synth.set_voice_param(0, VoiceParam.VOLUME, 100)
synth.set_global_param(GlobalParam.TEMPO, 140)
synth.set_step(0, 1, 60, True)

synth.start()                       # starts at step 0
now[0] += synth.step_duration       # one sixteenth note later
synth.update_sequencer()            # moves to step 1 and triggers its note
buffer = synth.process_audio(128)   # interleaved left/right int16 values
```

`MintySynth` computes only the sine, square, saw, triangle and noise
waveforms. Every other waveform number plays as a sine. The swing and scale
settings are stored and can be read back, but they do not change timing or
pitch.

## Scales

```python
from mintysynth.tuning import quantize

quantize(0, 61)  # snap a 0-127 control value onto the major scale
```

## What the package does not do

The package computes samples, state and messages. It does not send them
anywhere:

- No audio is played. Samples are returned as `bytes` or lists of integers
  for you to write to a file or to an audio device.
- No MIDI port is opened. MIDI messages are only collected in
  `WaveSynth.midi_messages`.
- Nothing is drawn. The panel's display is given as lines of text.
- Songs and presets are not saved or loaded.
- The package has no command-line program.