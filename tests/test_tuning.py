import pytest

from mintysynth.tuning import (
    envelope_table,
    envelope_word,
    pitch_word,
    quantize,
    sample_scale,
)


def test_pitch_word_for_concert_a():
    assert pitch_word(69) == 0x05A1


def test_pitch_words_rise_with_note():
    words = [pitch_word(n) for n in range(128)]
    assert all(a < b for a, b in zip(words, words[1:]))


def test_pitch_word_octave_roughly_doubles():
    for note in range(60, 116):
        ratio = pitch_word(note + 12) / pitch_word(note)
        assert 1.9 < ratio < 2.1


@pytest.mark.parametrize("note", [-1, 128])
def test_pitch_word_rejects_out_of_range(note):
    with pytest.raises(ValueError):
        pitch_word(note)


def test_envelope_word_ends():
    assert envelope_word(0) == 0x0371
    assert envelope_word(127) == 0x0000


def test_envelope_words_never_increase():
    words = [envelope_word(n) for n in range(128)]
    assert all(a >= b for a, b in zip(words, words[1:]))


def test_envelope_word_rejects_out_of_range():
    with pytest.raises(ValueError):
        envelope_word(128)


@pytest.mark.parametrize("envelope", range(5))
def test_envelope_tables_cover_the_used_range(envelope):
    table = envelope_table(envelope)
    assert len(table) >= 128
    assert all(0 <= v <= 255 for v in table)
    assert table[127] == 0


def test_envelopes_start_values():
    assert [envelope_table(e)[0] for e in range(4)] == [255, 255, 255, 255]
    assert envelope_table(4)[0] == 100


def test_unknown_envelope_falls_back_to_first():
    assert envelope_table(9) == envelope_table(0)


@pytest.mark.parametrize("scale", range(8))
def test_quantize_is_monotonic_and_bounded(scale):
    values = [quantize(scale, v) for v in range(128)]
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert values[0] == 0
    assert max(values) <= 127


def test_major_scale_notes_are_in_key():
    in_key = {0, 2, 4, 5, 7, 9, 11}
    assert all(quantize(0, v) % 12 in in_key for v in range(127))


def test_quantize_rejects_bad_scale_and_value():
    with pytest.raises(ValueError):
        quantize(8, 10)
    with pytest.raises(ValueError):
        quantize(0, 128)


def test_sample_scale_chromatic_and_triad():
    assert sample_scale(0) == tuple(range(60, 73))
    assert sample_scale(3) == (60, 64, 67, 72)


@pytest.mark.parametrize("index", range(9))
def test_sample_scales_span_one_octave(index):
    notes = sample_scale(index)
    assert notes[0] == 60
    assert notes[-1] == 72
    assert list(notes) == sorted(notes)


def test_sample_scale_rejects_out_of_range():
    with pytest.raises(ValueError):
        sample_scale(9)