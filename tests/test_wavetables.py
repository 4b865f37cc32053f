import pytest

from mintysynth.wavetables import Waveform, wavetable


def test_sine_starts_at_zero_and_peaks_at_quarter_cycle():
    table = wavetable(Waveform.SINE)
    assert table[0] == 0
    assert table[64] == max(table)


def test_ramp_starts_at_bottom_and_never_falls():
    table = wavetable(Waveform.RAMP)
    assert table[0] == -127
    assert all(a <= b for a, b in zip(table, table[1:]))
    assert table[-1] == max(table)


def test_square_is_high_for_first_half():
    table = wavetable(Waveform.SQUARE)
    assert all(v == 127 for v in table[:128])
    assert all(v < 0 for v in table[128:])


@pytest.mark.parametrize("wave", list(Waveform))
def test_every_table_fits_in_a_signed_byte(wave):
    table = wavetable(wave)
    assert len(table) > 0
    assert all(-128 <= v <= 127 for v in table)


@pytest.mark.parametrize("wave", list(Waveform))
def test_integer_number_selects_same_table(wave):
    assert wavetable(int(wave)) is wavetable(wave)


@pytest.mark.parametrize("number", [15, 42, 200, 255])
def test_unknown_wave_number_falls_back_to_i_table(number):
    assert wavetable(number) is wavetable(Waveform.I)


def test_tables_are_distinct_for_each_waveform():
    tables = {wavetable(w) for w in Waveform}
    assert len(tables) == len(Waveform)


def test_tables_are_immutable():
    table = wavetable(Waveform.TRIANGLE)
    with pytest.raises(TypeError):
        table[0] = 5  # type: ignore[index]
    assert wavetable(Waveform.TRIANGLE)[0] == 0
    assert wavetable(Waveform.TRIANGLE)[64] == 127


def test_triangle_peaks_match_sine_peak_positions():
    triangle = wavetable(Waveform.TRIANGLE)
    sine = wavetable(Waveform.SINE)
    assert triangle.index(max(triangle)) == sine.index(max(sine))
    assert triangle.index(min(triangle)) == sine.index(min(sine))


def test_waveform_numbers_cover_fifteen_shapes():
    assert [int(w) for w in Waveform] == list(range(len(Waveform)))
    assert Waveform(5) is Waveform.SAW
    assert wavetable(5) is wavetable(Waveform.SAW)