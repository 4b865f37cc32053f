"""Tuning words, envelope shapes and note scales for the wavetable synthesizer.

The tuning words suit a 20 kHz sample rate: a pitch word is added to a
16-bit phase accumulator every sample, an envelope word to the envelope
accumulator every fourth sample.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "pitch_word",
    "envelope_word",
    "envelope_table",
    "quantize",
    "sample_scale",
]

_EFTWS = (
    0x0371, 0x0340, 0x0311, 0x02E5, 0x02BB, 0x0294, 0x026F, 0x024C,
    0x022B, 0x020C, 0x01EE, 0x01D3, 0x01B8, 0x01A0, 0x0188, 0x0172,
    0x015D, 0x014A, 0x0137, 0x0126, 0x0115, 0x0106, 0x00F7, 0x00E9,
    0x00DC, 0x00D0, 0x00C4, 0x00B9, 0x00AE, 0x00A5, 0x009B, 0x0093,
    0x008A, 0x0083, 0x007B, 0x0074, 0x006E, 0x0068, 0x0062, 0x005C,
    0x0057, 0x0052, 0x004D, 0x0049, 0x0045, 0x0041, 0x003D, 0x003A,
    0x0037, 0x0034, 0x0031, 0x002E, 0x002B, 0x0029, 0x0026, 0x0024,
    0x0022, 0x0020, 0x001E, 0x001D, 0x001B, 0x001A, 0x0018, 0x0017,
    0x0015, 0x0014, 0x0013, 0x0012, 0x0011, 0x0010, 0x000F, 0x000E,
    0x000D, 0x000D, 0x000C, 0x000B, 0x000A, 0x000A, 0x0009, 0x0009,
    0x0008, 0x0008, 0x0007, 0x0007, 0x0006, 0x0006, 0x0006, 0x0005,
    0x0005, 0x0005, 0x0004, 0x0004, 0x0004, 0x0004, 0x0003, 0x0003,
    0x0003, 0x0003, 0x0003, 0x0002, 0x0002, 0x0002, 0x0002, 0x0002,
    0x0002, 0x0002, 0x0001, 0x0001, 0x0001, 0x0001, 0x0001, 0x0001,
    0x0001, 0x0001, 0x0001, 0x0001, 0x0001, 0x0001, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
)

_PITCHS = (
    0x001A, 0x001C, 0x001E, 0x001F, 0x0021, 0x0023, 0x0025, 0x0028,
    0x002A, 0x002D, 0x002F, 0x0032, 0x0035, 0x0038, 0x003C, 0x003F,
    0x0043, 0x0047, 0x004B, 0x0050, 0x0055, 0x005A, 0x005F, 0x0065,
    0x006B, 0x0071, 0x0078, 0x007F, 0x0087, 0x008F, 0x0097, 0x00A0,
    0x00AA, 0x00B4, 0x00BE, 0x00CA, 0x00D6, 0x00E3, 0x00F0, 0x00FE,
    0x010E, 0x011E, 0x012F, 0x0141, 0x0154, 0x0168, 0x017D, 0x0194,
    0x01AC, 0x01C6, 0x01E1, 0x01FD, 0x021C, 0x023C, 0x025E, 0x0282,
    0x02A8, 0x02D0, 0x02FB, 0x0329, 0x0359, 0x038C, 0x03C2, 0x03FB,
    0x0438, 0x0478, 0x04BC, 0x0504, 0x0550, 0x05A1, 0x05F7, 0x0652,
    0x06B2, 0x0718, 0x0784, 0x07F6, 0x0870, 0x08F0, 0x0978, 0x0A08,
    0x0AA1, 0x0B43, 0x0BEF, 0x0CA4, 0x0D65, 0x0E31, 0x0F09, 0x0FED,
    0x10E0, 0x11E1, 0x12F1, 0x1411, 0x1543, 0x1687, 0x17DE, 0x1949,
    0x1ACA, 0x1C62, 0x1E12, 0x1FDB, 0x21C0, 0x23C2, 0x25E3, 0x2823,
    0x2A86, 0x2D0E, 0x2FBC, 0x3292, 0x3594, 0x38C4, 0x3C24, 0x3FB7,
    0x4381, 0x4785, 0x4BC6, 0x5047, 0x550D, 0x5A1C, 0x5F78, 0x6525,
    0x6B29, 0x7188, 0x7848, 0x7F6F, 0x8703, 0x8F0A, 0x978C, 0xA08F,
)

_ENV3 = (
    255, 254, 254, 254, 253, 253, 253, 252, 252, 251, 251, 250, 249, 248, 248, 247, 246, 245,
    241, 237, 232, 228, 223, 219, 215, 210, 205, 200, 195, 189, 184, 179, 173, 168, 163, 157,
    151, 145, 139, 133, 127, 121, 115, 110, 105, 101, 96, 91, 86, 82, 77, 72, 69, 65, 62, 58,
    54, 51, 47, 44, 41, 38, 36, 33, 31, 28, 26, 23, 20, 19, 18, 17, 15, 14, 13, 12, 10, 9, 9,
    9, 8, 8, 7, 7, 6, 6, 6, 6, 5, 5, 5, 5, 5, 5, 5, 5, 5, 4, 4, 4, 4, 4, 4, 3, 3, 3, 2, 2, 2, 1,
    1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
)

_ENV0 = (
    255, 242, 229, 216, 204, 191, 178, 165, 153, 142, 134, 125, 117, 108, 100, 91, 83, 74, 71,
    68, 65, 62, 59, 56, 53, 50, 48, 46, 44, 42, 40, 38, 36, 34, 32, 31, 30, 29, 28, 28, 27, 26,
    25, 25, 24, 24, 23, 23, 22, 22, 21, 21, 20, 20, 19, 19, 19, 18, 18, 17, 17, 16, 16, 15, 15,
    14, 14, 13, 13, 12, 12, 11, 11, 10, 10, 10, 9, 9, 8, 8, 8, 7, 7, 6, 6, 6, 6, 6, 5, 5, 5, 5,
    5, 5, 5, 5, 5, 4, 4, 4, 4, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0,
)

_ENV2 = (
    255, 254, 254, 254, 253, 253, 253, 252, 252, 252, 251, 251, 251, 250, 250, 250, 249, 249,
    247, 244, 242, 240, 237, 235, 233, 230, 219, 200, 180, 160, 141, 121, 102, 82, 62, 58, 53,
    49, 45, 40, 36, 31, 27, 25, 24, 24, 23, 23, 22, 22, 21, 21, 20, 20, 19, 19, 19, 18, 18, 17,
    17, 16, 16, 15, 15, 14, 14, 13, 13, 12, 12, 11, 11, 10, 10, 10, 9, 9, 8, 8, 8, 7, 7, 6, 6,
    6, 6, 6, 5, 5, 5, 5, 5, 5, 5, 5, 5, 4, 4, 4, 4, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 1, 1, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
)

_ENV1 = (
    255, 250, 246, 242, 238, 233, 229, 225, 221, 217, 213, 209, 206, 202, 199, 195, 191, 188,
    183, 179, 175, 170, 166, 161, 157, 153, 148, 144, 139, 134, 130, 125, 121, 116, 112, 109,
    105, 102, 99, 96, 93, 90, 87, 83, 80, 77, 74, 71, 68, 65, 61, 58, 56, 54, 51, 49, 46, 44,
    42, 39, 37, 34, 31, 28, 25, 22, 19, 16, 13, 12, 12, 11, 11, 10, 10, 10, 9, 9, 8, 8, 8, 7, 7,
    6, 6, 6, 6, 6, 5, 5, 5, 5, 5, 5, 5, 5, 5, 4, 4, 4, 4, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 1, 1,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
)

_ENV4 = (
    100, 101, 103, 106, 110, 118, 134, 166, 230, 245, 249, 251, 249, 248, 248, 247, 246, 245,
    244, 242, 241, 240, 239, 238, 237, 236, 235, 234, 233, 232, 231, 230, 229, 228, 227, 226,
    225, 224, 223, 222, 220, 218, 215, 211, 208, 202, 195, 190, 185, 178, 172, 165, 160, 155,
    150, 145, 140, 135, 130, 125, 120, 115, 110, 105, 100, 95, 90, 85, 80, 75, 70, 65, 60, 55,
    50, 45, 41, 37, 33, 30, 28, 26, 24, 22, 20, 18, 16, 14, 12, 10, 9, 8, 7, 6, 5, 5, 5, 4, 4,
    4, 4, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0,
)

_ENVELOPES = (_ENV0, _ENV1, _ENV2, _ENV3, _ENV4)

_SAMPLE_SCALE_ROWS = (
    (60, 61, 62, 63, 64, 65, 66, 67, 68, 69, 70, 71, 72),
    (60, 62, 64, 65, 67, 69, 71, 72),
    (60, 62, 63, 65, 67, 68, 70, 72),
    (60, 64, 67, 72),
    (60, 63, 67, 72),
    (60, 62, 64, 67, 69, 72),
    (60, 63, 65, 67, 70, 72),
    (60, 63, 65, 66, 67, 70, 72),
    (60, 62, 63, 65, 67, 68, 71, 72),
)

_SCALE_LENGTH = 128


def _row(values: Iterable[int]) -> tuple[int, ...]:
    row = tuple(values)
    return row + (0,) * (_SCALE_LENGTH - len(row))


_SCALES = tuple(_row(r) for r in (
    # Major
    (0, 2, 2, 4, 4, 5, 5, 7, 7, 9, 9, 11, 12, 14, 14, 16, 16, 17, 17, 19, 19, 21, 21, 23, 24,
     26, 26, 28, 28, 29, 29, 31, 31, 33, 33, 35, 36, 38, 38, 40, 40, 41, 41, 43, 43, 45, 45,
     47, 48, 50, 50, 52, 52, 53, 53, 55, 55, 57, 57, 59, 60, 62, 62, 64, 64, 65, 65, 67, 67,
     69, 69, 71, 72, 74, 74, 76, 76, 77, 77, 79, 79, 81, 81, 83, 84, 86, 86, 88, 88, 89, 89,
     91, 91, 93, 93, 95, 96, 98, 98, 100, 100, 101, 101, 103, 103, 105, 105, 107, 108, 110,
     110, 112, 112, 113, 113, 115, 115, 117, 117, 119, 120, 122, 122, 124, 124, 125, 125, 127),
    # Natural minor
    (0, 2, 2, 3, 3, 5, 5, 7, 8, 8, 10, 10, 12, 14, 14, 15, 15, 17, 17, 19, 20, 20, 22, 22, 24,
     26, 26, 27, 27, 29, 29, 31, 32, 32, 34, 34, 36, 38, 38, 39, 39, 41, 41, 43, 44, 44, 46,
     46, 48, 50, 50, 51, 51, 53, 53, 55, 56, 56, 58, 58, 60, 62, 62, 63, 63, 65, 65, 67, 68,
     68, 70, 70, 72, 74, 74, 75, 75, 77, 77, 79, 80, 80, 82, 82, 84, 86, 86, 87, 87, 89, 89,
     91, 92, 92, 94, 94, 96, 98, 98, 99, 99, 101, 101, 103, 104, 104, 106, 106, 108, 110, 110,
     111, 111, 113, 113, 115, 116, 116, 118, 118, 120, 122, 122, 123, 123, 125, 125, 127),
    # Major triad
    (0, 0, 4, 4, 4, 4, 7, 7, 7, 7, 12, 12, 12, 12, 16, 16, 16, 16, 19, 19, 19, 19, 24, 24, 24,
     24, 28, 28, 28, 28, 31, 31, 31, 31, 36, 36, 36, 36, 40, 40, 40, 40, 43, 43, 43, 43, 48,
     48, 48, 48, 52, 52, 52, 52, 55, 55, 55, 55, 60, 60, 60, 60, 64, 64, 64, 64, 67, 67, 67,
     67, 72, 72, 72, 72, 76, 76, 76, 76, 79, 79, 79, 79, 84, 84, 84, 84, 88, 88, 88, 88, 91,
     91, 91, 91, 96, 96, 96, 96, 100, 100, 100, 100, 103, 103, 103, 103, 108, 108, 108, 108,
     112, 112, 112, 112, 115, 115, 115, 115, 120, 120, 120, 120, 124, 124, 124, 124, 127, 127),
    # Minor triad
    (0, 0, 3, 3, 3, 3, 7, 7, 7, 7, 12, 12, 12, 12, 15, 15, 15, 15, 19, 19, 19, 19, 24, 24, 24,
     24, 27, 27, 27, 27, 31, 31, 31, 31, 36, 36, 36, 36, 39, 39, 39, 39, 43, 43, 43, 43, 48,
     48, 48, 48, 51, 51, 51, 51, 55, 55, 55, 55, 60, 60, 60, 60, 63, 63, 63, 63, 67, 67, 67,
     67, 72, 72, 72, 72, 75, 75, 75, 75, 79, 79, 79, 79, 84, 84, 84, 84, 87, 87, 87, 87, 91,
     91, 91, 91, 96, 96, 96, 96, 99, 99, 99, 99, 103, 103, 103, 103, 108, 108, 108, 108, 111,
     111, 111, 111, 115, 115, 115, 115, 120, 120, 120, 120, 123, 123, 123, 123, 127, 127),
    # Major pentatonic
    (0, 0, 2, 2, 4, 4, 7, 7, 9, 9, 9, 12, 12, 12, 14, 14, 16, 16, 19, 19, 21, 21, 21, 24, 24,
     24, 26, 26, 28, 28, 31, 31, 33, 33, 33, 36, 36, 36, 38, 38, 40, 40, 43, 43, 45, 45, 45,
     48, 48, 48, 50, 50, 52, 52, 55, 55, 57, 57, 57, 60, 60, 60, 62, 62, 64, 64, 67, 67, 69,
     69, 69, 72, 72, 72, 74, 74, 76, 76, 79, 79, 81, 81, 81, 84, 84, 84, 86, 86, 88, 88, 91,
     91, 93, 93, 93, 96, 96, 96, 98, 98, 100, 100, 103, 103, 105, 105, 105, 108, 108, 108, 110,
     110, 112, 112, 115, 115, 117, 117, 117, 120, 120, 120, 122, 122, 124, 124, 127, 127),
    # Minor pentatonic
    (0, 0, 3, 3, 5, 5, 7, 7, 7, 10, 10, 10, 12, 12, 15, 15, 17, 17, 19, 19, 19, 22, 22, 22, 24,
     24, 27, 27, 29, 29, 31, 31, 31, 34, 34, 34, 36, 36, 39, 39, 41, 41, 43, 43, 43, 46, 46,
     46, 48, 48, 51, 51, 53, 53, 55, 55, 55, 58, 58, 58, 60, 60, 63, 63, 65, 65, 67, 67, 67,
     70, 70, 70, 72, 72, 75, 75, 77, 77, 79, 79, 79, 82, 82, 82, 84, 84, 87, 87, 89, 89, 91,
     91, 91, 94, 94, 94, 96, 96, 99, 99, 101, 101, 103, 103, 103, 106, 106, 106, 108, 108, 111,
     111, 113, 113, 115, 115, 115, 118, 118, 118, 120, 120, 123, 123, 125, 125, 127, 127),
    # Blues hexatonic
    (0, 0, 3, 3, 5, 5, 6, 6, 7, 7, 10, 10, 12, 12, 15, 15, 17, 17, 18, 18, 19, 19, 22, 22, 24,
     24, 27, 27, 29, 29, 30, 30, 31, 31, 34, 34, 36, 36, 39, 39, 41, 41, 42, 42, 43, 43, 46,
     46, 48, 48, 51, 51, 53, 53, 54, 54, 55, 55, 58, 58, 60, 60, 63, 63, 65, 65, 66, 66, 67,
     67, 70, 70, 72, 72, 75, 75, 77, 77, 78, 78, 79, 79, 82, 82, 84, 84, 87, 87, 89, 89, 90,
     90, 91, 91, 94, 94, 96, 96, 99, 99, 101, 101, 102, 102, 103, 103, 106, 106, 108, 108,
     111, 111, 113, 113, 114, 114, 115, 115, 118, 118, 120, 120, 123, 123, 125, 125, 126, 126),
    # Harmonic minor
    (0, 0, 2, 3, 3, 5, 7, 7, 8, 8, 11, 11, 12, 12, 14, 15, 15, 17, 19, 19, 20, 20, 23, 23, 24,
     24, 26, 27, 27, 29, 31, 31, 32, 32, 35, 35, 36, 36, 38, 39, 39, 41, 43, 43, 44, 44, 47,
     47, 48, 48, 50, 51, 51, 53, 55, 55, 56, 56, 59, 59, 60, 60, 62, 63, 63, 65, 67, 67, 68,
     68, 71, 71, 72, 72, 74, 75, 75, 77, 79, 79, 80, 80, 83, 83, 84, 84, 86, 87, 87, 89, 91,
     91, 92, 92, 95, 95, 96, 96, 98, 99, 99, 101, 103, 103, 104, 104, 107, 107, 108, 108, 110,
     111, 111, 113, 115, 115, 116, 116, 119, 119, 120, 120, 122, 123, 123, 125, 127, 127),
))


def _check_range(value: int, limit: int, what: str) -> int:
    if not 0 <= value < limit:
        raise ValueError(f"{what} must be in 0..{limit - 1}, got {value}")
    return value


def pitch_word(note: int) -> int:
    """Return the phase increment that plays MIDI note ``note`` (0-127)."""
    return _PITCHS[_check_range(note, len(_PITCHS), "note")]


def envelope_word(length: int) -> int:
    """Return the envelope increment for a note length value (0-127)."""
    return _EFTWS[_check_range(length, len(_EFTWS), "length")]


def envelope_table(envelope: int) -> tuple[int, ...]:
    """Return the amplitude curve (0-255 values) of envelope 0-4.

    Any other envelope number selects envelope 0.
    """
    if 0 <= envelope < len(_ENVELOPES):
        return _ENVELOPES[envelope]
    return _ENV0


def quantize(scale: int, value: int) -> int:
    """Snap a raw value (0-127) to the nearest note of scale 0-7."""
    row = _SCALES[_check_range(scale, len(_SCALES), "scale")]
    return row[_check_range(value, _SCALE_LENGTH, "value")]


def sample_scale(index: int) -> tuple[int, ...]:
    """Return the notes of reference scale 0-8, one octave upward from middle C."""
    return _SAMPLE_SCALE_ROWS[_check_range(index, len(_SAMPLE_SCALE_ROWS), "scale index")]