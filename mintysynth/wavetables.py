"""Single-cycle 8-bit wavetables used by the wavetable synthesizer."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Waveform", "wavetable"]


class Waveform(IntEnum):
    """Wave shapes a voice can play, by their wave number."""

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


_SINE = (
    0, 3, 6, 9, 12, 15, 18, 21, 24, 27, 30, 33, 36, 39, 42, 45, 48, 51, 54, 57, 59, 62, 65, 67,
    70, 73, 75, 78, 80, 82, 85, 87, 89, 91, 94, 96, 98, 100, 102, 103, 105, 107, 108, 110, 112,
    113, 114, 116, 117, 118, 119, 120, 121, 122, 123, 123, 124, 125, 125, 126, 126, 126, 126,
    126, 127, 126, 126, 126, 126, 126, 125, 125, 124, 123, 123, 122, 121, 120, 119, 118, 117,
    116, 114, 113, 112, 110, 108, 107, 105, 103, 102, 100, 98, 96, 94, 91, 89, 87, 85, 82, 80,
    78, 75, 73, 70, 67, 65, 62, 59, 57, 54, 51, 48, 45, 42, 39, 36, 33, 30, 27, 24, 21, 18, 15,
    12, 9, 6, 3, 0, -3, -6, -9, -12, -15, -18, -21, -24, -27, -30, -33, -36, -39, -42, -45, -48,
    -51, -54, -57, -59, -62, -65, -67, -70, -73, -75, -78, -80, -82, -85, -87, -89, -91, -94,
    -96, -98, -100, -102, -103, -105, -107, -108, -110, -112, -113, -114, -116, -117, -118,
    -119, -120, -121, -122, -123, -123, -124, -125, -125, -126, -126, -126, -126, -126, -127,
    -126, -126, -126, -126, -126, -125, -125, -124, -123, -123, -122, -121, -120, -119, -118,
    -117, -116, -114, -113, -112, -110, -108, -107, -105, -103, -102, -100, -98, -96, -94, -91,
    -89, -87, -85, -82, -80, -78, -75, -73, -70, -67, -65, -62, -59, -57, -54, -51, -48, -45,
    -42, -39, -36, -33, -30, -27, -24, -21, -18, -15, -12, -9, -6, -4,
)

_TRIANGLE = (
    0, 1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25, 27, 29, 31, 33, 35, 37, 39, 41, 43, 45, 47,
    49, 51, 53, 55, 57, 59, 61, 63, 65, 67, 69, 71, 73, 75, 77, 79, 81, 83, 85, 87, 89, 91, 93,
    95, 97, 99, 101, 103, 105, 107, 109, 111, 113, 115, 117, 119, 121, 123, 125, 127, 125, 123,
    121, 119, 117, 115, 113, 111, 109, 107, 105, 103, 101, 99, 97, 95, 93, 91, 89, 87, 85, 83,
    81, 79, 77, 75, 73, 71, 69, 67, 65, 63, 61, 59, 57, 55, 53, 51, 49, 47, 45, 43, 41, 39, 37,
    35, 33, 31, 29, 27, 25, 23, 21, 19, 17, 15, 13, 11, 9, 7, 5, 3, 1, 0, -1, -3, -5, -7, -9,
    -11, -13, -15, -17, -19, -21, -23, -25, -27, -29, -31, -33, -35, -37, -39, -41, -43, -45,
    -47, -49, -51, -53, -55, -57, -59, -61, -63, -65, -67, -69, -71, -73, -75, -77, -79, -81,
    -83, -85, -87, -89, -91, -93, -95, -97, -99, -101, -103, -105, -107, -109, -111, -113, -115,
    -117, -119, -121, -123, -125, -127, -125, -123, -121, -119, -117, -115, -113, -111, -109,
    -107, -105, -103, -101, -99, -97, -95, -93, -91, -89, -87, -85, -83, -81, -79, -77, -75,
    -73, -71, -69, -67, -65, -63, -61, -59, -57, -55, -53, -51, -49, -47, -45, -43, -41, -39,
    -37, -35, -33, -31, -29, -27, -25, -23, -21, -19, -17, -15, -13, -11, -9, -7, -5, -3, -2,
)

_SQUARE = (127,) * 128 + (-125,) * 127 + (-1,)

_SAW = (
    2, 7, 13, 19, 25, 30, 36, 42, 48, 53, 59, 64, 70, 75, 81, 86, 91, 96, 101, 106, 110, 114,
    117, 120, 123, 125, 126, 127, 127, 127, 127, 127, 127, 126, 125, 123, 121, 119, 117, 115,
    113, 110, 108, 105, 102, 99, 97, 94, 90, 87, 84, 80, 76, 72, 68, 64, 60, 57, 53, 49, 46, 43,
    40, 37, 35, 33, 31, 29, 27, 25, 24, 21, 19, 17, 15, 13, 11, 9, 7, 5, 4, 4, 3, 3, 3, 4, 5, 6,
    7, 8, 9, 11, 12, 13, 14, 16, 17, 17, 18, 19, 19, 19, 19, 19, 19, 18, 18, 17, 16, 16, 15, 14,
    13, 12, 11, 10, 9, 8, 7, 5, 3, 0, -1, -4, -6, -9, -9, -14, -16, -19, -21, -24, -26, -28, -31,
    -33, -35, -37, -40, -42, -44, -46, -48, -50, -51, -53, -55, -57, -58, -60, -61, -63, -64,
    -65, -66, -67, -67, -67, -67, -67, -66, -65, -64, -62, -60, -58, -56, -54, -52, -49, -47,
    -45, -43, -42, -40, -39, -38, -37, -37, -36, -36, -35, -35, -35, -34, -34, -33, -32, -31,
    -31, -30, -29, -28, -28, -27, -27, -27, -27, -28, -29, -30, -31, -32, -33, -35, -37, -39,
    -40, -42, -44, -46, -48, -50, -52, -54, -56, -58, -60, -61, -63, -65, -66, -68, -69, -71,
    -72, -73, -74, -74, -75, -75, -75, -74, -73, -72, -70, -69, -67, -64, -62, -59, -56, -54,
    -51, -48, -45, -42, -39, -36, -33, -29, -25, -21, -16, -11, -6,
)

_RAMP = tuple(range(-127, 0)) + (0,) + tuple(range(0, 128))

_NOISE = (
    -62, -72, -92, -98, 98, -103, 96, -89, -29, -55, 98, -8, -118, 13, 11, -1, 76, -8, -116, 51,
    33, -85, -43, -16, -114, -47, -63, -113, 109, -39, -127, -59, 0, 118, 70, 62, 54, 85, 51,
    122, 60, 30, -126, -25, 71, -82, -11, 64, -95, -110, 127, 37, -14, -57, 51, -4, -47, -80,
    110, 7, -117, 89, 65, -58, 50, -21, 33, -113, -22, 111, -46, 108, 112, -57, -111, 53, -21,
    -22, -127, -18, -9, 95, 88, 99, -17, -3, 74, 2, 123, -31, 53, -7, 91, -80, 15, -112, 114,
    14, -115, -55, 22, 95, 21, 53, -105, -67, -25, 25, 13, 58, -121, -62, 103, 87, 109, 38,
    -79, -60, -16, -68, -91, 90, 112, -99, 118, 87, -61, -36, -40, -39, -30, 34, 83, -100, -43,
    -114, -54, -8, -36, -52, 71, 22, -33, 116, 9, 114, 24, -91, -48, -106, -2, -31, 103, 21,
    117, 44, 115, -59, 53, 97, 124, 66, 120, -44, 57, -96, -24, 46, 32, 111, -56, -123, 46, -11,
    97, -70, -12, -89, -81, 24, -29, -23, 77, 42, -40, 8, -98, -35, -21, 116, 61, -41, 116, 66,
    -88, 22, 95, -31, 40, -51, -78, 28, 3, 124, 92, 81, -27, 78, 65, -16, -116, -73, -126, 55,
    -76, 78, 17, 43, 66, -24, 117, -38, -76, -10, -37, -47, -56, 33, 94, -40, 107, 36, -104,
    -11, -27, -23, 105, -96, 68, -25, 7, 67, 6, -69, 70, -10, 10, 5, 42, 120, -71, -122, -86,
    113, 112, 119,
)

_A = (
    0, -4, -8, -11, -15, -18, -22, -25, -28, -31, -34, -37, -40, -43, -45, -48, -50, -52, -55,
    -57, -59, -61, -63, -65, -67, -68, -70, -72, -73, -75, -76, -77, -79, -80, -81, -82, -83,
    -84, -85, -86, -87, -87, -88, -89, -89, -90, -90, -91, -91, -91, -92, -92, -92, -92, -92,
    -92, -92, -92, -92, -92, -92, -91, -91, -91, -90, -90, -89, -89, -88, -88, -87, -86, -86,
    -85, -84, -83, -82, -82, -81, -80, -79, -78, -76, -75, -74, -73, -72, -71, -69, -68, -67,
    -65, -64, -63, -61, -60, -58, -58, -60, -61, -62, -63, -62, -62, -61, -61, -60, -60, -59,
    -59, -58, -58, -58, -57, -57, -57, -56, -56, -55, -55, -54, -53, -52, -51, -51, -49, -49,
    -47, -45, -44, -42, -40, -38, -36, -34, -31, -29, -27, -24, -21, -19, -16, -13, -10, -7,
    -3, 0, 3, 7, 10, 14, 17, 21, 25, 30, 35, 39, 43, 48, 52, 56, 60, 61, 62, 63, 65, 67, 69, 72,
    74, 77, 79, 81, 84, 86, 88, 89, 91, 93, 94, 95, 97, 98, 99, 100, 101, 102, 103, 104, 105,
    106, 107, 108, 109, 111, 113, 114, 115, 117, 118, 119, 119, 120, 121, 122, 123, 124, 125,
    125, 126, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 126, 126, 125,
    123, 120, 115, 110, 106, 103, 99, 96, 93, 89, 86, 82, 78, 74, 70, 65, 61, 56, 52, 47, 43,
    38, 33, 29, 25, 21, 18, 14, 10, 6,
)

_B = (
    0, 10, 20, 30, 39, 48, 57, 66, 74, 82, 89, 96, 102, 107, 112, 117, 120, 123, 126, 127, 127,
    127, 127, 127, 126, 124, 121, 119, 115, 111, 107, 103, 99, 94, 89, 84, 79, 75, 70, 65, 61,
    57, 53, 49, 46, 43, 41, 38, 37, 36, 35, 34, 34, 35, 35, 37, 38, 40, 42, 44, 47, 49, 52, 55,
    58, 60, 63, 66, 68, 70, 72, 74, 75, 76, 77, 77, 77, 76, 75, 73, 71, 68, 65, 61, 57, 52, 47,
    42, 37, 31, 24, 18, 12, 5, -2, -9, -15, -22, -28, -34, -40, -46, -51, -56, -60, -64, -68,
    -71, -73, -74, -75, -76, -76, -75, -73, -71, -68, -65, -61, -57, -52, -46, -41, -35, -28,
    -22, -22, -8, -1, 6, 13, 20, 27, 33, 39, 45, 51, 56, 60, 64, 68, 71, 73, 75, 76, 77, 77, 76,
    75, 73, 70, 67, 63, 59, 54, 49, 44, 38, 32, 25, 19, 12, 6, -1, -8, -14, -21, -27, -33, -39,
    -44, -49, -54, -58, -62, -66, -69, -71, -73, -74, -75, -76, -76, -75, -75, -73, -72, -70,
    -68, -66, -63, -60, -58, -55, -52, -49, -47, -44, -42, -40, -38, -36, -35, -34, -33, -33,
    -33, -34, -35, -37, -39, -41, -44, -47, -50, -54, -58, -62, -67, -72, -76, -81, -86, -91,
    -96, -100, -105, -109, -113, -116, -119, -122, -124, -126, -127, -127, -127, -127, -125,
    -123, -121, -117, -113, -108, -103, -97, -91, -84, -76, -68, -60, -51, -42, -33, -23, -14,
)

_C = (
    3, 9, 14, 18, 22, 26, 30, 34, 38, 41, 45, 48, 51, 54, 57, 60, 63, 66, 69, 71, 74, 76, 79, 81,
    83, 85, 87, 89, 90, 92, 94, 95, 97, 99, 102, 104, 105, 107, 108, 109, 111, 110, 107, 105,
    103, 102, 101, 100, 100, 99, 98, 97, 96, 94, 93, 92, 91, 89, 88, 86, 85, 83, 82, 81, 80, 79,
    81, 82, 82, 82, 82, 83, 83, 83, 83, 83, 83, 83, 83, 84, 84, 84, 85, 85, 85, 85, 85, 85, 85,
    85, 85, 85, 84, 84, 84, 83, 82, 81, 81, 79, 78, 77, 76, 74, 73, 71, 69, 68, 65, 63, 61, 59,
    56, 54, 51, 49, 46, 43, 40, 37, 34, 31, 28, 24, 21, 17, 13, 8, 2, -4, -8, -13, -16, -20,
    -24, -27, -30, -34, -37, -40, -43, -46, -49, -52, -54, -57, -60, -62, -65, -67, -69, -71,
    -74, -76, -78, -79, -81, -83, -85, -86, -88, -89, -91, -92, -92, -91, -90, -89, -88, -87,
    -87, -86, -86, -85, -85, -84, -84, -83, -83, -82, -81, -81, -80, -80, -79, -79, -78, -78,
    -78, -79, -80, -83, -84, -85, -86, -87, -88, -89, -90, -91, -92, -92, -93, -94, -95, -96,
    -96, -97, -97, -98, -98, -99, -99, -99, -99, -99, -99, -99, -99, -98, -98, -97, -97, -96,
    -95, -94, -93, -92, -90, -89, -87, -85, -83, -81, -79, -77, -74, -72, -69, -66, -63, -60,
    -57, -54, -51, -47, -44, -40, -37, -33, -29, -25, -21, -16, -11, -6,
)

_D = (
    2, 9, 15, 22, 29, 36, 44, 51, 59, 67, 74, 82, 88, 93, 96, 99, 103, 105, 107, 110, 113, 116,
    119, 121, 123, 125, 125, 125, 126, 127, 127, 127, 127, 126, 124, 121, 117, 114, 109, 104,
    98, 93, 87, 82, 77, 71, 67, 61, 56, 52, 48, 43, 37, 31, 24, 19, 16, 15, 12, 10, 7, 4, 3, 0,
    -3, -7, -11, -17, -20, -23, -25, -29, -33, -37, -40, -42, -45, -47, -51, -53, -56, -58, -60,
    -63, -65, -66, -67, -68, -68, -68, -68, -68, -67, -66, -64, -63, -61, -59, -57, -55, -53,
    -50, -46, -43, -39, -35, -31, -26, -21, -17, -13, -9, -5, -1, 3, 6, 10, 13, 16, 20, 23, 26,
    28, 30, 32, 33, 33, 34, 34, 33, 33, 32, 30, 28, 26, 24, 22, 19, 17, 13, 9, 5, 2, -2, -5, -8,
    -12, -15, -18, -20, -22, -25, -28, -30, -33, -34, -36, -36, -37, -38, -40, -40, -39, -39,
    -39, -38, -38, -37, -36, -35, -34, -33, -31, -30, -29, -27, -25, -23, -22, -21, -20, -19,
    -18, -17, -16, -16, -15, -15, -14, -14, -13, -12, -12, -12, -12, -12, -12, -13, -14, -14,
    -15, -16, -17, -18, -19, -20, -21, -21, -22, -23, -24, -25, -26, -27, -28, -29, -30, -30,
    -30, -30, -30, -31, -31, -31, -30, -30, -30, -30, -30, -31, -31, -32, -32, -33, -34, -36,
    -37, -39, -40, -42, -44, -46, -47, -48, -49, -49, -48, -47, -45, -42, -38, -33, -28, -22,
    -16, -9,
)

_E = (
    2, 6, 10, 14, 17, 21, 24, 28, 31, 34, 37, 41, 44, 47, 50, 53, 55, 58, 61, 64, 66, 69, 71, 74,
    76, 78, 80, 83, 85, 87, 89, 91, 92, 94, 96, 98, 99, 101, 102, 104, 105, 106, 108, 109, 110,
    111, 112, 113, 114, 115, 116, 117, 118, 119, 119, 120, 121, 121, 122, 123, 123, 124, 124,
    125, 125, 125, 126, 126, 126, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127,
    127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127,
    127, 126, 126, 126, 126, 125, 125, 125, 124, 124, 124, 123, 123, 123, 122, 122, 122, 121,
    121, 121, 119, 117, 114, 109, 103, 95, 86, 86, 65, 53, 41, 29, 16, 2, -12, -24, -35, -44,
    -53, -62, -69, -76, -82, -87, -92, -96, -100, -103, -106, -109, -111, -113, -115, -116,
    -118, -119, -120, -121, -122, -123, -123, -124, -124, -125, -125, -126, -126, -126, -126,
    -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127,
    -127, -127, -126, -126, -126, -126, -125, -125, -125, -124, -124, -123, -123, -122, -122,
    -121, -121, -120, -119, -119, -118, -117, -116, -116, -115, -114, -113, -112, -111, -109,
    -108, -107, -106, -104, -103, -102, -100, -99, -97, -95, -94, -92, -90, -88, -86, -84, -82,
    -80, -77, -75, -73, -70, -68, -65, -63, -60, -57, -54, -51, -49, -46, -42, -39, -36, -33,
    -30, -26, -23, -19, -16, -12, -8, -4,
)

_F = (
    7, 37, 59, 74, 85, 94, 100, 105, 110, 113, 116, 118, 120, 121, 122, 123, 124, 125, 126, 126,
    126, 127, 127, 127, 127, 127, 127, 127, 127, 127, 127, 124, 106, 94, 89, 86, 84, 84, 83, 83,
    83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 83, 84, 79,
    64, 67, 68, 66, 64, 61, 59, 57, 56, 55, 55, 54, 54, 54, 54, 53, 53, 53, 53, 53, 53, 53, 53,
    53, 53, 53, 53, 53, 53, 53, 53, 54, 51, 33, 20, 14, 10, 9, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8,
    8, 8, 8, 8, 8, 8, 8, 8, 7, 8, 7, 8, 2, -15, -15, -25, -4, 10, 15, 17, 16, 14, 12, 10, 8, 6,
    4, 3, 0, 0, -1, -2, -2, -3, -4, -4, -4, -5, -5, -5, -5, -6, -6, -6, -6, -6, -6, -8, -25,
    -39, -45, -49, -50, -51, -51, -52, -52, -52, -52, -52, -52, -52, -52, -52, -52, -52, -52,
    -52, -52, -52, -52, -52, -52, -52, -52, -52, -52, -52, -54, -69, -70, -66, -69, -71, -74,
    -75, -78, -78, -80, -80, -81, -81, -81, -82, -82, -82, -82, -82, -82, -82, -82, -82, -82,
    -82, -82, -82, -82, -82, -82, -82, -82, -83, -98, -114, -120, -124, -125, -127, -127, -127,
    -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127, -127,
    -127, -127, -127, -127, -127, -124, -109, -89, -59,
)

_G = (
    10, 40, 63, 80, 91, 98, 101, 102, 102, 100, 97, 92, 89, 86, 86, 87, 90, 92, 95, 96, 96, 95,
    93, 91, 89, 88, 89, 90, 91, 93, 94, 94, 94, 93, 91, 90, 89, 89, 89, 90, 91, 92, 93, 93, 92,
    91, 90, 90, 89, 89, 89, 90, 91, 91, 91, 91, 91, 90, 90, 89, 89, 89, 90, 90, 90, 90, 91, 90,
    90, 90, 89, 89, 89, 89, 89, 90, 90, 90, 90, 90, 89, 89, 89, 89, 89, 89, 89, 89, 89, 89, 89,
    89, 89, 89, 89, 88, 88, 88, 88, 88, 88, 88, 89, 89, 89, 89, 89, 89, 89, 88, 88, 87, 87, 87,
    88, 88, 89, 89, 89, 89, 88, 87, 86, 86, 86, 86, 88, 89, 90, 91, 91, 89, 86, 83, 81, 81, 83,
    89, 96, 102, 105, 101, 90, 72, 48, 21, -6, -31, -53, -74, -92, -107, -119, -127, -127, -127,
    -127, -125, -121, -119, -118, -118, -120, -121, -122, -123, -123, -122, -122, -121, -120,
    -120, -120, -121, -121, -121, -121, -121, -121, -121, -121, -121, -121, -121, -121, -121,
    -121, -121, -121, -121, -121, -121, -121, -121, -121, -121, -120, -120, -120, -120, -120,
    -120, -120, -121, -121, -121, -121, -120, -120, -119, -119, -119, -119, -119, -120, -121,
    -121, -121, -121, -120, -119, -119, -118, -118, -118, -119, -120, -121, -121, -121, -121,
    -120, -118, -117, -116, -117, -117, -119, -121, -122, -123, -122, -120, -117, -114, -113,
    -113, -116, -123, -125, -125, -125, -122, -103, -74, -40,
)

_H = (
    1, 3, 4, 5, 7, 7, 8, 8, 9, 8, 20, 40, 48, 51, 49, 45, 40, 36, 32, 27, 27, 33, 41, 46, 47, 44,
    41, 36, 32, 27, 25, 20, 27, 59, 76, 83, 83, 77, 70, 62, 73, 90, 94, 91, 84, 76, 67, 61, 87,
    111, 116, 113, 104, 93, 80, 77, 82, 92, 95, 91, 85, 78, 69, 59, 50, 38, 26, 25, 27, 25, 23,
    20, 17, 14, 12, 13, 14, 19, 49, 83, 94, 97, 89, 81, 69, 73, 103, 115, 113, 104, 91, 78, 66,
    55, 46, 37, 30, 27, 42, 58, 61, 59, 53, 46, 38, 31, 24, 18, 14, 9, 6, 3, 1, 0, 8, 35, 52,
    56, 55, 49, 42, 35, 28, 22, 16, 16, 31, 38, 39, 36, 31, 26, 20, 16, 13, 18, 24, 25, 23, 21,
    16, 11, -6, -27, -37, -40, -40, -38, -35, -31, -28, -24, -22, -19, -21, -50, -72, -78, -77,
    -71, -67, -90, -113, -114, -109, -98, -87, -75, -65, -55, -47, -50, -74, -105, -124, -123,
    -115, -102, -105, -116, -112, -104, -91, -79, -66, -71, -82, -80, -75, -66, -58, -53, -54,
    -56, -60, -64, -71, -101, -124, -127, -120, -108, -93, -79, -65, -72, -86, -85, -79, -70,
    -60, -50, -41, -43, -60, -68, -67, -61, -54, -46, -37, -32, -27, -28, -34, -33, -27, -21,
    -16, -14, -25, -47, -56, -57, -53, -47, -40, -33, -27, -22, -17, -13, -10, -8, -6, -8, -18,
    -23, -23, -21, -18, -14, -11, -7, -4, -2,
)

_I = (
    1, 2, 2, 3, 4, 5, 6, 7, 8, 9, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 19, 20, 20, 21, 22, 23,
    24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, 34, 35, 37, 39, 41, 43, 44, 46, 47, 49, 50, 52,
    53, 55, 56, 57, 59, 60, 62, 63, 65, 66, 67, 69, 70, 71, 73, 74, 75, 77, 78, 80, 81, 82, 83,
    85, 86, 88, 89, 90, 91, 93, 94, 95, 96, 98, 99, 100, 101, 103, 104, 105, 107, 108, 109,
    110, 112, 112, 114, 114, 117, 116, 120, 117, 127, 105, 58, 61, 57, 56, 53, 51, 48, 44, 41,
    37, 34, 29, 26, 21, 18, 14, 10, 6, 2, -2, -6, -11, -14, -19, -23, -27, -31, -35, -40, -44,
    -48, -52, -57, -61, -66, -70, -74, -78, -83, -87, -92, -96, -102, -107, -101, -96, -92,
    -89, -87, -85, -84, -82, -81, -80, -79, -79, -78, -77, -76, -76, -75, -74, -74, -73, -72,
    -72, -71, -71, -70, -69, -69, -68, -67, -67, -66, -65, -64, -64, -63, -62, -62, -61, -60,
    -60, -59, -58, -57, -57, -56, -55, -54, -54, -53, -52, -51, -51, -50, -49, -48, -48, -47,
    -46, -45, -45, -44, -43, -42, -41, -41, -40, -39, -38, -37, -37, -36, -35, -34, -33, -32,
    -32, -31, -30, -29, -28, -27, -27, -26, -25, -24, -23, -22, -21, -21, -20, -19, -18, -17,
    -16, -16, -14, -14, -13, -12, -10, -5, -5, -5, -4, -3, -3, -2, -1, -1,
)

_TABLES: dict[Waveform, tuple[int, ...]] = {
    Waveform.SINE: _SINE,
    Waveform.RAMP: _RAMP,
    Waveform.TRIANGLE: _TRIANGLE,
    Waveform.SQUARE: _SQUARE,
    Waveform.NOISE: _NOISE,
    Waveform.SAW: _SAW,
    Waveform.A: _A,
    Waveform.B: _B,
    Waveform.C: _C,
    Waveform.D: _D,
    Waveform.E: _E,
    Waveform.F: _F,
    Waveform.G: _G,
    Waveform.H: _H,
    Waveform.I: _I,
}


def wavetable(wave: int) -> tuple[int, ...]:
    """Return the signed 8-bit samples of one cycle of the given wave.

    Any wave number that names no known shape selects the I table, as the
    synthesizer's wave selector does.
    """
    try:
        return _TABLES[Waveform(wave)]
    except ValueError:
        return _I