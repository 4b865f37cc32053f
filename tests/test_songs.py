from mintysynth.songs import VoicePreset, default_songs, default_voice_prefs


def test_voice_prefs_shape():
    prefs = default_voice_prefs()
    assert len(prefs) == 6
    assert all(len(song) == 4 for song in prefs)


def test_first_demo_voice():
    prefs = default_voice_prefs()
    assert prefs[0][0] == VoicePreset(0, 87, 1, 38, 64, 1, 1)
    assert prefs[0][1].midi_instrument == 26


def test_appended_song_slots_are_empty():
    prefs = default_voice_prefs()
    for song in prefs[3:]:
        for voice in song:
            assert voice == VoicePreset()


def test_songs_shape_and_note_range():
    songs = default_songs()
    assert len(songs) == 6
    for song in songs:
        assert len(song) == 4
        for voice in song:
            assert len(voice) == 16
            assert all(0 <= note <= 127 for note in voice)


def test_edit_song_plays_each_voice_reference_note():
    songs = default_songs()
    prefs = default_voice_prefs()
    for voice in range(4):
        notes = songs[2][voice]
        step = voice * 4
        assert notes[step] == prefs[2][voice].pitch
        assert sum(1 for n in notes if n) == 1


def test_results_are_independent_copies():
    songs = default_songs()
    songs[0][0][0] = 1
    prefs = default_voice_prefs()
    prefs[0][0].pitch = 1
    assert default_songs()[0][0][0] == 39
    assert default_voice_prefs()[0][0].pitch == 87


def test_demo_mod_values_mean_no_modulation():
    prefs = default_voice_prefs()
    assert {voice.mod for song in prefs[:3] for voice in song} == {64}