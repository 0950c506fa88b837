import pytest

from ..notes import pitch_class, note_name, note_names, spelling_preference, is_natural, is_pitch_class, transpose
from .testing_tools import compare, log

def test_pitch_classes(verbose=False):
    log.verbose = verbose

    compare(pitch_class('C'), 0)
    compare(pitch_class('C#'), 1)
    compare(pitch_class('Db'), 1)
    compare(pitch_class('E♭'), 3)
    compare(pitch_class('B#'), 0)
    compare(pitch_class('Cb'), 11)
    compare(pitch_class('F##'), 7)
    compare(pitch_class(7), 7)
    compare(pitch_class('c', case_sensitive=False), 0)

    with pytest.raises(ValueError):
        pitch_class('H')
    with pytest.raises(ValueError):
        pitch_class('c')
    with pytest.raises(ValueError):
        pitch_class(12)
    with pytest.raises(TypeError):
        pitch_class(True)
    with pytest.raises(TypeError):
        pitch_class(1.0)

    compare(is_pitch_class(11), True)
    compare(is_pitch_class(-1), False)
    compare(is_pitch_class(False), False)

def test_note_names(verbose=False):
    log.verbose = verbose

    compare(note_name(0), 'C')
    compare(note_name(1), 'C#')
    compare(note_name(1, prefer_sharps=False), 'Db')
    compare(note_name(10), 'A#')
    compare(note_names([4, 9, 2, 7, 11, 4]), ['E', 'A', 'D', 'G', 'B', 'E'])
    compare(note_names([3, 8], prefer_sharps=False), ['Eb', 'Ab'])
    with pytest.raises(ValueError):
        note_name(12)

    compare(spelling_preference('F#'), True)
    compare(spelling_preference('Bb'), False)
    compare(spelling_preference('B'), None)

    compare(is_natural(4), True)
    compare(is_natural(6), False)
    compare(transpose(11, 2), 1)
    compare(transpose(0, -1), 11)
