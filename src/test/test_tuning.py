import pytest

from ..tuning import Tuning, tunings, tuning_names
from ..config.def_tunings import tuning_note_names, capo_positions
from ..guitar import Guitar
from .testing_tools import compare, log

def test_tunings(verbose=False):
    log.verbose = verbose

    std = Tuning()
    compare(std.pitch_classes, (4, 9, 2, 7, 11, 4))
    compare(std.note_names, ['E', 'A', 'D', 'G', 'B', 'E'])
    compare((std.name, std.num_strings, len(std)), ('standard', 6, 6))
    compare(str(std), '‹EADGBE›')

    compare(Tuning('EADGBE'), std)
    compare(Tuning('E A D G B E'), std)
    compare(Tuning([4, 9, 2, 7, 11, 4]), std)
    compare(Tuning(['E', 'A', 'D', 'G', 'B', 'E']), std)
    compare(Tuning(std), std)
    compare(std == (4, 9, 2, 7, 11, 4), True)

    compare(Tuning('DADGAD').name, 'celtic')
    compare(Tuning('Drop D').pitch_classes, (2, 9, 2, 7, 11, 4))
    compare(Tuning('openD').note_names, ['D', 'A', 'D', 'F#', 'A', 'D'])
    compare(Tuning('DGDGBD').name, 'openG')
    compare(Tuning('BEADGBE').name, 'BEADGBE')

    # tunings written with flats are displayed with flats:
    half = Tuning('Eb Ab Db Gb Bb Eb')
    compare(half.note_names, ['Eb', 'Ab', 'Db', 'Gb', 'Bb', 'Eb'])
    compare(half.name, 'half-step')

    compare(std.with_capo(2), (6, 11, 4, 9, 1, 6))
    compare(std.with_capo(0), std.pitch_classes)
    compare(std.follows_standard_intervals(), True)
    compare(half.follows_standard_intervals(), True)
    compare(Tuning('dropD').follows_standard_intervals(), False)

    compare('G' in std, True)
    compare(1 in std, False)
    compare(list(std)[0], 4)
    compare(std[-1], 4)
    compare(len({Tuning('standard'), Tuning('EADGBE')}), 1)

    # every named tuning and alias is available:
    compare(set(tunings.keys()), set(tuning_note_names.keys()))
    for name, canonical in tuning_names.items():
        compare(Tuning(name), tunings[canonical])

    with pytest.raises(TypeError):
        Tuning(5)
    with pytest.raises(ValueError):
        Tuning('XYZ')
    with pytest.raises(ValueError):
        Tuning([])

def test_capo_positions(verbose=False):
    log.verbose = verbose

    compare(capo_positions, tuple(range(13)))
    for capo in capo_positions:
        compare(Guitar(capo=capo).open_strings, Tuning().with_capo(capo))
