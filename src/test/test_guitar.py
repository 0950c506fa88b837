import pytest

from ..guitar import Guitar, standard, dadgad, dropD
from ..chords import ChordSpec
from ..voicings import Voicing, generate_voicings
from .testing_tools import compare, log

def test_guitar(verbose=False):
    log.verbose = verbose

    compare(standard.open_strings, (4, 9, 2, 7, 11, 4))
    compare(dropD.open_strings, (2, 9, 2, 7, 11, 4))
    compare(dadgad.name, 'celtic')
    compare(str(standard), '〚Guitar: EADGBE 〛')
    compare(str(Guitar(capo=2)), '〚Guitar: EADGBE+2: F#BEAC#F# 〛')
    compare(Guitar(capo=2).open_strings, (6, 11, 4, 9, 1, 6))
    compare(standard.with_capo(3).capo, 3)
    compare(standard.max_fret, 15)

    compare('E' in standard, True)
    compare('F' in standard, False)

    compare(standard['x32010'], ['C', 'E', 'G', 'C', 'E'])
    compare(standard.fret('x32010'), [None, 0, 4, 7, 0, 4])
    compare(Guitar(capo=2).fret('x32010'), [None, 2, 6, 9, 2, 6])
    compare(dadgad['000000'], ['D', 'A', 'D', 'G', 'A', 'D'])
    compare(standard('x32010'), Voicing.from_frets((-1, 3, 2, 0, 1, 0)))

    compare(Guitar('B E A D G B E', strings=7).num_strings, 7)
    with pytest.raises(ValueError):
        Guitar('EADGBE', strings=7)
    with pytest.raises(ValueError):
        Guitar(capo=-1)
    with pytest.raises(TypeError):
        Guitar(capo='2')
    with pytest.raises(ValueError):
        standard.fret('x3201')

def test_note_locations(verbose=False):
    log.verbose = verbose

    compare(standard.locate_note('A', max_fret=5), [(0, 5), (1, 0), (3, 2), (5, 5)])
    compare(standard.locate_note(9, min_fret=1, max_fret=5), [(0, 5), (3, 2), (5, 5)])
    # two octaves of the same note on one string:
    compare(standard.locate_note('E', max_fret=12)[:2], [(0, 0), (0, 12)])

    tones = standard.chord_tones('C', max_fret=3)
    compare(tones[(1, 3)], 'C')
    compare(tones[(2, 2)], 'E')
    compare(tones[(3, 0)], 'G')
    compare(set(tones.values()), {'C', 'E', 'G'})
    compare(list(tones.keys()), sorted(tones.keys()))

def test_guitar_voicings(verbose=False):
    log.verbose = verbose

    c = standard.voicings('C')
    compare(c.best.frets, (-1, 3, 2, 0, 1, 0))
    compare(c, generate_voicings(0, [0, 4, 7], [4, 9, 2, 7, 11, 4]))
    compare(standard.voicings(ChordSpec('C')), c)
    compare(standard.voicings('C', 'major'), c)
    compare(standard.voicings(0, [4, 7]), c)
    compare(standard.best_voicing('C'), c.best)

    # the bass can be given separately, or in the chord name:
    compare(standard.voicings('C', bass='E'), standard.voicings('C/E'))
    compare(standard.voicings('C/E').best.frets[0], 0)

    # results are cached, but each call gets its own list:
    c.clear()
    compare(len(standard.voicings('C')) > 0, True)

    compare(standard.voicings('C', max_iterations=50).truncated, True)

    # the capo moves the voicings, not the chord:
    capo_c = Guitar(capo=5).voicings('C')
    for v in capo_c:
        compare(v.pitch_classes(standard.open_strings, capo=5), {0, 4, 7})

    compare(dropD.best_voicing('D').frets[0], 0)
