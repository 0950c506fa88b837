from ..frets import candidate_frets, fret_limit, MUTED
from .testing_tools import compare, log

standard_pcs = (4, 9, 2, 7, 11, 4)

def test_fret_limit(verbose=False):
    log.verbose = verbose

    compare(fret_limit(0), 15)
    compare(fret_limit(7), 15)
    compare(fret_limit(10), 12)
    compare(fret_limit(22), 0)
    compare(fret_limit(0, search_limit=5), 5)
    compare(fret_limit(3, search_limit=30, physical_limit=20), 17)

def test_candidate_frets(verbose=False):
    log.verbose = verbose

    c_major = {0, 4, 7}
    cands = candidate_frets(standard_pcs, 0, c_major)
    compare(cands, ((-1, 0, 3, 8, 12, 15),
                    (-1, 3, 7, 10, 15),
                    (-1, 2, 5, 10, 14),
                    (-1, 0, 5, 9, 12),
                    (-1, 1, 5, 8, 13),
                    (-1, 0, 3, 8, 12, 15)))

    # muting is always an option, even when nothing else is:
    compare(candidate_frets((4,), 0, {0}, search_limit=3), ((MUTED,),))

    # a capo near the top of the neck leaves fewer frets to search:
    high_capo = candidate_frets(standard_pcs, 20, c_major)
    for string_cands in high_capo:
        compare(max(string_cands) <= 2, True)

    # every candidate sounds a chord tone:
    for s, string_cands in enumerate(cands):
        compare({(standard_pcs[s] + f) % 12 for f in string_cands if f != MUTED}, c_major, compare='subset')
