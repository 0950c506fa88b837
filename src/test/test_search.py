from ..search import SearchBudget, search_voicings, within_finger_budget, min_sounding_strings
from ..frets import candidate_frets, MUTED
from .testing_tools import compare, log

standard_pcs = (4, 9, 2, 7, 11, 4)
c_major = {0, 4, 7}

def test_budget(verbose=False):
    log.verbose = verbose

    budget = SearchBudget(2)
    compare(budget.spend(), True)
    compare(budget.spend(), True)
    compare(budget.exhausted, False)
    compare(budget.spend(), False)
    compare(budget.exhausted, True)
    # once exhausted, stays exhausted:
    compare(budget.spend(), False)
    compare(budget.iterations, 3)

def test_rules(verbose=False):
    log.verbose = verbose

    compare(within_finger_budget((-1, 3, 2, 0, 1, 0), 1), True)
    # a barre with three fingers above it:
    compare(within_finger_budget((1, 3, 3, 2, 1, 1), 1), True)
    # a barre with four fingers above it:
    compare(within_finger_budget((1, 3, 3, 2, 2, 1), 1), False)
    compare(within_finger_budget((0, 0, 0, 0, 0, 0), None), True)

    compare(min_sounding_strings(2), 2)
    compare(min_sounding_strings(3), 3)
    compare(min_sounding_strings(5), 3)

def test_search(verbose=False):
    log.verbose = verbose

    cands = candidate_frets(standard_pcs, 0, c_major)
    shapes, truncated = search_voicings(cands, standard_pcs, c_major, 0)
    compare(truncated, False)
    compare((-1, 3, 2, 0, 1, 0) in shapes, True)
    compare((8, 10, 10, 9, 8, 8) in shapes, True)
    # E in the bass is not allowed for a plain C chord:
    compare((0, 3, 2, 0, 1, 0) in shapes, False)
    compare((-1, 3, 5, 5, 5, 3) in shapes, True)
    # but a stretch across six frets is not:
    compare((-1, 3, 5, 5, 5, 8) in shapes, False)
    # and neither are open strings alongside high frets:
    compare((-1, 3, 2, 0, 1, 8) in shapes, False)

    for shape in shapes:
        sounded = [(standard_pcs[s] + f) % 12 for s, f in enumerate(shape) if f != MUTED]
        compare(set(sounded), c_major)
        compare(sounded[0], 0)
        compare(len(sounded) >= 3, True)
        fretted = [f for f in shape if f > 0]
        if len(fretted) > 0:
            compare(max(fretted) - min(fretted) <= 3, True)
            if 0 in shape:
                compare(max(fretted) <= 4, True)

    # the same search always gives the same results in the same order:
    compare(search_voicings(cands, standard_pcs, c_major, 0)[0], shapes)

def test_truncation(verbose=False):
    log.verbose = verbose

    cands = candidate_frets(standard_pcs, 0, c_major)
    shapes, truncated = search_voicings(cands, standard_pcs, c_major, 0, budget=SearchBudget(0))
    compare((shapes, truncated), ([], True))

    budget = SearchBudget(50)
    shapes, truncated = search_voicings(cands, standard_pcs, c_major, 0, budget=budget)
    compare(truncated, True)
    compare(shapes[0], (-1, -1, -1, 5, 5, 3))
