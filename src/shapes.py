### classification of voicings against the named CAGED shapes,
### both exactly (to give a voicing its shape label) and fuzzily
### (to score how shape-like a voicing is, for ranking purposes).

from .config.def_shapes import Slot, shape_library, shapes_by_anchor
from .frets import MUTED
from . import _settings

# scoring weights for fuzzy shape matching:
MATCH_REWARD = 2
MISMATCH_PENALTY = 1
MIN_MATCHES = 3


def follows_standard_intervals(tuning):
    """True if the intervals between adjacent strings of this tuning are those
    of standard tuning (so that the named shapes make sense on it)"""
    steps = tuple((tuning[i+1] - tuning[i]) % 12 for i in range(len(tuning)-1))
    return steps == tuple(_settings.STANDARD_INTERVALS)


def matches_exactly(frets, shape, tuning, root):
    """True if these frets are exactly the given shape,
    anchored on a string that sounds the root"""
    anchor_fret = frets[shape.anchor]
    if anchor_fret == MUTED or (tuning[shape.anchor] + anchor_fret) % 12 != root:
        return False

    for fret, expected in zip(frets, shape.expected_frets(anchor_fret)):
        if expected is Slot.MUTED:
            if fret != MUTED:
                return False
        elif expected < 0 or fret != expected:
            # (a shape that would need a fret below the nut can't be matched at all)
            return False
    return True


def exact_shape(frets, tuning, root):
    """returns the name of the first shape in the library that these frets match exactly,
    or None if there is no such shape (or the tuning has no named shapes)"""
    if not follows_standard_intervals(tuning):
        return None
    for shape in shape_library:
        if matches_exactly(frets, shape, tuning, root):
            return shape.name
    return None


def fuzzy_score(frets, shape, anchor_fret):
    """scores frets against a shape anchored at anchor_fret. returns a tuple of
    (score, num_matches): each string that matches the shape earns MATCH_REWARD,
    and each sounded string that doesn't costs MISMATCH_PENALTY"""
    score, matches = 0, 0
    for fret, expected in zip(frets, shape.expected_frets(anchor_fret)):
        if (expected is not Slot.MUTED) and expected >= 0 and fret == expected:
            score += MATCH_REWARD
            matches += 1
        elif fret != MUTED:
            score -= MISMATCH_PENALTY
    return score, matches


def shape_score(frets, tuning, root):
    """the best fuzzy match of these frets against any shape anchored on a
    root-sounding string. shapes with fewer than MIN_MATCHES matching strings
    don't count, and if no shape counts, the score is 0"""
    if not follows_standard_intervals(tuning):
        return 0

    best = 0
    for s, fret in enumerate(frets):
        if fret == MUTED or (tuning[s] + fret) % 12 != root:
            continue
        for shape in shapes_by_anchor.get(s, ()):
            score, matches = fuzzy_score(frets, shape, fret)
            if matches >= MIN_MATCHES and score > best:
                best = score
    return best
