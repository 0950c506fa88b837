### the voicing search: a depth-first walk over the strings of the instrument
### (lowest-pitched first), choosing one candidate fret per string and pruning
### any partial fingering that can no longer become a playable, complete chord.

from .frets import MUTED, OPEN
from .util import log, bitmask, count_bits
from . import _settings


class SearchBudget:
    """counts the candidate frets considered during a single search,
    and reports when a maximum number has been exceeded.
    one budget belongs to one call of the engine, and is never shared."""
    def __init__(self, max_iterations=None):
        if max_iterations is None:
            max_iterations = _settings.MAX_SEARCH_ITERATIONS
        if max_iterations < 0:
            raise ValueError(f'max_iterations must be non-negative, but got: {max_iterations}')
        self.max_iterations = max_iterations
        self.iterations = 0
        self.exhausted = False

    def spend(self):
        """uses up one iteration. returns True if the search may continue, False otherwise"""
        if self.exhausted:
            return False
        self.iterations += 1
        if self.iterations > self.max_iterations:
            self.exhausted = True
            return False
        return True

    def __str__(self):
        state = 'exhausted' if self.exhausted else 'ok'
        return f'SearchBudget: {self.iterations}/{self.max_iterations} ({state})'

    def __repr__(self):
        return str(self)


def within_finger_budget(shape, lowest_fret, max_fingers=None, max_above_barre=None):
    """the lowest fretted position of a shape is treated as a potential barre,
    played by a single finger. if there is one, at most max_above_barre notes
    may be fretted above it; if there isn't, at most max_fingers notes may be fretted."""
    if max_fingers is None:
        max_fingers = _settings.MAX_FINGERS
    if max_above_barre is None:
        max_above_barre = _settings.MAX_FINGERS_ABOVE_BARRE

    fretted = [f for f in shape if f > 0]
    if lowest_fret is None:
        return len(fretted) <= max_fingers
    above_barre = [f for f in fretted if f > lowest_fret]
    return len(above_barre) <= max_above_barre


def min_sounding_strings(num_intervals):
    """power chords (exactly 2 intervals) need at least 2 strings, everything else needs 3"""
    return 2 if num_intervals == 2 else 3


def search_voicings(candidates, tuning, targets, bass, min_sounding=3, budget=None,
                    max_span=None, open_max_fret=None, max_fingers=None, max_above_barre=None):
    """runs the pruned depth-first search and returns a tuple of
    (shapes, truncated), where shapes is a list of fret tuples in the order they
    were found, and truncated is True if the iteration budget ran out.

    args:
        candidates: per-string tuples of candidate frets (see frets.candidate_frets)
        tuning: pitch classes of the open (capo'd) strings
        targets: pitch classes that every accepted shape must sound
        bass: pitch class that the lowest sounding string must sound
        min_sounding: minimum number of non-muted strings in an accepted shape
        budget: a SearchBudget, created with default settings if not given
    the remaining args override the ergonomic limits in _settings."""

    if budget is None:
        budget = SearchBudget()
    if max_span is None:
        max_span = _settings.MAX_SPAN
    if open_max_fret is None:
        open_max_fret = _settings.OPEN_POSITION_MAX_FRET

    num_strings = len(candidates)
    full_mask = bitmask(targets)

    def _search(s, shape, lowest, highest, has_open, covered, sounding):
        """yields every accepted shape that extends the partial shape on string s onwards.
        all search state is passed by value"""
        if s == num_strings:
            if covered == full_mask and sounding >= min_sounding:
                yield shape
            return

        unassigned = num_strings - (s+1) # strings left after this one

        for fret in candidates[s]:
            if not budget.spend():
                return

            if fret == MUTED:
                new_covered, new_sounding = covered, sounding
            else:
                pc = (tuning[s] + fret) % 12
                # the lowest sounding string must carry the bass note:
                if sounding == 0 and pc != bass:
                    continue
                new_covered, new_sounding = covered | (1 << pc), sounding + 1

            # can the remaining strings still cover every chord tone?
            if count_bits(full_mask & ~new_covered) > unassigned:
                continue
            if new_sounding + unassigned < min_sounding:
                continue

            new_lowest, new_highest = lowest, highest
            if fret > OPEN:
                new_lowest = fret if lowest is None else min(lowest, fret)
                new_highest = fret if highest is None else max(highest, fret)
                # stay inside a box of (max_span+1) frets:
                if new_highest - new_lowest > max_span:
                    continue

            new_has_open = has_open or (fret == OPEN)
            # open strings don't mix with fretting high up the neck:
            if new_has_open and (new_highest is not None) and (new_highest > open_max_fret):
                continue

            new_shape = shape + (fret,)
            if fret > OPEN and not within_finger_budget(new_shape, new_lowest, max_fingers, max_above_barre):
                continue

            yield from _search(s+1, new_shape, new_lowest, new_highest, new_has_open, new_covered, new_sounding)

    shapes = list(_search(0, (), None, None, False, 0, 0))

    log(f'Search considered {budget.iterations} candidate frets and accepted {len(shapes)} shapes')
    if budget.exhausted:
        log(f'Search was truncated after exceeding {budget.max_iterations} iterations')
    return shapes, budget.exhausted
