### candidate fret enumeration: for each string, which frets could possibly
### contribute to a chord? (muting a string is always an option)

from .util import log
from . import _settings

MUTED = -1
OPEN = 0

def fret_limit(capo=0, search_limit=None, physical_limit=None):
    """the highest fret (counted from the capo) that the search will consider"""
    if search_limit is None:
        search_limit = _settings.SEARCH_FRET_LIMIT
    if physical_limit is None:
        physical_limit = _settings.PHYSICAL_FRET_LIMIT
    return max(0, min(search_limit, physical_limit - capo))

def candidate_frets(tuning, capo, targets, search_limit=None, physical_limit=None):
    """accepts a tuning (as pitch classes, with the capo already applied),
    the capo position, and the set of target pitch classes of a chord,
    and returns a tuple with one entry per string: the ascending tuple of frets
    on that string that are either muted (-1) or sound one of the targets."""
    targets = set(targets)
    max_fret = fret_limit(capo, search_limit, physical_limit)

    per_string = []
    for s, open_pc in enumerate(tuning):
        valid = [MUTED]
        if (open_pc % 12) in targets:
            valid.append(OPEN)
        for f in range(1, max_fret+1):
            if (open_pc + f) % 12 in targets:
                valid.append(f)
        per_string.append(tuple(valid))

    log(f'Candidate frets (up to fret {max_fret}): {per_string}')
    return tuple(per_string)
