### removal of 'lesser' voicings: if every note of voicing A is also played
### (on the same string, at the same fret) by a richer voicing B, then A is
### dominated by B, and we keep only B.

import numpy as np

from .frets import MUTED
from .util import log

def fret_array(shapes):
    """stacks a sequence of equal-length fret tuples into a 2d integer array
    of shape (num_shapes, num_strings)"""
    if len(shapes) == 0:
        return np.zeros((0, 0), dtype=int)
    return np.array(shapes, dtype=int)

def covered_by(frets, a):
    """returns a boolean vector over all rows of 'frets', which is True
    for every row that agrees with row a on all the strings that a sounds"""
    sounded = frets[a] != MUTED
    agrees = (frets == frets[a]) | ~sounded
    return np.all(agrees, axis=1)

def is_dominated(a, b):
    """True if fret sequence a is strictly contained in fret sequence b"""
    a, b = np.asarray(a), np.asarray(b)
    a_in_b = np.all((a == MUTED) | (a == b))
    b_in_a = np.all((b == MUTED) | (b == a))
    return bool(a_in_b and not b_in_a)

def remove_dominated(shapes):
    """accepts a list of fret tuples and returns a new list, in the same order,
    without exact duplicates (the first occurrence is kept) and without
    any shape that is dominated by another one in the list."""
    # collapse duplicates, preserving order:
    unique = list(dict.fromkeys(tuple(s) for s in shapes))
    if len(unique) < 2:
        return unique

    frets = fret_array(unique)
    # contains[i, j] is True if shape j plays every note that shape i plays:
    contains = np.stack([covered_by(frets, i) for i in range(len(unique))])
    # i is dominated by j if j contains i, but i does not contain j:
    dominated_by = contains & ~contains.T
    dominated = np.any(dominated_by, axis=1)

    survivors = [shape for shape, dom in zip(unique, dominated) if not dom]
    log(f'Removed {len(shapes) - len(survivors)} of {len(shapes)} shapes as duplicates or dominated')
    return survivors
