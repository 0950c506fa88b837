### ranking of voicings, best first, by a series of playability criteria.
### each criterion only matters where all the previous ones are tied.

from .frets import MUTED, OPEN
from .notes import note_name

def fretted(frets):
    """the strictly positive (i.e. not open, not muted) frets"""
    return [f for f in frets if f > OPEN]

def num_fretted(frets):
    return len(fretted(frets))

def num_sounding(frets):
    return len([f for f in frets if f != MUTED])

def lowest_fret(frets):
    """the lowest fretted position, or 0 if nothing is fretted"""
    f = fretted(frets)
    return min(f) if len(f) > 0 else 0

def span(frets):
    """distance between the lowest and highest fretted notes"""
    f = fretted(frets)
    return (max(f) - min(f)) if len(f) > 0 else 0

def internal_mutes(frets):
    """the number of muted strings between the first and last sounding strings"""
    sounding_idxs = [i for i, f in enumerate(frets) if f != MUTED]
    if len(sounding_idxs) == 0:
        return 0
    first, last = sounding_idxs[0], sounding_idxs[-1]
    return len([f for f in frets[first:last+1] if f == MUTED])

def base_fret(frets):
    """the fret a chord diagram for these frets should start from:
    chords that stay near the nut are drawn from fret 1,
    and chords higher up the neck from their lowest fretted position"""
    low = lowest_fret(frets)
    return low if low > 2 else 1

def rank_key(voicing, root_name):
    """sort key for a voicing, where lower is better"""
    frets = voicing.frets
    return (0 if voicing.shape == root_name else 1,   # the chord's own CAGED shape, e.g. a C-shape C chord
            num_fretted(frets),                        # simpler fingerings
            lowest_fret(frets),                        # closer to the nut
            span(frets),                               # more compact
            -voicing.shape_score,                      # more shape-like
            -num_sounding(frets),                      # fuller
            internal_mutes(frets),                     # no skipped strings
            )

def rank_voicings(voicings, root):
    """returns a new list of the voicings, sorted best-first. the sort is stable,
    so voicings that tie on every criterion keep their relative order"""
    root_name = note_name(root)
    return sorted(voicings, key=lambda v: rank_key(v, root_name))
