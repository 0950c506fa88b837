### the voicing engine: given a chord (root, intervals, optional bass),
### a tuning and a capo position, finds every reasonable way to finger that
### chord and returns them ranked from best to worst.
###
### the pipeline runs in a fixed order, and keeps no state between calls:
###   frets.candidate_frets -> search.search_voicings -> dominance.remove_dominated
###   -> shapes.exact_shape/shape_score -> ranking.rank_voicings

from dataclasses import dataclass
from typing import Optional

from .frets import MUTED, candidate_frets
from .search import SearchBudget, search_voicings, min_sounding_strings
from .dominance import remove_dominated
from .shapes import exact_shape, shape_score
from .ranking import rank_voicings, base_fret, num_fretted, num_sounding, lowest_fret, span
from .notes import is_pitch_class, note_name
from .util import log
from . import _settings


@dataclass(frozen=True)
class Voicing:
    """one way of fingering a chord: a fret for every string (lowest string first),
    where -1 means the string is muted and 0 means it is played open (from the capo).

    base_fret is the fret a chord diagram of this voicing should start from,
    shape is the name of the CAGED shape it matches exactly (if any),
    and shape_score is how closely it resembles any CAGED shape (0 if not at all)."""
    frets: tuple
    base_fret: int = 1
    shape: Optional[str] = None
    shape_score: int = 0

    @classmethod
    def from_frets(cls, frets, tuning=None, root=None):
        """builds a Voicing from a bare fret sequence, classifying its shape
        if a (capo'd) tuning and root pitch class are provided"""
        frets = tuple(frets)
        if tuning is not None and root is not None:
            return cls(frets, base_fret(frets), exact_shape(frets, tuning, root), shape_score(frets, tuning, root))
        return cls(frets, base_fret(frets))

    @property
    def num_strings(self):
        return len(self.frets)

    @property
    def num_sounding(self):
        return num_sounding(self.frets)

    @property
    def num_fretted(self):
        return num_fretted(self.frets)

    @property
    def lowest_fret(self):
        return lowest_fret(self.frets)

    @property
    def span(self):
        return span(self.frets)

    @property
    def muted_strings(self):
        return [s for s, f in enumerate(self.frets) if f == MUTED]

    @property
    def first_sounding_string(self):
        """index of the lowest string that is played, or None if all are muted"""
        for s, f in enumerate(self.frets):
            if f != MUTED:
                return s
        return None

    def pitches(self, tuning, capo=0):
        """the semitone value of each string (tuning + capo + fret), or None for muted strings.
        if tuning is given as pitch classes, so are the results (up to the added frets)"""
        return [None if f == MUTED else (tuning[s] + capo + f) for s, f in enumerate(self.frets)]

    def pitch_classes(self, tuning, capo=0):
        """the set of pitch classes this voicing sounds on the given tuning and capo"""
        return {p % 12 for p in self.pitches(tuning, capo) if p is not None}

    def absolute_frets(self, capo=0):
        """frets counted from the nut instead of from the capo"""
        return tuple(f if f == MUTED else f + capo for f in self.frets)

    def note_names(self, tuning, capo=0, prefer_sharps=None):
        return [None if p is None else note_name(p % 12, prefer_sharps=prefer_sharps) for p in self.pitches(tuning, capo)]

    @property
    def tab(self):
        """compact tab string like 'x32010', or 'x-10-12-12-11-10' if any fret needs two digits"""
        muted = _settings.CHARACTERS['muted']
        fret_strs = [muted if f == MUTED else str(f) for f in self.frets]
        if max(len(fs) for fs in fret_strs) > 1:
            return _settings.CHARACTERS['fret_sep'].join(fret_strs)
        return ''.join(fret_strs)

    def __iter__(self):
        return iter(self.frets)

    def __len__(self):
        return len(self.frets)

    def __getitem__(self, idx):
        return self.frets[idx]

    def __str__(self):
        shape_str = f' ({self.shape}-shape)' if self.shape is not None else ''
        return f'{self._marker}{self.tab}{shape_str}'

    _marker = _settings.MARKERS['Voicing']


class VoicingList(list):
    """a list of Voicings, ranked best first, that also records whether
    the search that produced it was cut short (in which case it may be missing
    some voicings that an exhaustive search would have found)"""
    def __init__(self, *items, truncated=False):
        if len(items) == 1 and not isinstance(items[0], Voicing):
            items = items[0]
        super().__init__(items)
        self.truncated = truncated

    @property
    def frets(self):
        """the fret tuples of every voicing in this list"""
        return [v.frets for v in self]

    @property
    def best(self):
        """the top-ranked voicing, or None if there are none"""
        return self[0] if len(self) > 0 else None

    def show(self, **kwargs):
        """prints these voicings as a table"""
        from .display import voicing_table
        voicing_table(self, **kwargs)

    def __str__(self):
        lb, rb = self._brackets
        trunc_str = ' (truncated)' if self.truncated else ''
        return f'{lb}{", ".join([v.tab for v in self])}{rb}{trunc_str}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['VoicingList']


def validate_inputs(root, intervals, tuning, capo, bass, num_strings):
    """raises a TypeError or ValueError describing the first problem found with
    the engine's inputs, and returns them cleaned up as
    (root, interval tuple, tuning tuple, capo, bass) if there is none"""
    for label, value in (('root', root), ('bass', bass)):
        if label == 'bass' and value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'{label} must be an int pitch class, but got: {value!r} ({type(value)})')
        if not is_pitch_class(value):
            raise ValueError(f'{label} must be a pitch class between 0 and 11, but got: {value}')

    if isinstance(intervals, (str, bytes)) or not hasattr(intervals, '__iter__'):
        raise TypeError(f'intervals must be an iterable of ints, but got: {type(intervals)}')
    intervals = tuple(intervals)
    for iv in intervals:
        if isinstance(iv, bool) or not isinstance(iv, int):
            raise TypeError(f'intervals must be ints, but got: {iv!r} ({type(iv)})')
        if not (0 <= iv <= 11):
            raise ValueError(f'intervals must be between 0 and 11 semitones, but got: {iv}')

    tuning = tuple(tuning)
    if len(tuning) != num_strings:
        raise ValueError(f'Tuning has {len(tuning)} strings, but the instrument has {num_strings}: {tuning}')
    for pc in tuning:
        if not is_pitch_class(pc):
            raise ValueError(f'Tuning must consist of pitch classes between 0 and 11, but got: {pc!r} in {tuning}')

    if isinstance(capo, bool) or not isinstance(capo, int):
        raise TypeError(f'capo must be an int, but got: {capo!r} ({type(capo)})')
    if not (0 <= capo <= _settings.PHYSICAL_FRET_LIMIT):
        raise ValueError(f'capo must be between 0 and {_settings.PHYSICAL_FRET_LIMIT}, but got: {capo}')

    return root, intervals, tuning, capo, bass


def generate_voicings(root, intervals, tuning, capo=0, bass=None, num_strings=None, max_iterations=None):
    """finds and ranks every playable voicing of a chord.

    args:
        root: pitch class (0-11, where C is 0) of the chord's root
        intervals: semitones (0-11) above the root that make up the chord, e.g. [0, 4, 7]
            for a major triad. the root itself is always included.
        tuning: pitch classes of the open strings, lowest string first, e.g. [4, 9, 2, 7, 11, 4]
        capo: fret the capo is on (0 for no capo). returned frets are counted from it.
        bass: pitch class that must be the lowest note (for slash chords), or None for the root
        num_strings: expected length of the tuning, _settings.NUM_STRINGS by default
        max_iterations: search budget, _settings.MAX_SEARCH_ITERATIONS by default

    returns a VoicingList, best voicing first, whose 'truncated' attribute is True
    if the search budget ran out before the search was complete.
    an empty VoicingList means the chord simply can't be played under these constraints."""
    if num_strings is None:
        num_strings = _settings.NUM_STRINGS
    root, intervals, tuning, capo, bass = validate_inputs(root, intervals, tuning, capo, bass, num_strings)

    effective_bass = root if bass is None else bass
    targets = {root} | {(root + iv) % 12 for iv in intervals} | {effective_bass}
    num_intervals = len(set(intervals) | {0})

    capo_tuning = tuple((pc + capo) % 12 for pc in tuning)
    log(f'Generating voicings of root={root}, intervals={intervals}, bass={bass} on tuning {tuning} with capo {capo}')

    candidates = candidate_frets(capo_tuning, capo, targets)
    budget = SearchBudget(max_iterations)
    shapes, truncated = search_voicings(candidates, capo_tuning, targets, effective_bass,
                                        min_sounding=min_sounding_strings(num_intervals),
                                        budget=budget)

    survivors = remove_dominated(shapes)
    voicings = [Voicing.from_frets(frets, capo_tuning, root) for frets in survivors]
    ranked = rank_voicings(voicings, root)

    log(f'Returning {len(ranked)} voicings' + (' (truncated search)' if truncated else ''))
    return VoicingList(ranked, truncated=truncated)
