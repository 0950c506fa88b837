from functools import lru_cache

from .chords import ChordSpec
from .tuning import Tuning
from .voicings import Voicing, VoicingList, generate_voicings
from .frets import MUTED, fret_limit
from .notes import pitch_class, note_name
from .util import log
from . import parsing, _settings

### TBI: special cases for other stringed instruments?
### i.e. ukelele/banjo/mandolin tunings, with extensions for half capos etc.


@lru_cache(maxsize=_settings.GUITAR_CACHE_SIZE)
def _cached_voicings(root, intervals, tuning, capo, bass, max_iterations):
    # shared between all Guitar objects, and stored as a tuple so the cached value can't be mutated:
    result = generate_voicings(root, intervals, tuning, capo=capo, bass=bass,
                               num_strings=len(tuning), max_iterations=max_iterations)
    return tuple(result), result.truncated


class Guitar:
    def __init__(self, tuning='standard', capo=0, strings=None):
        """tuning can be one of:
        a descriptive string: standard, dropD, openE, etc.
        a string of notes like: EADGBE, DADGAD, etc.
        a list of note names or pitch classes, lowest string first
        or a Tuning object.
        if 'strings' is given, the tuning must have exactly that many strings."""

        self.tuning = Tuning(tuning)
        self.num_strings = len(self.tuning)
        if strings is not None and strings != self.num_strings:
            raise ValueError(f'Guitar was asked for {strings} strings, but tuning {self.tuning} has {self.num_strings}')

        if isinstance(capo, bool) or not isinstance(capo, int):
            raise TypeError(f'capo must be an int, but got: {type(capo)}')
        if not (0 <= capo <= _settings.PHYSICAL_FRET_LIMIT):
            raise ValueError(f'capo must be between 0 and {_settings.PHYSICAL_FRET_LIMIT}, but got: {capo}')
        self.capo = capo

    # open strings are relative to capo instead of to the nut:
    @property
    def open_strings(self):
        """pitch classes of the strings when played open (i.e. from the capo)"""
        return self.tuning.with_capo(self.capo)

    @property
    def max_fret(self):
        """the highest fret above the capo that voicings will use"""
        return fret_limit(self.capo)

    def with_capo(self, capo):
        """returns a copy of this guitar with the capo on a different fret"""
        return Guitar(self.tuning, capo=capo)

    def _parse_chord(self, chord, intervals=None, bass=None):
        """casts the various ways of describing a chord to a ChordSpec"""
        if isinstance(chord, ChordSpec):
            spec = chord
            if bass is not None:
                spec = ChordSpec(spec.root, spec.intervals, bass=bass, prefer_sharps=spec.prefer_sharps)
        elif isinstance(chord, str) and intervals is None:
            spec = ChordSpec.from_name(chord)
            if bass is not None:
                spec = ChordSpec(spec.root, spec.intervals, bass=bass, prefer_sharps=spec.prefer_sharps)
        else:
            # a root note (name or pitch class), with intervals or a chord type
            spec = ChordSpec(chord, intervals, bass=bass)
        return spec

    def voicings(self, chord, intervals=None, bass=None, max_iterations=None):
        """returns a VoicingList of the ways to play a chord on this guitar, best first.
        the chord can be given as:
            a chord name, like 'C' or 'F#m7' or 'D/F#'
            a ChordSpec object
            a root note (name or pitch class) along with a list of intervals or a chord type name
        and 'bass' optionally overrides the bass note (for slash chords)."""
        spec = self._parse_chord(chord, intervals, bass)
        if max_iterations is None:
            max_iterations = _settings.MAX_SEARCH_ITERATIONS
        log(f'Finding voicings of {spec} on {self}')
        voicings, truncated = _cached_voicings(spec.root, spec.intervals, self.open_strings_at_nut,
                                               self.capo, spec.bass, max_iterations)
        return VoicingList(list(voicings), truncated=truncated)

    def best_voicing(self, chord, intervals=None, bass=None):
        """the top-ranked voicing of a chord, or None if it can't be played"""
        return self.voicings(chord, intervals=intervals, bass=bass).best

    @property
    def open_strings_at_nut(self):
        """pitch classes of the strings without the capo"""
        return self.tuning.pitch_classes

    def fret(self, frets):
        """simulates plucking each string according to the listed fret diagram
        (counted from the capo), and returns the pitch class of each string,
        or None for muted strings."""
        fret_ints = parsing.parse_frets(frets, expected_len=self.num_strings)
        pcs = []
        for s, f in enumerate(fret_ints):
            if f == MUTED:
                pcs.append(None)
            else:
                pcs.append((self.open_strings[s] + f) % 12)
        return pcs

    def __getitem__(self, frets):
        """returns the note names sounded by a fret diagram like 'x32010', muted strings omitted"""
        return [note_name(pc, prefer_sharps=self.tuning.prefer_sharps) for pc in self.fret(frets) if pc is not None]

    def __contains__(self, item):
        """a Guitar object 'contains' a note if that note is in its open strings"""
        return pitch_class(item) in self.open_strings

    def __call__(self, frets):
        """accepts a fretting pattern and returns it as a Voicing"""
        fret_ints = parsing.parse_frets(frets, expected_len=self.num_strings)
        return Voicing.from_frets(fret_ints)

    def locate_note(self, note, min_fret=0, max_fret=None):
        """accepts a note name or pitch class and returns a list of
        (string, fret) locations where that note appears, with frets counted
        from the capo and strings indexed from 0 (the lowest string)"""
        if max_fret is None:
            max_fret = self.max_fret
        pc = pitch_class(note)
        note_locs = []
        for s, string in enumerate(self.open_strings):
            first = (pc - string) % 12 # lowest fret on this string that sounds this note
            for f in range(first, max_fret+1, 12):
                if f >= min_fret:
                    note_locs.append((s, f))
        return note_locs

    def chord_tones(self, chord, intervals=None, bass=None, min_fret=0, max_fret=None):
        """for a given chord, returns a dict that keys every (string, fret)
        location of one of its notes to the name of that note"""
        spec = self._parse_chord(chord, intervals, bass)
        cells = {}
        for pc in sorted(spec.targets):
            name = note_name(pc, prefer_sharps=spec.prefer_sharps)
            for loc in self.locate_note(pc, min_fret=min_fret, max_fret=max_fret):
                cells[loc] = name
        return dict(sorted(cells.items()))

    def show(self, chord, intervals=None, bass=None, **kwargs):
        """prints a table of the voicings of some chord"""
        spec = self._parse_chord(chord, intervals, bass)
        print(f'{spec.name} on {self}:')
        self.voicings(spec).show(capo=self.capo, **kwargs)

    #### display methods:
    @property
    def name(self):
        """uses alias like 'standard' or 'dropD' if defined, otherwise spells out the tuning"""
        return self.tuning.name

    def __str__(self):
        tuning_str = ''.join(self.tuning.note_names)
        lb, rb = self._brackets
        if self.capo == 0:
            return f'{lb}Guitar: {tuning_str}{rb}'
        else:
            capo_letters = [note_name(pc, prefer_sharps=self.tuning.prefer_sharps) for pc in self.open_strings]
            capo_str = ''.join(capo_letters)
            return f'{lb}Guitar: {tuning_str}+{self.capo}: {capo_str}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Guitar']


# some predefined common tunings:
standard = eadgbe = Guitar()
dadgad = Guitar('DADGAD')
dadgbe = dropD = dropd = Guitar('dropD')
