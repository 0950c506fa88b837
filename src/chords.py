### this module contains the ChordSpec class: a request for a chord, given as
### a root note, a set of intervals above that root, and an optional bass note
### (for slash chords like C/E). ChordSpecs can also be parsed from chord names.

from .config.def_chords import ChordType, chord_types, default_chord_type
from .notes import pitch_class, note_name, spelling_preference, is_pitch_class
from .util import log
from . import parsing, _settings

# lookup tables for chord types:
chord_types_by_id = {ct.id: ct for ct in chord_types}
chord_types_by_intervals = {frozenset(ct.intervals): ct for ct in chord_types}
chord_type_names = {}
for ct in chord_types:
    for name in (ct.id, ct.name, *ct.names):
        chord_type_names[name] = ct
        chord_type_names[name.replace(' ', '')] = ct


def parse_intervals(intervals):
    """validates an iterable of interval semitones and returns them as
    a sorted tuple of unique ints, always including the root (0)"""
    if isinstance(intervals, (str, bytes)) or not hasattr(intervals, '__iter__'):
        raise TypeError(f'Chord intervals must be an iterable of ints, but got: {type(intervals)}')
    parsed = set()
    for iv in intervals:
        if isinstance(iv, bool) or not isinstance(iv, int):
            raise TypeError(f'Chord intervals must be ints, but got: {iv!r} ({type(iv)})')
        if not (0 <= iv <= 11):
            raise ValueError(f'Chord intervals must be between 0 and 11 semitones, but got: {iv}')
        parsed.add(iv)
    parsed.add(0)
    return tuple(sorted(parsed))

def find_chord_type(name):
    """looks up a chord type by its suffix, symbol, alias, id or name,
    e.g. 'm7' or 'min7' or 'minor-7th' or 'Minor 7th'. the empty string is a major chord."""
    if isinstance(name, ChordType):
        return name
    if name.strip() == '':
        return chord_types_by_id[default_chord_type]
    for candidate in (name, name.strip(), name.replace(' ', '')):
        if candidate in chord_type_names:
            return chord_type_names[candidate]
    raise ValueError(f'Unrecognised chord type: {name!r}')


class ChordSpec:
    """a chord in the abstract: which pitch classes should sound, and which
    of them should be in the bass. initialised by:
        a root note (name or pitch class),
        intervals above that root (ints from 0 to 11, the root itself is implied),
        and optionally a bass note (name or pitch class) for slash chords."""
    def __init__(self, root, intervals=None, bass=None, prefer_sharps=None):
        if isinstance(root, str) and prefer_sharps is None:
            prefer_sharps = spelling_preference(root)
        self.prefer_sharps = prefer_sharps

        self.root = pitch_class(root)

        if intervals is None:
            intervals = chord_types_by_id[default_chord_type].intervals
        elif isinstance(intervals, (str, ChordType)):
            # a chord type given by name, e.g. 'm7':
            intervals = find_chord_type(intervals).intervals
        self.intervals = parse_intervals(intervals)

        self.bass = None if bass is None else pitch_class(bass)
        if self.bass == self.root:
            # C/C is just C
            self.bass = None

    @classmethod
    def from_name(cls, name):
        """parses a chord name like 'C', 'F#m7', 'Bbmaj9' or 'Am/G' into a ChordSpec"""
        if not isinstance(name, str):
            raise TypeError(f'Chord name must be a string, but got: {type(name)}')
        root_name, rest = parsing.note_split(name.strip())

        bass_name = None
        if '/' in rest:
            # careful: '6/9' is a chord type, not a slash chord
            quality, after_slash = rest.rsplit('/', 1)
            if parsing.is_valid_note_name(after_slash.strip()):
                rest, bass_name = quality, after_slash.strip()

        chord_type = find_chord_type(rest)
        log(f'Parsed chord name {name!r} as root={root_name}, type={chord_type.id}, bass={bass_name}')
        return cls(root_name, chord_type.intervals, bass=bass_name)

    @property
    def effective_bass(self):
        """the pitch class that must be the lowest sounding note"""
        return self.root if self.bass is None else self.bass

    @property
    def targets(self):
        """every pitch class this chord must sound, including a slash bass"""
        pcs = {(self.root + iv) % 12 for iv in self.intervals}
        pcs.add(self.effective_bass)
        return frozenset(pcs)

    @property
    def is_power_chord(self):
        return len(self.intervals) == 2

    @property
    def is_slash_chord(self):
        return self.bass is not None

    @property
    def chord_type(self):
        """the named ChordType with these intervals, or None if there isn't one"""
        return chord_types_by_intervals.get(frozenset(self.intervals), None)

    @property
    def root_name(self):
        return note_name(self.root, prefer_sharps=self.prefer_sharps)

    @property
    def bass_name(self):
        return None if self.bass is None else note_name(self.bass, prefer_sharps=self.prefer_sharps)

    @property
    def name(self):
        """full name of this chord, e.g. 'C Major / E'"""
        ct = self.chord_type
        quality = ct.name if ct is not None else '{' + ','.join([str(iv) for iv in self.intervals]) + '}'
        bass_str = f' / {self.bass_name}' if self.bass is not None else ''
        return f'{self.root_name} {quality}{bass_str}'

    @property
    def formula(self):
        ct = self.chord_type
        return ct.formula if ct is not None else ' - '.join([str(iv) for iv in self.intervals])

    def transpose(self, semitones):
        """returns a new ChordSpec moved up by some number of semitones"""
        new_bass = None if self.bass is None else (self.bass + semitones) % 12
        return ChordSpec((self.root + semitones) % 12, self.intervals, bass=new_bass, prefer_sharps=self.prefer_sharps)

    def __add__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.transpose(other)
        raise TypeError(f'ChordSpec can only be transposed by adding an int, not: {type(other)}')

    def __sub__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.transpose(-other)
        raise TypeError(f'ChordSpec can only be transposed by subtracting an int, not: {type(other)}')

    def __contains__(self, item):
        """a ChordSpec contains the pitch classes (or note names) that it targets"""
        if not is_pitch_class(item):
            item = pitch_class(item)
        return item in self.targets

    def __eq__(self, other):
        if not isinstance(other, ChordSpec):
            return NotImplemented
        return (self.root, self.intervals, self.bass) == (other.root, other.intervals, other.bass)

    def __hash__(self):
        return hash((self.root, self.intervals, self.bass))

    def __str__(self):
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    _marker = _settings.MARKERS['ChordSpec']
