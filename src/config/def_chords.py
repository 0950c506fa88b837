from dataclasses import dataclass

### chord types and their names - for example, 'm7' and 'sus4' and 'add9' are defined in this module.
### new chord types (or aliases for existing types) can be freely added by following the examples below,
### where hopefully the template is self-explanatory.

@dataclass(frozen=True)
class ChordType:
    id: str               # unique identifier, e.g. 'minor-7th'
    intervals: tuple      # semitone distances from the root, each between 0 and 11
    name: str             # human-readable name, e.g. 'Minor 7th'
    formula: str          # chord factors, e.g. '1 - b3 - 5 - b7'
    suffix: str           # written after the root in a chord name, e.g. 'm7'
    symbol: str = ''      # alternative (often more compact) suffix, e.g. 'min7'
    aliases: tuple = ()   # any other names this chord goes by

    def __post_init__(self):
        # the table below is written with lists for readability, but we store tuples:
        object.__setattr__(self, 'intervals', tuple(self.intervals))
        object.__setattr__(self, 'aliases', tuple(self.aliases))

    @property
    def names(self):
        """every string that identifies this chord type when written after a root note"""
        return tuple(n for n in (self.suffix, self.symbol, *self.aliases) if n != '')

    def __str__(self):
        return f'{self.name} ({self.formula})'

### note that extended chords are written with their compound intervals folded into
### a single octave: a 9th is 2 semitones, an 11th is 5, and so on.
chord_types = (
    ChordType('major',                [0, 4, 7],          'Major',                '1 - 3 - 5',               'maj',     'M',    ('major',)),
    ChordType('minor',                [0, 3, 7],          'Minor',                '1 - b3 - 5',              'min',     'm',    ('minor',)),
    ChordType('5th',                  [0, 7],             '5th',                  '1 - 5',                   '5',       '',     ('power chord',)),
    ChordType('suspended-2nd',        [0, 2, 7],          'Suspended 2nd',        '1 - 2 - 5',               'sus2'),
    ChordType('suspended-4th',        [0, 5, 7],          'Suspended 4th',        '1 - 4 - 5',               'sus4',    'sus',  ('suspended',)),
    ChordType('7th',                  [0, 4, 7, 10],      '7th',                  '1 - 3 - 5 - b7',          '7',       '',     ('dominant 7th', 'dom7')),
    ChordType('major-7th',            [0, 4, 7, 11],      'Major 7th',            '1 - 3 - 5 - 7',           'maj7',    'M7'),
    ChordType('minor-7th',            [0, 3, 7, 10],      'Minor 7th',            '1 - b3 - 5 - b7',         'm7',      'min7'),
    ChordType('7th-flat-5',           [0, 4, 6, 10],      '7th Flat 5',           '1 - 3 - b5 - b7',         '7b5',     '',     ('dominant 7th flat 5',)),
    ChordType('7th-sharp-5',          [0, 4, 8, 10],      '7th Sharp 5',          '1 - 3 - #5 - b7',         '7#5',     '',     ('dominant 7th sharp 5',)),
    ChordType('minor-7th-flat-5th',   [0, 3, 6, 10],      'Minor 7th Flat 5th',   '1 - b3 - b5 - b7',        'm7b5',    '',     ('half diminished', 'hdim7', 'ø')),
    ChordType('minor-major-7th',      [0, 3, 7, 11],      'Minor Major 7th',      '1 - b3 - 5 - 7',          'minmaj7', 'mM7',  ('mmaj7',)),
    ChordType('7th-suspended-4th',    [0, 5, 7, 10],      '7th Suspended 4th',    '1 - 4 - 5 - b7',          '7sus4',   '',     ('dominant 7th suspended 4th',)),
    ChordType('6th',                  [0, 4, 7, 9],       '6th',                  '1 - 3 - 5 - 6',           '6'),
    ChordType('minor-6th',            [0, 3, 7, 9],       'Minor 6th',            '1 - b3 - 5 - 6',          'min6',    'm6'),
    ChordType('6th-add-9',            [0, 4, 7, 9, 2],    '6th Add 9',            '1 - 3 - 5 - 6 - 9',       '6add9',   '6/9'),
    ChordType('9th',                  [0, 4, 7, 10, 2],   '9th',                  '1 - 3 - 5 - b7 - 9',      '9'),
    ChordType('major-9th',            [0, 4, 7, 11, 2],   'Major 9th',            '1 - 3 - 5 - 7 - 9',       'maj9',    'M9'),
    ChordType('minor-9th',            [0, 3, 7, 10, 2],   'Minor 9th',            '1 - b3 - 5 - b7 - 9',     'm9',      'min9'),
    ChordType('minor-major-9th',      [0, 3, 7, 11, 2],   'Minor Major 9th',      '1 - b3 - 5 - 7 - 9',      'minmaj9', 'mM9'),
    ChordType('add-9',                [0, 4, 7, 2],       'Add 9',                '1 - 3 - 5 - 9',           'add9'),
    ChordType('minor-add-9',          [0, 3, 7, 2],       'Minor Add 9',          '1 - b3 - 5 - 9',          'madd9',   'm add9', ('minadd9',)),
    ChordType('11th',                 [0, 4, 7, 10, 2, 5], '11th',                '1 - 3 - 5 - b7 - 9 - 11', '11'),
    ChordType('major-11th',           [0, 4, 7, 11, 2, 5], 'Major 11th',          '1 - 3 - 5 - 7 - 9 - 11',  'maj11',   'M11'),
    ChordType('minor-11th',           [0, 3, 7, 10, 2, 5], 'Minor 11th',          '1 - b3 - 5 - b7 - 9 - 11', 'm11',    'min11'),
    ChordType('diminished',           [0, 3, 6],          'Diminished',           '1 - b3 - b5',             'dim',     '°',    ('o',)),
    ChordType('diminished-7th',       [0, 3, 6, 9],       'Diminished 7th',       '1 - b3 - b5 - bb7',       'dim7',    '°7',   ('o7',)),
    ChordType('diminished-major-7th', [0, 3, 6, 11],      'Diminished Major 7th', '1 - b3 - b5 - 7',         'dimM7',   '°M7'),
    ChordType('augmented',            [0, 4, 8],          'Augmented',            '1 - 3 - #5',              'aug',     '+'),
    ChordType('augmented-major-7th',  [0, 4, 8, 11],      'Augmented Major 7th',  '1 - 3 - #5 - 7',          'augM7',   '+M7'),
    )

# the chord type that a bare root (e.g. 'C' or 'F#') refers to:
default_chord_type = 'major'
