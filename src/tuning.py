### this module contains the Tuning class, which describes what the open strings
### of an instrument are tuned to (as pitch classes, lowest string first),
### along with lookups for the common named tunings in config/def_tunings.py

from .config.def_tunings import tuning_note_names, tuning_aliases
from .notes import pitch_class, note_name, spelling_preference, is_pitch_class
from .shapes import follows_standard_intervals
from .util import unpack_and_reverse_dict
from . import parsing, _settings

# map every name a tuning is known by back to its canonical name:
tuning_names = unpack_and_reverse_dict(tuning_aliases, include_keys=True)


class Tuning:
    """the pitch classes of an instrument's open strings, lowest-pitched string first.

    can be initialised by:
        the name of a common tuning, such as 'standard', 'dropD' or 'Open G'
        a string of note names, such as 'EADGBE' or 'D A D G A D'
        a list or tuple of note names or pitch classes, such as [4, 9, 2, 7, 11, 4]
        another Tuning object"""
    def __init__(self, tuning='standard'):
        if isinstance(tuning, Tuning):
            self.pitch_classes, self.prefer_sharps = tuning.pitch_classes, tuning.prefer_sharps
            return

        if isinstance(tuning, str):
            if tuning in tuning_names:
                notes = tuning_note_names[tuning_names[tuning]]
            else:
                notes = parsing.parse_out_note_names(tuning)
        elif isinstance(tuning, (list, tuple)):
            notes = tuning
        else:
            raise TypeError(f'Tuning must be initialised with a name, a string of notes, or a list/tuple, but got: {type(tuning)}')

        if len(notes) == 0:
            raise ValueError(f'Tuning must have at least one string')

        self.pitch_classes = tuple(pitch_class(n) for n in notes)
        # spell the strings with flats if the tuning was written with them:
        named_notes = [n for n in notes if isinstance(n, str)]
        flats = [spelling_preference(n) is False for n in named_notes]
        self.prefer_sharps = None if not any(flats) else False

    def with_capo(self, capo=0):
        """the pitch classes of the open strings when a capo is placed on some fret"""
        return tuple((pc + capo) % 12 for pc in self.pitch_classes)

    def follows_standard_intervals(self):
        """True if adjacent strings are tuned the same distance apart as in standard tuning
        (in which case the named CAGED shapes apply to it)"""
        return follows_standard_intervals(self.pitch_classes)

    @property
    def note_names(self):
        return [note_name(pc, prefer_sharps=self.prefer_sharps) for pc in self.pitch_classes]

    @property
    def name(self):
        """uses the canonical name like 'standard' or 'dropD' if defined, otherwise spells out the tuning"""
        for tuning_name, notes in tuning_note_names.items():
            if tuple(pitch_class(n) for n in notes) == self.pitch_classes:
                return tuning_name
        return ''.join(self.note_names)

    @property
    def num_strings(self):
        return len(self.pitch_classes)

    def __len__(self):
        return len(self.pitch_classes)

    def __iter__(self):
        return iter(self.pitch_classes)

    def __getitem__(self, idx):
        return self.pitch_classes[idx]

    def __contains__(self, item):
        """a Tuning 'contains' a note if one of its open strings is tuned to it"""
        if not is_pitch_class(item):
            item = pitch_class(item)
        return item in self.pitch_classes

    def __eq__(self, other):
        if isinstance(other, Tuning):
            return self.pitch_classes == other.pitch_classes
        elif isinstance(other, (list, tuple)):
            return self.pitch_classes == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self.pitch_classes)

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{"".join(self.note_names)}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Tuning']

# the common tunings, as Tuning objects:
tunings = {name: Tuning(name) for name in tuning_note_names.keys()}
