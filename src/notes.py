### this module contains the pitch model: pure functions that map note names
### (like C, F#, Eb, B#) to pitch classes (integers from 0 to 11, where C is 0)
### and back again.

from .parsing import fl, sh
from . import parsing, _settings

chromatic_scale = tuple(range(12))

def is_pitch_class(value):
    """True for ints between 0 and 11 (inclusive), False for anything else
    (including bools, which python would otherwise treat as ints)"""
    return isinstance(value, int) and not isinstance(value, bool) and (0 <= value <= 11)

def pitch_class(note, case_sensitive=True):
    """accepts a note name such as 'C' or 'F#' or 'E♭' (or an int that is already
    a valid pitch class) and returns the pitch class as an int from 0 to 11"""
    if is_pitch_class(note):
        return note
    elif isinstance(note, bool):
        raise TypeError(f'expected str or int but received a bool to determine pitch class')
    elif isinstance(note, int):
        raise ValueError(f'Pitch classes must be between 0 and 11, but got: {note}')
    elif isinstance(note, str):
        name = note.strip()
        if not case_sensitive and len(name) > 0:
            name = name[0].upper() + name[1:].lower()
        if name not in parsing.note_positions:
            raise ValueError(f'Not a valid note name: {note!r}')
        return parsing.note_positions[name]
    else:
        raise TypeError(f'expected str or int but received {type(note)} to determine pitch class')

def note_name(pc, prefer_sharps=None):
    """returns the preferred spelling of a pitch class, e.g. 1 -> 'C#' (or 'Db' if not prefer_sharps).
    if prefer_sharps is None, falls back on the global default in _settings"""
    if not is_pitch_class(pc):
        raise ValueError(f'Pitch classes must be ints between 0 and 11, but got: {pc!r}')
    if prefer_sharps is None:
        prefer_sharps = _settings.DEFAULT_SHARPS
    return parsing.preferred_note_names[sh if prefer_sharps else fl][pc]

def spelling_preference(name):
    """infers a sharp/flat preference from how a note name was written:
    True for sharps, False for flats, None if the name is natural"""
    if parsing.contains_sharp(name):
        return True
    elif parsing.contains_flat(name):
        return False
    else:
        return None

def is_natural(pc):
    """True if this pitch class is a white note (i.e. has a plain letter name)"""
    return pc in parsing.natural_note_positions

def transpose(pc, semitones):
    """moves a pitch class up (or down, if negative) by some number of semitones"""
    return (pc + semitones) % 12

def note_names(pitch_classes, prefer_sharps=None):
    """list of preferred spellings of an iterable of pitch classes"""
    return [note_name(pc, prefer_sharps=prefer_sharps) for pc in pitch_classes]
