#### string parsing functions
from .util import unpack_and_reverse_dict
from . import _settings
import string

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮', 'N'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

if _settings.PREFER_UNICODE_ACCIDENTALS:
    fl = flat = '♭'
    sh = sharp = '♯'
    nat = '♮'
else:
    fl = flat = 'b'
    sh = sharp = '#'
    nat = 'N'

def is_accidental(char):
    if len(char) == 0:
        raise ValueError("'' is technically not an accidental but this is an edge case")
    return (char in accidental_offsets.keys())


################### note names
natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

# map every spelling of every note to its pitch class (where C is 0),
# including double sharps/flats and enharmonics like E# and Cb:
note_positions = {}
note_names_by_accidental = {c: {} for c in accidental_offsets.keys()} # dict of acc: (dict of position: name of the note in that position by that acc)

for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            acc_note_name = f'{n}{acc}' # e.g C# or D𝄫
            acc_position = (natural_positions[n] + offset) % 12
            note_positions[acc_note_name] = acc_position
            note_names_by_accidental[acc][acc_position] = acc_note_name

# now the preferred name of each pitch class, by sharp/flat preference:
preferred_note_names = {}
for preference in fl, sh:
    acc_notes = note_names_by_accidental[preference]
    nat_notes = note_names_by_accidental[''] # all the white notes
    # use natural names for white notes, and the preferred accidental for black notes:
    preferred_note_names[preference] = [nat_notes[p] if p in nat_notes else acc_notes[p] for p in range(12)]

natural_note_positions = set(natural_positions.values())


################### note name parsing functions:

def is_valid_note_name(name: str, case_sensitive=True):
    """returns True if string can be read as a note name,
    and False if it cannot"""
    if not isinstance(name, str) or not (0 < len(name) < 4):
        return False
    if not case_sensitive:
        # force first char to upper case and rest to lower, in case we've been
        # given e.g. lowercase 'c' or 'eb', which are valid if not case_sensitive
        name = name[0].upper() + name[1:].lower()
    return name in note_positions


def begins_with_valid_note_name(name: str):
    """checks if a string contains a valid note name in its first three characters.
    returns the length of the note name found (1, 2 or 3), or False if there is none."""
    if len(name) >= 3 and is_valid_note_name(name[:3]) and is_accidental(name[1:3]):
        # three-character note (e.g. E## or Gbb)
        return 3
    if len(name) >= 2 and is_valid_note_name(name[:2]):
        # two-character note
        return 2
    elif len(name) >= 1 and is_valid_note_name(name[0]):
        return 1
    else:
        return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first one to three characters
    (like the name of a chord, e.g. F#sus4)
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 3 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def parse_out_note_names(note_string, graceful_fail=False):
    """for some string of valid note letters, of undetermined length,
    such as e.g.: 'EADGBE' or 'D A D G A D' or 'Eb-Ab-Db-Gb-Bb-Eb',
    parse out the individual note names and return them as a list of strings.
    if graceful_fail, returns False upon failure to parse, instead of error."""

    if not isinstance(note_string, str):
        raise TypeError(f'parse_out_note_names expected str input but got: {type(note_string)}')

    # try looking for obvious split chars first before attempting char-wise split:
    for char in '-, ':
        if char in note_string:
            note_list = [n for n in note_string.split(char) if n != '']
            if len(note_list) >= 2 and all([is_valid_note_name(n) for n in note_list]):
                return note_list
            # otherwise continue trying to split the string into notes as normal

    note_list = []
    # use recursive note_split to break the string apart note-by-note:
    rest = note_string.replace(' ', '')
    while len(rest) > 0:
        result = note_split(rest, graceful_fail=True)
        # catch failure:
        if result is False:
            if graceful_fail:
                return False
            else:
                raise ValueError(f'Error while parsing out note names from {note_string}: No valid note names found in {rest} (note names found so far: {note_list})')
        note_name, rest = result
        note_list.append(note_name)
    return note_list

def contains_sharp(string):
    for acc_char in '#♯𝄪':
        if acc_char in string:
            return True
    return False
def contains_flat(string):
    # only looks past the first char, since 'b' is also a note name:
    for acc_char in 'b♭𝄫':
        if acc_char in string[1:]:
            return True
    return False


################### fret parsing:

muted_chars = {'x', 'X', _settings.CHARACTERS['muted']}

def auto_split(inp, allow='', allow_numerals=True, allow_letters=True):
    """takes a string 'inp' and automatically separates it by the first char found that is
        not in the whitelist iterable 'allow'.
    'allow' should be a string of characters that are NOT to be treated as separators.
    if 'allow_numerals' is True, allow all the digit characters from 0 to 9.
    if 'allow_letters' is True, allow all the upper and lowercase English alphabetical chars."""
    whitelist = set(allow)
    if allow_numerals:
        whitelist.update(string.digits)
    if allow_letters:
        whitelist.update(string.ascii_letters)

    # move forward and find the first char not in whitelist,
    # then treat it as a sep-char (while also stripping surrounding whitespace)
    sep_char = None
    for c in inp:
        # specifically allow whitespace, to catch separators like ' - ', but look for whitespace as sep later
        if c not in whitelist and c != ' ':
            sep_char = c
            break
    if sep_char is None and ' ' in inp:
        # if no separator found yet, use whitespace if it is in the string:
        sep_char = ' '

    if sep_char is None:
        # if no separator found,
        # return input as single list item
        return [inp]
    else:
        # split along detected separator, stripping whitespace in case our sep is something like ', '
        splits = [s.strip() for s in inp.split(sep_char)]
        # omit emptystring splits (handles stacked whitespace chars in input)
        return [s for s in splits if s != '']

def parse_fret(token):
    """reads a single fret token: an int, a digit string, None, or a mute character.
    returns an int, where -1 denotes a muted string"""
    if token is None:
        return -1
    elif isinstance(token, bool):
        raise TypeError(f'Expected fret to be an int, str or None, but got a bool: {token}')
    elif isinstance(token, int):
        if token < -1:
            raise ValueError(f'Fret values must be -1 (muted) or higher, but got: {token}')
        return token
    elif isinstance(token, str):
        token = token.strip()
        if token in muted_chars:
            return -1
        elif token.isdigit():
            return int(token)
        elif token == '-1':
            return -1
        else:
            raise ValueError(f'Could not read fret token: {token!r}')
    else:
        raise TypeError(f'Expected fret to be an int, str or None, but got: {type(token)}')

def parse_frets(frets, expected_len=None):
    """accepts a tab string like 'x32010' or 'x-10-12-12-11-10',
    or a list/tuple of ints, digit strings or None objects,
    and returns a list of integers with -1 for muted strings.
    if expected_len is given, raises ValueError on a length mismatch."""
    if isinstance(frets, (list, tuple)):
        fret_list = [parse_fret(f) for f in frets]
    elif isinstance(frets, str):
        tokens = auto_split(frets.strip())
        if len(tokens) == 1:
            # no separator, so every char is a fret:
            tokens = list(tokens[0])
        fret_list = [parse_fret(t) for t in tokens]
    else:
        raise TypeError(f'Expected list, tuple or string for parse_frets input, but got {type(frets)}')

    if (expected_len is not None) and (len(fret_list) != expected_len):
        raise ValueError(f'Expected {expected_len} frets but parsed {len(fret_list)} from: {frets}')
    return fret_list
