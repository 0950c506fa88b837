
############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats by default in the absence of other information.
### e.g. pitch class 1 is displayed as C# if True, and as Db if False.
DEFAULT_SHARPS = True

### PREFER_UNICODE_ACCIDENTALS controls whether the default behaviour
### when printing sharp and flat signs are the normal keyboard-typable
### characters '#' and 'b' (if False)
### or the unicode characters '♯' and '♭' (if True)
PREFER_UNICODE_ACCIDENTALS = False
### both are treated as valid input options in either case,
### this only affects what the program outputs to screen


# little unicode MARKERS used in string methods to identify objects at a glance:
MARKERS = {  'Voicing': '♯ ',
           'ChordSpec': '♬ ',
            }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = { 'Guitar': ['〚', ' 〛'],
        'VoicingList': ['𝄃 ', ' 𝄂'],
             'Tuning': ['‹', '›'],
            }

### CHARACTERS are used in tab strings and tables to compactly denote certain traits
CHARACTERS = {  'muted': 'x',    # a string that is not sounded
           'fret_sep': '-',    # separates frets in tab strings that need more than one digit
          'no_shape': '',     # shown in the shape column for voicings without a shape label
             }


############# instrument settings:

### NUM_STRINGS is the string count of the reference instrument.
### tunings of any other length are rejected unless a different
### num_strings is passed to the engine explicitly.
NUM_STRINGS = 6

### PHYSICAL_FRET_LIMIT is the highest fret on the neck, counted from the nut.
### a capo on fret c leaves (PHYSICAL_FRET_LIMIT - c) frets above it.
PHYSICAL_FRET_LIMIT = 22

### SEARCH_FRET_LIMIT is the highest fret (relative to the capo) that
### the voicing search will ever consider:
SEARCH_FRET_LIMIT = 15

### the interval pattern between adjacent strings (lowest first) that
### the named CAGED shapes are defined for, i.e. EADGBE and its transpositions:
STANDARD_INTERVALS = (5, 5, 5, 4, 5)


############# ergonomic settings:
### these determine which fingerings the search treats as playable.

### MAX_SPAN is the largest allowed distance between the lowest and highest
### fretted notes of a voicing. 3 means a box of 4 consecutive frets.
MAX_SPAN = 3

### OPEN_POSITION_MAX_FRET: voicings that use open strings may not fret
### anything higher than this.
OPEN_POSITION_MAX_FRET = 4

### MAX_FINGERS is the number of fretted notes allowed when there is no barre,
### MAX_FINGERS_ABOVE_BARRE the number allowed above the lowest fretted position
### (which is assumed to be held down by a single barring finger)
MAX_FINGERS = 4
MAX_FINGERS_ABOVE_BARRE = 3


############# performance settings:

### MAX_SEARCH_ITERATIONS caps the number of candidate frets the search will
### consider in a single call. if the cap is hit, the voicings found so far are
### returned and the result is marked as truncated.
MAX_SEARCH_ITERATIONS = 250_000

### GUITAR_CACHE_SIZE is how many distinct voicing queries a Guitar object
### remembers before it starts evicting the oldest ones.
GUITAR_CACHE_SIZE = 256

VERBOSE = False
