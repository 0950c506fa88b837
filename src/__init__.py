### fretfinder: finds and ranks the ways to finger a chord on a fretted instrument.
### the engine itself is generate_voicings, and Guitar wraps it in a friendlier interface.

from .voicings import Voicing, VoicingList, generate_voicings
from .chords import ChordSpec
from .tuning import Tuning, tunings
from .guitar import Guitar, standard
from .notes import pitch_class, note_name
