### names and aliases for common guitar tunings, lowest string first.
### a tuning is written as the note names its open strings are tuned to;
### new tunings (or aliases for existing ones) can be freely added here.

tuning_note_names = {
       'standard': ('E',  'A',  'D',  'G',  'B',  'E'),
      'half-step': ('Eb', 'Ab', 'Db', 'Gb', 'Bb', 'Eb'), # the GnR tuning
          'dropD': ('D',  'A',  'D',  'G',  'B',  'E'),
    'doubleDropD': ('D',  'A',  'D',  'G',  'B',  'D'),
          'dropC': ('C',  'G',  'C',  'F',  'A',  'D'),
         'celtic': ('D',  'A',  'D',  'G',  'A',  'D'), # openDsus4, better known as DADGAD
          'openD': ('D',  'A',  'D',  'F#', 'A',  'D'),
          'openG': ('D',  'G',  'D',  'G',  'B',  'D'),
          'openE': ('E',  'B',  'E',  'G#', 'B',  'E'),
          'openC': ('C',  'G',  'C',  'G',  'C',  'E'),
    }

# other names that each tuning is known by:
tuning_aliases = {
       'standard': ['Standard', 'EADGBE', 'eadgbe'],
      'half-step': ['Half Step Down', 'Eb standard'],
          'dropD': ['Drop D', 'dropd', 'drop D'],
    'doubleDropD': ['Double Drop D', 'double drop D'],
          'dropC': ['Drop C', 'dropc', 'drop C'],
         'celtic': ['DADGAD', 'dadgad', 'openDsus4'],
          'openD': ['Open D', 'opend', 'open D'],
          'openG': ['Open G', 'openg', 'open G'],
          'openE': ['Open E', 'opene', 'open E'],
          'openC': ['Open C', 'openc', 'open C'],
    }

# capo positions offered to the user (a capo above the 12th fret is not much use):
capo_positions = tuple(range(13))
