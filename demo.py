### this demo script just imports the entire fretfinder namespace for easy access.
### it's intended to be used interactively without the need to install the package properly, e.g.
### e.g.:  $ ipython -i demo.py

import ipdb, time

# time how long init takes for debugging purposes:
init_start_time = time.time()

from src import util, parsing, display, _settings
from src.notes import *
from src.chords import *
from src.tuning import *
from src.voicings import *
from src.guitar import *

init_end_time = time.time()
init_time = init_end_time - init_start_time
print(f'fretfinder library initialised in {init_time:.2} seconds')
