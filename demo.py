### this demo script imports the entire pianodrill namespace for easy access
### and starts a drill round. it's intended to be used interactively without
### the need to install the package properly, e.g.:  $ ipython -i demo.py

import ipdb, time

# time how long init takes for debugging purposes:
init_start_time = time.time()

from src import util, parsing, display, _settings
from src.notes import *
from src.scales import *
from src.keyboard import *
from src.drill import Drill
from src.display import Keyboard, plot_keyboard

init_end_time = time.time()
init_time = init_end_time - init_start_time
print(f'pianodrill library initialised in {init_time:.2} seconds')

drill = Drill()
print(drill.prompt)
Keyboard(drill.scale).show()
print("select keys with e.g. drill.toggle('white-3'), then call drill.check() and drill.feedback()")
