from .notes import Note, NoteList
from .scales import Scale, Mode, build_scale, random_scale, all_scales, InvalidRootError, MappingInvariantError
from .keyboard import WhiteKey, BlackKey, KeyboardLayout, LAYOUT, key_identity, expected_keys, check, grade, GradingResult, display_name
from .drill import Drill
from .display import Keyboard, plot_keyboard
