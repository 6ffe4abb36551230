
############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats by default in the absence of other information.
### inside a Scale every accidental degree is spelled from the key signature
### table in config/def_keys.py, so this setting only matters for loose notes,
### e.g. "Note('C') + 1", and for the labels of black keys that are not
### in the current scale.
DEFAULT_SHARPS = True

### PREFER_UNICODE_ACCIDENTALS controls whether the default behaviour
### when printing sharp and flat signs are the normal keyboard-typable
### characters '#' and 'b' (if False)
### or the unicode characters '♯' and '♭' (if True)
PREFER_UNICODE_ACCIDENTALS = True
### both are treated as valid input options in either case,
### this only affects what the program outputs to screen

### NOTE_NAMING controls how note names are shown on the keyboard display
### and in drill feedback. must be one of 'english' or 'german'.
### under german naming, B is called H, and B-flat is called B,
### while the other accidentals take the -is / -es suffixes (Fis, Es, etc.)
NOTE_NAMING = 'english'


# pianodrill objects use little unicode MARKERS in their string methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = { 'Note': '♩',
           'Scale': '𝄢 ',
        'WhiteKey': '□',
        'BlackKey': '■',
           'Drill': '𝄞 ',
            }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = {'NoteList': ['𝄃', ' 𝄂'],
       'GradingResult': ['⟨', '⟩'],
            }

### KEYBOARD_CHARACTERS are drawn on the keys of the text keyboard display
### to show the state of each key before and after an answer is checked:
KEYBOARD_CHARACTERS = { 'white': '░',
                        'black': '▓',
                     'selected': '●',
                      'correct': '✓',
                    'incorrect': '✗',
                       'missed': '○',
                         'root': '^',
                        }


############# drill settings:

### RANDOM_SEED seeds the process-wide random source used to pick scales
### for the drill. None (default) draws fresh entropy from the OS; set it
### to an integer to make the sequence of random scales repeatable.
RANDOM_SEED = None

### KEY_COLOURS are the fill colours of keys in the matplotlib keyboard figure:
KEY_COLOURS = { 'white': 'white',
                'black': 'black',
             'selected': '#6fa8dc',
              'correct': '#6aa84f',
            'incorrect': '#cc0000',
               'missed': '#f1c232',
                }
