### the Drill class holds the state of one interactive scale-construction session:
### which scale is being asked for, which keys have been selected so far,
### and whether the current round has been checked.

from .scales import Scale, build_scale, random_scale
from .keyboard import key_identity, check, display_name, LAYOUT
from .util import log
from . import _settings


class Drill:
    """a single session of the scale drill. usage:
        d = Drill()
        print(d.prompt)        # e.g. 'Construct: F Major'
        d.toggle('white-3')    # select or deselect keys by KeyIdentity or id
        d.check()              # grade the selection, which locks the round
        print(d.feedback())
        d.new_scale()          # start another round"""
    def __init__(self, scale=None, rng=None, layout=LAYOUT):
        self.rng = rng
        self.layout = layout
        self.rounds_played = 0
        if scale is not None:
            self._start_round(Scale(scale))
        else:
            self.new_scale()

    def _start_round(self, scale):
        self.scale = scale
        self.selected = set()
        self.result = None
        self.rounds_played += 1
        log(f'Started round {self.rounds_played}: {self.scale.name}')

    def new_scale(self, root=None, mode=None):
        """starts a new round on a random scale, or on the scale given by root and mode.
        if only one of root or mode is given, the other is picked at random."""
        if root is None and mode is None:
            scale = random_scale(self.rng)
        else:
            if root is None or mode is None:
                randomised = random_scale(self.rng)
                root = randomised.root if root is None else root
                mode = randomised.mode if mode is None else mode
            scale = build_scale(root, mode)
        self._start_round(scale)
        return self.scale

    @property
    def checked(self):
        return self.result is not None

    def toggle(self, key):
        """selects a key if it is not selected, or deselects it if it is.
        returns True if the selection changed, and False once the round has been checked,
        after which the selection is locked until the next round."""
        key = key_identity(key)
        if key not in self.layout:
            raise ValueError(f'{key} is not a key on this keyboard')
        if self.checked:
            log(f'Ignored toggle of {key}: this round has already been checked')
            return False
        if key in self.selected:
            self.selected.remove(key)
            log(f'Deselected {key}')
        else:
            self.selected.add(key)
            log(f'Selected {key}')
        return True

    def clear(self):
        """deselects all keys, unless the round has been checked"""
        if self.checked:
            log('Ignored clear: this round has already been checked')
            return False
        self.selected = set()
        return True

    def check(self):
        """grades the current selection and locks the round.
        checking again returns the same result."""
        if not self.checked:
            self.result = check(self.scale, self.selected, self.layout)
        return self.result

    @property
    def prompt(self):
        return f'Construct: {self.scale.title(_settings.NOTE_NAMING)}'

    def feedback(self):
        """the verdict on a checked round, or None if the round has not been checked yet"""
        if not self.checked:
            return None
        if self.result.correct:
            return '✓ Correct!'
        return f'✗ Incorrect\nCorrect answer: {self.result.answer()}'

    def label(self, key):
        """the name the keyboard shows on a key during this round"""
        return display_name(key, self.scale)

    def __str__(self):
        state = 'checked' if self.checked else f'{len(self.selected)} keys selected'
        return f'{self._marker}Drill({self.scale.name}, {state})'

    def __repr__(self):
        return str(self)

    _marker = _settings.MARKERS['Drill']
