### this module describes the two-octave keyboard the drill is played on,
### and maps the degrees of a Scale onto its keys so that a selection of
### keys can be graded against it.

### the keyboard runs from C1 to B2: 14 white keys, indexed 0 to 13 from the left,
### and the 10 black keys between them, identified by pitch class and octave.
### every key also has a keyboard 'position': its distance in semitones
### from the leftmost C, which orders all 24 keys from left to right.

from .notes import Note, natural_notes, chromatic_sharp_notes
from .scales import MappingInvariantError
from .util import log, is_strictly_increasing
from . import _settings

from dataclasses import dataclass

NUM_OCTAVES = 2
WHITE_KEYS_PER_OCTAVE = len(natural_notes)


class KeyIdentity:
    """the identity of a single key on the keyboard.
    KeyIdentities are hashable, compare equal by which key they are,
    sort from left to right, and have a stable string id
    (e.g. 'white-3' or 'black-1-C#') for use as a UI key."""

    is_black = None # set by subclasses

    def __lt__(self, other):
        if not isinstance(other, KeyIdentity):
            raise TypeError(f'Keys can only be ordered against other keys, not {type(other)}')
        return self.position < other.position

    @property
    def name(self):
        # e.g. 'C1', 'F♯2'
        return f'{self.note.name}{self.octave}'

    def __str__(self):
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)


@dataclass(frozen=True, repr=False)
class WhiteKey(KeyIdentity):
    """a white key, identified by its index from the left of the keyboard (0 to 13)"""
    index: int

    def __post_init__(self):
        if not isinstance(self.index, int) or not (0 <= self.index < WHITE_KEYS_PER_OCTAVE * NUM_OCTAVES):
            raise ValueError(f'White key index must be an integer from 0 to {WHITE_KEYS_PER_OCTAVE * NUM_OCTAVES - 1}, but got: {self.index}')

    is_black = False

    @property
    def octave(self):
        return (self.index // WHITE_KEYS_PER_OCTAVE) + 1

    @property
    def note(self):
        return natural_notes[self.index % WHITE_KEYS_PER_OCTAVE]

    @property
    def position(self):
        return 12*(self.octave - 1) + self.note.position

    @property
    def id(self):
        return f'white-{self.index}'

    _marker = _settings.MARKERS['WhiteKey']


@dataclass(frozen=True, repr=False)
class BlackKey(KeyIdentity):
    """a black key, identified by its pitch class and its octave (1 or 2).
    the pitch class may be given in either spelling, so that
    BlackKey('B♭', 1) and BlackKey('A♯', 1) are the same key."""
    note: Note
    octave: int

    def __post_init__(self):
        note = self.note
        if isinstance(note, str):
            note = Note.from_cache(note)
        if not isinstance(note, Note):
            raise TypeError(f'Black key pitch class must be a Note or note name, but got: {type(self.note)}')
        if note.natural:
            raise ValueError(f'{note.name} is a white key, not a black key')
        if self.octave not in range(1, NUM_OCTAVES+1):
            raise ValueError(f'Black key octave must be between 1 and {NUM_OCTAVES}, but got: {self.octave}')
        # the identity of a black key does not depend on its spelling, so store it sharp-spelled:
        object.__setattr__(self, 'note', note.spelled(prefer_sharps=True))

    is_black = True

    @property
    def position(self):
        return 12*(self.octave - 1) + self.note.position

    @property
    def next_white(self):
        """index of the white key immediately to the right of this black key"""
        return (WHITE_KEYS_PER_OCTAVE * (self.octave - 1)) + natural_notes.index(self.note + 1)

    @property
    def id(self):
        return f'black-{self.octave}-{self.note.ascii_name}'

    _marker = _settings.MARKERS['BlackKey']


def key_identity(key):
    """casts a KeyIdentity, or its string id (such as 'white-3' or 'black-1-C#'),
    to a KeyIdentity"""
    if isinstance(key, KeyIdentity):
        return key
    elif isinstance(key, str):
        parts = key.split('-')
        if parts[0] == 'white' and len(parts) == 2 and parts[1].isdigit():
            return WhiteKey(int(parts[1]))
        elif parts[0] == 'black' and len(parts) == 3 and parts[1].isdigit():
            return BlackKey(parts[2], int(parts[1]))
        raise ValueError(f"'{key}' is not a valid key id, expected e.g. 'white-3' or 'black-1-C#'")
    else:
        raise TypeError(f'Expected a KeyIdentity or key id string, but got: {type(key)}')


class KeyboardLayout:
    """the fixed two-octave keyboard, starting on C: 14 white keys and 10 black keys.
    this is static reference data, instantiated once below as LAYOUT."""
    def __init__(self):
        self.num_octaves = NUM_OCTAVES
        self.white_keys = tuple(WhiteKey(i) for i in range(WHITE_KEYS_PER_OCTAVE * NUM_OCTAVES))
        self.black_keys = tuple(BlackKey(n, o) for o in range(1, NUM_OCTAVES+1)
                                               for n in chromatic_sharp_notes if not n.natural)
        # all keys from left to right:
        self.keys = tuple(sorted(self.white_keys + self.black_keys))
        self._keys_by_id = {k.id: k for k in self.keys}

    def __len__(self):
        return len(self.keys)

    def __iter__(self):
        return iter(self.keys)

    def __contains__(self, key):
        return key_identity(key).id in self._keys_by_id

    def __getitem__(self, key_id):
        """look up a key by its string id"""
        return self._keys_by_id[key_identity(key_id).id]

    def keys_of(self, note):
        """all keys (in either octave) that sound a given pitch class, left to right"""
        note = Note.from_cache(note)
        return [k for k in self.keys if k.note == note]

    def __str__(self):
        return f'KeyboardLayout({len(self.white_keys)} white keys, {len(self.black_keys)} black keys)'

    def __repr__(self):
        return str(self)

LAYOUT = KeyboardLayout()


def map_scale(scale, layout=LAYOUT):
    """places each of the 8 degrees of a scale on a specific key, and returns
    those keys as a list in degree order.

    the root goes on its white key in the first octave. every later degree goes
    on the next key of its pitch class strictly to the right of the previous
    degree's key, by tracking a 'cursor': the index of the first white key
    not yet passed over.
    raises MappingInvariantError rather than returning a partial placement."""
    degrees = scale.degrees
    root = degrees[0]
    anchors = [k for k in layout.white_keys[:WHITE_KEYS_PER_OCTAVE] if k.note == root]
    if len(anchors) != 1:
        raise MappingInvariantError(f'Scale root {root.name} has no white key in the first octave')

    placed = [anchors[0]]
    cursor = anchors[0].index + 1
    log(f'Anchored root {root.name} on {anchors[0]}')

    for d, note in enumerate(degrees[1:], start=2):
        if note.natural:
            # the first white key of this pitch class at or after the cursor:
            candidates = [k for k in layout.white_keys if k.index >= cursor and k.note == note]
            if len(candidates) == 0:
                raise MappingInvariantError(f'No white key for degree {d} ({note.name}) of {scale.name} at or after white key {cursor}')
            key = candidates[0]
            cursor = key.index + 1
        else:
            # of the black keys of this pitch class, the leftmost one that sits
            # no further left than between the previous white key and the next:
            candidates = [k for k in layout.black_keys if (k.next_white - 1) >= (cursor - 1) and k.note == note]
            if len(candidates) == 0:
                raise MappingInvariantError(f'No black key for degree {d} ({note.name}) of {scale.name} at or after white key {cursor}')
            key = min(candidates, key=lambda k: k.next_white)
            cursor = key.next_white
        log(f'Placed degree {d} ({note.name}) on {key}, cursor is now at white key {cursor}')
        placed.append(key)

    # every degree must land on its own key, moving strictly rightward:
    if len(set(placed)) != len(degrees) or not is_strictly_increasing([k.position for k in placed]):
        raise MappingInvariantError(f'Degrees of {scale.name} did not map to {len(degrees)} ascending keys: {placed}')
    return placed

def expected_keys(scale, layout=LAYOUT):
    """the set of keys that make up a correct answer for a scale"""
    return frozenset(map_scale(scale, layout))


class GradingResult:
    """the outcome of checking a selection of keys against a scale.
    correct only if the selection is exactly the expected set of keys."""
    def __init__(self, scale, expected, selected):
        self.scale = scale
        self.expected = frozenset(expected)
        self.selected = frozenset(selected)
        self.correct = (len(self.selected) == len(self.expected)) and (self.selected <= self.expected)

    @property
    def hits(self):
        """selected keys that belong to the scale"""
        return self.selected & self.expected

    @property
    def misses(self):
        """keys of the scale that were not selected"""
        return self.expected - self.selected

    @property
    def extras(self):
        """selected keys that do not belong to the scale"""
        return self.selected - self.expected

    def status(self, key):
        """how a key should be marked once the answer is checked:
        'correct', 'incorrect', 'missed', or None for keys that were
        neither selected nor expected"""
        key = key_identity(key)
        if key in self.hits:
            return 'correct'
        elif key in self.extras:
            return 'incorrect'
        elif key in self.misses:
            return 'missed'
        return None

    def answer(self, naming=None):
        """the correct answer as the drill shows it, e.g. 'F - G - A - B♭ - C - D - E'"""
        return self.scale.notes.join(' - ', naming=naming if naming is not None else _settings.NOTE_NAMING)

    def __bool__(self):
        return self.correct

    def __str__(self):
        lb, rb = self._brackets
        verdict = 'correct' if self.correct else 'incorrect'
        return f'{lb}{self.scale.name}: {verdict}, {len(self.hits)}/{len(self.expected)} keys found, {len(self.extras)} extra{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['GradingResult']


def check(scale, selected, layout=LAYOUT):
    """grades a selection of keys (KeyIdentities or their string ids)
    against a scale, and returns the full GradingResult"""
    selected_keys = set()
    for key in selected:
        key = key_identity(key)
        if key not in layout:
            raise ValueError(f'{key} is not a key on this keyboard')
        selected_keys.add(key)
    result = GradingResult(scale, expected_keys(scale, layout), selected_keys)
    log(f'Checked {len(selected_keys)} selected keys against {scale.name}: {result}')
    return result

def grade(scale, selected):
    """True if the selected keys are exactly the keys of the scale, False otherwise"""
    return check(scale, selected).correct

def display_name(key, scale=None, naming=None):
    """the label a key shows on the drill keyboard: a black key takes its
    spelling from the current scale if the scale contains it, and is
    otherwise spelled with a sharp"""
    key = key_identity(key)
    note = key.note
    if scale is not None and key.is_black:
        spelled = scale.spelling_of(note)
        if spelled is not None:
            note = spelled
    return note.display_name(naming)
