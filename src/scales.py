### this module contains the Mode enumeration and the Scale class,
### along with the functions the drill uses to ask for scales:
### build_scale (by root and mode), random_scale, and all_scales.

### a Scale here is always one of fourteen: the major or natural minor scale
### on one of the seven natural notes. its degrees are spelled from the
### key signature table in config/def_keys.py, so that e.g. F major
### contains B♭ and not A♯.

from .notes import Note, NoteList, natural_notes
from .config.def_keys import key_signature_defines, sharp_order, flat_order
from .util import unpack_and_reverse_dict, log
from . import parsing, _settings

from enum import Enum
from functools import cached_property
import numpy as np


class InvalidRootError(ValueError):
    """raised when a scale is requested on a root that is not one of the seven natural notes"""

class MappingInvariantError(RuntimeError):
    """raised when a scale cannot be spelled from its key signature, or its degrees
    cannot be placed on the keyboard. either way the scale would be graded wrongly,
    so this always indicates a bug in a lookup table or interval pattern."""


class Mode(Enum):
    """the two kinds of scale the drill asks for"""
    MAJOR = 'major'
    MINOR = 'minor' # natural minor

    @property
    def steps(self):
        """the semitone distances between consecutive degrees of this mode,
        from the root up to its octave"""
        return mode_steps[self]

    @property
    def intervals(self):
        """the semitone distance of each of the 8 degrees from the root"""
        return [sum(self.steps[:i]) for i in range(len(self.steps)+1)]

    @property
    def title(self):
        return self.value.capitalize()

    @staticmethod
    def parse(name):
        """accepts a Mode, or a string that names one, e.g. 'major', 'maj', 'M',
        'minor', 'min', 'm', 'natural minor'. the empty string means major,
        as it does in a key name like 'C'."""
        if isinstance(name, Mode):
            return name
        if not isinstance(name, str):
            raise TypeError(f'Mode must be a Mode or a string, but got: {type(name)}')
        alias = name.strip()
        # 'M' and 'm' are told apart by case, everything else is case insensitive:
        if alias not in mode_aliases:
            alias = alias.lower()
        if alias not in mode_aliases:
            raise ValueError(f"'{name}' is not the name of a mode, expected major or minor")
        return mode_aliases[alias]

    def __str__(self):
        return self.value

mode_steps = {Mode.MAJOR: (2, 2, 1, 2, 2, 2, 1),
              Mode.MINOR: (2, 1, 2, 2, 1, 2, 2)}

mode_alias_names = {Mode.MAJOR: ['major', 'maj', 'M', '', 'natural major', 'ionian'],
                    Mode.MINOR: ['minor', 'min', 'm', 'natural minor', 'nat min', 'minor natural', 'aeolian']}
mode_aliases = unpack_and_reverse_dict(mode_alias_names)


def parse_key_signatures(defines):
    """reads the key signature definitions from config/def_keys.py and returns
    a dict that maps (tonic position, Mode) pairs to a dict of
    {position: spelled Note} for every accidental degree in that key"""
    signatures = {}
    for key_name, accidentals in defines.items():
        tonic_name, mode_name = parsing.note_split(key_name)
        tonic, mode = Note.from_cache(tonic_name), Mode.parse(mode_name)
        spellings = {}
        for acc_name in accidentals.split():
            acc_note = Note.from_cache(acc_name)
            spellings[acc_note.position] = acc_note
        signatures[(tonic.position, mode)] = spellings
    return signatures

key_signatures = parse_key_signatures(key_signature_defines)


def parse_root(root):
    """casts a note name or Note to one of the seven natural Notes,
    raising InvalidRootError for anything else.
    note that names like 'Cb' or 'E#' are rejected even though they
    sound the same as a natural note, since they are not spelled as one."""
    if isinstance(root, Note):
        if not root.natural:
            raise InvalidRootError(f'Scale root must be a natural note, but got: {root.name}')
        return Note.from_cache(position=root.position)
    elif isinstance(root, str):
        root_name = root.strip()
        if not parsing.is_natural_note_name(root_name):
            raise InvalidRootError(f"Scale root must be one of {', '.join(parsing.natural_note_names)}, but got: '{root}'")
        return Note.from_cache(position=parsing.note_positions[root_name])
    else:
        raise InvalidRootError(f'Scale root must be a note name or Note, but got: {type(root)}')


class Scale:
    """a major or natural minor scale on a natural root, spelled out over 8 degrees
    (root to octave) according to its conventional key signature"""
    def __init__(self, name=None, mode=None, root=None):
        """a Scale can be initialised in one of three ways:

        1. from 'name' alone, as a key name like 'F major', 'Cm', 'B minor' or just 'G',
            in which case the mode is parsed from whatever follows the root

        2. from 'name' or 'root' as a root note (a natural note name or Note),
            together with 'mode' as a Mode or mode name. (the default mode is major)

        3. from an existing Scale, which is copied."""

        self.root, self.mode = self._parse_input(name, mode, root)

        # the 8 spelled degrees, from root to octave:
        self.degrees = self._spell_degrees(self.root, self.mode)

        self._set_key_signature()

    ####### internal init subroutines:
    @staticmethod
    def _parse_input(name, mode, root):
        """returns root as a natural Note object, and mode as Mode"""
        if isinstance(name, Scale):
            # accept re-casting from another Scale:
            return name.root, name.mode

        if name is not None:
            if root is not None:
                raise ValueError(f'Scale init got a name ({name}) and a conflicting root arg ({root})')
            if isinstance(name, Note):
                root = name
            elif isinstance(name, str):
                # split out the root note from the rest of the key name:
                split = parsing.note_split(name.strip(), graceful_fail=True)
                if split is False:
                    raise InvalidRootError(f"Scale name must begin with a root note, but got: '{name}'")
                root, rest = split
                if rest != '':
                    if mode is not None:
                        raise ValueError(f'Scale init got a key name ({name}) and a conflicting mode arg ({mode})')
                    mode = rest
            else:
                raise TypeError(f'Scale init did not expect first arg of type: {type(name)}')

        if root is None:
            raise ValueError('Scale init requires a root note, either by name or by root arg')

        if mode is None:
            mode = Mode.MAJOR

        return parse_root(root), Mode.parse(mode)

    @staticmethod
    def _spell_degrees(root, mode):
        """walks the interval pattern of the mode up from the root, and spells each
        accidental degree from the key signature table.
        returns a NoteList of all 8 degrees."""
        if (root.position, mode) not in key_signatures:
            raise MappingInvariantError(f'No key signature is defined for {root.name} {mode}')
        signature = key_signatures[(root.position, mode)]

        degrees = NoteList([root])
        position = root.position
        for step in mode.steps:
            position = (position + step) % 12
            if position in parsing.natural_note_positions:
                degree_note = Note.from_cache(position=position)
            elif position in signature:
                degree_note = signature[position]
            else:
                raise MappingInvariantError(f'Key signature of {root.name} {mode} does not spell the accidental at position {position}')
            degrees.append(degree_note)

        # a correctly spelled heptatonic scale uses each note letter exactly once:
        letters = [n.letter for n in degrees[:-1]]
        if len(set(letters)) != len(letters):
            raise MappingInvariantError(f'Key signature of {root.name} {mode} spells a letter twice: {degrees}')

        log(f'Spelled {root.name} {mode} scale as: {degrees}')
        return degrees

    def _set_key_signature(self):
        """reads the accidentals of the notes inside this Scale
        and sets internal attributes reflecting its key signature"""
        self.sharps = NoteList([n for n in self.notes if not n.natural and n.prefer_sharps])
        self.flats = NoteList([n for n in self.notes if not n.natural and not n.prefer_sharps])
        self.num_sharps, self.num_flats = len(self.sharps), len(self.flats)

        # expressed as a string, in key signature order:
        sharp_str = ' '.join([n.name for l in sharp_order for n in self.sharps if n.letter == l])
        flat_str = ' '.join([n.name for l in flat_order for n in self.flats if n.letter == l])
        self.key_signature = f'{sharp_str}{flat_str}'

    ####### public properties and methods:
    @property
    def notes(self):
        """the 7 distinct notes of this scale, without the octave repeat"""
        return NoteList(self.degrees[:-1])

    @property
    def intervals(self):
        """semitone distances of every degree from the root"""
        return self.mode.intervals

    @property
    def steps(self):
        return list(self.mode.steps)

    @property
    def name(self):
        # e.g. 'F major'
        return f'{self.root.name} {self.mode}'

    def title(self, naming=None):
        """the name of this scale as the drill shows it, e.g. 'F Major'"""
        return f'{self.root.display_name(naming)} {self.mode.title}'

    def spelling_of(self, note):
        """returns this scale's own spelling of a note's pitch class,
        or None if that pitch class is not in the scale"""
        note = Note.from_cache(note)
        for n in self.notes:
            if n == note:
                return n
        return None

    @cached_property
    def parallel(self):
        """the scale of the other mode on the same root, e.g. C minor for C major"""
        other_mode = Mode.MINOR if self.mode is Mode.MAJOR else Mode.MAJOR
        return Scale(root=self.root, mode=other_mode)

    def __contains__(self, item):
        """a Note (or note name) is in a Scale if its pitch class is one of the scale's degrees"""
        if isinstance(item, str):
            item = Note.from_cache(item)
        return item in self.notes

    def __len__(self):
        return len(self.degrees)

    def __iter__(self):
        return iter(self.degrees)

    def __getitem__(self, degree):
        """indexing a Scale by degree (1 to 8) returns the note on that degree"""
        if not (1 <= degree <= len(self.degrees)):
            raise IndexError(f'{self.name} scale has degrees 1 to {len(self.degrees)}, not {degree}')
        return self.degrees[degree-1]

    def __eq__(self, other):
        if isinstance(other, Scale):
            return (self.root == other.root) and (self.mode is other.mode)
        return NotImplemented

    def __hash__(self):
        return hash((self.root.position, self.mode))

    def __str__(self):
        return f'{self._marker}{self.name} scale: {self.degrees}'

    def __repr__(self):
        return str(self)

    _marker = _settings.MARKERS['Scale']


# process-wide random source for picking drill scales:
random_source = np.random.default_rng(_settings.RANDOM_SEED)

def build_scale(root, mode):
    """builds the spelled Scale on a natural root note in the given Mode.
    raises InvalidRootError if root is not one of the seven natural notes,
    and ValueError if mode is not given."""
    root = parse_root(root)
    if mode is None:
        raise ValueError(f"build_scale requires a mode, one of: {', '.join(m.value for m in Mode)}")
    return Scale(root=root, mode=mode)

def random_scale(rng=None):
    """picks a root uniformly from the seven natural notes and a mode uniformly
    from major/minor, and builds that Scale.
    draws from the process-wide random source unless a numpy Generator is given."""
    if rng is None:
        rng = random_source
    root = natural_notes[int(rng.integers(len(natural_notes)))]
    mode = list(Mode)[int(rng.integers(len(Mode)))]
    log(f'Picked random scale: {root.name} {mode}')
    return build_scale(root, mode)

def all_scales():
    """every scale the drill can ask for: major and minor on each natural root"""
    return [build_scale(root, mode) for mode in Mode for root in natural_notes]
