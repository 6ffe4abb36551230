### this module contains the Note and NoteList classes.
### Notes are abstract pitch classes in no particular octave, such as the note C,
### that also carry a spelling: the pitch class of A♯ and B♭ is the same,
### and the two compare equal, but each remembers how it was written.
### NoteLists are simply lists of Notes, with some useful methods.

from .parsing import fl, sh
from .util import log, check_all
from . import parsing, _settings


class Note:
    """a note/chroma/pitch-class defined in the abstract,
    i.e. not associated with a specific key on a keyboard,
    such as: C or D#"""
    def __init__(self, name=None, position=None, prefer_sharps=None, case_sensitive=True):
        """a Note can be initialised in one of two ways:
            1. by passing to 'name' a valid note name, such as C or D# or E♭
            2. by passing to 'position' an integer between 0 and 11 (inclusive),
                denoting a semitone offset from C.
                i.e. position 0 is C, 1 is C#, 2 is D... 11 is B

        optional args:
        'prefer_sharps':
            if True, this note will be displayed with sharps where applicable.
            if False, will be displayed with flats where applicable.
            if None (default), will infer sharp/flat preference from 'name' arg,
                or else fall back on global default (defined in _settings module)
        'case_sensitive':
            if True (default), requires note names to be capitalised and will
                throw an error otherwise.
            if False, will accept lowercase chromas like 'c#'
        """

        if isinstance(name, Note):
            # accept re-casting: just take the input note's name
            name, prefer_sharps = name.chroma, (name.prefer_sharps if prefer_sharps is None else prefer_sharps)
        elif isinstance(name, int):
            # we've been passed a position int instead of a name,
            # which is fine, silently correct:
            position = name
            name = None

        # set main object attributes from init args:
        self.chroma, self.position, self.prefer_sharps = self._parse_input(name, position, prefer_sharps, case_sensitive)
        # 'chroma' is the string denoting pitch class: ('C#', 'Db', 'E', etc.)

        # store sharp and flat names of this note in case they are needed:
        self.sharp_name = preferred_name(self.position, prefer_sharps=True)
        self.flat_name = preferred_name(self.position, prefer_sharps=False)

    #### main input/arg-parsing private method:
    @staticmethod
    def _parse_input(name, position, prefer_sharps, case_sensitive):
        # check that exactly one has been provided:
        if (name is not None) + (position is not None) != 1:
            raise ValueError("Argument to Note init must include exactly one of: name or position")

        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str or int but received {type(name)} to initialise Note object')

            if not case_sensitive:
                # cast to proper case:
                name = name.capitalize()

            if not parsing.is_valid_note_name(name):
                raise ValueError(f'{name} is not a valid note name')

            # detect if sharp or flat:
            if prefer_sharps is None:
                # if no preference is set then we infer from the name argument supplied
                if parsing.contains_sharp(name):
                    prefer_sharps = True
                elif parsing.contains_flat(name):
                    prefer_sharps = False
                else: # fallback on global default
                    prefer_sharps = _settings.DEFAULT_SHARPS

            position = parsing.note_positions[name]
        elif position is not None:
            if not isinstance(position, int) or not (0 <= position < 12):
                raise ValueError(f'Note position must be an integer between 0 and 11, but got: {position}')
            if prefer_sharps is None:
                prefer_sharps = _settings.DEFAULT_SHARPS # global default

        name = preferred_name(position, prefer_sharps=prefer_sharps)
        return name, position, prefer_sharps

    @staticmethod
    def from_cache(name=None, position=None, prefer_sharps=None):
        # efficient note init by cache of names to note objects
        if type(name) is int:
            # quietly re-parse args:
            position = name
            name = None

        if isinstance(name, Note):
            if prefer_sharps is None or prefer_sharps == name.prefer_sharps:
                # no need to fetch from cache: just return the passed object
                return name
            name = name.chroma

        # get sharp preference from note name if available:
        if (prefer_sharps is None) and isinstance(name, str):
            if parsing.contains_sharp(name):
                prefer_sharps = True
            elif parsing.contains_flat(name):
                prefer_sharps = False

        if name is not None:
            key = (name, prefer_sharps)
        elif position is not None:
            key = (position, prefer_sharps)
        else:
            raise ValueError(f'Note init from cache must include one of "name" or "position"')

        if key not in cached_notes:
            log(f'Registering note with key {key} to cache')
            if name is not None:
                cached_notes[key] = Note(name, prefer_sharps=prefer_sharps)
            else:
                cached_notes[key] = Note(position=position, prefer_sharps=prefer_sharps)
        return cached_notes[key]

    #### magic methods:
    def __add__(self, other):
        """addition with an integer is simple transposition by that many semitones,
        inheriting this note's sharp preference"""
        if isinstance(other, int):
            new_pos = (self.position + other) % 12
            return Note.from_cache(position=new_pos, prefer_sharps=self.prefer_sharps)
        else:
            raise TypeError(f'Notes can only be added with integers, not {type(other)}')

    def __sub__(self, other):
        """if 'other' is an integer, returns a new Note that is shifted down by that many semitones.
        if 'other' is another Note, return the unsigned semitone distance between them,
        with other as the root. i.e. how many steps LEFT do you have to go to find other?"""
        if isinstance(other, int):
            new_pos = (self.position - other) % 12
            return Note.from_cache(position=new_pos, prefer_sharps=self.prefer_sharps)
        elif isinstance(other, Note):
            return (self.position - other.position) % 12
        else:
            raise TypeError(f'Only integers and other Notes can be subtracted from Notes, not {type(other)}')

    ## comparison operators:
    def __eq__(self, other):
        """Enharmonic equality comparison between Notes, returns True if
        they have the same chroma (by comparing Note.position)."""
        if isinstance(other, str) and parsing.is_valid_note_name(other):
            # cast string to Note if possible
            other = Note.from_cache(other)
        if isinstance(other, Note):
            return self.position == other.position
        elif other is None:
            return False
        else:
            return NotImplemented

    def __hash__(self):
        """note hash-equivalence is based on position alone, not spelling"""
        return hash(f'Note:{self.position}')

    def __lt__(self, other):
        """lesser/greater comparison between abstract Notes treats C as the 'lowest' note,
        and B as the 'highest', following octave numbering conventions"""
        if isinstance(other, Note):
            return self.position < other.position
        else:
            raise TypeError(f'< operation for Notes only defined over other Notes, not {type(other)}')

    def __and__(self, other):
        """strict spelling comparison: True only if both notes are
        the same pitch class AND written the same way (so A♯ & B♭ is False)"""
        if isinstance(other, str):
            other = Note.from_cache(other)
        return (self == other) and (self.chroma == other.chroma)

    @property
    def name(self):
        return f'{self.chroma}'

    @property
    def ascii_name(self):
        """this note's name with keyboard-typable accidentals, e.g. 'Bb'"""
        if self.natural:
            return self.chroma
        return f"{self.chroma[0]}{'#' if self.prefer_sharps else 'b'}"

    @property
    def german_name(self):
        return parsing.german_name(self.position, self.prefer_sharps)

    def display_name(self, naming=None):
        """the name of this note in the chosen naming system,
        'english' or 'german' (by default, whichever _settings.NOTE_NAMING specifies)"""
        if naming is None:
            naming = _settings.NOTE_NAMING
        if naming == 'english':
            return self.name
        elif naming == 'german':
            return self.german_name
        else:
            raise ValueError(f"note naming must be one of 'english' or 'german', not: {naming}")

    @property
    def letter(self):
        """the natural note letter this note is spelled from, e.g. 'B' for B♭"""
        return self.chroma[0]

    #### useful public methods / properties:

    def is_natural(self):
        """True if this is a white note, False otherwise"""
        return self.position in parsing.natural_note_positions
    @property
    def natural(self):
        return self.is_natural()

    def spelled(self, prefer_sharps):
        """returns this same pitch class spelled with the given accidental preference"""
        return Note.from_cache(position=self.position, prefer_sharps=prefer_sharps)

    def __str__(self):
        # e.g. '♩C#'
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    # Note object unicode identifier:
    _marker = _settings.MARKERS['Note']


class NoteList(list):
    """List subclass that is instantianted with an iterable of Note-like objects and forces them all to Note type"""
    def __init__(self, *items):
        if len(items) == 1:
            arg = items[0]

            # if we have been passed a single string as arg, parse it out as a series of notes:
            if isinstance(arg, str):
                arg = parsing.parse_out_note_names(arg)

            # now either way we should have an iterable of note-likes:
            note_items = self._cast_notes(arg)
        else:
            # we've been passed a series of items that we can unpack
            note_items = self._cast_notes(items)

        super().__init__(note_items)

    @staticmethod
    def _cast_notes(items):
        """accepts an iterable of Note objects, or strings that cast to Note objects,
        and returns them strictly as a list of Note objects"""
        note_items = []
        for item in items:
            if isinstance(item, str):
                if parsing.is_valid_note_name(item):
                    note_items.append(Note.from_cache(item))
                else:
                    raise ValueError(f'{item} is a string but does not cast to a note name')
            elif isinstance(item, Note):
                note_items.append(item)
            else:
                raise TypeError(f'Cannot cast {type(item)} to Note')
        return note_items

    def append(self, other):
        """Cast any appendands to Notes"""
        super().append(self._cast_notes([other])[0])

    def __add__(self, other):
        """adds a scalar to each note in this list,
        or concatenates with another NoteList"""
        if isinstance(other, int):
            return NoteList([n + other for n in self])
        elif isinstance(other, NoteList):
            # concatenation with another notelist: (as with regular list)
            return NoteList(list(self) + list(other))
        else:
            raise TypeError(f"Can't add NoteList with {type(other)}")

    ### list.__contains__ suffices for membership, combined with
    ### note equivalence behaviour with strings, i.e. Note('C') == 'C'

    def __eq__(self, other):
        """enharmonic, item-wise equality with another list of notes (or note names)"""
        if isinstance(other, str):
            other = NoteList(other)
        if not isinstance(other, (list, tuple)):
            return False
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __hash__(self):
        """NoteLists hash as tuples for the purposes of scale reidentification"""
        return hash(tuple(self))

    @property
    def names(self):
        return [n.name for n in self]

    def spelled_as(self, other):
        """True if this list and another have the same length and every
        pair of notes is the same pitch class spelled the same way"""
        if isinstance(other, str):
            other = NoteList(other)
        return len(self) == len(other) and check_all([a & b for a, b in zip(self, other)], '==', True)

    def steps(self):
        """the ascending semitone distances between each consecutive pair of notes"""
        return [(b - a) for a, b in zip(self, self[1:])]

    def join(self, s, markers=False, naming='english'):
        """returns a string of the notes in this notelist joined by the specified char/s"""
        if markers:
            return s.join([str(n) for n in self])
        else:
            return s.join([n.display_name(naming) for n in self])

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.join(", ")}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['NoteList']


# get note name string from position in octave:
def preferred_name(pos, prefer_sharps=_settings.DEFAULT_SHARPS):
    """Gets the note name for a specific position according to preferred sharp/flat notation,
    or just the natural note name if a a white note"""
    name = parsing.preferred_note_names[fl][pos] if not prefer_sharps else parsing.preferred_note_names[sh][pos]
    return name

# note cache by (name, preference) and (position, preference) for efficient init:
common_note_names = set(parsing.preferred_note_names[fl] + parsing.preferred_note_names[sh])
cached_notes = {(n,s): Note(n, prefer_sharps=s) for n in common_note_names for s in [None, False, True]}
cached_notes.update({(p,s) : Note(position=p, prefer_sharps=s) for p in range(12) for s in [None, False, True]})

# predefined Note objects:
A = Note('A')
Ash, Bb = Note('A#'), Note('Bb')
B = Note('B')
C = Note('C')
Csh, Db = Note('C#'), Note('Db')
D = Note('D')
Dsh, Eb = Note('D#'), Note('Eb')
E = Note('E')
F = Note('F')
Fsh, Gb = Note('F#'), Note('Gb')
G = Note('G')
Gsh, Ab = Note('G#'), Note('Ab')

# the seven white-key pitch classes, which are the valid roots of a drill scale:
natural_notes = NoteList([C, D, E, F, G, A, B])

# all chromatic pitch classes:
chromatic_flat_notes = NoteList([C, Db, D, Eb, E, F, Gb, G, Ab, A, Bb, B])
chromatic_sharp_notes = NoteList([C, Csh, D, Dsh, E, F, Fsh, G, Gsh, A, Ash, B])