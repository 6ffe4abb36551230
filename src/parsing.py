#### string parsing functions
from .util import unpack_and_reverse_dict, log
from . import _settings

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-1: ['♭', 'b'],
                       0: ['', '♮', 'N'],
                       1: ['♯', '#']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

def accidental_value(acc):
    return accidental_offsets[acc]

if _settings.PREFER_UNICODE_ACCIDENTALS:
    fl = flat = '♭'
    sh = sharp = '♯'
    nat = '♮'
else:
    fl = flat = 'b'
    sh = sharp = '#'
    nat = 'N'

# string checking for accidental unicode characters:
def is_sharp(char):
    """returns True for accidentals that parse as sharps"""
    assert len(char) == 1, f'is_sharp should not be called on non-char strings'
    return (char in offset_accidentals[1])
def is_flat(char):
    """returns True for accidentals that parse as flats"""
    assert len(char) == 1, f'is_flat should not be called on non-char strings'
    return (char in offset_accidentals[-1])

def contains_sharp(name):
    """True if a note name (not counting its letter) contains a sharp sign"""
    return any(is_sharp(c) for c in name[1:])
def contains_flat(name):
    """True if a note name (not counting its letter) contains a flat sign"""
    return any(is_flat(c) for c in name[1:])


################### note names
natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

# map note names to keyboard positions (where C is 0)
note_positions = {} # surjective mapping of all possible note names
note_names_by_accidental = {c: {} for c in accidental_offsets.keys()} # dict of acc: (dict of position: name of the note in that position by that acc)

# build naturals, sharps and flats:
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            acc_note_name = f'{n}{acc}' # e.g C# or D♭
            acc_position = (natural_positions[n] + offset) % 12
            note_positions[acc_note_name] = acc_position
            note_names_by_accidental[acc][acc_position] = acc_note_name

# now the preferred name of each note by preference:
preferred_note_names = {}
for preference in fl, sh:
    acc_notes = note_names_by_accidental[preference]
    nat_notes = note_names_by_accidental[''] # all the white notes
    # use natural names for white notes, and the preferred accidental for black notes:
    names = [nat_notes[p] if p in nat_notes else acc_notes[p] for p in range(12)]
    preferred_note_names[preference] = names

natural_note_positions = set(natural_positions.values())

# german note naming: the natural B is called H, and its flat is called B.
# other black notes take -is for sharps and -es for flats (contracted after vowels)
german_natural_names = {'C': 'C', 'D': 'D', 'E': 'E', 'F': 'F', 'G': 'G', 'A': 'A', 'B': 'H'}
german_sharp_names = {1: 'Cis', 3: 'Dis', 6: 'Fis', 8: 'Gis', 10: 'Ais'}
german_flat_names = {1: 'Des', 3: 'Es', 6: 'Ges', 8: 'As', 10: 'B'}

def german_name(position, prefer_sharps):
    """the german name of the note at a position, spelled with the given accidental preference"""
    if position in natural_note_positions:
        english = note_names_by_accidental[''][position]
        return german_natural_names[english]
    return german_sharp_names[position] if prefer_sharps else german_flat_names[position]


def is_valid_note_name(name: str, case_sensitive=True):
    """returns True if string can be cast to a Note, and False if it cannot"""
    if not isinstance(name, str) or not (0 < len(name) < 3):
        return False
    if not case_sensitive:
        # force first char to upper case and rest to lower, in case we've been
        # given e.g. lowercase 'c' or 'eb'
        name = name[0].upper() + name[1:].lower()
    return name in note_positions

def is_natural_note_name(name: str):
    """True for the seven plain letter names (and their explicit-natural variants, like 'F♮')"""
    return is_valid_note_name(name) and (len(name) == 1 or accidental_value(name[1:]) == 0)

def begins_with_valid_note_name(name: str):
    """checks if a string contains a valid note name in its first two characters.
    returns 2 for a two-character note name, 1 for a one-character name, and False if neither."""
    if len(name) >= 2 and is_valid_note_name(name[:2]):
        # two-character note
        return 2
    elif len(name) >= 1 and is_valid_note_name(name[0]):
        return 1
    else:
        return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first one or two characters
    (like the name of a key, e.g. F#m or 'B minor')
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 2 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def parse_out_note_names(note_string, graceful_fail=False):
    """for some string of valid note letters, of undetermined length,
    such as e.g.: 'CDE♭FGA♭B♭' or 'C - D - Eb', parse out the individual notes
    and return a list of note name strings.
    if graceful_fail, returns False upon failure to parse, instead of error."""

    assert isinstance(note_string, str), f'parse_out_note_names expected str input but got: {type(note_string)}'

    note_list = []

    # try looking for obvious split chars first before attempting char-wise split:
    for char in '-, ':
        if char in note_string:
            split_list = [n.strip() for n in note_string.split(char) if n.strip() != '']
            if len(split_list) >= 2 and all(is_valid_note_name(n) for n in split_list):
                return split_list
            # otherwise continue trying to split the string into notes as normal

    # use recursive note_split to break the string apart note-by-note:
    rest = note_string.replace(' ', '').replace('-', '').replace(',', '')
    while len(rest) > 0:
        result = note_split(rest, graceful_fail=True)
        # catch failure:
        if result is False:
            if graceful_fail:
                return False
            else:
                raise ValueError(f'Error while parsing out note names from {note_string}: No valid note names found in {rest} (note names found so far: {note_list})')

        note_name, rest = result
        note_list.append(note_name)
    log(f'Parsed note names {note_list} out of string: {note_string}')
    return note_list
