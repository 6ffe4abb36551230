from ..parsing import parse_out_note_names, note_split, is_natural_note_name, is_valid_note_name, german_name
from .testing_tools import compare

def test_note_name_parsing():
    compare(parse_out_note_names('CDE♭FGA♭B♭'), ['C', 'D', 'E♭', 'F', 'G', 'A♭', 'B♭'])
    compare(parse_out_note_names('F - G - A - Bb'), ['F', 'G', 'A', 'Bb'])
    compare(parse_out_note_names('C#,D#,F'), ['C#', 'D#', 'F'])
    compare(parse_out_note_names('CXY', graceful_fail=True), False)

    compare(note_split('F#m'), ('F#', 'm'))
    compare(note_split('B minor'), ('B', 'minor'))
    compare(note_split('Xm', graceful_fail=True), False)

def test_note_name_checks():
    compare(is_valid_note_name('Eb'), True)
    compare(is_valid_note_name('eb'), False)
    compare(is_valid_note_name('eb', case_sensitive=False), True)
    compare(is_valid_note_name(''), False)

    # only plain letters count as natural names, even where they sound the same:
    compare(is_natural_note_name('F'), True)
    compare(is_natural_note_name('F♮'), True)
    compare(is_natural_note_name('F#'), False)
    compare(is_natural_note_name('Cb'), False)
    compare(is_natural_note_name('E#'), False)

def test_german_names():
    compare(german_name(11, prefer_sharps=True), 'H')
    compare(german_name(10, prefer_sharps=False), 'B')
    compare(german_name(10, prefer_sharps=True), 'Ais')
    compare(german_name(3, prefer_sharps=False), 'Es')
    compare(german_name(6, prefer_sharps=True), 'Fis')
    compare(german_name(0, prefer_sharps=False), 'C')

def unit_test():
    test_note_name_parsing()
    test_note_name_checks()
    test_german_names()
