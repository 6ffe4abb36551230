from ..keyboard import *
from ..keyboard import map_scale
from ..scales import Scale, all_scales, MappingInvariantError
from ..notes import NoteList
from .testing_tools import compare
from types import SimpleNamespace
import pytest

W = WhiteKey

def test_layout():
    compare(len(LAYOUT.white_keys), 14)
    compare(len(LAYOUT.black_keys), 10)
    compare(len(LAYOUT), 24)
    compare([k.position for k in LAYOUT], list(range(24)))
    compare([k.next_white for k in LAYOUT.black_keys], [1, 2, 4, 5, 6, 8, 9, 11, 12, 13])
    compare(LAYOUT['black-2-Eb'], BlackKey('D#', 2))
    compare(len(LAYOUT.keys_of('Bb')), 2)

def test_key_identities():
    compare(W(3).id, 'white-3')
    compare(W(9).name, 'E2')
    compare(W(10).name, 'F2')
    compare(BlackKey('Bb', 1).id, 'black-1-A#')
    compare(BlackKey('Bb', 1), BlackKey('A#', 1))
    compare(BlackKey('C#', 1) == BlackKey('C#', 2), False)
    compare(len({BlackKey('Gb', 2), BlackKey('F#', 2)}), 1)
    compare(key_identity('black-2-Db'), BlackKey('C#', 2))
    compare(key_identity('white-13'), W(13))
    compare(W(6) < BlackKey('C#', 2), True)
    compare(BlackKey('C#', 2).position, 13)

    with pytest.raises(ValueError):
        W(14)
    with pytest.raises(ValueError):
        BlackKey('C', 1)
    with pytest.raises(ValueError):
        BlackKey('C#', 3)
    with pytest.raises(ValueError):
        key_identity('purple-1')
    with pytest.raises(TypeError):
        key_identity(5)

def test_mapping():
    compare(expected_keys(Scale('C major')), frozenset(W(i) for i in range(8)))
    compare(map_scale(Scale('F major')), [W(3), W(4), W(5), BlackKey('A#', 1), W(7), W(8), W(9), W(10)])
    compare(map_scale(Scale('C minor')), [W(0), W(1), BlackKey('D#', 1), W(3), W(4), BlackKey('G#', 1), BlackKey('A#', 1), W(7)])
    # a scale starting high up spills over into the second octave:
    compare(map_scale(Scale('B major')), [W(6), BlackKey('C#', 2), BlackKey('D#', 2), W(9),
                                          BlackKey('F#', 2), BlackKey('G#', 2), BlackKey('A#', 2), W(13)])

    for scale in all_scales():
        keys = map_scale(scale)
        compare(len(set(keys)), 8)
        compare([k.position for k in keys], sorted(k.position for k in keys))
        compare(len({k.position for k in keys}), 8)
        compare(NoteList([k.note for k in keys]), scale.degrees)

def test_mapping_failures():
    # descending degrees run off the end of the keyboard:
    backwards = SimpleNamespace(name='backwards', degrees=NoteList('C B A G F E D C'))
    with pytest.raises(MappingInvariantError):
        expected_keys(backwards)
    # a root with no white key:
    sharp_root = SimpleNamespace(name='sharp root', degrees=NoteList('C# D# F F# G# A# C C#'))
    with pytest.raises(MappingInvariantError):
        expected_keys(sharp_root)

def test_grading():
    c_major = Scale('C major')
    answer = {W(i) for i in range(8)}
    compare(grade(c_major, answer), True)
    compare(grade(c_major, answer), True)
    compare(grade(c_major, answer | {W(8)}), False)
    compare(grade(c_major, answer - {W(7)}), False)
    compare(grade(c_major, set()), False)
    # the same pitch classes an octave too high:
    compare(grade(c_major, {W(i) for i in range(7, 14)} | {W(0)}), False)

    f_major_ids = ['white-3', 'white-4', 'white-5', 'black-1-Bb', 'white-7', 'white-8', 'white-9', 'white-10']
    compare(grade(Scale('F major'), f_major_ids), True)
    compare(grade(Scale('F major'), f_major_ids[:3] + ['black-2-Bb'] + f_major_ids[4:]), False)

    with pytest.raises(ValueError):
        check(c_major, ['white-99'])

def test_grading_result():
    c_major = Scale('C major')
    selected = {W(i) for i in range(7)} | {BlackKey('C#', 1)}
    result = check(c_major, selected)
    compare(result.correct, False)
    compare(bool(result), False)
    compare(result.misses, frozenset([W(7)]))
    compare(result.extras, frozenset([BlackKey('C#', 1)]))
    compare(len(result.hits), 7)
    compare(result.status('white-0'), 'correct')
    compare(result.status('white-7'), 'missed')
    compare(result.status('black-1-Db'), 'incorrect')
    compare(result.status('white-12'), None)
    compare(check(Scale('F major'), []).answer(), 'F - G - A - B♭ - C - D - E')
    compare(check(Scale('F major'), []).answer(naming='german'), 'F - G - A - B - C - D - E')

def test_display_names():
    compare(display_name(BlackKey('A#', 1), Scale('F major')), 'B♭')
    compare(display_name('black-1-A#', Scale('B major')), 'A♯')
    # black keys outside the scale fall back on sharps:
    compare(display_name(BlackKey('Bb', 2), Scale('C major')), 'A♯')
    compare(display_name(BlackKey('D#', 1), Scale('C minor')), 'E♭')
    c_minor = Scale('C minor')
    compare([display_name(k, c_minor) for k in map_scale(c_minor) if k.is_black], ['E♭', 'A♭', 'B♭'])
    compare(display_name(BlackKey('A#', 1), Scale('F major'), naming='german'), 'B')
    compare(display_name(W(6), naming='german'), 'H')
    compare(display_name(W(6)), 'B')

def unit_test():
    test_layout()
    test_key_identities()
    test_mapping()
    test_mapping_failures()
    test_grading()
    test_grading_result()
    test_display_names()
