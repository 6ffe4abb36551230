from ..scales import *
from ..scales import key_signatures
from ..notes import Note, NoteList
from .testing_tools import compare
import numpy as np
import pytest

def test_every_scale_is_well_formed():
    scales = all_scales()
    compare(len(scales), 14)
    compare(len(set(scales)), 14)
    for scale in scales:
        compare(len(scale), 8)
        compare(scale.degrees[0], scale.degrees[7])
        compare(scale.degrees.steps(), list(scale.mode.steps))
        # each letter once per octave:
        compare(len({n.letter for n in scale.notes}), 7)

def test_spelling_follows_key_signatures():
    for scale in all_scales():
        signature = key_signatures[(scale.root.position, scale.mode)]
        for note in scale.degrees:
            if not note.natural:
                compare(note, signature[note.position], compare='spelling')

    compare(Scale('F major').notes, NoteList('F G A Bb C D E'), compare='spelling')
    compare(Scale('C minor').notes, NoteList('C D Eb F G Ab Bb'), compare='spelling')
    compare(Scale('F minor').notes, NoteList('F G Ab Bb C Db Eb'), compare='spelling')
    compare(Scale('E major').notes, NoteList('E F# G# A B C# D#'), compare='spelling')
    compare(Scale('B major').notes, NoteList('B C# D# E F# G# A#'), compare='spelling')
    compare(Scale('B minor').notes, NoteList('B C# D E F# G A'), compare='spelling')
    compare(Scale('A minor').notes, NoteList('A B C D E F G'), compare='spelling')

def test_key_signatures():
    compare(Scale('C major').key_signature, '')
    compare(Scale('E major').num_sharps, 4)
    compare(Scale('E major').key_signature, 'F♯ C♯ G♯ D♯')
    compare(Scale('F minor').num_flats, 4)
    compare(Scale('F minor').key_signature, 'B♭ E♭ A♭ D♭')
    compare(Scale('D minor').flats, NoteList('Bb'))

def test_scale_init():
    compare(Scale('Cm'), build_scale('C', 'minor'))
    compare(Scale('G'), Scale('G', 'major'))
    compare(Scale('B minor'), Scale(root='B', mode=Mode.MINOR))
    compare(Scale(Scale('D minor')), Scale('D', 'natural minor'))
    compare(Scale('E', 'M').mode, Mode.MAJOR)
    compare(Scale('E', 'm').mode, Mode.MINOR)
    compare(build_scale(Note('A'), 'aeolian'), Scale('A minor'))

    compare(Scale('B minor').name, 'B minor')
    compare(Scale('F major').title(), 'F Major')
    compare(Scale('B major').title('german'), 'H Major')
    compare(Scale('C major').parallel, Scale('C minor'))

    compare(Mode.MAJOR.intervals, [0, 2, 4, 5, 7, 9, 11, 12])
    compare(Mode.parse('Natural Minor'), Mode.MINOR)
    compare(sum(Mode.MINOR.steps), 12)

def test_scale_membership():
    f_major = Scale('F major')
    compare('Bb' in f_major, True)
    compare('A#' in f_major, True)
    compare('B' in f_major, False)
    compare(f_major[4], Note('Bb'), compare='spelling')
    compare(f_major[8], Note('F'))
    compare(f_major.spelling_of('A#').name, 'B♭')
    compare(f_major.spelling_of('F#'), None)
    with pytest.raises(IndexError):
        f_major[9]

def test_invalid_roots():
    for bad_root in ['F#', 'Bb', 'Cb', 'E#', 'X', 'H', '']:
        with pytest.raises(InvalidRootError):
            build_scale(bad_root, 'major')
    with pytest.raises(InvalidRootError):
        build_scale(Note('Eb'), 'minor')
    with pytest.raises(InvalidRootError):
        build_scale(3, 'major')
    with pytest.raises(InvalidRootError):
        build_scale(None, 'major')
    with pytest.raises(ValueError):
        build_scale('C', None)
    # key names without a mode still default to major:
    compare(Scale('C').mode, Mode.MAJOR)
    with pytest.raises(InvalidRootError):
        Scale('H major')
    # bad roots are still ValueErrors:
    with pytest.raises(ValueError):
        Scale('F# minor')
    with pytest.raises(ValueError):
        build_scale('C', 'dorian')

def test_missing_key_signature(monkeypatch):
    monkeypatch.delitem(key_signatures, (Note('F').position, Mode.MAJOR))
    with pytest.raises(MappingInvariantError):
        Scale('F major')
    # keys with no accidentals need no signature entries to be spelled:
    monkeypatch.setitem(key_signatures, (Note('D').position, Mode.MINOR), {})
    with pytest.raises(MappingInvariantError):
        Scale('D minor')

def test_random_scales():
    compare(random_scale(np.random.default_rng(42)), random_scale(np.random.default_rng(42)))
    rng = np.random.default_rng(1)
    drawn = {random_scale(rng) for i in range(500)}
    compare(drawn, set(all_scales()))
    compare(random_scale() in all_scales(), True)

def unit_test():
    test_every_scale_is_well_formed()
    test_spelling_follows_key_signatures()
    test_key_signatures()
    test_scale_init()
    test_scale_membership()
    test_invalid_roots()
    test_random_scales()
