from ..util import unpack_and_reverse_dict, check_all, is_strictly_increasing, Log
from .testing_tools import compare
import pytest

def test_dict_reversal():
    aliases = {'major': ['maj', 'M'], 'minor': ['min', 'm']}
    compare(unpack_and_reverse_dict(aliases), {'maj': 'major', 'M': 'major', 'min': 'minor', 'm': 'minor'})
    compare(unpack_and_reverse_dict(aliases, include_keys=True)['minor'], 'minor')
    with pytest.raises(TypeError):
        unpack_and_reverse_dict({'major': 'maj'})

def test_checks():
    compare(check_all([1, 2, 3], 'isinstance', int), True)
    compare(check_all([1, 2, 'x'], 'in', [1, 2, 3]), False)
    with pytest.raises(ValueError):
        check_all([1], 'resembles', 1)

    compare(is_strictly_increasing([0, 2, 4, 5]), True)
    compare(is_strictly_increasing([0, 2, 2, 5]), False)
    compare(is_strictly_increasing([]), True)

def test_log(capsys):
    quiet, loud = Log(verbose=False), Log(verbose=True)
    quiet('nothing to see')
    compare(capsys.readouterr().out, '')
    loud('something to see')
    compare('something to see' in capsys.readouterr().out, True)

def unit_test():
    test_dict_reversal()
    test_checks()
