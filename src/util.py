import time
import inspect

VERBOSE = False

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def __call__(self, msg):
        if self.verbose:
            cur_frame = inspect.currentframe()
            call_frame = inspect.getouterframes(cur_frame, 2)
            wall_time = time.time() - global_init_time

            context = f'[{wall_time:.06f}]({call_frame[1][3]}) '
            print(context + msg)

log = Log()

# generically useful functions used across modules:
def unpack_and_reverse_dict(dct, include_keys=False, force_list=False):
    """accepts a dict whose values are iterables, the items of which are all unique,
    and returns the reversed dict that maps each item to its corresponding parent key"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list)):
            # we expected the value to be an iterable, but it isn't one
            if force_list:
                # set it to be one anyway:
                v_list = [v_list]
            else:
                raise TypeError(f"unpack_and_reverse_dict expects dict values to be tuples or lists of strings")

        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            # map original dict key back into itself, e.g. for aliases
            rev_dct[k] = k
    return rev_dct

def check_all(iterable, check, comparison):
    """accepts an iterable of objects, and a type that they are assumed to be,
    and individually checks that all items in iterable are of that type.
    also allows direct (not type) comparison through the == argument.

    'check' arg determines what function we use to check against comparison. must be one of:
        'isinstance' / 'instance': use "isinstance(X, Y)""
        'is':                      use "X is Y"
        '==' / 'eq' / 'equals':    use "X == Y"
        'isin' / 'is_in', 'in':    use "X in Y"  """
    for item in iterable:
        if check in ('isinstance', 'instance'):
            if not (isinstance(item, comparison)):
                return False
        elif check == 'is':
            if not (item is comparison):
                return False
        elif check in ('==', 'eq', 'equals'):
            if not (item == comparison):
                return False
        elif check in ('isin', 'is_in', 'in'):
            if not (item in comparison):
                return False
        else:
            raise ValueError(f"invalid check arg ({check}) to check_all, must be one of: 'isinstance', '==', 'is', 'is_in'")
    return True

def is_strictly_increasing(values):
    """True if every item of a sequence is greater than the one before it"""
    return all(a < b for a, b in zip(values, values[1:]))
