from .keyboard import key_identity, display_name, LAYOUT
from .notes import natural_notes
from .util import log
from . import _settings

class Keyboard:
    ### a text display of the two-octave drill keyboard, initialised with the
    ### current scale, selection and (optionally) grading result,
    ### and then shown or cast to string.

    # example, for C major with the root marked before checking:
    #    C♯  D♯      F♯  G♯  A♯      C♯  D♯      F♯  G♯  A♯
    # |░░▓▓▓░▓▓▓░░|░░▓▓▓░▓▓▓░▓▓▓░░|░░▓▓▓░▓▓▓░░|░░▓▓▓░▓▓▓░▓▓▓░░|
    # |░░▓▓▓░▓▓▓░░|░░▓▓▓░▓▓▓░▓▓▓░░|░░▓▓▓░▓▓▓░░|░░▓▓▓░▓▓▓░▓▓▓░░|
    # |░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|
    # |░●░|░●░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|░░░|
    #   C   D   E   F   G   A   B   C   D   E   F   G   A   B
    #   ^

    key_width = 4 # columns per white key, including its left border

    def __init__(self, scale=None, selected=(), result=None, layout=LAYOUT, naming=None):
        """args:
        scale: the Scale currently being drilled, used to label black keys and mark the root.
        selected: an iterable of KeyIdentities (or their ids) that are currently selected.
        result: a GradingResult, if the selection has been checked. once given, keys are
            marked as correct, incorrect or missed instead of simply selected.
        naming: 'english' or 'german' note names (by default, _settings.NOTE_NAMING)"""
        self.scale = scale
        self.selected = {key_identity(k) for k in selected}
        self.result = result
        self.layout = layout
        self.naming = naming if naming is not None else _settings.NOTE_NAMING
        self.chars = _settings.KEYBOARD_CHARACTERS

        self.width = (len(layout.white_keys) * self.key_width) + 1
        # each black key sits over the border to the left of the white key after it:
        self.black_columns = {k: k.next_white * self.key_width for k in layout.black_keys}

    def mark(self, key):
        """the character drawn on a key, or None if the key is unmarked"""
        if self.result is not None:
            status = self.result.status(key)
            return self.chars[status] if status is not None else None
        elif key in self.selected:
            return self.chars['selected']
        return None

    def label(self, key):
        return display_name(key, self.scale, naming=self.naming)

    def _white_row(self, marked=False):
        row = []
        for key in self.layout.white_keys:
            mark = self.mark(key) if marked else None
            body = self.chars['white']
            row.append('|' + (f'{body}{mark}{body}' if mark is not None else body*3))
        return ''.join(row) + '|'

    def _black_row(self, marked=False):
        # start from the white key row and paint the black keys over it:
        row = list(self._white_row())
        for key, col in self.black_columns.items():
            mark = self.mark(key) if marked else None
            body = self.chars['black']
            row[col-1:col+2] = [body, mark if mark is not None else body, body]
        return ''.join(row)

    def _label_row(self, keys, centres):
        row = [' '] * self.width
        for key, centre in zip(keys, centres):
            label = self.label(key)
            start = centre - len(label) // 2
            row[start:start+len(label)] = list(label)
        return ''.join(row).rstrip()

    def rows(self):
        white_centres = [(k.index * self.key_width) + 2 for k in self.layout.white_keys]
        black_keys = list(self.black_columns.keys())
        black_centres = [self.black_columns[k] for k in black_keys]

        rows = [self._label_row(black_keys, black_centres),
                self._black_row(marked=True),
                self._black_row(),
                self._white_row(),
                self._white_row(marked=True),
                self._label_row(self.layout.white_keys, white_centres)]

        # the root is only pointed out before the answer has been checked:
        if self.scale is not None and self.result is None:
            root_row = [' '] * self.width
            root_row[white_centres[natural_notes.index(self.scale.root)]] = self.chars['root']
            rows.append(''.join(root_row).rstrip())
        return rows

    def __str__(self):
        return '\n'.join(self.rows())

    def show(self):
        log(f'Showing keyboard for {self.scale.name if self.scale is not None else "no scale"}')
        print(str(self))


def plot_keyboard(scale=None, selected=(), result=None, ax=None, naming=None, layout=LAYOUT):
    """draws the drill keyboard as a matplotlib figure, colouring keys
    in the same way as the text Keyboard marks them, and returns the figure.
    if ax is given, draws onto that axis instead of a new figure."""
    import matplotlib.pyplot as plt
    from matplotlib.patches import Rectangle

    text_kb = Keyboard(scale, selected=selected, result=result, layout=layout, naming=naming)
    colours = _settings.KEY_COLOURS

    def key_colour(key):
        if result is not None:
            status = result.status(key)
            if status is not None:
                return colours[status]
        elif key in text_kb.selected:
            return colours['selected']
        return colours['black'] if key.is_black else colours['white']

    if ax is None:
        fig, ax = plt.subplots(figsize=(len(layout.white_keys) * 0.6, 2.5))
    else:
        fig = ax.figure

    for key in layout.white_keys:
        ax.add_patch(Rectangle((key.index, 0), 1, 1, facecolor=key_colour(key), edgecolor='black', zorder=1))
        ax.text(key.index + 0.5, 0.08, text_kb.label(key), ha='center', va='bottom', fontsize=8, zorder=3)
    for key in layout.black_keys:
        ax.add_patch(Rectangle((key.next_white - 0.3, 0.4), 0.6, 0.6, facecolor=key_colour(key), edgecolor='black', zorder=2))
        label_colour = 'white' if key_colour(key) == colours['black'] else 'black'
        ax.text(key.next_white, 0.45, text_kb.label(key), ha='center', va='bottom', fontsize=6, color=label_colour, zorder=3)

    ax.set_xlim(0, len(layout.white_keys))
    ax.set_ylim(0, 1)
    ax.set_aspect('auto')
    ax.axis('off')
    if scale is not None:
        ax.set_title(scale.title(naming))
    return fig
