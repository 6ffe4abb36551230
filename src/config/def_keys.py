

### conventional key signatures of the fourteen keys the drill can ask for:
### the major and natural minor keys on each of the seven natural tonics.
### every accidental (black-key) degree of a key is listed here with the one
### spelling that key signature uses for it; degrees that fall on white keys
### are not listed, since they need no spelling decision.

### the order of accidentals within each entry follows the order in which
### they appear on a key signature (F C G D A E B for sharps, B E A D G C F for flats)

key_signature_defines = {
    #### major keys:
    'C major': '',
    'G major': 'F#',
    'D major': 'F# C#',
    'A major': 'F# C# G#',
    'E major': 'F# C# G# D#',
    'B major': 'F# C# G# D# A#',
    'F major': 'Bb',

    #### natural minor keys:
    'A minor': '',
    'E minor': 'F#',
    'B minor': 'F# C#',
    'D minor': 'Bb',
    'G minor': 'Bb Eb',
    'C minor': 'Bb Eb Ab',
    'F minor': 'Bb Eb Ab Db',
    }

# the order in which sharps and flats are added to key signatures:
sharp_order = ['F', 'C', 'G', 'D', 'A', 'E', 'B']
flat_order = ['B', 'E', 'A', 'D', 'G', 'C', 'F']
