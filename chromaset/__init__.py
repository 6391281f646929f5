"""
Chromaset - pitch-class sets for 12-tone equal temperament.

A pitch-class set is an unordered collection of the twelve pitch classes
C, C#, D, ... B. Chromaset stores one as a 12-character chroma string
(``"101010000000"`` is C, D, E) or, equivalently, as a set number from 0 to
4095, and computes with it:

- **Encoding.** Build a set from note names (``["c", "e4", "g"]``),
  interval names (``["1P", "3M", "5P"]``), a chroma string or a set number.
  Octaves, order and duplicates are ignored; unknown names are dropped.
- **Normal form.** ``normalized`` is the rotation with the smallest set
  number, shared by every transposition of the set.
- **Intervals.** Interval names from the lowest pitch class to each member.
- **Modes.** The rotations of a set, one per member or all twelve.
- **Relations.** Strict subset and superset predicates, equality, single
  note membership and note-list filtering.
- **Diatonic modes.** Ionian to locrian by name or alias, with their notes
  and diatonic chords for any tonic.

Nothing in the set engine raises for malformed input: it yields the empty
set (``PcSet.empty is True``) instead.

Minimal example:

    ```python
    import chromaset

    s = chromaset.pcset(["c", "d", "e"])
    s.chroma      # "101010000000"
    s.set_num     # 2688
    s.intervals   # ["1P", "2M", "3M"]

    chromaset.is_subset_of(["c", "e", "g"])(["c", "g"])  # True
    ```

Package-level exports: ``PcSet``, ``pcset``, ``chroma``, ``chromas``,
``intervals``, ``modes``, ``normalize``, ``is_equal``, ``is_subset_of``,
``is_superset_of``, ``is_note_included_in_set``, ``filter_notes``,
``get_mode``, ``InvalidSetNumber``.
"""

import chromaset.codec
import chromaset.relations
import chromaset.scale_modes
import chromaset.sets


PcSet = chromaset.sets.PcSet
InvalidSetNumber = chromaset.codec.InvalidSetNumber

pcset = chromaset.sets.pcset
chroma = chromaset.sets.chroma
chromas = chromaset.codec.chromas
intervals = chromaset.sets.intervals
modes = chromaset.sets.modes
normalize = chromaset.sets.normalize

is_equal = chromaset.relations.is_equal
is_subset_of = chromaset.relations.is_subset_of
is_superset_of = chromaset.relations.is_superset_of
is_note_included_in_set = chromaset.relations.is_note_included_in_set
filter_notes = chromaset.relations.filter_notes

get_mode = chromaset.scale_modes.get_mode
