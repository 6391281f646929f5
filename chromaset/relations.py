"""Set relations between pitch-class sets.

Subset and superset tests are strict: a set is neither a subset nor a
superset of itself. Both arguments accept anything :func:`chromaset.sets.pcset`
accepts, so chromas and note lists can be mixed freely.

Example:
	```python
	import chromaset.relations

	in_c_major = chromaset.relations.is_subset_of(["c", "e", "g"])
	in_c_major(["c2", "g7"])     # → True
	in_c_major(["c", "e", "g"])  # → False (equal, not a proper subset)

	keep_c_d_e = chromaset.relations.filter_notes(["c", "d", "e"])
	keep_c_d_e(["c2", "c#2", "d2", "c3"])  # → ["c2", "d2", "c3"]
	```
"""

import typing

import chromaset.pitch
import chromaset.sets


def is_equal (a: chromaset.sets.PcSetInput, b: chromaset.sets.PcSetInput) -> bool:

	"""
	Return True if both inputs contain exactly the same pitch classes.
	"""

	return chromaset.sets.set_num(a) == chromaset.sets.set_num(b)


def is_subset_of (reference: chromaset.sets.PcSetInput) -> typing.Callable[[chromaset.sets.PcSetInput], bool]:

	"""Return a predicate that tests for a proper subset of ``reference``.

	Every pitch class of the candidate must be in ``reference`` and the two
	sets must differ. An empty reference matches nothing.
	"""

	reference_num = chromaset.sets.set_num(reference)

	def predicate (candidate: chromaset.sets.PcSetInput) -> bool:
		candidate_num = chromaset.sets.set_num(candidate)
		return reference_num != 0 and reference_num != candidate_num and (candidate_num & reference_num) == candidate_num

	return predicate


def is_superset_of (reference: chromaset.sets.PcSetInput) -> typing.Callable[[chromaset.sets.PcSetInput], bool]:

	"""Return a predicate that tests for a proper superset of ``reference``.

	Every pitch class of ``reference`` must be in the candidate and the two
	sets must differ. An empty reference matches nothing.
	"""

	reference_num = chromaset.sets.set_num(reference)

	def predicate (candidate: chromaset.sets.PcSetInput) -> bool:
		candidate_num = chromaset.sets.set_num(candidate)
		return reference_num != 0 and reference_num != candidate_num and (candidate_num | reference_num) == candidate_num

	return predicate


def is_note_included_in_set (reference: chromaset.sets.PcSetInput) -> typing.Callable[[str], bool]:

	"""Return a predicate that tests whether a single note's pitch class is in ``reference``.

	Octaves are ignored. Only note names are considered; anything that does not
	parse as a note is never included.

	Example:
		```python
		in_c_d_e = is_note_included_in_set(["c", "d", "e"])
		in_c_d_e("C4")   # → True
		in_c_d_e("C#4")  # → False
		```
	"""

	reference_chroma = chromaset.sets.chroma(reference)

	def predicate (note_name: str) -> bool:
		note = chromaset.pitch.parse_note(note_name)
		return note is not None and reference_chroma[note.chroma] == "1"

	return predicate


def filter_notes (reference: chromaset.sets.PcSetInput) -> typing.Callable[[typing.Iterable[str]], typing.List[str]]:

	"""
	Return a function that keeps, in order, the notes whose pitch class is in ``reference``.
	"""

	included = is_note_included_in_set(reference)

	def apply (notes: typing.Iterable[str]) -> typing.List[str]:
		return [note for note in notes if included(note)]

	return apply


filter = filter_notes
