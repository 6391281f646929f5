"""Pitch-class sets.

Builds :class:`PcSet` values from any of the accepted input shapes and
derives their normalized chroma, intervals and modes.

Accepted inputs:
- A chroma string, e.g. ``"101010000000"``. Anything that is not exactly
  twelve 0s and 1s is treated as empty (``"c d e"`` is *not* split).
- A set number from 0 to 4095, e.g. ``2688``.
- A sequence of note or interval names, e.g. ``["c", "d4", "3M"]``. Names
  that are neither are dropped, so ``["c", "nope"]`` is the same set as
  ``["c"]``.
- An existing :class:`PcSet`.

Nothing here raises for bad input: the result is simply the empty set, and
callers check ``PcSet.empty`` (or compare with ``EMPTY_CHROMA``).

Example:
	```python
	import chromaset.sets

	s = chromaset.sets.pcset(["c", "d", "e"])
	s.chroma      # → "101010000000"
	s.set_num     # → 2688
	s.intervals   # → ["1P", "2M", "3M"]

	chromaset.sets.modes(["c", "e", "g"])
	# → ["100010010000", "100100001000", "100001000100"]
	```
"""

import collections.abc
import dataclasses
import logging
import typing

import chromaset.codec
import chromaset.pitch


logger = logging.getLogger(__name__)

EMPTY_CHROMA = chromaset.codec.EMPTY_CHROMA


@dataclasses.dataclass(frozen=True)
class PcSet:

	"""
	An immutable pitch-class set.
	"""

	empty: bool
	name: str
	set_num: int
	chroma: str
	normalized: str
	intervals: typing.List[str] = dataclasses.field(default_factory=list, hash=False)


def empty_pcset () -> PcSet:

	"""Return a new empty set. Each call builds its own interval list."""

	return PcSet(
		empty=True,
		name="",
		set_num=0,
		chroma=EMPTY_CHROMA,
		normalized=EMPTY_CHROMA,
	)


# ---------------------------------------------------------------------------
# Input sources.
#
# Every public function accepts loosely-typed input. It is classified once by
# to_source() and every later step works from the resulting chroma string.
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class BinaryString:

	"""A string that should be a 12-character chroma."""

	value: str


@dataclasses.dataclass(frozen=True)
class SetNumber:

	"""An integer that should be a set number."""

	value: int


@dataclasses.dataclass(frozen=True)
class NoteList:

	"""Note or interval names, in input order."""

	names: typing.Tuple[typing.Any, ...]


PcSetSource = typing.Union[BinaryString, SetNumber, NoteList, PcSet]
PcSetInput = typing.Union[str, int, typing.Iterable[str], PcSet, BinaryString, SetNumber, NoteList]


def to_source (value: typing.Any) -> typing.Optional[PcSetSource]:

	"""Classify an input value, or return ``None`` if it is none of the accepted shapes.

	Example:
		```python
		to_source("101")        # → BinaryString("101")
		to_source(2048)         # → SetNumber(2048)
		to_source(["c", "e"])   # → NoteList(("c", "e"))
		to_source(None)         # → None
		```
	"""

	if isinstance(value, (PcSet, BinaryString, SetNumber, NoteList)):
		return value

	if isinstance(value, str):
		return BinaryString(value)

	if isinstance(value, bool):
		return None

	if isinstance(value, int):
		return SetNumber(value)

	if isinstance(value, collections.abc.Iterable):
		return NoteList(tuple(value))

	return None


def _names_to_chroma (names: typing.Sequence[typing.Any]) -> str:

	"""
	Set one bit per resolvable name; unknown names are skipped.
	"""

	bits = ["0"] * chromaset.codec.CHROMA_LENGTH

	for name in names:
		pc = chromaset.pitch.pitch_class_of(name)

		if pc is None:
			logger.debug(f"Ignoring {name!r}: not a note or interval name")
			continue

		bits[pc] = "1"

	return "".join(bits)


def source_to_chroma (source: typing.Optional[PcSetSource]) -> str:

	"""
	Resolve a classified source to a valid chroma, falling back to the empty chroma.
	"""

	if isinstance(source, PcSet):
		return source.chroma

	if isinstance(source, BinaryString):
		return source.value if chromaset.codec.is_chroma(source.value) else EMPTY_CHROMA

	if isinstance(source, SetNumber):
		try:
			return chromaset.codec.set_num_to_chroma(source.value)
		except chromaset.codec.InvalidSetNumber as exc:
			logger.debug(f"Treating set number as empty: {exc}")
			return EMPTY_CHROMA

	if isinstance(source, NoteList):
		return _names_to_chroma(source.names)

	return EMPTY_CHROMA


def chroma (value: PcSetInput) -> str:

	"""Return the chroma of any accepted input.

	Example:
		```python
		chroma(["c", "d", "e"])       # → "101010000000"
		chroma(["g", "g#4", "a", "bb5"])  # → "000000011110"
		chroma("A B C")               # → "000000000000"
		```
	"""

	return source_to_chroma(to_source(value))


def set_num (value: PcSetInput) -> int:

	"""
	Return the set number of any accepted input.
	"""

	return chromaset.codec.chroma_to_set_num(chroma(value))


# ---------------------------------------------------------------------------
# Derived properties.
# ---------------------------------------------------------------------------

def rotate (chroma_value: str, times: int) -> str:

	"""Rotate a chroma left so that index ``times`` becomes index 0.

	The bit at position ``i`` moves to ``(i - times) % 12``. Negative values
	rotate right.
	"""

	n = times % len(chroma_value) if chroma_value else 0

	return chroma_value[n:] + chroma_value[:n]


def normalize (chroma_value: str) -> str:

	"""Return the rotation of a chroma with the smallest set number.

	All transpositions of a set share this form, so it works as a
	transposition-independent key. When several rotations tie (sets with
	rotational symmetry, such as the whole-tone scale) the smallest
	rotation wins, which makes no difference to the result string.
	Inversions are not identified.

	Example:
		```python
		normalize("101010000000")  # → "000000010101"
		normalize("001010100000")  # → "000000010101"  (D E F#)
		```
	"""

	if not chromaset.codec.is_chroma(chroma_value):
		return EMPTY_CHROMA

	rotations = [rotate(chroma_value, k) for k in range(chromaset.codec.CHROMA_LENGTH)]

	# min() keeps the first of equal keys, i.e. the smallest rotation.
	return min(rotations, key=chromaset.codec.chroma_to_set_num)


def chroma_to_intervals (chroma_value: str) -> typing.List[str]:

	"""Return interval names from the lowest pitch class to each pitch class in the chroma.

	The lowest active index is the root, so its interval is always ``"1P"``.
	An empty or malformed chroma gives ``[]``.

	Example:
		```python
		chroma_to_intervals("101010101010")  # → ["1P", "2M", "3M", "5d", "6m", "7m"]
		chroma_to_intervals("001001000100")  # → ["1P", "3m", "5P"]  (D F A)
		```
	"""

	if not chromaset.codec.is_chroma(chroma_value) or "1" not in chroma_value:
		return []

	root = chroma_value.index("1")

	return [
		chromaset.pitch.interval_from_semitones(i - root)
		for i, bit in enumerate(chroma_value)
		if bit == "1"
	]


def intervals (value: PcSetInput) -> typing.List[str]:

	"""
	Return the root-relative interval names of any accepted input.
	"""

	return chroma_to_intervals(chroma(value))


def modes (value: PcSetInput, normalize: bool = True) -> typing.List[str]:

	"""Return the rotations of a set as chromas.

	Parameters:
		value: Any accepted input.
		normalize: When ``True`` (default), only rotations that start on a
			member of the set are returned, one per member in ascending
			pitch-class order - the modes of a scale. When ``False``, all 12
			rotations are returned in rotation order, duplicates included.

	Returns:
		List of chromas; empty when the input is empty or invalid.

	Example:
		```python
		modes(["c", "e", "g"])
		# → ["100010010000", "100100001000", "100001000100"]

		len(modes(["c", "e", "g"], normalize=False))  # → 12
		```
	"""

	source = chroma(value)

	if source == EMPTY_CHROMA:
		return []

	rotations = [rotate(source, k) for k in range(chromaset.codec.CHROMA_LENGTH)]

	if normalize:
		return [r for r in rotations if r[0] == "1"]

	return rotations


def pcset (value: PcSetInput) -> PcSet:

	"""Build a :class:`PcSet` from any accepted input.

	Example:
		```python
		pcset(["c", "d", "e"])
		# → PcSet(empty=False, name="", set_num=2688, chroma="101010000000",
		#         normalized="000000010101", intervals=["1P", "2M", "3M"])

		pcset(2048) == pcset(["C"])   # → True
		pcset(["not a note"]).empty   # → True
		```
	"""

	if isinstance(value, PcSet):
		return value

	chroma_value = chroma(value)

	if chroma_value == EMPTY_CHROMA:
		return empty_pcset()

	return PcSet(
		empty=False,
		name="",
		set_num=chromaset.codec.chroma_to_set_num(chroma_value),
		chroma=chroma_value,
		normalized=normalize(chroma_value),
		intervals=chroma_to_intervals(chroma_value),
	)
