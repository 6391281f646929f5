"""The seven diatonic modes.

Each mode is a :class:`Mode` record built once at import time. Modes can be
looked up by name or alias in any letter case, and expanded into notes and
diatonic chords for a tonic.

Module-level constants:
- `MODES`: The seven modes, ionian to locrian.

Example:
	```python
	import chromaset.scale_modes

	chromaset.scale_modes.mode_notes("dorian", "D")
	# → ["D", "E", "F", "G", "A", "B", "C"]

	chromaset.scale_modes.triads("major", "C")
	# → ["C", "Dm", "Em", "F", "G", "Am", "Bdim"]

	chromaset.scale_modes.relative_tonic("minor", "major", "C")  # → "A"
	```
"""

import dataclasses
import typing

import chromaset.codec
import chromaset.pitch
import chromaset.sets


@dataclasses.dataclass(frozen=True)
class Mode:

	"""
	A diatonic mode and the chord qualities built on its tonic.

	``alt`` counts the fifths from the tonic of the parent major scale to the
	tonic of the mode (ionian 0, dorian 2, lydian -1, ...).
	"""

	mode_num: int
	set_num: int
	alt: int
	name: str
	triad: str
	seventh: str
	ninth: str
	aliases: typing.Tuple[str, ...] = ()


	@property
	def chroma (self) -> str:
		return chromaset.codec.set_num_to_chroma(self.set_num)


	@property
	def intervals (self) -> typing.List[str]:

		"""
		Interval names with one diatonic number per degree (lydian has ``"4A"``, not ``"5d"``).
		"""

		semitones = [i for i, bit in enumerate(self.chroma) if bit == "1"]
		return [chromaset.pitch.diatonic_interval(degree, s) for degree, s in enumerate(semitones)]


	def pcset (self) -> chromaset.sets.PcSet:

		"""
		Return the mode as a named pitch-class set.
		"""

		return dataclasses.replace(chromaset.sets.pcset(self.chroma), name=self.name)


MODES: typing.Tuple[Mode, ...] = (
	Mode(mode_num=0, set_num=2773, alt=0, name="ionian", triad="", seventh="Maj7", ninth="Maj9", aliases=("major",)),
	Mode(mode_num=1, set_num=2902, alt=2, name="dorian", triad="m", seventh="m7", ninth="m9"),
	Mode(mode_num=2, set_num=3418, alt=4, name="phrygian", triad="m", seventh="m7", ninth="m9"),
	Mode(mode_num=3, set_num=2741, alt=-1, name="lydian", triad="", seventh="Maj7", ninth="Maj9"),
	Mode(mode_num=4, set_num=2774, alt=1, name="mixolydian", triad="", seventh="7", ninth="9"),
	Mode(mode_num=5, set_num=2906, alt=3, name="aeolian", triad="m", seventh="m7", ninth="m9", aliases=("minor",)),
	Mode(mode_num=6, set_num=3434, alt=5, name="locrian", triad="dim", seventh="m7b5", ninth="M6#11"),
)

_INDEX: typing.Dict[str, Mode] = {}

for _mode in MODES:
	for _key in (_mode.name,) + _mode.aliases:
		_INDEX[_key.lower()] = _mode

del _mode, _key

ModeLike = typing.Union[str, Mode]


def get_mode (mode: ModeLike) -> Mode:

	"""Look up a mode by name or alias, ignoring case.

	Parameters:
		mode: A name such as ``"Dorian"`` or ``"minor"``, or a ``Mode``
			(returned unchanged).

	Raises:
		ValueError: If the name is not a known mode or alias.

	Example:
		```python
		get_mode("MAJOR").name  # → "ionian"
		```
	"""

	if isinstance(mode, Mode):
		return mode

	if not isinstance(mode, str) or mode.lower() not in _INDEX:
		available = ", ".join(sorted(_INDEX))
		raise ValueError(f"Unknown mode: {mode!r}. Available: {available}")

	return _INDEX[mode.lower()]


def all_modes () -> typing.List[Mode]:

	"""
	Return every mode in mode-number order.
	"""

	return list(MODES)


def mode_names () -> typing.List[str]:

	"""
	Return the primary names of every mode in mode-number order.
	"""

	return [mode.name for mode in MODES]


def mode_notes (mode: ModeLike, tonic: str) -> typing.List[str]:

	"""Return the spelled notes of a mode starting on ``tonic``.

	Raises:
		ValueError: If the mode or tonic is unknown.
	"""

	return [chromaset.pitch.transpose(tonic, interval) for interval in get_mode(mode).intervals]


def _chords (mode: ModeLike, tonic: str, quality: str) -> typing.List[str]:

	"""
	Pair each scale degree with the chord quality found on it.
	"""

	found = get_mode(mode)
	qualities = [getattr(m, quality) for m in MODES]
	rotated = qualities[found.mode_num:] + qualities[:found.mode_num]

	return [note + suffix for note, suffix in zip(mode_notes(found, tonic), rotated)]


def triads (mode: ModeLike, tonic: str) -> typing.List[str]:

	"""Return the diatonic triad names of a mode.

	Example:
		```python
		triads("dorian", "D")  # → ["Dm", "Em", "F", "G", "Am", "Bdim", "C"]
		```
	"""

	return _chords(mode, tonic, "triad")


def seventh_chords (mode: ModeLike, tonic: str) -> typing.List[str]:

	"""
	Return the diatonic seventh chord names of a mode.
	"""

	return _chords(mode, tonic, "seventh")


def ninth_chords (mode: ModeLike, tonic: str) -> typing.List[str]:

	"""
	Return the diatonic ninth chord names of a mode.
	"""

	return _chords(mode, tonic, "ninth")


def distance (destination: ModeLike, source: ModeLike) -> str:

	"""Return the interval from a tonic in ``source`` to the relative tonic in ``destination``.

	Two relative modes share the notes of one major scale; the interval
	follows from the difference of their ``alt`` values, as an ascending
	simple interval.

	Example:
		```python
		distance("aeolian", "ionian")  # → "6M"  (C major → A minor)
		distance("lydian", "ionian")   # → "4P"  (C major → F lydian)
		```
	"""

	return chromaset.pitch.interval_from_fifths(get_mode(destination).alt - get_mode(source).alt)


def relative_tonic (destination: ModeLike, source: ModeLike, tonic: str) -> str:

	"""Return the tonic of ``destination`` that shares its notes with ``source`` on ``tonic``.

	Example:
		```python
		relative_tonic("minor", "major", "C")     # → "A"
		relative_tonic("ionian", "dorian", "E")   # → "D"
		```
	"""

	return chromaset.pitch.transpose(tonic, distance(destination, source))
