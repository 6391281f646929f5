"""Note and interval names.

Parses note names (``"C"``, ``"f#4"``, ``"Bb5"``, ``"Cx"``) and interval names
(``"3M"``, ``"-2m"``, ``"P5"``) into pitch properties, and spells the results
of transposition correctly.

A pitch is stored as a diatonic ``step`` (0 = C ... 6 = B) plus an ``alt``
count of alterations (-1 = flat, 1 = sharp). Transposition works on
fifths/octave coordinates so that ``transpose("C", "3m")`` gives ``"Eb"``
rather than ``"D#"``.

Module-level constants:
- `INTERVAL_NAMES`: The canonical interval name for each semitone distance 0-11.
  Semitone 6 is spelled as a diminished fifth (``"5d"``).
"""

import dataclasses
import re
import typing


LETTERS = "CDEFGAB"

# Semitones above C for each diatonic step.
STEP_SEMITONES: typing.Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Position of each step on the line of fifths, relative to C.
STEP_FIFTHS: typing.Tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

# Octaves gained by stacking STEP_FIFTHS[step] fifths.
STEP_OCTAVES: typing.Tuple[int, ...] = tuple((f * 7) // 12 for f in STEP_FIFTHS)

# Inverse of STEP_FIFTHS for the unaltered naturals F C G D A E B.
FIFTH_STEPS: typing.Tuple[int, ...] = (3, 0, 4, 1, 5, 2, 6)

# "P" for perfect-type interval numbers, "M" for major-type.
INTERVAL_TYPES = "PMMPPMM"

INTERVAL_NAMES: typing.Tuple[str, ...] = (
	"1P", "2m", "2M", "3m", "3M", "4P", "5d", "5P", "6m", "6M", "7m", "7M"
)

_NOTE_RE = re.compile(r"^([a-gA-G])(#+|b+|x+|)(-?\d*)$")
_INTERVAL_NUM_FIRST_RE = re.compile(r"^([-+]?\d+)(d{1,4}|m|M|P|A{1,4})$")
_INTERVAL_QUALITY_FIRST_RE = re.compile(r"^(AA|A|P|M|m|d|dd)([-+]?\d+)$")


@dataclasses.dataclass(frozen=True)
class Pitch:

	"""
	Diatonic step, alteration, optional octave and optional direction.
	"""

	step: int
	alt: int
	oct: typing.Optional[int] = None
	dir: int = 1


	def coord (self) -> typing.Tuple[int, ...]:

		"""Return ``(fifths,)`` for pitch classes or ``(fifths, octaves)`` otherwise."""

		fifths = STEP_FIFTHS[self.step] + 7 * self.alt

		if self.oct is None:
			return (self.dir * fifths,)

		octaves = self.oct - STEP_OCTAVES[self.step] - 4 * self.alt
		return (self.dir * fifths, self.dir * octaves)


	@classmethod
	def from_coord (cls, coord: typing.Sequence[int]) -> "Pitch":

		"""Inverse of :meth:`coord` for ascending pitches."""

		fifths = coord[0]
		step = FIFTH_STEPS[(fifths + 1) % 7]
		alt = (fifths + 1) // 7

		if len(coord) == 1:
			return cls(step=step, alt=alt)

		return cls(step=step, alt=alt, oct=coord[1] + 4 * alt + STEP_OCTAVES[step])


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A parsed note name such as ``"Bb4"``.
	"""

	letter: str
	acc: str
	pitch: Pitch

	@property
	def pc (self) -> str:
		return self.letter + self.acc

	@property
	def oct (self) -> typing.Optional[int]:
		return self.pitch.oct

	@property
	def name (self) -> str:
		return self.pc if self.oct is None else f"{self.pc}{self.oct}"

	@property
	def chroma (self) -> int:
		return (STEP_SEMITONES[self.pitch.step] + self.pitch.alt) % 12


@dataclasses.dataclass(frozen=True)
class Interval:

	"""
	A parsed interval name such as ``"3M"`` or ``"-5P"``.
	"""

	num: int
	quality: str
	pitch: Pitch

	@property
	def name (self) -> str:
		return f"{self.num}{self.quality}"

	@property
	def semitones (self) -> int:
		step, alt, octave = self.pitch.step, self.pitch.alt, self.pitch.oct or 0
		return self.pitch.dir * (STEP_SEMITONES[step] + alt + 12 * octave)

	@property
	def chroma (self) -> int:
		return self.semitones % 12


def accidentals (alt: int) -> str:

	"""Return the accidental string for an alteration count (``-2`` → ``"bb"``)."""

	return "#" * alt if alt > 0 else "b" * -alt


def parse_note (name: str) -> typing.Optional[Note]:

	"""Parse a note name, returning ``None`` when it is not one.

	The letter may be upper or lower case. Accidentals are ``#``, ``b`` or
	``x`` (double sharp) and may repeat. The octave is optional and may be
	negative.

	Example:
		```python
		parse_note("bb5").name   # → "Bb5"
		parse_note("Cb").chroma  # → 11
		parse_note("H")          # → None
		```
	"""

	if not isinstance(name, str):
		return None

	match = _NOTE_RE.match(name.strip())

	if match is None:
		return None

	letter, acc, octave = match.groups()

	if octave == "-":
		return None

	letter = letter.upper()
	acc = acc.replace("x", "##")
	alt = -len(acc) if acc.startswith("b") else len(acc)

	pitch = Pitch(
		step=LETTERS.index(letter),
		alt=alt,
		oct=int(octave) if octave else None,
	)

	return Note(letter=letter, acc=acc, pitch=pitch)


def _quality_to_alt (interval_type: str, quality: str) -> typing.Optional[int]:

	if quality == "M" and interval_type == "M":
		return 0
	if quality == "P" and interval_type == "P":
		return 0
	if quality == "m" and interval_type == "M":
		return -1
	if set(quality) == {"A"}:
		return len(quality)
	if set(quality) == {"d"}:
		return -len(quality) if interval_type == "P" else -(len(quality) + 1)

	return None


def parse_interval (name: str) -> typing.Optional[Interval]:

	"""Parse an interval name, returning ``None`` when it is not one.

	Both the number-first (``"3M"``, ``"-2m"``) and the quality-first
	(``"M3"``, ``"P5"``) spellings are accepted. The quality must suit the
	interval number: perfect qualities for unisons, fourths and fifths, major
	and minor for the rest.
	"""

	if not isinstance(name, str):
		return None

	text = name.strip()
	match = _INTERVAL_NUM_FIRST_RE.match(text)

	if match is not None:
		num_text, quality = match.groups()
	else:
		match = _INTERVAL_QUALITY_FIRST_RE.match(text)
		if match is None:
			return None
		quality, num_text = match.groups()

	num = int(num_text)

	if num == 0:
		return None

	step = (abs(num) - 1) % 7
	alt = _quality_to_alt(INTERVAL_TYPES[step], quality)

	if alt is None:
		return None

	pitch = Pitch(step=step, alt=alt, oct=(abs(num) - 1) // 7, dir=-1 if num < 0 else 1)

	return Interval(num=num, quality=quality, pitch=pitch)


def pitch_class_of (name: str) -> typing.Optional[int]:

	"""Return the pitch class (0-11) of a note or interval name, or ``None``.

	Note names take precedence, so ``"A4"`` is the note A rather than an
	interval.
	"""

	note = parse_note(name)

	if note is not None:
		return note.chroma

	interval = parse_interval(name)

	if interval is not None:
		return interval.chroma

	return None


def interval_from_semitones (semitones: int) -> str:

	"""Return the canonical interval name for a semitone distance, reduced to one octave."""

	return INTERVAL_NAMES[semitones % 12]


def _quality_for (step: int, alt: int) -> str:

	if INTERVAL_TYPES[step] == "P":
		if alt == 0:
			return "P"
		return "A" * alt if alt > 0 else "d" * -alt

	if alt == 0:
		return "M"
	if alt == -1:
		return "m"

	return "A" * alt if alt > 0 else "d" * (-alt - 1)


def diatonic_interval (step: int, semitones: int) -> str:

	"""Name the interval with diatonic number ``step + 1`` spanning ``semitones``.

	Example:
		```python
		diatonic_interval(3, 6)  # → "4A"
		diatonic_interval(4, 6)  # → "5d"
		```
	"""

	return f"{step + 1}{_quality_for(step, semitones - STEP_SEMITONES[step])}"


def interval_from_fifths (fifths: int) -> str:

	"""Return the simple ascending interval spanned by a number of perfect fifths.

	Example:
		```python
		interval_from_fifths(2)   # → "2M"  (C → D)
		interval_from_fifths(-1)  # → "4P"  (C → F)
		interval_from_fifths(6)   # → "4A"  (C → F#)
		```
	"""

	pitch = Pitch.from_coord((fifths,))

	return f"{pitch.step + 1}{_quality_for(pitch.step, pitch.alt)}"


def transpose (note_name: str, interval_name: str) -> str:

	"""Transpose a note by an interval and return the spelled result.

	A pitch class stays a pitch class; a note with an octave keeps one.

	Raises:
		ValueError: If either name cannot be parsed.

	Example:
		```python
		transpose("C", "3m")    # → "Eb"
		transpose("B4", "2m")   # → "C5"
		transpose("D", "7m")    # → "C"
		```
	"""

	note = parse_note(note_name)

	if note is None:
		raise ValueError(f"Unknown note name: {note_name!r}. Expected e.g. 'C', 'F#4', 'Bb'.")

	interval = parse_interval(interval_name)

	if interval is None:
		raise ValueError(f"Unknown interval name: {interval_name!r}. Expected e.g. '3M', 'P5', '-2m'.")

	note_coord = note.pitch.coord()
	interval_coord = interval.pitch.coord()

	if len(note_coord) == 1:
		coord: typing.Tuple[int, ...] = (note_coord[0] + interval_coord[0],)
	else:
		coord = (note_coord[0] + interval_coord[0], note_coord[1] + interval_coord[1])

	pitch = Pitch.from_coord(coord)
	name = LETTERS[pitch.step] + accidentals(pitch.alt)

	return name if pitch.oct is None else f"{name}{pitch.oct}"
