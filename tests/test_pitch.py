import unittest

import pytest

import chromaset.pitch


class NoteParsingTests (unittest.TestCase):

	"""
	Tests for note name parsing.
	"""

	def test_letter_case_and_octave (self) -> None:

		"""Lower-case letters and octaves are accepted and normalised."""

		note = chromaset.pitch.parse_note("bb5")

		self.assertIsNotNone(note)
		self.assertEqual(note.name, "Bb5")
		self.assertEqual(note.pc, "Bb")
		self.assertEqual(note.oct, 5)
		self.assertEqual(note.chroma, 10)


	def test_pitch_class_without_octave (self) -> None:

		"""A bare letter has no octave."""

		note = chromaset.pitch.parse_note("C")

		self.assertEqual(note.name, "C")
		self.assertIsNone(note.oct)
		self.assertEqual(note.chroma, 0)


	def test_accidentals_wrap_around (self) -> None:

		"""Cb is pitch class 11 and B# is pitch class 0."""

		self.assertEqual(chromaset.pitch.parse_note("Cb").chroma, 11)
		self.assertEqual(chromaset.pitch.parse_note("B#").chroma, 0)
		self.assertEqual(chromaset.pitch.parse_note("g#4").chroma, 8)


	def test_double_sharp (self) -> None:

		"""'x' is a double sharp."""

		note = chromaset.pitch.parse_note("Cx")

		self.assertEqual(note.chroma, 2)
		self.assertEqual(note.name, "C##")


	def test_negative_octave (self) -> None:

		"""Octaves may be negative."""

		self.assertEqual(chromaset.pitch.parse_note("c-1").oct, -1)


	def test_invalid_names (self) -> None:

		"""Non-note strings parse to None."""

		for name in ("H", "one", "blah", "C-", "", "c d e", "#"):
			self.assertIsNone(chromaset.pitch.parse_note(name), name)

		self.assertIsNone(chromaset.pitch.parse_note(5))  # type: ignore[arg-type]


def test_interval_number_first () -> None:

	"""Number-first interval names."""

	interval = chromaset.pitch.parse_interval("3M")

	assert interval is not None
	assert interval.name == "3M"
	assert interval.semitones == 4
	assert interval.chroma == 4


def test_interval_quality_first () -> None:

	"""Quality-first names are read as the same interval."""

	assert chromaset.pitch.parse_interval("M3").name == "3M"
	assert chromaset.pitch.parse_interval("P5").chroma == 7
	assert chromaset.pitch.parse_interval("P1").chroma == 0


def test_descending_and_compound_intervals () -> None:

	"""Direction and octaves are kept in semitones but reduced in chroma."""

	down = chromaset.pitch.parse_interval("-2m")
	assert down.semitones == -1
	assert down.chroma == 11

	ninth = chromaset.pitch.parse_interval("9M")
	assert ninth.semitones == 14
	assert ninth.chroma == 2


def test_altered_intervals () -> None:

	"""Augmented and diminished qualities depend on the interval type."""

	assert chromaset.pitch.parse_interval("5d").semitones == 6
	assert chromaset.pitch.parse_interval("4A").semitones == 6
	assert chromaset.pitch.parse_interval("7d").semitones == 9
	assert chromaset.pitch.parse_interval("3m").semitones == 3


@pytest.mark.parametrize("name", ["3P", "1M", "5m", "0P", "P", "3", "one", "M3x"])
def test_invalid_intervals (name: str) -> None:

	"""Qualities that do not suit the number, or malformed names, parse to None."""

	assert chromaset.pitch.parse_interval(name) is None


def test_pitch_class_of_prefers_notes () -> None:

	"""A name that is both a note and an interval candidate resolves as a note."""

	assert chromaset.pitch.pitch_class_of("A4") == 9
	assert chromaset.pitch.pitch_class_of("P4") == 5
	assert chromaset.pitch.pitch_class_of("nothing") is None


def test_interval_names_table () -> None:

	"""Semitone 6 is spelled as a diminished fifth."""

	assert chromaset.pitch.interval_from_semitones(0) == "1P"
	assert chromaset.pitch.interval_from_semitones(6) == "5d"
	assert chromaset.pitch.interval_from_semitones(11) == "7M"
	assert chromaset.pitch.interval_from_semitones(13) == "2m"
	assert len(chromaset.pitch.INTERVAL_NAMES) == 12


def test_transpose_spelling () -> None:

	"""Transposition keeps correct letter names."""

	assert chromaset.pitch.transpose("C", "3m") == "Eb"
	assert chromaset.pitch.transpose("F#", "3M") == "A#"
	assert chromaset.pitch.transpose("D", "7m") == "C"
	assert chromaset.pitch.transpose("B", "5d") == "F"


def test_transpose_with_octaves () -> None:

	"""Notes with octaves cross octave boundaries."""

	assert chromaset.pitch.transpose("C4", "3M") == "E4"
	assert chromaset.pitch.transpose("B4", "2m") == "C5"
	assert chromaset.pitch.transpose("C4", "-2M") == "Bb3"
	assert chromaset.pitch.transpose("C4", "8P") == "C5"


def test_transpose_rejects_unknown_names () -> None:

	"""Unparseable notes or intervals raise ValueError."""

	with pytest.raises(ValueError, match="Unknown note name"):
		chromaset.pitch.transpose("H", "3M")

	with pytest.raises(ValueError, match="Unknown interval name"):
		chromaset.pitch.transpose("C", "3P")


def test_interval_from_fifths () -> None:

	"""Stacked fifths reduce to a simple ascending interval."""

	assert chromaset.pitch.interval_from_fifths(0) == "1P"
	assert chromaset.pitch.interval_from_fifths(1) == "5P"
	assert chromaset.pitch.interval_from_fifths(2) == "2M"
	assert chromaset.pitch.interval_from_fifths(3) == "6M"
	assert chromaset.pitch.interval_from_fifths(-1) == "4P"
	assert chromaset.pitch.interval_from_fifths(-2) == "7m"
	assert chromaset.pitch.interval_from_fifths(6) == "4A"


def test_diatonic_interval () -> None:

	"""The same semitone distance is named after the diatonic degree."""

	assert chromaset.pitch.diatonic_interval(3, 6) == "4A"
	assert chromaset.pitch.diatonic_interval(4, 6) == "5d"
	assert chromaset.pitch.diatonic_interval(2, 3) == "3m"
	assert chromaset.pitch.diatonic_interval(6, 9) == "7d"
