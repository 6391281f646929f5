"""Chroma strings and set numbers.

A chroma is a 12-character string of ``"0"`` and ``"1"``; index 0 is C,
index 11 is B. Reading it as a binary numeral (index 0 most significant)
gives the set number, an integer from 0 to 4095. The two forms are a
bijection.

Example:
	```python
	chroma_to_set_num("101010000000")  # → 2688
	set_num_to_chroma(1)               # → "000000000001"
	```
"""

import typing


CHROMA_LENGTH = 12
MAX_SET_NUM = (1 << CHROMA_LENGTH) - 1
EMPTY_CHROMA = "0" * CHROMA_LENGTH

# Chromas with pitch class 0 set, ascending by set number.
_CANONICAL_CHROMAS: typing.Tuple[str, ...] = tuple(
	format(n, "012b") for n in range(1 << (CHROMA_LENGTH - 1), MAX_SET_NUM + 1)
)


class InvalidSetNumber (ValueError):
	pass


def is_chroma (value: typing.Any) -> bool:

	"""
	Return True if the value is a 12-character string of 0s and 1s.
	"""

	return (
		isinstance(value, str)
		and len(value) == CHROMA_LENGTH
		and all(c in "01" for c in value)
	)


def is_set_num (value: typing.Any) -> bool:

	"""
	Return True if the value is an integer between 0 and 4095.
	"""

	return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_SET_NUM


def chroma_to_set_num (chroma: str) -> int:

	"""
	Read a chroma as an MSB-first binary number.
	"""

	return int(chroma, 2)


def set_num_to_chroma (set_num: int) -> str:

	"""Format a set number as a zero-padded 12-digit chroma.

	Raises:
		InvalidSetNumber: If ``set_num`` is not an integer in ``[0, 4095]``.
	"""

	if not is_set_num(set_num):
		raise InvalidSetNumber(f"Set number must be an integer between 0 and {MAX_SET_NUM}, got {set_num!r}")

	return format(set_num, "012b")


def chromas () -> typing.List[str]:

	"""Return the 2048 chromas that contain pitch class 0.

	These are the representatives used when every set is assumed to include
	its reference note. The list runs from ``"100000000000"`` to
	``"111111111111"`` in ascending set-number order; each call returns a new
	list.
	"""

	return list(_CANONICAL_CHROMAS)
