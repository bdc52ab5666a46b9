import logging
import typing

import modalfunction.exceptions
import modalfunction.notes


logger = logging.getLogger(__name__)


MODE_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"ionian": [0, 2, 4, 5, 7, 9, 11],
	"dorian": [0, 2, 3, 5, 7, 9, 10],
	"phrygian": [0, 1, 3, 5, 7, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"aeolian": [0, 2, 3, 5, 7, 8, 10],
	"locrian": [0, 1, 3, 5, 6, 8, 10],
}


def get_intervals (mode: str) -> typing.List[int]:

	"""
	Return the semitone offsets of a mode's seven degrees.
	"""

	if mode not in MODE_INTERVALS:
		logger.error(f"No intervals defined for mode {mode!r}")
		raise modalfunction.exceptions.ConfigurationError(
			f"Unknown mode: {mode!r}. Available: {', '.join(sorted(MODE_INTERVALS))}"
		)

	return list(MODE_INTERVALS[mode])


def scale_pitch_classes (key_pc: int, mode: str = "ionian") -> typing.List[int]:

	"""
	Return the pitch classes (0-11) of a key and mode, in degree order.

	Example:
		```python
		scale_pitch_classes(9, "aeolian")  # → [9, 11, 0, 2, 4, 5, 7]
		```
	"""

	return [(key_pc + interval) % 12 for interval in get_intervals(mode)]


def spell_note (letter: str, pc: int) -> str:

	"""Spell a pitch class on a given letter.

	Parameters:
		letter: Upper case note letter that the spelling must use.
		pc: Pitch class to reach from that letter.

	Returns:
		The letter followed by sharps (``#``) or flats (``b``).

	Example:
		```python
		spell_note("E", 3)  # → "Eb"
		spell_note("E", 2)  # → "Ebb"
		spell_note("E", 5)  # → "E#"
		```
	"""

	offset = (pc - modalfunction.notes.LETTER_TO_PC[letter] + 6) % 12 - 6

	if offset >= 0:
		return letter + "#" * offset

	return letter + "b" * -offset


def scale (root: str, mode: str) -> typing.List[str]:

	"""Return the seven notes of a mode built on a root.

	Each degree uses the next note letter, so the spelling follows the key
	signature (``Gb`` ionian contains ``Cb``, ``B`` lydian contains ``E#``).

	Parameters:
		root: Root note in any spelling accepted by
			:func:`modalfunction.notes.parse_note`.
		mode: Diatonic mode name.

	Returns:
		Seven note names in ascending degree order.

	Raises:
		ConfigurationError: If the mode is not defined.
		ValueError: If the root is not a recognised note name.

	Example:
		```python
		scale("D", "dorian")  # → ["D", "E", "F", "G", "A", "B", "C"]
		scale("Eb", "ionian")  # → ["Eb", "F", "G", "Ab", "Bb", "C", "D"]
		```
	"""

	intervals = get_intervals(mode)
	letter, _, _ = modalfunction.notes.parse_note(root)
	root_pc = modalfunction.notes.pitch_class(root)
	first = modalfunction.notes.LETTERS.index(letter)

	notes: typing.List[str] = []

	for degree, interval in enumerate(intervals):
		degree_letter = modalfunction.notes.LETTERS[(first + degree) % 7]
		notes.append(spell_note(degree_letter, (root_pc + interval) % 12))

	return notes
