"""Note names and pitch class utilities.

This module turns the many ways of writing a note into the spelling used as
the equality key throughout the fact table.

Module-level constants:
- `LETTER_TO_PC`: Maps natural note letters to pitch classes (0-11)
- `PC_TO_NOTE_NAME`: Flat-preferring canonical names indexed by pitch class
- `CHROMATIC_ROOTS`: The 12 key roots, in chromatic order starting at C

Canonical spelling:
- lower case letter, flats written as ``f`` (``"Eb"`` → ``"ef"``, ``"Ebb"`` → ``"eff"``)
- any spelling that contains a sharp is respelled from its pitch class,
  preferring flats (``"C#"`` → ``"df"``, ``"E#"`` → ``"f"``, ``"B#"`` → ``"c"``)
- natural and flat spellings are otherwise kept as written (``"Cb"`` → ``"cf"``)
- a trailing octave number is dropped (``"C#4"`` → ``"df"``)
"""

import re
import typing


LETTERS: str = "CDEFGAB"

LETTER_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"D": 2,
	"E": 4,
	"F": 5,
	"G": 7,
	"A": 9,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"c",
	"df",
	"d",
	"ef",
	"e",
	"f",
	"gf",
	"g",
	"af",
	"a",
	"bf",
	"b",
]

# Raw spellings of the 12 key roots, as handed to the scale function.
CHROMATIC_ROOTS: typing.Tuple[str, ...] = (
	"C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
)

_ACCIDENTALS: typing.Dict[str, int] = {
	"#": 1,
	"♯": 1,
	"s": 1,
	"x": 2,
	"b": -1,
	"♭": -1,
	"f": -1,
}

_NOTE_RE = re.compile(r"^([A-Ga-g])([#♯sxb♭f]*)(-?\d+)?$")


def parse_note (note: str) -> typing.Tuple[str, int, bool]:

	"""Split a note name into its letter, alteration and sharp flag.

	Parameters:
		note: Note name such as ``"C"``, ``"F#"``, ``"Bb"``, ``"ef"``, ``"Cs4"``.

	Returns:
		``(letter, alteration, has_sharp)`` where ``letter`` is upper case and
		``alteration`` is the net number of semitones (negative for flats).

	Raises:
		ValueError: If the note name is not recognised.
	"""

	if not isinstance(note, str):
		raise ValueError(f"Note name must be a string, got {note!r}")

	match = _NOTE_RE.match(note.strip())

	if match is None:
		raise ValueError(f"Unknown note name: {note!r}. Expected e.g. 'C', 'F#', 'Bb', 'ef'.")

	letter, accidentals, _ = match.groups()
	alteration = sum(_ACCIDENTALS[symbol] for symbol in accidentals)
	has_sharp = any(_ACCIDENTALS[symbol] > 0 for symbol in accidentals)

	return letter.upper(), alteration, has_sharp


def pitch_class (note: str) -> int:

	"""Return the pitch class (0-11) of any note spelling.

	Example:
		```python
		pitch_class("C")    # → 0
		pitch_class("E#")   # → 5
		pitch_class("eff")  # → 2
		```
	"""

	letter, alteration, _ = parse_note(note)

	return (LETTER_TO_PC[letter] + alteration) % 12


def note_name (pc: int) -> str:

	"""
	Return the canonical name for a pitch class.
	"""

	return PC_TO_NOTE_NAME[pc % 12]


def normalize (note: str) -> str:

	"""Return the canonical lower case spelling of a note.

	Spellings containing a sharp are replaced by the flat-preferring name of
	their pitch class. Natural and flat spellings keep their letter, with
	each flat written as ``f``.

	Parameters:
		note: Note name in any supported spelling.

	Returns:
		Canonical note name.

	Raises:
		ValueError: If the note name is not recognised.

	Example:
		```python
		normalize("C#")  # → "df"
		normalize("Bb")  # → "bf"
		normalize("Cb")  # → "cf"
		normalize("df")  # → "df"
		```
	"""

	letter, alteration, has_sharp = parse_note(note)

	if has_sharp:
		return note_name(LETTER_TO_PC[letter] + alteration)

	return letter.lower() + "f" * -alteration
