"""The chord-key fact table.

A ``chord_key`` fact states that a chord rooted at ``chord_root`` with
``chord_quality`` is the scale-degree chord serving ``function`` (numbered
``roman``) in the key ``key_root`` ``mode``. The table holds one fact per
degree for every chromatic root and every mode: 12 x 7 x 7 = 588 facts.

Generation order is part of the contract. Roots follow
``notes.CHROMATIC_ROOTS``, modes follow ``modes.MODE_NAMES`` (alphabetical)
and degrees run 1 to 7, so every query enumerates results in the same order
on every run.
"""

import logging
import typing

import modalfunction.exceptions
import modalfunction.modes
import modalfunction.notes
import modalfunction.scales


logger = logging.getLogger(__name__)

ScaleFunction = typing.Callable[[str, str], typing.Sequence[str]]
NormalizeFunction = typing.Callable[[str], str]

DEGREES_PER_MODE = 7


class ChordKey (typing.NamedTuple):

	"""A chord-key fact, or a pattern over facts when some fields are ``None``.

	Example:
		```python
		ChordKey("d", "maj", "g", "ionian", "dominant", "V")

		# Pattern: every D major chord with a dominant function
		ChordKey(chord_root="d", chord_quality="maj", function="dominant")
		```
	"""

	chord_root: typing.Optional[str] = None
	chord_quality: typing.Optional[str] = None
	key_root: typing.Optional[str] = None
	mode: typing.Optional[str] = None
	function: typing.Optional[str] = None
	roman: typing.Optional[str] = None


def generate_facts (
	scale: ScaleFunction = modalfunction.scales.scale,
	normalize: NormalizeFunction = modalfunction.notes.normalize
) -> typing.Tuple[ChordKey, ...]:

	"""Build the complete chord-key fact table.

	Parameters:
		scale: Returns the seven notes of a mode on a root, in degree order.
		normalize: Maps a note spelling to its canonical name.

	Returns:
		Tuple of 588 facts in generation order.

	Raises:
		ConfigurationError: If ``scale`` does not return exactly seven notes,
			or a mode is missing from the mode table.
	"""

	facts: typing.List[ChordKey] = []

	for root in modalfunction.notes.CHROMATIC_ROOTS:

		key_root = normalize(root)

		for mode in modalfunction.modes.MODE_NAMES:

			degrees = modalfunction.modes.get_mode(mode)
			notes = list(scale(root, mode))

			logger.debug(f"Scale: {root} {mode} {notes}")

			if len(notes) != DEGREES_PER_MODE:
				logger.error(f"Scale function returned {len(notes)} notes for {root} {mode}")
				raise modalfunction.exceptions.ConfigurationError(
					f"Scale for {root} {mode} has {len(notes)} notes, expected {DEGREES_PER_MODE}"
				)

			for note, degree in zip(notes, degrees):
				facts.append(ChordKey(
					chord_root = normalize(note),
					chord_quality = degree.chord_quality,
					key_root = key_root,
					mode = mode,
					function = degree.function,
					roman = degree.roman_numeral
				))

	logger.debug(f"Generated {len(facts)} chord_key facts")

	return tuple(facts)
