import pytest

import modalfunction.exceptions
import modalfunction.modes
import modalfunction.notes
import modalfunction.scales


def test_scale_c_ionian () -> None:

	"""C Ionian is the white-key scale."""

	assert modalfunction.scales.scale("C", "ionian") == ["C", "D", "E", "F", "G", "A", "B"]


def test_scale_d_dorian () -> None:

	"""D Dorian uses the same notes as C Ionian, starting on D."""

	assert modalfunction.scales.scale("D", "dorian") == ["D", "E", "F", "G", "A", "B", "C"]


def test_scale_flat_key () -> None:

	"""Flat keys should be spelled with flats, one letter per degree."""

	assert modalfunction.scales.scale("Eb", "ionian") == ["Eb", "F", "G", "Ab", "Bb", "C", "D"]


def test_scale_sharp_spelling () -> None:

	"""B Lydian needs sharps on every degree but the root."""

	assert modalfunction.scales.scale("B", "lydian") == ["B", "C#", "D#", "E#", "F#", "G#", "A#"]


def test_scale_double_flats () -> None:

	"""Gb Locrian should spell its lowered degrees with double flats."""

	assert modalfunction.scales.scale("Gb", "locrian") == ["Gb", "Abb", "Bbb", "Cb", "Dbb", "Ebb", "Fb"]


def test_scale_accepts_canonical_root () -> None:

	"""Canonical names such as 'ef' should work as roots."""

	assert modalfunction.scales.scale("ef", "mixolydian") == ["Eb", "F", "G", "Ab", "Bb", "C", "Db"]


def test_scale_matches_pitch_classes () -> None:

	"""Every spelled scale should sound the pitch classes of its mode."""

	for root in modalfunction.notes.CHROMATIC_ROOTS:
		root_pc = modalfunction.notes.pitch_class(root)

		for mode in modalfunction.modes.MODE_NAMES:
			spelled = modalfunction.scales.scale(root, mode)
			expected = modalfunction.scales.scale_pitch_classes(root_pc, mode)

			assert [modalfunction.notes.pitch_class(note) for note in spelled] == expected, f"{root} {mode}"


def test_scale_uses_each_letter_once () -> None:

	"""Seven degrees should use seven different letters."""

	for root in modalfunction.notes.CHROMATIC_ROOTS:
		for mode in modalfunction.modes.MODE_NAMES:
			letters = {note[0] for note in modalfunction.scales.scale(root, mode)}
			assert len(letters) == 7


def test_scale_pitch_classes_a_aeolian () -> None:

	"""A Aeolian wraps around the octave."""

	assert modalfunction.scales.scale_pitch_classes(9, "aeolian") == [9, 11, 0, 2, 4, 5, 7]


def test_spell_note () -> None:

	"""A pitch class should be reachable from a nearby letter."""

	assert modalfunction.scales.spell_note("E", 3) == "Eb"
	assert modalfunction.scales.spell_note("E", 2) == "Ebb"
	assert modalfunction.scales.spell_note("E", 5) == "E#"
	assert modalfunction.scales.spell_note("C", 11) == "Cb"


def test_scale_invalid_mode () -> None:

	"""An unknown mode is a configuration error."""

	with pytest.raises(modalfunction.exceptions.ConfigurationError, match="Unknown mode"):
		modalfunction.scales.scale("C", "bebop")


def test_scale_invalid_root () -> None:

	"""An unknown root should raise ValueError."""

	with pytest.raises(ValueError, match="Unknown note name"):
		modalfunction.scales.scale("H", "ionian")
