import dataclasses

import pytest

import modalfunction.exceptions
import modalfunction.modes
import modalfunction.scales


QUALITY_INTERVALS = {
	"maj": [0, 4, 7],
	"min": [0, 3, 7],
	"dim": [0, 3, 6],
}


def test_mode_names_are_sorted () -> None:

	"""Modes should be walked in alphabetical order."""

	assert modalfunction.modes.MODE_NAMES == (
		"aeolian", "dorian", "ionian", "locrian", "lydian", "mixolydian", "phrygian"
	)


def test_every_mode_has_seven_distinct_functions () -> None:

	"""Each mode needs one descriptor per degree, each with its own function."""

	for name, degrees in modalfunction.modes.MODES.items():
		functions = [degree.function for degree in degrees]

		assert len(degrees) == 7, name
		assert len(set(functions)) == 7, name
		assert functions[:6] == ["tonic", "supertonic", "mediant", "subdominant", "dominant", "submediant"]
		assert functions[6] in ("subtonic", "leading_tone")
		assert set(functions) <= set(modalfunction.modes.FUNCTIONS)


def test_leading_tone_modes () -> None:

	"""Only Ionian and Lydian have a leading tone on the seventh degree."""

	leading = [name for name, degrees in modalfunction.modes.MODES.items() if degrees[6].function == "leading_tone"]

	assert sorted(leading) == ["ionian", "lydian"]


def test_qualities_match_scale_triads () -> None:

	"""Each quality should match the triad stacked in thirds on its degree."""

	for name, degrees in modalfunction.modes.MODES.items():
		pcs = modalfunction.scales.scale_pitch_classes(0, name)

		for i, degree in enumerate(degrees):
			triad = [pcs[i], pcs[(i + 2) % 7], pcs[(i + 4) % 7]]
			intervals = [(pc - triad[0]) % 12 for pc in triad]

			assert intervals == QUALITY_INTERVALS[degree.chord_quality], f"{name} degree {i + 1}"


def test_roman_numeral_case_follows_quality () -> None:

	"""Major numerals are upper case, minor lower case, diminished lower case with a degree sign."""

	for degrees in modalfunction.modes.MODES.values():
		for degree in degrees:

			if degree.chord_quality == "maj":
				assert degree.roman_numeral.isupper()

			elif degree.chord_quality == "min":
				assert degree.roman_numeral.islower()
				assert not degree.roman_numeral.endswith("°")

			else:
				assert degree.roman_numeral.endswith("°")
				assert degree.roman_numeral[:-1].islower()


def test_ionian_table () -> None:

	"""Ionian should read I ii iii IV V vi vii°."""

	degrees = modalfunction.modes.get_mode("ionian")

	assert [d.roman_numeral for d in degrees] == ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
	assert [d.chord_quality for d in degrees] == ["maj", "min", "min", "maj", "maj", "min", "dim"]


def test_quality_names () -> None:

	"""Every quality token should have a long name."""

	for degrees in modalfunction.modes.MODES.values():
		for degree in degrees:
			assert degree.chord_quality in modalfunction.modes.QUALITY_NAMES


def test_table_is_read_only () -> None:

	"""Neither the table nor its descriptors can be changed."""

	with pytest.raises(TypeError):
		modalfunction.modes.MODES["bebop"] = ()  # type: ignore[index]

	with pytest.raises(dataclasses.FrozenInstanceError):
		modalfunction.modes.MODES["ionian"][0].function = "dominant"  # type: ignore[misc]

	assert isinstance(modalfunction.modes.MODES["ionian"], tuple)


def test_get_mode_unknown () -> None:

	"""An unknown mode is a configuration error."""

	with pytest.raises(modalfunction.exceptions.ConfigurationError, match="Unknown mode"):
		modalfunction.modes.get_mode("bebop")
