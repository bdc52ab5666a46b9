"""Static mode definitions.

Each of the seven diatonic modes maps to seven degree descriptors, one per
scale degree in ascending order. The table is built once at import time and
is read-only: descriptors are frozen dataclasses, each mode holds a tuple and
``MODES`` itself is a mapping proxy.
"""

import dataclasses
import logging
import types
import typing

import modalfunction.exceptions


logger = logging.getLogger(__name__)


QUALITY_NAMES: typing.Dict[str, str] = {
	"maj": "major",
	"min": "minor",
	"dim": "diminished",
}

FUNCTIONS: typing.Tuple[str, ...] = (
	"tonic",
	"supertonic",
	"mediant",
	"subdominant",
	"dominant",
	"submediant",
	"subtonic",
	"leading_tone",
)


@dataclasses.dataclass(frozen=True)
class ModeDegree:

	"""
	The chord built on one degree of a mode.
	"""

	chord_quality: str
	roman_numeral: str
	function: str


def _degrees (*rows: typing.Tuple[str, str, str]) -> typing.Tuple[ModeDegree, ...]:

	return tuple(ModeDegree(chord_quality=quality, roman_numeral=roman, function=function) for quality, roman, function in rows)


MODES: typing.Mapping[str, typing.Tuple[ModeDegree, ...]] = types.MappingProxyType({
	"ionian": _degrees(
		("maj", "I",    "tonic"),
		("min", "ii",   "supertonic"),
		("min", "iii",  "mediant"),
		("maj", "IV",   "subdominant"),
		("maj", "V",    "dominant"),
		("min", "vi",   "submediant"),
		("dim", "vii°", "leading_tone"),
	),
	"dorian": _degrees(
		("min", "i",    "tonic"),
		("min", "ii",   "supertonic"),
		("maj", "III",  "mediant"),
		("maj", "IV",   "subdominant"),
		("min", "v",    "dominant"),
		("dim", "vi°",  "submediant"),
		("maj", "VII",  "subtonic"),
	),
	"phrygian": _degrees(
		("min", "i",    "tonic"),
		("maj", "II",   "supertonic"),
		("maj", "III",  "mediant"),
		("min", "iv",   "subdominant"),
		("dim", "v°",   "dominant"),
		("maj", "VI",   "submediant"),
		("min", "vii",  "subtonic"),
	),
	"lydian": _degrees(
		("maj", "I",    "tonic"),
		("maj", "II",   "supertonic"),
		("min", "iii",  "mediant"),
		("dim", "iv°",  "subdominant"),
		("maj", "V",    "dominant"),
		("min", "vi",   "submediant"),
		("min", "vii",  "leading_tone"),
	),
	"mixolydian": _degrees(
		("maj", "I",    "tonic"),
		("min", "ii",   "supertonic"),
		("dim", "iii°", "mediant"),
		("maj", "IV",   "subdominant"),
		("min", "v",    "dominant"),
		("min", "vi",   "submediant"),
		("maj", "VII",  "subtonic"),
	),
	"aeolian": _degrees(
		("min", "i",    "tonic"),
		("dim", "ii°",  "supertonic"),
		("maj", "III",  "mediant"),
		("min", "iv",   "subdominant"),
		("min", "v",    "dominant"),
		("maj", "VI",   "submediant"),
		("maj", "VII",  "subtonic"),
	),
	"locrian": _degrees(
		("dim", "i°",   "tonic"),
		("maj", "II",   "supertonic"),
		("min", "iii",  "mediant"),
		("min", "iv",   "subdominant"),
		("maj", "V",    "dominant"),
		("maj", "VI",   "submediant"),
		("min", "vii",  "subtonic"),
	),
})

# Fact generation walks the modes in this order.
MODE_NAMES: typing.Tuple[str, ...] = tuple(sorted(MODES))


def get_mode (name: str) -> typing.Tuple[ModeDegree, ...]:

	"""Return the seven degree descriptors of a mode.

	Parameters:
		name: One of ``"ionian"``, ``"dorian"``, ``"phrygian"``, ``"lydian"``,
			``"mixolydian"``, ``"aeolian"``, ``"locrian"``.

	Raises:
		ConfigurationError: If the mode is not defined.
	"""

	if name not in MODES:
		logger.error(f"Unknown mode requested: {name!r}")
		raise modalfunction.exceptions.ConfigurationError(
			f"Unknown mode: {name!r}. Available: {', '.join(MODE_NAMES)}"
		)

	return MODES[name]
