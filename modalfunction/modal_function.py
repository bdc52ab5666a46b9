"""Attribute-driven questions about modal functions.

``ModalFunction`` holds the known parts of a question as attributes and
builds the pattern for each relation from them, leaving every attribute
that was not given unbound.

Example:
	```python
	import modalfunction

	# What mode(s) have a D major dominant chord?
	m = modalfunction.ModalFunction(chord_note="d", chord="maj", key_function="dominant")
	m.chord_key()
	# → [ChordKey('d', 'maj', 'g', 'ionian', 'dominant', 'V'),
	#    ChordKey('d', 'maj', 'g', 'lydian', 'dominant', 'V')]

	# In what mode(s) can G major act as a subdominant pivot chord from C?
	m = modalfunction.ModalFunction(chord_note="g", chord="maj", mode_note="c", key_function="subdominant")
	m.pivot_chord_keys()
	```
"""

import logging
import typing

import modalfunction.query


logger = logging.getLogger(__name__)


class ModalFunction:

	"""
	A question about chords, keys, modes and functions.
	"""

	def __init__ (
		self,
		chord_note: typing.Optional[str] = None,
		chord: typing.Optional[str] = None,
		mode_note: typing.Optional[str] = None,
		mode: typing.Optional[str] = None,
		mode_function: typing.Optional[str] = None,
		mode_roman: typing.Optional[str] = None,
		key_note: typing.Optional[str] = None,
		key: typing.Optional[str] = None,
		key_function: typing.Optional[str] = None,
		key_roman: typing.Optional[str] = None,
		verbose: bool = False,
		engine: typing.Optional[modalfunction.query.QueryEngine] = None
	) -> None:

		"""Store the known parts of the question.

		Parameters:
			chord_note: Chord root (e.g. ``"d"``)
			chord: Chord quality (``"maj"``, ``"min"`` or ``"dim"``)
			mode_note: Root of the first key in a pivot question
			mode: Mode of the first key (or first mode for roman_key)
			mode_function: Function of the chord in the first key
			mode_roman: Roman numeral of the chord in the first key
			key_note: Key root (second key in a pivot question)
			key: Mode of the key (second mode for roman_key)
			key_function: Function of the chord in the key
			key_roman: Roman numeral of the chord in the key
			verbose: Log each query and its result count at INFO level
			engine: Engine to query (default: the shared engine)

		Raises:
			ValueError: If ``verbose`` is not a bool.
		"""

		if not isinstance(verbose, bool):
			logger.error(f"verbose must be a bool, got {verbose!r}")
			raise ValueError(f"{verbose!r} is not a boolean")

		self.chord_note = chord_note
		self.chord = chord
		self.mode_note = mode_note
		self.mode = mode
		self.mode_function = mode_function
		self.mode_roman = mode_roman
		self.key_note = key_note
		self.key = key
		self.key_function = key_function
		self.key_roman = key_roman
		self.verbose = verbose

		self._engine = engine


	@property
	def engine (self) -> modalfunction.query.QueryEngine:

		"""
		The engine answering this question's queries.
		"""

		if self._engine is None:
			self._engine = modalfunction.query.default_engine()

		return self._engine


	def chord_key (self) -> typing.List[modalfunction.query.ChordKey]:

		"""Ask which chords are in which keys.

		Pattern: ``chord_key(chord_note, chord, key_note, key, key_function, key_roman)``.
		"""

		pattern = (
			self.chord_note,
			self.chord,
			self.key_note,
			self.key,
			self.key_function,
			self.key_roman,
		)

		return self._query("chord_key", modalfunction.query.ChordKey, self.engine.query_chord_key, pattern)


	def pivot_chord_keys (self) -> typing.List[modalfunction.query.PivotChordKeys]:

		"""Ask which chords are shared by two keys with different functions.

		Pattern: ``pivot_chord_keys(chord_note, chord, mode_note, mode,
		mode_function, mode_roman, key_note, key, key_function, key_roman)``.
		"""

		pattern = (
			self.chord_note,
			self.chord,
			self.mode_note,
			self.mode,
			self.mode_function,
			self.mode_roman,
			self.key_note,
			self.key,
			self.key_function,
			self.key_roman,
		)

		return self._query("pivot_chord_keys", modalfunction.query.PivotChordKeys, self.engine.query_pivot_chord_keys, pattern)


	def roman_key (self) -> typing.List[modalfunction.query.RomanKey]:

		"""Ask which roman numeral chords of two modes differ in function.

		Pattern: ``roman_key(mode, mode_roman, key, key_roman)``.
		"""

		pattern = (
			self.mode,
			self.mode_roman,
			self.key,
			self.key_roman,
		)

		return self._query("roman_key", modalfunction.query.RomanKey, self.engine.query_roman_key, pattern)


	def _query (
		self,
		name: str,
		record_type: modalfunction.query.RecordType,
		run: typing.Callable[[modalfunction.query.Pattern], typing.List[typing.Any]],
		pattern: typing.Tuple[typing.Optional[str], ...]
	) -> typing.List[typing.Any]:

		level = logging.INFO if self.verbose else logging.DEBUG
		logger.log(level, f"Query: {modalfunction.query.format_clause(name, record_type, pattern)}")

		results = run(pattern)

		logger.log(level, f"{name}: {len(results)} result(s)")

		return results
