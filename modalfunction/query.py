"""Pattern queries over the chord-key facts and the two derived relations.

Three relations can be queried:

- ``chord_key`` (6 slots): the generated facts themselves.
- ``pivot_chord_keys`` (10 slots): one chord, two key contexts in which it
  serves different functions.
- ``roman_key`` (4 slots): two (mode, roman numeral) identifications whose
  functions differ.

A pattern has one slot per field. A slot holds either the literal a field
must equal or ``None`` to leave it free. Values are compared exactly, so
bound literals must already be in canonical form (``"d"``, ``"maj"``,
``"V"``). Results come back in fact generation order; for the two rules the
first fact of a pair is the outer loop and the second the inner loop.
"""

import collections.abc
import logging
import typing

import modalfunction.exceptions
import modalfunction.facts
import modalfunction.notes
import modalfunction.scales


logger = logging.getLogger(__name__)

Slot = typing.Optional[str]
Pattern = typing.Sequence[Slot]

ChordKey = modalfunction.facts.ChordKey


class PivotChordKeys (typing.NamedTuple):

	"""
	A chord shared by two key contexts in which its function differs.
	"""

	chord_root: typing.Optional[str] = None
	chord_quality: typing.Optional[str] = None
	key1_root: typing.Optional[str] = None
	mode1: typing.Optional[str] = None
	function1: typing.Optional[str] = None
	roman1: typing.Optional[str] = None
	key2_root: typing.Optional[str] = None
	mode2: typing.Optional[str] = None
	function2: typing.Optional[str] = None
	roman2: typing.Optional[str] = None


class RomanKey (typing.NamedTuple):

	"""
	Two mode/roman numeral identifications with different functions.
	"""

	mode1: typing.Optional[str] = None
	roman1: typing.Optional[str] = None
	mode2: typing.Optional[str] = None
	roman2: typing.Optional[str] = None


RecordType = typing.Union[typing.Type[ChordKey], typing.Type[PivotChordKeys], typing.Type[RomanKey]]


def _variable_name (field: str) -> str:

	return "".join(part.capitalize() for part in field.split("_"))


def format_clause (name: str, record_type: RecordType, pattern: Pattern) -> str:

	"""Render a pattern as a clause for log output.

	Unbound slots are shown as variables named after their field.

	Example:
		```python
		format_clause("chord_key", ChordKey, ("d", "maj", None, None, "dominant", None))
		# → "chord_key(d, maj, KeyRoot, Mode, dominant, Roman)"
		```
	"""

	args = [
		_variable_name(field) if slot is None else str(slot)
		for field, slot in zip(record_type._fields, pattern)
	]

	return f"{name}({', '.join(args)})"


def coerce_pattern (
	record_type: RecordType,
	pattern: typing.Optional[Pattern] = None,
	slots: typing.Optional[typing.Dict[str, Slot]] = None
) -> typing.Tuple[Slot, ...]:

	"""Turn a positional pattern or keyword slots into a plain tuple.

	Parameters:
		record_type: Record type of the target relation (fixes the arity).
		pattern: Sequence with one slot per field, ``None`` for unbound.
		slots: Keyword slots by field name. Missing fields are unbound.

	Raises:
		InvalidPatternError: If the pattern has the wrong arity, is not a
			sequence, names an unknown field, or both forms are given.
	"""

	arity = len(record_type._fields)

	if pattern is None:
		try:
			return tuple(record_type(**(slots or {})))
		except TypeError as exc:
			logger.error(f"Bad keyword slots for {record_type.__name__}: {exc}")
			raise modalfunction.exceptions.InvalidPatternError(
				f"Unknown slot for {record_type.__name__}. Fields: {', '.join(record_type._fields)}"
			) from exc

	if slots:
		logger.error("Pattern given both positionally and by keyword")
		raise modalfunction.exceptions.InvalidPatternError(
			"Give either a positional pattern or keyword slots, not both"
		)

	if isinstance(pattern, str) or not isinstance(pattern, collections.abc.Sequence):
		logger.error(f"Pattern is not a sequence: {pattern!r}")
		raise modalfunction.exceptions.InvalidPatternError(
			f"Pattern must be a sequence of {arity} slots, got {pattern!r}"
		)

	if len(pattern) != arity:
		logger.error(f"Pattern arity {len(pattern)} does not match {record_type.__name__}/{arity}")
		raise modalfunction.exceptions.InvalidPatternError(
			f"{record_type.__name__} patterns need {arity} slots, got {len(pattern)}"
		)

	return tuple(pattern)


def matches (pattern: Pattern, values: typing.Sequence[str]) -> bool:

	"""
	Return True when every bound slot equals the value in the same position.
	"""

	return all(slot is None or slot == value for slot, value in zip(pattern, values))


class QueryEngine:

	"""Holds the fact table and answers pattern queries against it.

	The fact table is generated once, in the constructor, and never changes
	afterwards, so a single engine can be shared freely.

	Example:
		```python
		engine = QueryEngine()

		# What mode(s) have a D major dominant chord?
		engine.query_chord_key(("d", "maj", None, None, "dominant", None))
		# → [ChordKey('d', 'maj', 'g', 'ionian', 'dominant', 'V'),
		#    ChordKey('d', 'maj', 'g', 'lydian', 'dominant', 'V')]

		# The same question with keyword slots
		engine.query_chord_key(chord_root="d", chord_quality="maj", function="dominant")
		```
	"""

	def __init__ (
		self,
		scale: typing.Optional[modalfunction.facts.ScaleFunction] = None,
		normalize: typing.Optional[modalfunction.facts.NormalizeFunction] = None
	) -> None:

		"""Generate the fact table.

		Parameters:
			scale: Scale function (default :func:`modalfunction.scales.scale`)
			normalize: Note normalizer (default :func:`modalfunction.notes.normalize`)

		Raises:
			ConfigurationError: If the fact table cannot be generated.
		"""

		self._facts = modalfunction.facts.generate_facts(
			scale = scale or modalfunction.scales.scale,
			normalize = normalize or modalfunction.notes.normalize
		)

		# Facts sharing a chord, in generation order, for the pivot join.
		by_chord: typing.Dict[typing.Tuple[str, str], typing.List[ChordKey]] = {}

		for fact in self._facts:
			by_chord.setdefault((fact.chord_root, fact.chord_quality), []).append(fact)

		self._by_chord = {chord: tuple(facts) for chord, facts in by_chord.items()}


	@property
	def facts (self) -> typing.Tuple[ChordKey, ...]:

		"""
		The generated facts, in generation order.
		"""

		return self._facts


	def iter_chord_key (self, pattern: typing.Optional[Pattern] = None, **slots: Slot) -> typing.Iterator[ChordKey]:

		"""
		Lazily yield the facts matching a 6-slot pattern.
		"""

		bound = coerce_pattern(ChordKey, pattern, slots)
		logger.debug(f"Query: {format_clause('chord_key', ChordKey, bound)}")

		return self._scan_chord_key(bound)


	def query_chord_key (self, pattern: typing.Optional[Pattern] = None, **slots: Slot) -> typing.List[ChordKey]:

		"""Return the facts matching a pattern.

		Parameters:
			pattern: ``(chord_root, chord_quality, key_root, mode, function, roman)``
				with ``None`` for free slots.
			**slots: Alternatively, bound slots by field name.

		Returns:
			Matching facts in generation order (empty when nothing matches).

		Raises:
			InvalidPatternError: If the pattern is not a 6-slot sequence.
		"""

		results = list(self.iter_chord_key(pattern, **slots))
		logger.debug(f"chord_key: {len(results)} result(s)")

		return results


	def iter_pivot_chord_keys (self, pattern: typing.Optional[Pattern] = None, **slots: Slot) -> typing.Iterator[PivotChordKeys]:

		"""
		Lazily yield the pivot_chord_keys tuples matching a 10-slot pattern.
		"""

		bound = coerce_pattern(PivotChordKeys, pattern, slots)
		logger.debug(f"Query: {format_clause('pivot_chord_keys', PivotChordKeys, bound)}")

		return self._scan_pivot_chord_keys(bound)


	def query_pivot_chord_keys (self, pattern: typing.Optional[Pattern] = None, **slots: Slot) -> typing.List[PivotChordKeys]:

		"""Return the pivot chord tuples matching a pattern.

		A tuple pairs two facts for the same chord root and quality whose
		functions differ. Both orders of every such pair are produced.

		Parameters:
			pattern: ``(chord_root, chord_quality, key1_root, mode1, function1,
				roman1, key2_root, mode2, function2, roman2)`` with ``None`` for
				free slots.
			**slots: Alternatively, bound slots by field name.

		Returns:
			Matching tuples ordered by first fact, then second fact.

		Raises:
			InvalidPatternError: If the pattern is not a 10-slot sequence.

		Example:
			```python
			# In what modes can G major move from dominant in C to subdominant in D?
			engine.query_pivot_chord_keys(
				("g", "maj", "c", None, "dominant", None, "d", None, "subdominant", None)
			)
			```
		"""

		results = list(self.iter_pivot_chord_keys(pattern, **slots))
		logger.debug(f"pivot_chord_keys: {len(results)} result(s)")

		return results


	def iter_roman_key (self, pattern: typing.Optional[Pattern] = None, **slots: Slot) -> typing.Iterator[RomanKey]:

		"""
		Lazily yield the roman_key tuples matching a 4-slot pattern.
		"""

		bound = coerce_pattern(RomanKey, pattern, slots)
		logger.debug(f"Query: {format_clause('roman_key', RomanKey, bound)}")

		return self._scan_roman_key(bound)


	def query_roman_key (self, pattern: typing.Optional[Pattern] = None, **slots: Slot) -> typing.List[RomanKey]:

		"""Return the roman_key tuples matching a pattern.

		Any two facts whose functions differ form a tuple; chord and key
		roots are not joined, so this relation is deliberately broad and
		contains one entry per qualifying pair of facts (duplicates included).

		Parameters:
			pattern: ``(mode1, roman1, mode2, roman2)`` with ``None`` for free slots.
			**slots: Alternatively, bound slots by field name.

		Raises:
			InvalidPatternError: If the pattern is not a 4-slot sequence.
		"""

		results = list(self.iter_roman_key(pattern, **slots))
		logger.debug(f"roman_key: {len(results)} result(s)")

		return results


	def _scan_chord_key (self, bound: typing.Tuple[Slot, ...]) -> typing.Iterator[ChordKey]:

		for fact in self._facts:
			if matches(bound, fact):
				yield fact


	def _scan_pivot_chord_keys (self, bound: typing.Tuple[Slot, ...]) -> typing.Iterator[PivotChordKeys]:

		# The first six slots line up with the fields of the first fact.
		first_pattern = bound[:6]
		second_pattern = bound[6:]

		for first in self._facts:

			if not matches(first_pattern, first):
				continue

			for second in self._by_chord[(first.chord_root, first.chord_quality)]:

				if second.function == first.function:
					continue

				tail = (second.key_root, second.mode, second.function, second.roman)

				if matches(second_pattern, tail):
					yield PivotChordKeys(*first, *tail)


	def _scan_roman_key (self, bound: typing.Tuple[Slot, ...]) -> typing.Iterator[RomanKey]:

		firsts = [fact for fact in self._facts if matches(bound[:2], (fact.mode, fact.roman))]
		seconds = [fact for fact in self._facts if matches(bound[2:], (fact.mode, fact.roman))]

		for first in firsts:
			for second in seconds:
				if first.function != second.function:
					yield RomanKey(first.mode, first.roman, second.mode, second.roman)


_default_engine: typing.Optional[QueryEngine] = None


def default_engine () -> QueryEngine:

	"""
	Return the shared engine with the default scale and normalizer, building it on first use.
	"""

	global _default_engine

	if _default_engine is None:
		_default_engine = QueryEngine()

	return _default_engine
