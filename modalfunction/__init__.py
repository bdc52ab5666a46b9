"""
modalfunction - ask questions about chords, keys, modes and diatonic function.

A knowledge base of ``chord_key`` facts is generated for every chromatic key
root and every diatonic mode: which chord sits on each scale degree, its
quality, its roman numeral and its harmonic function. Two derived relations
are computed from it:

- ``pivot_chord_keys`` - the same chord serving different functions in two
  key contexts, the raw material of a pivot-chord modulation.
- ``roman_key`` - pairs of mode/roman numeral identifications whose
  functions differ.

Questions are patterns: fix the parts you know, leave the rest as ``None``,
and every consistent combination comes back in a stable order.

Minimal example:

    ```python
    import modalfunction

    engine = modalfunction.QueryEngine()

    # What mode(s) have a D major dominant chord?
    engine.query_chord_key(chord_root="d", chord_quality="maj", function="dominant")

    # The same question, attribute style
    modalfunction.ModalFunction(chord_note="d", chord="maj", key_function="dominant").chord_key()
    ```

Canonical values: note names are lower case with flats written as ``f``
(``"c"``, ``"ef"``, ``"bf"``; see :func:`normalize`), chord qualities are
``"maj"``, ``"min"`` and ``"dim"``, and roman numerals use case for quality
with ``°`` for diminished (``"I"``, ``"ii"``, ``"vii°"``).

Package-level exports: ``QueryEngine``, ``ModalFunction``, ``ChordKey``,
``PivotChordKeys``, ``RomanKey``, ``normalize``, ``scale``.
"""

import modalfunction.facts
import modalfunction.modal_function
import modalfunction.notes
import modalfunction.query
import modalfunction.scales


QueryEngine = modalfunction.query.QueryEngine
ModalFunction = modalfunction.modal_function.ModalFunction
ChordKey = modalfunction.facts.ChordKey
PivotChordKeys = modalfunction.query.PivotChordKeys
RomanKey = modalfunction.query.RomanKey
normalize = modalfunction.notes.normalize
scale = modalfunction.scales.scale
