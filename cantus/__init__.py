"""
Cantus - immutable, chainable sequences for algorithmic composition.

Cantus builds musical material out of immutable ordered containers. Every
operation returns a new container of the same kind, so transformations chain
naturally and intermediate results can be kept, compared and reused without
defensive copying.

What it provides:

- **Immutable Collections.** ``Collection`` holds any values in order.
  Slicing, filtering, inserting, replacing, splitting, grouping and
  reordering all return new Collections; the original never changes.
- **Flexible positions.** Anywhere a position is taken, negative values
  count back from the end, and bulk operations accept an integer, a list
  of integers or a Collection of integers. A bad position is reported
  together with every other bad position in the same call.
- **One replacement protocol.** Insert and replace operations accept a
  value, a list, another Collection, or a function computing any of
  these from the value being replaced.
- **Sliding windows.** ``Sequence`` adds windowed search and replacement
  (``find_if_window()``, ``replace_if_window()`` and their reverse forms),
  along with looping, padding, twining and combining of Sequences.
- **Control flow in a chain.** ``if_()`` / ``then()`` / ``else_()`` /
  ``endif()`` and ``while_()`` / ``do()`` let a single chain of calls branch
  and loop without breaking out into statements.
- **Numbers.** ``NumSeq`` is a Sequence of numbers with totals, means,
  running totals, deltas, transposition and inversion.

Minimal example:

	```python
	import cantus

	melody = cantus.numseq([60, 62, 64, 65, 67])

	# numseq([60, 62, 64, 65, 67, 65, 64, 62])
	phrase = melody.append(melody.retrograde().drop()).drop_right()

	# numseq([60, 62, 64, 65, 67, 65]) when the phrase is long
	phrase.if_(lambda s: s.length > 6).then(lambda s: s.keep(6)).endif()
	```

Settings such as a cap on loop iterations can be read from a YAML file with
``cantus.configure_from_file()``.

Package-level exports: ``Collection``, ``Sequence``, ``NumSeq``,
``SeqMember``, ``NumSeqMember``, ``numseq``, ``configure``,
``configure_from_file``, ``Settings``.
"""

import cantus.collection
import cantus.config
import cantus.members
import cantus.numeric
import cantus.sequence


Collection = cantus.collection.Collection
Sequence = cantus.sequence.Sequence
NumSeq = cantus.numeric.NumSeq
SeqMember = cantus.members.SeqMember
NumSeqMember = cantus.members.NumSeqMember
numseq = cantus.numeric.numseq
Settings = cantus.config.Settings
configure = cantus.config.configure
configure_from_file = cantus.config.configure_from_file
