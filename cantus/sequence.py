import logging
import math
import typing

import cantus.collection
import cantus.errors
import cantus.members
import cantus.replacer
import cantus.sequence_utils
import cantus.validation
import cantus.windows


logger = logging.getLogger(__name__)

S = typing.TypeVar("S", bound="Sequence")

WindowFn = typing.Callable[[typing.List[typing.Any], int], typing.Any]


class Sequence (cantus.collection.Collection):

	"""
	A Collection whose contents are all members of one class.

	Raw values passed to the constructor, to ``append_items()`` and friends, or
	produced by a replacer, are converted with ``member_class.from_value()``.
	Subclasses set ``member_class`` to restrict what a Sequence may hold.

	Example:
		```python
		seq = cantus.numseq([1, 2, 2, 3, 4, 4, 5])

		# returns [1, 4]
		seq.find_if_window(2, 1, lambda w, i: w[0] == w[1])

		# returns numseq([1, 2, 3, 4, 5])
		seq.dedupe()
		```
	"""

	member_class: typing.Type[cantus.members.SeqMember] = cantus.members.SeqMember

	def __init__ (self, contents: typing.Iterable[typing.Any] = ()) -> None:

		super().__init__(self.member_class.from_value(v) for v in contents)

	def construct_member (self, value: typing.Any) -> cantus.members.SeqMember:

		"""Convert a raw value to a member of this Sequence's class."""

		return self.member_class.from_value(value)

	def _replacement (self, rep: typing.Any, current: typing.Any, i: int) -> typing.List[typing.Any]:

		return cantus.replacer.resolve(rep, current, i, member=self.member_class.from_value)

	def to_numeric_values (self) -> typing.List[float]:

		"""Return the numeric value of every member."""

		return [m.numeric_value() for m in self._contents]

	# --- comparisons ---

	def is_same_class_and_length_as (self, *others: typing.Any) -> bool:

		"""Return True if every argument is a Sequence of this class and length."""

		return all(type(s) is type(self) and s.length == self.length for s in others)

	def equals (self, *others: typing.Any) -> bool:

		"""
		Return True if every argument holds members equal to this Sequence's, position by position.
		"""

		if not self.is_same_class_and_length_as(*others):
			return False

		return all(
			all(a.equals(b) for a, b in zip(self._contents, s.contents))
			for s in others
		)

	def is_subset_of (self, other: typing.Any) -> bool:

		"""
		Return True if this Sequence's members appear in ``other``, in order but not necessarily together.

		Example:
			```python
			# returns True
			numseq([0, 1, 2]).is_subset_of(numseq([0, 1, 1, 0, 2]))

			# returns False
			numseq([0, 1, 2]).is_subset_of(numseq([0, 2, 1, 0, 1]))
			```
		"""

		if not self.is_same_class_as(other):
			return False

		if self.length > other.length:
			return False

		curr = 0

		for member in other.contents:
			if curr == self.length:
				break

			if self._contents[curr].equals(member):
				curr += 1

		return curr == self.length

	def is_superset_of (self, other: typing.Any) -> bool:

		"""Return True if ``other`` is a subset of this Sequence."""

		return self.is_same_class_as(other) and other.is_subset_of(self)

	def has_periodicity_of (self, n: int) -> bool:

		"""
		Return True if this Sequence repeats every ``n`` members, at least twice over.

		Example:
			```python
			# returns True
			numseq([1, 2, 3, 1, 2, 3, 1, 2]).has_periodicity_of(3)
			```
		"""

		cantus.validation.require_pos_int(n, self._name("has_periodicity_of"))

		if n * 2 > self.length:
			return False

		return all(
			self._contents[i].equals(self._contents[i % n])
			for i in range(n, self.length)
		)

	def has_periodicity (self) -> int:

		"""
		Return the length of the shortest repeating run, or zero if this Sequence does not repeat.

		Example:
			```python
			# returns 3
			numseq([1, 2, 3, 1, 2, 3, 1, 2, 3]).has_periodicity()
			```
		"""

		for n in range(1, self.length // 2 + 1):
			if self.has_periodicity_of(n):
				return n

		return 0

	# --- windows ---

	def find_if_window (self, size: int, step: int, fn: WindowFn) -> typing.List[int]:

		"""
		Return the start of every window passing ``fn(window, start)``, first window first.

		Example:
			```python
			# returns [1, 4]
			numseq([1, 2, 2, 3, 4, 4, 5]).find_if_window(2, 1, lambda w, i: w[0] == w[1])
			```
		"""

		return cantus.windows.find_if_window(self._contents, size, step, fn, where=self._name("find_if_window"))

	def find_if_reverse_window (self, size: int, step: int, fn: WindowFn) -> typing.List[int]:

		"""
		Return the start of every window passing ``fn(window, start)``, last window first.

		Example:
			```python
			# returns [4, 1]
			numseq([1, 2, 2, 3, 4, 4, 5]).find_if_reverse_window(2, 1, lambda w, i: w[0] == w[1])
			```
		"""

		return cantus.windows.find_if_reverse_window(self._contents, size, step, fn, where=self._name("find_if_reverse_window"))

	def replace_if_window (self: S, size: int, step: int, fn: WindowFn, rep: typing.Any) -> S:

		"""
		Replace every window passing ``fn(window, start)``, working from the first window.

		A replacer function receives the window as a list and its start.

		Example:
			```python
			# returns numseq([1, 8, 3, 6, 5])
			numseq([1, 2, 2, 3, 4, 4, 5]).replace_if_window(2, 1,
				lambda w, i: w[0] == w[1],
				lambda w, i: w[0].invert(5)
			)
			```
		"""

		vals = cantus.windows.replace_if_window(
			self._contents, size, step, fn,
			lambda window, start: self._replacement(rep, window, start),
			where = self._name("replace_if_window")
		)

		return self.construct(vals)

	def replace_if_reverse_window (self: S, size: int, step: int, fn: WindowFn, rep: typing.Any) -> S:

		"""
		Replace every window passing ``fn(window, start)``, working from the last window.
		"""

		vals = cantus.windows.replace_if_reverse_window(
			self._contents, size, step, fn,
			lambda window, start: self._replacement(rep, window, start),
			where = self._name("replace_if_reverse_window")
		)

		return self.construct(vals)

	def map_window (self: S, size: int, step: int, fn: WindowFn) -> S:

		"""
		Map every complete window through ``fn(window, n)``, splicing in returned lists.

		Example:
			```python
			# returns numseq([3, 7])
			numseq([1, 2, 3, 4, 5]).map_window(2, 2, lambda w, n: w[0].transpose(w[1].val()))
			```
		"""

		cantus.validation.require_function(fn, self._name("map_window"), "a mapper function")

		full, _ = cantus.windows.array_to_windows(self._contents, size, step, where=self._name("map_window"))

		vals: typing.List[typing.Any] = []

		for n, window in enumerate(full):
			vals.extend(cantus.sequence_utils.sanitize_to_list(fn(window, n)))

		return self.construct(vals)

	def filter_window (self: S, size: int, step: int, fn: WindowFn) -> S:

		"""
		Keep the members of every complete window passing ``fn(window, n)``.

		Example:
			```python
			# returns numseq([3, 4])
			numseq([1, 2, 3, 4, 5]).filter_window(2, 2, lambda w, n: w[0].val() != 1)
			```
		"""

		cantus.validation.require_function(fn, self._name("filter_window"), "a filter function")

		full, _ = cantus.windows.array_to_windows(self._contents, size, step, where=self._name("filter_window"))

		return self.construct(*(w for n, w in enumerate(full) if fn(w, n)))

	# --- patching values in ---

	def set_slice (self: S, start: typing.Optional[int], end: typing.Optional[int], value: typing.Any) -> S:

		"""
		Set every member of a slice to ``value``.

		Example:
			```python
			# returns numseq([1, 0, 0, 0, 5])
			numseq([1, 2, 3, 4, 5]).set_slice(1, -1, 0)
			```
		"""

		pre, mid, post = self.split_at([0 if start is None else start, self.length if end is None else end])

		return pre.append(self.construct(cantus.sequence_utils.fill(mid.length, self.construct_member(value))), post)

	# --- related Sequences ---

	def loop (self: S, n: int, start: int = 0) -> S:

		"""
		Return ``n`` members looping through this Sequence, beginning at position ``start``.

		Example:
			```python
			# returns numseq([2, 3, 1, 2, 3, 1, 2, 3])
			numseq([1, 2, 3]).loop(8, 1)
			```
		"""

		if not self.length:
			raise cantus.errors.InvalidArgument(f"{self._name('loop')}: cannot loop a zero-length {type(self).__name__}")

		cantus.validation.require_nonneg_int(n, self._name("loop"))

		first = self.index(start)
		need = n + first

		return self.repeat(math.ceil(need / self.length)).prepend(self.drop(first)).keep(n)

	def repeat (self: S, n: int = 2) -> S:

		"""
		Return ``n`` copies of this Sequence, one after another.
		"""

		cantus.validation.require_nonneg_int(n, self._name("repeat"))

		return self.construct(*cantus.sequence_utils.fill(n, self._contents))

	def dupe (self: S, n: int = 2) -> S:

		"""
		Repeat every member ``n`` times in place.

		Example:
			```python
			# returns numseq([1, 1, 1, 2, 2, 2, 3, 3, 3])
			numseq([1, 2, 3]).dupe(3)
			```
		"""

		cantus.validation.require_nonneg_int(n, self._name("dupe"))

		return self.flat_map(lambda v, i: cantus.sequence_utils.fill(n, v))

	def dedupe (self: S) -> S:

		"""
		Collapse runs of equal members to a single member.

		Example:
			```python
			# returns numseq([1, 2, 3, 2, 1])
			numseq([1, 2, 2, 3, 3, 2, 2, 1]).dedupe()
			```
		"""

		vals = list(self._contents[:1])

		for prev, curr in zip(self._contents, self._contents[1:]):
			if not curr.equals(prev):
				vals.append(curr)

		return self.construct(vals)

	def shuffle (self: S, order: typing.Sequence[int]) -> S:

		"""
		Reorder each consecutive run of ``len(order)`` members by ``order``.

		Example:
			```python
			# returns numseq([1, 3, 2, 4, 6, 5, 7, 9, 8])
			numseq([1, 2, 3, 4, 5, 6, 7, 8, 9]).shuffle([0, 2, 1])
			```
		"""

		olen = len(order)

		if olen < 2:
			raise cantus.errors.InvalidArgument(f"{self._name('shuffle')}: order {list(order)} needs to be at least two long")

		if self.length % olen:
			raise cantus.errors.InvalidArgument(f"{self._name('shuffle')}: length {self.length} is not a multiple of {olen}")

		if sorted(order) != list(range(olen)):
			raise cantus.errors.InvalidArgument(f"{self._name('shuffle')}: order {list(order)} needs to contain every integer from 0 to {olen - 1}")

		vals = [self._contents[i + j] for i in range(0, self.length, olen) for j in order]

		return self.construct(vals)

	def pad (self: S, value: typing.Any, n: int = 1) -> S:

		"""
		Put ``n`` copies of ``value`` in front of this Sequence.

		Example:
			```python
			# returns numseq([1, 1, 1, 2, 3])
			numseq([1, 2, 3]).pad(1, 2)
			```
		"""

		cantus.validation.require_nonneg_int(n, self._name("pad"), "count")

		if n == 0:
			return self._bare()

		return self.construct(cantus.sequence_utils.fill(n, self.construct_member(value)), self._contents)

	def pad_to (self: S, value: typing.Any, n: int) -> S:

		"""Pad at the start with ``value`` until this Sequence is ``n`` long."""

		cantus.validation.require_nonneg_int(n, self._name("pad_to"), "count")

		return self.pad(value, n - self.length) if self.length < n else self._bare()

	def pad_right (self: S, value: typing.Any, n: int = 1) -> S:

		"""Put ``n`` copies of ``value`` after this Sequence."""

		cantus.validation.require_nonneg_int(n, self._name("pad_right"), "count")

		if n == 0:
			return self._bare()

		return self.construct(self._contents, cantus.sequence_utils.fill(n, self.construct_member(value)))

	def pad_right_to (self: S, value: typing.Any, n: int) -> S:

		"""Pad at the end with ``value`` until this Sequence is ``n`` long."""

		cantus.validation.require_nonneg_int(n, self._name("pad_right_to"), "count")

		return self.pad_right(value, n - self.length) if self.length < n else self._bare()

	def filter_in_position (self: S, fn: cantus.collection.FinderFn, null: typing.Any = None) -> S:

		"""
		Replace every member failing ``fn(value, index)`` with ``null``.

		Example:
			```python
			# returns numseq([1, 8, 3, 8, 5])
			numseq([1, 2, 3, 4, 5]).filter_in_position(lambda v, i: v.val() % 2 == 1, 8)
			```
		"""

		cantus.validation.require_function(fn, self._name("filter_in_position"), "a filter function")

		nv = self.construct_member(null)

		return self.map(lambda v, i: v if fn(v, i) else nv)

	def sort (self: S, key: typing.Callable[[typing.Any], typing.Any], filter: typing.Optional[cantus.collection.FinderFn] = None) -> S:

		"""
		Sort members by ``key``.

		If ``filter`` is passed, only members passing ``filter(value, index)``
		are sorted, among the positions they occupy; the rest stay in place.

		Example:
			```python
			# returns numseq([1, 2, 3, 4, 5])
			numseq([2, 1, 4, 3, 5]).sort(lambda v: v.val())

			# returns numseq([2, 1, 3, 4, 5])
			numseq([4, 1, 3, 2, 5]).sort(lambda v: v.val(), lambda v, i: v.val() % 2 == 0)
			```
		"""

		cantus.validation.require_function(key, self._name("sort"), "a sort key function")

		if filter is None:
			return self.construct(sorted(self._contents, key=key))

		cantus.validation.require_function(filter, self._name("sort"), "a filter function, if passed,")

		positions = [i for i, v in enumerate(self._contents) if filter(v, i)]
		ordered = sorted((self._contents[i] for i in positions), key=key)
		vals = self.val()

		for i, v in zip(positions, ordered):
			vals[i] = v

		return self.construct(vals)

	# --- one Sequence to many ---

	def chop (self: S, n: int) -> typing.List[S]:

		"""
		Cut into consecutive Sequences of ``n`` members, dropping an incomplete last one.

		Example:
			```python
			# returns [numseq([1, 2]), numseq([3, 4])]
			numseq([1, 2, 3, 4, 5]).chop(2)
			```
		"""

		full, _ = cantus.windows.array_to_windows(self._contents, n, n, where=self._name("chop"))

		return [self.construct(w) for w in full]

	def partition_in_position (self: S, fn: cantus.collection.FinderFn, null: typing.Any = None) -> typing.Tuple[S, S]:

		"""
		Split into two Sequences of this length, holding passing and failing members in place.

		Vacant positions hold ``null``.

		Example:
			```python
			# returns (numseq([1, 0, 3, 0, 5]), numseq([0, 2, 0, 4, 0]))
			numseq([1, 2, 3, 4, 5]).partition_in_position(lambda v, i: v.val() % 2 == 1, 0)
			```
		"""

		cantus.validation.require_function(fn, self._name("partition_in_position"), "a filter function")

		nv = self.construct_member(null)
		passed = cantus.sequence_utils.fill(self.length, nv)
		failed = list(passed)

		for i, v in enumerate(self._contents):
			(passed if fn(v, i) else failed)[i] = v

		return self.construct(passed), self.construct(failed)

	def group_by_in_position (self: S, fn: typing.Callable[[typing.Any, int], typing.Hashable], null: typing.Any = None) -> typing.Dict[typing.Hashable, S]:

		"""
		Group members by ``fn(value, index)``, keeping each in its position.

		Every group is as long as this Sequence, with ``null`` in positions
		belonging to other groups.

		Example:
			```python
			# returns {1: numseq([1, 0, 0, 4, 0]), 2: numseq([0, 2, 0, 0, 5]), 0: numseq([0, 0, 3, 0, 0])}
			numseq([1, 2, 3, 4, 5]).group_by_in_position(lambda v, i: v.val() % 3, 0)
			```
		"""

		cantus.validation.require_function(fn, self._name("group_by_in_position"), "a grouper function")

		nv = self.construct_member(null)
		groups: typing.Dict[typing.Hashable, typing.List[typing.Any]] = {}

		for i, v in enumerate(self._contents):
			groups.setdefault(fn(v, i), cantus.sequence_utils.fill(self.length, nv))[i] = v

		return {k: self.construct(vals) for k, vals in groups.items()}

	def untwine (self: S, n: int) -> typing.List[S]:

		"""
		Deal members out into ``n`` Sequences in turn.

		Example:
			```python
			# returns [numseq([1, 4]), numseq([2, 5]), numseq([3, 6])]
			numseq([1, 2, 3, 4, 5, 6]).untwine(3)
			```
		"""

		cantus.validation.require_pos_int(n, self._name("untwine"))

		if self.length % n:
			raise cantus.errors.LengthMismatch(f"{self._name('untwine')}: length {self.length} does not divide into {n} equal parts")

		return [self.construct(self._contents[j::n]) for j in range(n)]

	# --- many Sequences to one ---

	def _zip_sequence_values (self, others: typing.Sequence[typing.Any], where: str) -> typing.List[typing.List[typing.Any]]:

		if not self.is_same_class_and_length_as(*others):
			found = ",".join(f"{type(s).__name__}[{len(s) if hasattr(s, '__len__') else '?'}]" for s in (self, *others))
			raise cantus.errors.LengthMismatch(f"{self._name(where)}: must be Sequences of the same length and type, but were: {found}")

		return cantus.sequence_utils.zip_lists(self._contents, *(s.contents for s in others))

	def twine (self: S, *others: S) -> S:

		"""
		Interleave this Sequence with others of the same class and length.

		Example:
			```python
			# returns numseq([1, 4, 7, 2, 5, 8, 3, 6, 9])
			numseq([1, 2, 3]).twine(numseq([4, 5, 6]), numseq([7, 8, 9]))
			```
		"""

		return self.construct(*self._zip_sequence_values(others, "twine"))

	def combine (self: S, fn: typing.Callable[..., typing.Any], *others: S) -> S:

		"""
		Combine the members at each position through ``fn(*members)``.

		Example:
			```python
			# returns numseq([7, 8, 5])
			numseq([1, 2, 3]).combine(lambda a, b: a.invert(b.val()), numseq([4, 5, 4]))
			```
		"""

		cantus.validation.require_function(fn, self._name("combine"), "a combiner function")

		return self.construct(fn(*vals) for vals in self._zip_sequence_values(others, "combine"))

	def flat_combine (self: S, fn: typing.Callable[..., typing.Any], *others: S) -> S:

		"""Like ``combine()``, but lists returned by ``fn`` are spliced in."""

		cantus.validation.require_function(fn, self._name("flat_combine"), "a combiner function")

		vals: typing.List[typing.Any] = []

		for members in self._zip_sequence_values(others, "flat_combine"):
			vals.extend(cantus.sequence_utils.sanitize_to_list(fn(*members)))

		return self.construct(vals)

	def zip_with (self: S, *others: S) -> typing.List[S]:

		"""
		Return one Sequence per position, holding the member of each Sequence there.

		Example:
			```python
			# returns [numseq([1, 5]), numseq([2, 4]), numseq([3, 3])]
			numseq([1, 2, 3]).zip_with(numseq([5, 4, 3]))
			```
		"""

		return [self.construct(vals) for vals in self._zip_sequence_values(others, "zip_with")]

	def map_with (self: S, fn: typing.Callable[[typing.List[typing.Any], int], typing.Any], *others: S) -> typing.List[S]:

		"""
		Map the members at each position, as a list, through ``fn(members, index)``.

		``fn`` returns one member per Sequence; the results are returned as
		new Sequences, one per input.

		Example:
			```python
			# returns [numseq([5, 8, 9]), numseq([-3, 0, 3])]
			numseq([1, 2, 3]).map_with(lambda m, i: [m[0].augment(m[1].val()), m[1].invert(m[0].val())], numseq([5, 4, 3]))
			```
		"""

		cantus.validation.require_function(fn, self._name("map_with"), "a mapper function")

		vals = self._zip_sequence_values(others, "map_with")

		if not self.length:
			return [self.empty() for _ in range(len(others) + 1)]

		rets = [cantus.sequence_utils.sanitize_to_list(fn(v, i)) for i, v in enumerate(vals)]

		return [self.construct(v) for v in cantus.sequence_utils.zip_lists(*rets)]

	def filter_with (self: S, fn: typing.Callable[[typing.List[typing.Any], int], typing.Any], *others: S) -> typing.List[S]:

		"""
		Keep the positions where ``fn(members, index)`` holds, in every Sequence.

		Example:
			```python
			# returns [numseq([1, 2]), numseq([5, 4])]
			numseq([1, 2, 3]).filter_with(lambda m, i: m[0] != m[1], numseq([5, 4, 3]))
			```
		"""

		cantus.validation.require_function(fn, self._name("filter_with"), "a filter function")

		rets = [v for i, v in enumerate(self._zip_sequence_values(others, "filter_with")) if fn(v, i)]

		if not rets:
			return [self.empty() for _ in range(len(others) + 1)]

		return [self.construct(v) for v in cantus.sequence_utils.zip_lists(*rets)]

	def exchange_values_if (self: S, fn: typing.Callable[[typing.Any, typing.Any, int], typing.Any], other: S) -> typing.Tuple[S, S]:

		"""
		Swap members between this Sequence and ``other`` wherever ``fn(a, b, index)`` holds.

		Example:
			```python
			# returns (numseq([5, 4, 3, 4, 5]), numseq([1, 2, 3, 2, 1]))
			numseq([1, 2, 3, 4, 5]).exchange_values_if(lambda a, b, i: a.val() < b.val(), numseq([5, 4, 3, 2, 1]))
			```
		"""

		cantus.validation.require_function(fn, self._name("exchange_values_if"), "a comparator function")

		if not self.is_same_class_and_length_as(other):
			raise cantus.errors.LengthMismatch(f"{self._name('exchange_values_if')}: both sequences must be the same length and type")

		s1 = self.val()
		s2 = other.val()

		for i in range(self.length):
			if fn(s1[i], s2[i], i):
				s1[i], s2[i] = s2[i], s1[i]

		return self.construct(s1), other.construct(s2)
