import logging
import typing

import cantus.control_flow
import cantus.errors
import cantus.indices
import cantus.replacer
import cantus.validation


logger = logging.getLogger(__name__)

T = typing.TypeVar("T")
C = typing.TypeVar("C", bound="Collection")

MapperFn = typing.Callable[[typing.Any, int], typing.Any]
FinderFn = typing.Callable[[typing.Any, int], typing.Any]


class Collection (cantus.control_flow.ControlFlow, typing.Generic[T]):

	"""
	An immutable, indexable, ordered container.

	Every method that transforms a Collection returns a new one of the same
	concrete class; the original is never changed. Positions passed to
	methods may be negative, counting back from the end, and methods taking
	several positions accept an integer, a list of integers, or a Collection
	of integers.

	Methods that replace or insert values take a replacer: a value, a list of
	values, a Collection, or a function ``(value, index)`` returning one of
	these.

	Example:
		```python
		c = cantus.Collection([1, 2, 3, 4, 5])

		# Collection([1, 6, 7, 2, 3, 6, 7, 4, 5])
		c.insert_before([1, 3], [6, 7])

		# Collection([1, 4])
		c.keep_nth(3)
		```
	"""

	def __init__ (self, contents: typing.Iterable[T] = ()) -> None:

		"""
		Initialize a Collection holding ``contents`` in order.
		"""

		self._contents: typing.Tuple[T, ...] = tuple(contents)
		self._control: cantus.control_flow.Frame = None

	@property
	def contents (self) -> typing.Tuple[T, ...]:

		return self._contents

	@property
	def length (self) -> int:

		return len(self._contents)

	def __len__ (self) -> int:

		return len(self._contents)

	def __iter__ (self) -> typing.Iterator[T]:

		return iter(self._contents)

	def __eq__ (self, other: object) -> bool:

		if type(other) is not type(self):
			return NotImplemented

		return self._contents == typing.cast(Collection, other)._contents

	def __hash__ (self) -> int:

		return hash((type(self).__name__, self._contents))

	def __repr__ (self) -> str:

		return self.describe()

	def construct (self: C, *parts: typing.Iterable[T]) -> C:

		"""
		Build a Collection of the same concrete class from one or more runs of contents.
		"""

		contents: typing.List[T] = []

		for part in parts:
			contents.extend(part)

		return type(self)(contents)

	def _with_control (self: C, frame: cantus.control_flow.Frame) -> C:

		ret = self.construct(self._contents)
		ret._control = frame

		return ret

	def _name (self, method: str) -> str:

		return f"{type(self).__name__}.{method}()"

	def _replacement (self, rep: typing.Any, current: typing.Any, i: int) -> typing.List[T]:

		"""Compute replacement values as a flat list of contents."""

		return cantus.replacer.resolve(rep, current, i)

	# --- utility methods ---

	def describe (self) -> str:

		"""
		Return a one-line description of this Collection.
		"""

		return f"{type(self).__name__}({list(self._contents)!r})"

	def val (self) -> typing.List[T]:

		"""Return the contents as a new list."""

		return list(self._contents)

	def val_at (self, i: int) -> T:

		"""Return the member at position ``i``; negative positions count from the end."""

		return self._contents[self.index(i)]

	def is_same_class_as (self, *others: typing.Any) -> bool:

		"""Return True if every argument is a Collection of exactly this class."""

		return all(type(v) is type(self) for v in others)

	# --- index resolution ---

	def index (self, i: int) -> int:

		"""
		Convert a possibly negative position to an absolute one.

		Raises ``IndexOutOfRange`` if it does not address a member.
		"""

		return cantus.indices.resolve_one(i, self.length, where=self._name("index"))

	def indices (self, spec: cantus.indices.IndexSpec, inclusive: bool = False) -> typing.List[int]:

		"""
		Convert an index specification to a list of absolute positions.

		If ``inclusive`` is True a position equal to the length is also valid.
		Raises ``IndexOutOfRange`` listing every position that failed.
		"""

		return cantus.indices.resolve_many(spec, self.length, inclusive=inclusive, where=self._name("indices"))

	def find_first_index (self, fn: FinderFn) -> typing.Optional[int]:

		"""
		Return the index of the first member passing ``fn(value, index)``, or None.

		Example:
			```python
			# returns 3
			numseq([1, 2, 3, 4, 5]).find_first_index(lambda v, i: v.val() > 3)
			```
		"""

		cantus.validation.require_function(fn, self._name("find_first_index"))

		for i, v in enumerate(self._contents):
			if fn(v, i):
				return i

		return None

	def find_last_index (self, fn: FinderFn) -> typing.Optional[int]:

		"""Return the index of the last member passing ``fn(value, index)``, or None."""

		cantus.validation.require_function(fn, self._name("find_last_index"))

		for i in range(self.length - 1, -1, -1):
			if fn(self._contents[i], i):
				return i

		return None

	def find_indices (self, fn: FinderFn) -> typing.List[int]:

		"""Return the indices of all members passing ``fn(value, index)``."""

		cantus.validation.require_function(fn, self._name("find_indices"))

		return [i for i, v in enumerate(self._contents) if fn(v, i)]

	# --- filtering ---

	def clone (self: C) -> C:

		"""Return a new Collection with identical members."""

		return self.construct(self._contents)

	def empty (self: C) -> C:

		"""Return a new Collection of this class with no members."""

		return self.construct()

	def filter (self: C, fn: FinderFn) -> C:

		"""
		Keep only those members passing ``fn(value, index)``.
		"""

		cantus.validation.require_function(fn, self._name("filter"), "a filter function")

		return self.construct(v for i, v in enumerate(self._contents) if fn(v, i))

	def keep_slice (self: C, start: int, end: typing.Optional[int] = None) -> C:

		"""
		Keep the members between two positions, as list slicing does.

		Example:
			```python
			# returns numseq([3, 4])
			numseq([1, 2, 3, 4, 5]).keep_slice(2, 4)
			```
		"""

		return self.construct(self._contents[start:end])

	slice = keep_slice

	def drop_slice (self: C, start: int, end: typing.Optional[int] = None) -> C:

		"""
		Keep the members outside the slice between two positions.

		Example:
			```python
			# returns numseq([1, 2, 5])
			numseq([1, 2, 3, 4, 5]).drop_slice(2, 4)
			```
		"""

		if end is None:
			return self.construct(self._contents[:start])

		return self.construct(self._contents[:start], self._contents[end:])

	def keep (self: C, n: int = 1) -> C:

		"""Keep the first ``n`` members."""

		return self.construct(self._contents[:n])

	def keep_right (self: C, n: int = 1) -> C:

		"""Keep the last ``n`` members."""

		return self.construct(self._contents[max(self.length - n, 0):])

	def drop (self: C, n: int = 1) -> C:

		"""Remove the first ``n`` members."""

		return self.construct(self._contents[n:])

	def drop_right (self: C, n: int = 1) -> C:

		"""Remove the last ``n`` members."""

		return self.construct(self._contents[:max(self.length - n, 0)])

	def keep_indices (self: C, spec: cantus.indices.IndexSpec) -> C:

		"""
		Keep the members at the given positions, in the order given.

		Example:
			```python
			# returns numseq([1, 5])
			numseq([1, 2, 3, 4, 5]).keep_indices([0, -1])
			```
		"""

		ix = self.indices(spec)

		return self.construct(self._contents[i] for i in ix)

	def drop_indices (self: C, spec: cantus.indices.IndexSpec) -> C:

		"""Remove the members at the given positions."""

		ix = set(self.indices(spec))

		return self.construct(v for i, v in enumerate(self._contents) if i not in ix)

	@staticmethod
	def _is_nth (i: int, n: int, offset: int) -> bool:

		return i >= offset and (i - offset) % n == 0

	def keep_nth (self: C, n: int, offset: int = 0) -> C:

		"""
		Keep every ``n``th member, starting from ``offset``.

		Example:
			```python
			# returns numseq([1, 4])
			numseq([1, 2, 3, 4, 5]).keep_nth(3)
			```
		"""

		cantus.validation.require_pos_int(n, self._name("keep_nth"))
		cantus.validation.require_nonneg_int(offset, self._name("keep_nth"), "offset")

		return self.filter(lambda _, i: self._is_nth(i, n, offset))

	def drop_nth (self: C, n: int, offset: int = 0) -> C:

		"""
		Remove every ``n``th member, starting from ``offset``.

		Example:
			```python
			# returns numseq([2, 3, 5])
			numseq([1, 2, 3, 4, 5]).drop_nth(3)
			```
		"""

		cantus.validation.require_pos_int(n, self._name("drop_nth"))
		cantus.validation.require_nonneg_int(offset, self._name("drop_nth"), "offset")

		return self.filter(lambda _, i: not self._is_nth(i, n, offset))

	# --- patching values in ---

	def _splice_at (self: C, spec: cantus.indices.IndexSpec, rep: typing.Any, remove: int, offset: int) -> C:

		"""
		Splice replacer output in at each resolved position, last to first.
		"""

		locs = self.indices(spec)

		if not locs:
			return self._bare()

		contents = self.val()

		for ix in sorted(locs, reverse=True):
			at = ix + offset
			contents[at:at + remove] = self._replacement(rep, self._contents[ix], ix)

		return self.construct(contents)

	def insert_before (self: C, spec: cantus.indices.IndexSpec, rep: typing.Any) -> C:

		"""
		Insert replacement values before each of the given positions.

		Example:
			```python
			# returns numseq([1, 6, 7, 2, 3, 6, 7, 4, 5])
			numseq([1, 2, 3, 4, 5]).insert_before([1, 3], numseq([6, 7]))
			```
		"""

		return self._splice_at(spec, rep, 0, 0)

	def insert_after (self: C, spec: cantus.indices.IndexSpec, rep: typing.Any) -> C:

		"""
		Insert replacement values after each of the given positions.

		Example:
			```python
			# returns numseq([1, 2, 6, 7, 3, 4, 6, 7, 5])
			numseq([1, 2, 3, 4, 5]).insert_after([1, 3], numseq([6, 7]))
			```
		"""

		return self._splice_at(spec, rep, 0, 1)

	def replace_indices (self: C, spec: cantus.indices.IndexSpec, rep: typing.Any) -> C:

		"""
		Replace the members at the given positions with replacement values.

		Example:
			```python
			# returns numseq([1, 6, 7, 3, 6, 7, 5])
			numseq([1, 2, 3, 4, 5]).replace_indices([1, 3], numseq([6, 7]))

			# returns numseq([1, 2, 3, 4, 9])
			numseq([1, 2, 3, 4, 5]).replace_indices(-1, lambda v, i: v.transpose(4))
			```
		"""

		return self._splice_at(spec, rep, 1, 0)

	def map_indices (self: C, spec: cantus.indices.IndexSpec, fn: MapperFn) -> C:

		"""
		Map the members at the given positions through ``fn(value, index)``.
		"""

		cantus.validation.require_function(fn, self._name("map_indices"))

		locs = self.indices(spec)

		if not locs:
			return self._bare()

		contents = self.val()

		for ix in locs:
			contents[ix] = fn(self._contents[ix], ix)

		return self.construct(contents)

	def flat_map_indices (self: C, spec: cantus.indices.IndexSpec, fn: MapperFn) -> C:

		"""
		Flat map the members at the given positions through ``fn(value, index)``.

		A list returned by ``fn`` is spliced in; any other value replaces the member.
		"""

		cantus.validation.require_function(fn, self._name("flat_map_indices"))

		locs = self.indices(spec)

		if not locs:
			return self._bare()

		contents = self.val()

		for ix in sorted(locs, reverse=True):
			rep = fn(contents[ix], ix)
			contents[ix:ix + 1] = rep if isinstance(rep, list) else [rep]

		return self.construct(contents)

	def replace_first_index (self: C, fn: FinderFn, rep: typing.Any) -> C:

		"""
		Replace the first member passing ``fn``. Returns this Collection if none does.
		"""

		cantus.validation.require_function(fn, self._name("replace_first_index"))

		ix = self.find_first_index(fn)

		return self._bare() if ix is None else self.replace_indices(ix, rep)

	def map_first_index (self: C, findfn: FinderFn, mapfn: MapperFn) -> C:

		"""Map the first member passing ``findfn`` through ``mapfn``."""

		cantus.validation.require_function(findfn, self._name("map_first_index"), "a finder function")
		cantus.validation.require_function(mapfn, self._name("map_first_index"), "a mapper function")

		ix = self.find_first_index(findfn)

		return self._bare() if ix is None else self.map_indices(ix, mapfn)

	def flat_map_first_index (self: C, findfn: FinderFn, mapfn: MapperFn) -> C:

		"""Flat map the first member passing ``findfn`` through ``mapfn``."""

		cantus.validation.require_function(findfn, self._name("flat_map_first_index"), "a finder function")
		cantus.validation.require_function(mapfn, self._name("flat_map_first_index"), "a mapper function")

		ix = self.find_first_index(findfn)

		return self._bare() if ix is None else self.flat_map_indices(ix, mapfn)

	def replace_last_index (self: C, fn: FinderFn, rep: typing.Any) -> C:

		"""
		Replace the last member passing ``fn``. Returns this Collection if none does.
		"""

		cantus.validation.require_function(fn, self._name("replace_last_index"))

		ix = self.find_last_index(fn)

		return self._bare() if ix is None else self.replace_indices(ix, rep)

	def map_last_index (self: C, findfn: FinderFn, mapfn: MapperFn) -> C:

		"""Map the last member passing ``findfn`` through ``mapfn``."""

		cantus.validation.require_function(findfn, self._name("map_last_index"), "a finder function")
		cantus.validation.require_function(mapfn, self._name("map_last_index"), "a mapper function")

		ix = self.find_last_index(findfn)

		return self._bare() if ix is None else self.map_indices(ix, mapfn)

	def flat_map_last_index (self: C, findfn: FinderFn, mapfn: MapperFn) -> C:

		"""Flat map the last member passing ``findfn`` through ``mapfn``."""

		cantus.validation.require_function(findfn, self._name("flat_map_last_index"), "a finder function")
		cantus.validation.require_function(mapfn, self._name("flat_map_last_index"), "a mapper function")

		ix = self.find_last_index(findfn)

		return self._bare() if ix is None else self.flat_map_indices(ix, mapfn)

	def replace_if (self: C, fn: FinderFn, rep: typing.Any) -> C:

		"""
		Replace every member passing ``fn``. Returns this Collection if none does.

		Example:
			```python
			# returns numseq([1, 6, 7, 3, 6, 7, 5])
			numseq([1, 2, 3, 4, 5]).replace_if(lambda v, i: v.val() % 2 == 0, [6, 7])
			```
		"""

		cantus.validation.require_function(fn, self._name("replace_if"))

		return self.replace_indices(self.find_indices(fn), rep)

	def map_if (self: C, findfn: FinderFn, mapfn: MapperFn) -> C:

		"""Map every member passing ``findfn`` through ``mapfn``."""

		cantus.validation.require_function(findfn, self._name("map_if"), "a finder function")
		cantus.validation.require_function(mapfn, self._name("map_if"), "a mapper function")

		return self.map_indices(self.find_indices(findfn), mapfn)

	def flat_map_if (self: C, findfn: FinderFn, mapfn: MapperFn) -> C:

		"""Flat map every member passing ``findfn`` through ``mapfn``."""

		cantus.validation.require_function(findfn, self._name("flat_map_if"), "a finder function")
		cantus.validation.require_function(mapfn, self._name("flat_map_if"), "a mapper function")

		return self.flat_map_indices(self.find_indices(findfn), mapfn)

	def replace_nth (self: C, n: int, rep: typing.Any, offset: int = 0) -> C:

		"""
		Replace every ``n``th member, starting from ``offset``.

		Example:
			```python
			# returns numseq([6, 7, 2, 3, 6, 7, 5])
			numseq([1, 2, 3, 4, 5]).replace_nth(3, numseq([6, 7]))
			```
		"""

		cantus.validation.require_pos_int(n, self._name("replace_nth"))
		cantus.validation.require_nonneg_int(offset, self._name("replace_nth"), "offset")

		return self.flat_map(lambda v, i: self._replacement(rep, v, i) if self._is_nth(i, n, offset) else [v])

	def map_nth (self: C, n: int, fn: MapperFn, offset: int = 0) -> C:

		"""Map every ``n``th member, starting from ``offset``, through ``fn``."""

		cantus.validation.require_function(fn, self._name("map_nth"))
		cantus.validation.require_pos_int(n, self._name("map_nth"))
		cantus.validation.require_nonneg_int(offset, self._name("map_nth"), "offset")

		return self.map(lambda v, i: fn(v, i) if self._is_nth(i, n, offset) else v)

	def flat_map_nth (self: C, n: int, fn: MapperFn, offset: int = 0) -> C:

		"""Flat map every ``n``th member, starting from ``offset``, through ``fn``."""

		cantus.validation.require_function(fn, self._name("flat_map_nth"))
		cantus.validation.require_pos_int(n, self._name("flat_map_nth"))
		cantus.validation.require_nonneg_int(offset, self._name("flat_map_nth"), "offset")

		return self.flat_map(lambda v, i: fn(v, i) if self._is_nth(i, n, offset) else [v])

	def replace_slice (self: C, start: int, end: int, rep: typing.Any) -> C:

		"""
		Replace a slice with replacement values, keeping the rest.

		A replacer function receives the whole slice as a Collection, and the
		position where the slice starts.

		Example:
			```python
			# returns numseq([1, 6, 7, 5])
			numseq([1, 2, 3, 4, 5]).replace_slice(1, -1, numseq([6, 7]))

			# returns numseq([1, 4, 3, 2, 5])
			numseq([1, 2, 3, 4, 5]).replace_slice(1, -1, lambda s, i: s.retrograde())
			```
		"""

		pre, mid, post = self.split_at([start, end])

		return pre.append(self.construct(self._replacement(rep, mid, pre.length)), post)

	def map_slice (self: C, start: int, end: int, fn: MapperFn) -> C:

		"""Map the members of a slice through ``fn``, keeping the rest."""

		cantus.validation.require_function(fn, self._name("map_slice"))

		pre, mid, post = self.split_at([start, end])

		return pre.append(mid.map(fn), post)

	def flat_map_slice (self: C, start: int, end: int, fn: MapperFn) -> C:

		"""Flat map the members of a slice through ``fn``, keeping the rest."""

		cantus.validation.require_function(fn, self._name("flat_map_slice"))

		pre, mid, post = self.split_at([start, end])

		return pre.append(mid.flat_map(fn), post)

	# --- related Collections ---

	def map (self: C, fn: MapperFn) -> C:

		"""
		Pass every member through ``fn(value, index)``.
		"""

		cantus.validation.require_function(fn, self._name("map"), "a mapper function")

		return self.construct(fn(v, i) for i, v in enumerate(self._contents))

	def flat_map (self: C, fn: MapperFn) -> C:

		"""
		Pass every member through ``fn(value, index)``, splicing in returned lists.
		"""

		cantus.validation.require_function(fn, self._name("flat_map"), "a mapper function")

		contents: typing.List[T] = []

		for i, v in enumerate(self._contents):
			ret = fn(v, i)

			if isinstance(ret, list):
				contents.extend(ret)
			else:
				contents.append(ret)

		return self.construct(contents)

	def append (self: C, *others: C) -> C:

		"""
		Append Collections of the same class to this one.

		Raises ``TypeMismatch`` for any other kind of argument.
		"""

		if not self.is_same_class_as(*others):
			name = type(self).__name__
			raise cantus.errors.TypeMismatch(f"{name}.append(): can only append other {name}s")

		return self.construct(self._contents, *(c.contents for c in others))

	def append_items (self: C, *items: typing.Any) -> C:

		"""Append raw members to this Collection."""

		return self.construct(self._contents, items)

	def prepend (self: C, *others: C) -> C:

		"""
		Prepend Collections of the same class to this one.

		Raises ``TypeMismatch`` for any other kind of argument.
		"""

		if not self.is_same_class_as(*others):
			name = type(self).__name__
			raise cantus.errors.TypeMismatch(f"{name}.prepend(): can only prepend other {name}s")

		return self.construct(*(c.contents for c in others), self._contents)

	def prepend_items (self: C, *items: typing.Any) -> C:

		"""Prepend raw members to this Collection."""

		return self.construct(items, self._contents)

	# --- reordering ---

	def retrograde (self: C) -> C:

		"""Return the members in reverse order."""

		return self.construct(reversed(self._contents))

	def swap_at (self: C, *pairs: typing.Tuple[int, int]) -> C:

		"""
		Swap the members at each pair of positions, applying the pairs in order.

		Example:
			```python
			# returns numseq([2, 1, 3, 5, 4])
			numseq([1, 2, 3, 4, 5]).swap_at((0, 1), (3, 4))
			```
		"""

		vals = self.val()

		for a, b in pairs:
			f = self.index(a)
			t = self.index(b)
			vals[f], vals[t] = vals[t], vals[f]

		return self.construct(vals)

	# --- one Collection to many ---

	def split_at (self: C, spec: cantus.indices.IndexSpec) -> typing.List[C]:

		"""
		Cut this Collection at the given positions.

		A position may equal the length. Positions are sorted first, so k
		positions always give k + 1 chunks, and repeated positions give empty
		chunks.

		Example:
			```python
			# returns [numseq([]), numseq([1, 2, 3]), numseq([4, 5])]
			numseq([1, 2, 3, 4, 5]).split_at([0, 3])
			```
		"""

		ix = sorted(self.indices(spec, inclusive=True))
		chunks = []
		last = 0

		for curr in ix:
			chunks.append(self._contents[last:curr])
			last = curr

		chunks.append(self._contents[last:])

		return [self.construct(chunk) for chunk in chunks]

	def partition (self: C, fn: FinderFn) -> typing.Tuple[C, C]:

		"""
		Split into members passing ``fn(value, index)`` and members failing it.
		"""

		cantus.validation.require_function(fn, self._name("partition"))

		passed: typing.List[T] = []
		failed: typing.List[T] = []

		for i, v in enumerate(self._contents):
			(passed if fn(v, i) else failed).append(v)

		return self.construct(passed), self.construct(failed)

	def group_by (self: C, fn: typing.Callable[[typing.Any, int], typing.Hashable]) -> typing.Dict[typing.Hashable, C]:

		"""
		Group members by the value ``fn(value, index)`` returns.

		Keys appear in order of first occurrence.

		Example:
			```python
			# returns {1: numseq([1, 4]), 2: numseq([2, 5]), 0: numseq([3])}
			numseq([1, 2, 3, 4, 5]).group_by(lambda v, i: v.val() % 3)
			```
		"""

		cantus.validation.require_function(fn, self._name("group_by"))

		groups: typing.Dict[typing.Hashable, typing.List[T]] = {}

		for i, v in enumerate(self._contents):
			groups.setdefault(fn(v, i), []).append(v)

		return {k: self.construct(vals) for k, vals in groups.items()}

	# --- miscellaneous ---

	def pipe (self, fn: typing.Callable[[typing.Any], typing.Any]) -> typing.Any:

		"""Return the result of passing this Collection to ``fn``."""

		cantus.validation.require_function(fn, self._name("pipe"), "a pipe function")

		return fn(self)

	def tap (self: C, fn: typing.Callable[[C], typing.Any]) -> C:

		"""Pass this Collection to ``fn`` and return this Collection."""

		cantus.validation.require_function(fn, self._name("tap"), "a tap function")

		fn(self)

		return self._bare()

	def each (self: C, fn: typing.Callable[[T], typing.Any]) -> C:

		"""Call ``fn`` with every member and return this Collection."""

		cantus.validation.require_function(fn, self._name("each"), "an each function")

		for v in self._contents:
			fn(v)

		return self._bare()
