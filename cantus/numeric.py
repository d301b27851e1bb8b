import itertools
import math
import random
import typing

import cantus.errors
import cantus.members
import cantus.sequence
import cantus.validation


N = typing.TypeVar("N", bound="NumSeq")

DEFAULT_DENSITY_SEED = 0x57B37C1E


def mod_value (v: float, i: float) -> float:

	"""Return ``v`` modulo ``i``, never negative."""

	return v % i


def trim_value (v: float, low: typing.Optional[float], high: typing.Optional[float]) -> float:

	"""Clamp ``v`` to ``low`` and ``high``, where None means no limit."""

	if low is not None and v < low:
		return low

	if high is not None and v > high:
		return high

	return v


def bounce_value (v: float, low: typing.Optional[float], high: typing.Optional[float]) -> float:

	"""
	Reflect ``v`` back off ``low`` and ``high`` until it lies between them.

	With only one limit, ``v`` is reflected once around it.

	Example:
		```python
		# returns 3
		bounce_value(5, 2, 4)
		```
	"""

	if low is not None and high is not None:
		span = high - low

		if span == 0:
			return low

		if v < low:
			d = (low - v) % (span * 2)
			return low + (2 * span - d if d > span else d)

		if v > high:
			d = (v - high) % (span * 2)
			return high - (2 * span - d if d > span else d)

		return v

	if low is not None and v < low:
		return 2 * low - v

	if high is not None and v > high:
		return 2 * high - v

	return v


def _check_limits (low: typing.Any, high: typing.Any, where: str) -> None:

	for name, limit in (("min", low), ("max", high)):
		if limit is not None and not cantus.validation.is_number(limit):
			raise cantus.errors.InvalidArgument(f"{where}: {name} must be None or a number; was {limit!r}")

	if low is not None and high is not None and low > high:
		raise cantus.errors.InvalidArgument(f"{where}: min {low} is higher than max {high}")


class NumSeq (cantus.sequence.Sequence):

	"""
	A Sequence of numbers.

	Example:
		```python
		# returns numseq([0, 1, 0, 2, 3, 3, 1, 4])
		cantus.numseq([0, 1, -1, 2, 1, 0, -2, 3]).running_total()
		```
	"""

	member_class = cantus.members.NumSeqMember

	def min (self) -> typing.Optional[float]:

		"""Return the lowest value, or None if this NumSeq is empty."""

		return min(self.to_numeric_values(), default=None)

	def max (self) -> typing.Optional[float]:

		"""Return the highest value, or None if this NumSeq is empty."""

		return max(self.to_numeric_values(), default=None)

	def range (self) -> float:

		"""Return the difference between the highest and lowest values, or zero if empty."""

		if not self.length:
			return 0

		return self.max() - self.min()

	def total (self) -> float:

		return sum(self.to_numeric_values())

	def mean (self) -> typing.Optional[float]:

		"""Return the mean value, or None if this NumSeq is empty."""

		if not self.length:
			return None

		return self.total() / self.length

	# --- comparisons ---

	def is_transformation_of (self, fn: typing.Callable[[float, float], float], other: typing.Any) -> bool:

		"""
		Return True if ``fn(a, b)`` gives the same result for every pair of values in the same position.

		Results that are not finite numbers are ignored.

		Example:
			```python
			# returns True: every pair sums to 6
			numseq([1, 2, 3, 4, 5]).is_transformation_of(lambda a, b: a + b, numseq([5, 4, 3, 2, 1]))
			```
		"""

		cantus.validation.require_function(fn, self._name("is_transformation_of"), "a comparator function")

		if not isinstance(other, NumSeq) or other.length != self.length:
			return False

		results = set()

		for a, b in zip(self.to_numeric_values(), other.to_numeric_values()):
			ret = fn(a, b)

			if cantus.validation.is_number(ret) and math.isfinite(ret):
				results.add(ret)

		return len(results) <= 1

	def is_transposition_of (self, other: typing.Any) -> bool:

		"""
		Example:
			```python
			# returns True
			numseq([1, 2, 3, 4, 5]).is_transposition_of(numseq([4, 5, 6, 7, 8]))
			```
		"""

		return self.is_transformation_of(lambda a, b: a - b, other)

	def is_inversion_of (self, other: typing.Any) -> bool:

		"""Return True if this NumSeq is ``other`` inverted around some value."""

		return self.is_transformation_of(lambda a, b: a + b, other)

	def is_retrograde_of (self, other: typing.Any) -> bool:

		"""Return True if this NumSeq is a transposition of ``other`` reversed."""

		return isinstance(other, NumSeq) and self.is_transposition_of(other.retrograde())

	def is_retrograde_inversion_of (self, other: typing.Any) -> bool:

		"""
		Return True if this NumSeq is an inversion of ``other`` reversed.

		Example:
			```python
			# returns True
			numseq([1, 2, 3, 4, 5]).is_retrograde_inversion_of(numseq([4, 5, 6, 7, 8]))
			```
		"""

		return isinstance(other, NumSeq) and self.is_inversion_of(other.retrograde())

	# --- related NumSeqs ---

	def running_total (self: N) -> N:

		return self.construct(itertools.accumulate(self.to_numeric_values()))

	def deltas (self: N) -> N:

		"""
		Return the differences between each value and the one before.

		Example:
			```python
			# returns numseq([1, -2, 3, -1, -1, -2, 5])
			numseq([0, 1, -1, 2, 1, 0, -2, 3]).deltas()
			```
		"""

		return self.drop().combine_diff(self.drop_right())

	def density (self: N, zero_value: int, one_value: int, seed: typing.Optional[int] = None) -> N:

		"""
		Return a NumSeq of zeros and ones, chosen pseudorandomly with a chance set by each value.

		Values at or beyond ``zero_value`` always give 0, values at or beyond
		``one_value`` always give 1, and values between them give 1 more often
		the closer they are to ``one_value``. The same ``seed`` always gives
		the same result.

		Example:
			```python
			# returns numseq([0, 0, ..., 1, 1]), with a random middle
			numseq(range(11)).density(0, 10)
			```
		"""

		where = self._name("density")

		for name, value in (("zero_value", zero_value), ("one_value", one_value)):
			if not cantus.validation.is_int(value):
				raise cantus.errors.InvalidArgument(f"{where}: {name} must be an integer; was {value!r}")

		if zero_value == one_value:
			raise cantus.errors.InvalidArgument(f"{where}: zero_value and one_value must differ; both were {zero_value}")

		gradient = one_value - zero_value
		rng = random.Random(DEFAULT_DENSITY_SEED if seed is None else seed)
		offsets = [rng.randrange(abs(gradient)) for _ in range(self.length)]

		def chance (v: cantus.members.NumSeqMember, i: int) -> cantus.members.NumSeqMember:
			level = (v.val() - zero_value + offsets[i]) / gradient

			if gradient > 0:
				return v.set_value(0 if level < 1 else 1)

			return v.set_value(1 if level > 0 else 0)

		return self.map(chance)

	# --- changing values ---

	def transpose (self: N, i: float) -> N:

		return self.map(lambda v, _: v.transpose(i))

	def transpose_to_min (self: N, i: float) -> N:

		"""
		Transpose so that the lowest value becomes ``i``.

		Example:
			```python
			# returns numseq([11, 12, 13, 14, 15])
			numseq([1, 2, 3, 4, 5]).transpose_to_min(11)
			```
		"""

		if not cantus.validation.is_number(i):
			raise cantus.errors.InvalidArgument(f"{self._name('transpose_to_min')}: argument must be numeric; was {i!r}")

		low = self.min()

		return self._bare() if low is None else self.transpose(i - low)

	def transpose_to_max (self: N, i: float) -> N:

		"""Transpose so that the highest value becomes ``i``."""

		if not cantus.validation.is_number(i):
			raise cantus.errors.InvalidArgument(f"{self._name('transpose_to_max')}: argument must be numeric; was {i!r}")

		high = self.max()

		return self._bare() if high is None else self.transpose(i - high)

	def invert (self: N, i: float) -> N:

		"""Reflect every value around ``i``."""

		return self.map(lambda v, _: v.invert(i))

	def augment (self: N, i: float) -> N:

		return self.map(lambda v, _: v.augment(i))

	def diminish (self: N, i: float) -> N:

		"""Divide every value by ``i``."""

		if not cantus.validation.is_number(i) or i == 0:
			raise cantus.errors.InvalidArgument(f"{self._name('diminish')}: argument must be a non-zero number; was {i!r}")

		return self.map(lambda v, _: v.set_value(v.val() / i))

	def mod (self: N, i: float) -> N:

		"""
		Apply a non-negative modulus to every value.

		Example:
			```python
			# returns numseq([1, 2, 0, 1, 2, 2])
			numseq([1, 2, 3, 4, 5, -1]).mod(3)
			```
		"""

		if not cantus.validation.is_number(i) or i <= 0:
			raise cantus.errors.InvalidArgument(f"{self._name('mod')}: argument must be a positive number; was {i!r}")

		return self.map(lambda v, _: v.set_value(mod_value(v.val(), i)))

	def trim (self: N, low: typing.Optional[float] = None, high: typing.Optional[float] = None) -> N:

		"""
		Clamp every value to ``low`` and ``high``. Either limit may be None.

		Example:
			```python
			# returns numseq([2, 2, 3, 4, 4])
			numseq([1, 2, 3, 4, 5]).trim(2, 4)
			```
		"""

		_check_limits(low, high, self._name("trim"))

		return self.map(lambda v, _: v.set_value(trim_value(v.val(), low, high)))

	def bounce (self: N, low: typing.Optional[float] = None, high: typing.Optional[float] = None) -> N:

		"""
		Reflect values back off ``low`` and ``high``. Either limit may be None.

		Example:
			```python
			# returns numseq([3, 2, 3, 4, 3])
			numseq([1, 2, 3, 4, 5]).bounce(2, 4)
			```
		"""

		_check_limits(low, high, self._name("bounce"))

		return self.map(lambda v, _: v.set_value(bounce_value(v.val(), low, high)))

	# --- many NumSeqs to one ---

	def combine_sum (self: N, *others: N) -> N:

		"""
		Add the values at each position.

		Example:
			```python
			# returns numseq([6, 11, 16])
			numseq([1, 4, 7]).combine_sum(numseq([2, 5, 8]), numseq([3, 2, 1]))
			```
		"""

		return self.combine(lambda *m: sum(v.val() for v in m), *others)

	def combine_product (self: N, *others: N) -> N:

		def product (*m: cantus.members.NumSeqMember) -> float:
			ret = 1
			for v in m:
				ret *= v.val()
			return ret

		return self.combine(product, *others)

	def combine_diff (self: N, other: N) -> N:

		"""Subtract the values of ``other`` from the values of this NumSeq, position by position."""

		return self.combine(lambda a, b: a.val() - b.val(), other)

	def combine_min (self: N, *others: N) -> N:

		"""
		Take the lowest value at each position.

		Example:
			```python
			# returns numseq([1, 0, 3, 0, 1])
			numseq([1, 2, 3, 4, 5]).combine_min(numseq([5, 4, 3, 2, 1]), numseq([10, 0, 10, 0, 10]))
			```
		"""

		return self.combine(lambda *m: min(v.val() for v in m), *others)

	def combine_max (self: N, *others: N) -> N:

		"""Take the highest value at each position."""

		return self.combine(lambda *m: max(v.val() for v in m), *others)

	# --- exchanging values ---

	def exchange_values_increasing (self: N, other: N) -> typing.Tuple[N, N]:

		"""
		Swap values so the first result holds the lower value at each position.

		Example:
			```python
			# returns (numseq([1, 2, 1]), numseq([3, 4, 7]))
			numseq([1, 4, 7]).exchange_values_increasing(numseq([3, 2, 1]))
			```
		"""

		return self.exchange_values_if(lambda a, b, i: a.val() > b.val(), other)

	def exchange_values_decreasing (self: N, other: N) -> typing.Tuple[N, N]:

		"""Swap values so the first result holds the higher value at each position."""

		return self.exchange_values_if(lambda a, b, i: b.val() > a.val(), other)


def numseq (values: typing.Iterable[typing.Any] = ()) -> NumSeq:

	"""
	Build a NumSeq from numbers, members or one-element lists.
	"""

	return NumSeq(values)
