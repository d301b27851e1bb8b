"""
Members of Sequences.

Sequence contents are immutable member objects rather than raw values, so
that every member of a given Sequence class has the same shape and can be
compared with ``==``.
"""

import dataclasses
import typing

import cantus.errors
import cantus.validation


M = typing.TypeVar("M", bound="SeqMember")


@dataclasses.dataclass(frozen=True)
class SeqMember:

	"""
	A single immutable member of a Sequence, wrapping any value.
	"""

	value: typing.Any

	@classmethod
	def from_value (cls: typing.Type[M], value: typing.Any) -> M:

		"""
		Build a member from a raw value, or return ``value`` if it already is one.
		"""

		if isinstance(value, cls):
			return value

		return cls(value)

	def val (self) -> typing.Any:

		return self.value

	def numeric_value (self) -> float:

		"""
		Return the value as a number.

		Raises ``InvalidArgument`` if the value is not numeric.
		"""

		if not cantus.validation.is_number(self.value):
			raise cantus.errors.InvalidArgument(f"{type(self).__name__}.numeric_value(): value is not numeric; was {self.value!r}")

		return self.value

	def equals (self, other: typing.Any) -> bool:

		return self == other

	def describe (self) -> str:

		return f"{type(self).__name__}({self.value!r})"

	def __repr__ (self) -> str:

		return self.describe()


@dataclasses.dataclass(frozen=True, repr=False)
class NumSeqMember (SeqMember):

	"""
	A member of a NumSeq, whose value is a single number.
	"""

	value: float

	def __post_init__ (self) -> None:

		if not cantus.validation.is_number(self.value):
			raise cantus.errors.InvalidArgument(f"NumSeqMember: value must be a number; was {self.value!r}")

	@classmethod
	def from_value (cls, value: typing.Any) -> "NumSeqMember":

		"""
		Build a member from a number, another member with a numeric value, or
		a list holding exactly one number.

		Example:
			```python
			# all return NumSeqMember(3)
			NumSeqMember.from_value(3)
			NumSeqMember.from_value([3])
			NumSeqMember.from_value(SeqMember(3))
			```
		"""

		if isinstance(value, cls):
			return value

		if isinstance(value, SeqMember):
			return cls(value.numeric_value())

		if isinstance(value, list) and len(value) == 1:
			value = value[0]

		if not cantus.validation.is_number(value):
			raise cantus.errors.InvalidArgument(f"NumSeqMember.from_value(): value must contain a single number; was {value!r}")

		return cls(value)

	def set_value (self, value: float) -> "NumSeqMember":

		"""Return a member of the same class holding ``value``."""

		return type(self)(value)

	def transpose (self, i: float) -> "NumSeqMember":

		return self.set_value(self.value + i)

	def invert (self, i: float) -> "NumSeqMember":

		"""Reflect the value around ``i``."""

		return self.set_value(2 * i - self.value)

	def augment (self, i: float) -> "NumSeqMember":

		return self.set_value(self.value * i)
