import typing

import cantus.errors

T = typing.TypeVar("T")


def fill (length: int, value: T) -> typing.List[T]:

	"""Return a list holding ``value`` at every one of ``length`` positions."""

	return [value] * length


def sanitize_to_list (value: typing.Any) -> typing.List[typing.Any]:

	"""Wrap a non-list value in a one-element list; return lists as a copy."""

	if isinstance(value, list):
		return list(value)

	return [value]


def zip_lists (*lists: typing.Sequence[T]) -> typing.List[typing.List[T]]:

	"""
	Transpose equal-length lists position by position.

	The first returned list holds every first value, the second every second
	value, and so on.

	Example:
		```python
		# returns [[1, 4], [2, 5], [3, 6]]
		zip_lists([1, 2, 3], [4, 5, 6])
		```
	"""

	if len({len(values) for values in lists}) > 1:
		raise cantus.errors.LengthMismatch("all arguments to zip_lists() should be the same length")

	return [list(values) for values in zip(*lists)]
