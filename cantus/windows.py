"""
Sliding windows over lists.

A window of ``size`` elements starts every ``step`` positions. Forward
windows start at ``0, step, 2 * step, ...``; reverse windows start at
``length - size`` and step back towards zero. Only complete windows are ever
offered to a predicate.

The replacing functions splice into one scratch copy of the list as they go.
Each visits windows in an order that keeps the positions of windows not yet
visited stable: the reverse pass works from the end, measuring positions from
the start, and the forward pass works from the start, measuring positions
from the end of the scratch list. A window that no longer fits the scratch
list after earlier replacements is skipped.
"""

import logging
import typing

import cantus.validation


logger = logging.getLogger(__name__)

T = typing.TypeVar("T")

WindowFn = typing.Callable[[typing.List[typing.Any], int], typing.Any]
ReplaceFn = typing.Callable[[typing.List[typing.Any], int], typing.List[typing.Any]]


def check_size_and_step (size: typing.Any, step: typing.Any, where: str = "windows()") -> None:

	"""Raise ``InvalidArgument`` unless both ``size`` and ``step`` are positive integers."""

	cantus.validation.require_pos_int(size, where, "size")
	cantus.validation.require_pos_int(step, where, "step")


def window_starts (length: int, size: int, step: int) -> range:

	"""
	Return the start positions of complete forward windows.

	Example:
		```python
		# returns range(0, 4, 2), i.e. 0 and 2
		window_starts(5, 2, 2)
		```
	"""

	return range(0, length - size + 1, step)


def reverse_window_starts (length: int, size: int, step: int) -> range:

	"""Return the start positions of complete windows, visited from the end."""

	return range(length - size, -1, -step)


def array_to_windows (values: typing.Sequence[T], size: int, step: int, where: str = "array_to_windows()") -> typing.Tuple[typing.List[typing.List[T]], typing.List[typing.List[T]]]:

	"""
	Split ``values`` into forward windows.

	Returns a pair: the complete windows, then the incomplete windows at the end.

	Example:
		```python
		# returns ([[1, 2], [3, 4]], [[5]])
		array_to_windows([1, 2, 3, 4, 5], 2, 2)
		```
	"""

	check_size_and_step(size, step, where)

	last = len(values) - size
	full: typing.List[typing.List[T]] = []
	rest: typing.List[typing.List[T]] = []

	for i in range(0, len(values), step):
		(rest if i > last else full).append(list(values[i:i + size]))

	return full, rest


def find_if_window (values: typing.Sequence[T], size: int, step: int, fn: WindowFn, where: str = "find_if_window()") -> typing.List[int]:

	"""
	Return the start of every forward window for which ``fn(window, start)`` holds.
	"""

	check_size_and_step(size, step, where)
	cantus.validation.require_function(fn, where)

	return [i for i in window_starts(len(values), size, step) if fn(list(values[i:i + size]), i)]


def find_if_reverse_window (values: typing.Sequence[T], size: int, step: int, fn: WindowFn, where: str = "find_if_reverse_window()") -> typing.List[int]:

	"""
	Return the start of every window for which ``fn(window, start)`` holds, last window first.
	"""

	check_size_and_step(size, step, where)
	cantus.validation.require_function(fn, where)

	return [i for i in reverse_window_starts(len(values), size, step) if fn(list(values[i:i + size]), i)]


def replace_if_window (values: typing.Sequence[T], size: int, step: int, fn: WindowFn, replace: ReplaceFn, where: str = "replace_if_window()") -> typing.List[T]:

	"""
	Replace matching windows, visiting them from the start.

	``replace(window, start)`` returns the values to splice in for a window.
	Returns the new list.

	Example:
		```python
		# returns [1, 9, 3, 9]
		replace_if_window([1, 2, 2, 3, 4, 4], 2, 1, lambda w, i: w[0] == w[1], lambda w, i: [9])
		```
	"""

	check_size_and_step(size, step, where)
	cantus.validation.require_function(fn, where)

	vals = list(values)
	matched = 0

	for i in reverse_window_starts(len(vals), size, step):
		end = len(vals) - i

		if end < size:
			continue

		start = end - size
		window = vals[start:end]

		if fn(window, start):
			vals[start:end] = replace(window, start)
			matched += 1

	logger.debug(f"{where}: replaced {matched} windows")

	return vals


def replace_if_reverse_window (values: typing.Sequence[T], size: int, step: int, fn: WindowFn, replace: ReplaceFn, where: str = "replace_if_reverse_window()") -> typing.List[T]:

	"""
	Replace matching windows, visiting them from the end.

	``replace(window, start)`` returns the values to splice in for a window.
	Returns the new list.
	"""

	check_size_and_step(size, step, where)
	cantus.validation.require_function(fn, where)

	vals = list(values)
	matched = 0

	for i in reverse_window_starts(len(vals), size, step):
		if i + size > len(vals):
			continue

		window = vals[i:i + size]

		if fn(window, i):
			vals[i:i + size] = replace(window, i)
			matched += 1

	logger.debug(f"{where}: replaced {matched} windows")

	return vals
