import pytest

import cantus.errors
import cantus.windows


def test_window_starts () -> None:

	"""Forward windows start every step while a whole window fits."""

	assert list(cantus.windows.window_starts(5, 2, 2)) == [0, 2]
	assert list(cantus.windows.window_starts(5, 2, 1)) == [0, 1, 2, 3]
	assert list(cantus.windows.window_starts(1, 2, 1)) == []


def test_reverse_window_starts () -> None:

	"""Reverse windows start at the last whole window and step back."""

	assert list(cantus.windows.reverse_window_starts(5, 2, 2)) == [3, 1]
	assert list(cantus.windows.reverse_window_starts(5, 5, 1)) == [0]
	assert list(cantus.windows.reverse_window_starts(4, 5, 1)) == []


def test_array_to_windows () -> None:

	"""Complete and incomplete windows are returned separately."""

	assert cantus.windows.array_to_windows([1, 2, 3, 4, 5], 2, 2) == ([[1, 2], [3, 4]], [[5]])
	assert cantus.windows.array_to_windows([1, 2, 3, 4], 3, 1) == ([[1, 2, 3], [2, 3, 4]], [[3, 4], [4]])


@pytest.mark.parametrize("size, step", [(0, 1), (1, 0), (-1, 1), (1.5, 1), (2, None)])
def test_size_and_step_validation (size, step) -> None:

	"""Size and step must be positive integers."""

	with pytest.raises(cantus.errors.InvalidArgument):
		cantus.windows.find_if_window([1, 2, 3], size, step, lambda w, i: True)


def test_find_if_window () -> None:

	"""Matching window starts are returned first window first."""

	values = [1, 2, 2, 3, 4, 4, 5]

	assert cantus.windows.find_if_window(values, 2, 1, lambda w, i: w[0] == w[1]) == [1, 4]
	assert cantus.windows.find_if_window(values, 2, 2, lambda w, i: w[0] == w[1]) == [4]


def test_find_if_reverse_window () -> None:

	"""Matching window starts are returned last window first."""

	values = [1, 2, 2, 3, 4, 4, 5]

	assert cantus.windows.find_if_reverse_window(values, 2, 1, lambda w, i: w[0] == w[1]) == [4, 1]
	assert cantus.windows.find_if_reverse_window(values, 3, 3, lambda w, i: True) == [4, 1]


def test_find_if_window_never_offers_incomplete_windows () -> None:

	"""Windows are always exactly the requested size."""

	seen = []

	cantus.windows.find_if_window([1, 2, 3, 4, 5], 2, 2, lambda w, i: seen.append(w))

	assert seen == [[1, 2], [3, 4]]


def test_replace_if_window_keeps_unvisited_windows_stable () -> None:

	"""Replacing from the start does not shift windows still to be visited."""

	result = cantus.windows.replace_if_window(
		[1, 2, 2, 3, 4, 4], 2, 1,
		lambda w, i: w[0] == w[1],
		lambda w, i: [9]
	)

	assert result == [1, 9, 3, 9]


def test_replace_if_reverse_window () -> None:

	result = cantus.windows.replace_if_reverse_window(
		[1, 2, 2, 3, 4, 4], 2, 1,
		lambda w, i: w[0] == w[1],
		lambda w, i: [w[0] * 10]
	)

	assert result == [1, 20, 3, 40]


def test_replace_window_start_passed_to_replacer () -> None:

	"""The replacer receives the window and its start in the scratch list."""

	seen = []

	def replace (w, i):
		seen.append((w, i))
		return w

	cantus.windows.replace_if_reverse_window([1, 2, 3, 4], 2, 2, lambda w, i: True, replace)

	assert seen == [([3, 4], 2), ([1, 2], 0)]


def test_replace_does_not_change_input () -> None:

	values = [1, 2, 3]

	cantus.windows.replace_if_window(values, 1, 1, lambda w, i: True, lambda w, i: [])

	assert values == [1, 2, 3]
