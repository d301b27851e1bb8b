import math

import pytest

import cantus.errors
import cantus.numeric
import cantus.sequence


numseq = cantus.numeric.numseq


def test_numseq_factory () -> None:

	seq = numseq([1, 2.5])

	assert isinstance(seq, cantus.numeric.NumSeq)
	assert seq.to_numeric_values() == [1, 2.5]


def test_min_max_range () -> None:

	seq = numseq([3, -1, 4, 1])

	assert seq.min() == -1
	assert seq.max() == 4
	assert seq.range() == 5


def test_empty_statistics () -> None:

	"""Statistics of an empty NumSeq are None or zero."""

	seq = numseq()

	assert seq.min() is None
	assert seq.max() is None
	assert seq.mean() is None
	assert seq.range() == 0
	assert seq.total() == 0


def test_total_and_mean () -> None:

	seq = numseq([1, 2, 3, 4, 5])

	assert seq.total() == 15
	assert seq.mean() == pytest.approx(3)


def test_running_total () -> None:

	result = numseq([0, 1, -1, 2, 1, 0, -2, 3]).running_total()

	assert result == numseq([0, 1, 0, 2, 3, 3, 1, 4])


def test_deltas () -> None:

	result = numseq([0, 1, -1, 2, 1, 0, -2, 3]).deltas()

	assert result == numseq([1, -2, 3, -1, -1, -2, 5])
	assert numseq([7]).deltas() == numseq()


def test_transpose_invert_augment () -> None:

	seq = numseq([1, 2, 3])

	assert seq.transpose(2) == numseq([3, 4, 5])
	assert seq.invert(2) == numseq([3, 2, 1])
	assert seq.augment(3) == numseq([3, 6, 9])


def test_combine_sum_product_diff () -> None:

	assert numseq([1, 4, 7]).combine_sum(numseq([2, 5, 8]), numseq([3, 2, 1])) == numseq([6, 11, 16])
	assert numseq([1, 4, 7]).combine_product(numseq([2, 5, 8]), numseq([3, 2, 1])) == numseq([6, 40, 56])
	assert numseq([1, 4, 7]).combine_diff(numseq([3, 2, 1])) == numseq([-2, 2, 6])


def test_numseq_in_control_flow () -> None:

	"""Control flow works on subclasses and keeps their class."""

	result = numseq([1, 2, 3, 4]).while_(lambda s: s.total() > 5).do(lambda s: s.drop_right())

	assert result == numseq([1, 2])
	assert isinstance(result, cantus.numeric.NumSeq)


# --- comparisons ---


def test_is_transformation_of () -> None:

	seq = numseq([1, 2, 3, 4, 5])

	assert seq.is_transformation_of(lambda a, b: a + b, numseq([5, 4, 3, 2, 1]))
	assert not seq.is_transformation_of(lambda a, b: a * b, numseq([5, 4, 3, 2, 1]))
	assert not seq.is_transformation_of(lambda a, b: a + b, numseq([5, 4]))
	assert numseq().is_transformation_of(lambda a, b: a - b, numseq())


def test_is_transformation_of_ignores_non_finite_results () -> None:

	assert numseq([0, 2, 4]).is_transformation_of(lambda a, b: a / b if b else math.inf, numseq([0, 1, 2]))


@pytest.mark.parametrize("method, other, expected", [
	("is_transposition_of", [4, 5, 6, 7, 8], True),
	("is_transposition_of", [8, 7, 6, 5, 4], False),
	("is_inversion_of", [8, 7, 6, 5, 4], True),
	("is_inversion_of", [4, 5, 6, 7, 8], False),
	("is_retrograde_of", [8, 7, 6, 5, 4], True),
	("is_retrograde_of", [4, 5, 6, 7, 8], False),
	("is_retrograde_inversion_of", [4, 5, 6, 7, 8], True),
	("is_retrograde_inversion_of", [8, 7, 6, 5, 4], False),
])
def test_named_transformations (method, other, expected) -> None:

	assert getattr(numseq([1, 2, 3, 4, 5]), method)(numseq(other)) is expected


def test_transformations_need_a_numseq () -> None:

	assert not numseq([1, 2]).is_retrograde_of(cantus.sequence.Sequence([2, 1]))
	assert not numseq([1, 2]).is_transposition_of([1, 2])


# --- changing values ---


def test_transpose_to_min_and_max () -> None:

	seq = numseq([3, 1, 2])

	assert seq.transpose_to_min(11) == numseq([13, 11, 12])
	assert seq.transpose_to_max(0) == numseq([0, -2, -1])
	assert numseq().transpose_to_min(5) == numseq()

	with pytest.raises(cantus.errors.InvalidArgument):
		seq.transpose_to_max("high")


def test_diminish () -> None:

	assert numseq([2, 4, 6]).diminish(2) == numseq([1, 2, 3])

	with pytest.raises(cantus.errors.InvalidArgument):
		numseq([1]).diminish(0)


def test_mod () -> None:

	"""Results are never negative."""

	assert numseq([1, 2, 3, 4, 5, -1]).mod(3) == numseq([1, 2, 0, 1, 2, 2])

	with pytest.raises(cantus.errors.InvalidArgument):
		numseq([1]).mod(0)


def test_trim () -> None:

	seq = numseq([1, 2, 3, 4, 5])

	assert seq.trim(2, 4) == numseq([2, 2, 3, 4, 4])
	assert seq.trim(3) == numseq([3, 3, 3, 4, 5])
	assert seq.trim(None, 2) == numseq([1, 2, 2, 2, 2])
	assert seq.trim() == seq


def test_bounce () -> None:

	seq = numseq([1, 2, 3, 4, 5])

	assert seq.bounce(2, 4) == numseq([3, 2, 3, 4, 3])
	assert seq.bounce(3) == numseq([5, 4, 3, 4, 5])
	assert seq.bounce(None, 3) == numseq([1, 2, 3, 2, 1])
	assert numseq([0, 9, 10]).bounce(2, 4) == numseq([4, 3, 2])
	assert seq.bounce(3, 3) == numseq([3, 3, 3, 3, 3])


@pytest.mark.parametrize("low, high", [
	(4, 2),
	("low", None),
	(None, [4]),
])
def test_limit_validation (low, high) -> None:

	with pytest.raises(cantus.errors.InvalidArgument):
		numseq([1]).trim(low, high)

	with pytest.raises(cantus.errors.InvalidArgument):
		numseq([1]).bounce(low, high)


def test_density_limits () -> None:

	"""Values at the limits always give zero or one; everything is zero or one."""

	seq = numseq(list(range(11)))

	rising = seq.density(0, 5).to_numeric_values()

	assert rising[0] == 0
	assert rising[5:] == [1] * 6
	assert set(rising) <= {0, 1}

	falling = seq.density(10, 5).to_numeric_values()

	assert falling[:6] == [1] * 6
	assert falling[10] == 0
	assert set(falling) <= {0, 1}


def test_density_is_repeatable () -> None:

	seq = numseq(list(range(0, 110, 10)))

	assert seq.density(0, 100, seed=7) == seq.density(0, 100, seed=7)
	assert seq.density(0, 100) == seq.density(0, 100)
	assert numseq().density(0, 100) == numseq()


def test_density_validation () -> None:

	with pytest.raises(cantus.errors.InvalidArgument, match="must differ"):
		numseq([1]).density(3, 3)

	with pytest.raises(cantus.errors.InvalidArgument, match="integer"):
		numseq([1]).density(0.5, 3)


# --- many NumSeqs ---


def test_combine_min_and_max () -> None:

	seq = numseq([1, 2, 3, 4, 5])
	others = (numseq([5, 4, 3, 2, 1]), numseq([10, 0, 10, 0, 10]))

	assert seq.combine_min(*others) == numseq([1, 0, 3, 0, 1])
	assert seq.combine_max(*others) == numseq([10, 4, 10, 4, 10])

	with pytest.raises(cantus.errors.LengthMismatch):
		seq.combine_min(numseq([1]))


def test_exchange_values_increasing_and_decreasing () -> None:

	seq = numseq([1, 4, 7])
	other = numseq([3, 2, 1])

	assert seq.exchange_values_increasing(other) == (numseq([1, 2, 1]), numseq([3, 4, 7]))
	assert seq.exchange_values_decreasing(other) == (numseq([3, 4, 7]), numseq([1, 2, 1]))
