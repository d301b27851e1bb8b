import pytest

import cantus.collection
import cantus.errors
import cantus.members
import cantus.numeric
import cantus.sequence


numseq = cantus.numeric.numseq


def has_gap (window, i) -> bool:

	return any(m.val() == 0 for m in window)


# --- construction ---


def test_members_are_coerced () -> None:

	"""Raw values become members of the Sequence's member class."""

	seq = numseq([1, [2], cantus.members.SeqMember(3)])

	assert all(isinstance(m, cantus.members.NumSeqMember) for m in seq)
	assert seq.to_numeric_values() == [1, 2, 3]


def test_invalid_members_are_rejected () -> None:

	with pytest.raises(cantus.errors.InvalidArgument):
		numseq([1, "two"])


def test_generic_sequence_wraps_anything () -> None:

	"""A plain Sequence accepts any value."""

	seq = cantus.sequence.Sequence(["a", None])

	assert [m.val() for m in seq] == ["a", None]


def test_append_items_coerces () -> None:

	assert numseq([1]).append_items(2, [3]).to_numeric_values() == [1, 2, 3]


def test_replacer_output_is_coerced () -> None:

	"""Values from a plain Collection are rebuilt as members."""

	result = numseq([1, 2, 3]).replace_indices(1, cantus.collection.Collection([7, 8]))

	assert result == numseq([1, 7, 8, 3])


def test_to_numeric_values_requires_numbers () -> None:

	with pytest.raises(cantus.errors.InvalidArgument):
		cantus.sequence.Sequence(["a"]).to_numeric_values()


# --- windows ---


def test_find_if_window (ten: cantus.numeric.NumSeq) -> None:

	"""Single-member windows are found first to last."""

	assert ten.find_if_window(1, 1, lambda w, i: w[0].val() > i) == [0, 1, 2, 4, 5, 6, 7]


def test_find_if_reverse_window (ten: cantus.numeric.NumSeq) -> None:

	"""Single-member windows are found last to first."""

	assert ten.find_if_reverse_window(1, 1, lambda w, i: w[0].val() > i) == [7, 6, 5, 4, 2, 1, 0]


def test_find_if_window_pairs () -> None:

	seq = numseq([1, 2, 2, 3, 4, 4, 5])

	assert seq.find_if_window(2, 1, lambda w, i: w[0] == w[1]) == [1, 4]
	assert seq.find_if_reverse_window(2, 1, lambda w, i: w[0] == w[1]) == [4, 1]


def test_find_if_window_names_the_method (ten: cantus.numeric.NumSeq) -> None:

	with pytest.raises(cantus.errors.InvalidArgument, match=r"NumSeq\.find_if_window\(\)"):
		ten.find_if_window(0, 1, lambda w, i: True)


def test_replace_if_window_removes_windows (with_gaps: cantus.numeric.NumSeq) -> None:

	"""Working forward, each removal leaves earlier windows in place."""

	assert with_gaps.replace_if_window(2, 1, has_gap, []) == numseq([1, 3, 2, 5, 10, 9, 7, 8])


def test_replace_if_reverse_window_removes_windows (with_gaps: cantus.numeric.NumSeq) -> None:

	"""Working backward, each removal leaves later windows in place."""

	assert with_gaps.replace_if_reverse_window(2, 1, has_gap, []) == numseq([1, 4, 2, 5, 6, 9, 7, 8])


def test_replace_if_window_shrinking (ten: cantus.numeric.NumSeq) -> None:

	"""Windows that no longer fit after earlier replacements are skipped."""

	result = ten.replace_if_window(4, 1, lambda w, i: i < 4, lambda w, i: w[1:3])

	assert result == numseq([10, 7])


def test_replace_if_window_with_sequence (ten: cantus.numeric.NumSeq) -> None:

	"""A Sequence replacer is spliced in for every match."""

	result = ten.replace_if_window(1, 1, lambda w, i: w[0].val() % 2 == 0, numseq([11, 10]))

	assert result == numseq([1, 11, 10, 3, 11, 10, 5, 11, 10, 11, 10, 9, 7, 11, 10])


def test_replace_if_window_with_member () -> None:

	seq = numseq([1, 2, 2, 3, 4, 4, 5])

	result = seq.replace_if_window(2, 1, lambda w, i: w[0] == w[1], lambda w, i: w[0].invert(5))

	assert result == numseq([1, 8, 3, 6, 5])


def test_replace_if_reverse_window_with_member () -> None:

	seq = numseq([1, 2, 2, 3, 4, 4, 5])

	result = seq.replace_if_reverse_window(2, 1, lambda w, i: w[0] == w[1], lambda w, i: w[0].invert(5))

	assert result == numseq([1, 8, 3, 6, 5])


def test_map_window () -> None:

	seq = numseq([1, 2, 3, 4, 5])

	assert seq.map_window(2, 2, lambda w, n: w[0].transpose(w[1].val())) == numseq([3, 7])
	assert seq.map_window(2, 1, lambda w, n: w) == numseq([1, 2, 2, 3, 3, 4, 4, 5])


def test_filter_window () -> None:

	"""Incomplete windows are discarded."""

	assert numseq([1, 2, 3, 4, 5]).filter_window(2, 2, lambda w, n: w[0].val() != 1) == numseq([3, 4])


# --- patching ---


def test_set_slice () -> None:

	seq = numseq([1, 2, 3, 4, 5])

	assert seq.set_slice(1, -1, 0) == numseq([1, 0, 0, 0, 5])
	assert seq.set_slice(None, 2, 9) == numseq([9, 9, 3, 4, 5])
	assert seq.set_slice(3, None, 9) == numseq([1, 2, 3, 9, 9])


# --- related Sequences ---


def test_loop () -> None:

	seq = numseq([1, 2, 3])

	assert seq.loop(8, 1) == numseq([2, 3, 1, 2, 3, 1, 2, 3])
	assert seq.loop(2) == numseq([1, 2])
	assert seq.loop(4, -1) == numseq([3, 1, 2, 3])


def test_loop_empty () -> None:

	with pytest.raises(cantus.errors.InvalidArgument, match="zero-length"):
		numseq().loop(4)


def test_repeat_and_dupe () -> None:

	seq = numseq([1, 2, 3])

	assert seq.repeat() == numseq([1, 2, 3, 1, 2, 3])
	assert seq.repeat(0) == numseq()
	assert seq.dupe(3) == numseq([1, 1, 1, 2, 2, 2, 3, 3, 3])


def test_dedupe () -> None:

	"""Only consecutive duplicates collapse."""

	assert numseq([1, 2, 2, 3, 3, 2, 2, 1]).dedupe() == numseq([1, 2, 3, 2, 1])
	assert numseq().dedupe() == numseq()


def test_shuffle () -> None:

	seq = numseq([1, 2, 3, 4, 5, 6, 7, 8, 9])

	assert seq.shuffle([0, 2, 1]) == numseq([1, 3, 2, 4, 6, 5, 7, 9, 8])


@pytest.mark.parametrize("order", [[0], [0, 1], [0, 1, 1]])
def test_shuffle_validation (order) -> None:

	"""Orders must be a permutation dividing the length evenly."""

	with pytest.raises(cantus.errors.InvalidArgument):
		numseq([1, 2, 3, 4, 5, 6, 7, 8, 9]).shuffle(order)


def test_pad () -> None:

	seq = numseq([1, 2, 3])

	assert seq.pad(1, 2) == numseq([1, 1, 1, 2, 3])
	assert seq.pad(0, 0) is seq
	assert seq.pad_to(1, 5) == numseq([1, 1, 1, 2, 3])
	assert seq.pad_to(1, 3) is seq
	assert seq.pad_right(1, 2) == numseq([1, 2, 3, 1, 1])
	assert seq.pad_right_to(1, 5) == numseq([1, 2, 3, 1, 1])
	assert seq.pad_right_to(1, 2) is seq


def test_padding_nothing_ends_a_block () -> None:

	block = numseq([1, 2, 3]).if_(True).then(lambda s: s.transpose(1))

	with pytest.raises(cantus.errors.NoActiveBlock):
		block.pad(0, 0).else_(lambda s: s)

	with pytest.raises(cantus.errors.NoActiveBlock):
		block.pad_right_to(0, 2).then(lambda s: s)


def test_pad_validation () -> None:

	with pytest.raises(cantus.errors.InvalidArgument, match="count"):
		numseq([1]).pad(0, -1)


def test_filter_in_position () -> None:

	result = numseq([1, 2, 3, 4, 5]).filter_in_position(lambda v, i: v.val() % 2 == 1, 8)

	assert result == numseq([1, 8, 3, 8, 5])


def test_sort () -> None:

	assert numseq([2, 1, 4, 3, 5]).sort(lambda v: v.val()) == numseq([1, 2, 3, 4, 5])


def test_sort_with_filter () -> None:

	"""Members failing the filter keep their positions."""

	result = numseq([4, 1, 3, 2, 5]).sort(lambda v: v.val(), lambda v, i: v.val() % 2 == 0)

	assert result == numseq([2, 1, 3, 4, 5])


# --- one Sequence to many ---


def test_chop () -> None:

	assert numseq([1, 2, 3, 4, 5]).chop(2) == [numseq([1, 2]), numseq([3, 4])]

	with pytest.raises(cantus.errors.InvalidArgument):
		numseq([1, 2]).chop(0)


def test_partition_in_position () -> None:

	passed, failed = numseq([1, 2, 3, 4, 5]).partition_in_position(lambda v, i: v.val() % 2 == 1, 0)

	assert passed == numseq([1, 0, 3, 0, 5])
	assert failed == numseq([0, 2, 0, 4, 0])


def test_group_by_in_position () -> None:

	groups = numseq([1, 2, 3, 4, 5]).group_by_in_position(lambda v, i: v.val() % 3, 0)

	assert list(groups) == [1, 2, 0]
	assert groups[1] == numseq([1, 0, 0, 4, 0])
	assert groups[2] == numseq([0, 2, 0, 0, 5])
	assert groups[0] == numseq([0, 0, 3, 0, 0])


def test_untwine () -> None:

	assert numseq([1, 2, 3, 4, 5, 6]).untwine(3) == [numseq([1, 4]), numseq([2, 5]), numseq([3, 6])]

	with pytest.raises(cantus.errors.LengthMismatch):
		numseq([1, 2, 3, 4, 5]).untwine(2)


# --- many Sequences to one ---


def test_twine () -> None:

	result = numseq([1, 2, 3]).twine(numseq([4, 5, 6]), numseq([7, 8, 9]))

	assert result == numseq([1, 4, 7, 2, 5, 8, 3, 6, 9])


def test_twine_length_mismatch () -> None:

	with pytest.raises(cantus.errors.LengthMismatch, match=r"NumSeq\[3\],NumSeq\[2\]"):
		numseq([1, 2, 3]).twine(numseq([4, 5]))


def test_twine_kind_mismatch () -> None:

	with pytest.raises(cantus.errors.LengthMismatch):
		numseq([1]).twine(cantus.sequence.Sequence([1]))


def test_combine () -> None:

	result = numseq([1, 2, 3]).combine(lambda a, b: a.invert(b.val()), numseq([4, 5, 4]))

	assert result == numseq([7, 8, 5])


def test_flat_combine () -> None:

	result = numseq([1, 2, 3]).flat_combine(lambda a, b: [a, b, a], numseq([4, 5, 4]))

	assert result == numseq([1, 4, 1, 2, 5, 2, 3, 4, 3])


def test_zip_with () -> None:

	assert numseq([1, 2, 3]).zip_with(numseq([5, 4, 3])) == [numseq([1, 5]), numseq([2, 4]), numseq([3, 3])]


def test_map_with () -> None:

	result = numseq([1, 2, 3]).map_with(
		lambda m, i: [m[0].augment(m[1].val()), m[1].invert(m[0].val())],
		numseq([5, 4, 3])
	)

	assert result == [numseq([5, 8, 9]), numseq([-3, 0, 3])]


def test_map_with_empty () -> None:

	"""Empty inputs still give one result per Sequence."""

	assert numseq().map_with(lambda m, i: m, numseq()) == [numseq(), numseq()]


def test_filter_with () -> None:

	result = numseq([1, 2, 3]).filter_with(lambda m, i: m[0] != m[1], numseq([5, 4, 3]))

	assert result == [numseq([1, 2]), numseq([5, 4])]
	assert numseq([1]).filter_with(lambda m, i: False, numseq([1])) == [numseq(), numseq()]


def test_exchange_values_if () -> None:

	result = numseq([1, 2, 3, 4, 5]).exchange_values_if(lambda a, b, i: a.val() < b.val(), numseq([5, 4, 3, 2, 1]))

	assert result == (numseq([5, 4, 3, 4, 5]), numseq([1, 2, 3, 2, 1]))

	with pytest.raises(cantus.errors.LengthMismatch):
		numseq([1, 2]).exchange_values_if(lambda a, b, i: True, numseq([1]))


# --- comparisons ---


def test_is_same_class_and_length_as () -> None:

	seq = numseq([1, 2])

	assert seq.is_same_class_and_length_as(numseq([3, 4]), numseq([5, 6]))
	assert not seq.is_same_class_and_length_as(numseq([3]))
	assert not seq.is_same_class_and_length_as(cantus.sequence.Sequence([1, 2]))


def test_equals () -> None:

	seq = numseq([1, 2])

	assert seq.equals(numseq([1, 2]), numseq([1, 2]))
	assert not seq.equals(numseq([1, 2]), numseq([2, 1]))
	assert not seq.equals(numseq([1]))


def test_is_subset_of () -> None:

	"""Members must appear in order, but need not be adjacent."""

	assert numseq([0, 1, 2]).is_subset_of(numseq([0, 1, 1, 0, 2]))
	assert not numseq([0, 1, 2]).is_subset_of(numseq([0, 2, 1, 0, 1]))
	assert numseq().is_subset_of(numseq([1]))
	assert not numseq([1, 2]).is_subset_of(numseq([1]))
	assert not numseq([1]).is_subset_of(cantus.sequence.Sequence([1]))


def test_is_superset_of () -> None:

	assert numseq([0, 1, 1, 0, 2]).is_superset_of(numseq([0, 1, 2]))
	assert not numseq([0, 2, 1, 0, 1]).is_superset_of(numseq([0, 1, 2]))
	assert not numseq([1]).is_superset_of([1])


def test_has_periodicity_of () -> None:

	seq = numseq([1, 2, 3, 1, 2, 3, 1, 2])

	assert seq.has_periodicity_of(3)
	assert not seq.has_periodicity_of(2)
	assert not seq.has_periodicity_of(5)

	with pytest.raises(cantus.errors.InvalidArgument):
		seq.has_periodicity_of(0)


@pytest.mark.parametrize("values, period", [
	([1, 2, 3, 1, 2, 3, 1, 2, 3, 1, 2, 3], 3),
	([4, 4, 4], 1),
	([1, 2, 1, 2, 1, 3], 0),
	([1], 0),
	([], 0),
])
def test_has_periodicity (values, period) -> None:

	assert numseq(values).has_periodicity() == period
