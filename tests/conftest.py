import typing

import pytest

import cantus.collection
import cantus.config
import cantus.numeric


@pytest.fixture(autouse=True)
def reset_config () -> typing.Iterator[None]:

	"""Start and finish every test with default settings."""

	cantus.config.reset()
	yield
	cantus.config.reset()


@pytest.fixture
def five () -> cantus.collection.Collection:

	"""A plain Collection of the numbers one to five."""

	return cantus.collection.Collection([1, 2, 3, 4, 5])


@pytest.fixture
def six () -> cantus.collection.Collection:

	"""A plain Collection of the numbers one to six."""

	return cantus.collection.Collection([1, 2, 3, 4, 5, 6])


@pytest.fixture
def ten () -> cantus.numeric.NumSeq:

	"""An unordered NumSeq of the numbers one to ten."""

	return cantus.numeric.numseq([1, 4, 3, 2, 5, 6, 10, 9, 7, 8])


@pytest.fixture
def with_gaps () -> cantus.numeric.NumSeq:

	"""A NumSeq using zero to mark two gaps."""

	return cantus.numeric.numseq([1, 4, 0, 3, 2, 5, 6, 0, 10, 9, 7, 8])
