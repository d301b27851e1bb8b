import numbers
import typing

import cantus.errors


def is_int (value: typing.Any) -> bool:

	"""Return True for integers, excluding booleans."""

	return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_pos_int (value: typing.Any) -> bool:

	"""Return True for integers greater than zero."""

	return is_int(value) and value > 0


def is_nonneg_int (value: typing.Any) -> bool:

	"""Return True for integers of zero or more."""

	return is_int(value) and value >= 0


def is_number (value: typing.Any) -> bool:

	"""Return True for real numbers, excluding booleans."""

	return isinstance(value, numbers.Real) and not isinstance(value, bool)


def require_function (fn: typing.Any, where: str, description: str = "a function") -> None:

	"""
	Raise ``InvalidArgument`` naming the caller unless ``fn`` is callable.
	"""

	if not callable(fn):
		raise cantus.errors.InvalidArgument(f"{where} requires {description}")


def require_pos_int (value: typing.Any, where: str, name: str = "argument") -> None:

	if not is_pos_int(value):
		raise cantus.errors.InvalidArgument(f"{where}: {name} must be a positive integer; was {value!r}")


def require_nonneg_int (value: typing.Any, where: str, name: str = "argument") -> None:

	if not is_nonneg_int(value):
		raise cantus.errors.InvalidArgument(f"{where}: {name} must be a non-negative integer; was {value!r}")
