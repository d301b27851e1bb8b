import typing


class CollectionError (Exception):

	"""
	Base class for every error raised by cantus.
	"""


class InvalidArgument (CollectionError, ValueError):

	"""
	A function argument is not callable, or a numeric argument breaks its constraint.
	"""


class IndexOutOfRange (CollectionError, IndexError):

	"""
	One or more positions fell outside the valid range of a Collection.

	``failures`` holds every failing ``(position, raw value)`` pair, where
	position is the place of the value within the index specification.
	"""

	def __init__ (self, message: str, failures: typing.Sequence[typing.Tuple[int, typing.Any]] = ()) -> None:

		super().__init__(message)

		self.failures: typing.List[typing.Tuple[int, typing.Any]] = list(failures)


class TypeMismatch (CollectionError, TypeError):

	"""
	A Collection of a different concrete kind was passed where the same kind is required.
	"""


class NoActiveBlock (CollectionError, RuntimeError):

	"""
	``then()`` or ``else_()`` was called without an open ``if_()`` block.
	"""


class LengthMismatch (CollectionError, ValueError):

	"""
	Sequences combined position by position had differing lengths or kinds.
	"""


class LoopLimitExceeded (CollectionError, RuntimeError):

	"""
	A ``while_()`` / ``do()`` loop ran past the configured ``max_loop_iterations``.
	"""
