"""
The replacer protocol.

A replacer describes what replaces an element (or a window, or a slice) of a
Collection. It may be:

- a single value, which contributes one element;
- a list of values, which contributes each of them (an empty list deletes);
- a Collection, which contributes its whole contents;
- a callable taking ``(current, position)`` and returning any of the above.

Whatever shape is produced is flattened to a plain list before splicing.
"""

import typing

import cantus.collection


Replacer = typing.Union[typing.Any, typing.List[typing.Any], typing.Callable[[typing.Any, int], typing.Any]]
MemberFactory = typing.Callable[[typing.Any], typing.Any]


def flatten (value: typing.Any, member: typing.Optional[MemberFactory] = None) -> typing.List[typing.Any]:

	"""
	Flatten a replacement value to a list of elements.

	When ``member`` is given, each element is passed through it so that values
	from a different kind of Collection are rebuilt as the target member type.
	"""

	if isinstance(value, cantus.collection.Collection):
		values = list(value.contents)
	elif isinstance(value, list):
		values = list(value)
	else:
		values = [value]

	if member is None:
		return values

	return [member(v) for v in values]


def resolve (spec: Replacer, current: typing.Any, position: int, member: typing.Optional[MemberFactory] = None) -> typing.List[typing.Any]:

	"""
	Compute the replacement for one position.

	Callables are invoked every time, with the current value and its position.
	"""

	value = spec(current, position) if callable(spec) else spec

	return flatten(value, member)
