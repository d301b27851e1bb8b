"""
Index resolution for Collections.

Converts signed, relative and bulk index specifications into validated
absolute positions. Negative values count back from the end, so ``-1`` is
the last element. By default a position must address an existing element
(``0 <= i < length``); inclusive mode also accepts ``length`` itself, which
is what split points need.
"""

import typing

import cantus.errors
import cantus.validation


IndexSpec = typing.Union[int, typing.Sequence[int], typing.Any]


def _resolve (i: typing.Any, length: int, limit: int) -> typing.Optional[int]:

	if not cantus.validation.is_int(i):
		return None

	candidate = length + i if i < 0 else i

	if 0 <= candidate < limit:
		return int(candidate)

	return None


def to_index_list (spec: IndexSpec) -> typing.List[typing.Any]:

	"""
	Normalize an index specification to a plain list of raw values.

	Accepts a single integer, a list or tuple of integers, or a Collection of
	integers. Sequences contribute their numeric values.
	"""

	if cantus.validation.is_int(spec):
		return [spec]

	if isinstance(spec, (list, tuple)):
		return list(spec)

	if hasattr(spec, "to_numeric_values"):
		return list(spec.to_numeric_values())

	if hasattr(spec, "contents"):
		return list(spec.contents)

	raise cantus.errors.InvalidArgument(f"invalid index specification: {spec!r}")


def resolve_one (i: typing.Any, length: int, inclusive: bool = False, where: str = "index()") -> int:

	"""
	Resolve a single signed index against ``length``.

	Raises ``IndexOutOfRange`` if the value is not an integer or falls
	outside the valid range.
	"""

	resolved = _resolve(i, length, length + 1 if inclusive else length)

	if resolved is None:
		raise cantus.errors.IndexOutOfRange(f"{where}: invalid index: {i!r}", failures=[(0, i)])

	return resolved


def resolve_many (spec: IndexSpec, length: int, inclusive: bool = False, where: str = "indices()") -> typing.List[int]:

	"""
	Resolve a bulk index specification against ``length``.

	The returned positions mirror the order of the input. Either every value
	resolves or a single ``IndexOutOfRange`` is raised listing each failing
	position within the specification together with its raw value.

	Example:
		```python
		# returns [3, 4]
		resolve_many([3, -1], 5)

		# raises IndexOutOfRange listing "1 (-8)" only
		resolve_many([3, -8], 5)
		```
	"""

	raw = to_index_list(spec)
	limit = length + 1 if inclusive else length
	resolved = [_resolve(v, length, limit) for v in raw]

	failures = [(pos, raw[pos]) for pos, v in enumerate(resolved) if v is None]

	if failures:
		detail = "; ".join(f"{pos} ({value!r})" for pos, value in failures)
		raise cantus.errors.IndexOutOfRange(
			f"{where}: {len(failures)} indices ({detail}) failed validation",
			failures = failures
		)

	return typing.cast(typing.List[int], resolved)
