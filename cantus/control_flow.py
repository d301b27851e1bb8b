"""
Conditional and looping pipelines over immutable Collections.

``if_()`` / ``then()`` / ``else_()`` / ``endif()`` and ``while_()`` / ``do()``
let a chain of Collection calls read like statements in an imperative
language, while every object touched stays immutable. The state that makes
this work is a frame carried by each returned Collection:

- ``IfFrame`` holds two stacks of branch closures, one consumed by
  ``then()`` and one by ``else_()``. Each ``if_()`` pushes one level on top
  of whatever frame the receiver already carries, which is what allows
  nesting.
- ``LoopFrame`` holds the closure installed by ``while_()`` (consumed by the
  next ``do()``) or by a bare ``do()`` (consumed by the next ``while_()``).

Any other Collection operation returns a Collection without a frame, which
ends the block.

Loops run iteratively, so a long loop does not grow the call stack. There is
no iteration cap unless ``control_flow.max_loop_iterations`` is configured.
"""

import dataclasses
import logging
import typing

import cantus.config
import cantus.errors
import cantus.validation


logger = logging.getLogger(__name__)

C = typing.TypeVar("C", bound="ControlFlow")

Branch = typing.Callable[[typing.Callable[[typing.Any], typing.Any]], typing.Any]


@dataclasses.dataclass(frozen=True)
class IfFrame:

	"""
	The open ``if_()`` blocks of a Collection, innermost last.
	"""

	then_stack: typing.Tuple[Branch, ...] = ()
	else_stack: typing.Tuple[Branch, ...] = ()

	def pop (self) -> typing.Optional["IfFrame"]:

		"""Return the frame with the innermost block removed, or None when no block remains."""

		if len(self.then_stack) <= 1:
			return None

		return IfFrame(then_stack=self.then_stack[:-1], else_stack=self.else_stack[:-1])


@dataclasses.dataclass(frozen=True)
class LoopFrame:

	"""
	A pending loop: ``body`` waits for a ``do()``, ``resume`` waits for a ``while_()``.
	"""

	body: typing.Optional[typing.Callable[[typing.Any], typing.Any]] = None
	resume: typing.Optional[typing.Callable[[typing.Any], typing.Any]] = None


Frame = typing.Optional[typing.Union[IfFrame, LoopFrame]]


class ControlFlow:

	"""
	Mixin providing the control-flow methods.

	Subclasses supply ``clone()`` (a copy without a frame) and
	``_with_control()`` (a copy carrying the given frame).
	"""

	_control: Frame = None

	def clone (self: C) -> C:

		raise NotImplementedError

	def _with_control (self: C, frame: Frame) -> C:

		raise NotImplementedError

	def _bare (self: C) -> C:

		return self if self._control is None else self._with_control(None)

	def _callback_result (self, result: typing.Any, where: str) -> typing.Any:

		if not isinstance(result, ControlFlow):
			raise cantus.errors.TypeMismatch(
				f"{type(self).__name__}.{where}: callback must return a Collection; returned {type(result).__name__}"
			)

		return result

	def if_ (self: C, condition: typing.Any) -> C:

		"""
		Begin a conditional processing block.

		Until the next call that is neither ``then()`` nor ``else_()``:

		- if the condition was truthy, ``then()`` returns the result of its
		  callback and ``else_()`` returns a copy unchanged;
		- if it was falsy, ``then()`` returns a copy unchanged and ``else_()``
		  returns the result of its callback.

		Callbacks on the untaken arm are never called. The condition may be a
		value, or a callable that receives this Collection.

		Example:
			```python
			# returns [3] if some_test(c) is truthy, [1, 2] otherwise
			c = cantus.Collection([1, 2, 3])
			c.if_(some_test).then(lambda s: s.drop()).then(lambda s: s.drop()).else_(lambda s: s.drop_right())
			```
		"""

		me = self.clone()
		truthy = bool(condition(me) if callable(condition) else condition)
		outer = self._control if isinstance(self._control, IfFrame) else None

		def take (fn: typing.Callable[[typing.Any], typing.Any]) -> typing.Any:
			result = me._callback_result(fn(me), "then()/else_()")
			return result._with_control(outer).if_(truthy)

		def skip (fn: typing.Callable[[typing.Any], typing.Any]) -> typing.Any:
			return me._with_control(outer).if_(truthy)

		taken, skipped = (take, skip) if truthy else (skip, take)

		frame = IfFrame(
			then_stack = (outer.then_stack if outer else ()) + (taken,),
			else_stack = (outer.else_stack if outer else ()) + (skipped,)
		)

		me = me._with_control(frame)

		return me

	def endif (self: C) -> C:

		"""
		End the innermost conditional processing block.
		"""

		if isinstance(self._control, IfFrame):
			return self._with_control(self._control.pop())

		return self.clone()

	def then (self: C, fn: typing.Callable[[C], C]) -> C:

		"""
		Within a truthy block, return ``fn(self)``; within a falsy one, return a copy.

		Raises ``NoActiveBlock`` outside an ``if_()`` block.
		"""

		cantus.validation.require_function(fn, f"{type(self).__name__}.then()")

		if not isinstance(self._control, IfFrame) or not self._control.then_stack:
			raise cantus.errors.NoActiveBlock(f"{type(self).__name__}.then() without an if_() condition")

		return self._control.then_stack[-1](fn)

	def else_ (self: C, fn: typing.Callable[[C], C]) -> C:

		"""
		Within a falsy block, return ``fn(self)``; within a truthy one, return a copy.

		Raises ``NoActiveBlock`` outside an ``if_()`` block.
		"""

		cantus.validation.require_function(fn, f"{type(self).__name__}.else_()")

		if not isinstance(self._control, IfFrame) or not self._control.else_stack:
			raise cantus.errors.NoActiveBlock(f"{type(self).__name__}.else_() without an if_() condition")

		return self._control.else_stack[-1](fn)

	def _iterate (self, fn: typing.Callable[[typing.Any], typing.Any], condition: typing.Callable[[typing.Any], typing.Any], where: str) -> typing.Any:

		"""Apply ``fn`` once, then again for as long as ``condition`` holds."""

		limit = cantus.config.get_settings().max_loop_iterations
		current = self._bare()
		count = 0

		while True:

			if limit is not None and count >= limit:
				raise cantus.errors.LoopLimitExceeded(
					f"{type(self).__name__}.{where}: loop exceeded {limit} iterations"
				)

			current = self._callback_result(fn(current), where)._bare()
			count += 1

			if not condition(current):
				break

		logger.debug(f"{type(self).__name__}.{where}: loop finished after {count} iterations")

		return current

	def _resumable (self: C, fn: typing.Callable[[C], C]) -> C:

		"""Return a copy that a following ``while_()`` can turn into a do-while loop over ``fn``."""

		def resume (condition: typing.Callable[[C], typing.Any]) -> C:

			if not condition(marked):
				return marked

			return marked._iterate(fn, condition, "do().while_()")._resumable(fn)

		marked = self._with_control(LoopFrame(resume=resume))

		return marked

	def while_ (self: C, condition: typing.Callable[[C], typing.Any]) -> C:

		"""
		Guard the following ``do()`` with a loop condition.

		If the condition holds for this Collection, the next ``do(fn)`` calls
		``fn`` repeatedly, each time on the previous result, until the
		condition fails, and returns the last result. If it does not hold,
		``do(fn)`` returns a copy of this Collection without calling ``fn``.

		Directly following a bare ``do(fn)``, the call instead repeats that
		``fn`` for as long as the condition holds (a do-while loop).

		Example:
			```python
			# returns [4, 5, 6]
			cantus.Collection([1, 2, 3, 4, 5, 6]).while_(lambda s: s.length > 3).do(lambda s: s.drop())
			```
		"""

		cantus.validation.require_function(condition, f"{type(self).__name__}.while_()")

		if isinstance(self._control, LoopFrame) and self._control.resume is not None:
			return self._control.resume(condition)

		me = self.clone()

		if condition(me):

			def body (fn: typing.Callable[[C], C]) -> C:
				return me._iterate(fn, condition, "while_().do()").clone()

		else:

			def body (fn: typing.Callable[[C], C]) -> C:
				return me.clone()

		me = me._with_control(LoopFrame(body=body))

		return me

	def do (self: C, fn: typing.Callable[[C], C]) -> C:

		"""
		Run ``fn`` on this Collection.

		Directly following ``while_()``, this drives the guarded loop.
		Otherwise ``fn`` runs once and its result may be followed by
		``while_()`` to keep repeating ``fn`` while a condition holds.

		Example:
			```python
			# returns [1, 2, 3]
			cantus.Collection([1, 2, 3, 4, 5, 6]).do(lambda s: s.drop_right()).while_(lambda s: s.length > 3)
			```
		"""

		cantus.validation.require_function(fn, f"{type(self).__name__}.do()")

		if isinstance(self._control, LoopFrame) and self._control.body is not None:
			return self._control.body(fn)

		return self._callback_result(fn(self), "do()")._resumable(fn)
