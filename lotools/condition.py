"""Expression-style conditionals: ternaries, if/else chains and switch/case."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def ternary(condition: bool, if_output: T, else_output: T) -> T:
    """Return ``if_output`` when ``condition`` holds, else ``else_output``."""
    return if_output if condition else else_output


def ternary_f(condition: bool, if_func: Callable[[], T], else_func: Callable[[], T]) -> T:
    """Call and return ``if_func`` or ``else_func`` depending on ``condition``."""
    return if_func() if condition else else_func()


@dataclass
class IfElse(Generic[T]):
    """A chain of conditions; the first one that holds fixes the result."""

    result: T | None = None
    done: bool = False

    def else_if(self, condition: bool, result: T) -> IfElse[T]:
        """Take ``result`` if no earlier branch matched and ``condition`` holds."""
        if not self.done and condition:
            self.result = result
            self.done = True
        return self

    def else_if_f(self, condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
        """Like :meth:`else_if`, computing the result lazily."""
        if not self.done and condition:
            self.result = result_f()
            self.done = True
        return self

    def else_(self, result: T) -> T:
        """Return the matched result, or ``result`` if nothing matched."""
        return self.result if self.done else result  # type: ignore[return-value]

    def else_f(self, result_f: Callable[[], T]) -> T:
        """Return the matched result, or call ``result_f`` if nothing matched."""
        return self.result if self.done else result_f()  # type: ignore[return-value]


def if_(condition: bool, result: T) -> IfElse[T]:
    """Start an if/else chain."""
    return IfElse(result, True) if condition else IfElse()


def if_f(condition: bool, result_f: Callable[[], T]) -> IfElse[T]:
    """Start an if/else chain whose first result is computed lazily."""
    return IfElse(result_f(), True) if condition else IfElse()


@dataclass
class SwitchCase(Generic[R]):
    """A switch on ``predicate``; the first matching case fixes the result."""

    predicate: Any
    result: R | None = None
    done: bool = False

    def case(self, value: Any, result: R) -> SwitchCase[R]:
        """Take ``result`` if no earlier case matched and ``value`` equals the predicate."""
        if not self.done and self.predicate == value:
            self.result = result
            self.done = True
        return self

    def case_f(self, value: Any, callback: Callable[[], R]) -> SwitchCase[R]:
        """Like :meth:`case`, computing the result lazily."""
        if not self.done and self.predicate == value:
            self.result = callback()
            self.done = True
        return self

    def default(self, result: R) -> R:
        """Return the matched result, or ``result`` if no case matched."""
        if not self.done:
            self.result = result
        return self.result  # type: ignore[return-value]

    def default_f(self, callback: Callable[[], R]) -> R:
        """Return the matched result, or call ``callback`` if no case matched."""
        if not self.done:
            self.result = callback()
        return self.result  # type: ignore[return-value]


def switch(predicate: Any) -> SwitchCase[Any]:
    """Start a switch/case chain on ``predicate``."""
    return SwitchCase(predicate)