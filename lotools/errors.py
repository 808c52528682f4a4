"""Error helpers: validation, assertion-style unwrapping and guarded calls."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class MustError(Exception):
    """Raised by :func:`must` when the given error is set or the flag is false."""


def validate(ok: bool, fmt: str, *args: Any) -> ValueError | None:
    """Return a ValueError built from ``fmt % args`` when ``ok`` is false, else None."""
    if ok:
        return None
    return ValueError(fmt % args if args else fmt)


def _message(args: tuple[Any, ...]) -> str:
    if not args:
        return ""
    if len(args) == 1:
        return str(args[0])
    return str(args[0]) % tuple(args[1:])


def _check(err: Any, args: tuple[Any, ...]) -> None:
    if err is None:
        return
    if isinstance(err, bool):
        if not err:
            raise MustError(_message(args) or "not ok")
        return
    if isinstance(err, BaseException):
        message = _message(args)
        text = f"{message}: {err}" if message else str(err)
        raise MustError(text) from err
    raise TypeError(
        f"must: invalid err type '{type(err).__name__}', "
        "should either be a bool or an error"
    )


def must(value: T, err: Any, *args: Any) -> T:
    """Return ``value`` unless ``err`` is an exception or False.

    ``err`` may be None, a bool or an exception instance; any other type
    raises TypeError. Optional ``args`` give a message, formatted with ``%``
    when more than one is given. Failures raise :class:`MustError`.
    """
    _check(err, args)
    return value


def must0(err: Any, *args: Any) -> None:
    """Like :func:`must` without a value to return."""
    _check(err, args)


def try_(callback: Callable[[], Any]) -> bool:
    """Call ``callback`` and return False if it raised, True otherwise."""
    try:
        callback()
    except Exception:
        return False
    return True


def try_or(callback: Callable[[], Any], *args: Any) -> tuple[Any, ...]:
    """Call ``callback`` and return its result(s) followed by a success flag.

    With one fallback the result is ``(value, ok)``. With several, the
    callback returns a tuple of as many values and the result is
    ``(*values, ok)``. When the callback raises, the fallbacks are returned
    with ``ok`` False.
    """
    if not args:
        raise TypeError("try_or requires at least one fallback value")
    try:
        result = callback()
    except Exception:
        return (*args, False)
    if len(args) == 1:
        return result, True
    values = tuple(result)
    if len(values) != len(args):
        raise ValueError(
            f"try_or: callback returned {len(values)} values, expected {len(args)}"
        )
    return (*values, True)


def try_with_error_value(callback: Callable[[], Any]) -> tuple[Exception | None, bool]:
    """Call ``callback``; return ``(exception, False)`` if it raised, else ``(None, True)``."""
    try:
        callback()
    except Exception as exc:
        return exc, False
    return None, True


def try_catch(callback: Callable[[], Any], catch: Callable[[], Any]) -> None:
    """Call ``callback`` and call ``catch`` if it raised."""
    if not try_(callback):
        catch()


def try_catch_with_error_value(
    callback: Callable[[], Any], catch: Callable[[Exception], Any]
) -> None:
    """Call ``callback`` and pass the raised exception to ``catch``."""
    error, ok = try_with_error_value(callback)
    if not ok:
        catch(error)  # type: ignore[arg-type]


def errors_as(err: BaseException | None, error_type: type[E]) -> tuple[E | None, bool]:
    """Find the first exception of ``error_type`` in the cause/context chain of ``err``."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, error_type):
            return current, True
        seen.add(id(current))
        current = current.__cause__ if current.__cause__ is not None else current.__context__
    return None, False