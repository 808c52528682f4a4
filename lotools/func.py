"""Function helpers."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any


def partial(f: Callable[..., Any], arg1: Any) -> Callable[..., Any]:
    """Return a function that calls ``f`` with ``arg1`` as its first argument."""

    @functools.wraps(f)
    def bound(*args: Any) -> Any:
        return f(arg1, *args)

    return bound