"""
Scoped "current generator" for code that does not pass one explicitly.

There is no process-wide default generator. A generator becomes current
only inside an explicit scope, and the scope is tracked with a context
variable, so every thread and every asyncio task that opens its own scope
sees its own generator:

    with generator_scope(seed=1337):
        if P100():
            ...

    rng = Xoshiro256StarStar(7)
    with use_generator(rng):
        one_in_10()
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

from oddkit.generator import Xoshiro256StarStar

logger = logging.getLogger(__name__)

_current: contextvars.ContextVar[Xoshiro256StarStar | None] = contextvars.ContextVar(
    "oddkit_generator", default=None
)


class NoGeneratorError(LookupError):
    """Raised when a generator is needed but no scope is active."""

    pass


def current_generator() -> Xoshiro256StarStar:
    """
    Return the generator of the innermost active scope.

    Raises:
        NoGeneratorError: If called outside use_generator()/generator_scope().
    """
    rng = _current.get()
    if rng is None:
        raise NoGeneratorError(
            "No active generator. Pass one explicitly or open a scope with "
            "oddkit.generator_scope() or oddkit.use_generator()."
        )
    return rng


@contextmanager
def use_generator(rng: Xoshiro256StarStar) -> Iterator[Xoshiro256StarStar]:
    """
    Make *rng* the current generator for the enclosed block.

    The previous generator (if any) is restored on exit, even on error.
    """
    token = _current.set(rng)
    try:
        yield rng
    finally:
        _current.reset(token)


@contextmanager
def generator_scope(seed: int | None = None) -> Iterator[Xoshiro256StarStar]:
    """
    Create a fresh generator and make it current for the enclosed block.

    Args:
        seed: Seed for the new generator; None seeds from platform entropy.

    Yields:
        The new generator.
    """
    rng = Xoshiro256StarStar(seed)
    logger.debug(
        "Opening generator scope (%s)",
        "entropy-seeded" if seed is None else f"seed={seed}",
    )
    with use_generator(rng):
        yield rng


def reseed_current(seed: int) -> None:
    """
    Re-seed the current generator in place.

    Raises:
        NoGeneratorError: If no scope is active.
    """
    current_generator().seed(seed)
