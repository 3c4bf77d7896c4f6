"""Pluggable skin provider abstraction and lookup error types.

A SkinAPI turns an opaque context value (usually a player UUID) into a
future Skin. Built-in providers live in disguise.providers.builtin; any
coroutine function taking a Context can be wrapped to add a new source.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from disguise.skin import Skin

V = TypeVar("V")
V_co = TypeVar("V_co", covariant=True)


@runtime_checkable
class Context(Protocol[V_co]):
    """Capability exposing one value to a skin provider."""

    def value(self) -> V_co:
        """Return the value the provider should resolve."""
        ...


@dataclass(frozen=True)
class ValueContext(Generic[V]):
    """Context wrapping a bare value."""

    _value: V

    def value(self) -> V:
        return self._value


SkinProvider = Callable[[Context[V]], Awaitable[Skin]]


class SkinAPI(Generic[V]):
    """Named asynchronous skin source.

    Instances are immutable and hold no per-call state, so one instance
    can serve any number of concurrent lookups.

    Attributes:
        name: Provider name used in logs and errors
    """

    def __init__(self, provider: SkinProvider[V], name: str = "custom") -> None:
        """Initialize the skin API.

        Args:
            provider: Coroutine function resolving a context into a Skin
            name: Provider name
        """
        self._provider = provider
        self.name = name

    def __repr__(self) -> str:
        return f"SkinAPI(name={self.name!r})"

    async def resolve(self, context: Context[V]) -> Skin:
        """Resolve a skin for the given context.

        Subclasses may override this instead of supplying a provider.
        """
        return await self._provider(context)

    def of(self, value: V) -> "asyncio.Future[Skin]":
        """Start a lookup for a bare value.

        Must be called while an event loop is running.
        """
        return self.of_context(ValueContext(value))

    def of_context(self, context: Context[V]) -> "asyncio.Future[Skin]":
        """Start a lookup for a context.

        The lookup is scheduled immediately; the returned future completes
        with the resolved Skin or fails with the provider's exception.
        """
        return asyncio.ensure_future(self.resolve(context))


# ============================================================================
# Error Types
# ============================================================================


class SkinLookupError(Exception):
    """A skin lookup against a remote service failed."""

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.url = url
        self.status_code = status_code


class MalformedResponseError(SkinLookupError):
    """The remote service answered with an unexpected payload shape."""

    pass
