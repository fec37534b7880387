import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Generic, Hashable, Mapping, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

@dataclass(frozen=True)
class SettledOutcome(Generic[T]):
    """Outcome of one source call: either a value or the exception it raised"""
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

async def gather_settled(calls: Mapping[K, Callable[[], Awaitable[T]]]) -> Dict[K, SettledOutcome[T]]:
    """Run every named call concurrently and wait for all of them to settle.

    Exceptions raised by a call, including ones raised before it returns
    an awaitable, are captured in its outcome instead of propagating, so
    one failing source never hides the others' results.
    """
    async def settle(call: Callable[[], Awaitable[T]]) -> T:
        return await call()

    names = list(calls)
    results = await asyncio.gather(*(settle(calls[name]) for name in names), return_exceptions=True)

    settled: Dict[K, SettledOutcome[T]] = {}
    for name, result in zip(names, results):
        if isinstance(result, Exception):
            settled[name] = SettledOutcome(error=result)
        elif isinstance(result, BaseException):
            raise result
        else:
            settled[name] = SettledOutcome(value=result)

    return settled
