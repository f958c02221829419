from __future__ import annotations
import typing
import inspect
import collections.abc


T = typing.TypeVar("T")


class Producer(typing.Protocol[T]):
    """
    A zero-argument callable that returns the next item on each call,
    and `None` once it is exhausted. It must not be called again after that.
    """
    
    def __call__(self) -> T | None:
        ...


def _accepts_no_args(func: typing.Callable) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins without introspection data; give them the benefit of the doubt
        return True
    
    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        
        if param.default is param.empty:
            return False
    
    return True


def is_producer(value: typing.Any) -> bool:
    """
    Checks whether `value` can be used as a producer: a callable that can be invoked with no arguments.
    
    Classes are never considered producers, even though calling them is possible.
    """
    
    if isinstance(value, type) or not callable(value):
        return False
    
    return _accepts_no_args(value)


def producer_from(source: typing.Iterable[T] | Producer[T]) -> Producer[T]:
    """
    Turns anything iterable into a producer. Producers are returned as is.
    
    Note that `None` items of the iterable would be indistinguishable from the end of input,
    so iteration effectively stops at the first one.
    """
    
    if is_producer(source):
        return source
    
    if not isinstance(source, collections.abc.Iterable):
        raise TypeError(f"Cannot make a producer out of {type(source).__name__!r}")
    
    iterator: typing.Iterator[T] = iter(source)
    exhausted: bool = False
    
    def produce() -> T | None:
        nonlocal exhausted
        
        if exhausted:
            return None
        
        value = next(iterator, None)
        
        if value is None:
            exhausted = True
        
        return value
    
    return produce


def counter(start: int, stop: int) -> Producer[int]:
    """
    A producer of the integers in `[start, stop)`
    """
    
    current: int = start
    
    def produce() -> int | None:
        nonlocal current
        
        if current >= stop:
            return None
        
        current += 1
        return current - 1
    
    return produce


__all__ = [
    "Producer",
    "is_producer",
    "producer_from",
    "counter",
]
