from __future__ import annotations
import typing
import weakref
import operator
from collections import deque

from .errors import *
from .pending import *
from .producers import *
from .utils import debug


T = typing.TypeVar("T")
R = typing.TypeVar("R")


class LookaheadStream(typing.Generic[T]):
    """
    A stream over values and producers that supports looking ahead any amount and pushing items back.
    
    Items given to the constructor or to `unget` are either plain values, which are emitted as is,
    or producers (zero-argument callables returning `None` at the end), which are asked for values
    lazily. A producer may itself return another producer, which is expanded in its place first.
    
    `None` always marks the end of input, so it can't be a value of the stream.
    
    A stream is a producer too, so it can be nested inside another stream.
    """
    
    _realized: typing.Final[typing.Deque[T]]
    _pending: typing.Final[typing.Deque[PendingItem]]
    _pos: int
    
    def __init__(self, *items: T | Producer[T] | PendingItem | None):
        self._realized = deque()
        self._pending = deque()
        self._pos = 0
        
        self.unget(*items)
    
    @property
    def proxy(self) -> LookaheadStream[T]:
        """
        A weak reference to this stream, for producers that need to unget into the stream that reads them.
        
        Unlike a closure over the stream itself, it doesn't keep the stream alive.
        """
        
        return weakref.proxy(self)
    
    def peek(self, n: int = 0) -> T | None:
        """
        Returns the n-th upcoming value without consuming anything, or `None` if the stream ends before it.
        """
        
        if isinstance(n, bool):
            raise InvalidArgument(f"Peek index must be an integer, got {n!r}")
        
        try:
            n = operator.index(n)
        except TypeError:
            raise InvalidArgument(f"Peek index must be an integer, got {n!r}") from None
        
        if n < 0:
            raise InvalidArgument(f"Negative peek index {n}")
        
        while len(self._realized) <= n:
            if not self._pending:
                return None
            
            item: PendingItem = self._pending[0]
            
            if not item.is_source:
                self._pending.popleft()
                self._realized.append(item.value)
                continue
            
            debug("lookahead: calling", item.value)
            value = item.value()
            
            # The producer may have ungotten something in front of itself meanwhile
            index: int | None = self._find_pending(item)
            
            if value is None:
                debug("lookahead: exhausted", item.value)
                
                if index is not None:
                    del self._pending[index]
                
                continue
            
            entry: PendingItem | None = classify(value)
            
            if entry is None:
                # Nothing to emit, the producer is simply asked again
                continue
            
            if index is None:
                # The entry was consumed by a reentrant read; emit the value right away
                index = 0
            
            self._pending.insert(index, entry)
        
        return self._realized[n]
    
    def _find_pending(self, item: PendingItem) -> int | None:
        for i, other in enumerate(self._pending):
            if other is item:
                return i
        
        return None
    
    def next(self) -> T | None:
        """
        Removes and returns the upcoming value, or returns `None` if the stream is over.
        """
        
        if self.peek() is None:
            return None
        
        self._pos += 1
        return self._realized.popleft()
    
    def unget(self, *items: T | Producer[T] | PendingItem | None) -> None:
        """
        Pushes items back to the front of the stream, to be produced before anything else, in the given order.
        
        Can be called from within a producer being read by this very stream: the ungotten items
        are produced right before the value the producer is about to return.
        """
        
        entries: typing.List[PendingItem] = [
            entry for entry in map(classify, items) if entry is not None
        ]
        
        first_source: int = next(
            (i for i, entry in enumerate(entries) if entry.is_source),
            len(entries)
        )
        
        if first_source < len(entries):
            # Everything from the first producer on goes through the pending list,
            # including the values realized so far, which must stay behind the new items
            tail: typing.List[PendingItem] = entries[first_source:]
            tail.extend(Literal(value) for value in self._realized)
            
            self._realized.clear()
            self._pending.extendleft(reversed(tail))
        
        self._realized.extendleft(reversed([entry.value for entry in entries[:first_source]]))
        
        debug("lookahead: unget", len(entries), "item(s) ->", self)
    
    def skip(self, cnt: int) -> int:
        """
        Consumes up to `cnt` values. Returns how many were actually there.
        """
        
        if cnt < 0:
            raise InvalidArgument(f"Negative skip count {cnt}")
        
        for i in range(cnt):
            if self.next() is None:
                return i
        
        return cnt
    
    def is_over(self) -> bool:
        return self.peek() is None
    
    def tell(self) -> int:
        """
        The number of values consumed so far
        """
        
        return self._pos
    
    def filter(self, func: typing.Callable[[T], R | Producer[R] | None]) -> LookaheadStream[R]:
        """
        Returns a new stream of `func(value)` for every value of this one.
        
        Values for which `func` returns `None` are dropped; if it returns a producer,
        that producer's values are produced instead.
        
        The new stream reads this one lazily, so both shouldn't be consumed at the same time.
        """
        
        if not callable(func):
            raise InvalidArgument(f"Filter function must be callable, got {func!r}")
        
        def produce() -> R | Producer[R] | None:
            while True:
                value = self.next()
                
                if value is None:
                    return None
                
                result = func(value)
                
                if result is not None:
                    return result
        
        return LookaheadStream(produce)
    
    def __call__(self) -> T | None:
        return self.next()
    
    def __iter__(self) -> LookaheadStream[T]:
        return self
    
    def __next__(self) -> T:
        value = self.next()
        
        if value is None:
            raise StopIteration()
        
        return value
    
    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {len(self._realized)} realized, {len(self._pending)} pending>"


__all__ = [
    "LookaheadStream",
]
