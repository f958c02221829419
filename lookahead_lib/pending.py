import typing
import collections.abc

from .tagged_union import *
from .producers import *


@tagged_union
class PendingItem:
    """
    An entry of a stream that has not been realized yet.
    
    `Literal` entries hold a value that is emitted as is, `Source` entries hold
    a producer that is asked for values until it returns `None`.
    Wrap a value in `Literal` explicitly to keep a callable from being called.
    """
    
    Literal: typing.Any
    Source: Producer
    
    @property
    def is_source(self) -> bool:
        return isinstance(self, PendingItem.Source)


Literal = PendingItem.Literal
Source = PendingItem.Source


def classify(item: typing.Any) -> typing.Optional[PendingItem]:
    """
    Decides once and for all how `item` is going to be expanded.
    
    Iterators (generators included) are adapted into producers; plain iterables,
    such as lists or strings, are treated as single values.
    
    Returns `None` for items that carry nothing: `None` itself, or an entry wrapping `None`.
    """
    
    if isinstance(item, PendingItem):
        return item if item.value is not None else None
    
    if item is None:
        return None
    
    if is_producer(item):
        return Source(item)
    
    if isinstance(item, collections.abc.Iterator):
        return Source(producer_from(item))
    
    return Literal(item)


__all__ = [
    "PendingItem",
    "Literal",
    "Source",
    "classify",
]
