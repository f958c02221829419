"""
Based on https://github.com/Carotti/tagged-union
"""

import typing
import dataclasses


def _member_fields(cls: typing.Type) -> typing.Dict[str, typing.Any]:
    """
    The annotations of `cls` that declare members, i.e. everything but private names and class variables
    """
    
    result: typing.Dict[str, typing.Any] = {}
    
    for name, annotation in cls.__annotations__.items():
        if name.startswith("_"):
            continue
        
        if typing.get_origin(annotation) is typing.ClassVar or annotation is typing.ClassVar:
            continue
        
        if isinstance(annotation, str) and annotation.split("[", 1)[0] in ("ClassVar", "typing.ClassVar"):
            continue
        
        result[name] = annotation
    
    return result


def tagged_union(cls: typing.Type) -> typing.Type:
    """
    Class decorator that creates a tagged union.
    
    Each annotated name becomes a member: a frozen dataclass subclassing the union,
    holding a single `value` of the annotated type, e.g. `Union.Member(value)`.
    """
    
    fields = _member_fields(cls)
    
    if not fields:
        raise TypeError(f"Tagged union {cls.__qualname__} declares no members")
    
    for name, annotation in fields.items():
        member_cls: typing.Type = type(name, (cls,), dict(
            __annotations__=dict(value=annotation),
            __qualname__=f"{cls.__qualname__}.{name}",
            __module__=cls.__module__,
        ))
        
        setattr(cls, name, dataclasses.dataclass(member_cls, frozen=True))
    
    cls.__annotations__ = {k: v for k, v in cls.__annotations__.items() if k not in fields}
    cls._members_ = tuple(fields)
    
    return cls


__all__ = [
    "tagged_union",
]
