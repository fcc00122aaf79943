"""
Structural descriptors: which members a class declares and how they are described.

Descriptions are attached with :class:`Description`, either as ``Annotated``
metadata on a member or as a class decorator::

    @Description("A person known to the system")
    @dataclass
    class Person:
        name: Annotated[str, Description("Full name")]
        age: int

Pydantic ``Field(description=...)`` is picked up for model fields that carry
no :class:`Description`.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    ForwardRef,
    List,
    NamedTuple,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from pydantic import BaseModel

from ..observability.logging import SchemaLogger

logger = SchemaLogger("derivation")

_TYPE_DESCRIPTION_ATTR = "__schema_description__"
_NONE_TYPE = type(None)


class Description:
    """Description segments for a member or a type; segments are joined with a space."""

    __slots__ = ("segments",)

    def __init__(self, *segments: str):
        self.segments: Tuple[str, ...] = tuple(segments)

    @property
    def text(self) -> str:
        return " ".join(self.segments)

    def __call__(self, cls: type) -> type:
        setattr(cls, _TYPE_DESCRIPTION_ATTR, self)
        return cls

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Description) and other.segments == self.segments

    def __hash__(self) -> int:
        return hash(self.segments)

    def __repr__(self) -> str:
        return f"Description{self.segments!r}"


class MemberDescriptor(NamedTuple):
    """One retained member of a class."""
    name: str
    cls: Any
    generic_type: Any
    description: Optional[str]


def description_from(source: Optional[Description]) -> Optional[str]:
    if source is None:
        return None
    return source.text


def type_description(cls: Any) -> Optional[str]:
    """Description declared on ``cls`` itself (not inherited)."""
    own = getattr(cls, "__dict__", {})
    return description_from(own.get(_TYPE_DESCRIPTION_ATTR))


def split_annotation(annotation: Any) -> Tuple[Any, Any, Optional[Description]]:
    """Split an annotation into ``(cls, generic_type, description)``.

    ``Annotated`` wrappers are peeled off (the first :class:`Description` found
    wins) and ``Optional[T]`` is reduced to ``T``. Other unions are returned
    unchanged and classify as unknown.
    """
    found: Optional[Description] = None
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            args = get_args(annotation)
            annotation = args[0]
            if found is None:
                found = next((m for m in args[1:] if isinstance(m, Description)), None)
            continue
        if _is_union(origin):
            non_none = [arg for arg in get_args(annotation) if arg is not _NONE_TYPE]
            if len(non_none) == 1 and len(non_none) < len(get_args(annotation)):
                annotation = non_none[0]
                continue
        break

    return (origin or annotation), annotation, found


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def _is_static(annotation: Any) -> bool:
    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return True
    if get_origin(annotation) is Annotated:
        return _is_static(get_args(annotation)[0])
    return False


def _is_synthetic(name: str, annotation: Any) -> bool:
    if name.startswith("_"):
        return True
    return isinstance(annotation, dataclasses.InitVar) or annotation is dataclasses.InitVar


def _pydantic_description(cls: Any, name: str) -> Optional[str]:
    if inspect.isclass(cls) and issubclass(cls, BaseModel):
        field = cls.model_fields.get(name)
        if field is not None:
            return field.description
    return None


def _own_type_hints(cls: type) -> Dict[str, Any]:
    """Resolve the annotations declared on ``cls`` only, forward references included.

    Each annotation is resolved through a stand-in class carrying only that
    annotation, so base-class annotations never get evaluated. Names that
    cannot be resolved (e.g. classes local to a function) are kept as
    ``ForwardRef``s, which the engine treats as unknown types.
    """
    localns = dict(vars(cls))
    hints: Dict[str, Any] = {}
    for name, annotation in inspect.get_annotations(cls).items():
        stand_in = type(cls.__name__, (), {"__annotations__": {name: annotation}, "__module__": cls.__module__})
        try:
            hints[name] = get_type_hints(stand_in, localns=localns, include_extras=True)[name]
        except NameError as e:
            logger.warning(
                "Unresolved member annotation", type_name=cls.__qualname__, member=name, error_msg=e
            )
            hints[name] = ForwardRef(annotation) if isinstance(annotation, str) else annotation
    return hints


def describe_members(cls: Any) -> List[MemberDescriptor]:
    """Own annotated members of ``cls`` in declaration order.

    Static (``ClassVar``) members, private/synthetic names and ``InitVar``
    pseudo-fields are skipped. Inherited members are not included.
    """
    if not inspect.isclass(cls):
        return []

    members: List[MemberDescriptor] = []
    for name, annotation in _own_type_hints(cls).items():
        if _is_static(annotation) or _is_synthetic(name, annotation):
            continue
        member_cls, generic_type, marker = split_annotation(annotation)
        description = description_from(marker)
        if description is None:
            description = _pydantic_description(cls, name)
        members.append(MemberDescriptor(name, member_cls, generic_type, description))
    return members
