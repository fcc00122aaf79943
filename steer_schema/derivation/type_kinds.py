"""Kind classification of runtime classes.

Each predicate answers for a class (never an annotation); callers split
annotations with ``typing.get_origin`` first. Enum subclasses of ``str`` or
``int`` are deliberately not string/integer-like so they reach the enum branch.
"""

import collections
import collections.abc
import datetime
import decimal
import inspect
import pathlib
import uuid
from enum import Enum
from typing import Any, Optional, Tuple, get_args

STRING_TYPES: Tuple[type, ...] = (
    str,
    uuid.UUID,
    datetime.date,
    datetime.datetime,
    datetime.time,
    pathlib.PurePath,
)

NUMBER_TYPES: Tuple[type, ...] = (float, decimal.Decimal)

COLLECTION_TYPES: Tuple[type, ...] = (
    list,
    set,
    frozenset,
    collections.deque,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

MAPPING_TYPES: Tuple[type, ...] = (
    dict,
    collections.OrderedDict,
    collections.defaultdict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)


def _is_class(cls: Any) -> bool:
    return inspect.isclass(cls)


def is_json_string(cls: Any) -> bool:
    if not _is_class(cls) or issubclass(cls, Enum):
        return False
    return issubclass(cls, STRING_TYPES)


def is_json_integer(cls: Any) -> bool:
    if not _is_class(cls) or issubclass(cls, (Enum, bool)):
        return False
    return issubclass(cls, int)


def is_json_number(cls: Any) -> bool:
    return _is_class(cls) and issubclass(cls, NUMBER_TYPES)


def is_json_boolean(cls: Any) -> bool:
    return _is_class(cls) and issubclass(cls, bool)


def is_enum(cls: Any) -> bool:
    return _is_class(cls) and issubclass(cls, Enum)


def is_fixed_array(cls: Any) -> bool:
    return cls is tuple


def is_collection(cls: Any) -> bool:
    return cls in COLLECTION_TYPES


def is_mapping(cls: Any) -> bool:
    return cls in MAPPING_TYPES


def single_type_argument(generic_type: Any) -> Optional[Any]:
    """Return the only type argument of ``generic_type``, or None."""
    args = get_args(generic_type)
    if len(args) == 1:
        return args[0]
    return None


def homogeneous_tuple_element(generic_type: Any) -> Optional[Any]:
    """Element annotation of ``Tuple[T, ...]`` or ``Tuple[T, T, ...]``, else None."""
    args = get_args(generic_type)
    if len(args) == 2 and args[1] is Ellipsis:
        return args[0]
    if args and all(arg == args[0] for arg in args):
        return args[0]
    return None
