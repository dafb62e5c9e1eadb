"""Type tags, the `Undefined` sentinel and the runtime type classifier."""

from collections.abc import Sequence as SequenceABC
from decimal import Decimal
from enum import Enum
from numbers import Number

import numpy as np
from beartype.typing import Sequence, Union

from .errors import UnknownTypeError
from .globals import torch_available

if torch_available:
    import torch

    array_types = (np.ndarray, torch.Tensor)
else:
    array_types = (np.ndarray,)

__all__ = [
    "Signature",
    "SignatureLike",
    "TagLike",
    "TypeTag",
    "Undefined",
    "UndefinedType",
    "classify",
    "parse_signature",
]


class TypeTag(str, Enum):
    """Coarse runtime type of a value.

    The classifier returns one of the eight concrete tags. `VOID` is a
    wildcard that only appears in signatures: as an argument tag it accepts
    any value, as a return tag it accepts any value except NaN.
    """

    NULL = "Null"
    NAN = "NaN"
    ARRAY = "Array"
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    FUNCTION = "Function"
    OBJECT = "Object"
    VOID = "Void"

    def __str__(self):
        return self.value

    def __format__(self, format_spec):
        return format(self.value, format_spec)


class UndefinedType:
    """Type of the `Undefined` sentinel.

    `Undefined` marks a missing value, as opposed to `None` which is a value
    deliberately set to nothing. Both are classified as `TypeTag.NULL`, but
    checked functions refuse `Undefined` as an argument whatever the
    signature.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Undefined"

    def __bool__(self):
        return False

    def __reduce__(self):
        return "Undefined"


Undefined = UndefinedType()

# Type aliases
TagLike = Union[TypeTag, str]
Signature = tuple[TypeTag, ...]
SignatureLike = Sequence[TagLike]


def _is_nan(value) -> bool:
    if isinstance(value, Decimal):
        # Comparing a signaling NaN raises InvalidOperation
        return value.is_nan()
    return value != value  # noqa: PLR0124


def classify(value) -> TypeTag:
    """Return the coarse type tag of a value.

    The tests are performed in a fixed order, as the categories overlap:
    NaN is a number, booleans are integers and every value is an object.

    Parameters
    ----------
    value
        any Python value

    Returns
    -------
    TypeTag
        one of the eight concrete tags, never `TypeTag.VOID`

    Raises
    ------
    UnknownTypeError
        if the value cannot be classified

    Examples
    --------
    >>> classify(float("nan"))
    <TypeTag.NAN: 'NaN'>
    >>> classify([1, 2, 3])
    <TypeTag.ARRAY: 'Array'>
    >>> classify(True)
    <TypeTag.BOOLEAN: 'Boolean'>
    """
    if value is None or value is Undefined:
        return TypeTag.NULL

    # Only numbers are compared to themselves: arrays compare element-wise
    if isinstance(value, Number) and _is_nan(value):
        return TypeTag.NAN

    if isinstance(value, array_types) or (
        isinstance(value, SequenceABC) and not isinstance(value, str)
    ):
        return TypeTag.ARRAY

    # bool is a subclass of int, it must be tested before Number
    if isinstance(value, (bool, np.bool_)):
        return TypeTag.BOOLEAN
    if isinstance(value, Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if callable(value):
        return TypeTag.FUNCTION
    if isinstance(value, object):
        return TypeTag.OBJECT

    raise UnknownTypeError(value)


def parse_signature(signature: SignatureLike) -> Signature:
    """Convert a sequence of tag identifiers into a signature.

    Parameters
    ----------
    signature
        the argument tags followed by the return tag, given as `TypeTag`
        members or as their identifiers (e.g. ``["Number", "String"]``)

    Returns
    -------
    Signature
        the tuple of tags

    Raises
    ------
    ValueError
        if the signature is not a sequence (or is a string), is empty or
        contains an unknown tag
    """
    if isinstance(signature, (str, bytes)) or not isinstance(
        signature, SequenceABC
    ):
        msg = (
            "A signature must be a sequence of tags, not"
            + f" {type(signature).__name__}: {signature!r}"
        )
        raise ValueError(msg)

    tags = []
    for position, tag in enumerate(signature):
        try:
            tags.append(TypeTag(tag))
        except ValueError:
            admissible = [t.value for t in TypeTag]
            msg = (
                f"Unknown tag {tag!r} at position {position} of the signature."
                + f" Possible values are {admissible}"
            )
            raise ValueError(msg) from None

    if not tags:
        msg = "A signature must contain at least the return tag"
        raise ValueError(msg)

    return tuple(tags)
