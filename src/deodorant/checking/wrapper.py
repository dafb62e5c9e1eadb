"""Checked functions.

A checked function wraps an implementation and enforces a signature around
each call. The checks are performed in the following order, and the first
violation is raised:

1. the number of arguments,
2. the tag of each argument (``Void`` accepts any tag),
3. no argument is NaN, whatever its declared tag,
4. no argument is `Undefined`, whatever its declared tag,
5. the implementation is called,
6. the tag of the result matches the return tag (if the return tag is
   ``Void``, the result can be anything but NaN).
"""

import logging
from types import MethodType

from beartype.typing import Callable, Optional

from ..errors import (
    IncorrectArgumentCountError,
    IncorrectArgumentTypeError,
    IncorrectReturnTypeError,
    NaNDetectedError,
    UndefinedArgumentError,
)
from ..input_validation import typecheck
from ..types import (
    Signature,
    TagLike,
    TypeTag,
    Undefined,
    classify,
    parse_signature,
)

logger = logging.getLogger(__name__)

anonymous_name = "anonymous"

# Metadata copied from the implementation, as functools.wraps does
wrapper_assignments = (
    "__module__",
    "__name__",
    "__qualname__",
    "__doc__",
)


def default_name(implementation) -> str:
    """Display name of an implementation: its name, or "anonymous"."""
    name = getattr(implementation, "__name__", None)
    if not name or name == "<lambda>":
        return anonymous_name
    return name


class CheckedFunction:
    """A function whose calls are checked against a signature.

    Checked functions are immutable: the signature, the implementation and
    the display name are fixed at creation. They are created with `wrap`,
    `typed` or `wrap_module`, not directly.

    Parameters
    ----------
    signature
        the parsed signature, the last tag is the return tag
    implementation
        the function called once the arguments are checked
    name
        the name used in error messages
    """

    def __init__(
        self, signature: Signature, implementation: Callable, name: str
    ) -> None:
        object.__setattr__(self, "signature", signature)
        object.__setattr__(self, "implementation", implementation)
        object.__setattr__(self, "name", name)

        for attribute in wrapper_assignments:
            try:
                value = getattr(implementation, attribute)
            except AttributeError:
                continue
            object.__setattr__(self, attribute, value)
        object.__setattr__(self, "__wrapped__", implementation)

    def __setattr__(self, name, value):
        msg = f"Checked function {self.name!r} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name):
        msg = f"Checked function {self.name!r} is immutable"
        raise AttributeError(msg)

    @property
    def argument_tags(self) -> Signature:
        return self.signature[:-1]

    @property
    def return_tag(self) -> TypeTag:
        return self.signature[-1]

    @property
    def arity(self) -> int:
        return len(self.signature) - 1

    def __call__(self, *args, **kwargs):
        """Check the arguments, call the implementation and check the result.

        Raises
        ------
        IncorrectArgumentCountError
            if the number of arguments is not the arity of the signature
        IncorrectArgumentTypeError
            if an argument does not match its tag
        NaNDetectedError
            if an argument, or the result, is NaN
        UndefinedArgumentError
            if an argument is `Undefined`
        IncorrectReturnTypeError
            if the result does not match the return tag
        """
        argument_tags = self.argument_tags

        # Keyword arguments are not part of a signature
        n_args = len(args) + len(kwargs)
        if kwargs or n_args != len(argument_tags):
            raise IncorrectArgumentCountError(
                expected=len(argument_tags),
                actual=n_args,
                function_name=self.name,
            )

        for position, (arg, expected) in enumerate(zip(args, argument_tags)):
            actual = classify(arg)
            if expected is not TypeTag.VOID and actual is not expected:
                raise IncorrectArgumentTypeError(
                    self.name, position, expected, actual
                )

        for position, arg in enumerate(args):
            if classify(arg) is TypeTag.NAN:
                raise NaNDetectedError(
                    self.name, position, argument_tags[position]
                )

        for position, arg in enumerate(args):
            if arg is Undefined:
                raise UndefinedArgumentError(
                    self.name, position, argument_tags[position]
                )

        result = self.implementation(*args)

        return_tag = self.return_tag
        actual = classify(result)
        if return_tag is not TypeTag.VOID:
            if actual is not return_tag:
                raise IncorrectReturnTypeError(self.name, return_tag, actual)
        elif actual is TypeTag.NAN:
            raise NaNDetectedError(self.name, None, return_tag)

        return result

    def __get__(self, instance, owner=None):
        # Bound as a method, the instance is the first checked argument
        if instance is None:
            return self
        return MethodType(self, instance)

    def __repr__(self):
        arguments = ", ".join(str(tag) for tag in self.argument_tags)
        return (
            f"<CheckedFunction {self.name}({arguments}) -> {self.return_tag}>"
        )


@typecheck
def wrap(
    signature: object,
    implementation: Callable,
    name: Optional[str] = None,
) -> CheckedFunction:
    """Wrap a function with the checks of a signature.

    Parameters
    ----------
    signature
        the tags of the arguments followed by the return tag, e.g.
        ``["String", "Number", "Boolean"]`` for a function of two arguments
        returning a boolean
    implementation
        the function to check
    name
        the name used in error messages. Defaults to the name of the
        implementation, or "anonymous" if it has none

    Returns
    -------
    CheckedFunction
        the checked function

    Raises
    ------
    ValueError
        if the signature is malformed

    Examples
    --------
    >>> add = wrap(["Number", "Number", "Number"], lambda a, b: a + b)
    >>> add(1, 2)
    3
    >>> add(1, "2")
    IncorrectArgumentTypeError: Function "anonymous" argument 1 called with
    String, expecting Number.
    """
    parsed = parse_signature(signature)
    if name is None:
        name = default_name(implementation)

    logger.debug("Wrapping function %s with signature %s", name, parsed)
    return CheckedFunction(parsed, implementation, name)


def typed(*signature: TagLike, name: Optional[str] = None):
    """Decorator version of `wrap`.

    Examples
    --------
    >>> @typed("Number", "Number")
    >>> def double(x):
    >>>     return 2 * x
    >>> double(2)
    4
    >>> double(None)
    IncorrectArgumentTypeError: Function "double" argument 0 called with
    Null, expecting Number.
    """

    def decorator(implementation):
        return wrap(signature, implementation, name)

    return decorator
