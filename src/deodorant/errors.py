"""Custom errors for the deodorant package.

Every violation detected by a checked function is reported by one of the six
exceptions below. They all derive from `CodeSmellError` and carry, besides a
human-readable message, the structured fields of the violation
(`function_name`, `position`, `expected`, `actual`) and its `kind`.
"""

from enum import Enum

from beartype.roar import (
    BeartypeCallHintParamViolation,
    BeartypeCallHintReturnViolation,
)

# Raised when the public functions of deodorant are misused (for example,
# `wrap` called with a non-callable implementation)
InputTypeError = (
    BeartypeCallHintParamViolation,
    BeartypeCallHintReturnViolation,
)


class ViolationKind(Enum):
    """The closed set of violations a checked function can detect."""

    UNKNOWN_TYPE = "unknown_type"
    ARGUMENT_COUNT = "argument_count"
    ARGUMENT_TYPE = "argument_type"
    NAN_DETECTED = "nan_detected"
    UNDEFINED_ARGUMENT = "undefined_argument"
    RETURN_TYPE = "return_type"


class CodeSmellError(Exception):
    """Base class of the errors raised by checked functions.

    Parameters
    ----------
    message
        the human-readable description of the violation
    function_name
        the display name of the checked function, if any
    position
        the index of the offending argument, None if the violation does not
        concern a single argument (or concerns the return value)
    expected
        the expected tag (or count, for arity errors)
    actual
        the observed tag (or count, for arity errors)
    """

    kind = None
    default_message = "Code smell in the code!"

    def __init__(
        self,
        message=None,
        *,
        function_name=None,
        position=None,
        expected=None,
        actual=None,
    ):
        super().__init__(message or self.default_message)
        self.function_name = function_name
        self.position = position
        self.expected = expected
        self.actual = actual

    @property
    def message(self):
        return self.args[0]


class UnknownTypeError(CodeSmellError, TypeError):
    """Raised when a value cannot be classified."""

    kind = ViolationKind.UNKNOWN_TYPE

    def __init__(self, value):
        super().__init__(f"Unknown type for value {value!r}.")
        self.value = value


class IncorrectArgumentCountError(CodeSmellError, TypeError):
    """Raised when a checked function is called with a wrong arity."""

    kind = ViolationKind.ARGUMENT_COUNT

    def __init__(self, expected: int, actual: int, function_name: str):
        super().__init__(
            f'Incorrect number of arguments for function "{function_name}":'
            + f" Expected {expected}, but got {actual}.",
            function_name=function_name,
            expected=expected,
            actual=actual,
        )


class IncorrectArgumentTypeError(CodeSmellError, TypeError):
    """Raised when an argument does not match its declared tag."""

    kind = ViolationKind.ARGUMENT_TYPE

    def __init__(self, function_name, position, expected, actual):
        super().__init__(
            f'Function "{function_name}" argument {position} called with'
            + f" {actual}, expecting {expected}.",
            function_name=function_name,
            position=position,
            expected=expected,
            actual=actual,
        )


class NaNDetectedError(CodeSmellError, ValueError):
    """Raised when NaN is passed to, or returned by, a checked function.

    A `position` of None means that the NaN is the return value.
    """

    kind = ViolationKind.NAN_DETECTED

    def __init__(self, function_name, position, expected):
        if position is None:
            message = (
                "Found a NaN returned from function"
                + f' "{function_name}", expected {expected}.'
            )
        else:
            message = (
                f"Found a NaN argument {position} passed to function"
                + f' "{function_name}", expected {expected}.'
            )
        super().__init__(
            message,
            function_name=function_name,
            position=position,
            expected=expected,
            actual="NaN",
        )


class UndefinedArgumentError(CodeSmellError, ValueError):
    """Raised when `Undefined` is passed to a checked function."""

    kind = ViolationKind.UNDEFINED_ARGUMENT

    def __init__(self, function_name, position, expected):
        super().__init__(
            f"Found an undefined argument {position} passed to function"
            + f' "{function_name}", expected {expected}.',
            function_name=function_name,
            position=position,
            expected=expected,
        )


class IncorrectReturnTypeError(CodeSmellError, TypeError):
    """Raised when the return value does not match the return tag."""

    kind = ViolationKind.RETURN_TYPE

    def __init__(self, function_name, expected, actual):
        super().__init__(
            f'Function "{function_name}" returned {actual}, expected'
            + f" {expected}.",
            function_name=function_name,
            expected=expected,
            actual=actual,
        )
