"""Deodorant: runtime type checking for plain Python functions."""

from .checking import *
from .errors import (
    CodeSmellError,
    IncorrectArgumentCountError,
    IncorrectArgumentTypeError,
    IncorrectReturnTypeError,
    InputTypeError,
    NaNDetectedError,
    UndefinedArgumentError,
    UnknownTypeError,
    ViolationKind,
)
from .globals import signature_marker, torch_available
from .input_validation import *
from .types import *

__version__ = "0.1.0"

__all__ = [
    "CheckedFunction",
    "CodeSmellError",
    "IncorrectArgumentCountError",
    "IncorrectArgumentTypeError",
    "IncorrectReturnTypeError",
    "InputTypeError",
    "NaNDetectedError",
    "TypeTag",
    "Undefined",
    "UndefinedArgumentError",
    "UnknownTypeError",
    "ViolationKind",
    "checking",
    "classify",
    "errors",
    "input_validation",
    "parse_signature",
    "typecheck",
    "typed",
    "types",
    "wrap",
    "wrap_functions",
    "wrap_module",
]
