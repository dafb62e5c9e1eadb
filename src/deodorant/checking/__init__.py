"""Checked functions and modules."""

from .module import wrap_functions, wrap_module
from .wrapper import CheckedFunction, typed, wrap
