"""Runtime type checking of the deodorant API itself."""

from beartype import beartype


def typecheck(func):
    """Decorator checking the annotated argument and return types of `func`.

    It is used on the public functions of deodorant, so that misuse of the
    package (e.g. wrapping something that is not callable) is reported when
    the function is called rather than later, on the first checked call.
    Violations are raised as `deodorant.errors.InputTypeError`.
    """
    return beartype(func)
