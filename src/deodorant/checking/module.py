"""Checking of whole modules.

A module spec is a flat mapping of names to values. The signature of a
function ``foo`` is stored next to it, under the key ``foo_`` (the marker
suffix is configurable, see `deodorant.globals`):

```python
spec = {
    "scale": lambda x, k: x * k,
    "scale_": ["Number", "Number", "Number"],
    "origin": 0,
}
module = wrap_module(spec)
module["scale"](2, 3)  # 6
module["scale"](2, "3")  # IncorrectArgumentTypeError
```

`wrap_functions` is the explicit alternative: the caller pairs names,
signatures and implementations directly.
"""

import logging

from beartype.typing import Callable, Iterable, Mapping, Optional

from .. import globals as deodorant_globals
from ..input_validation import typecheck
from .wrapper import CheckedFunction, wrap

logger = logging.getLogger(__name__)


@typecheck
def wrap_module(
    spec: Mapping[str, object], marker: Optional[str] = None
) -> dict[str, object]:
    """Wrap the functions of a module spec that have a signature.

    Only the top-level entries are inspected:

    - an entry whose key ends with the marker is a signature, it is consumed
      and does not appear in the result,
    - a callable entry is wrapped with `wrap` if its signature is present,
      and kept as is otherwise,
    - any other entry is kept as is.

    Parameters
    ----------
    spec
        the module spec
    marker
        the suffix of signature keys. Defaults to
        `deodorant.globals.signature_marker`

    Returns
    -------
    dict[str, object]
        the typed module

    Raises
    ------
    ValueError
        if the marker is not a single character, or if a signature is
        malformed
    """
    if marker is None:
        marker = deodorant_globals.signature_marker
    if len(marker) != 1:
        msg = (
            "The signature marker must be a single character,"
            + f" got {marker!r}"
        )
        raise ValueError(msg)

    signatures = {}
    functions = {}
    typed_module = {}

    for key, value in spec.items():
        if key.endswith(marker):
            signatures[key] = value
        elif callable(value):
            functions[key] = value
        else:
            typed_module[key] = value

    for name, function in functions.items():
        signature_key = name + marker
        if signature_key in signatures:
            signature = signatures[signature_key]
            typed_module[name] = wrap(signature, function, name)
        else:
            logger.debug("Function %s has no signature, kept as is", name)
            typed_module[name] = function

    for signature_key in signatures:
        if signature_key[: -len(marker)] not in functions:
            logger.debug(
                "Signature %s does not match any function, ignored",
                signature_key,
            )

    return typed_module


@typecheck
def wrap_functions(
    entries: Iterable[tuple[str, object, Callable]],
) -> dict[str, CheckedFunction]:
    """Wrap explicitly associated names, signatures and implementations.

    Parameters
    ----------
    entries
        (name, signature, implementation) triples

    Returns
    -------
    dict[str, CheckedFunction]
        the checked functions, by name

    Raises
    ------
    ValueError
        if two entries have the same name
    """
    checked = {}
    for name, signature, implementation in entries:
        if name in checked:
            msg = f"Duplicate function name {name!r}"
            raise ValueError(msg)
        checked[name] = wrap(signature, implementation, name)
    return checked
