"""This modules contains global variables for the deodorant package"""

import os
from warnings import warn

# The signature of a function `foo` in a module spec is stored under the key
# `foo` + marker. The marker can be changed using the
# DEODORANT_SIGNATURE_MARKER environment variable (before importing deodorant).
default_signature_marker = "_"
signature_marker = os.environ.get(
    "DEODORANT_SIGNATURE_MARKER", default_signature_marker
)

if len(signature_marker) != 1:
    warn(
        f"Invalid signature marker {signature_marker!r}. The marker must be"
        + f" a single character. Using {default_signature_marker!r} as"
        + " default.",
        stacklevel=1,
    )
    signature_marker = default_signature_marker

#

try:
    import torch  # noqa: F401

    torch_available = True

except ImportError:
    torch_available = False
