"""Utils for the tests."""

from fractions import Fraction

import numpy as np
from hypothesis import strategies as st

import deodorant as deo

concrete_tags = {tag for tag in deo.TypeTag if tag is not deo.TypeTag.VOID}

scalars = (
    st.none()
    | st.just(deo.Undefined)
    | st.booleans()
    | st.integers()
    | st.floats()
    | st.complex_numbers()
    | st.decimals()
    | st.fractions()
    | st.text()
    | st.binary()
)

# Any value a checked function may receive: scalars, containers of scalars,
# callables, numpy arrays and plain objects
any_value = st.recursive(
    scalars,
    lambda children: st.lists(children, max_size=3)
    | st.tuples(children, children)
    | st.dictionaries(st.text(max_size=3), children, max_size=3),
    max_leaves=5,
) | st.sampled_from(
    [
        len,
        lambda x: x,
        object(),
        object,
        set(),
        Fraction(1, 3),
        np.float64("nan"),
        np.arange(3),
        np.int32(7),
        np.bool_(True),
    ]
)


def identity(x):
    """Return its argument."""
    return x


class CallRecorder:
    """A function recording its calls."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result
