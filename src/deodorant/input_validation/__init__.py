"""Validation of the arguments given to the deodorant API.

`typecheck` applies beartype to the public functions of the package
(`wrap`, `wrap_module`, `wrap_functions`), so that passing a non-callable
implementation or a non-mapping module spec fails at once. Signatures are
annotated as `object`: `parse_signature` validates them and raises
`ValueError`.
"""

from .typechecking import typecheck
