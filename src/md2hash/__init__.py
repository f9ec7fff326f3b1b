"""
Pure-Python MD2 message digest with its pi-derived substitution table.
"""

from .engine import MD2, append_checksum, compress, digest, md2, pad
from .sbox import PI_SUBST, SBoxConstructionError, derive_sbox, pi_digits, sbox
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "MD2",
    "PI_SUBST",
    "SBoxConstructionError",
    "append_checksum",
    "compress",
    "derive_sbox",
    "digest",
    "md2",
    "pad",
    "pi_digits",
    "sbox",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
