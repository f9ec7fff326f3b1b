from __future__ import annotations

from typing import Any, Optional

from .engine import digest


def _digest_value(value: Any, encoding: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        if encoding is None:
            raise TypeError("str values need an explicit encoding")
        value = value.encode(encoding)
    return digest(value)


def hash_pandas_series(series: Any, encoding: Optional[str] = None):
    """
    Digest a pandas Series of bytes (or str, given ``encoding``) into hex strings.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = [
        _digest_value(val, encoding)
        if isinstance(val, (bytes, bytearray, memoryview, str)) or not pd.isna(val)
        else None
        for val in series
    ]
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="object")


def hash_arrow_array(array: Any, encoding: Optional[str] = None):
    """
    Digest a pyarrow Array (or values coercible to one) into a string Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = [
        _digest_value(val.as_py() if hasattr(val, "as_py") else val, encoding)
        for val in arr
    ]
    return pa.array(hashes, type=pa.string())


def hash_polars_series(series: Any, encoding: Optional[str] = None):
    """
    Digest a polars Series into a Utf8 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = [_digest_value(val, encoding) for val in ser]
    name = getattr(ser, "name", None) or "md2"
    return pl.Series(name=name, values=hashes, dtype=pl.Utf8)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
