import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

import pytest

from md2hash import vectorized

ABC = "da853b0d3f88d99b30283a69e6ded6bb"
EMPTY = "8350e5a3e24c153df2275c9f80692773"


def test_pandas_series_digests_keep_index():
    pd = pytest.importorskip("pandas")
    series = pd.Series([b"abc", b"", None], index=["x", "y", "z"])
    result = vectorized.hash_pandas_series(series)
    assert list(result.index) == ["x", "y", "z"]
    assert result["x"] == ABC
    assert result["y"] == EMPTY
    assert result["z"] is None


def test_pandas_series_text_needs_encoding():
    pd = pytest.importorskip("pandas")
    series = pd.Series(["abc"])
    with pytest.raises(TypeError):
        vectorized.hash_pandas_series(series)
    assert vectorized.hash_pandas_series(series, encoding="utf-8")[0] == ABC


def test_arrow_array_digests():
    pa = pytest.importorskip("pyarrow")
    result = vectorized.hash_arrow_array(pa.array([b"abc", None], type=pa.binary()))
    assert result.type == pa.string()
    assert result.to_pylist() == [ABC, None]


def test_arrow_accepts_plain_values():
    pytest.importorskip("pyarrow")
    result = vectorized.hash_arrow_array(["abc", ""], encoding="ascii")
    assert result.to_pylist() == [ABC, EMPTY]


def test_polars_series_digests():
    pl = pytest.importorskip("polars")
    series = pl.Series("payload", [b"abc", b""])
    result = vectorized.hash_polars_series(series)
    assert result.name == "payload"
    assert result.dtype == pl.Utf8
    assert result.to_list() == [ABC, EMPTY]


def test_polars_text_with_encoding():
    pytest.importorskip("polars")
    result = vectorized.hash_polars_series(["abc"], encoding="utf-8")
    assert result.name == "md2"
    assert result.to_list() == [ABC]
