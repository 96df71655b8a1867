import json

import pytest

from strpath.domain.errors import DecodingError
from strpath.domain.path import Path
from strpath.services.codec import PathCodec


ROOT = Path.root()


def test_absolute_encoding_by_default():
    codec = PathCodec()
    paths = [ROOT / "foo", ROOT / "foo/bar", ROOT]
    assert json.loads(codec.dumps(paths)) == ["/foo", "/foo/bar", "/"]
    assert codec.loads(codec.dumps(paths)) == paths


def test_relative_encoding():
    base = ROOT / "foo"
    codec = PathCodec(relative_to=base)
    data = codec.dumps([ROOT, base, base / "bar"])

    assert json.loads(data) == ["..", "", "bar"]
    assert codec.loads(data) == [ROOT, base, base / "bar"]


def test_relative_strings_need_a_root():
    data = PathCodec(relative_to=ROOT / "foo").dumps([ROOT / "foo/bar"])
    with pytest.raises(DecodingError):
        PathCodec().loads(data)


def test_decoding_against_a_different_root_relocates():
    home = Path("/home/alice")
    docs = home / "Documents"
    data = PathCodec(relative_to=home).dumps([home / "foo"])
    assert PathCodec(relative_to=docs).loads(data) == [docs / "foo"]


def test_absolute_values_are_normalized_on_decode():
    assert PathCodec().decode("/a//b/../c/") == Path("/a/c")


def test_malformed_input():
    codec = PathCodec(relative_to=ROOT)
    with pytest.raises(DecodingError):
        codec.loads("{not json")
    with pytest.raises(DecodingError):
        codec.loads('{"a": "/b"}')
    with pytest.raises(DecodingError):
        codec.loads("[1, 2]")
