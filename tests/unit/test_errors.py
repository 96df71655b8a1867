import pytest

import strpath
from strpath.domain.errors import FilesystemError, InvalidPathError, StrpathError


def test_package_exports_only_raised_errors():
    assert not hasattr(strpath, "ConfigurationError")
    for name in ("StrpathError", "InvalidPathError", "FilesystemError", "DecodingError"):
        assert hasattr(strpath, name)


def test_invalid_path_is_also_a_value_error():
    with pytest.raises(ValueError):
        strpath.Path("relative/path")
    assert issubclass(InvalidPathError, StrpathError)
    assert issubclass(FilesystemError, StrpathError)
