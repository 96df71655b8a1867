from strpath.domain.models import Kind
from strpath.domain.path import Path
from strpath.services.finder import find


ROOT = Path("/r")


def _names(paths):
    return {p.relative(ROOT) for p in paths}


def test_extension_filter_is_a_union(memory_fs):
    fs = memory_fs(files=["/r/foo.json", "/r/bar.txt", "/r/baz.md"])

    assert _names(find(ROOT, fs).extension("json")) == {"foo.json"}
    assert _names(find(ROOT, fs).extension("txt").extension("json")) == {
        "foo.json",
        "bar.txt",
    }
    assert _names(find(ROOT, fs).extension("txt", "md")) == {"bar.txt", "baz.md"}


def test_extension_filter_understands_compound_extensions(memory_fs):
    fs = memory_fs(files=["/r/a.tar.gz", "/r/b.gz", "/r/c.tar"])

    assert _names(find(ROOT, fs).extension("tar.gz")) == {"a.tar.gz"}
    assert _names(find(ROOT, fs).extension("gz")) == {"b.gz"}


def test_extension_filter_applies_to_directories(memory_fs):
    fs = memory_fs(dirs=["/r/pkg.d"], files=["/r/pkg.d/x.conf", "/r/other/y.d"])

    # pkg.d matches and is still descended into; other/ does not match
    # but its child y.d does
    assert _names(find(ROOT, fs).extension("d")) == {"pkg.d", "other/y.d"}


def test_kind_filter_is_a_union(memory_fs):
    fs = memory_fs(dirs=["/r/foo"], files=["/r/bar"], symlinks=["/r/baz"])

    assert _names(find(ROOT, fs).kind(Kind.FILE)) == {"bar"}
    assert _names(find(ROOT, fs).kind(Kind.DIRECTORY)) == {"foo"}
    assert _names(find(ROOT, fs).kind(Kind.SYMLINK)) == {"baz"}
    assert _names(find(ROOT, fs).kind(Kind.FILE).kind(Kind.DIRECTORY)) == {"foo", "bar"}


def test_kind_and_extension_combine(memory_fs):
    fs = memory_fs(dirs=["/r/logs.json"], files=["/r/a.json", "/r/logs.json/b.json"])

    finder = find(ROOT, fs).kind(Kind.FILE).extension("json")
    assert _names(finder) == {"a.json", "logs.json/b.json"}


def test_symlinks_are_not_descended(memory_fs):
    fs = memory_fs(symlinks=["/r/link"], files=["/r/a"])

    assert _names(find(ROOT, fs)) == {"link", "a"}
    assert "/r/link" not in fs.scandir_calls
