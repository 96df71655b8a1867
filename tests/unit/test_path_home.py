from strpath.domain.path import Path


def test_tilde_expands_to_home(fake_env):
    env = fake_env(home="/home/alice")
    home = Path("/home/alice")

    assert Path.parse("~", env) == home
    assert Path.parse("~/", env) == home
    assert Path.parse("~///", env) == home
    assert Path.parse("~/foo", env) == home / "foo"
    assert Path.parse("~/foo/../bar", env) == home / "bar"


def test_named_user_lookup(fake_env):
    env = fake_env(users={"bob": "/home/bob"})

    assert Path.parse("~bob", env) == Path("/home/bob")
    assert Path.parse("~bob/src", env) == Path("/home/bob/src")


def test_unknown_user_is_absent(fake_env):
    env = fake_env(users={"bob": "/home/bob"})

    assert Path.parse("~foo", env) is None
    assert Path.parse("~foo/bar", env) is None


def test_unresolvable_home_is_absent(fake_env):
    assert Path.parse("~/x", fake_env(home=None)) is None
    # a relative "home" cannot anchor an absolute path
    assert Path.parse("~/x", fake_env(home="relative/home")) is None


def test_absolute_input_ignores_environment(fake_env):
    env = fake_env(home=None)
    assert Path.parse("/~///", env) == Path.root() / "~"


def test_default_environment_expands_current_user(monkeypatch):
    monkeypatch.setenv("HOME", "/tmp/strpath-home")
    assert Path.parse("~/a") == Path("/tmp/strpath-home/a")
