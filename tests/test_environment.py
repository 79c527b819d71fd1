from mhshell.environment import EnvVar, fetch_path, load_env, parse_environ


def test_parse_environ_splits_key_and_value():
    assert parse_environ(["PATH=/bin:/usr/bin"]) == [EnvVar("PATH", "/bin:/usr/bin")]


def test_parse_environ_keeps_order():
    env = parse_environ(["B=2", "A=1"])
    assert [var.key for var in env] == ["B", "A"]


def test_parse_environ_value_may_hold_equals():
    assert parse_environ(["OPTS=a=b"]) == [EnvVar("OPTS", "a=b")]


def test_parse_environ_empty_value():
    assert parse_environ(["EMPTY="]) == [EnvVar("EMPTY", "")]


def test_load_env_round_trip():
    entries = ["PATH=/bin:/usr/bin", "HOME=/home/user", "OPTS=a=b", "EMPTY="]
    assert load_env(parse_environ(entries)) == entries


def test_fetch_path_splits_directories():
    env = parse_environ(["HOME=/home/user", "PATH=/bin::/usr/bin:"])
    assert fetch_path(env) == ["/bin", "/usr/bin"]


def test_fetch_path_missing():
    assert fetch_path(parse_environ(["HOME=/home/user"])) is None


def test_fetch_path_matches_on_prefix():
    env = [EnvVar("PATHEXT", ".EXE"), EnvVar("PATH", "/bin")]
    assert fetch_path(env) == [".EXE"]


def test_fetch_path_ignores_short_keys():
    env = [EnvVar("PAT", "/nowhere"), EnvVar("PATH", "/bin")]
    assert fetch_path(env) == ["/bin"]