import pytest

from typelisp import config
from typelisp.errors import TypelispConfigError


def test_defaults():
    assert config.get_prompt() == "> "
    assert config.get_max_depth() == 2500
    assert config.get_prelude_paths() == []
    assert config.get_log_level() == "WARNING"
    assert config.get_repl_address() == ("127.0.0.1", 8765)


def test_max_depth_from_env(monkeypatch):
    monkeypatch.setenv("TYPELISP_MAX_DEPTH", "40")
    assert config.get_max_depth() == 40


@pytest.mark.parametrize("raw", ["lots", "0", "-3"])
def test_invalid_max_depth(monkeypatch, raw):
    monkeypatch.setenv("TYPELISP_MAX_DEPTH", raw)
    with pytest.raises(TypelispConfigError):
        config.get_max_depth()


def test_prelude_paths_expand_directories(monkeypatch, tmp_path):
    (tmp_path / "b.lisp").write_text("")
    (tmp_path / "a.lisp").write_text("")
    (tmp_path / "notes.txt").write_text("")
    single = tmp_path / "extra.lisp"
    monkeypatch.setenv("TYPELISP_PRELUDE_PATH", config._sep().join([str(tmp_path), str(single)]))
    assert config.get_prelude_paths() == [tmp_path / "a.lisp", tmp_path / "b.lisp", single]


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("TYPELISP_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"
