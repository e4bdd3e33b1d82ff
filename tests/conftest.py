import pytest

from typelisp.interpreter import Interpreter

# Every test gets a fresh session: its own symbol table and global
# environment. Settings come from the environment, so clear any TYPELISP_*
# variables the developer's shell may carry.


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for var in (
        "TYPELISP_PROMPT",
        "TYPELISP_MAX_DEPTH",
        "TYPELISP_PRELUDE_PATH",
        "TYPELISP_LOG_LEVEL",
        "TYPELISP_REPL_HOST",
        "TYPELISP_REPL_PORT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def rep(interp):
    """Evaluate a sequence of lines, returning the printed result of the last one."""
    def run(*lines):
        result = None
        for line in lines:
            result = interp.rep(line)
        return result
    return run
