import pytest

from funclang.evaluation.evaluator import evaluate_program
from funclang.interpreter import Interpreter
from funclang.reader import read_program
from funclang.types.environment import GlobalEnv


@pytest.fixture
def env():
    """Fresh, empty global environment."""
    return GlobalEnv()


@pytest.fixture
def interp(tmp_path):
    """Interpreter whose read roots point at a private temporary directory."""
    return Interpreter(read_roots=[tmp_path])


@pytest.fixture
def run(env):
    """Read and evaluate a program against the `env` fixture."""
    def _run(source):
        return evaluate_program(read_program(source), env)
    return _run
