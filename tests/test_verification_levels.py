from __future__ import annotations

from pathlib import Path

pytest_plugins = ("pytester",)


def _install_verification_hooks(pytester) -> None:
    conftest = Path(__file__).with_name("conftest.py").resolve()
    pytester.makeconftest(
        f"""
import importlib.util
from pathlib import Path

spec = importlib.util.spec_from_file_location(
    "_rsgen_verification_conftest", Path({str(conftest)!r})
)
module = importlib.util.module_from_spec(spec)
spec.loader.exec_module(module)

pytest_addoption = module.pytest_addoption
pytest_collection_modifyitems = module.pytest_collection_modifyitems
"""
    )
    pytester.makepyfile(
        test_levels="""
import pytest


@pytest.mark.slow
def test_slow_marked():
    assert True


def test_unmarked():
    assert True
"""
    )


def test_default_level_runs_slow_tests(pytester) -> None:
    _install_verification_hooks(pytester)
    result = pytester.runpytest("-q")
    result.assert_outcomes(passed=2)


def test_fast_skips_slow_tests(pytester) -> None:
    _install_verification_hooks(pytester)
    result = pytester.runpytest("--verification-level=fast", "-q")
    result.assert_outcomes(passed=1, skipped=1)


def test_full_level_is_accepted(pytester) -> None:
    _install_verification_hooks(pytester)
    result = pytester.runpytest("--verification-level=full", "-q")
    assert result.ret == 0
    result.assert_outcomes(passed=2)
