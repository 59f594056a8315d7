import pytest

from smartcalc.session import Session
from smartcalc.variables import VariableTable


@pytest.fixture
def variables():
    return VariableTable({"a": 5, "b": 3, "big": 10 ** 30})


@pytest.fixture
def session(variables):
    return Session(variables)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
