# test_normalizer.py

import pytest

from smartcalc.normalizer import normalize


@pytest.mark.parametrize("text, expected", [
    ("5--3", "5+3"),
    ("5-+3", "5-3"),
    ("5+-3", "5-3"),
    ("5++3", "5+3"),
    ("5+++++3", "5+3"),
    ("5---3", "5-3"),
    ("5----3", "5+3"),
    ("--+-", "-"),
    ("-+-", "+"),
    ("8+-+3", "8-3"),
])
def test_sign_runs_collapse(text, expected):
    assert normalize(text) == expected


@pytest.mark.parametrize("text", [
    "5--3", "-+-", "8+-+3", "a=--5", "(2+-(3--4))*-+1", "---", "1-2*3/4",
])
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_text_without_sign_runs_is_unchanged():
    assert normalize("(a+5)*b/3-(4*5+b)") == "(a+5)*b/3-(4*5+b)"
    assert normalize("") == ""


def test_normalize_touches_assignments_and_commands_too():
    # the shell normalizes every line before classifying it
    assert normalize("a=--5") == "a=+5"
    assert normalize("/--help") == "/+help"
