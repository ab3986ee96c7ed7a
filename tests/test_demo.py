import logging

import pytest

from lambdas import DemoConfig, Lambdas, ParseError, Person
from lambdas.__main__ import main, resolve_log_level


def test_basic_lambda():
    results = Lambdas().basic_lambda()

    assert len(results) == 3
    assert all(r == ["apple", "banana"] for r in results)


def test_functional_interface():
    assert Lambdas().functional_interface() == 100


def test_method_reference():
    assert Lambdas().method_reference() == (100, "s")


def test_constructor_reference():
    person, collection = Lambdas().constructor_reference()

    assert person == Person("Firstname", "Lastname")
    assert collection == {"First", "Second"}


def test_custom_config():
    demo = Lambdas(DemoConfig(number_text="42", word="", elements=["x", "x"]))

    assert demo.functional_interface() == 42
    assert demo.method_reference() == (42, "")
    _, collection = demo.constructor_reference()
    assert collection == {"x"}


def test_parse_error_propagates():
    with pytest.raises(ParseError):
        Lambdas(DemoConfig(number_text="hundred")).functional_interface()


def test_run_logs_values(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="lambdas"):
        Lambdas().run()

    messages = [r.getMessage() for r in caplog.records]
    assert "Converted to 100" in messages
    assert "First letter is s" in messages
    assert "Person has name Firstname Lastname" in messages
    assert messages.count("Collection element is First") == 1
    assert messages.count("Collection element is Second") == 1


def test_main_returns_zero(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="lambdas"):
        assert main([]) == 0

    assert any(r.getMessage() == "Converted to 100" for r in caplog.records)


def test_main_rejects_conflicting_flags():
    with pytest.raises(SystemExit):
        main(["-v", "-q"])


def test_main_quiet_drops_debug_records(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="lambdas"):
        assert main(["-q"]) == 0

    assert not any(r.levelno == logging.DEBUG for r in caplog.records)
    assert not any(r.getMessage() == "Converted to 100" for r in caplog.records)


def test_main_verbose_reports_values(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="lambdas"):
        logging.getLogger("lambdas").setLevel(logging.WARNING)
        assert main(["--verbose"]) == 0

    assert any(r.getMessage() == "First letter is s" for r in caplog.records)


@pytest.mark.parametrize(
    "flags, level",
    [
        ({}, logging.DEBUG),
        ({"verbose": True}, logging.DEBUG),
        ({"quiet": True}, logging.WARNING),
    ],
)
def test_resolve_log_level(flags: dict[str, bool], level: int):
    assert resolve_log_level(**flags) == level
