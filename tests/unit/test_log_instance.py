"""Tests for the log-file-backed singleton instance"""

import io

import pytest
from rich.console import Console

from patternkit.shared.exceptions import (
    InstanceReleasedError,
    InvalidLogMessageError,
)
from patternkit.singleton.instance import LogInstance


@pytest.fixture
def instance(log_file, console):
    log_instance = LogInstance(3, log_file, console=console)
    yield log_instance
    log_instance.release()


def test_creates_missing_log_directory(instance, log_file):
    assert log_file.parent.is_dir()
    assert log_file.exists()


def test_log_line_is_durable_immediately(instance, log_file):
    instance.log("hello")

    assert log_file.read_text(encoding="utf-8").splitlines() == ["hello"]


def test_log_appends_in_order(instance, log_file):
    instance.log("first")
    instance.log("second")

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "first",
        "second",
    ]


def test_log_appends_to_existing_file(log_file, console):
    log_file.parent.mkdir(parents=True)
    log_file.write_text("earlier run\n", encoding="utf-8")

    with LogInstance(1, log_file, console=console) as instance:
        instance.log("this run")

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "earlier run",
        "this run",
    ]


def test_log_echoes_to_console(instance, console):
    instance.log("visible [not markup]")

    assert "Log : visible [not markup]" in console.file.getvalue()


def test_identity_is_stable(instance):
    assert instance.identity() == instance.identity()


def test_identity_differs_between_objects(instance, log_file, console):
    with LogInstance(3, log_file, console=console) as other:
        assert other.identity() != instance.identity()


def test_release_is_idempotent(instance):
    instance.release()
    instance.release()

    assert instance.released is True


def test_log_after_release_raises(instance):
    instance.release()

    with pytest.raises(InstanceReleasedError):
        instance.log("too late")


def test_context_manager_releases(log_file, console):
    with LogInstance(1, log_file, console=console) as instance:
        assert instance.released is False

    assert instance.released is True


@pytest.mark.parametrize("message", ["first\nsecond", "trailing\n", "cr\rline"])
def test_multi_line_message_rejected(instance, log_file, message):
    with pytest.raises(InvalidLogMessageError):
        instance.log(message)

    assert log_file.read_text(encoding="utf-8") == ""


def test_long_message_echo_is_not_wrapped(log_file):
    narrow = Console(file=io.StringIO(), width=40, color_system=None)
    message = "x" * 30 + " " + "y" * 30

    with LogInstance(1, log_file, console=narrow) as instance:
        instance.log(message)

    assert narrow.file.getvalue() == f"Log : {message}\n"
    assert log_file.read_text(encoding="utf-8").splitlines() == [message]
