"""Tests for FakeProcessRunner.

These tests verify the fake implementation itself works correctly.
They ensure the test infrastructure is reliable for higher-layer tests.
"""

from pathlib import Path

import pytest

from browserscan.integrations.process.abc import ProcessResult
from browserscan.integrations.process.fake import FakeProcessRunner


def test_returns_configured_result() -> None:
    result = ProcessResult(returncode=0, stdout="Mozilla Firefox 128.0\n", stderr="")
    fake = FakeProcessRunner(results={("/bin/firefox", "--version"): result})

    assert fake.run([Path("/bin/firefox"), "--version"]) == result


def test_unconfigured_command_fails_to_spawn() -> None:
    fake = FakeProcessRunner()

    with pytest.raises(FileNotFoundError, match="/bin/missing"):
        fake.run(["/bin/missing", "--version"])


def test_records_run_calls_in_order() -> None:
    fake = FakeProcessRunner()

    for command in (["brew", "--prefix"], ["/bin/firefox", "--version"]):
        with pytest.raises(FileNotFoundError):
            fake.run(command)

    assert fake.run_calls == [("brew", "--prefix"), ("/bin/firefox", "--version")]


def test_records_spawn_calls() -> None:
    fake = FakeProcessRunner()

    fake.spawn_detached([Path("/bin/firefox"), "--url", "https://example.com"])

    assert fake.spawn_calls == [("/bin/firefox", "--url", "https://example.com")]


def test_spawn_error_is_raised_after_recording() -> None:
    fake = FakeProcessRunner(spawn_error=PermissionError("denied"))

    with pytest.raises(PermissionError):
        fake.spawn_detached(["/bin/firefox"])

    assert fake.spawn_calls == [("/bin/firefox",)]


def test_success_property() -> None:
    assert ProcessResult(returncode=0, stdout="", stderr="").success
    assert not ProcessResult(returncode=1, stdout="", stderr="").success
    assert not ProcessResult(returncode=None, stdout="", stderr="").success
