"""Tests for the lms-acl command line."""
import json

from click.testing import CliRunner

from lms_acl.cli import main
from lms_acl.identity import derive_idempotency_key


def test_transform_with_key_envelope(assignment_payload) -> None:
    """Test that --with-key prints one JSON document with key and reminder."""
    runner = CliRunner()
    result = runner.invoke(main, ["transform", "assignment", "--with-key"], input=assignment_payload)

    assert result.exit_code == 0, result.output
    envelope = json.loads(result.output)
    assert envelope["idempotencyKey"] == derive_idempotency_key("A1")
    assert envelope["reminder"]["userId"] == "user-S1"
    assert envelope["reminder"]["advanceMinutes"] == 1440


def test_transform_reads_file(tmp_path, webhook_payload) -> None:
    path = tmp_path / "event.json"
    path.write_text(webhook_payload, encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(main, ["transform", "calendar", str(path)])

    assert result.exit_code == 0, result.output
    assert '"title":"Upcoming: Standup"' in result.output
    assert f"idempotency-key: {derive_idempotency_key('E9')}" in result.output


def test_transform_malformed_payload_exits_1() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["transform", "assignment"], input='{"assignment_id": "A1"}')

    assert result.exit_code == 1
    assert "student_id" in result.output


def test_transform_rejects_unknown_category(assignment_payload) -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["transform", "exam"], input=assignment_payload)

    assert result.exit_code == 2


def test_transform_honours_env_settings(assignment_payload) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["transform", "assignment", "--with-key"],
        input=assignment_payload,
        env={"LMS_ACL_USER_ID_PREFIX": "lms:", "LMS_ACL_SOURCE": "CANVAS"},
    )

    assert result.exit_code == 0, result.output
    reminder = json.loads(result.output)["reminder"]
    assert reminder["userId"] == "lms:S1"
    assert reminder["source"] == "LMS"


def test_invalid_log_level_exits_1(assignment_payload) -> None:
    """Test that a bogus LMS_ACL_LOG_LEVEL is reported instead of crashing logging."""
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["transform", "assignment"],
        input=assignment_payload,
        env={"LMS_ACL_LOG_LEVEL": "BASIC_FORMAT"},
    )

    assert result.exit_code == 1
    assert "LMS_ACL_" in result.output


def test_key_command() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["key", "A1", "E9"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        f"A1\t{derive_idempotency_key('A1')}",
        f"E9\t{derive_idempotency_key('E9')}",
    ]


def test_policy_command() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["policy"])

    assert result.exit_code == 0
    assert "assignment" in result.output
    assert "1440" in result.output
    assert "30" in result.output
