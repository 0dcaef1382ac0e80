"""Tests for format_result and OutputSettings."""

import json

from binctl.output.formatters import OutputSettings, format_error_plain, format_result
from binctl.services.result import ServiceError, ServiceResult


def _ok(output: str = "01100001") -> ServiceResult:
    return ServiceResult(ok=True, op="encode", data={"output": output, "bytes": 1, "bits": 8})


def _err(msg: str = "bad digit") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="decode",
        error=ServiceError(code="INVALID_DIGIT", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.color is True


class TestFormatResult:
    def test_success_is_payload_verbatim(self) -> None:
        assert format_result(_ok("hi\n")) == "hi\n"

    def test_json_mode(self) -> None:
        data = json.loads(format_result(_ok(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["op"] == "encode"
        assert data["data"]["output"] == "01100001"

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err("Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_DIGIT"

    def test_quiet_error_is_plain(self) -> None:
        output = format_result(_err("Bad input"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: decode — [INVALID_DIGIT] Bad input"

    def test_default_error_is_rendered(self) -> None:
        output = format_result(_err("Bad input"))
        assert "ERROR" in output
        assert "INVALID_DIGIT" in output
        assert "Bad input" in output


class TestFormatErrorPlain:
    def test_unknown(self) -> None:
        assert format_error_plain(ServiceResult(ok=False, op="encode")).endswith("Unknown error")
