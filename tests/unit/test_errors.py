"""
Tests for the error package

gofiximports/domain/errors 테스트
"""
import pytest

from gofiximports.domain.errors import (
    ERROR_CLASS_MAPPING,
    ERROR_MESSAGES,
    ErrorCode,
    GoFixImportsError,
    ParseError,
    PrintError,
    WalkError,
    WriteError,
    format_error_message,
    get_error_message,
    handle_error,
)


@pytest.mark.unit
class TestErrorCode:
    """에러 코드 테스트"""

    @pytest.mark.parametrize("code, category", [
        (ErrorCode.PARSE_SYNTAX_ERROR, "Parse"),
        (ErrorCode.WALK_FAILED, "Walk"),
        (ErrorCode.PRINT_FILESET_MISMATCH, "Print"),
        (ErrorCode.WRITE_PERMISSION_DENIED, "Write"),
        (ErrorCode.UNKNOWN_ERROR, "Other"),
    ])
    def test_category(self, code, category):
        assert code.category == category

    def test_str_and_code(self):
        assert str(ErrorCode.PARSE_SYNTAX_ERROR) == "PARSE_SYNTAX_ERROR (1001)"
        assert ErrorCode.WRITE_FAILED.code == 4001

    def test_every_code_has_message(self):
        assert set(ERROR_MESSAGES) == set(ErrorCode)


@pytest.mark.unit
class TestErrorMessages:
    """메시지 포맷 테스트"""

    def test_parse_error_format(self):
        message = format_error_message(
            ErrorCode.PARSE_SYNTAX_ERROR,
            filename="a.go", line=3, column=1, detail="expected 'package', found 'func'",
        )
        assert message == "a.go:3:1: expected 'package', found 'func'"

    def test_missing_variable_is_reported(self):
        message = format_error_message(ErrorCode.WALK_FAILED, path="./x")
        assert "포맷 오류" in message
        assert "'error'" in message

    def test_get_error_message(self):
        assert get_error_message(ErrorCode.WRITE_FAILED) == ERROR_MESSAGES[ErrorCode.WRITE_FAILED]


@pytest.mark.unit
class TestHandleError:
    """handle_error 테스트"""

    @pytest.mark.parametrize("code, error_class", [
        (ErrorCode.PARSE_READ_FAILED, ParseError),
        (ErrorCode.WALK_DIR_READ_FAILED, WalkError),
        (ErrorCode.PRINT_FAILED, PrintError),
        (ErrorCode.WRITE_FAILED, WriteError),
        (ErrorCode.UNKNOWN_ERROR, GoFixImportsError),
    ])
    def test_picks_subclass(self, code, error_class):
        error = handle_error(code, original_error=OSError("boom"), filename="a.go", path=".")
        assert type(error) is error_class
        assert ERROR_CLASS_MAPPING.get(code, GoFixImportsError) is error_class

    def test_original_error_fills_context(self):
        original = PermissionError("denied")
        error = handle_error(ErrorCode.WRITE_PERMISSION_DENIED, original_error=original, filename="a.go")

        assert error.original_error is original
        assert error.context["error"] == "denied"
        assert str(error) == "'a.go'에 쓸 권한이 없습니다: denied"

    def test_parse_error_position(self):
        error = handle_error(
            ErrorCode.PARSE_SYNTAX_ERROR, filename="a.go", line=2, column=5, detail="x"
        )
        assert (error.filename, error.line, error.column) == ("a.go", 2, 5)

    def test_to_dict(self):
        error = handle_error(ErrorCode.WALK_FAILED, path="./x", error="gone", log=False)
        assert error.to_dict() == {
            "error_code": "WALK_FAILED",
            "error_number": 2001,
            "category": "Walk",
            "message": error.message,
            "context": {"path": "./x", "error": "gone"},
        }

    def test_is_exception(self):
        with pytest.raises(GoFixImportsError):
            raise handle_error(ErrorCode.PRINT_FAILED, filename="a.go", error="x")
