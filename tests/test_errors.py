import pytest

from diagkit.errors import DiagnosticError, IoError, OutOfBounds


def test_io_error_is_transparent():
    inner = OSError("disk on fire")
    err = IoError(inner)
    assert str(err) == "disk on fire"
    assert err.error is inner
    assert err.help() is None


def test_io_error_code_and_url():
    err = IoError(OSError("x"))
    assert err.code() == "diagkit::io_error"
    assert err.url().endswith("#variant.IoError")


def test_out_of_bounds_message_and_help():
    err = OutOfBounds()
    assert str(err) == "The given offset is outside the bounds of its Source"
    assert err.help() == "Double-check your spans. Do you have an off-by-one error?"
    assert err.code() == "diagkit::span_out_of_bounds"
    assert err.url().endswith("#variant.OutOfBounds")


def test_errors_share_a_base():
    errors = [OutOfBounds(), IoError(OSError("gone"))]
    codes = [err.code() for err in errors if isinstance(err, DiagnosticError)]
    assert codes == ["diagkit::span_out_of_bounds", "diagkit::io_error"]
    messages = [str(err) for err in errors]
    assert messages == [
        "The given offset is outside the bounds of its Source",
        "gone",
    ]


@pytest.mark.parametrize(
    "error, expected_code, expected_message",
    [
        (
            OutOfBounds(),
            "diagkit::span_out_of_bounds",
            "The given offset is outside the bounds of its Source",
        ),
        (IoError(OSError("gone")), "diagkit::io_error", "gone"),
    ],
)
def test_errors_are_diagnostic_errors(error, expected_code, expected_message):
    assert isinstance(error, DiagnosticError)
    assert error.code() == expected_code
    assert str(error) == expected_message