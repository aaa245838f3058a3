"""Tests for the report error hierarchy."""

from core.errors import BuildError, OutputPreparationError, RecipeError, RelocationError, ReportError


def test_hierarchy() -> None:
    assert issubclass(RecipeError, ReportError)
    assert issubclass(BuildError, ReportError)
    assert issubclass(OutputPreparationError, ReportError)
    assert issubclass(RelocationError, ReportError)


def test_message_with_cause() -> None:
    err = OutputPreparationError("Error creating output directory", PermissionError("denied"))
    assert str(err) == "Error creating output directory: denied"
    assert err.message == "Error creating output directory"


def test_message_without_cause() -> None:
    assert str(ReportError("boom")) == "boom"


def test_build_error_returncode() -> None:
    assert BuildError("Error running make deps-report", "exit status 2", returncode=2).returncode == 2
    assert BuildError("Error running make deps-report").returncode is None
