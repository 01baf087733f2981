"""Tests for the scaffolder value types."""

from __future__ import annotations

from pathlib import Path

import pytest

from express_scaffold.errors import InvalidParameterError, ScaffoldError
from express_scaffold.scaffolder.models import BackendVariant, EmissionResult, Outcome


pytestmark = pytest.mark.unit


class TestBackendVariant:
    @pytest.mark.parametrize(
        ("answer", "expected"),
        [
            ("MongoDB", BackendVariant.DOCUMENT_STORE),
            ("mongodb", BackendVariant.DOCUMENT_STORE),
            (" MySQL ", BackendVariant.RELATIONAL_STORE),
            ("MYSQL", BackendVariant.RELATIONAL_STORE),
        ],
    )
    def test_from_label(self, answer, expected):
        assert BackendVariant.from_label(answer) is expected

    @pytest.mark.parametrize("answer", ["Postgres", "", None])
    def test_unknown_label(self, answer):
        with pytest.raises(InvalidParameterError) as exc_info:
            BackendVariant.from_label(answer)
        assert exc_info.value.parameter == "db_type"
        assert "MongoDB, MySQL" in str(exc_info.value)

    def test_unknown_label_is_a_scaffold_error(self):
        with pytest.raises(ScaffoldError):
            BackendVariant.from_label("sqlite")

    def test_labels(self):
        assert [v.label for v in BackendVariant] == ["MongoDB", "MySQL"]


class TestEmissionResult:
    def test_outcome_flags(self):
        result = EmissionResult(path=Path("index.js"), outcome=Outcome.SKIPPED_ALREADY_EXISTS)
        assert result.skipped
        assert not result.created
        assert not result.failed
