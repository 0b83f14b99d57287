"""Tests for movie draft validation."""

import pytest

from movies_api.core.validation import (
    ValidationFailed,
    ValidationOk,
    validate_movie,
    validate_partial_movie,
)


def _paths(result):
    return {tuple(v.path) for v in result.violations}


class TestValidateMovie:
    """Tests for full draft validation."""

    def test_valid_draft(self, valid_draft):
        """Test a complete draft passes and rate defaults to 0."""
        result = validate_movie(valid_draft)
        assert isinstance(result, ValidationOk)
        assert result.data["title"] == "X"
        assert result.data["genre"] == ["Action"]
        assert result.data["rate"] == 0

    def test_poster_kept_as_sent(self, valid_draft):
        """Test the poster URL is not normalized."""
        result = validate_movie(valid_draft)
        assert result.data["poster"] == "http://p"

    def test_missing_fields_reported_individually(self):
        """Test every missing or invalid field gets its own violation."""
        result = validate_movie({"title": ""})
        assert isinstance(result, ValidationFailed)
        assert _paths(result) == {
            ("title",), ("year",), ("director",), ("duration",), ("poster",), ("genre",)
        }

    def test_violation_shape(self):
        """Test violations carry code, path and message."""
        result = validate_movie({})
        violation = result.violations[0]
        assert violation.code == "missing"
        assert violation.path
        assert violation.message

    def test_unknown_genre(self, valid_draft):
        """Test genres outside the vocabulary are rejected."""
        valid_draft["genre"] = ["Action", "Musical"]
        result = validate_movie(valid_draft)
        assert isinstance(result, ValidationFailed)
        assert _paths(result) == {("genre", 1)}

    def test_empty_genre(self, valid_draft):
        """Test an empty genre list is rejected."""
        valid_draft["genre"] = []
        assert isinstance(validate_movie(valid_draft), ValidationFailed)

    def test_year_out_of_range(self, valid_draft):
        """Test years before 1900 are rejected."""
        valid_draft["year"] = 1850
        result = validate_movie(valid_draft)
        assert _paths(result) == {("year",)}

    def test_year_as_string_rejected(self, valid_draft):
        """Test numeric strings are not coerced."""
        valid_draft["year"] = "2020"
        assert isinstance(validate_movie(valid_draft), ValidationFailed)

    def test_non_positive_duration(self, valid_draft):
        """Test zero duration is rejected."""
        valid_draft["duration"] = 0
        assert _paths(validate_movie(valid_draft)) == {("duration",)}

    def test_invalid_poster(self, valid_draft):
        """Test a poster that is not a URL is rejected."""
        valid_draft["poster"] = "not a url"
        assert _paths(validate_movie(valid_draft)) == {("poster",)}

    def test_rate_bounds(self, valid_draft):
        """Test rate must lie within 0 and 10."""
        valid_draft["rate"] = 10.5
        assert _paths(validate_movie(valid_draft)) == {("rate",)}
        valid_draft["rate"] = 10
        assert isinstance(validate_movie(valid_draft), ValidationOk)

    @pytest.mark.parametrize("rate", ["7", True])
    def test_rate_must_be_a_number(self, valid_draft, rate):
        """Test numeric strings and booleans are not coerced into a rate."""
        valid_draft["rate"] = rate
        result = validate_movie(valid_draft)
        assert isinstance(result, ValidationFailed)
        assert _paths(result) == {("rate",)}

    def test_id_in_body_dropped(self, valid_draft):
        """Test a client supplied id never reaches the validated data."""
        valid_draft["id"] = "client-chosen"
        result = validate_movie(valid_draft)
        assert "id" not in result.data

    def test_non_object_body(self):
        """Test a JSON array is reported as a violation, not an exception."""
        result = validate_movie(["title"])
        assert isinstance(result, ValidationFailed)


class TestValidatePartialMovie:
    """Tests for partial draft validation."""

    def test_empty_draft(self):
        """Test an empty draft is valid and yields no fields."""
        result = validate_partial_movie({})
        assert isinstance(result, ValidationOk)
        assert result.data == {}

    def test_only_sent_fields_returned(self):
        """Test defaults do not leak into partial data."""
        result = validate_partial_movie({"year": 1999})
        assert result.data == {"year": 1999}

    def test_same_constraints_as_full(self):
        """Test present fields are checked like in a full draft."""
        result = validate_partial_movie({"year": 1800, "genre": ["Western"]})
        assert isinstance(result, ValidationFailed)
        assert _paths(result) == {("year",), ("genre", 0)}

    def test_explicit_null_rejected(self):
        """Test a null cannot blank out a field."""
        result = validate_partial_movie({"title": None})
        assert isinstance(result, ValidationFailed)

    @pytest.mark.parametrize("rate", ["7", True])
    def test_rate_must_be_a_number(self, rate):
        """Test a partial rate is checked for type like a full one."""
        result = validate_partial_movie({"rate": rate})
        assert isinstance(result, ValidationFailed)
        assert _paths(result) == {("rate",)}

    def test_id_ignored(self):
        """Test the id cannot be changed through a partial draft."""
        result = validate_partial_movie({"id": "other", "rate": 5})
        assert result.data == {"rate": 5}
