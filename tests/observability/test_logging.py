"""Tests for log context rendering, correlation ids and settings validation."""

import logging
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from therapy_dashboard.configs import Settings
from therapy_dashboard.models.session import SessionStatus
from therapy_dashboard.observability.correlation import (
    bind_correlation_id,
    get_correlation_id,
    reset_correlation_id,
)
from therapy_dashboard.observability.log_utils import log_with_context, safe_log_value
from therapy_dashboard.observability.logger import CorrelationIdFilter


class TestSafeLogValue:
    """Tests for safe_log_value."""

    def test_patient_fields_are_masked(self) -> None:
        assert safe_log_value("patient_name", "Nemo Fisher") == "<redacted>"
        assert safe_log_value("dob", date(2017, 3, 2)) == "<redacted>"

    def test_bodies_reduced_to_keys(self) -> None:
        body = {"therapist_id": 1, "patient_id": 2, "date": "2030-01-01T10:00:00Z"}
        assert safe_log_value("body", body) == "{date, patient_id, therapist_id}"

    def test_scalars(self) -> None:
        assert safe_log_value("status", SessionStatus.COMPLETED) == "Completed"
        assert safe_log_value("date", datetime(2025, 11, 8, 9)) == "2025-11-08T09:00:00"
        assert safe_log_value("ids", [1, 2, 3]) == "<3 items>"
        assert safe_log_value("x", None) == "-"

    def test_long_values_truncated(self) -> None:
        assert safe_log_value("error", "x" * 500, max_length=10) == "x" * 10 + "..."

    def test_log_with_context(self, caplog) -> None:
        logger = logging.getLogger("test.log_utils")

        with caplog.at_level(logging.INFO, logger="test.log_utils"):
            log_with_context(logger, logging.INFO, "Session created", session_id=4, patient_name="Elsa Frost")

        record = caplog.records[-1]
        assert record.session_id == "4"
        assert record.patient_name == "<redacted>"


class TestCorrelation:
    """Tests for correlation id binding."""

    def test_incoming_id_is_reused(self) -> None:
        value, token = bind_correlation_id("req-42")
        try:
            assert value == "req-42"
            assert get_correlation_id() == "req-42"
        finally:
            reset_correlation_id(token)
        assert get_correlation_id() == ""

    @pytest.mark.parametrize("incoming", [None, "", "has spaces", "x" * 200])
    def test_missing_or_malformed_id_is_replaced(self, incoming) -> None:
        value, token = bind_correlation_id(incoming)
        reset_correlation_id(token)

        assert value != incoming
        assert len(value) == 32

    def test_filter_stamps_records(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        assert CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"


class TestSettings:
    """Tests for settings validation."""

    def test_log_level_normalised(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")
