"""Tests for the bulk passages service."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from prim_transit.application.services import BulkPassagesService
from prim_transit.application.services.bulk_passages_service import describe_error
from prim_transit.domain.errors import (
    PrimApiError,
    PrimError,
    PrimFetchError,
    PrimRateLimitError,
    PrimValidationError,
    ValidationIssue,
)
from prim_transit.domain.models import Passage


def _passage(line_ref: str = "STIF:Line::C01371:") -> Passage:
    return Passage(
        id=f"{line_ref}-0",
        line_id=line_ref,
        line_name="Métro 1",
        destination="La Défense",
        direction="",
        expected_time=datetime(2024, 1, 15, 8, 3, tzinfo=UTC),
        status="onTime",
        waiting_time=3,
    )


class TestDescribeError:
    """Tests for describe_error."""

    def test_rate_limit(self) -> None:
        """Given a rate limit error, when describing it, then the 429 status is reported."""
        assert describe_error(PrimRateLimitError("/x")) == ("API Error: 429", "rate_limit")

    def test_api_error(self) -> None:
        """Given an API error, when describing it, then the status is reported."""
        assert describe_error(PrimApiError(503, "/x")) == ("API Error: 503", "api")

    def test_validation_error(self) -> None:
        """Given a validation error, when describing it, then a generic message is reported."""
        error = PrimValidationError("/x", [ValidationIssue("<root>", "bad")])

        assert describe_error(error) == ("Invalid response from PRIM API", "validation")

    def test_fetch_error(self) -> None:
        """Given a fetch error, when describing it, then its message is reported."""
        message, kind = describe_error(PrimFetchError("/x", "timed out"))

        assert kind == "fetch"
        assert "timed out" in message

    def test_base_error(self) -> None:
        """Given a bare PrimError, when describing it, then the kind is unknown."""
        assert describe_error(PrimError("boom")) == ("boom", "unknown")


class TestNormalizeStopIds:
    """Tests for stop id normalization."""

    def test_strips_and_drops_blank(self) -> None:
        """Given padded and blank ids, when normalizing, then blanks are dropped."""
        service = BulkPassagesService(AsyncMock())

        assert service.normalize_stop_ids([" 22089 ", "", "   ", "41087"]) == ["22089", "41087"]

    def test_empty_then_error(self) -> None:
        """Given only blank ids, when normalizing, then ValueError is raised."""
        service = BulkPassagesService(AsyncMock())

        with pytest.raises(ValueError, match="At least one stop ID is required"):
            service.normalize_stop_ids(["", " "])

    def test_too_many_then_error(self) -> None:
        """Given more ids than allowed, when normalizing, then ValueError is raised."""
        service = BulkPassagesService(AsyncMock(), max_stops=2)

        with pytest.raises(ValueError, match="Maximum 2 stops allowed per request"):
            service.normalize_stop_ids(["1", "2", "3"])

    def test_limit_counts_after_dropping_blank(self) -> None:
        """Given blanks pushing past the limit, when normalizing, then blanks do not count."""
        service = BulkPassagesService(AsyncMock(), max_stops=2)

        assert service.normalize_stop_ids(["1", "", "2"]) == ["1", "2"]


class TestGetBulkPassages:
    """Tests for get_bulk_passages."""

    @pytest.mark.asyncio
    async def test_all_stops_succeed(self) -> None:
        """Given two stops, when fetching, then results keep the request order."""
        client = AsyncMock()
        client.get_next_departures.side_effect = [[_passage()], []]
        service = BulkPassagesService(client)

        result = await service.get_bulk_passages(["22089", "41087"])

        assert [r.stop_id for r in result.results] == ["22089", "41087"]
        assert result.results[0].passages == [_passage()]
        assert (result.requested, result.success, result.errors) == (2, 2, 0)

    @pytest.mark.asyncio
    async def test_failing_stop_does_not_fail_request(self) -> None:
        """Given one failing stop, when fetching, then the others still succeed."""

        async def fake_departures(stop_id: str) -> list[Passage]:
            if stop_id == "bad":
                raise PrimRateLimitError("/stop-monitoring")
            return [_passage()]

        client = AsyncMock()
        client.get_next_departures.side_effect = fake_departures
        service = BulkPassagesService(client)

        result = await service.get_bulk_passages(["22089", "bad", "41087"])

        failed = result.results[1]
        assert failed.stop_id == "bad"
        assert failed.passages == []
        assert failed.error == "API Error: 429"
        assert failed.error_kind == "rate_limit"
        assert not failed.ok
        assert (result.requested, result.success, result.errors) == (3, 2, 1)

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self) -> None:
        """Given a non-PRIM error, when fetching, then it is not hidden."""
        client = AsyncMock()
        client.get_next_departures.side_effect = RuntimeError("bug")
        service = BulkPassagesService(client)

        with pytest.raises(RuntimeError, match="bug"):
            await service.get_bulk_passages(["22089"])

    @pytest.mark.asyncio
    async def test_invalid_request_makes_no_call(self) -> None:
        """Given no stop ids, when fetching, then no request is made."""
        client = AsyncMock()
        service = BulkPassagesService(client)

        with pytest.raises(ValueError):
            await service.get_bulk_passages([])

        client.get_next_departures.assert_not_awaited()
