"""Unit tests for HTTP metrics middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from elitescope.adapters.metrics import FakeHttpMetrics


class TestHttpMetricsMiddleware:
    """Tests for http_metrics_middleware using FakeHttpMetrics."""

    @pytest.fixture
    def fake_metrics(self):
        return FakeHttpMetrics()

    @pytest.fixture
    def _make_request(self, fake_metrics):
        """Factory for mock Starlette Request objects with fake metrics."""

        def factory(path: str = "/elites", method: str = "GET", route_path: str | None = None):
            request = MagicMock()
            request.url.path = path
            request.method = method
            request.app.state.http_metrics = fake_metrics
            route = MagicMock()
            route.path = route_path if route_path is not None else path
            request.scope = {"route": route}
            return request

        return factory

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        ["/health", "/health/ready", "/metrics", "/docs", "/openapi.json", "/redoc"],
    )
    async def test_skips_metrics_exempt_path(self, _make_request, fake_metrics, path):
        """Middleware should pass through exempt paths without recording."""
        from elitescope.api.middleware import http_metrics_middleware

        request = _make_request(path=path)
        sentinel = MagicMock()
        call_next = AsyncMock(return_value=sentinel)

        response = await http_metrics_middleware(request, call_next)

        assert response is sentinel
        call_next.assert_awaited_once_with(request)
        assert len(fake_metrics.requests) == 0

    @pytest.mark.asyncio
    async def test_does_not_skip_lookalike_prefix(self, _make_request, fake_metrics):
        """``/healthcare`` is not ``/health``."""
        from elitescope.api.middleware import http_metrics_middleware

        response = MagicMock()
        response.status_code = 200
        response.headers = {}
        await http_metrics_middleware(
            _make_request(path="/healthcare"), AsyncMock(return_value=response)
        )

        assert len(fake_metrics.requests) == 1

    @pytest.mark.asyncio
    async def test_records_metrics_with_route_template(self, _make_request, fake_metrics):
        """Endpoint label is the route template, not the concrete path."""
        from elitescope.api.middleware import http_metrics_middleware

        request = _make_request(
            path="/elites/42/network", method="GET", route_path="/elites/{elite_id}/network"
        )
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.headers = {"content-length": "1234"}
        call_next = AsyncMock(return_value=mock_response)

        response = await http_metrics_middleware(request, call_next)

        assert response is mock_response
        assert len(fake_metrics.requests) == 1

        rec = fake_metrics.requests[0]
        assert rec.method == "GET"
        assert rec.endpoint == "/elites/{elite_id}/network"
        assert rec.status_code == "200"
        assert rec.duration > 0

        assert fake_metrics.response_sizes == [("GET", "/elites/{elite_id}/network", 1234)]
        assert fake_metrics.in_progress["GET"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, route_path, expected",
        [
            ("/elites", "", "/elites"),
            ("/reports/7", "/{report_id}", "/reports/{report_id}"),
            (
                "/elites/42/connections",
                "/{elite_id}/connections",
                "/elites/{elite_id}/connections",
            ),
            ("/expert-access/requests", "/requests", "/expert-access/requests"),
        ],
    )
    async def test_route_path_below_router_prefix(
        self, _make_request, fake_metrics, path, route_path, expected
    ):
        """Routes that only know their path below the include_router prefix get it restored."""
        from elitescope.api.middleware import http_metrics_middleware

        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.headers = {}

        await http_metrics_middleware(
            _make_request(path=path, route_path=route_path), AsyncMock(return_value=mock_response)
        )

        assert fake_metrics.requests[0].endpoint == expected

    @pytest.mark.asyncio
    async def test_decrements_in_progress_on_exception(self, _make_request, fake_metrics):
        """In-progress gauge must be decremented even when call_next raises."""
        from elitescope.api.middleware import http_metrics_middleware

        request = _make_request(path="/newsletter/subscribe", method="POST")
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            await http_metrics_middleware(request, call_next)

        assert fake_metrics.in_progress.get("POST", 0) == 0

    @pytest.mark.asyncio
    async def test_unmatched_route_uses_fallback(self, fake_metrics):
        """When no route is matched, endpoint label should be 'unmatched'."""
        from elitescope.api.middleware import http_metrics_middleware

        request = MagicMock()
        request.url.path = "/random-bot-path"
        request.method = "GET"
        request.scope = {}
        request.app.state.http_metrics = fake_metrics

        mock_response = MagicMock()
        mock_response.status_code = 404
        mock_response.headers = {"content-length": "0"}
        call_next = AsyncMock(return_value=mock_response)

        await http_metrics_middleware(request, call_next)

        assert len(fake_metrics.requests) == 1
        assert fake_metrics.requests[0].endpoint == "unmatched"
        assert fake_metrics.requests[0].status_code == "404"

    @pytest.mark.asyncio
    async def test_missing_content_length_skips_size(self, _make_request, fake_metrics):
        """Without content-length the request is still counted but no size is recorded."""
        from elitescope.api.middleware import http_metrics_middleware

        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.headers = {}
        call_next = AsyncMock(return_value=mock_response)

        await http_metrics_middleware(_make_request(), call_next)

        assert len(fake_metrics.requests) == 1
        assert fake_metrics.response_sizes == []
