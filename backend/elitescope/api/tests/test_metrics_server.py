"""Unit tests for the MetricsServer handler."""

import pytest

from elitescope.adapters.metrics import FakeMetricsRenderer


class TestMetricsServer:
    """Tests for the MetricsServer handler."""

    @pytest.mark.asyncio
    async def test_handle_metrics_returns_fake_body_and_content_type(self):
        """Handler should delegate to MetricsRenderer.generate() and content_type."""
        from aiohttp.test_utils import make_mocked_request

        from elitescope.api.metrics import MetricsServer

        fake = FakeMetricsRenderer()
        server = MetricsServer(fake, port=0)

        request = make_mocked_request("GET", "/metrics")
        response = await server._handle_metrics(request)

        assert response.body == b"# fake metrics\n"
        assert response.content_type == "text/plain"
        assert fake.generate_calls == 1

    @pytest.mark.asyncio
    async def test_prometheus_renderer_serves_exposition_format(self):
        """A started server with the real renderer answers on /metrics."""
        import aiohttp
        from prometheus_client import CollectorRegistry

        from elitescope.adapters.metrics import PrometheusAccessMetrics, PrometheusMetricsRenderer
        from elitescope.api.metrics import MetricsServer

        registry = CollectorRegistry()
        PrometheusAccessMetrics(registry).inc_denied("reports", "forbidden")
        server = MetricsServer(PrometheusMetricsRenderer(registry), port=0, host="127.0.0.1")
        await server.start()

        try:
            site = list(server._runner.sites)[0]
            port = site._server.sockets[0].getsockname()[1]

            async with aiohttp.ClientSession() as session:
                async with session.get(f"http://127.0.0.1:{port}/metrics") as resp:
                    assert resp.status == 200
                    assert resp.headers["Content-Type"].count("charset") == 1
                    body = await resp.text()
        finally:
            await server.stop()

        assert 'resource="reports"' in body

    @pytest.mark.asyncio
    async def test_stop_is_safe_when_not_started(self):
        """Calling stop() before start() must not raise."""
        from elitescope.api.metrics import MetricsServer

        server = MetricsServer(FakeMetricsRenderer(), port=0)
        await server.stop()
