"""In-memory metrics spies for tests."""

from dataclasses import dataclass

from elitescope.core.protocols.metrics import AccessMetrics, HttpMetrics, MetricsRenderer


@dataclass
class RequestRecord:
    """Single observed request."""

    method: str
    endpoint: str
    status_code: str
    duration: float


class FakeHttpMetrics(HttpMetrics):
    """Records HTTP observations."""

    def __init__(self) -> None:
        self.in_progress: dict[str, int] = {}
        self.requests: list[RequestRecord] = []
        self.response_sizes: list[tuple[str, str, int]] = []

    def inc_in_progress(self, method: str) -> None:
        self.in_progress[method] = self.in_progress.get(method, 0) + 1

    def dec_in_progress(self, method: str) -> None:
        self.in_progress[method] = self.in_progress.get(method, 0) - 1

    def observe_request(self, method: str, endpoint: str, status_code: str, duration: float) -> None:
        self.requests.append(RequestRecord(method, endpoint, status_code, duration))

    def observe_response_size(self, method: str, endpoint: str, size: int) -> None:
        self.response_sizes.append((method, endpoint, size))


class FakeAccessMetrics(AccessMetrics):
    """Records access denials as (resource, reason) tuples."""

    def __init__(self) -> None:
        self.denied: list[tuple[str, str]] = []

    def inc_denied(self, resource: str, reason: str) -> None:
        self.denied.append((resource, reason))


class FakeMetricsRenderer(MetricsRenderer):
    """Returns a fixed payload and counts calls."""

    def __init__(self) -> None:
        self.generate_calls = 0

    @property
    def content_type(self) -> str:
        return "text/plain"

    def generate(self) -> bytes:
        self.generate_calls += 1
        return b"# fake metrics\n"
