import pytest


class RecordingMetricsHook:
    """MetricsHook that keeps every call for assertions."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, float, dict[str, str] | None]] = []
        self.counters: list[tuple[str, int, dict[str, str] | None]] = []
        self.gauges: list[tuple[str, float, dict[str, str] | None]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, value_ms, labels))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append((name, value, labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value, labels))

    def counter_names(self) -> list[str]:
        return [name for name, _, _ in self.counters]


@pytest.fixture
def metrics_hook() -> RecordingMetricsHook:
    return RecordingMetricsHook()


MALFORMED_MARKUP = [
    "<div><p>Unclosed paragraph<table><tr><td>Cell",
    "<![",
    "<![CDATA[never closed",
    "<h1>Crossed</h2></h1>text</h2>",
    "</p></div></table>stray closers",
    '<table><tr><td colspan="99999999999999999999" rowspan="-3">x</td></tr></table>',
    "<ul><li>" * 500 + "deep" + "</li></ul>" * 500,
    '<a href="/wiki/x" <img src=',
    "<!-- comment that never ends <p>hidden</p>",
    "<<>><p>>text<</p>",
]


@pytest.fixture(params=MALFORMED_MARKUP)
def malformed_markup(request: pytest.FixtureRequest) -> str:
    return request.param
