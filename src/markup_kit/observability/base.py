from typing import Protocol


class MetricsHook(Protocol):
    """Where MarkupParser and chunk_markup report what they measured.

    MarkupParser takes one at construction, chunk_markup per call. Metric
    names are the ``PARSING_*`` and ``CHUNKING_*`` constants in
    ``markup_kit.observability.names``.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Wall time of one parse or one chunk_markup call, in milliseconds."""
        ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Documents parsed, chunks created, and failures.

        Per-field extraction failures carry ``labels={"field": ...}``.
        """
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Markup size in characters, or distinct sections seen in a page."""
        ...


class NoOpMetricsHook:
    """Used when the caller passes no hook; parsing and chunking stay silent."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        return None
