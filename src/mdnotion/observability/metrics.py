"""Metrics hook protocol and no-op default.

:class:`MarkdownToNotionConverter` reports each conversion through a
:class:`MetricsHook`.  Without one configured, :class:`NoopMetricsHook`
discards everything.

Emitted metric names:

* ``mdnotion.conversions_total``          -- counter
* ``mdnotion.blocks_total``               -- counter (blocks emitted)
* ``mdnotion.conversion_warnings_total``  -- counter
* ``mdnotion.conversion_duration_ms``     -- timing
* ``mdnotion.last_input_chars``           -- gauge (input size of the latest conversion)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* are optional string key-value pairs; backends translate them
    into whatever labelling scheme they use.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that drops every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
