"""Simulation settings and recorded traces."""

from __future__ import annotations

from dataclasses import dataclass, field

from arbordesk.ids import Id


@dataclass
class Trace:
    """A recorded time series for one probe location."""

    tag: str
    id: Id
    index: int
    location: float
    branch: int
    show: bool = True
    times: list[float] = field(default_factory=list)
    values: list[float] = field(default_factory=list)


@dataclass
class Simulation:
    """Run settings (end time and step in ms) and results."""

    until: float = 100.0
    dt: float = 0.05
    should_run: bool = False
    show_trace: bool = False
    tag_to_id: dict[str, Id] = field(default_factory=dict)
    traces: list[Trace] = field(default_factory=list)