"""Current clamp stimuli with a piecewise linear envelope."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from arbordesk.utils import PI


def _steps(start: float, stop: float, dt: float) -> Iterator[float]:
    t = start
    while t < stop:
        yield t
        t += dt


@dataclass
class StimulusDef:
    """A current clamp: frequency in Hz, phase in radians, envelope of (ms, nA)."""

    frequency: float = 0.0
    phase: float = 0.0
    tag: str = ""
    envelope: list[tuple[float, float]] = field(default_factory=list)

    def add_point(self) -> None:
        """Append a copy of the last envelope point, or (0, 0) if there is none."""
        self.envelope.append(self.envelope[-1] if self.envelope else (0.0, 0.0))

    def remove_point(self, index: int) -> None:
        del self.envelope[index]

    def clean_envelope(self) -> None:
        """Sort the envelope and drop duplicate points."""
        self.envelope = sorted(set(self.envelope))

    def preview(self, dt: float, until: float) -> list[float]:
        """Sample the stimulus current every ``dt`` ms over [0, ``until``)."""
        if dt <= 0.0:
            return []
        values = [0.0] * max(0, math.ceil(until / dt))
        if not self.envelope:
            return values

        def fill(i0: float, i1: float, t0: float, t1: float) -> None:
            for t in _steps(t0, t1, dt):
                ix = int(t / dt)
                if t < 0.0 or ix >= len(values):
                    continue
                f = math.sin(t * 2e-3 * self.frequency * PI + self.phase) if self.frequency else 1.0
                current = i0 + (i1 - i0) * (t - t0) / (t1 - t0)
                values[ix] = current * f

        points = sorted(self.envelope)
        t, current = points[0]
        fill(0.0, 0.0, 0.0, t)
        for t1, i1 in points:
            if t1 <= t:
                continue
            fill(current, i1, t, t1)
            current, t = i1, t1
        fill(current, current, t, until)
        return values