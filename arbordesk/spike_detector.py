"""Threshold spike detectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DetectorDef:
    """A spike detector: threshold in mV and a tag."""

    threshold: float = 0.0
    tag: str = ""