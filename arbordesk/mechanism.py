"""Density mechanisms: catalogues and the values a user attaches to a region."""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

_LOG = logging.getLogger(__name__)


class MechanismError(ValueError):
    """Raised when a mechanism cannot be looked up."""


class MechanismKind(Enum):
    """The kind of a mechanism in a catalogue."""

    POINT = "point"
    DENSITY = "density"
    REVERSAL_POTENTIAL = "reversal_potential"
    GAP_JUNCTION = "gap_junction"
    VOLTAGE = "voltage"


@dataclass
class MechanismInfo:
    """What a catalogue knows about a mechanism: its kind and default values."""

    kind: MechanismKind = MechanismKind.DENSITY
    globals: dict[str, float] = field(default_factory=dict)
    parameters: dict[str, float] = field(default_factory=dict)
    state: dict[str, float] = field(default_factory=dict)


Catalogue = Mapping[str, MechanismInfo]

# Catalogues known to the editor, by name.
catalogues: dict[str, dict[str, MechanismInfo]] = {}


@functools.total_ordering
@dataclass(eq=False)
class MechanismDef:
    """A mechanism painted on a region; ordered and compared by name."""

    name: str = ""
    cat: str = ""
    parameters: dict[str, float] = field(default_factory=dict)
    states: dict[str, float] = field(default_factory=dict)
    globals: dict[str, float] = field(default_factory=dict)
    scales: dict[str, str | None] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MechanismDef):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MechanismDef):
            return NotImplemented
        return self.name < other.name

    __hash__ = None  # type: ignore[assignment]


def make_mechanism(
    data: MechanismDef,
    catalogue: str,
    name: str,
    values: Mapping[str, float] | None = None,
) -> None:
    """Point ``data`` at ``catalogue::name`` and fill in its values.

    Entries of ``values`` override the catalogue's defaults.
    """
    if not name:
        raise MechanismError("Empty mechanism name. Selector must be 'cat::mech'.")
    values = values or {}
    data.name = name
    data.cat = catalogue
    if catalogue not in catalogues:
        raise MechanismError(f"Unknown catalogue: {catalogue}")
    cat = catalogues[catalogue]
    if name not in cat:
        raise MechanismError(f"Unknown mechanism {name} in catalogue {catalogue}")
    info = cat[name]
    _LOG.debug("Setting values")
    data.globals = {k: values.get(k, v) for k, v in info.globals.items()}
    data.parameters = {k: values.get(k, v) for k, v in info.parameters.items()}
    data.states = {k: values.get(k, v) for k, v in info.state.items()}


def density_mechanisms(catalogues: Mapping[str, Catalogue]) -> list[tuple[str, str]]:
    """List ``(catalogue, mechanism)`` pairs of all density mechanisms."""
    return [
        (cat_name, name)
        for cat_name, cat in catalogues.items()
        for name, info in cat.items()
        if info.kind is MechanismKind.DENSITY
    ]