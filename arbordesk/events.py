"""Events raised by the editor and consumed by the model state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from arbordesk.ids import Id
from arbordesk.location import (
    Definition,
    IExprDefinition,
    LocsetDefinition,
    RegionDefinition,
)


class LocationKind(Enum):
    """The three families of named label definitions."""

    IEXPR = "iexpr"
    REGION = "region"
    LOCSET = "locset"

    @property
    def definition_class(self) -> type[Definition]:
        return _DEFINITION_CLASSES[self]


_DEFINITION_CLASSES: dict[LocationKind, type[Definition]] = {
    LocationKind.IEXPR: IExprDefinition,
    LocationKind.REGION: RegionDefinition,
    LocationKind.LOCSET: LocsetDefinition,
}


@dataclass(frozen=True, slots=True)
class UpdateCv:
    pass


@dataclass(frozen=True, slots=True)
class AddMechanism:
    region: Id


@dataclass(frozen=True, slots=True)
class DeleteMechanism:
    id: Id


@dataclass(frozen=True, slots=True)
class AddIon:
    name: str
    charge: int


@dataclass(frozen=True, slots=True)
class DeleteIon:
    id: Id


@dataclass(frozen=True, slots=True)
class AddProbe:
    locset: Id


@dataclass(frozen=True, slots=True)
class DeleteProbe:
    id: Id


@dataclass(frozen=True, slots=True)
class AddStimulus:
    locset: Id


@dataclass(frozen=True, slots=True)
class DeleteStimulus:
    id: Id


@dataclass(frozen=True, slots=True)
class AddDetector:
    locset: Id


@dataclass(frozen=True, slots=True)
class DeleteDetector:
    id: Id


@dataclass(frozen=True, slots=True)
class AddLocationDef:
    kind: LocationKind
    name: str
    definition: str


@dataclass(frozen=True, slots=True)
class UpdateLocationDef:
    kind: LocationKind
    id: Id


@dataclass(frozen=True, slots=True)
class DeleteLocationDef:
    kind: LocationKind
    id: Id


Event = Union[
    UpdateCv,
    AddMechanism,
    DeleteMechanism,
    AddIon,
    DeleteIon,
    AddProbe,
    DeleteProbe,
    AddStimulus,
    DeleteStimulus,
    AddDetector,
    DeleteDetector,
    AddLocationDef,
    UpdateLocationDef,
    DeleteLocationDef,
]

EventQueue = list[Event]