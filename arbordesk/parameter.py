"""Cable parameters that may be left unset and fall back to defaults."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

# Field name -> (label, unit, attribute of CableParameters)
FIELDS: dict[str, tuple[str, str, str]] = {
    "TK": ("Temperature", "K", "temperature_K"),
    "Vm": ("Membrane Potential", "mV", "init_membrane_potential"),
    "RL": ("Axial Resistivity", "Ω·cm", "axial_resistivity"),
    "Cm": ("Membrane Capacitance", "F/m²", "membrane_capacitance"),
}


@dataclass
class CableParameters:
    """A simulator-side parameter set; every entry may be missing."""

    temperature_K: float | None = None
    init_membrane_potential: float | None = None
    axial_resistivity: float | None = None
    membrane_capacitance: float | None = None


@dataclass
class ParameterDef:
    """User overrides: temperature, capacitance, membrane potential, resistivity."""

    TK: float | None = None
    Cm: float | None = None
    Vm: float | None = None
    RL: float | None = None

    def resolve(self, *args: ParameterDef | CableParameters | None) -> ParameterDef:
        """Fill every unset entry from the first fallback in ``args`` that has it."""
        resolved = {}
        for name, (label, _unit, _attr) in FIELDS.items():
            try:
                resolved[name] = resolve_value(
                    getattr(self, name), *(_fallback(arg, name) for arg in args)
                )
            except ValueError as err:
                raise ValueError(f"No default for {label}") from err
        return replace(self, **resolved)

    def reset(self, name: str) -> None:
        """Drop the override ``name`` so that the default applies again."""
        if name not in {f.name for f in fields(self)}:
            raise ValueError(f"Unknown parameter: {name}")
        setattr(self, name, None)


def _fallback(source: ParameterDef | CableParameters | None, name: str) -> float | None:
    if source is None:
        return None
    if isinstance(source, ParameterDef):
        return getattr(source, name)
    return getattr(source, FIELDS[name][2])


def resolve_value(value: float | None, *args: float | None) -> float:
    """Return ``value`` if set, else the first set fallback.

    At least one fallback must be set, whether or not ``value`` is.
    """
    fallback = next((a for a in args if a is not None), None)
    if fallback is None:
        raise ValueError("No fallback value available")
    return fallback if value is None else value