# arbordesk

The model-side state for an interactive editor of single-cell neuron
simulations. It records what a user builds on a cell and contains no drawing
code, so any front end or script can drive it.

## What is in it

- `arbordesk.ids`: `Id`, a frozen, ordered and hashable identifier.
- `arbordesk.component`: stores that map ids to items.
  - `Entity` hands out fresh ids and never reuses them.
  - `UniqueComponent` holds at most one item per parent id.
  - `ManyComponent` holds any number of items per parent. Each item gets its own
    id, and `children()` and `remove_children()` work on the items of one parent.
  - `JoinComponent` holds one item per `(first, second)` pair of ids, with
    `remove_by_first()` and `remove_by_second()`.

  Every store removes an item by moving the last item into its slot. Every store
  can take an optional `default` factory for `add()` calls that pass no item.
  Adding a second item for the same key raises `ValueError`.
- `arbordesk.location`: named label definitions `RegionDefinition`,
  `LocsetDefinition` and `IExprDefinition`. Each one reads its `definition` text
  as an s-expression when it is created and again on every `update()`. It then
  sets `data`, `state` and `message`. `state` is a `DefState` of `EMPTY`, `ERROR`
  or `GOOD`.
- `arbordesk.events`: event dataclasses for queueing editor changes, such as
  `AddProbe`, `DeleteStimulus`, `AddLocationDef` and `UpdateCv`. `LocationKind`
  names the three kinds of label definition.
- `arbordesk.mechanism`: `MechanismDef`, `MechanismInfo`, `MechanismKind` and
  `make_mechanism()`.
  - `make_mechanism()` fills in a definition from the module-level `catalogues`
    dict, and any values you pass override the defaults. An unknown catalogue,
    an unknown mechanism or an empty name raises `MechanismError`.
  - `density_mechanisms()` lists the `(catalogue, name)` pairs whose kind is
    density.
- `arbordesk.parameter`: `ParameterDef` holds optional overrides for
  temperature, capacitance, membrane potential and axial resistivity.
  - `resolve()` fills each unset value from the first fallback that has one. A
    fallback can be another `ParameterDef` or a `CableParameters`.
  - `reset()` clears one override.
  - `resolve_value()` does the same for a single value.
- `arbordesk.probe`: `ProbeDef`, which has a frequency, a kind and a variable.
  `variable_choices()` and `select_variable()` restrict the variable to ion
  names or state variables, depending on the kind.
- `arbordesk.spike_detector`: `DetectorDef`, which holds a threshold and a tag.
- `arbordesk.stimulus`: `StimulusDef`, a current clamp with a piecewise-linear
  envelope.
  - `add_point()`, `remove_point()` and `clean_envelope()` edit the envelope.
  - `preview(dt, until)` samples the waveform.
- `arbordesk.simulation`: `Simulation`, which holds the end time, the time step
  and the run flags, and `Trace`, which holds recorded series.
- `arbordesk.view_state`: `ViewState`, the camera state of the 3D view.
- `arbordesk.utils`: the helpers `split_off`, `hsv2rgb`, `ColorCycle` /
  `next_color` (for distinct trace colours), `slurp`, `get_resource_path` and
  `log_init`.

## Installation

```
pip install .
```

## Example

```python
from arbordesk.component import Entity, ManyComponent
from arbordesk.stimulus import StimulusDef

locsets = Entity()
stimuli = ManyComponent()

soma = locsets.add()
clamp = stimuli.add(soma, StimulusDef(tag="clamp", envelope=[(10.0, 0.5), (50.0, 0.0)]))

samples = stimuli[clamp].preview(dt=0.5, until=100.0)
print(len(samples), max(samples))

stimuli.remove_children(soma)
```

## What it does not do

- There is no window, editor screen or command-line program. The package holds
  state and nothing else.
- It does not run simulations. `Simulation` and `Trace` only store settings and
  results that you supply.
- Label definitions are checked only as s-expression syntax. They are not
  evaluated against a morphology, and nothing computes `IExprInfo` values.
- No mechanism catalogues come with the package. `arbordesk.mechanism.catalogues`
  starts empty, and you must fill it with `MechanismInfo` entries before calling
  `make_mechanism()`.

## Running the tests

```
pip install .[test]
pytest
```