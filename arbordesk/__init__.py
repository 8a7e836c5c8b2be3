"""Model state for single neuron cells: component stores, label definitions, mechanisms, probes, stimuli and simulation settings."""

__version__ = "0.11.2"