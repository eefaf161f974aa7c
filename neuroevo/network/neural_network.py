"""
Layered feed-forward network structure.

A network always has exactly three layers: a pass-through input layer, one
hidden layer and an output layer. Hidden and output neurons own one weight per
neuron of the preceding layer plus a bias.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Topology:
    """Neuron counts of the input, hidden and output layers."""

    inputs: int
    hidden: int
    outputs: int

    def __post_init__(self):
        for name in ("inputs", "hidden", "outputs"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise ValidationError(f"Topology {name} must be a positive integer, got {value!r}")

    @property
    def layer_sizes(self) -> List[int]:
        return [self.inputs, self.hidden, self.outputs]

    @property
    def param_count(self) -> int:
        """Number of weights and biases, i.e. the gene vector length."""
        return (self.inputs + 1) * self.hidden + (self.hidden + 1) * self.outputs

    def __str__(self) -> str:
        return f"{self.inputs}-{self.hidden}-{self.outputs}"


@dataclass
class Neuron:
    """A single neuron. Input neurons have no weights."""

    value: float = 0.0
    weights: Optional[np.ndarray] = None
    bias: float = 0.0

    @property
    def input_count(self) -> int:
        return 0 if self.weights is None else len(self.weights)


@dataclass
class NeuronLayer:
    neurons: List[Neuron] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.neurons)

    @property
    def values(self) -> np.ndarray:
        return np.array([neuron.value for neuron in self.neurons], dtype=np.float64)


class NeuralNetwork:
    """
    Three-layer network with zero-initialized weights and biases.

    Parameters are filled in by decoding a gene vector
    (see :func:`neuroevo.network.codec.decode`).
    """

    def __init__(self, topology: Topology):
        self.topology = topology
        self.layers: List[NeuronLayer] = [
            self._create_layer(topology.inputs),
            self._create_layer(topology.hidden, topology.inputs),
            self._create_layer(topology.outputs, topology.hidden),
        ]

    @staticmethod
    def _create_layer(neuron_count: int, input_count: Optional[int] = None) -> NeuronLayer:
        if input_count is None:
            return NeuronLayer([Neuron() for _ in range(neuron_count)])
        return NeuronLayer([
            Neuron(weights=np.zeros(input_count, dtype=np.float64))
            for _ in range(neuron_count)
        ])

    @property
    def input_layer(self) -> NeuronLayer:
        return self.layers[0]

    @property
    def hidden_layer(self) -> NeuronLayer:
        return self.layers[1]

    @property
    def output_layer(self) -> NeuronLayer:
        return self.layers[-1]

    @property
    def outputs(self) -> np.ndarray:
        """Output values from the most recent forward pass."""
        return self.output_layer.values

    def __repr__(self) -> str:
        return f"NeuralNetwork(topology={self.topology}, params={self.topology.param_count})"
