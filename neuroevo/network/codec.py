"""
Conversion between a NeuralNetwork and its flat gene vector.

Genes are laid out layer by layer, neuron by neuron; each neuron contributes
its weights in input order followed by its bias. Input neurons contribute
nothing. encode and decode must walk the network in exactly this order.
"""

from typing import Sequence

import numpy as np

from ..core.exceptions import LengthMismatchError, ValidationError
from .neural_network import NeuralNetwork, Topology


def encode(network: NeuralNetwork) -> np.ndarray:
    """
    Flatten the weights and biases of a network into a gene vector.

    Args:
        network: Network to flatten

    Returns:
        Gene vector of length ``network.topology.param_count``
    """
    genes = np.empty(network.topology.param_count, dtype=np.float64)
    index = 0

    for layer in network.layers[1:]:
        for neuron in layer.neurons:
            count = neuron.input_count
            genes[index:index + count] = neuron.weights
            index += count
            genes[index] = neuron.bias
            index += 1

    return genes


def decode(genes: Sequence[float], topology: Topology) -> NeuralNetwork:
    """
    Build a network of the given topology from a gene vector.

    Args:
        genes: Gene vector laid out as produced by :func:`encode`
        topology: Shape of the network to build

    Returns:
        New network whose weights and biases are copies of the genes

    Raises:
        LengthMismatchError: If the vector length differs from the parameter count
    """
    genes = np.asarray(genes, dtype=np.float64)
    if genes.ndim != 1:
        raise ValidationError(f"Gene vector must be one-dimensional, got {genes.ndim} dimensions")
    if len(genes) != topology.param_count:
        raise LengthMismatchError(
            f"Gene vector length {len(genes)} does not match topology {topology} "
            f"parameter count {topology.param_count}"
        )

    network = NeuralNetwork(topology)
    index = 0

    for layer in network.layers[1:]:
        for neuron in layer.neurons:
            count = neuron.input_count
            neuron.weights = genes[index:index + count].copy()
            index += count
            neuron.bias = float(genes[index])
            index += 1

    return network
