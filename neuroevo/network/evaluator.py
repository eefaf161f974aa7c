"""
Forward evaluation of a NeuralNetwork.

Each non-input neuron takes the bias plus the weighted sum of the previous
layer's values. No activation function is applied: the network is a purely
linear map from inputs to outputs.
"""

from typing import Sequence

import numpy as np

from ..core.exceptions import LengthMismatchError
from .neural_network import NeuralNetwork


def evaluate(network: NeuralNetwork, inputs: Sequence[float]) -> np.ndarray:
    """
    Run one forward pass.

    Args:
        network: Network to evaluate; neuron values are overwritten
        inputs: One value per input neuron

    Returns:
        Output layer values in neuron order

    Raises:
        LengthMismatchError: If the number of inputs differs from the input layer size
    """
    inputs = np.asarray(inputs, dtype=np.float64).ravel()
    input_layer = network.input_layer
    if len(inputs) != len(input_layer):
        raise LengthMismatchError(
            f"Expected {len(input_layer)} inputs, got {len(inputs)}"
        )

    for neuron, value in zip(input_layer.neurons, inputs):
        neuron.value = float(value)

    for previous, layer in zip(network.layers, network.layers[1:]):
        previous_values = previous.values
        for neuron in layer.neurons:
            neuron.value = float(neuron.bias + np.dot(previous_values, neuron.weights))

    return network.outputs
