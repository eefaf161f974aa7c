"""
Network structure, gene codec and forward evaluation.
"""

from .neural_network import Topology, Neuron, NeuronLayer, NeuralNetwork
from .codec import encode, decode
from .evaluator import evaluate

__all__ = [
    "Topology",
    "Neuron",
    "NeuronLayer",
    "NeuralNetwork",
    "encode",
    "decode",
    "evaluate",
]
