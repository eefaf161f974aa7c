"""
Tests for gene vector encoding and decoding.
"""

import pytest
import numpy as np

from neuroevo.core.exceptions import LengthMismatchError, ValidationError
from neuroevo.network import NeuralNetwork, Topology, decode, encode

pytestmark = [
    pytest.mark.unit,
    pytest.mark.network
]


@pytest.fixture
def genes():
    return np.arange(1, 14, dtype=np.float64) / 100.0


class TestRoundTrip:
    """decode followed by encode reproduces the gene vector."""

    def test_thirteen_gene_round_trip(self, topology, genes):
        network = decode(genes, topology)
        np.testing.assert_array_equal(encode(network), genes)

    def test_round_trip_from_list(self, topology):
        genes = [0.5] * 13
        assert encode(decode(genes, topology)).tolist() == genes

    def test_encode_zero_network(self, topology):
        np.testing.assert_array_equal(encode(NeuralNetwork(topology)), np.zeros(13))

    @pytest.mark.parametrize("shape", [(1, 1, 1), (2, 3, 1), (4, 2, 3), (5, 7, 2)])
    def test_round_trip_across_topologies(self, shape):
        topology = Topology(*shape)
        genes = np.random.default_rng(sum(shape)).random(topology.param_count)

        np.testing.assert_array_equal(encode(decode(genes, topology)), genes)

    @pytest.mark.parametrize("shape", [(1, 1, 1), (4, 2, 3), (5, 7, 2)])
    def test_network_survives_encode_decode(self, shape):
        topology = Topology(*shape)
        rng = np.random.default_rng(len(shape) + shape[1])
        network = NeuralNetwork(topology)
        for layer in network.layers[1:]:
            for neuron in layer.neurons:
                neuron.weights = rng.random(neuron.input_count)
                neuron.bias = rng.random()

        rebuilt = decode(encode(network), topology)

        for layer, rebuilt_layer in zip(network.layers[1:], rebuilt.layers[1:]):
            assert len(rebuilt_layer) == len(layer)
            for neuron, rebuilt_neuron in zip(layer.neurons, rebuilt_layer.neurons):
                np.testing.assert_array_equal(rebuilt_neuron.weights, neuron.weights)
                assert rebuilt_neuron.bias == neuron.bias


class TestGeneLayout:
    """Genes are laid out neuron by neuron: weights then bias."""

    def test_hidden_and_output_layout(self, topology, genes):
        network = decode(genes, topology)

        hidden = network.hidden_layer.neurons
        np.testing.assert_array_equal(hidden[0].weights, [0.01, 0.02])
        assert hidden[0].bias == 0.03
        np.testing.assert_array_equal(hidden[1].weights, [0.04, 0.05])
        assert hidden[1].bias == 0.06
        np.testing.assert_array_equal(hidden[2].weights, [0.07, 0.08])
        assert hidden[2].bias == 0.09

        output = network.output_layer.neurons[0]
        np.testing.assert_array_equal(output.weights, [0.10, 0.11, 0.12])
        assert output.bias == 0.13

    def test_decode_copies_genes(self, topology, genes):
        network = decode(genes, topology)
        genes[0] = 99.0
        assert network.hidden_layer.neurons[0].weights[0] == 0.01


class TestLengthMismatch:
    """decode rejects vectors of the wrong length."""

    @pytest.mark.parametrize("length", [0, 12, 14])
    def test_wrong_length(self, topology, length):
        with pytest.raises(LengthMismatchError):
            decode(np.zeros(length), topology)

    def test_two_dimensional_genes(self, topology):
        with pytest.raises(ValidationError):
            decode(np.zeros((1, 13)), topology)

    def test_other_topology(self, genes):
        with pytest.raises(LengthMismatchError) as exc_info:
            decode(genes, Topology(3, 3, 1))
        assert "parameter count 16" in str(exc_info.value)
