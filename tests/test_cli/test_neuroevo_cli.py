import pytest
import json

from neuroevo.cli import evolve_command, main, topology_command
from neuroevo.network import Topology

pytestmark = [
    pytest.mark.cli
]


def _evolve_args(data_path, *extra):
    return [
        '--data-path', str(data_path),
        '--inputs', 'x1,x2',
        '--targets', 'y',
        '--population-size', '6',
        '--max-generations', '3',
        '--seed', '11',
        '--log-level', 'WARNING',
        '--no-log-file',
        *extra,
    ]


@pytest.mark.unit
def test_topology_command_defaults(clean_env, capsys):
    topology = topology_command([])

    assert topology == Topology(2, 3, 1)
    output = capsys.readouterr().out
    assert "Topology: 2-3-1" in output
    assert "Hidden layer parameters: 9" in output
    assert "Output layer parameters: 4" in output
    assert "Gene vector length: 13" in output


@pytest.mark.unit
def test_topology_command_overrides(clean_env, config_file, capsys):
    topology = topology_command(['--config', str(config_file), '--outputs', '1'])

    # inputs and hidden come from the file
    assert topology == Topology(3, 4, 1)
    assert "Gene vector length: 21" in capsys.readouterr().out


@pytest.mark.integration
def test_evolve_command(clean_env, linear_dataset_csv, capsys):
    summary = evolve_command(_evolve_args(linear_dataset_csv))

    assert summary["total_generations"] == 3
    assert summary["population_size"] == 6
    assert summary["seed"] == 11
    assert len(summary["best_genes"]) == 13

    output = capsys.readouterr().out
    assert "=== Evolution Completed ===" in output
    assert f"Best fitness: {summary['best_fitness']}" in output


@pytest.mark.integration
def test_evolve_command_is_reproducible(clean_env, linear_dataset_csv):
    args = _evolve_args(linear_dataset_csv, '--selection', 'tournament', '--mutation', 'gaussian')
    assert evolve_command(args)["best_genes"] == evolve_command(args)["best_genes"]


@pytest.mark.integration
def test_evolve_command_with_config_file(clean_env, linear_dataset_csv, temp_dir):
    config_path = temp_dir / "evolve.json"
    config_path.write_text(json.dumps({
        "topology": {"hidden": 2},
        "operators": {"selection": "truncate", "crossover": "two_point"},
    }))
    summary = evolve_command(_evolve_args(linear_dataset_csv, '--config', str(config_path)))

    assert summary["topology"] == "2-2-1"
    assert len(summary["best_genes"]) == (2 + 1) * 2 + (2 + 1) * 1


@pytest.mark.unit
def test_evolve_missing_required_argument(clean_env):
    with pytest.raises(SystemExit):
        evolve_command(['--inputs', 'x1', '--targets', 'y'])


@pytest.mark.unit
def test_main_topology(clean_env, capsys):
    main(['topology', '--hidden', '5'])
    assert "Gene vector length: 21" in capsys.readouterr().out


@pytest.mark.unit
def test_main_reports_errors(clean_env, temp_dir, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['evolve', *_evolve_args(temp_dir / "missing.csv")])

    assert exc_info.value.code == 1
    assert "Error: Failed to read dataset" in capsys.readouterr().err


@pytest.mark.unit
def test_main_rejects_odd_population(clean_env, linear_dataset_csv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['evolve', *_evolve_args(linear_dataset_csv, '--population-size', '5')])

    assert exc_info.value.code == 1
    assert "Population size must be an even number" in capsys.readouterr().err


@pytest.mark.unit
def test_main_reports_wrongly_typed_config(clean_env, linear_dataset_csv, temp_dir, capsys):
    config_path = temp_dir / "typed_config.json"
    config_path.write_text(json.dumps({"operators": {"mutation_rate": "0.5"}}))

    with pytest.raises(SystemExit) as exc_info:
        main(['evolve', *_evolve_args(linear_dataset_csv, '--config', str(config_path))])

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Error: Configuration validation failed" in err
    assert "Mutation rate must be between 0 and 1" in err
