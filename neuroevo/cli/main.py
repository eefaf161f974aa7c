import sys
import argparse

from ..core.config import Config
from ..core.exceptions import NeuroevoException
from ..network import Topology


def topology_command(args):
    parser = argparse.ArgumentParser(
        prog="neuroevo topology",
        description="Show the gene vector length of a network topology"
    )
    parser.add_argument('--config', '-c', help='Path to configuration file (JSON)')
    parser.add_argument('--inputs', type=int, help='Input layer size')
    parser.add_argument('--hidden', type=int, help='Hidden layer size')
    parser.add_argument('--outputs', type=int, help='Output layer size')
    parsed_args = parser.parse_args(args)

    config = Config(config_file=parsed_args.config)
    config.override(
        "topology",
        inputs=parsed_args.inputs,
        hidden=parsed_args.hidden,
        outputs=parsed_args.outputs,
    )
    topology = Topology(config.topology.inputs, config.topology.hidden, config.topology.outputs)

    print(f"Topology: {topology}")
    print(f"Hidden layer parameters: {(topology.inputs + 1) * topology.hidden}")
    print(f"Output layer parameters: {(topology.hidden + 1) * topology.outputs}")
    print(f"Gene vector length: {topology.param_count}")
    return topology


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="NEUROEVO unified CLI: evolve, topology"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Subcommand options are forwarded untouched, so subparsers carry no
    # arguments of their own (and no -h, which the subcommand handles)
    subparsers.add_parser("evolve", add_help=False, help="Evolve network weights against a dataset")
    subparsers.add_parser("topology", add_help=False, help="Show parameter counts for a topology")

    args, command_args = parser.parse_known_args(argv)

    try:
        if args.command == "evolve":
            from .evolve import evolve_command
            evolve_command(command_args)
        elif args.command == "topology":
            topology_command(command_args)
        else:
            parser.print_help()
            sys.exit(1)
    except NeuroevoException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
