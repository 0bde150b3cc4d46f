"""
Command Line Interface for gridnav.
Provides a CLI that delegates all orchestration to SimulationRunner.
"""

import argparse
import sys
from typing import Dict, Any

from ..core.world import GridPosition
from ..sim import SimulationRunner


def create_parser():
    """Create argument parser for CLI"""
    parser = argparse.ArgumentParser(
        prog='gridnav',
        description="Grid pathfinding and path following",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
        Examples:
        %(prog)s run maps/test_map.json --ticks 300 --trace results/trace.csv --plot results/run.png
        %(prog)s run maps/test_map.json --override navigation.max_iterations=250 simulation.tick_delta=0.05
        %(prog)s path maps/test_map.json --start 0,0,0 --target 3,3,0
        """
    )
    subparsers = parser.add_subparsers(dest='command', help='Command')

    # Run a map
    run_parser = subparsers.add_parser('run', help='Run the tick loop on a map')
    run_parser.add_argument('map', help='JSON map file')
    run_parser.add_argument('--ticks', type=int, help='Maximum number of ticks (default from config)')
    run_parser.add_argument('--dt', type=float, help='Seconds per tick (default from config)')
    run_parser.add_argument('--config', help='YAML config merged over the defaults')
    run_parser.add_argument('--override', action='append', nargs='+',
                            help='Override config parameter using dot notation (e.g., navigation.max_iterations=50)')
    run_parser.add_argument('--trace', help='Write the position trace to this CSV file')
    run_parser.add_argument('--plot', help='Write a top-down plot to this image file')
    run_parser.add_argument('--metadata', action='store_true', help='Save config and summary to log_dir/metadata.json')
    run_parser.add_argument('--log-level', help='Logging level (default from config)')
    run_parser.add_argument('--log-file', action='store_true', help='Also log to log_dir/simulation.log')

    # Single search
    path_parser = subparsers.add_parser('path', help='Compute a single route on a map')
    path_parser.add_argument('map', help='JSON map file')
    path_parser.add_argument('--start', required=True, type=GridPosition.parse, help='Start cell as x,y[,layer]')
    path_parser.add_argument('--target', required=True, type=GridPosition.parse, help='Target cell as x,y[,layer]')
    path_parser.add_argument('--config', help='YAML config merged over the defaults')
    path_parser.add_argument('--override', action='append', nargs='+',
                             help='Override config parameter using dot notation')
    path_parser.add_argument('--log-level', default='WARNING', help='Logging level')

    return parser


def parse_overrides(override_args) -> Dict[str, Any]:
    """Parse CLI override arguments into parameter dictionary"""
    overrides = {}

    if not override_args:
        return overrides

    for group in override_args:
        items = group if isinstance(group, list) else [group]
        for override in items:
            if '=' not in override:
                continue

            key, value = override.split('=', 1)

            try:
                if value.lower() in ('true', 'false'):
                    value = value.lower() == 'true'
                elif '.' in value or 'e' in value.lower():
                    value = float(value)
                else:
                    value = int(value)
            except ValueError:
                pass  # Keep as string

            overrides[key] = value

    return overrides


def main(argv=None):
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        overrides = parse_overrides(getattr(args, 'override', None))

        if args.command == 'run':
            if args.dt is not None:
                overrides['simulation.tick_delta'] = args.dt
            runner = SimulationRunner(args.config, overrides)
            runner.setup_logging(args.log_level, log_to_file=args.log_file)

            summary = runner.run_map(args.map, num_ticks=args.ticks,
                                     trace_path=args.trace, plot_path=args.plot)
            if args.metadata:
                runner.save_metadata(summary)

            print(f"Run completed after {summary['ticks']} ticks ({summary['elapsed']:.2f}s simulated)")
            for agent_id, info in summary['agents'].items():
                print(f"  {agent_id}: cell {info['cell']}, {info['remaining']} hops remaining")

        elif args.command == 'path':
            runner = SimulationRunner(args.config, overrides)
            runner.setup_logging(args.log_level)

            outcome, route = runner.find_route(args.map, args.start, args.target)
            if route or outcome.attaches_path:
                print(f"{outcome.value}: " + " -> ".join(str(p) for p in route))
            else:
                print(f"no path ({outcome.value})")

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
