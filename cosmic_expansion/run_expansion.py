#!/usr/bin/env python3
"""
Expansion table command line tool

Builds a model from a survey preset plus overrides and writes either the
age of the universe or an expansion table as JSON.

Usage:
    python -m cosmic_expansion.run_expansion --age
    python -m cosmic_expansion.run_expansion --stretch 1090 0.5 --steps 20 --exponential
    python -m cosmic_expansion.run_expansion --params params.json -o table.json
"""

import argparse
import json
import logging
import math
import sys
from dataclasses import asdict
from typing import Optional, Sequence

from .expansion import ExpansionInputs
from .model import CosmicExpansionModel
from .utils.config import ModelConfig
from .utils.constants import SURVEYS


logger = logging.getLogger(__name__)

# Command line flags that map onto ModelConfig fields
PARAMETER_OPTIONS = (
    'h0',
    'omega0',
    'omega_lambda0',
    'zeq',
    'temperature0',
)


def to_json_value(value):
    """Convert floats that JSON cannot represent into strings."""
    if isinstance(value, float):
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if math.isnan(value):
            return 'NaN'
        return value
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


def build_config(args: argparse.Namespace) -> ModelConfig:
    """Merge the parameter file (if any) with command line overrides."""
    options = {}
    if args.params:
        with open(args.params) as f:
            options.update(json.load(f))

    if args.survey is not None:
        options['survey'] = args.survey
    for name in PARAMETER_OPTIONS:
        value = getattr(args, name)
        if value is not None:
            options[name] = value

    return ModelConfig.from_dict(options)


def run(args: argparse.Namespace) -> dict:
    """Compute what the arguments ask for."""
    model = CosmicExpansionModel(build_config(args))
    output = {'parameters': asdict(model.params)}

    if args.age:
        output['age'] = model.calculate_age()
        logger.info('Age of the universe: %.4f Gyr', output['age'])
        return output

    inputs = ExpansionInputs(
        stretch=args.stretch,
        steps=args.steps,
        exponential=args.exponential,
        include_infinity=args.include_infinity,
    )
    results = model.calculate_expansion(inputs)
    logger.info('Calculated %d expansion rows', len(results))
    output['results'] = [result.as_dict() for result in results]
    return output


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Tabulate the expansion history of an FLRW universe'
    )
    parser.add_argument(
        '--survey', '-s',
        default=None,
        help=f"Survey preset ({', '.join(SURVEYS)})"
    )
    parser.add_argument(
        '--params', '-p',
        default=None,
        help='JSON file with model options'
    )
    parser.add_argument('--h0', type=float, default=None, help='Hubble constant [km/s/Mpc]')
    parser.add_argument('--omega0', type=float, default=None, help='Total density parameter')
    parser.add_argument(
        '--omega-lambda0', dest='omega_lambda0', type=float, default=None,
        help='Dark energy density parameter'
    )
    parser.add_argument('--zeq', type=float, default=None, help='Redshift of matter-radiation equality')
    parser.add_argument('--temperature0', type=float, default=None, help='CMB temperature today [K]')
    parser.add_argument(
        '--stretch',
        type=float,
        nargs='+',
        default=[1.0],
        help='A single stretch value, or upper and lower bounds of a range'
    )
    parser.add_argument('--steps', type=int, default=8, help='Intervals in a stretch range')
    parser.add_argument(
        '--exponential',
        action='store_true',
        help='Space range values geometrically'
    )
    parser.add_argument(
        '--include-infinity',
        action='store_true',
        help='Add s = inf to a stretch range'
    )
    parser.add_argument(
        '--age',
        action='store_true',
        help='Only calculate the age of the universe'
    )
    parser.add_argument(
        '--output', '-o',
        default=None,
        help='Output JSON file (default: stdout)'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Only log warnings'
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    try:
        output = run(args)
    except ValueError as e:
        logger.error('%s', e)
        return 2

    text = json.dumps(to_json_value(output), indent=2)
    if args.output:
        with open(args.output, 'w') as f:
            f.write(text + '\n')
        logger.info('Results saved to: %s', args.output)
    else:
        print(text)

    return 0


if __name__ == '__main__':
    sys.exit(main())
