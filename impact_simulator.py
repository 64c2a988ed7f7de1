#!/usr/bin/env python3
"""
impact_simulator.py

Load near-Earth asteroids (from a saved NeoWs JSON file or straight from the
feed API), print them, optionally merge the first two, and let a planet
absorb the impact.

Usage example:
  python impact_simulator.py --input feed.json --planet Earth --combine
  python impact_simulator.py --start 2025-10-01 --end 2025-10-05 --limit 10
"""
import argparse
import logging
import sys

from asteroid import combine
from body_report import format_asteroid_table, format_close_approaches, format_planet
from neo_ws_api import fetch_neo_data, iter_neo_records, load_asteroids, load_feed_file
from planet_catalog import build_planet, planet_names

logger = logging.getLogger(__name__)


def non_negative_int(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return n


def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument('--input', help='NeoWs feed or record JSON file')
    source.add_argument('--start', help='Feed start date (YYYY-MM-DD)')
    p.add_argument('--end', help='Feed end date (YYYY-MM-DD), defaults to --start')
    p.add_argument('--planet', default='Earth', choices=planet_names(), type=str.capitalize)
    p.add_argument('--combine', action='store_true', help='Merge the first two asteroids before impact')
    p.add_argument('--limit', type=non_negative_int, default=0, help='Only keep the first N asteroids')
    p.add_argument('--strict', action='store_true', help='Abort on the first invalid record')
    p.add_argument('--verbose', action='store_true', help='Debug logging and per-asteroid approach tables')
    return p.parse_args(argv)


def load_records(args):
    if args.input:
        return load_feed_file(args.input)
    feed = fetch_neo_data(args.start, args.end or args.start)
    return list(iter_neo_records(feed))


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(module)s - %(message)s')

    asteroids = load_asteroids(load_records(args), skip_invalid=not args.strict)
    if args.limit:
        asteroids = asteroids[:args.limit]
    if not asteroids:
        print('No asteroids could be loaded.')
        return 1

    print(format_asteroid_table(asteroids))
    if args.verbose:
        for a in asteroids:
            print(format_close_approaches(a))

    impactor = asteroids[0]
    if args.combine:
        if len(asteroids) < 2:
            logger.warning('--combine needs at least two asteroids; using %s alone', impactor.name)
        else:
            impactor = combine(asteroids[0], asteroids[1])
            print('\nCombined asteroid:')
            print(format_asteroid_table([impactor]))

    planet = build_planet(args.planet)
    print('\nBefore impact:')
    print(format_planet(planet))
    print(f'\n{impactor.name} strikes {planet.name} with {impactor.calculate_impact_energy():,.2f} Mt TNT')
    planet.absorb_impact(impactor)
    print('\nAfter impact:')
    print(format_planet(planet))
    return 0


if __name__ == '__main__':
    sys.exit(main())
