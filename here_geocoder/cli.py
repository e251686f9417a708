"""Command line front-end.

    here-geocoder geocode "15 avenue Gambetta, Paris, France" --locale fr-FR
    here-geocoder reverse 48.8632156 2.3887722 --limit 1
    here-geocoder geocode Barcelona --country VE

Results are printed as a JSON array; errors go to stderr with exit code 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional

from .config import LOG_LEVELS, get_config
from .container import Container
from .domain.collection import AddressCollection
from .domain.errors import GeocoderError
from .domain.queries import GeocodeQuery, ReverseQuery
from .observability import configure_logging
from .ports.geocoding import GeocoderPort


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="here-geocoder",
        description="Forward and reverse geocoding with the HERE API.",
    )
    parser.add_argument("--api-key", help="HERE API key (defaults to HERE_API_KEY).")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (defaults to HERE_LOG_LEVEL).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    geocode = subparsers.add_parser("geocode", help="Resolve an address to locations.")
    geocode.add_argument("text", help="Free-text address.")
    geocode.add_argument("--locale", help="Language of the results, e.g. fr-FR.")
    geocode.add_argument("--limit", type=int, help="Maximum number of results.")
    for name in ("country", "state", "county", "city"):
        geocode.add_argument(f"--{name}", help=f"Restrict results to this {name}.")

    reverse = subparsers.add_parser("reverse", help="Resolve coordinates to addresses.")
    reverse.add_argument("latitude", type=float)
    reverse.add_argument("longitude", type=float)
    reverse.add_argument("--locale", help="Language of the results, e.g. fr-FR.")
    reverse.add_argument("--limit", type=int, help="Maximum number of results.")

    return parser


def run(args: argparse.Namespace, geocoder: GeocoderPort) -> AddressCollection:
    """Execute the parsed command against a geocoder."""
    if args.command == "geocode":
        query = GeocodeQuery.create(args.text).with_locale(args.locale)
        for name in ("country", "state", "county", "city"):
            value = getattr(args, name)
            if value is not None:
                query = query.with_data(name, value)
    else:
        query = ReverseQuery.from_coordinates(args.latitude, args.longitude)
        query = query.with_locale(args.locale)

    if args.limit is not None:
        query = query.with_limit(args.limit)

    if isinstance(query, GeocodeQuery):
        return geocoder.geocode_query(query)
    return geocoder.reverse_query(query)


def main(argv: Optional[list[str]] = None, container: Optional[Container] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    observability = config.observability
    if args.log_level:
        observability = observability.model_copy(update={"level": args.log_level})
    configure_logging(observability)

    container = container or Container.create_default(config, api_key=args.api_key)

    try:
        geocoder = container.resolve(GeocoderPort)
        results = run(args, geocoder)
    except GeocoderError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps([address.to_dict() for address in results], indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
