"""Pixela command line — inspect graphs and record pixels from a shell or cron.

Usage:
    python -m pixela_cli.main graphs
    python -m pixela_cli.main record steps 8123 --date 2024-03-05
    python -m pixela_cli.main increment steps
    python -m pixela_cli.main pixels steps --from 2024-01-01 --to 2024-03-31
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import Callable, Optional, Sequence

from pixela_client import GraphColor, GraphType, PixelaClient, PixelaClientError
from pixela_client.enums import DisplayMode, SufficientType
from pixela_client.wire import parse_quantity

from pixela_cli import config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def _enum_arg(enum_cls: type) -> Callable[[str], object]:
    """argparse ``type=`` converter from a member name (case-insensitive)."""

    def convert(value: str) -> object:
        try:
            return enum_cls[value.upper()]
        except KeyError:
            names = ", ".join(m.name.lower() for m in enum_cls)
            raise argparse.ArgumentTypeError(f"choose from {names}") from None

    convert.__name__ = enum_cls.__name__
    return convert


def _quantity(value: str) -> int | float:
    try:
        return parse_quantity(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_graphs(client: PixelaClient, args: argparse.Namespace) -> None:
    for graph in client.graphs.list():
        print(f"{graph.id}\t{graph.name}\t{graph.unit}\t{graph.type.name.lower()}")


def _cmd_create_graph(client: PixelaClient, args: argparse.Namespace) -> None:
    response = client.graphs.create(
        args.graph_id,
        args.name,
        args.unit,
        args.type,
        args.color,
        timezone=args.timezone,
        self_sufficient=args.self_sufficient,
    )
    print(response.message)
    print(client.graphs.details(args.graph_id))


def _cmd_record(client: PixelaClient, args: argparse.Namespace) -> None:
    response = client.pixels.create(
        args.graph_id, args.date, args.quantity, optional_data=args.optional_data
    )
    print(response.message)


def _cmd_show_pixel(client: PixelaClient, args: argparse.Namespace) -> None:
    pixel = client.pixels.show(args.graph_id, args.date)
    print(f"{pixel.date.isoformat()}\t{pixel.quantity}")
    if pixel.optional_data:
        print(pixel.optional_data)


def _cmd_increment(client: PixelaClient, args: argparse.Namespace) -> None:
    print(client.pixels.increment(args.graph_id).message)


def _cmd_decrement(client: PixelaClient, args: argparse.Namespace) -> None:
    print(client.pixels.decrement(args.graph_id).message)


def _cmd_stats(client: PixelaClient, args: argparse.Namespace) -> None:
    stats = client.graphs.stats(args.graph_id)
    summary = {
        "totalPixelsCount": stats.total_pixels_count,
        "maxQuantity": stats.max_quantity,
        "minQuantity": stats.min_quantity,
        "totalQuantity": stats.total_quantity,
        "avgQuantity": stats.avg_quantity,
        "todaysQuantity": stats.todays_quantity,
    }
    if stats.max_date is not None:
        summary["maxDate"] = stats.max_date.isoformat()
    if stats.min_date is not None:
        summary["minDate"] = stats.min_date.isoformat()
    print(json.dumps(summary, indent=2))


def _cmd_pixels(client: PixelaClient, args: argparse.Namespace) -> None:
    for pixel_date in client.graphs.pixels(args.graph_id, from_=args.from_, to=args.to):
        print(pixel_date.isoformat())


def _cmd_svg(client: PixelaClient, args: argparse.Namespace) -> None:
    svg = client.graphs.show(args.graph_id, date=args.date, mode=args.mode)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
        logger.info("Wrote SVG for %s to %s", args.graph_id, args.output)
    else:
        print(svg)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pixela command line")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("graphs", help="List graph definitions")
    p.set_defaults(handler=_cmd_graphs)

    p = sub.add_parser("create-graph", help="Create a graph definition")
    p.add_argument("graph_id")
    p.add_argument("name")
    p.add_argument("unit")
    p.add_argument("--type", type=_enum_arg(GraphType), default=GraphType.INT)
    p.add_argument("--color", type=_enum_arg(GraphColor), default=GraphColor.GREEN)
    p.add_argument("--timezone")
    p.add_argument("--self-sufficient", type=_enum_arg(SufficientType))
    p.set_defaults(handler=_cmd_create_graph)

    p = sub.add_parser("record", help="Record a quantity for a day")
    p.add_argument("graph_id")
    p.add_argument("quantity", type=_quantity)
    p.add_argument("--date", type=_iso_date, default=None, help="Default: today")
    p.add_argument("--optional-data")
    p.set_defaults(handler=_cmd_record)

    p = sub.add_parser("show-pixel", help="Show one day's pixel")
    p.add_argument("graph_id")
    p.add_argument("--date", type=_iso_date, default=None, help="Default: today")
    p.set_defaults(handler=_cmd_show_pixel)

    p = sub.add_parser("increment", help="Increment today's pixel")
    p.add_argument("graph_id")
    p.set_defaults(handler=_cmd_increment)

    p = sub.add_parser("decrement", help="Decrement today's pixel")
    p.add_argument("graph_id")
    p.set_defaults(handler=_cmd_decrement)

    p = sub.add_parser("stats", help="Show graph statistics")
    p.add_argument("graph_id")
    p.set_defaults(handler=_cmd_stats)

    p = sub.add_parser("pixels", help="List dates with a pixel")
    p.add_argument("graph_id")
    p.add_argument("--from", dest="from_", type=_iso_date)
    p.add_argument("--to", type=_iso_date)
    p.set_defaults(handler=_cmd_pixels)

    p = sub.add_parser("svg", help="Fetch the SVG rendering of a graph")
    p.add_argument("graph_id")
    p.add_argument("--date", type=_iso_date)
    p.add_argument("--mode", type=_enum_arg(DisplayMode))
    p.add_argument("-o", "--output", help="Write to a file instead of stdout")
    p.set_defaults(handler=_cmd_svg)

    return parser


def _make_client(timeout: Optional[float] = None) -> PixelaClient:
    return PixelaClient(
        username=config.PIXELA_USERNAME,
        token=config.PIXELA_TOKEN,
        base_url=config.PIXELA_BASE_URL,
        timeout=timeout,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # record and show-pixel default to today.
    if getattr(args, "date", None) is None and args.command in ("record", "show-pixel"):
        args.date = date.today()

    if not config.PIXELA_USERNAME or not config.PIXELA_TOKEN:
        logger.error("PIXELA_USERNAME and PIXELA_TOKEN must be set")
        return EXIT_CONFIG_ERROR

    try:
        timeout = float(config.PIXELA_TIMEOUT) if config.PIXELA_TIMEOUT else None
    except ValueError:
        logger.error("PIXELA_TIMEOUT must be a number, got %r", config.PIXELA_TIMEOUT)
        return EXIT_CONFIG_ERROR

    with _make_client(timeout) as client:
        try:
            args.handler(client, args)
        except PixelaClientError as exc:
            logger.error("%s failed: %s", args.command, exc)
            return EXIT_API_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
