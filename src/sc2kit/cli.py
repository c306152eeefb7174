"""sc2kit command line - inspect SimCity 2000 city saves.

Usage:
    sc2kit validate <city.sc2> [<city.sc2> ...]
    sc2kit inspect <city.sc2> [--quick]
    sc2kit segments <city.sc2>
    sc2kit stats <city.sc2>
    sc2kit labels <city.sc2>
    sc2kit tile <city.sc2> <x> <y>
    sc2kit map <city.sc2> <layer>

Output formats (append to any command):
    --format table    (default, human-readable)
    --format json     (machine-readable)
"""

import sys
import json
import logging
import argparse
from typing import Optional

from .entities import MapLayer, MiscStatistic, TILES_PER_SIDE
from .formats.sc2 import CityDecodeError, Sc2File, check_container, InvalidContainerError


def load_city(path: str, quick: bool = False) -> Sc2File:
    """Decode a city file. Exits on failure."""
    try:
        return Sc2File.read(path, quick=quick)
    except OSError as e:
        print(f"ERROR: Cannot open {path}: {e}", file=sys.stderr)
        sys.exit(1)
    except CityDecodeError as e:
        print(f"ERROR: {path}: {e}", file=sys.stderr)
        sys.exit(1)


def emit(args, data: dict, table: str):
    """Print either the JSON form of ``data`` or the prepared table."""
    if args.format == "json":
        print(json.dumps(data, indent=2))
    else:
        print(table)


def _statistic_or_none(sc2: Sc2File, key: MiscStatistic) -> Optional[int]:
    city = sc2.city
    return city.get_statistic(key) if city.has_statistic(key) else None


def cmd_validate(args):
    """Check header and size of one or more files."""
    results = {}
    for path in args.files:
        try:
            with open(path, 'rb') as f:
                check_container(f)
            results[path] = "OK"
        except InvalidContainerError as e:
            results[path] = f"INVALID ({e})"
        except OSError as e:
            results[path] = f"INVALID ({e.strerror})"

    table = "\n".join(f"  {path}: {status}" for path, status in results.items())
    emit(args, {"files": results}, table)

    if any(status != "OK" for status in results.values()):
        sys.exit(1)


def cmd_inspect(args):
    """Show the headline facts about a city."""
    sc2 = load_city(args.file, quick=args.quick)
    city = sc2.city
    funds = _statistic_or_none(sc2, MiscStatistic.AVAILABLE_FUNDS)
    founded = _statistic_or_none(sc2, MiscStatistic.YEAR_OF_FOUNDING)
    size = _statistic_or_none(sc2, MiscStatistic.CITY_SIZE)

    data = {
        "file": args.file,
        "mode": "quick" if args.quick else "full",
        "city_name": city.city_name,
        "mayor_name": city.mayor_name,
        "available_funds": funds,
        "year_of_founding": founded,
        "city_size": size,
        "segments": len(sc2.segments),
        "maps": [layer.name.lower() for layer in city.map_layers],
        "signs": len(city.sign_texts),
    }

    lines = [f"{'=' * 50}", f"  {city.city_name or '<unnamed>'}", f"{'=' * 50}"]
    lines.append(f"  Mayor:    {city.mayor_name or '-'}")
    lines.append(f"  Founded:  {founded if founded is not None else '-'}")
    lines.append(f"  Funds:    {f'${funds:,}' if funds is not None else '-'}")
    lines.append(f"  Size:     {size if size is not None else '-'}")
    lines.append(f"  Segments: {len(sc2.segments)}  |  Maps: {len(city.map_layers)}  |  Signs: {len(city.sign_texts)}")
    emit(args, data, "\n".join(lines))


def cmd_segments(args):
    """List the container layout."""
    sc2 = load_city(args.file)
    data = {
        "declared_length": sc2.declared_length,
        "segments": [
            {
                "name": s.name,
                "offset": s.offset,
                "length": s.length,
                "decoded": s.decoded,
                "decompressed_length": s.decompressed_length,
            }
            for s in sc2.segments
        ],
    }

    lines = [f"  {'NAME':<6} {'OFFSET':>8} {'LENGTH':>8} {'UNPACKED':>9}  STATE", f"  {'─' * 44}"]
    for s in sc2.segments:
        unpacked = s.decompressed_length if s.decompressed_length is not None else "-"
        lines.append(f"  {s.name:<6} {s.offset:>#8x} {s.length:>8} {unpacked:>9}  "
                     f"{'decoded' if s.decoded else 'skipped'}")
    emit(args, data, "\n".join(lines))


def cmd_stats(args):
    """Show every named MISC statistic."""
    sc2 = load_city(args.file, quick=True)
    stats = {key.value: value for key, value in sc2.city.statistics.items()}

    lines = [f"  {'STATISTIC':<28} VALUE", f"  {'─' * 40}"]
    for name, value in stats.items():
        lines.append(f"  {name:<28} {value:>,}")
    emit(args, {"statistics": stats}, "\n".join(lines))


def cmd_labels(args):
    """Show the mayor and all sign texts."""
    sc2 = load_city(args.file)
    city = sc2.city
    data = {"mayor_name": city.mayor_name, "signs": city.sign_texts}

    lines = [f"  Mayor: {city.mayor_name or '-'}"]
    if city.sign_texts:
        lines.append(f"\n  SIGNS")
        lines.append(f"  {'─' * 30}")
        lines.extend(f"  {text}" for text in city.sign_texts)
    emit(args, data, "\n".join(lines))


def cmd_tile(args):
    """Show all attributes of one tile."""
    if not (0 <= args.x < TILES_PER_SIDE and 0 <= args.y < TILES_PER_SIDE):
        print(f"ERROR: Tile ({args.x}, {args.y}) is outside 0..{TILES_PER_SIDE - 1}", file=sys.stderr)
        sys.exit(1)

    sc2 = load_city(args.file)
    city = sc2.city
    tile = city.get_tile(args.x, args.y)
    data = tile.to_dict()
    for layer in city.map_layers:
        data.setdefault("maps", {})[layer.name.lower()] = int(city.get_map_grid(layer)[args.y, args.x])

    lines = [f"  Tile ({tile.x}, {tile.y})", f"  {'─' * 30}"]
    lines.append(f"  Altitude:    {tile.altitude}m")
    lines.append(f"  Zone:        {tile.zone.name.lower()}")
    lines.append(f"  Underground: {tile.underground.value}")
    set_flags = [name for name, on in data["flags"].items() if on]
    lines.append(f"  Flags:       {', '.join(set_flags) or '-'}")
    corners = [name for name, on in data["corners"].items() if on]
    lines.append(f"  Corners:     {', '.join(corners) or '-'}")
    code = tile.building_code
    lines.append(f"  Building:    {f'{code:#04x}' if code is not None else '-'}")
    for name, value in data.get("maps", {}).items():
        lines.append(f"  {name + ':':<13}{value}")
    emit(args, data, "\n".join(lines))


def cmd_map(args):
    """Summarise one integer map."""
    try:
        layer = MapLayer.resolve(args.layer)
    except KeyError:
        choices = ", ".join(layer.name.lower() for layer in MapLayer)
        print(f"ERROR: Unknown layer '{args.layer}'. Choose from: {choices}", file=sys.stderr)
        sys.exit(1)

    sc2 = load_city(args.file)
    if not sc2.city.has_map(layer):
        print(f"ERROR: {args.file} has no {layer.value} segment", file=sys.stderr)
        sys.exit(1)

    values = sc2.city.get_map(layer)
    data = {
        "layer": layer.name.lower(),
        "segment": layer.value,
        "min": int(values.min()),
        "max": int(values.max()),
        "mean": round(float(values.mean()), 3),
        "nonzero_tiles": int((values != 0).sum()),
    }
    table = "\n".join(f"  {key:<14} {value}" for key, value in data.items())
    emit(args, data, table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sc2kit",
        description="Inspect SimCity 2000 city save files (.sc2).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--format", choices=["table", "json"],
                        default="table", help="Output format (default: table)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoding details")

    sub = parser.add_subparsers(dest="command", help="Command to run")

    # validate
    p = sub.add_parser("validate", help="Check that files look like SC2 cities")
    p.add_argument("files", nargs="+", help="Paths to .sc2 files")

    # inspect
    p = sub.add_parser("inspect", help="Show city name, mayor and key figures")
    p.add_argument("file", help="Path to .sc2 file")
    p.add_argument("--quick", action="store_true", help="Only decode name, statistics and mayor")

    # segments
    p = sub.add_parser("segments", help="List the segments in the file")
    p.add_argument("file", help="Path to .sc2 file")

    # stats
    p = sub.add_parser("stats", help="Show named statistics")
    p.add_argument("file", help="Path to .sc2 file")

    # labels
    p = sub.add_parser("labels", help="Show mayor name and sign texts")
    p.add_argument("file", help="Path to .sc2 file")

    # tile
    p = sub.add_parser("tile", help="Show one tile")
    p.add_argument("file", help="Path to .sc2 file")
    p.add_argument("x", type=int, help=f"Column 0-{TILES_PER_SIDE - 1}")
    p.add_argument("y", type=int, help=f"Row 0-{TILES_PER_SIDE - 1}")

    # map
    p = sub.add_parser("map", help="Summarise an integer map layer")
    p.add_argument("file", help="Path to .sc2 file")
    p.add_argument("layer", help="Layer name (pollution, crime, ...) or segment tag (XPLT, ...)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(0)

    commands = {
        "validate": cmd_validate,
        "inspect": cmd_inspect,
        "segments": cmd_segments,
        "stats": cmd_stats,
        "labels": cmd_labels,
        "tile": cmd_tile,
        "map": cmd_map,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        cmd_func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
