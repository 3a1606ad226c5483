# src/ncs_color_engine/demo.py
import argparse
import json
import logging
import sys

from .catalog.notation import parse_code


def _entry_payload(entry, distance=None):
    from .color.distance import get_match_confidence

    payload = entry._asdict()
    if distance is not None:
        payload["distance"] = round(distance, 4)
        payload["confidence"] = get_match_confidence(distance)
    return payload


def run(query, top_k=1):
    """Resolve a hex colour or an NCS code to catalog entries (JSON-ready dict)."""
    from .matching.matcher import find_nearest, snap_to_standard

    if parse_code(query) is not None:
        snapped = snap_to_standard(query)
        if snapped is not None:
            return {
                "query": query,
                "mode": "snap",
                "matches": [_entry_payload(snapped.snapped, snapped.distance)],
            }

    matches = find_nearest(query, top_k)
    return {
        "query": query,
        "mode": "nearest",
        "matches": [_entry_payload(m.entry, m.distance) for m in matches],
    }


def main(argv=None):
    """CLI demo: snap an NCS code or find the nearest catalog colours to a hex value."""
    parser = argparse.ArgumentParser(
        prog="ncs-demo",
        description="Match a hex colour or NCS code against the generated NCS catalog.",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default="#FFFFFF",
        help='Hex colour (e.g. "#FF5500") or NCS code (e.g. "S 1050-Y90R")',
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--top-k",
        type=int,
        default=1,
        dest="top_k",
        help="Number of nearest entries to return for hex input",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        result = run(args.query, top_k=args.top_k)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not result["matches"]:
        print(f"No catalog match for {args.query!r}", file=sys.stderr)
        sys.exit(2)
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
