from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from binpack3d.config import configure_logging
from binpack3d.errors import ItemTooLargeError
from binpack3d.io.schemas import PackingRequestSchema
from binpack3d.plan import build_plan

logger = logging.getLogger(__name__)


def load_request(path: Path, catalog_preset: Optional[str] = None) -> PackingRequestSchema:
    """Read a packing request JSON file; ``catalog_preset`` replaces any catalog in it."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if catalog_preset:
        data.pop("catalog", None)
        data["catalog_preset"] = catalog_preset
    return PackingRequestSchema.model_validate(data)


def write_plan(plan: dict, path: str = "plan.json") -> None:
    """
    Write a plan dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and
    sort_keys=True, and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Writing plan to {output_path}")
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, sort_keys=True)


def format_plan(plan: dict) -> str:
    lines = [f"{plan['num_items']} items in {plan['num_bins']} bins"]
    for i, b in enumerate(plan["bins"]):
        lines.append(
            f"bin {i} {b['name']} (w: {b['width']}, h: {b['height']}, d: {b['depth']}) "
            f"items: {len(b['items'])} fill: {b['fill_rate'] * 100:.1f}% weight: {b['total_weight']}"
        )
        for j, item in enumerate(b["items"]):
            lines.append(f"  item {j} {item['id']}: pos{tuple(item['position'])} {item['rotation']} dims{tuple(item['dims'])}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="3D bin packing CLI")
    parser.add_argument("--input", required=True, help="Input packing request JSON file")
    parser.add_argument("--output", required=True, help="Output plan JSON file")
    parser.add_argument("--catalog", help="Use this catalog preset instead of the request's catalog")
    parser.add_argument("--print", dest="print_plan", action="store_true", help="Print the packed bins")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from BINPACK3D_LOG_LEVEL)",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        request = load_request(Path(args.input), args.catalog)
        plan = build_plan(request).model_dump()
    except ItemTooLargeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except (ValidationError, ValueError, OSError) as e:
        print(f"error: invalid input: {e}", file=sys.stderr)
        return 1

    write_plan(plan, args.output)
    if args.print_plan:
        print(format_plan(plan))
    print(f"Packed {plan['num_items']} items into {plan['num_bins']} bins, written to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
