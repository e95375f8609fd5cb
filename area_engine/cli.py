from __future__ import annotations

import argparse
import json

from area_engine.config.schemas import BASE_GROUP
from area_engine.core.executors import ShapeAreaExecutor
from area_engine.logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="area_engine total area calculator")
    parser.add_argument("--shapes", required=True, help="Path to shapes.yaml")
    parser.add_argument("--group", default=BASE_GROUP, help="Shape group to sum (default: top-level shapes)")
    parser.add_argument("--json", action="store_true", help="Output result as JSON")
    parser.add_argument("--report", help="Publish the result as a named report")
    parser.add_argument("--notify", help="Notification target for the published report")
    parser.add_argument("--log-level", default="WARNING", help="Log level for stderr output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    executor = ShapeAreaExecutor(args.shapes)
    if args.report:
        report = executor.publish(args.report, group=args.group, recipient=args.notify)
        total, contributions = report.total_area, report.contributions
    else:
        breakdown = executor.run(args.group)
        total, contributions = breakdown.total, breakdown.contributions

    if args.json:
        print(
            json.dumps(
                {
                    "group": args.group,
                    "total_area": total,
                    "shape_count": len(contributions),
                    "contributions": [
                        {"index": item.index, "kind": item.kind, "area": item.area}
                        for item in contributions
                    ],
                },
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        print(f"{total:.6f}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
