from __future__ import annotations

import argparse
import json
import math
import sys
from typing import Any, Dict, List

from pydantic import ValidationError

from vaxplan.errors import VaccinationError
from vaxplan.io.csv_loader import load_people
from vaxplan.io.excel_export import export_plan_to_excel
from vaxplan.models.config import CampaignConfig, HubConfig, load_config
from vaxplan.models.days import DAYS
from vaxplan.registry import Registry
from vaxplan.solver.allocation import AllocationEngine
from vaxplan.solver.capacity import weekly_total
from vaxplan.solver.stats import StatisticsReporter
from vaxplan.utils.logging_setup import get_logger, setup_logging

logger = get_logger("vaxplan.cli")

_LEVELS = {0: "WARNING", 1: "INFO", 2: "DEBUG"}


def _build_cfg(args: argparse.Namespace) -> CampaignConfig:
    data: Dict[str, Any] = load_config(args.config).to_dict() if args.config else {}
    if args.hours is not None:
        data["hours"] = args.hours
    if args.breaks is not None:
        data["age_breaks"] = args.breaks
    if args.year is not None:
        data["current_year"] = args.year
    if args.hub:
        hubs = {h["name"]: h for h in data.get("hubs", [])}
        for spec in args.hub:
            hub = HubConfig.parse_spec(spec)
            hubs[hub.name] = hub.model_dump()
        data["hubs"] = list(hubs.values())
    return CampaignConfig.from_dict(data)


def _nan_to_none(values: Dict[str, float]) -> Dict[str, Any]:
    return {k: (None if math.isnan(v) else round(v, 4)) for k, v in values.items()}


def _summary(registry: Registry, lines_read: int) -> Dict[str, Any]:
    stats = StatisticsReporter(registry)
    people = registry.count_people()
    return {
        "lines_read": lines_read,
        "people": people,
        "hubs": registry.hubs(),
        "intervals": registry.age_intervals(),
        "weekly_slots": weekly_total(registry),
        "allocated_proportion": round(stats.overall_allocated_proportion(), 4) if people else None,
        "proportion_by_interval": _nan_to_none(stats.allocated_proportion_by_interval()),
        "distribution_by_interval": _nan_to_none(stats.allocated_distribution_across_intervals()),
    }


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Vaccination campaign weekly allocation")
    p.add_argument("--csv", required=True, help="People CSV (SSN,LAST,FIRST,YEAR)")
    p.add_argument("--config", help="JSON campaign configuration")
    p.add_argument("--hub", action="append", metavar="NAME:D:N:O",
                   help="Hub with doctors, nurses and other staff (repeatable)")
    p.add_argument("--hours", type=int, nargs=7, metavar="H", help="Working hours Monday..Sunday")
    p.add_argument("--breaks", type=int, nargs="+", metavar="AGE", help="Age interval breaks")
    p.add_argument("--year", type=int, help="Reference year for ages (default: this year)")
    p.add_argument("--excel", help="Write the plan to this .xlsx file")
    p.add_argument("--log-file", default=None, help="Also log to this file")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--json", dest="json_out", action="store_true", help="JSON output (summary + plan)")
    args = p.parse_args(argv)

    setup_logging(level=_LEVELS.get(args.verbose, "DEBUG"), log_file=args.log_file)

    try:
        cfg = _build_cfg(args)
        registry = cfg.apply_to(Registry(current_year=cfg.current_year))

        def report(line_number: int, line: str) -> None:
            logger.warning(f"Skipped line {line_number}: {line}")

        lines_read = load_people(registry, args.csv, listener=report)
        engine = AllocationEngine(registry)
        engine.clear_allocation()
        engine.allocate_week()
        plan = engine.plan()
        summary = _summary(registry, lines_read)
    except (ValidationError, ValueError, VaccinationError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.excel:
        export_plan_to_excel(registry, plan, args.excel)

    if args.json_out:
        out = {"summary": summary, "plan": {DAYS[d]: hubs for d, hubs in plan.slots.items()}}
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        print("Summary:")
        for k, v in summary.items():
            print(f" - {k}: {v}")
        print("Allocations (hub × day):")
        print(plan.to_matrix(registry.hubs()).to_string())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
