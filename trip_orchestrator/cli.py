"""Command-line entry point.

    python -m trip_orchestrator "I'm going to Paris, let's plan my trip" \
        --age-group 26-40 --visit-date 2025-06-01 --persona Family
"""

from __future__ import annotations

import argparse
import json
from datetime import date
from typing import Optional, Sequence

from .container import get_container
from .domain.models import AgeGroup, TravelPersona
from .logging_config import configure_logging
from .services import TourismOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trip-orchestrator",
        description="Answer a natural-language trip-planning query.",
    )
    parser.add_argument("query", help="e.g. \"What's the weather in Lisbon?\"")
    parser.add_argument(
        "--age-group",
        choices=[g.value for g in AgeGroup],
        default=None,
    )
    parser.add_argument(
        "--visit-date",
        default=None,
        help="First day of the trip (default: today)",
    )
    parser.add_argument(
        "--visit-date-end",
        default=None,
        help="Last day of the trip, inclusive",
    )
    parser.add_argument(
        "--persona",
        action="append",
        default=[],
        choices=[p.value for p in TravelPersona],
        help="Travel persona; repeat for several",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    orchestrator: TourismOrchestrator = get_container().resolve(TourismOrchestrator)

    response = orchestrator.process(
        args.query,
        visit_date=args.visit_date or date.today(),
        age_group=args.age_group,
        visit_date_end=args.visit_date_end,
        personas=args.persona,
    )

    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    return 0 if response.success else 1
