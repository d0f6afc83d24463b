"""Rank helper profiles against a job from JSON files.

Reads jobs (a list of job records with "id", or an id -> job mapping) and a
list of helper records, runs match finding for one job and prints the page as
JSON.

Usage:
    python scripts/rank_helpers.py --job-id JOB --jobs jobs.json --helpers helpers.json
        [--limit 10] [--offset 0] [--strict] [--features-only]
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def load_helpers(path: Path) -> list:
    with open(path, encoding="utf-8") as f:
        helpers = json.load(f)
    if not isinstance(helpers, list):
        raise ValueError(f"Expected a JSON list of helpers in {path}")
    return helpers


async def main(args: argparse.Namespace) -> int:
    from config import settings
    from services.exceptions import MatchingError
    from services.feature_extractor import extract_helper_features
    from services.job_lookup import InMemoryJobStore
    from services.match_finder import MatchFinder

    helpers = load_helpers(Path(args.helpers))
    logger.info("Loaded %d helpers from %s", len(helpers), args.helpers)

    if args.features_only:
        features = []
        for i, helper in enumerate(helpers):
            try:
                features.append(extract_helper_features(helper).model_dump(mode="json", by_alias=True))
            except Exception as e:
                logger.warning("Skipping helper %d: %s", i, e)
        print(json.dumps(features, indent=2))
        return 0

    store = InMemoryJobStore.from_json_file(args.jobs) if args.jobs else InMemoryJobStore()
    finder = MatchFinder(
        store,
        strict_job_lookup=args.strict or settings.strict_job_lookup,
        lookup_timeout=settings.job_lookup_timeout_seconds,
    )

    try:
        page = await finder.find_matches(args.job_id, helpers, limit=args.limit, offset=args.offset)
    except MatchingError as e:
        logger.error("%s", e)
        return 1

    print(json.dumps(page.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rank helpers against a job")
    parser.add_argument("--helpers", required=True, help="JSON list of helper records")
    parser.add_argument("--job-id", default="", help="Job to match against")
    parser.add_argument("--jobs", default="", help="JSON file with job records")
    parser.add_argument("--limit", type=int, default=10)
    parser.add_argument("--offset", type=int, default=0)
    parser.add_argument("--strict", action="store_true", help="Fail instead of using the fallback job")
    parser.add_argument(
        "--features-only",
        action="store_true",
        help="Print extracted helper features instead of matches",
    )
    args = parser.parse_args()
    if not args.features_only and not args.job_id:
        parser.error("--job-id is required unless --features-only is given")
    sys.exit(asyncio.run(main(args)))
