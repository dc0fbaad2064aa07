"""
Detect the ATS for each company in the watchlist.
Run: python scripts/detect_ats_for_watchlist.py
Prints vendor, confidence and board URL per company, then a YAML snippet of
confirmed boards you can paste back into the watchlist (ats_type/board_id).
"""

import asyncio
import logging
import sys
from pathlib import Path

import httpx
import yaml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from careerprobe import config
from careerprobe.ats import Confidence, detect_many
from careerprobe.boards import BoardConfig

logger = logging.getLogger("detect_ats_for_watchlist")


async def run(companies: list[dict]) -> list[BoardConfig]:
    pending: list[tuple[str, str]] = []
    for entry in companies:
        name = entry.get("name") or "?"
        url = (entry.get("careers_url") or "").strip()
        if not url:
            print(f"  {name}: (no URL)")
            continue
        if entry.get("ats_type") and entry.get("board_id"):
            print(f"  {name}: {entry['ats_type']} / {entry['board_id']} (override)")
            continue
        pending.append((name, url))

    async with httpx.AsyncClient(headers=config.default_headers()) as client:
        results = await detect_many([u for _, u in pending], client=client)

    boards: list[BoardConfig] = []
    for (name, url), result in zip(pending, results):
        if isinstance(result, Exception):
            logger.warning("%s: detection failed for %s: %s", name, url, result)
            print(f"  {name}: error ({result})")
            continue
        if not result.detected:
            print(f"  {name}: not detected. {result.message}")
            continue
        print(
            f"  {name}: {result.vendor.display_name} [{str(result.confidence)}] "
            f"{result.canonical_url or '-'}"
        )
        if result.confidence >= Confidence.LIKELY:
            board = BoardConfig.from_detection(name, result)
            if board is not None:
                boards.append(board)
        else:
            print(f"    {result.message}")
    return boards


def main() -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    companies = config.load_watchlist()
    print("ATS detection for watchlist companies\n" + "=" * 60)
    boards = asyncio.run(run(companies))
    if boards:
        print("\n# Confirmed boards")
        print(yaml.safe_dump({"companies": [b.to_dict() for b in boards]}, sort_keys=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
