"""Load detector settings and the watchlist from env and YAML."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

# Paths (env overrides)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_WATCHLIST = str(PROJECT_ROOT / "config" / "watchlist.yaml")
WATCHLIST_PATH = Path(os.getenv("WATCHLIST_PATH", _DEFAULT_WATCHLIST))

# HTTP: some career sites and ATS boards reject non-browser agents
USER_AGENT = os.getenv(
    "CAREERPROBE_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
)
ACCEPT = os.getenv(
    "CAREERPROBE_ACCEPT",
    "text/html,application/xhtml+xml,application/json;q=0.9,*/*;q=0.8",
)
PAGE_TIMEOUT = float(os.getenv("CAREERPROBE_PAGE_TIMEOUT", "15"))
PROBE_TIMEOUT = float(os.getenv("CAREERPROBE_PROBE_TIMEOUT", "10"))
DETECT_CONCURRENCY = int(os.getenv("CAREERPROBE_CONCURRENCY", "5"))

LOG_LEVEL = os.getenv("CAREERPROBE_LOG_LEVEL", "INFO").upper()


def default_headers() -> dict[str, str]:
    return {"User-Agent": USER_AGENT, "Accept": ACCEPT}


def load_watchlist() -> list[dict]:
    """Load the companies list from the watchlist YAML."""
    path = WATCHLIST_PATH if WATCHLIST_PATH.is_absolute() else PROJECT_ROOT / WATCHLIST_PATH
    if not path.exists():
        return []
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    companies = data.get("companies") or []
    return [c for c in companies if isinstance(c, dict)]
