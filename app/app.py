"""
Single entry point: build the card snapshot, then serve the gallery page.

    python app/app.py

Steps:
    1. Fetch https://triad.raelys.com/api/cards  → data/cards.json
       (skipped if the snapshot already exists)
    2. Launch Streamlit on frontend/streamlit_app.py

A failed fetch fails the build: the error is logged and the process exits
non-zero without starting the page.

Logs to stdout and logs/app.log (rotating, 5 MB max, 3 backups).
"""

import logging
import logging.handlers
import subprocess
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

from etl import pipeline

ROOT_DIR = Path(__file__).parent.parent
LOG_DIR  = ROOT_DIR / "logs"
LOG_FILE = LOG_DIR / "app.log"
PAGE     = ROOT_DIR / "frontend" / "streamlit_app.py"


def _setup_logging() -> None:
    LOG_DIR.mkdir(exist_ok=True)
    fmt = logging.Formatter("%(asctime)s  %(levelname)s  %(message)s")

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    # Rotate at 5 MB, keep 3 backups
    rotating = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(stream)
    root.addHandler(rotating)


log = logging.getLogger("app")


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------

def build() -> int:
    """Make sure data/cards.json exists; return the number of cards."""
    if pipeline.CARDS_FILE.exists():
        log.info("[1/2] %s exists, skipping fetch.", pipeline.CARDS_FILE.name)
    else:
        log.info("[1/2] %s missing, fetching cards…", pipeline.CARDS_FILE.name)
    return len(pipeline.ensure(pipeline.CARDS_FILE))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _launch_page() -> None:
    log.info("[2/2] Launching Streamlit: %s", PAGE.relative_to(ROOT_DIR))
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(PAGE)], check=True)


def main() -> int:
    _setup_logging()
    log.info("=== Triad Card Gallery: building ===")
    try:
        count = build()
    except Exception:
        log.exception("Build failed")
        return 1
    log.info("=== %d cards ready ===", count)
    _launch_page()
    return 0


if __name__ == "__main__":
    sys.exit(main())
