"""SQL Snippets — dev launcher. Starts the API server in watch mode."""

import argparse
import os
import signal
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "13015")


def main():
    parser = argparse.ArgumentParser(description="SQL Snippets dev launcher")
    parser.add_argument("--snippets-dir", type=Path, default=None,
                        help="Snippet storage directory (default: ./snippets)")
    args = parser.parse_args()

    # Build env for the subprocess so the server picks up the same store root
    env = os.environ.copy()
    if args.snippets_dir:
        env["SNIPPETS_DIR"] = str(args.snippets_dir.resolve())

    print(f"Starting API on http://localhost:{PORT} ...")
    proc = subprocess.Popen(
        ["uvicorn", "sqlsnippets.app:app", "--reload", "--host", HOST, "--port", PORT],
        cwd=ROOT, env=env,
    )

    def shutdown(*_):
        print("\nShutting down...")
        proc.terminate()
        proc.wait()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    proc.wait()


if __name__ == "__main__":
    main()
