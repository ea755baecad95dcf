"""Chubflix Next Episode: dev launcher. Serves the stage runner in watch mode."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "13015")


def main():
    parser = argparse.ArgumentParser(description="Chubflix Next Episode stage runner")
    parser.add_argument("--port", default=PORT, help=f"Port to listen on (default: {PORT})")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args()

    cmd = [sys.executable, "-m", "uvicorn", "chubflix.app:app", "--host", HOST, "--port", str(args.port)]
    if not args.no_reload:
        cmd.append("--reload")

    print(f"Starting stage runner on http://localhost:{args.port} ...")
    try:
        subprocess.run(cmd, cwd=ROOT, check=False)
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
