#!/usr/bin/env python
"""
Run the Lift Pass Pricing API (FastAPI on uvicorn).

Usage:
    python scripts/run_api.py
"""
import subprocess
import sys

from lift_pass.config.settings import get_settings


def main():
    settings = get_settings()

    print(f"Starting Lift Pass Pricing API on {settings.api_host}:{settings.api_port}...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "lift_pass.api.main:app",
            "--host", settings.api_host,
            "--port", str(settings.api_port),
            "--log-level", settings.log_level.lower(),
        ])
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
