#!/usr/bin/env python3
"""
Development startup script.

Runs the storefront API with auto-reload and file-backed storage.
"""

import os
import sys
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_STORAGE = PROJECT_ROOT / "data" / "storage.json"


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        import dotenv
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_storage():
    """Report where state will be kept."""
    storage_path = os.environ.get("STOREFRONT_STORAGE_PATH")
    if storage_path:
        print(f"✓ Using storage file {storage_path}")
        return storage_path

    DEFAULT_STORAGE.parent.mkdir(parents=True, exist_ok=True)
    print(f"! STOREFRONT_STORAGE_PATH not set, using {DEFAULT_STORAGE}")
    return str(DEFAULT_STORAGE)


def start_service(storage_path: str):
    """Start the storefront in development mode."""
    print("\n🏪 Starting Storefront on http://localhost:8001 ...")
    print("📍 API docs: http://localhost:8001/docs")
    print("\nPress Ctrl+C to stop")

    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "storefront.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", "8001",
        ],
        cwd=PROJECT_ROOT,
        env={
            **os.environ,
            "STOREFRONT_STORAGE_PATH": storage_path,
            "STOREFRONT_DEBUG": "true",
        },
    )

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Stopped.")


def main():
    print("=" * 60)
    print("Storefront - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    storage_path = check_storage()

    print("\n✓ All checks passed!")

    start_service(storage_path)


if __name__ == "__main__":
    main()
