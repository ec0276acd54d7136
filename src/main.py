"""Application entry point for the wind leaves demo."""
from __future__ import annotations

from pathlib import Path

from app.app import LeavesApp
from core.config import load_app_config


def main() -> None:
    root = Path(__file__).resolve().parents[1]
    app_config = load_app_config(root / "config" / "app_config.json")

    app = LeavesApp(app_config=app_config)
    app.run()


if __name__ == "__main__":
    main()
