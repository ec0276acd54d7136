"""Configuration models and loaders."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class WindowConfig:
    size: Tuple[int, int]
    fullscreen: bool
    title: str
    target_fps: int
    background_color: Tuple[int, int, int]


@dataclass(frozen=True)
class WorldConfig:
    gravity: float
    seed: Optional[int] = None


@dataclass(frozen=True)
class LeavesConfig:
    enabled: bool = True
    virtual_width: Optional[float] = None

    def __post_init__(self) -> None:
        if self.virtual_width is not None and self.virtual_width <= 0:
            raise ValueError(f"virtual_width must be positive, got {self.virtual_width}")


@dataclass(frozen=True)
class CameraConfig:
    scroll_speed: float


@dataclass(frozen=True)
class AppConfig:
    window: WindowConfig
    world: WorldConfig
    leaves: LeavesConfig
    camera: CameraConfig


def _load_json(path: Path) -> Dict[str, Any]:
    return json.loads(path.read_text())


def leaves_config_from_mapping(payload: Mapping[str, Any]) -> LeavesConfig:
    virtual_width = payload.get("virtual_width")
    return LeavesConfig(
        enabled=bool(payload.get("enabled", True)),
        virtual_width=float(virtual_width) if virtual_width is not None else None,
    )


def load_app_config(path: Path) -> AppConfig:
    payload = _load_json(path)

    window = WindowConfig(
        size=tuple(payload["window"]["size"]),
        fullscreen=payload["window"]["fullscreen"],
        title=payload["window"]["title"],
        target_fps=payload["window"]["target_fps"],
        background_color=tuple(payload["window"]["background_color"]),
    )

    world = WorldConfig(
        gravity=float(payload["world"]["gravity"]),
        seed=payload["world"].get("seed"),
    )

    camera = CameraConfig(scroll_speed=float(payload["camera"]["scroll_speed"]))

    return AppConfig(
        window=window,
        world=world,
        leaves=leaves_config_from_mapping(payload.get("leaves", {})),
        camera=camera,
    )
