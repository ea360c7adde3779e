from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ServiceConfig:
    host: str = "0.0.0.0"
    port: int = 8765
    default_simulations: int = 10_000
    max_simulations: int = 200_000
    workers: int = 1
