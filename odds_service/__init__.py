"""Odds service package: exposes the hand evaluator over WebSockets."""

from .config import ServiceConfig
from .server import OddsServer, ServiceError

__all__ = ["OddsServer", "ServiceConfig", "ServiceError"]
