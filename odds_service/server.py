from __future__ import annotations

import asyncio
import json
import logging
from http import HTTPStatus
from typing import Any, Dict, List, Optional

import websockets
from websockets.asyncio.server import serve

from holdem import (
    Card,
    InvalidCardCountError,
    PokerError,
    calculate_win_probability,
    compare_hands,
    evaluate_best_hand,
    parse_cards,
)

from .config import ServiceConfig

LOGGER = logging.getLogger("odds_service")

# OddsServer is a thin JSON adapter around the holdem package. Every network
# concern lives here; card parsing and evaluation stay in holdem.


class ServiceError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


def _error_payload(code: str, msg: str) -> Dict[str, Any]:
    return {"type": "error", "code": code, "msg": msg}


def _card_field(message: Dict[str, Any], name: str, expected: Optional[int] = None) -> List[Card]:
    raw = message.get(name, [])
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ServiceError("BAD_SCHEMA", f"{name} must be a list of card strings")
    try:
        cards = parse_cards(raw)
    except PokerError as exc:
        raise ServiceError(exc.code, f"{name}: {exc.msg}") from exc
    if expected is not None and len(cards) != expected:
        raise ServiceError(
            InvalidCardCountError.code, f"{name}: must provide exactly {expected} cards, got {len(cards)}"
        )
    return cards


def _int_field(message: Dict[str, Any], name: str, default: Optional[int] = None) -> Optional[int]:
    raw = message.get(name)
    if raw is None:
        return default
    # bool is an int subclass; reject it explicitly.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ServiceError("BAD_SCHEMA", f"{name} must be an integer")
    return raw


class OddsServer:
    def __init__(self, config: ServiceConfig) -> None:
        self.config = config
        self.handlers = {
            "evaluate_hand": self._evaluate_hand,
            "compare_hands": self._compare_hands,
            "win_probability": self._win_probability,
        }

    async def start(self) -> None:
        # serve keeps accepting clients until the process stops.
        async with serve(
            self._handle_connection,
            self.config.host,
            self.config.port,
            process_request=_process_request,
        ):
            LOGGER.info("Odds service listening on %s:%s", self.config.host, self.config.port)
            await asyncio.Future()

    async def _handle_connection(self, websocket) -> None:
        LOGGER.info("Client connected: %s", getattr(websocket, "remote_address", None))
        try:
            async for raw in websocket:
                reply = await self.handle_message(raw)
                await websocket.send(json.dumps(reply))
        except websockets.ConnectionClosed:
            LOGGER.info("Client disconnected abruptly")

    async def handle_message(self, raw: Any) -> Dict[str, Any]:
        """Turn one raw frame into one reply frame. Never raises for bad input."""
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            return _error_payload("BAD_JSON", "Message is not valid JSON")
        if not isinstance(message, dict):
            return _error_payload("BAD_SCHEMA", "Message must be a JSON object")

        request_id = message.get("id")
        msg_type = message.get("type")
        handler = self.handlers.get(msg_type)
        if handler is None:
            reply = _error_payload("UNKNOWN_TYPE", f"Unsupported message type: {msg_type!r}")
        else:
            try:
                reply = await handler(message)
            except ServiceError as exc:
                reply = _error_payload(exc.code, exc.msg)
            except PokerError as exc:
                reply = _error_payload(exc.code, exc.msg)
            except Exception as exc:  # noqa: BLE001
                LOGGER.exception("Request %s crashed: %s", msg_type, exc)
                reply = _error_payload("INTERNAL", "Internal error")

        if request_id is not None:
            reply["id"] = request_id
        return reply

    async def _evaluate_hand(self, message: Dict[str, Any]) -> Dict[str, Any]:
        hole = _card_field(message, "hole_cards", expected=2)
        community = _card_field(message, "community_cards", expected=5)
        hand = evaluate_best_hand(hole, community)
        return {"type": "evaluate_hand_result", **hand.payload()}

    async def _compare_hands(self, message: Dict[str, Any]) -> Dict[str, Any]:
        p1_hole = _card_field(message, "player1_hole_cards", expected=2)
        p1_community = _card_field(message, "player1_community_cards", expected=5)
        p2_hole = _card_field(message, "player2_hole_cards", expected=2)
        p2_community = _card_field(message, "player2_community_cards", expected=5)
        result = compare_hands(p1_hole, p1_community, p2_hole, p2_community)
        return {"type": "compare_hands_result", **result.payload()}

    async def _win_probability(self, message: Dict[str, Any]) -> Dict[str, Any]:
        hole = _card_field(message, "hole_cards", expected=2)
        community = _card_field(message, "community_cards")
        num_players = _int_field(message, "num_players")
        if num_players is None:
            raise ServiceError("BAD_SCHEMA", "num_players required")
        num_simulations = _int_field(message, "num_simulations", self.config.default_simulations)
        if num_simulations > self.config.max_simulations:
            raise ServiceError(
                "SIMULATION_LIMIT",
                f"num_simulations must not exceed {self.config.max_simulations}",
            )
        seed = _int_field(message, "seed")

        # CPU-bound; keep the event loop free for other clients.
        result = await asyncio.to_thread(
            calculate_win_probability,
            hole,
            community,
            num_players,
            num_simulations,
            seed=seed,
            workers=self.config.workers,
        )
        return {"type": "win_probability_result", **result.payload()}


def _process_request(connection, request):
    """Answer plain HTTP health checks; let WebSocket upgrades through."""
    if request.headers.get("Upgrade", "").lower() == "websocket":
        return None
    path = request.path.split("?", 1)[0]
    if path in {"/", "/health", "/healthz"}:
        return connection.respond(HTTPStatus.OK, "odds service running\n")
    return connection.respond(HTTPStatus.NOT_FOUND, "not found\n")
