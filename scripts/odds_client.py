#!/usr/bin/env python3
"""Send one request to a running odds service and print the reply.

Examples:
    python scripts/odds_client.py evaluate --hole HT HJ --board HQ HK HA S2 C3
    python scripts/odds_client.py compare --p1 DK C5 --p2 H8 D5 --board SK HT C8 C7 D2
    python scripts/odds_client.py odds --hole SA SK --board D6 S9 H4 --players 3 --simulations 20000
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict

from websockets.asyncio.client import connect

LOGGER = logging.getLogger("odds_client")


def build_request(args: argparse.Namespace) -> Dict[str, Any]:
    if args.command == "evaluate":
        return {"type": "evaluate_hand", "hole_cards": args.hole, "community_cards": args.board}
    if args.command == "compare":
        return {
            "type": "compare_hands",
            "player1_hole_cards": args.p1,
            "player1_community_cards": args.board,
            "player2_hole_cards": args.p2,
            "player2_community_cards": args.board,
        }
    request: Dict[str, Any] = {
        "type": "win_probability",
        "hole_cards": args.hole,
        "community_cards": args.board,
        "num_players": args.players,
        "num_simulations": args.simulations,
    }
    if args.seed is not None:
        request["seed"] = args.seed
    return request


async def send_request(url: str, request: Dict[str, Any]) -> Dict[str, Any]:
    async with connect(url) as ws:
        await ws.send(json.dumps(request))
        raw = await ws.recv()
    return json.loads(raw)


def main() -> int:
    parser = argparse.ArgumentParser(description="Odds service client")
    parser.add_argument("--url", default="ws://localhost:8765")
    sub = parser.add_subparsers(dest="command", required=True)

    evaluate = sub.add_parser("evaluate", help="Best five-card hand from 2 hole + 5 board cards")
    evaluate.add_argument("--hole", nargs=2, required=True)
    evaluate.add_argument("--board", nargs=5, required=True)

    compare = sub.add_parser("compare", help="Showdown between two players on one board")
    compare.add_argument("--p1", nargs=2, required=True)
    compare.add_argument("--p2", nargs=2, required=True)
    compare.add_argument("--board", nargs=5, required=True)

    odds = sub.add_parser("odds", help="Monte Carlo win/tie probability")
    odds.add_argument("--hole", nargs=2, required=True)
    odds.add_argument("--board", nargs="*", default=[])
    odds.add_argument("--players", type=int, default=2)
    odds.add_argument("--simulations", type=int, default=10_000)
    odds.add_argument("--seed", type=int, default=None)

    args = parser.parse_args()
    request = build_request(args)
    LOGGER.info("Sending %s to %s", request["type"], args.url)
    reply = asyncio.run(send_request(args.url, request))
    print(json.dumps(reply, indent=2))
    return 1 if reply.get("type") == "error" else 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
