import argparse
import asyncio
import logging

from .config import ServiceConfig
from .server import OddsServer

logging.basicConfig(level=logging.INFO)


def main() -> None:
    parser = argparse.ArgumentParser(description="Hold'em hand evaluator and odds service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Processes used per probability request (1 runs trials inline)",
    )
    parser.add_argument("--default-simulations", type=int, default=10_000)
    parser.add_argument(
        "--max-simulations",
        type=int,
        default=200_000,
        help="Requests asking for more trials are rejected with SIMULATION_LIMIT",
    )
    parser.add_argument("--debug", action="store_true", help="Log every simulation run")
    args = parser.parse_args()

    if args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.debug:
        logging.getLogger("holdem").setLevel(logging.DEBUG)

    config = ServiceConfig(
        host=args.host,
        port=args.port,
        default_simulations=args.default_simulations,
        max_simulations=args.max_simulations,
        workers=args.workers,
    )

    server = OddsServer(config)
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
