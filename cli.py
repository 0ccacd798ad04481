#!/usr/bin/env python3
"""Run the seat booking API."""

import argparse
import logging
import sys

import uvicorn

from config import HOST, LOCK_TTL_MS, PORT, SEAT_IDS, SWEEP_ENABLED
from core.seats import SeatLockManager
from web.app import create_app


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser(description="In-memory seat booking API with expiring locks")
    parser.add_argument("--host", default=HOST, help=f"Bind address (default: {HOST})")
    parser.add_argument("--port", type=int, default=PORT, help=f"Port (default: {PORT})")
    parser.add_argument(
        "--seats",
        default=",".join(SEAT_IDS),
        help='Comma-separated seat ids (default: "%(default)s")',
    )
    parser.add_argument(
        "--lock-ttl",
        type=float,
        default=LOCK_TTL_MS / 1000,
        help="Seconds before an unconfirmed lock expires (default: %(default)g)",
    )
    parser.add_argument(
        "--no-sweep",
        action="store_true",
        help="Disable the background expiry sweep (locks still expire lazily)",
    )
    args = parser.parse_args()

    seat_ids = [s.strip() for s in args.seats.split(",") if s.strip()]
    if not seat_ids:
        print("ERROR: No seat ids given.")
        sys.exit(1)
    if args.lock_ttl <= 0:
        print(f"ERROR: Lock TTL must be positive, got {args.lock_ttl:g}.")
        sys.exit(1)

    manager = SeatLockManager(seat_ids, lock_ttl=args.lock_ttl)
    app = create_app(manager, sweep=SWEEP_ENABLED and not args.no_sweep)

    print(f"Server running at http://{args.host}:{args.port}")
    print(f"Lock expiration set to {args.lock_ttl:g} seconds.")
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
