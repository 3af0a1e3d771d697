"""Protean Engine runner for Cutiefy domains.

Starts Engine workers that process events asynchronously:
- OutboxProcessor: polls outbox table, publishes events to Redis Streams
- StreamSubscriptions: reads Redis Streams, invokes projectors and event handlers
  (order summary, live order feed, order mail)

Usage:
    python src/server.py                    # Run both domain engines
    python src/server.py --domain ordering  # Run only ordering engine
    python src/server.py --domain catalogue # Run only catalogue engine
"""

import argparse
import asyncio

from protean.server.engine import Engine

DOMAIN_NAMES = ["catalogue", "ordering"]


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "catalogue":
        from catalogue.domain import catalogue

        catalogue.init()
        return catalogue
    elif name == "ordering":
        from ordering.domain import ordering

        ordering.init()
        return ordering
    else:
        raise ValueError(f"Unknown domain: {name}")


async def run(domain_names):
    engines = [Engine(_get_domain(name)) for name in domain_names]
    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Cutiefy Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    asyncio.run(run([args.domain] if args.domain else DOMAIN_NAMES))


if __name__ == "__main__":
    main()
