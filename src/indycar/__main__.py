"""Run the IndyCar data agent: ``python -m indycar``."""

from __future__ import annotations

import logging

import uvicorn

from indycar.agent.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger.info("IndyCar Data Agent running on port %d", settings.port)
    uvicorn.run("indycar.agent.app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
