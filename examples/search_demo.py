#!/usr/bin/env python3
"""Example: search, suggestions and trending with JSON structured logs."""

import argparse
import asyncio

from vidmeta_client import Session, get_settings
from vidmeta_client.exceptions import VidmetaException
from vidmeta_client.log_config import configure_logging, get_context_logger
from vidmeta_client.metrics import PrometheusMetrics


async def run(query: str, region: str) -> None:
    logger = get_context_logger("search_demo")
    metrics = PrometheusMetrics()

    session, first_page = await Session.create(query, metrics=metrics)
    async with session:
        for record in first_page[:5]:
            print(f"{record.video_id}  {record.length_seconds:>5}s  {record.title}")

        second_page = await session.get_search_query(2)
        logger.info("second_page_fetched", count=len(second_page))

        try:
            suggestions = await session.get_suggestions(query[:3])
            logger.info("suggestions_fetched", count=len(suggestions))
        except VidmetaException as e:
            logger.warning("suggestions_unavailable", error=str(e))

        try:
            trending = await session.get_trending_music(region)
            logger.info("trending_fetched", region=region, count=len(trending))
        except VidmetaException as e:
            logger.warning("trending_unavailable", region=region, error=str(e))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("query")
    parser.add_argument("--region", default="US")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level, json_output=True)
    asyncio.run(run(args.query, args.region))


if __name__ == "__main__":
    main()
