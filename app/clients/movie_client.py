import asyncio
from typing import List, Optional

from ..config import Settings, get_settings
from ..logging_service import logger
from ..schemas.movies_schemas import MovieSummary
from ..utils.utils_movies_client import (
    build_client,
    discover,
    editors_for,
    format_release_date,
)


async def get_movies(
    year: int,
    page: int,
    settings: Optional[Settings] = None
) -> List[MovieSummary]:
    """
    Fetch a page of movies for the given year and enrich every movie with
    its editors. Credit lookups run concurrently; the output keeps the
    catalog order.

    Any failure while aggregating degrades to an empty list.

    :param year: Primary release year.
    :param page: Catalog page.
    :param settings: Catalog configuration, defaults to the process settings.
    :return: List of MovieSummary objects.
    """
    settings = settings or get_settings()
    try:
        async with build_client(settings) as client:
            movies = await discover(client, year, page)
            editors = await asyncio.gather(*[
                editors_for(client, movie.id)
                for movie in movies
            ])
        return [
            MovieSummary(
                title=movie.title,
                release_date=format_release_date(movie.release_date),
                vote_average=movie.vote_average,
                editors=names
            )
            for movie, names in zip(movies, editors)
        ]
    except Exception:
        logger.exception("Movie aggregation failed for year=%s page=%s",
                         year, page)
        return []
