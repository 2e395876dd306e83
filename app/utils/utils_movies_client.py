import re
from datetime import date
from typing import List, Optional

import httpx

from ..config import Settings
from ..logging_service import logger
from ..schemas.movies_schemas import CrewMember, RawMovie

EDITING_DEPARTMENT = 'Editing'
INVALID_DATE = 'Invalid date'

_LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')
# interpreters default to refusing longer int strings
MAX_QUERY_DIGITS = 4300


def build_client(settings: Settings) -> httpx.AsyncClient:
    """
    Create the HTTP client used for every call to the catalog API.

    :param settings: Process configuration holding base URL and token.
    :return: httpx.AsyncClient bound to the catalog base URL.
    """
    return httpx.AsyncClient(
        base_url=settings.API_URL,
        headers={
            'Content-Type': 'application/json',
            'Authorization': f"Bearer {settings.API_READ_ACCESS_TOKEN}",
        },
        timeout=settings.REQUEST_TIMEOUT
    )


async def discover(
    client: httpx.AsyncClient,
    year: int,
    page: int
) -> List[RawMovie]:
    """
    Fetch one page of movies released in the given year, most popular first.
    Any upstream failure is logged and turned into an empty list.

    :param client: HTTP client for making API requests.
    :param year: Primary release year to filter by.
    :param page: Result page to fetch.
    :return: List of RawMovie objects, possibly empty.
    """
    try:
        resp = await client.get(
            "/discover/movie",
            params={
                'language': 'en-US',
                'page': page,
                'primary_release_year': year,
                'sort_by': 'popularity.desc',
            }
        )
        resp.raise_for_status()
        results = resp.json().get('results', [])
        movies = [RawMovie.model_validate(item) for item in results]
    except Exception as e:
        logger.error("Catalog discover failed for year=%s page=%s: %r",
                     year, page, e)
        return []

    if not movies:
        logger.info("Catalog returned no movies for year=%s page=%s",
                    year, page)
    return movies


async def editors_for(
    client: httpx.AsyncClient,
    movie_id: int
) -> List[str]:
    """
    Fetch the crew of a movie and keep the names of its editors,
    in upstream order and with duplicates.

    :param client: HTTP client for making API requests.
    :param movie_id: Catalog id of the movie.
    :return: List of editor names, empty on any failure.
    """
    try:
        resp = await client.get(f"/movie/{movie_id}/credits")
        resp.raise_for_status()
        crew = [CrewMember.model_validate(c) for c in resp.json()['crew']]
    except Exception as e:
        logger.warning("Credits lookup failed for movie %s: %r", movie_id, e)
        return []

    return [c.name for c in crew if c.known_for_department == EDITING_DEPARTMENT]


def format_release_date(raw: Optional[str]) -> str:
    """
    Render an ISO date as 'September 30, 2021'.
    Missing or unparseable dates become 'Invalid date'.
    """
    if not raw:
        return INVALID_DATE
    try:
        d = date.fromisoformat(raw.strip()[:10])
    except ValueError:
        return INVALID_DATE
    return f"{d:%B} {d.day}, {d.year}"


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a query value ('2021abc' -> 2021).
    Returns None when there is none.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match or len(match.group(1).lstrip('+-')) > MAX_QUERY_DIGITS:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # digit run longer than the interpreter allows
        return None
