from contextlib import asynccontextmanager
from typing import List

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from .clients.movie_client import get_movies
from .config import Settings, get_settings
from .logging_service import configure_logging, logger
from .schemas.movies_schemas import ErrorResponse, MovieQueryParams, MovieSummary
from .utils.utils_movies_client import parse_int

MISSING_PARAMS_ERROR = 'Year and page are required'
INTERNAL_ERROR = 'Internal Server Error'


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server listening on port %s", settings.PORT)
    yield


app = FastAPI(lifespan=lifespan)


@app.get('/movies', response_model=List[MovieSummary],
         responses={400: {'model': ErrorResponse}, 500: {'model': ErrorResponse}})
async def list_movies(
    params: MovieQueryParams = Depends(),
    settings: Settings = Depends(get_settings)
):
    year = parse_int(params.year)
    page = parse_int(params.page)

    if not year or not page:
        return JSONResponse(status_code=400,
                            content={'error': MISSING_PARAMS_ERROR})

    try:
        movies = await get_movies(year, page, settings)
    except Exception:
        logger.exception("Unhandled error serving /movies")
        return JSONResponse(status_code=500, content={'error': INTERNAL_ERROR})

    if not movies:
        return []
    return movies


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().PORT)
