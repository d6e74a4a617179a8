import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from ..schemas.movies_schemas import ErrorResponse, Movie, MovieCandidate
from ..store.movie_store import MovieStore
from ..utils.validation import (
    INT32_MAX,
    INT32_MIN,
    parse_int,
    validate_movie,
)
from .errors import (
    ClientInputError,
    MovieValidationError,
    NotFoundError,
    UnsupportedMediaTypeError,
)
from .responses import MovieJSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=MovieJSONResponse)


def get_store(request: Request) -> MovieStore:
    return request.app.state.store


def _parse_movie_id(raw: str) -> int:
    movie_id = parse_int(raw)
    if movie_id is None:
        logger.debug("Rejected movie id %r", raw)
        raise ClientInputError('invalid ID')
    return movie_id


@router.get('/movies', response_model=List[Movie],
            responses={400: {'model': ErrorResponse}})
def list_movies(request: Request, store: MovieStore = Depends(get_store)):
    # a repeated parameter is resolved to its first occurrence
    raw_years = request.query_params.getlist('year')
    if not raw_years:
        return store.list_all()
    year = parse_int(raw_years[0], INT32_MIN, INT32_MAX)
    if year is None:
        raise ClientInputError("invalid query parameter 'year'")
    return store.list_by_year(year)


@router.post('/movies', status_code=201, response_model=Movie,
             responses={400: {'model': ErrorResponse},
                        415: {'model': ErrorResponse},
                        422: {'model': ErrorResponse}})
async def create_movie(request: Request, store: MovieStore = Depends(get_store)):
    """
    Create a movie from a JSON body.

    The body is decoded strictly into a MovieCandidate, checked against the
    catalogue rules and only then stored. Any id in the body is ignored.
    """
    content_type = request.headers.get('content-type', '')
    if 'application/json' not in content_type.lower():
        raise UnsupportedMediaTypeError('unsupported media type')

    body = await request.body()
    try:
        candidate = MovieCandidate.model_validate_json(body)
    except ValidationError:
        raise ClientInputError('invalid JSON') from None

    violations = validate_movie(candidate)
    if violations:
        logger.info("Rejected movie: %s", "; ".join(violations))
        raise MovieValidationError(violations)

    movie = store.add(candidate)
    logger.info("Created movie %d (%s, %d)", movie.id, movie.title, movie.year)
    return movie


@router.get('/movies/{movie_id}', response_model=Movie,
            responses={400: {'model': ErrorResponse},
                       404: {'model': ErrorResponse}})
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    movie = store.get_by_id(_parse_movie_id(movie_id))
    if movie is None:
        raise NotFoundError('movie not found')
    return movie


@router.delete('/movies/{movie_id}', status_code=204,
               responses={400: {'model': ErrorResponse},
                          404: {'model': ErrorResponse}})
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    parsed_id = _parse_movie_id(movie_id)
    if not store.delete_by_id(parsed_id):
        raise NotFoundError('movie not found')
    logger.info("Deleted movie %d", parsed_id)
    return Response(status_code=204)
