import logging
import threading
from typing import List, Optional
from ..schemas.movies_schemas import Movie, MovieCandidate

logger = logging.getLogger(__name__)


class MovieStore:
    """
    In-memory collection of movies and the single source of movie ids.

    Every operation runs under one lock, so a listing never sees a
    half-applied add and concurrent adds never share an id. Movies are
    frozen models and listings are fresh lists, so nothing a caller gets
    back can change the stored collection.
    """

    def __init__(self) -> None:
        self._movies: List[Movie] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def list_all(self) -> List[Movie]:
        """
        Return all movies in insertion order.
        """
        with self._lock:
            return list(self._movies)

    def list_by_year(self, year: int) -> List[Movie]:
        """
        Return the movies released in the given year, in insertion order.

        :param year: Release year to match exactly.
        :return: Possibly empty list of matching movies.
        """
        with self._lock:
            return [m for m in self._movies if m.year == year]

    def add(self, candidate: MovieCandidate) -> Movie:
        """
        Store a candidate under the next id.

        The candidate is expected to be validated already; the store only
        trims the title and assigns identity.

        :param candidate: Validated movie payload.
        :return: The stored movie with its id populated.
        """
        with self._lock:
            movie = Movie(
                id=self._next_id,
                title=candidate.title.strip(),
                year=candidate.year,
            )
            self._next_id += 1
            self._movies.append(movie)
        logger.debug("Stored movie %d", movie.id)
        return movie

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        with self._lock:
            return next((m for m in self._movies if m.id == movie_id), None)

    def delete_by_id(self, movie_id: int) -> bool:
        """
        Remove the movie with the given id.

        :param movie_id: Id assigned by ``add``.
        :return: True if a movie was removed, False if none had that id.
        """
        with self._lock:
            for index, movie in enumerate(self._movies):
                if movie.id == movie_id:
                    del self._movies[index]
                    return True
        return False
