import re
from datetime import date
from typing import List, Optional
from ..schemas.movies_schemas import MovieCandidate

MIN_YEAR = 1888            # first surviving motion picture
MAX_TITLE_LENGTH = 100

INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1
INT64_MIN, INT64_MAX = -2 ** 63, 2 ** 63 - 1

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
_MAX_DIGITS = len(str(INT64_MAX))


def validate_movie(
    candidate: MovieCandidate,
    current_year: Optional[int] = None
) -> List[str]:
    """
    Check a candidate movie against the catalogue rules.

    Title and year are checked independently and every violation is
    reported, title first. A missing year counts as below the lower bound.

    :param candidate: Movie payload as sent by the client.
    :param current_year: Calendar year to check against. Defaults to the
        year on the system clock at call time.
    :return: List of violation messages, empty when the candidate is valid.
    """
    if current_year is None:
        current_year = date.today().year
    violations: List[str] = []

    title = candidate.title.strip() if candidate.title is not None else ''
    if not title:
        violations.append('title must not be empty')
    elif len(title) > MAX_TITLE_LENGTH:
        violations.append(
            f'title must not exceed {MAX_TITLE_LENGTH} characters')

    max_year = current_year + 1
    if candidate.year is None or candidate.year < MIN_YEAR:
        violations.append(f'year must be at least {MIN_YEAR}')
    elif candidate.year > max_year:
        violations.append(f'year must be at most {max_year}')

    return violations


def parse_int(
    value: Optional[str],
    minimum: int = INT64_MIN,
    maximum: int = INT64_MAX
) -> Optional[int]:
    """
    Parse a path segment or query value as a plain decimal integer.

    Only an optional sign followed by ASCII digits is accepted, so values
    such as ``' 7'`` or ``'1_000'`` that ``int()`` would take are rejected.
    Values outside ``[minimum, maximum]`` are rejected as well.

    :param value: Raw string from the URL.
    :param minimum: Smallest accepted value, signed 64-bit by default.
    :param maximum: Largest accepted value, signed 64-bit by default.
    :return: The integer, or None if the value is not one in range.
    """
    if value is None or not _INT_PATTERN.fullmatch(value):
        return None
    # leading zeros aside, anything this long is out of any 64-bit range
    digits = value.lstrip('+-').lstrip('0') or '0'
    if len(digits) > _MAX_DIGITS:
        return None
    number = -int(digits) if value.startswith('-') else int(digits)
    if not minimum <= number <= maximum:
        return None
    return number
