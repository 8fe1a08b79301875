from enum import StrEnum


class EventType(StrEnum):
    MOVIE = 'movie'
    CONCERT = 'concert'
    SPORTS = 'sports'
    THEATER = 'theater'
    CONFERENCE = 'conference'
    OTHER = 'other'
