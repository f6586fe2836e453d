# moviestore/core/models/enums.py
from enum import Enum


class Genre(str, Enum):
    ACTION    = "Action"
    ADVENTURE = "Adventure"
    COMEDY    = "Comedy"
    CRIME     = "Crime"
    DRAMA     = "Drama"
    FANTASY   = "Fantasy"
    HORROR    = "Horror"
    THRILLER  = "Thriller"
    SCI_FI    = "Sci-Fi"
