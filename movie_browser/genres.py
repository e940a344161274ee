GENRE_MAP = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

UNKNOWN_GENRE = "Unknown"
MAX_GENRES = 3

ACTION = 28
COMEDY = 35


def genre_names(genre_ids):
    """
    Translates TMDB genre ids to display names.

    Unknown ids become "Unknown". Only the first three names are kept,
    in input order.

    Args:
        genre_ids (list[int]): TMDB genre identifiers.

    Returns:
        list[str]: At most three genre names.
    """
    return [GENRE_MAP.get(g, UNKNOWN_GENRE) for g in genre_ids][:MAX_GENRES]
