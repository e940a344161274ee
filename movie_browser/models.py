from dataclasses import asdict, dataclass, field
from typing import Optional


@dataclass
class Account:
    """
    A registered user, as persisted in the accounts list.

    Attributes:
        id: Timestamp-derived identifier (milliseconds since the epoch).
        name: Display name, trimmed.
        email: Lowercase, trimmed email. Unique across accounts.
        password: Obfuscated password token, never the plain text.
        created_at: ISO-8601 creation timestamp.
    """

    id: int
    name: str
    email: str
    password: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict) -> "Account":
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            password=data["password"],
            created_at=data.get("createdAt", ""),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "createdAt": self.created_at,
        }

    def to_session(self) -> "Session":
        return Session(id=self.id, name=self.name, email=self.email)


@dataclass
class Session:
    """The logged-in user: an Account without its password."""

    id: int
    name: str
    email: str

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(id=data["id"], name=data["name"], email=data["email"])

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Result:
    """Outcome of a successful register/login call."""

    success: bool
    message: str
    session: Optional[Session] = None


@dataclass
class CatalogEntry:
    """
    A movie as returned by the TMDB API.

    The summary form (list endpoints) carries ``genre_ids``; the detail form
    (``/movie/{id}``) carries ``runtime`` and ``genres`` names instead.
    """

    id: int
    title: str
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    release_date: Optional[str] = None
    overview: Optional[str] = None
    genre_ids: list[int] = field(default_factory=list)
    runtime: Optional[int] = None
    genres: list[str] = field(default_factory=list)
    backdrop_path: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "CatalogEntry":
        """
        Builds an entry from a TMDB movie object.

        Empty strings and zero ratings/runtimes are normalized to ``None`` so
        that the "N/A" fallbacks apply the same way TMDB clients display them.
        """
        genres = [g["name"] for g in payload.get("genres") or [] if g.get("name")]
        return cls(
            id=payload["id"],
            title=payload.get("title") or payload.get("name") or "",
            poster_path=payload.get("poster_path") or None,
            vote_average=payload.get("vote_average") or None,
            release_date=payload.get("release_date") or None,
            overview=payload.get("overview") or None,
            genre_ids=list(payload.get("genre_ids") or []),
            runtime=payload.get("runtime") or None,
            genres=genres,
            backdrop_path=payload.get("backdrop_path") or None,
        )
