import os

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Load environment variables
load_dotenv(os.path.join(BASE_DIR, ".env"))

APP_NAME = "Netflix Movies"

# TMDB API
TMDB_API_KEY = os.getenv("TMDB_API_KEY", "")
TMDB_PLACEHOLDER_KEY = "YOUR_TMDB_API_KEY_HERE"
TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
REQUEST_TIMEOUT = float(os.getenv("MOVIE_BROWSER_TIMEOUT", "10"))

POSTER_SIZES = {
    "small": "w185",
    "medium": "w342",
    "large": "w500",
    "original": "original",
}

BACKDROP_SIZES = {
    "small": "w300",
    "medium": "w780",
    "large": "w1280",
    "original": "original",
}

# Local storage
DB_PATH = os.getenv(
    "MOVIE_BROWSER_DB", os.path.join(BASE_DIR, "data", "movie_browser.db")
)
USERS_KEY = "netflix_users"
CURRENT_USER_KEY = "netflix_current_user"
PASSWORD_SALT = "netflix_salt"

LOG_LEVEL = os.getenv("MOVIE_BROWSER_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
