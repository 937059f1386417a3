from enum import Enum
from typing import Optional

from decouple import Csv, config


class MissingFilterPolicy(str, Enum):
    UNFILTERED = "unfiltered"
    EMPTY = "empty"


DATABASE_URL = config("DATABASE_URL", default="")
DB_DRIVER = config("DB_DRIVER", default="mysql+pymysql")
DB_HOST = config("DB_HOST", default="localhost")
DB_PORT: Optional[int] = config("DB_PORT", default=None, cast=lambda v: int(v) if v else None)
DB_USER = config("DB_USER", default="root")
DB_PASSWORD = config("DB_PASSWORD", default="")
DB_NAME = config("DB_NAME", default="healthcare")

DB_POOL_SIZE = config("DB_POOL_SIZE", default=5, cast=int)
DB_MAX_OVERFLOW = config("DB_MAX_OVERFLOW", default=5, cast=int)
DB_POOL_TIMEOUT = config("DB_POOL_TIMEOUT", default=10, cast=int)
DB_CONNECT_ATTEMPTS = config("DB_CONNECT_ATTEMPTS", default=3, cast=int)
DB_CONNECT_BACKOFF_MAX = config("DB_CONNECT_BACKOFF_MAX", default=8, cast=int)

# "unfiltered": /filter without its parameter lists everything; "empty": returns no rows
MISSING_FILTER_POLICY = config(
    "MISSING_FILTER_POLICY", default=MissingFilterPolicy.UNFILTERED.value, cast=MissingFilterPolicy
)

CORS_ORIGINS = config("CORS_ORIGINS", default="*", cast=Csv())
HOST = config("HOST", default="0.0.0.0")
PORT = config("PORT", default=3000, cast=int)
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
