from decouple import AutoConfig
from pathlib import Path

config = AutoConfig()


class Config:
    def __init__(self):
        # Environment
        self.ENV = config("ENV", default="development")

        # Auth
        self.SECRET_KEY = config("SECRET_KEY", default="dev-secret-key")

        # App
        self.BIND = config("BIND", default="127.0.0.1:8000")
        self.DEBUG = config("DEBUG", default=True, cast=bool)

        # API docs
        self.API_TITLE = "Qavah-mart Search API"
        self.API_VERSION = "v1"
        self.OPENAPI_VERSION = "3.0.3"

        # Logging
        self.LOG_DIR = Path(config("LOG_DIR", default="logs"))
        self.LOG_LEVEL = config("LOG_LEVEL", default="INFO")
        self.SEARCH_LOG_LEVEL = config("SEARCH_LOG_LEVEL", default=self.LOG_LEVEL)
        self.CATALOG_LOG_LEVEL = config("CATALOG_LOG_LEVEL", default=self.LOG_LEVEL)

        # Catalog
        self.CATALOG_PATH = config("CATALOG_PATH", default=None)
        self.CATALOG_SEED = config("CATALOG_SEED", default=12345, cast=int)
        self.CATALOG_PRODUCTS_PER_SUBCATEGORY = config(
            "CATALOG_PRODUCTS_PER_SUBCATEGORY", default=5, cast=int
        )

        # Search
        self.SEARCH_DEFAULT_LIMIT = config("SEARCH_DEFAULT_LIMIT", default=20, cast=int)
        self.SEARCH_MAX_LIMIT = config("SEARCH_MAX_LIMIT", default=100, cast=int)


settings = Config()
