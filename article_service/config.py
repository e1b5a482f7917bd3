from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings, read from environment variables or a .env file"""

    MONGO_URI: str = "mongodb://localhost:27017/article"
    # Used when MONGO_URI names no database
    MONGO_DBNAME: str = "article"
    MONGO_TIMEOUT_MS: int = 5000
    ARTICLES_COLLECTION: str = "articles"

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}
