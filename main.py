import logging
import sys

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from article_service import create_app
from article_service.config import Settings
from article_service.log import configure_logging
import article_service.database

logger = logging.getLogger("article_service.main")


def main():
    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    try:
        app = create_app(settings=settings)
        article_service.database.mongo.cx.admin.command("ping")
    except PyMongoError as exc:
        logger.error("Could not reach MongoDB at %s: %s", settings.MONGO_URI, exc)
        sys.exit(1)

    logger.info("Serving articles on %s:%s", settings.HOST, settings.PORT)
    app.run(settings.HOST, port=settings.PORT, debug=False, threaded=True)


if __name__ == "__main__":
    main()
