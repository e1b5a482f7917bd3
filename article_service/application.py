import logging
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from article_service.config import Settings
from article_service.controllers import ArticleController
from article_service.errors import ArticleServiceError
from article_service.log import register_request_logging
import article_service.database

logger = logging.getLogger(__name__)


def handle_service_error(error: ArticleServiceError):
    if error.status_code >= 500:
        logger.error("Request failed: %s", error.message, exc_info=error)
    else:
        logger.info("Request rejected (%s): %s", error.status_code, error.message)
    return jsonify({"error": error.message}), error.status_code


def handle_http_error(error: HTTPException):
    # Routing redirects keep their own response
    if error.code is None or error.code < 400:
        return error
    return jsonify({"error": error.description}), error.code


def create_app(db_uri: Optional[str] = None, settings: Optional[Settings] = None, **config_overrides) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping((settings or Settings()).model_dump())
    app.config.update(config_overrides)
    if db_uri is not None:
        app.config["MONGO_URI"] = db_uri

    mongo = article_service.database.mongo
    mongo.init_app(app, timeoutMS=app.config["MONGO_TIMEOUT_MS"])

    # A URI without a database path leaves mongo.db unset
    database = mongo.db
    if database is None:
        database = mongo.cx[app.config["MONGO_DBNAME"]]

    # Add the articles collection if it doesn't already exist
    collection_name = app.config["ARTICLES_COLLECTION"]
    if collection_name not in database.list_collection_names():
        database.create_collection(collection_name)
        logger.info("Created collection %r in %r", collection_name, database.name)

    articles = ArticleController(database[collection_name])

    # Register the article routes
    app.add_url_rule("/articles", methods=["POST"], view_func=articles.create_article)
    app.add_url_rule("/articles", methods=["GET"], view_func=articles.get_articles)
    app.add_url_rule("/articles/<article_id>", methods=["GET"], view_func=articles.get_article)
    app.add_url_rule("/articles/<article_id>", methods=["PUT"], view_func=articles.update_article)
    app.add_url_rule("/articles/<article_id>", methods=["DELETE"], view_func=articles.delete_article)

    app.register_error_handler(ArticleServiceError, handle_service_error)
    app.register_error_handler(HTTPException, handle_http_error)
    register_request_logging(app)

    return app
