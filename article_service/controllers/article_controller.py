from bson import ObjectId
from bson.errors import InvalidId
from flask import request, jsonify
from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from werkzeug.exceptions import BadRequest

from article_service.errors import InvalidInput, NotFound, StoreUnavailable
from article_service.models import Article, ArticleFields


def parse_article_id(article_id: str) -> ObjectId:
    try:
        return ObjectId(article_id)
    except (InvalidId, TypeError) as exc:
        raise InvalidInput(str(exc)) from exc


def decode_article() -> ArticleFields:
    """
    Decode the request body into the writable article fields
    """
    try:
        data = request.get_json(force=True)
    except BadRequest as exc:
        raise InvalidInput(exc.description) from exc

    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")

    try:
        return ArticleFields.model_validate(data)
    except ValidationError as exc:
        raise InvalidInput(str(exc)) from exc


class ArticleController:
    def __init__(self, collection: Collection):
        self.collection = collection

    def create_article(self):
        """
        Take the article from the request and deposit it into the collection, the id is assigned by mongo
        """
        article = decode_article()
        try:
            result = self.collection.insert_one(article.to_document())
        except PyMongoError as exc:
            raise StoreUnavailable(str(exc)) from exc
        return jsonify({"id": str(result.inserted_id)}), 201

    def get_article(self, article_id: str):
        object_id = parse_article_id(article_id)
        try:
            document = self.collection.find_one({"_id": object_id})
        except PyMongoError as exc:
            # A failed lookup is reported the same way as a miss
            raise NotFound("Article not found") from exc

        if document is None:
            raise NotFound("Article not found")
        try:
            article = Article.from_document(document)
        except ValidationError as exc:
            # Stored fields that do not decode are treated as a miss
            raise NotFound("Article not found") from exc
        return jsonify(article.model_dump())

    def get_articles(self):
        """
        Return every article in cursor order, without the mongo id
        """
        try:
            articles = list(self.collection.find({}, {"_id": 0}))
        except PyMongoError as exc:
            raise StoreUnavailable(str(exc)) from exc
        return jsonify(articles)

    def update_article(self, article_id: str):
        """
        Set the title, content and author of the matched article.
        Fields missing from the body are set to empty strings, the whole writable part is replaced.
        """
        object_id = parse_article_id(article_id)
        article = decode_article()
        try:
            result = self.collection.update_one({"_id": object_id}, {"$set": article.to_document()})
        except PyMongoError as exc:
            raise StoreUnavailable(str(exc)) from exc
        return jsonify({"updated": result.modified_count})

    def delete_article(self, article_id: str):
        object_id = parse_article_id(article_id)
        try:
            result = self.collection.delete_one({"_id": object_id})
        except PyMongoError as exc:
            raise StoreUnavailable(str(exc)) from exc
        return jsonify({"deleted": result.deleted_count})
