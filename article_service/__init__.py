from article_service.application import create_app
