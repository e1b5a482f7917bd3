from article_service.controllers.article_controller import ArticleController
