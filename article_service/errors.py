class ArticleServiceError(Exception):
    """
    Base class for failures that are turned into a JSON error response
    """
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ArticleServiceError):
    status_code = 400


class NotFound(ArticleServiceError):
    status_code = 404


class StoreUnavailable(ArticleServiceError):
    status_code = 500
