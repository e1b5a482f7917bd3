from pydantic import BaseModel, ConfigDict


class ArticleFields(BaseModel):
    """
    The writable part of an article, as decoded from a request body.
    Missing fields decode to empty strings, unknown fields (including a client supplied id) are dropped.
    """
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    content: str = ""
    author: str = ""

    def to_document(self) -> dict:
        return self.model_dump(include={"title", "content", "author"})


class Article(ArticleFields):
    id: str

    @classmethod
    def from_document(cls, document: dict) -> "Article":
        fields = {key: value for key, value in document.items() if key != "_id"}
        return cls(id=str(document["_id"]), **fields)
