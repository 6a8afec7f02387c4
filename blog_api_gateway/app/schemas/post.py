"""
Pydantic models for blog posts.

``Post`` is the record kept by the post repository.  ``PostCreate``
and ``PostUpdate`` describe the request bodies of ``POST /posts`` and
``PUT /posts``; their field constraints are the request validation
rules.  An update is a full replace, so fields omitted from an update
request take their defaults rather than keeping stored values.  Ids
are strict integers: JSON strings, floats and booleans are rejected.
"""

from typing import List

from pydantic import BaseModel, Field

TITLE_MAX_LENGTH = 255
AUTHOR_MAX_LENGTH = 255


class Post(BaseModel):
    """A stored blog post.  ``id == 0`` means "not yet assigned"."""

    id: int = Field(0, examples=[22])
    title: str = Field(..., examples=["Title 22"])
    author: str = Field(..., examples=["Author 22"])
    content: str = Field("", examples=["Labore quiquia tempora modi."])


class PostCreate(BaseModel):
    """Schema for creating a post.  Unknown fields (including ``id``) are ignored."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, examples=["testB"])
    author: str = Field(..., min_length=1, max_length=AUTHOR_MAX_LENGTH, examples=["testA"])
    content: str = Field("", examples=["testC"])

    def to_record(self) -> Post:
        return Post(title=self.title, author=self.author, content=self.content)


class PostUpdate(PostCreate):
    """Schema for replacing an existing post addressed by ``id``."""

    id: int = Field(..., ge=0, strict=True, examples=[22])

    def to_record(self) -> Post:
        return Post(id=self.id, title=self.title, author=self.author, content=self.content)


class PostList(BaseModel):
    posts: List[Post]


class PostId(BaseModel):
    id: int


class SeedDocument(BaseModel):
    """Layout of the bundled startup data: ``{"posts": [...]}``."""

    posts: List[PostCreate]
