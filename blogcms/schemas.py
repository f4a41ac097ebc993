from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Request bodies carry no length or pattern constraints: the handlers run
# the field rules and report every violation in one message.


# --- Category ---

class CategoryWrite(BaseModel):
    name: str
    slug: str
    description: str = ""
    parent_id: str | None = None
    display_order: int = 0
    is_active: bool = True


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: str
    parent_id: str | None
    display_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Article ---

class ArticleWrite(BaseModel):
    title: str
    slug: str
    summary: str = ""
    content: str
    author: str
    category_id: str
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False
    published_at: datetime | None = None


class ArticleResponse(BaseModel):
    id: str
    title: str
    slug: str
    summary: str
    content: str
    author: str
    category_id: str
    tags: list[str]
    is_published: bool
    published_at: datetime | None
    view_count: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Health ---

class HealthResponse(BaseModel):
    status: str
    version: str
    cache: str
