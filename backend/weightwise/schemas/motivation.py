from pydantic import BaseModel
from typing import Optional

from weightwise.utils.enums import ContentType, ContentCategory


class MotivationalContentResponse(BaseModel):
    id: str
    type: ContentType
    content: str
    author: Optional[str] = None
    category: ContentCategory

    class Config:
        from_attributes = True


class DailyContentResponse(BaseModel):
    quote: MotivationalContentResponse
    tip: MotivationalContentResponse
