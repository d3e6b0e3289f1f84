from fastapi import APIRouter, Query
from typing import List, Optional

from weightwise.content import daily_content, random_content, filter_content
from weightwise.schemas.motivation import MotivationalContentResponse, DailyContentResponse
from weightwise.utils.enums import ContentCategory

router = APIRouter()


@router.get("", response_model=List[MotivationalContentResponse])
async def list_content(
    category: Optional[ContentCategory] = Query(None, description="Limit to one category")
):
    """All quotes and tips"""
    return [MotivationalContentResponse.model_validate(c) for c in filter_content(category)]


@router.get("/daily", response_model=DailyContentResponse)
async def get_daily_content():
    """Quote and tip of the day"""
    quote, tip = daily_content()
    return DailyContentResponse(
        quote=MotivationalContentResponse.model_validate(quote),
        tip=MotivationalContentResponse.model_validate(tip),
    )


@router.get("/random", response_model=DailyContentResponse)
async def get_random_content():
    """A random quote and tip"""
    quote, tip = random_content()
    return DailyContentResponse(
        quote=MotivationalContentResponse.model_validate(quote),
        tip=MotivationalContentResponse.model_validate(tip),
    )
