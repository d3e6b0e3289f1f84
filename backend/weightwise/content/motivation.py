"""Static quotes and tips shown on the motivation page."""

import random
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from weightwise.utils.enums import ContentType, ContentCategory


@dataclass(frozen=True)
class MotivationalContent:
    id: str
    type: ContentType
    content: str
    category: ContentCategory
    author: Optional[str] = None


MOTIVATIONAL_QUOTES: List[MotivationalContent] = [
    MotivationalContent(
        id="1",
        type=ContentType.quote,
        content="The groundwork for all happiness is good health.",
        author="Leigh Hunt",
        category=ContentCategory.general,
    ),
    MotivationalContent(
        id="2",
        type=ContentType.quote,
        content="Take care of your body. It's the only place you have to live.",
        author="Jim Rohn",
        category=ContentCategory.general,
    ),
    MotivationalContent(
        id="3",
        type=ContentType.quote,
        content="Health is not about the weight you lose, but about the life you gain.",
        author="Dr. Josh Axe",
        category=ContentCategory.mindset,
    ),
    MotivationalContent(
        id="4",
        type=ContentType.quote,
        content="Every workout is progress, no matter how small.",
        author="Unknown",
        category=ContentCategory.exercise,
    ),
    MotivationalContent(
        id="5",
        type=ContentType.quote,
        content="You don't have to be great to get started, but you have to get started to be great.",
        author="Les Brown",
        category=ContentCategory.mindset,
    ),
]

HEALTH_TIPS: List[MotivationalContent] = [
    MotivationalContent(
        id="6",
        type=ContentType.tip,
        content="Drink a glass of water before every meal to help control portion sizes and stay hydrated.",
        category=ContentCategory.nutrition,
    ),
    MotivationalContent(
        id="7",
        type=ContentType.tip,
        content="Take the stairs instead of the elevator. Small changes in daily activity add up over time.",
        category=ContentCategory.exercise,
    ),
    MotivationalContent(
        id="8",
        type=ContentType.tip,
        content="Practice mindful eating by chewing slowly and paying attention to hunger cues.",
        category=ContentCategory.mindset,
    ),
    MotivationalContent(
        id="9",
        type=ContentType.tip,
        content="Plan your meals in advance to avoid impulsive food choices and maintain consistent nutrition.",
        category=ContentCategory.nutrition,
    ),
    MotivationalContent(
        id="10",
        type=ContentType.tip,
        content="Aim for 7-9 hours of quality sleep each night. Poor sleep can affect hunger hormones and weight management.",
        category=ContentCategory.general,
    ),
    MotivationalContent(
        id="11",
        type=ContentType.tip,
        content="Find an exercise buddy or join a fitness community for accountability and motivation.",
        category=ContentCategory.exercise,
    ),
    MotivationalContent(
        id="12",
        type=ContentType.tip,
        content="Focus on progress, not perfection. Celebrate small victories along your journey.",
        category=ContentCategory.mindset,
    ),
    MotivationalContent(
        id="13",
        type=ContentType.tip,
        content="Keep healthy snacks visible and easily accessible while storing less healthy options out of sight.",
        category=ContentCategory.nutrition,
    ),
]


def daily_content(today: Optional[date] = None) -> Tuple[MotivationalContent, MotivationalContent]:
    """Quote and tip of the day, rotating by day of year."""
    if today is None:
        today = date.today()
    day_of_year = today.timetuple().tm_yday
    return (
        MOTIVATIONAL_QUOTES[day_of_year % len(MOTIVATIONAL_QUOTES)],
        HEALTH_TIPS[day_of_year % len(HEALTH_TIPS)],
    )


def random_content(rng: Optional[random.Random] = None) -> Tuple[MotivationalContent, MotivationalContent]:
    rng = rng or random
    return rng.choice(MOTIVATIONAL_QUOTES), rng.choice(HEALTH_TIPS)


def filter_content(category: Optional[ContentCategory] = None) -> List[MotivationalContent]:
    """All quotes and tips, optionally limited to one category."""
    all_content = MOTIVATIONAL_QUOTES + HEALTH_TIPS
    if category is None:
        return all_content
    category = ContentCategory(category)
    return [c for c in all_content if c.category == category]
