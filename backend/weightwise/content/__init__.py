from weightwise.content.motivation import (
    MotivationalContent,
    MOTIVATIONAL_QUOTES,
    HEALTH_TIPS,
    daily_content,
    random_content,
    filter_content,
)

__all__ = [
    "MotivationalContent",
    "MOTIVATIONAL_QUOTES",
    "HEALTH_TIPS",
    "daily_content",
    "random_content",
    "filter_content",
]
