from enum import Enum


class Period(str, Enum):
    week = "week"
    month = "month"
    quarter = "quarter"
    year = "year"

    @property
    def days(self) -> int:
        return PERIOD_DAYS[self]


PERIOD_DAYS = {
    Period.week: 7,
    Period.month: 30,
    Period.quarter: 90,
    Period.year: 365,
}


class BMICategory(str, Enum):
    underweight = "Underweight"
    normal = "Normal"
    overweight = "Overweight"
    obese = "Obese"


class GoalType(str, Enum):
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


class GoalDirection(str, Enum):
    loss = "loss"
    gain = "gain"


class ContentType(str, Enum):
    quote = "quote"
    tip = "tip"


class ContentCategory(str, Enum):
    nutrition = "nutrition"
    exercise = "exercise"
    mindset = "mindset"
    general = "general"
