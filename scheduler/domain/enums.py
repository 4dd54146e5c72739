from enum import Enum, IntEnum


class Rating(IntEnum):
    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4


class CardState(str, Enum):
    NEW = "New"
    LEARNING = "Learning"
    REVIEW = "Review"
    RELEARNING = "Relearning"


class ItemType(str, Enum):
    GRAMMAR = "grammar"
    VOCABULARY = "vocabulary"


RATING_LABELS = {
    Rating.AGAIN: "重来",
    Rating.HARD: "困难",
    Rating.GOOD: "良好",
    Rating.EASY: "简单",
}
