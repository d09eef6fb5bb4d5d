from enum import Enum


class Category(str, Enum):
    WORK = "WORK"
    PERSONAL = "PERSONAL"
    STUDY = "STUDY"
    HEALTH = "HEALTH"
    OTHER = "OTHER"
