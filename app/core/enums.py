import enum

class Difficulty(str, enum.Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

class Role(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"
