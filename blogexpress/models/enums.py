import enum


class UserRole(str, enum.Enum):
    admin = "admin"
    user = "user"


class PostStatus(str, enum.Enum):
    draft = "draft"
    published = "published"


class CalendarView(str, enum.Enum):
    day = "day"
    week = "week"
    month = "month"
