from .base import CamelModel


class PostCounts(CamelModel):
    published: int
    drafts: int
    total: int


class DashboardStats(CamelModel):
    posts: PostCounts
    comments: int
    categories: int
    users: int
