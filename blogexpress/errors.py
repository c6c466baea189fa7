from __future__ import annotations
from typing import Any, Dict


class BlogExpressError(Exception):
    """Base error; rendered as {"message": ..., **extra}."""

    status_code = 500

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra: Dict[str, Any] = extra

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, **self.extra}


class InvalidRequestError(BlogExpressError):
    """Rejected input: uniqueness clash, dangling reference, guarded delete."""

    status_code = 400


class NotFoundError(BlogExpressError):
    status_code = 404
