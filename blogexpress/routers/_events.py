from typing import Any, Type

from pydantic import BaseModel

from blogexpress.services.broadcaster import broadcaster


def emit(event_type: str, obj: Any, schema: Type[BaseModel]) -> None:
    """Broadcast an ORM row in its wire (camelCase JSON) shape."""
    broadcaster.broadcast(event_type, schema.model_validate(obj).model_dump(by_alias=True, mode="json"))


def emit_deleted(event_type: str, obj_id: int) -> None:
    broadcaster.broadcast(event_type, {"id": obj_id})
