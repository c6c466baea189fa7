from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; input accepts both."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DeleteResult(CamelModel):
    success: bool = True


def reject_null(value):
    if value is None:
        raise ValueError("field may not be null")
    return value
