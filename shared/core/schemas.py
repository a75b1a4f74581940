from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every request/response body: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class HealthOut(BaseModel):
    status: str
    service: str
    timestamp: datetime


class DbHealthOut(BaseModel):
    status: str
    db: str
    timestamp: datetime
