"""
Shared Pydantic schema bases.
"""
from pydantic import BaseModel, model_serializer

# Never serialized in any API response
SENSITIVE_FIELDS = frozenset({"password", "hashed_password"})


class ResponseModel(BaseModel):
    """Base for every response schema; drops password-bearing fields on output."""

    @model_serializer(mode="wrap")
    def _strip_sensitive_fields(self, handler):
        data = handler(self)
        if isinstance(data, dict):
            for field in SENSITIVE_FIELDS:
                data.pop(field, None)
        return data

    class Config:
        from_attributes = True
