# ABOUTME: SQLAlchemy column type storing pydantic models as JSON
# ABOUTME: Detail records round-trip through TypeAdapter validation on load

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from sqlalchemy import JSON, TypeDecorator
from sqlalchemy.engine import Dialect


class PydanticJson(TypeDecorator[Any]):
    """JSON column whose values are validated into a pydantic type when read.

    See: https://github.com/fastapi/sqlmodel/issues/63#issuecomment-2727480036
    """

    impl = JSON()
    cache_ok = True

    def __init__(self, pydantic_type: type) -> None:
        super().__init__()
        self.type_adapter = TypeAdapter(pydantic_type)

    def coerce_compared_value(self, op: Any, value: Any) -> Any:
        return self.impl.coerce_compared_value(op, value)  # type: ignore[misc]

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        return self.type_adapter.dump_python(value, mode="json", by_alias=True)

    def process_result_value(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        return self.type_adapter.validate_python(value)
