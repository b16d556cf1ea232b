from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel

DataT = TypeVar("DataT")


class ResponseModel(BaseModel, Generic[DataT]):
    """Envelope wrapping every API payload: {code, message, data}."""
    code: int = 200
    message: str = "success"
    data: Optional[DataT] = None

    @classmethod
    def success(cls, data: Any = None, message: str = "success") -> dict:
        return cls(data=data, message=message).model_dump()

    @classmethod
    def fail(cls, code: int = 400, message: str = "error", data: Any = None) -> dict:
        return cls(code=code, message=message, data=data).model_dump()
