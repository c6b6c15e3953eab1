from pydantic import BaseModel
from typing import Any, Dict, List

class UserDataQuery(BaseModel):
    # Operator and direction are validated by the query builder, which fails closed.
    fields: List[str] = []
    key: str
    compare: str = "="
    value: Any = ""
    orderby: str = "ID"
    order: str = "ASC"

class UserDataResult(BaseModel):
    rows: List[Dict[str, Any]]
    total: int

class RequestContextOut(BaseModel):
    segments: List[str]
    use_wrapper: bool
