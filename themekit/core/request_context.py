from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from starlette.requests import Request


@dataclass(frozen=True)
class RequestContext:
    uri: str = "/"
    query_params: Mapping[str, str] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return self.uri.split("?", 1)[0]

    @classmethod
    def from_request(cls, request: Request) -> "RequestContext":
        raw_path = request.scope.get("raw_path")
        path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
        query = request.url.query
        return cls(uri=f"{path}?{query}" if query else path, query_params=dict(request.query_params))


def parse_segments(uri: str) -> list[str]:
    path = str(uri or "").split("?", 1)[0]
    return [segment for segment in path.split("/") if segment]
