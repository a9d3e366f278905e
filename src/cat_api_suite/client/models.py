"""Request and response records exchanged with the HTTP façade."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, computed_field

Method = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

BODY_METHODS = ("POST", "PUT", "PATCH", "DELETE")


class RequestDescriptor(BaseModel):
    """One outbound call, described before it is executed."""

    model_config = ConfigDict(frozen=True)

    method: Method
    path: str  # /images/search
    params: dict[str, Any] | None = None  # None values are dropped on the wire
    headers: dict[str, str] | None = None  # merged over the default headers
    body: dict | list | str | None = None
    api_key: str | None = None  # sent as the api_key query parameter

    @property
    def carries_body(self) -> bool:
        return self.method in BODY_METHODS and self.body is not None


class ResponseResult(BaseModel):
    """A transport response normalized to status, headers and parsed body."""

    status: int
    status_text: str = ""
    headers: dict[str, str] = {}
    body: Any = None  # parsed JSON, or raw text for non-JSON responses

    @computed_field
    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
