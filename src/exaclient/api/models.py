"""Pydantic models for exaroton API responses."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from exaclient.api.exceptions import ExarotonAPIError


class _ExarotonModel(BaseModel):
    """Base model mapping camelCase API keys to snake_case attributes."""
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _none_to_list(v: list | None) -> list:
    """Coerce None to empty list for API fields that may return null."""
    return v if v is not None else []


class ServerStatus(IntEnum):
    OFFLINE = 0
    ONLINE = 1
    STARTING = 2
    STOPPING = 3
    RESTARTING = 4
    SAVING = 5
    LOADING = 6
    CRASHED = 7
    PENDING = 8
    TRANSFERRING = 9
    PREPARING = 10

    @classmethod
    def _missing_(cls, value):
        # Status codes added by the API later than this client.
        if isinstance(value, int) and not isinstance(value, bool):
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return member
        return None


class Account(_ExarotonModel):
    name: str
    email: str | None = None
    verified: bool = False
    credits: float = 0


class Players(_ExarotonModel):
    max: int = 0
    count: int = 0
    names: list[str] = Field(default_factory=list, alias="list")

    @field_validator("names", mode="before")
    @classmethod
    def _coerce_lists(cls, v):
        return _none_to_list(v)


class Software(_ExarotonModel):
    id: str
    name: str | None = None
    version: str | None = None


class Server(_ExarotonModel):
    id: str
    name: str
    address: str | None = None
    motd: str | None = None
    status: ServerStatus = ServerStatus.OFFLINE
    host: str | None = None
    port: int | None = None
    players: Players = Field(default_factory=Players)
    software: Software | None = None
    shared: bool = False

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, v):
        if isinstance(v, int) and not isinstance(v, ServerStatus):
            return ServerStatus(v)
        return v

    @property
    def is_online(self) -> bool:
        return self.status == ServerStatus.ONLINE


class Log(_ExarotonModel):
    content: str | None = None


class UploadedLog(_ExarotonModel):
    id: str
    url: str
    raw: str | None = None


class Ram(_ExarotonModel):
    ram: int


class Motd(_ExarotonModel):
    motd: str


class FileInfo(_ExarotonModel):
    path: str
    name: str
    is_text_file: bool = False
    is_config_file: bool = False
    is_directory: bool = False
    is_log: bool = False
    is_readable: bool = False
    is_writable: bool = False
    size: int = 0
    children: list[FileInfo] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_lists(cls, v):
        return _none_to_list(v)


class ConfigOption(_ExarotonModel):
    key: str
    value: Any = None
    label: str | None = None
    type: str | None = None
    options: list[str] | None = None


class CreditPool(_ExarotonModel):
    id: str
    name: str
    credits: float = 0
    servers: int = 0
    owner: str | None = None
    is_owner: bool = False
    members: int = 0
    own_share: float = 0
    own_credits: float = 0


class CreditPoolMember(_ExarotonModel):
    account: str
    name: str
    share: float = 0
    credits: float = 0
    is_owner: bool = False


T = TypeVar("T")


class ExarotonResponse(_ExarotonModel, Generic[T]):
    """The ``{success, error, data}`` envelope around every API reply."""

    success: bool
    error: str | None = None
    data: T | None = None

    def unwrap(self) -> T | None:
        """Return ``data``, raising ExarotonAPIError if the call failed."""
        if not self.success:
            raise ExarotonAPIError(self.error or "Request was not successful")
        return self.data


class AccountResponse(ExarotonResponse[Account]):
    pass


class ServersResponse(ExarotonResponse[list[Server]]):
    pass


class ServerResponse(ExarotonResponse[Server]):
    pass


class LogResponse(ExarotonResponse[Log]):
    pass


class UploadedLogResponse(ExarotonResponse[UploadedLog]):
    pass


class RamResponse(ExarotonResponse[Ram]):
    pass


class MotdResponse(ExarotonResponse[Motd]):
    pass


# Action endpoints (start, stop, command, ...) reply with null or a short string.
class GenericResponse(ExarotonResponse[Any]):
    pass


class ListResponse(ExarotonResponse[list[str]]):
    pass


class FileInformationResponse(ExarotonResponse[FileInfo]):
    pass


class ConfigOptionsResponse(ExarotonResponse[list[ConfigOption]]):
    pass


class CreditPoolsResponse(ExarotonResponse[list[CreditPool]]):
    pass


class CreditPoolResponse(ExarotonResponse[CreditPool]):
    pass


class CreditPoolMembersResponse(ExarotonResponse[list[CreditPoolMember]]):
    pass


class CreditPoolServersResponse(ExarotonResponse[list[Server]]):
    pass


R = TypeVar("R", bound=ExarotonResponse)


def parse_response(response_cls: type[R], data: dict[str, Any]) -> R:
    """Validate a decoded reply into its envelope model.

    An empty 2xx body (``{}`` from the client) counts as success without
    data. A reply that does not fit the model raises ExarotonAPIError.
    """
    if not data:
        return response_cls(success=True)
    try:
        return response_cls.model_validate(data)
    except ValidationError as e:
        raise ExarotonAPIError(
            f"Unexpected {response_cls.__name__} payload: "
            f"{e.error_count()} validation error(s)"
        ) from e
