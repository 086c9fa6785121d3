from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    status: Literal[True] = True
    data: T


class ResultEnvelope(BaseModel, Generic[T]):
    status: Literal[True] = True
    result: T


class StatusEnvelope(BaseModel):
    status: Literal[True] = True


class GreetingEnvelope(BaseModel):
    status: Literal[True] = True
    msg: str


class ErrorEnvelope(BaseModel):
    status: Literal[False] = False
    err_message: str = Field(alias="errMessage")

    model_config = ConfigDict(populate_by_name=True)
