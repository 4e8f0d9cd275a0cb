# Models/models.py
# Pydantic models for test accounts and the HTTP payloads around them.
# Account is frozen so it hashes by value and can live in a set.

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from App.Core.constants import DEFAULT_ENVIRONMENT


class Account(BaseModel):
    """Login credentials for a test account."""
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str = Field("", repr=False)
    display_name: Optional[str] = None


class AccountRequest(BaseModel):
    account: Account
    environment: str = Field(DEFAULT_ENVIRONMENT, min_length=1)


class AccountsResponse(BaseModel):
    environment: str
    accounts: List[Account]


class EnvironmentsResponse(BaseModel):
    environments: List[str]


class SelectResponse(BaseModel):
    selected: bool
