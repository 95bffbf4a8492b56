from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ott_backend.domain.accounts.entities import Account


class _CredentialsDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Field names differ between the clients this API has served.
    handle: str | None = Field(
        None,
        max_length=320,
        validation_alias=AliasChoices("handle", "email", "username"),
    )
    password: str | None = Field(
        None,
        max_length=256,
        validation_alias=AliasChoices("password", "secret"),
    )


class RegisterRequestDTO(_CredentialsDTO):
    display_name: str | None = Field(
        None,
        max_length=128,
        validation_alias=AliasChoices("display_name", "name"),
    )


class LoginRequestDTO(_CredentialsDTO):
    pass


class AccountDTO(BaseModel):
    id: str
    handle: str

    @classmethod
    def from_account(cls, account: Account) -> AccountDTO:
        return cls(id=account.id, handle=account.handle)


class RegisterResponseDTO(BaseModel):
    message: str = "Registered successfully"
    user: AccountDTO


class LoginResponseDTO(BaseModel):
    token: str
    user: AccountDTO


class ProfileResponseDTO(BaseModel):
    message: str = "Profile ok"
    user: AccountDTO
