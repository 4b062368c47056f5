# File: blog_api/schemas/user.py

from typing import Annotated, Optional

from pydantic import BaseModel, EmailStr, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

Password = Annotated[str, StringConstraints(min_length=6, max_length=100)]
DisplayName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class Credentials(BaseModel):
    email: EmailStr
    password: Password

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class SignupInput(Credentials):
    name: Optional[DisplayName] = None


class SigninInput(Credentials):
    pass


class UserRead(BaseModel):
    id: str
    email: str
    name: Optional[str] = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    token: str
    user: UserRead


class AuthorRead(BaseModel):
    id: str
    name: Optional[str] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
