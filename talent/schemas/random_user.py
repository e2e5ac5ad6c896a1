"""Schemas for the randomuser.me API payload.

Only the fields used to build a recruiter are modelled; everything else in
the upstream response is ignored.
"""

from pydantic import BaseModel


class RandomUserName(BaseModel):
    title: str | None = None
    first: str
    last: str


class RandomUser(BaseModel):
    email: str
    name: RandomUserName


class RandomUserResponse(BaseModel):
    results: list[RandomUser]


class RandomIdentity(BaseModel):
    """Flat (full name, email) pair extracted from the first result."""

    full_name: str
    email: str

    @classmethod
    def from_random_user(cls, user: RandomUser) -> "RandomIdentity":
        return cls(full_name=f"{user.name.first} {user.name.last}", email=user.email)
