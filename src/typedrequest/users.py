from typing import Literal, TypedDict

from .client import Client
from .types import Descriptor


class User(TypedDict):
    name: str


class UserRole(TypedDict):
    type: Literal["admin", "staff"]


async def get_user(client: Client, user_id: int) -> User:
    return await client.request(
        Descriptor[None, User](response=User), "GET", f"/users/{user_id}"
    )


async def create_user(client: Client, user: User) -> User:
    return await client.request(
        Descriptor[User, User](response=User, body=User), "POST", "/users", user
    )


async def get_user_name(client: Client, user_id: int) -> str:
    user = await get_user(client, user_id)
    return user["name"]


async def get_user_roles(client: Client, user_id: int) -> list[UserRole]:
    return await client.get(f"/users/{user_id}/roles", list[UserRole])
