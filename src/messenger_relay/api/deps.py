"""FastAPI dependency injection helpers."""
from __future__ import annotations

import base64
from typing import Annotated, AsyncIterator

from fastapi import Depends, Request
from fastapi.security.utils import get_authorization_scheme_param

from messenger_relay.application.dto.principal import Credentials
from messenger_relay.infrastructure.db.session import Database
from messenger_relay.infrastructure.db.uow import SqlAlchemyUoW
from messenger_relay.services.action_router import ActionRouter


def get_database(request: Request) -> Database:
    return request.app.state.db


DatabaseDep = Annotated[Database, Depends(get_database)]


async def get_uow(db: DatabaseDep) -> AsyncIterator[SqlAlchemyUoW]:
    async for uow in db.unit_of_work():
        yield uow


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def get_action_router(request: Request) -> ActionRouter:
    return request.app.state.action_router


ActionRouterDep = Annotated[ActionRouter, Depends(get_action_router)]


async def get_credentials(request: Request) -> Credentials | None:
    """Basic-auth credentials, or None when the header is absent or malformed.

    The payload is decoded as UTF-8 so that any registrable name or password
    can authenticate. Whether credentials are required depends on the action,
    so a bad header is not rejected here.
    """
    scheme, param = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "basic" or not param:
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except ValueError:  # binascii.Error, UnicodeDecodeError, non-ASCII header
        return None
    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return Credentials(username=username, password=password)


CredentialsDep = Annotated[Credentials | None, Depends(get_credentials)]
