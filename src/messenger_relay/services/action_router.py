"""Dispatch of API actions to their handlers."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from messenger_relay.application.dto.action import ActionRequest, ActionResult, Payload
from messenger_relay.application.dto.principal import Identity
from messenger_relay.application.exceptions import AppError, StorageError, UnauthorizedError
from messenger_relay.application.policies.params import parse_cursor, require_param
from messenger_relay.application.ports.clock import Clock, SystemClock
from messenger_relay.application.ports.hasher import PasswordHasher
from messenger_relay.application.uow import UnitOfWork
from messenger_relay.domain.value_objects.enums import Action, ResultStatus
from messenger_relay.domain.value_objects.limits import (
    MESSAGE_MAX_BYTES,
    PASSWORD_MAX_BYTES,
    USERNAME_MAX_BYTES,
)
from messenger_relay.services import auth_service, message_service, user_service

logger = logging.getLogger(__name__)

ACCEPTED_METHOD = "POST"

Handler = Callable[[Mapping[str, str], Identity | None, UnitOfWork], Awaitable[Payload]]


@dataclass(frozen=True, slots=True)
class Route:
    handler: Handler
    auth_required: bool = False


class ActionRouter:
    """Resolve a request's action through a route table and run its handler.

    Every outcome, including failures, comes back as an ActionResult. Writes
    run one at a time under the router's lock; password hashing stays outside
    it.
    """

    def __init__(
        self,
        hasher: PasswordHasher,
        clock: Clock | None = None,
        write_lock: asyncio.Lock | None = None,
    ) -> None:
        self._hasher = hasher
        self._clock = clock or SystemClock()
        self._write_lock = write_lock or asyncio.Lock()
        self._routes: dict[Action, Route] = {
            Action.REGISTER: Route(self._register),
            Action.GET_USER: Route(self._get_user),
            Action.SEND_MESSAGE: Route(self._send_message, auth_required=True),
            Action.GET_MESSAGE: Route(self._get_message, auth_required=True),
        }

    async def dispatch(self, request: ActionRequest, uow: UnitOfWork) -> ActionResult:
        if request.method != ACCEPTED_METHOD:
            return _not_implemented()

        action = Action.parse(request.params.get("action"))
        route = self._routes.get(action)
        if route is None:
            return _not_implemented()

        try:
            async with uow:
                identity = None
                if route.auth_required:
                    identity = await auth_service.authenticate(
                        request.credentials, uow, self._hasher,
                    )
                payload = await route.handler(request.params, identity, uow)
        except StorageError as exc:
            logger.error("Storage failure in %s: %s", action, exc.detail, exc_info=exc)
            return ActionResult(ResultStatus.INTERNAL_ERROR, StorageError.default_detail)
        except AppError as exc:
            return ActionResult(exc.status, exc.detail)

        if payload is None:
            return ActionResult(ResultStatus.NO_CONTENT)
        return ActionResult(ResultStatus.OK, payload)

    async def _register(
        self, params: Mapping[str, str], _identity: Identity | None, uow: UnitOfWork,
    ) -> Payload:
        username = require_param(params, "user", USERNAME_MAX_BYTES)
        password = require_param(params, "password", PASSWORD_MAX_BYTES)
        password_hash = await self._hasher.hash(password)
        async with self._write_lock:
            return await user_service.register_user(username, password_hash, uow)

    async def _get_user(
        self, params: Mapping[str, str], _identity: Identity | None, uow: UnitOfWork,
    ) -> Payload:
        username = require_param(params, "user", USERNAME_MAX_BYTES)
        return await user_service.get_user(username, uow)

    async def _send_message(
        self, params: Mapping[str, str], identity: Identity | None, uow: UnitOfWork,
    ) -> Payload:
        identity = _require_identity(identity)
        recipient = require_param(params, "to", USERNAME_MAX_BYTES)
        body = require_param(params, "message", MESSAGE_MAX_BYTES)
        async with self._write_lock:
            await message_service.send_message(identity, recipient, body, uow, self._clock)
        return ""

    async def _get_message(
        self, params: Mapping[str, str], identity: Identity | None, uow: UnitOfWork,
    ) -> Payload:
        identity = _require_identity(identity)
        cursor = parse_cursor(params.get("last_message"))
        return await message_service.get_next_message(identity, cursor, uow)


def _require_identity(identity: Identity | None) -> Identity:
    if identity is None:
        raise UnauthorizedError()
    return identity


def _not_implemented() -> ActionResult:
    return ActionResult(ResultStatus.NOT_IMPLEMENTED, "Not implemented")
