"""REST endpoints for the users collection.

Routes are mounted at the collection root:

    POST   /        create
    GET    /        list
    GET    /{id}    get by id
    PATCH  /{id}    partial update
    DELETE /{id}    delete by id

Handlers translate every failure into the response envelope locally;
unexpected errors are logged and answered with a generic 500.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.body_guard import json_body
from api.envelope import envelope_response, error_response, unknown_error_response
from application.user.commands.create_user import CreateUserCommand
from application.user.commands.delete_user import DeleteUserCommand
from application.user.commands.update_user import UpdateUserCommand
from application.user.queries.get_user import GetUserQuery
from application.user.queries.list_users import ListUsersQuery
from domain.user.core.exceptions.user_errors import UserDomainError
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def get_repository(request: Request) -> IUserRepository:
    """Repository injected at app creation or by the lifespan."""
    repository: IUserRepository = request.app.state.user_repository
    return repository


@router.post("/")
async def create_user(
    payload: Dict[str, Any] = Depends(json_body),
    repository: IUserRepository = Depends(get_repository),
) -> JSONResponse:
    try:
        user = await CreateUserCommand(repository).execute(payload)
    except UserDomainError as e:
        return error_response(e)
    except Exception:
        logger.exception("users.create_failed")
        return unknown_error_response()

    return envelope_response(status.HTTP_200_OK, True, result=user.to_dict())


@router.get("/")
async def list_users(repository: IUserRepository = Depends(get_repository)) -> JSONResponse:
    try:
        users = await ListUsersQuery(repository).execute()
    except Exception:
        logger.exception("users.list_failed")
        return unknown_error_response()

    # success stays false on this path, matching the published contract
    return envelope_response(status.HTTP_200_OK, False, result=[u.to_dict() for u in users])


@router.get("/{user_id}")
async def get_user(
    user_id: str, repository: IUserRepository = Depends(get_repository)
) -> JSONResponse:
    try:
        user = await GetUserQuery(repository).by_id(user_id)
    except UserDomainError as e:
        return error_response(e)
    except Exception:
        logger.exception("users.get_failed")
        return unknown_error_response()

    return envelope_response(status.HTTP_200_OK, True, result=user.to_dict())


@router.patch("/{user_id}")
async def update_user(
    user_id: str,
    payload: Dict[str, Any] = Depends(json_body),
    repository: IUserRepository = Depends(get_repository),
) -> JSONResponse:
    try:
        user = await UpdateUserCommand(repository).execute(user_id, payload)
    except UserDomainError as e:
        return error_response(e)
    except Exception:
        logger.exception("users.update_failed")
        return unknown_error_response()

    return envelope_response(status.HTTP_200_OK, True, result=user.to_dict())


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, repository: IUserRepository = Depends(get_repository)
) -> JSONResponse:
    try:
        await DeleteUserCommand(repository).execute(user_id)
    except UserDomainError as e:
        return error_response(e)
    except Exception:
        logger.exception("users.delete_failed")
        return unknown_error_response()

    # success stays false on this path, matching the published contract
    return envelope_response(status.HTTP_200_OK, False)
