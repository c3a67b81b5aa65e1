"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.api.schemas import CreateUserRequest, UserResource
from identity.user.favorites import AddFavoriteProduct, RemoveFavoriteProduct
from identity.user.registration import CreateUser
from identity.user.user import User

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def _user_resource(user_id: str) -> UserResource:
    return UserResource.from_user(current_domain.repository_for(User).get(user_id))


@router.post("", status_code=201, response_model=UserResource)
@router.post("/", status_code=201, response_model=UserResource, include_in_schema=False)
async def create_user(body: CreateUserRequest) -> UserResource:
    command = CreateUser(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
        country=body.country,
        city=body.city,
        street=body.street,
        zip=body.zip,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return _user_resource(user_id)


@router.get("/{user_id}", response_model=UserResource)
async def get_user(user_id: str):
    try:
        return _user_resource(user_id)
    except ObjectNotFoundError:
        return Response(status_code=404)


@router.put("/{user_id}/favorites/{product_id}", response_model=UserResource)
async def add_favorite_product(user_id: str, product_id: str):
    try:
        current_domain.process(AddFavoriteProduct(user_id=user_id, product_id=product_id), asynchronous=False)
    except ObjectNotFoundError:
        return Response(status_code=404)
    return _user_resource(user_id)


@router.delete("/{user_id}/favorites/{product_id}", response_model=UserResource)
async def remove_favorite_product(user_id: str, product_id: str):
    try:
        current_domain.process(RemoveFavoriteProduct(user_id=user_id, product_id=product_id), asynchronous=False)
    except ObjectNotFoundError:
        return Response(status_code=404)
    return _user_resource(user_id)
