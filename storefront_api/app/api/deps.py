"""
FastAPI dependencies shared by the v1 endpoints.

The store and the completion client live on ``app.state`` (see
``main.create_app``).  Routes never import them as globals; they ask
for a service through ``Depends`` and get one built around the
application's store.
"""

from fastapi import Depends, Request

from ..core.completion import CompletionClient
from ..core.store import Store
from ..services.calendar_service import CalendarService
from ..services.cart_service import CartService
from ..services.category_service import CategoryService
from ..services.chat_service import ChatService
from ..services.content_service import ContentApprovalService, ContentPostService
from ..services.event_service import EventService
from ..services.generation_service import ContentGenerationService
from ..services.product_service import ProductService
from ..services.social_service import SocialAccountService, SocialPlatformService
from ..services.team_service import TeamService
from ..services.user_service import UserService


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_completion(request: Request) -> CompletionClient:
    return request.app.state.completion


def get_user_service(store: Store = Depends(get_store)) -> UserService:
    return UserService(store)


def get_category_service(store: Store = Depends(get_store)) -> CategoryService:
    return CategoryService(store)


def get_product_service(store: Store = Depends(get_store)) -> ProductService:
    return ProductService(store)


def get_cart_service(store: Store = Depends(get_store)) -> CartService:
    return CartService(store)


def get_chat_service(
    store: Store = Depends(get_store),
    completion: CompletionClient = Depends(get_completion),
) -> ChatService:
    return ChatService(store, completion)


def get_event_service(store: Store = Depends(get_store)) -> EventService:
    return EventService(store)


def get_team_service(store: Store = Depends(get_store)) -> TeamService:
    return TeamService(store)


def get_platform_service(store: Store = Depends(get_store)) -> SocialPlatformService:
    return SocialPlatformService(store)


def get_account_service(store: Store = Depends(get_store)) -> SocialAccountService:
    return SocialAccountService(store)


def get_post_service(store: Store = Depends(get_store)) -> ContentPostService:
    return ContentPostService(store)


def get_approval_service(store: Store = Depends(get_store)) -> ContentApprovalService:
    return ContentApprovalService(store)


def get_calendar_service(store: Store = Depends(get_store)) -> CalendarService:
    return CalendarService(store)


def get_generation_service(
    store: Store = Depends(get_store),
    completion: CompletionClient = Depends(get_completion),
) -> ContentGenerationService:
    return ContentGenerationService(store, completion)
