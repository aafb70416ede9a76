"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations. Every service shares
the same repositories and the same access evaluator.
"""

from typing import TYPE_CHECKING

from fastapi import BackgroundTasks

from shared.tasks import BackgroundTaskDispatcher, TaskDispatcher

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.access import AccessControlEvaluator
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.lists.interfaces import IListService
    from modules.lists.repository import ItemRepository, ListRepository
    from modules.notifications.interfaces import INotificationService
    from modules.profiles.interfaces import IProfileService
    from modules.sharing.interfaces import ISharingService
    from modules.sharing.repository import ShareRepository
    from modules.suggestions.client import CompletionClient
    from modules.suggestions.frequency import FrequencyTracker
    from modules.suggestions.interfaces import ISuggestionService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self.reset()

    # -------------------------------------------------------------------------
    # Infrastructure
    # -------------------------------------------------------------------------

    @property
    def db(self) -> "Client":
        """Get the service-role Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def users(self) -> "UserRepository":
        if self._users is None:
            from modules.auth.repository import UserRepository
            self._users = UserRepository(self.db)
        return self._users

    @property
    def lists_repository(self) -> "ListRepository":
        if self._lists_repository is None:
            from modules.lists.repository import ListRepository
            self._lists_repository = ListRepository(self.db)
        return self._lists_repository

    @property
    def items_repository(self) -> "ItemRepository":
        if self._items_repository is None:
            from modules.lists.repository import ItemRepository
            self._items_repository = ItemRepository(self.db)
        return self._items_repository

    @property
    def shares_repository(self) -> "ShareRepository":
        if self._shares_repository is None:
            from modules.sharing.repository import ShareRepository
            self._shares_repository = ShareRepository(self.db)
        return self._shares_repository

    @property
    def access(self) -> "AccessControlEvaluator":
        """Get the access evaluator shared by every service."""
        if self._access is None:
            from modules.access import AccessControlEvaluator
            self._access = AccessControlEvaluator(self.shares_repository)
        return self._access

    @property
    def completion_client(self) -> "CompletionClient":
        """Get the completion client built from AI_MODEL settings."""
        if self._completion_client is None:
            from providers import get_provider, model_config_from_settings
            from modules.suggestions.client import CompletionClient
            from shared.config import get_settings
            config = model_config_from_settings(get_settings())
            self._completion_client = CompletionClient(get_provider(config.provider_type), config)
        return self._completion_client

    @property
    def frequency(self) -> "FrequencyTracker":
        if self._frequency is None:
            from modules.suggestions.frequency import FrequencyTracker
            from modules.suggestions.repository import SuggestionStatRepository
            self._frequency = FrequencyTracker(SuggestionStatRepository(self.db))
        return self._frequency

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def notifications(self) -> "INotificationService":
        """Get the notification service instance."""
        if self._notification_service is None:
            from modules.notifications.repository import NotificationRepository
            from modules.notifications.service import NotificationService
            from shared.config import get_settings
            self._notification_service = NotificationService(
                notifications=NotificationRepository(self.db),
                lists=self.lists_repository,
                shares=self.shares_repository,
                users=self.users,
                limit=get_settings().notifications_limit,
            )
        return self._notification_service

    @property
    def lists(self) -> "IListService":
        """Get the list service instance."""
        if self._list_service is None:
            from modules.lists.service import ListService
            self._list_service = ListService(
                lists=self.lists_repository,
                items=self.items_repository,
                shares=self.shares_repository,
                access=self.access,
                notifications=self.notifications,
                frequency=self.frequency,
            )
        return self._list_service

    @property
    def sharing(self) -> "ISharingService":
        """Get the sharing service instance."""
        if self._sharing_service is None:
            from modules.sharing.service import SharingService
            self._sharing_service = SharingService(
                shares=self.shares_repository,
                lists=self.lists_repository,
                users=self.users,
                access=self.access,
            )
        return self._sharing_service

    @property
    def suggestions(self) -> "ISuggestionService":
        """Get the suggestion service instance."""
        if self._suggestion_service is None:
            from modules.suggestions.service import SuggestionService
            self._suggestion_service = SuggestionService(
                client=self.completion_client,
                frequency=self.frequency,
            )
        return self._suggestion_service

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.repository import ProfileRepository
            from modules.profiles.service import ProfileService
            from modules.profiles.storage import PhotoStorage
            from shared.config import get_settings
            settings = get_settings()
            self._profile_service = ProfileService(
                profiles=ProfileRepository(self.db),
                storage=PhotoStorage(
                    self.db,
                    bucket=settings.profile_photo_bucket,
                    url_ttl=settings.profile_photo_url_ttl,
                ),
            )
        return self._profile_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db: "Client | None" = None
        self._users: "UserRepository | None" = None
        self._lists_repository: "ListRepository | None" = None
        self._items_repository: "ItemRepository | None" = None
        self._shares_repository: "ShareRepository | None" = None
        self._access: "AccessControlEvaluator | None" = None
        self._completion_client: "CompletionClient | None" = None
        self._frequency: "FrequencyTracker | None" = None
        self._auth_service: "IAuthService | None" = None
        self._notification_service: "INotificationService | None" = None
        self._list_service: "IListService | None" = None
        self._sharing_service: "ISharingService | None" = None
        self._suggestion_service: "ISuggestionService | None" = None
        self._profile_service: "IProfileService | None" = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_list_service() -> "IListService":
    """FastAPI dependency for list service."""
    return get_container().lists


def get_sharing_service() -> "ISharingService":
    """FastAPI dependency for sharing service."""
    return get_container().sharing


def get_notification_service() -> "INotificationService":
    """FastAPI dependency for notification service."""
    return get_container().notifications


def get_suggestion_service() -> "ISuggestionService":
    """FastAPI dependency for suggestion service."""
    return get_container().suggestions


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_task_dispatcher(background_tasks: BackgroundTasks) -> TaskDispatcher:
    """FastAPI dependency that runs side effects after the response is sent."""
    return BackgroundTaskDispatcher(background_tasks)
