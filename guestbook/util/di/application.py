"""Application layer DI providers."""

from dishka import Scope, provide

from guestbook.application.usecase.auth import BeginLoginUseCase, CompleteLoginUseCase
from guestbook.application.usecase.guestbook import (
    ListGreetingsUseCase,
    SignGuestbookUseCase,
)
from guestbook.domain.service import (
    AuthService,
    GuestbookService,
    IdentityService,
    StateService,
)
from guestbook.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_begin_login_use_case(self, auth_service: AuthService) -> BeginLoginUseCase:
        """Provide begin login use case."""
        return BeginLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_login_use_case(
        self,
        auth_service: AuthService,
        state_service: StateService,
        identity_service: IdentityService,
    ) -> CompleteLoginUseCase:
        """Provide complete login use case."""
        return CompleteLoginUseCase(
            auth_service=auth_service,
            state_service=state_service,
            identity_service=identity_service,
        )

    # Guestbook use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_guestbook_use_case(
        self, guestbook_service: GuestbookService
    ) -> SignGuestbookUseCase:
        """Provide sign guestbook use case."""
        return SignGuestbookUseCase(guestbook_service=guestbook_service)

    @provide(scope=Scope.REQUEST)
    def get_list_greetings_use_case(
        self, guestbook_service: GuestbookService
    ) -> ListGreetingsUseCase:
        """Provide list greetings use case."""
        return ListGreetingsUseCase(guestbook_service=guestbook_service)
