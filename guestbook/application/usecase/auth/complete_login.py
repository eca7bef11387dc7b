"""Complete login use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from guestbook.adapter.error import ProviderError
from guestbook.application.usecase.base import BaseUseCase
from guestbook.domain.error import ExchangeFailureError, NotFoundError
from guestbook.domain.model.credential import SessionCredential
from guestbook.domain.model.identity import Identity
from guestbook.domain.service import AuthService, IdentityService, StateService
from guestbook.domain.value import (
    FederationState,
    IdentityId,
    ProviderProfile,
    RequestOrigin,
)
from guestbook.util.error import StateTokenError


class CompleteLoginRequest(BaseModel):
    """OAuth callback request.

    params holds the callback query string as-is (code, state, error, ...).
    """

    origin: RequestOrigin
    params: dict[str, str]


class CompleteLoginResponse(BaseModel):
    """Resolved identity, without its tokens."""

    id: IdentityId
    provider_subject_id: str
    display_name: str
    email: str
    avatar_url: str
    created_at: datetime
    updated_at: datetime
    is_new: bool
    after: str  # Post-login redirect target carried in the state


class CompleteLoginUseCase(
    BaseUseCase[CompleteLoginRequest, CompleteLoginResponse]
):
    """Use case for finishing the OAuth login and persisting the identity.

    The identity is written with a plain read-then-write. Two callbacks for
    the same subject running at once can both miss the existing record and
    insert twice, or overwrite each other's credential. The resolver copes
    with duplicates by preferring the latest updated_at; closing the race
    needs a conditional write on provider_subject_id.
    """

    def __init__(
        self,
        auth_service: AuthService,
        state_service: StateService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize complete login use case.

        Args:
            auth_service: Authentication domain service
            state_service: State token domain service
            identity_service: Identity domain service
        """
        self.auth_service = auth_service
        self.state_service = state_service
        self.identity_service = identity_service

    async def execute(self, request: CompleteLoginRequest) -> CompleteLoginResponse:
        """Execute the callback step of the login flow.

        Steps:
        1. Rebuild the provider client exactly as the login step did
        2. Verify the state token
        3. Exchange the callback parameters for a session credential
        4. Fetch the remote profile
        5. Create or update the identity and save it

        Args:
            request: Callback origin and query parameters

        Returns:
            The resolved identity

        Raises:
            SetupFailureError: If the provider client cannot be set up
            ExchangeFailureError: If the state is invalid or the provider
                rejects the exchange or the profile fetch
        """
        client = await self.auth_service.initialize_client(request.origin)

        with logfire.span("complete_login", provider=self.auth_service.provider):
            logfire.info(
                "Login flow state", state=FederationState.CALLBACK_RECEIVED.value
            )

            try:
                login_state = self.state_service.verify_state(request.params.get("state"))
                credential = await client.exchange(request.params)
            except (StateTokenError, ProviderError) as e:
                raise self._failure(e, FederationState.CALLBACK_RECEIVED) from e

            logfire.info(
                "Login flow state", state=FederationState.EXCHANGE_COMPLETE.value
            )

            try:
                profile = await client.fetch_profile(credential)
            except ProviderError as e:
                raise self._failure(e, FederationState.EXCHANGE_COMPLETE) from e

            logfire.info(
                "Login flow state",
                state=FederationState.IDENTITY_FETCHED.value,
                provider_subject_id=profile.subject_id,
            )

            identity, is_new = await self._upsert_identity(profile, credential)

            logfire.info(
                "Login flow state",
                state=FederationState.PERSISTED.value,
                identity_id=identity.id,
                is_new=is_new,
            )

            return CompleteLoginResponse(
                id=identity.id,
                provider_subject_id=identity.provider_subject_id,
                display_name=identity.display_name,
                email=identity.email,
                avatar_url=identity.avatar_url,
                created_at=identity.created_at,
                updated_at=identity.updated_at,
                is_new=is_new,
                after=login_state.after,
            )

    async def _upsert_identity(
        self, profile: ProviderProfile, credential: SessionCredential
    ) -> tuple[Identity, bool]:
        """Create the identity for a subject, or refresh the existing one."""
        now = datetime.now(timezone.utc)
        profile_fields = {
            "display_name": profile.name,
            "email": profile.email,
            "avatar_url": profile.avatar_url,
            "credential": credential,
            "updated_at": now,
        }

        try:
            existing = await self.identity_service.find_by_provider_subject_id(
                profile.subject_id
            )
        except NotFoundError:
            identity = Identity(
                provider_subject_id=profile.subject_id,
                created_at=now,
                **profile_fields,
            )
            return await self.identity_service.save(identity), True

        updated = existing.model_copy(update=profile_fields)
        return await self.identity_service.save(updated), False

    def _failure(self, error: Exception, state: FederationState) -> ExchangeFailureError:
        logfire.error(
            "Login flow state",
            state=FederationState.FAILED.value,
            failed_in=state.value,
            error=str(error),
        )
        return ExchangeFailureError(str(error), state=state)
