"""Begin login use case."""

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.domain.service import AuthService
from guestbook.domain.value import RequestOrigin


class BeginLoginRequest(BaseModel):
    """Begin login request."""

    origin: RequestOrigin


class BeginLoginResponse(BaseModel):
    """Begin login response."""

    authorization_url: str


class BeginLoginUseCase(BaseUseCase[BeginLoginRequest, BeginLoginResponse]):
    """Use case for starting the OAuth login redirect."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize begin login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: BeginLoginRequest) -> BeginLoginResponse:
        """Build the provider authorization URL.

        Raises:
            SetupFailureError: If app credentials or the provider client
                cannot be set up
        """
        auth_url = await self.auth_service.initiate_login(request.origin)
        return BeginLoginResponse(authorization_url=auth_url)
