#!/usr/bin/env python3
"""Store the OAuth client ID and secret issued by the identity provider.

The first login request provisions placeholder credentials; run this to
replace them with real ones:

    python scripts/provision_credentials.py --client-id ID --client-secret SECRET
"""

import argparse
import asyncio
import sys

import logfire

from guestbook.config import Settings
from guestbook.domain.service import ProviderCredentialService
from guestbook.domain.value import ProviderName
from guestbook.persistence.database import create_engine, create_session_factory
from guestbook.persistence.repository import SqlProviderCredentialRepository
from guestbook.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--provider", help="Provider name (defaults to AUTH__PROVIDER)")
    parser.add_argument("--client-id", required=True)
    parser.add_argument("--client-secret", required=True)
    return parser.parse_args(argv)


async def provision(settings: Settings, args: argparse.Namespace) -> None:
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    provider = ProviderName(args.provider or settings.auth.provider)

    try:
        async with session_factory() as session:
            service = ProviderCredentialService(
                credential_repository=SqlProviderCredentialRepository(session)
            )
            await service.reprovision(provider, args.client_id, args.client_secret)
    finally:
        await engine.dispose()


def main() -> int:
    """Store the credentials and log any errors to Logfire."""
    args = parse_args()
    settings = Settings()

    configure_logfire(settings)

    try:
        asyncio.run(provision(settings, args))
        return 0

    except Exception as e:
        logfire.error(
            "Credential provisioning failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
