"""
Register an account from the command line.

    python create_account.py user@example.com hunter22
"""
import argparse
import asyncio
import sys

from identity.core.config import Settings, get_settings
from identity.core.container import ApplicationContainer
from identity.infrastructure.database.session import session_scope
from identity.modules.accounts import AccountError, AuthService


async def create_account(email: str, password: str, settings: Settings | None = None) -> int:
    container = ApplicationContainer(settings=settings or get_settings())
    await container.startup()
    exit_code = 0
    try:
        async with session_scope(container.session_factory) as db:
            service = AuthService.with_session(db, container.hasher)
            try:
                result = await service.register({"email": email, "password": password})
            except AccountError as exc:
                print(f"Account not created: {exc.message}", file=sys.stderr)
                exit_code = 1
            else:
                print(f"Account created: {result.email}")
        return exit_code
    finally:
        await container.shutdown()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an account in the identity database")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args()
    sys.exit(asyncio.run(create_account(args.email, args.password)))


if __name__ == "__main__":
    main()
