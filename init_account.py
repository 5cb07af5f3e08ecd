"""
Seed a demo user and account for local testing.

Creates user 12 ("demo") owning account 1000000012 with a balance of 10000.
"""
import asyncio
from datetime import datetime, timezone

from account_server.db.models import Account, AccountUser
from account_server.infrastructure.database.session import get_session, init_db
from account_server.modules.accounts import AccountStatus

DEMO_USER_ID = 12
DEMO_ACCOUNT_NUMBER = "1000000012"
DEMO_BALANCE = 10_000


async def create_default_account():
    """Create the demo user and account if they do not exist yet."""
    await init_db()

    async for db in get_session():
        if await db.get(AccountUser, DEMO_USER_ID) is not None:
            print("Demo account already exists")
            return

        user = AccountUser(id=DEMO_USER_ID, name="demo")
        db.add(user)
        db.add(
            Account(
                account_user=user,
                account_number=DEMO_ACCOUNT_NUMBER,
                account_status=AccountStatus.IN_USE.value,
                balance=DEMO_BALANCE,
                registered_at=datetime.now(timezone.utc),
            )
        )
        await db.commit()

        print(f"Demo account created: user {DEMO_USER_ID} / account {DEMO_ACCOUNT_NUMBER}")


if __name__ == "__main__":
    asyncio.run(create_default_account())
