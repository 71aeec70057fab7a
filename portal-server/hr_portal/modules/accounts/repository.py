"""In-memory account collection backed by the aggregate store."""

from __future__ import annotations

from typing import Sequence

from hr_portal.modules.common.repository import AggregateRepository

from .models import Account


class AccountRepository(AggregateRepository):
    """Lookups and list mutations over ``aggregate.accounts``."""

    def list_accounts(self) -> Sequence[Account]:
        return list(self.aggregate.accounts)

    def get_by_email(self, email: str) -> Account | None:
        for account in self.aggregate.accounts:
            if account.email == email:
                return account
        return None

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def add(self, account: Account) -> Account:
        with self.change() as aggregate:
            aggregate.accounts.append(account)
        return account

    def remove(self, account: Account) -> None:
        with self.change() as aggregate:
            aggregate.accounts[:] = [item for item in aggregate.accounts if item is not account]
