"""
Initialize the portal store.

Loads (or seeds) the stored data, repairs the admin account and prints the
credentials to log in with.
"""
import argparse

from hr_portal.core.config import get_settings
from hr_portal.infrastructure.storage import SqlSlotRepository, build_engine, build_session_factory, init_storage
from hr_portal.modules.store import LoadStatus, PersistentStore


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Initialize the HR portal store")
    parser.add_argument("--reset", action="store_true", help="discard stored data and reseed defaults")
    return parser.parse_args(argv)


def init_store(reset: bool = False) -> None:
    settings = get_settings()
    engine = build_engine(settings)
    init_storage(engine)
    store = PersistentStore(SqlSlotRepository(build_session_factory(engine)), settings.storage, settings.admin)

    if reset:
        store.clear_token()
        store.clear_pending_email()
        aggregate = store.seed()
        print("Store reset to default data")
    else:
        status = store.read().status
        aggregate = store.load()
        if status is LoadStatus.LOADED:
            print("Existing data found, admin account checked")
        else:
            print("Default data created")

    print("=" * 50)
    print(f"Accounts: {len(aggregate.accounts)}  Departments: {len(aggregate.departments)}")
    print(f"Admin email: {settings.admin.email}")
    print(f"Admin password: {settings.admin.password}")
    print("=" * 50)
    engine.dispose()


if __name__ == "__main__":
    args = parse_args()
    init_store(reset=args.reset)
