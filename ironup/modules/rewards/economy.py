import logging

from ironup.modules.users.models import UserRecord

logger = logging.getLogger(__name__)


def reset_economy(user: UserRecord) -> UserRecord:
    """Forfeit coins and check-in history when a user leaves their group.

    Mutates the record in place; the caller persists it.
    """
    logger.info(f"Resetting economy for {user.username} (coin={user.coin}, check-ins={len(user.history)})")
    user.coin = 0
    user.history = []
    return user
