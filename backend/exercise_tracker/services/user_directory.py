"""User Directory — create and list users.

Invariants:
    - list() projects users to {id, username}; an empty store yields []
    - create() stores whatever username it is given (None included) with an empty log
    - Persistence failures propagate unchanged to the global error handlers
"""

import logging

from exercise_tracker.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


class UserDirectory:
    """User create/list operations."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def list(self) -> list[dict]:
        users = await self.repository.list_users()
        return [{"id": u.id, "username": u.username} for u in users]

    async def create(self, username: str | None) -> dict:
        user = await self.repository.create_user(username)
        logger.info("User created", extra={"user_id": str(user.id)})
        return {"id": user.id, "username": user.username, "exercises": []}
