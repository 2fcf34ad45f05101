"""Smart-Add service - parses pasted text and persists it as one batch."""
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass

from app.exceptions import CommitError, PersistenceError
from app.models.goal import GoalDraft
from app.models.project import ProjectDraft
from app.models.smart_add import CreatedItems, ParseResult
from app.parsers.smart_add import parse
from app.services.store import MongoStore


logger = logging.getLogger(__name__)


@dataclass
class InsertProjectOperation:
    """Insert a project, then each of its tasks in order."""

    project: ProjectDraft

    async def apply(self, store: MongoStore, created: CreatedItems) -> None:
        await store.insert_project(self.project)
        created.projects.append(self.project)
        for task in self.project.tasks:
            await store.insert_task(task)
            created.tasks.append(task)


@dataclass
class InsertGoalOperation:
    """Insert a single goal."""

    goal: GoalDraft

    async def apply(self, store: MongoStore, created: CreatedItems) -> None:
        await store.insert_goal(self.goal)
        created.goals.append(self.goal)


def build_operations(result: ParseResult) -> list:
    """Queue one operation per parsed project and goal, in input order."""
    operations = []
    for item in result.items:
        if isinstance(item, ProjectDraft):
            operations.append(InsertProjectOperation(item))
        else:
            operations.append(InsertGoalOperation(item))
    return operations


class SmartAddService:
    """Service coordinating Smart-Add parsing and transactional persistence."""

    def __init__(self, store: MongoStore):
        """Initialize service with a storage collaborator."""
        self.store = store

    @asynccontextmanager
    async def _transaction(self):
        """
        Run the enclosed block in one store transaction.

        Commits on clean exit, rolls back on any failure.

        Raises:
            PersistenceError: If beginning the transaction or any operation fails
            CommitError: If the commit itself fails
        """
        try:
            await self.store.begin_transaction()
        except Exception as e:
            raise PersistenceError(str(e)) from e

        try:
            yield
        except Exception as e:
            logger.error("Error during smart-add transaction: %s", e)
            try:
                await self.store.rollback()
            except Exception:
                logger.exception("Rollback failed after smart-add error")
            raise PersistenceError(str(e)) from e

        try:
            await self.store.commit()
        except Exception as e:
            logger.error("Error committing smart-add transaction: %s", e)
            raise CommitError(str(e)) from e

    async def add_from_text(self, text: str) -> CreatedItems:
        """
        Parse text and persist every recognized item atomically.

        Args:
            text: Raw pasted text

        Returns:
            Created items; empty when nothing was recognized (no transaction
            is opened in that case)

        Raises:
            PersistenceError: If any insert fails; nothing is persisted
            CommitError: If the commit fails
        """
        result = parse(text)
        operations = build_operations(result)

        created = CreatedItems()
        if not operations:
            logger.info("Smart-Add found no items to add")
            return created

        async with self._transaction():
            for operation in operations:
                await operation.apply(self.store, created)

        logger.info("Smart-Add committed: %s", created.summary)
        return created
