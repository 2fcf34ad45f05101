"""MongoDB-backed store for tracker projects, tasks and goals."""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.models.goal import GoalDraft
from app.models.project import ProjectDraft, TaskDraft


class MongoStore:
    """
    Storage collaborator used by the Smart-Add coordinator and read endpoints.

    Inserts run inside the session opened by ``begin_transaction`` when one is
    active, and without a session otherwise. One store instance serves one
    request; sessions are never shared.
    """

    def __init__(self, client: AsyncIOMotorClient, db: AsyncIOMotorDatabase):
        """Initialize store with a Motor client and database."""
        self.client = client
        self.db = db
        self.projects = db["projects"]
        self.tasks = db["tasks"]
        self.goals = db["goals"]
        self._session = None

    @property
    def in_transaction(self) -> bool:
        return self._session is not None

    # Transaction primitives

    async def begin_transaction(self) -> None:
        """Start a client session and open a transaction on it."""
        if self._session is not None:
            raise RuntimeError("Transaction already in progress")
        session = await self.client.start_session()
        try:
            session.start_transaction()
        except Exception:
            await session.end_session()
            raise
        self._session = session

    async def commit(self) -> None:
        """Commit the open transaction and end its session."""
        session = self._require_session()
        try:
            await session.commit_transaction()
        finally:
            await self._end_session()

    async def rollback(self) -> None:
        """Abort the open transaction and end its session."""
        if self._session is None:
            return
        try:
            await self._session.abort_transaction()
        finally:
            await self._end_session()

    def _require_session(self):
        if self._session is None:
            raise RuntimeError("No transaction in progress")
        return self._session

    async def _end_session(self) -> None:
        session, self._session = self._session, None
        await session.end_session()

    # Inserts

    async def insert_project(self, project: ProjectDraft) -> ProjectDraft:
        """Insert a project row. Tasks are inserted separately."""
        doc = project.model_dump(exclude={"id", "tasks"})
        doc["_id"] = project.id
        await self.projects.insert_one(doc, session=self._session)
        return project

    async def insert_task(self, task: TaskDraft) -> TaskDraft:
        """Insert a task row referencing its project."""
        doc = task.model_dump(exclude={"id"})
        doc["_id"] = task.id
        await self.tasks.insert_one(doc, session=self._session)
        return task

    async def insert_goal(self, goal: GoalDraft) -> GoalDraft:
        """Insert a goal row."""
        doc = goal.model_dump(exclude={"id"})
        doc["_id"] = goal.id
        await self.goals.insert_one(doc, session=self._session)
        return goal

    # Reads

    def _doc_to_project(self, doc: dict) -> ProjectDraft:
        doc = dict(doc)
        return ProjectDraft(id=str(doc.pop("_id")), **doc)

    def _doc_to_task(self, doc: dict) -> TaskDraft:
        doc = dict(doc)
        return TaskDraft(id=str(doc.pop("_id")), **doc)

    def _doc_to_goal(self, doc: dict) -> GoalDraft:
        doc = dict(doc)
        return GoalDraft(id=str(doc.pop("_id")), **doc)

    async def list_projects(self, month_id: Optional[int] = None) -> list[ProjectDraft]:
        """
        List projects, optionally for one month.

        Args:
            month_id: Optional month filter

        Returns:
            List of projects (without their tasks)
        """
        query = {}
        if month_id is not None:
            query["month_id"] = month_id

        cursor = self.projects.find(query)
        docs = await cursor.to_list(length=None)
        return [self._doc_to_project(doc) for doc in docs]

    async def get_project(self, project_id: str) -> ProjectDraft:
        """
        Get a project by id.

        Raises:
            ValueError: If project not found
        """
        doc = await self.projects.find_one({"_id": project_id})
        if not doc:
            raise ValueError("Project not found")
        return self._doc_to_project(doc)

    async def list_tasks(self, project_id: str) -> list[TaskDraft]:
        """List the tasks owned by a project."""
        cursor = self.tasks.find({"project_id": project_id})
        docs = await cursor.to_list(length=None)
        return [self._doc_to_task(doc) for doc in docs]

    async def list_goals(self) -> list[GoalDraft]:
        """List all goals."""
        cursor = self.goals.find({})
        docs = await cursor.to_list(length=None)
        return [self._doc_to_goal(doc) for doc in docs]
