"""SQLAlchemy database models for memobot."""

from sqlalchemy import Column, String, Integer, Date

from memobot.database.database import Base


class TaskDB(Base):
    """Database model for Task."""

    __tablename__ = "scheduled_tasks"

    # Primary key (opaque id, UUID v4 for new tasks)
    id = Column(String, primary_key=True)

    # Basic fields
    name = Column(String, nullable=False)
    url = Column(String, nullable=True)

    # Recurrence state
    due_date = Column(Date, nullable=False, index=True)
    interval_days = Column(Integer, nullable=False, default=1)
    streak = Column(Integer, nullable=False, default=0)
    last_rated_on = Column(Date, nullable=True)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from memobot.models.task import Task

        return Task(
            id=str(self.id),
            name=self.name,
            url=self.url or None,
            due_date=self.due_date,
            interval_days=self.interval_days,
            streak=self.streak,
            last_rated_on=self.last_rated_on,
        )

    @classmethod
    def from_pydantic(cls, task):
        """Create database model from Pydantic model."""
        return cls(
            id=task.id,
            name=task.name,
            url=task.url,
            due_date=task.due_date,
            interval_days=task.interval_days,
            streak=task.streak,
            last_rated_on=task.last_rated_on,
        )
