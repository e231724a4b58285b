"""Task catalog model: ordered task list for one challenge day."""
from sqlalchemy import Column, Integer, Text

from app.db.session import Base


class DayTasks(Base):
    __tablename__ = "day_tasks"

    day = Column(Integer, primary_key=True, autoincrement=False)
    # tasks: JSON array of strings, in display order
    tasks_json = Column(Text, nullable=False)
