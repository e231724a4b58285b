"""Progress model: one row per user identifier. Times are epoch milliseconds."""
from sqlalchemy import BigInteger, Column, Integer, String, Text

from app.db.session import Base


class Progress(Base):
    __tablename__ = "progress"

    user_id = Column(String(128), primary_key=True)

    current_day = Column(Integer, nullable=False, default=1)  # 1..8, 8 = challenge complete
    start_time = Column(BigInteger, nullable=False)
    # completed_days: JSON array of ints; day_notes: JSON object {"1": "note"}
    completed_days_json = Column(Text, nullable=False, default="[]")
    day_notes_json = Column(Text, nullable=False, default="{}")
    last_completed_time = Column(BigInteger, nullable=True)

    version = Column(Integer, nullable=False, default=1)  # bumped on every write
