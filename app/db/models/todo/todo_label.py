from sqlalchemy import Column, Integer, ForeignKey
from app.db.session import Base

class TodoLabel(Base):
    __tablename__ = "todo_labels"

    id = Column(Integer, primary_key=True)

    # Checked at commit, so a todo and its labels can be written in one transaction
    todo_id = Column(
        Integer,
        ForeignKey("todos.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
    )
    label_id = Column(
        Integer,
        ForeignKey("labels.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
    )
