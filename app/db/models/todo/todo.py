from sqlalchemy import Column, Integer, Text, Boolean, false
from sqlalchemy.orm import relationship
from app.db.session import Base


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())

    # Read-only view over todo_labels; attachments are written as TodoLabel rows
    labels = relationship(
        "Label",
        secondary="todo_labels",
        order_by="Label.id",
        viewonly=True,
    )
