import logging

from sqlalchemy.orm import Session
from app.core.errors import DuplicateError, NotFoundError
from app.db.models.todo.label import Label
from app.db.models.todo.todo_label import TodoLabel
from . import schemas

def create_label(db: Session, label: schemas.LabelCreate):
    existing = db.query(Label).filter(Label.name == label.name).first()
    if existing:
        raise DuplicateError(existing.id)

    db_label = Label(name=label.name)
    db.add(db_label)
    db.commit()
    db.refresh(db_label)
    logging.info("Created label %s (%s)", db_label.id, db_label.name)
    return db_label

def get_labels(db: Session):
    return db.query(Label).order_by(Label.id.asc()).all()

def get_label(db: Session, label_id: int):
    return db.query(Label).filter(Label.id == label_id).first()

def delete_label(db: Session, label_id: int):
    db_label = get_label(db, label_id)
    if not db_label:
        raise NotFoundError(label_id)

    # Detach from every todo first; the schema declares no cascade
    db.query(TodoLabel).filter(TodoLabel.label_id == label_id).delete(synchronize_session=False)
    db.delete(db_label)
    db.commit()
    logging.info("Deleted label %s", label_id)
