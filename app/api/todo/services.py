import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload
from app.core.errors import InvalidReferenceError, NotFoundError
from app.db.models.todo.todo import Todo
from app.db.models.todo.todo_label import TodoLabel
from app.api.todo import schemas


def _attach_labels(db: Session, todo_id: int, label_ids: list[int]):
    # dict.fromkeys keeps the first occurrence of each id, in order
    for label_id in dict.fromkeys(label_ids):
        db.add(TodoLabel(todo_id=todo_id, label_id=label_id))


def _commit(db: Session, label_ids: list[int]):
    """Commit the current transaction.

    Foreign keys on todo_labels are DEFERRABLE INITIALLY DEFERRED, so an
    unknown todo or label id surfaces here rather than on insert.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.warning("Rolled back todo write, foreign key check failed: %s", e.orig)
        raise InvalidReferenceError(label_ids) from e


def create_todo(db: Session, todo: schemas.TodoCreate):
    db_todo = Todo(text=todo.text, completed=False)
    db.add(db_todo)
    db.flush()  # assigns db_todo.id inside the open transaction

    _attach_labels(db, db_todo.id, todo.labels)
    _commit(db, todo.labels)
    db.refresh(db_todo)
    logging.info("Created todo %s with labels %s", db_todo.id, todo.labels)
    return db_todo

def get_todos(db: Session):
    return (
        db.query(Todo)
        .options(selectinload(Todo.labels))
        .order_by(Todo.id.desc())
        .all()
    )

def get_todo(db: Session, todo_id: int):
    return db.query(Todo).filter(Todo.id == todo_id).first()

def update_todo(db: Session, todo_id: int, todo: schemas.TodoUpdate):
    db_todo = get_todo(db, todo_id)
    if not db_todo:
        raise NotFoundError(todo_id)

    changes = todo.model_dump(exclude_none=True)
    label_ids = changes.pop("labels", None)
    for key, value in changes.items():
        setattr(db_todo, key, value)

    if label_ids is not None:
        db.query(TodoLabel).filter(TodoLabel.todo_id == todo_id).delete(synchronize_session=False)
        _attach_labels(db, todo_id, label_ids)

    _commit(db, label_ids or [])
    db.refresh(db_todo)
    return db_todo

def delete_todo(db: Session, todo_id: int):
    db_todo = get_todo(db, todo_id)
    if not db_todo:
        raise NotFoundError(todo_id)

    db.query(TodoLabel).filter(TodoLabel.todo_id == todo_id).delete(synchronize_session=False)
    db.delete(db_todo)
    db.commit()
    logging.info("Deleted todo %s", todo_id)
