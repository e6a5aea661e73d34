"""Commit-time foreign key checks on todo_labels."""
import pytest
from sqlalchemy.exc import IntegrityError

from app.api.todo import schemas, services
from app.core.errors import InvalidReferenceError
from app.db.models.todo import Label, Todo, TodoLabel


def test_association_row_may_precede_its_todo_in_one_transaction(db):
    label = Label(name="work")
    db.add(label)
    db.flush()

    # The todo does not exist yet when the association row is written
    db.add(TodoLabel(todo_id=42, label_id=label.id))
    db.flush()
    db.add(Todo(id=42, text="write report"))
    db.commit()

    row = db.query(TodoLabel).filter_by(todo_id=42).one()
    assert row.label_id == label.id


def test_unknown_label_fails_at_commit_not_at_insert(db):
    todo = Todo(text="orphan")
    db.add(todo)
    db.flush()

    db.add(TodoLabel(todo_id=todo.id, label_id=999))
    db.flush()  # statement accepted, check is deferred

    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    assert db.query(Todo).count() == 0
    assert db.query(TodoLabel).count() == 0


def test_unknown_todo_fails_at_commit(db):
    label = Label(name="lonely")
    db.add(label)
    db.commit()

    db.add(TodoLabel(todo_id=123, label_id=label.id))
    db.flush()

    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_committed_associations_reference_existing_rows(db):
    labels = [Label(name=name) for name in ("a", "b")]
    db.add_all(labels)
    db.commit()

    for text in ("one", "two"):
        services.create_todo(db, schemas.TodoCreate(text=text, labels=[label.id for label in labels]))

    todo_ids = {todo.id for todo in db.query(Todo)}
    label_ids = {label.id for label in db.query(Label)}
    rows = db.query(TodoLabel).all()
    assert len(rows) == 4
    for row in rows:
        assert row.todo_id in todo_ids
        assert row.label_id in label_ids


def test_create_todo_service_raises_invalid_reference(db):
    with pytest.raises(InvalidReferenceError) as excinfo:
        services.create_todo(db, schemas.TodoCreate(text="bad", labels=[5]))

    assert excinfo.value.label_ids == [5]
    assert db.query(Todo).count() == 0
