from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.api.todo import schemas, services
from app.core.errors import InvalidReferenceError, NotFoundError
from app.db.session import get_db

router = APIRouter()

@router.post("/", response_model=schemas.TodoOut, status_code=status.HTTP_201_CREATED)
def create_todo(todo: schemas.TodoCreate, db: Session = Depends(get_db)):
    try:
        return services.create_todo(db, todo)
    except InvalidReferenceError:
        raise HTTPException(status_code=404, detail="Label not found")

@router.get("/", response_model=list[schemas.TodoOut])
def list_todos(db: Session = Depends(get_db)):
    return services.get_todos(db)

@router.get("/{todo_id}", response_model=schemas.TodoOut)
def get_todo(todo_id: schemas.PathId, db: Session = Depends(get_db)):
    todo = services.get_todo(db, todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo

@router.patch("/{todo_id}", response_model=schemas.TodoOut, status_code=status.HTTP_201_CREATED)
def update_todo(
    todo_id: schemas.PathId,
    todo: schemas.TodoUpdate,
    db: Session = Depends(get_db)
):
    try:
        return services.update_todo(db, todo_id, todo)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Todo not found")
    except InvalidReferenceError:
        raise HTTPException(status_code=404, detail="Label not found")

@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(todo_id: schemas.PathId, db: Session = Depends(get_db)):
    try:
        services.delete_todo(db, todo_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Todo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
