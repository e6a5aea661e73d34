from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.core.errors import DuplicateError, NotFoundError
from app.db.session import get_db
from app.api.todo.schemas import PathId
from . import schemas, services

router = APIRouter()

@router.post("/", response_model=schemas.LabelOut, status_code=status.HTTP_201_CREATED)
def create_label(
    label: schemas.LabelCreate,
    db: Session = Depends(get_db)
):
    try:
        return services.create_label(db, label)
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=f"Label already exists (id: {e.id})")

@router.get("/", response_model=list[schemas.LabelOut])
def get_labels(db: Session = Depends(get_db)):
    return services.get_labels(db)

@router.delete("/{label_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_label(
    label_id: PathId,
    db: Session = Depends(get_db)
):
    try:
        services.delete_label(db, label_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Label not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
