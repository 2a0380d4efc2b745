import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from models.student import Student, StudentCreate, validate_student
from store import StudentStore

logger = logging.getLogger("students.api")

router = APIRouter(prefix="/students", tags=["students"])


def get_store(request: Request) -> StudentStore:
    return request.app.state.store


def _validation_failed(student: StudentCreate):
    errors = validate_student(student)
    if not errors:
        return None

    logger.info("Rejected student: %s", ", ".join(e.field for e in errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[e.model_dump() for e in errors],
    )


def _student_not_found():
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")


# ---------------------------------------------------------
# CREATE STUDENT
# ---------------------------------------------------------
@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(student: StudentCreate, store: StudentStore = Depends(get_store)):
    rejected = _validation_failed(student)
    if rejected is not None:
        return rejected

    created = store.create(student)
    logger.info("Created student %d", created.id)
    return created


# ---------------------------------------------------------
# GET ALL STUDENTS
# ---------------------------------------------------------
@router.get("", response_model=List[Student])
def get_students(store: StudentStore = Depends(get_store)):
    return store.get_all()


# ---------------------------------------------------------
# GET STUDENT
# ---------------------------------------------------------
@router.get("/{student_id}", response_model=Student)
def get_student(student_id: int, store: StudentStore = Depends(get_store)):
    student = store.get(student_id)
    if student is None:
        raise _student_not_found()

    return student


# ---------------------------------------------------------
# UPDATE STUDENT
# ---------------------------------------------------------
@router.put("/{student_id}", response_model=Student)
def update_student(student_id: int, student: StudentCreate, store: StudentStore = Depends(get_store)):
    rejected = _validation_failed(student)
    if rejected is not None:
        return rejected

    updated = store.update(student_id, student)
    if updated is None:
        raise _student_not_found()

    logger.info("Updated student %d", student_id)
    return updated


# ---------------------------------------------------------
# DELETE STUDENT
# ---------------------------------------------------------
@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: int, store: StudentStore = Depends(get_store)):
    if not store.delete(student_id):
        raise _student_not_found()

    logger.info("Deleted student %d", student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------------------------------------------------
# STUDENT SUMMARY
# ---------------------------------------------------------
@router.get("/{student_id}/summary", response_model=dict)
def get_student_summary(student_id: int, store: StudentStore = Depends(get_store)):
    student = store.get(student_id)
    if student is None:
        raise _student_not_found()

    summary = f"Student {student.name} is {student.age} years old with email {student.email}."
    return {"summary": summary}
