from pydantic import BaseModel, ConfigDict
from typing import List


MIN_AGE = 0
MAX_AGE = 150


class StudentBase(BaseModel):
    # Absent fields fall back to zero values and are caught by validate_student
    model_config = ConfigDict(strict=True)

    name: str = ""
    age: int = 0
    email: str = ""


class StudentCreate(StudentBase):
    pass


class Student(StudentBase):
    id: int


class ValidationError(BaseModel):
    field: str
    message: str


def validate_student(student: StudentBase) -> List[ValidationError]:
    """Check the student against the field rules, in name, age, email order.

    Returns one error per failing rule; an empty list means the student is valid.
    """
    errors: List[ValidationError] = []

    if student.name == "":
        errors.append(ValidationError(field="name", message="Name is required"))

    if student.age < MIN_AGE or student.age > MAX_AGE:
        errors.append(
            ValidationError(field="age", message=f"Age must be between {MIN_AGE} and {MAX_AGE}")
        )

    if student.email == "":
        errors.append(ValidationError(field="email", message="Email is required"))

    return errors
