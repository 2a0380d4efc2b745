import threading
from contextlib import contextmanager
from typing import Dict, List, Optional

from models.student import Student, StudentCreate


class ReadWriteLock:
    """Many concurrent readers or a single writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read_locked(self):
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self):
        with self._cond:
            while self._writing or self._readers > 0:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class StudentStore:
    """In-memory registry of students keyed by an auto-incrementing id.

    Ids start at 1 and are never reused, even after a delete. Every method
    returns copies, so callers never hold a reference into the registry.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._students: Dict[int, Student] = {}
        self._next_id = 1

    def create(self, student: StudentCreate) -> Student:
        with self._lock.write_locked():
            created = Student(id=self._next_id, **student.model_dump())
            self._next_id += 1
            self._students[created.id] = created
        return created.model_copy()

    def get_all(self) -> List[Student]:
        with self._lock.read_locked():
            students = list(self._students.values())
        return [s.model_copy() for s in students]

    def get(self, student_id: int) -> Optional[Student]:
        with self._lock.read_locked():
            student = self._students.get(student_id)
        if student is None:
            return None
        return student.model_copy()

    def update(self, student_id: int, student: StudentCreate) -> Optional[Student]:
        # full replace, no field merging
        with self._lock.write_locked():
            if student_id not in self._students:
                return None
            updated = Student(id=student_id, **student.model_dump())
            self._students[student_id] = updated
        return updated.model_copy()

    def delete(self, student_id: int) -> bool:
        with self._lock.write_locked():
            return self._students.pop(student_id, None) is not None
