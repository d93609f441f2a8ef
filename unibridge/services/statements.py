"""Statement Builders: one SQLAlchemy construct per catalog operation.

Invariants:
    - Request values enter statements only as bind parameters, never as SQL text
    - Each builder returns exactly one statement; none touches the store
    - Explicit ORDER BY wherever the response order is part of the contract

Design Decisions:
    - SQLAlchemy Core over raw text(): the dialect (MySQL in production, SQLite in
      tests) renders placeholders and quoting
    - DML runs with synchronize_session=False: no ORM identity map to keep in sync,
      so rowcount comes straight from the driver
"""

from sqlalchemy import (
    Delete, Insert, Select, Update, delete, func, insert, literal_column, select,
    table, update,
)

from unibridge.core.domain_types import ProfessorId, StudentNum
from unibridge.models import Attends, Course, Faculty, Student, Teaches
from unibridge.schemas.faculty import FacultyCreate
from unibridge.schemas.student import StudentContactUpdate, StudentCreate


# ─── Health ─────────────────────────────────────────────────────

def count_students() -> Select:
    return select(func.count().label("studentCount")).select_from(Student)


# ─── Students ───────────────────────────────────────────────────

def insert_student(body: StudentCreate) -> Insert:
    return insert(Student).values(
        studentNum=body.studentNum,
        fName=body.fName,
        lName=body.lName,
        studentEmail=body.studentEmail,
        studentMainPhone=body.studentMainPhone,
    )


def select_students() -> Select:
    return select(
        Student.studentNum,
        Student.fName,
        Student.lName,
        Student.studentEmail,
        Student.studentMainPhone,
    ).order_by(Student.lName, Student.fName)


def update_student_contact(
    student_num: StudentNum, body: StudentContactUpdate,
) -> Update:
    return (
        update(Student)
        .where(Student.studentNum == student_num)
        .values(
            studentEmail=body.studentEmail,
            studentMainPhone=body.studentMainPhone,
        )
        .execution_options(synchronize_session=False)
    )


def delete_student(student_num: StudentNum) -> Delete:
    return (
        delete(Student)
        .where(Student.studentNum == student_num)
        .execution_options(synchronize_session=False)
    )


# ─── Courses ────────────────────────────────────────────────────

def select_professor_courses(professor_id: ProfessorId) -> Select:
    return (
        select(
            Course.courseID,
            Course.courseName,
            Course.taName,
            Course.deptEmail,
        )
        .join(Teaches, Teaches.courseID == Course.courseID)
        .where(Teaches.professorID == professor_id)
        .order_by(Course.courseID)
    )


def select_course_enrollment() -> Select:
    # LEFT JOIN keeps courses nobody attends; COUNT of a NULL column is 0
    num_students = func.count(Attends.studentNum).label("numStudents")
    return (
        select(Course.courseID, Course.courseName, num_students)
        .outerjoin(Attends, Attends.courseID == Course.courseID)
        .group_by(Course.courseID, Course.courseName)
        .order_by(num_students.desc(), Course.courseID)
    )


# ─── Faculty ────────────────────────────────────────────────────

def insert_faculty(body: FacultyCreate) -> Insert:
    return insert(Faculty).values(
        facultyName=body.facultyName,
        facultyOffice=body.facultyOffice,
        facultyPhone=body.facultyMainPhone,
        facultyEmail=body.facultyEmail,
    )


def select_faculty() -> Select:
    # SELECT *: the table is owned by the store, so whatever columns it has come back
    return select(literal_column("*")).select_from(table(Faculty.__tablename__))
