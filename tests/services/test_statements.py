"""Statement builders: request values travel only as bind parameters.

Compiled against the MySQL dialect, the production target.
"""

from sqlalchemy.dialects import mysql

from unibridge.core.domain_types import ProfessorId, StudentNum
from unibridge.schemas.faculty import FacultyCreate
from unibridge.schemas.student import StudentContactUpdate, StudentCreate
from unibridge.services import statements

_HOSTILE = "1'; DROP TABLE student; --"
_HOSTILE_NUM = "1' OR '1'='1"


def _compile(stmt):
    compiled = stmt.compile(dialect=mysql.dialect())
    return str(compiled), compiled.params


def test_insert_student_binds_every_field():
    body = StudentCreate(
        studentNum=_HOSTILE_NUM, fName=_HOSTILE, lName="B",
        studentEmail="a@b", studentMainPhone="1",
    )
    sql, params = _compile(statements.insert_student(body))
    assert "DROP TABLE" not in sql
    assert "'1'='1" not in sql
    assert sql.count("%s") == 5
    assert params["studentNum"] == _HOSTILE_NUM
    assert params["fName"] == _HOSTILE


def test_update_student_contact_binds_target_and_values():
    body = StudentContactUpdate(studentEmail="e@x", studentMainPhone="9")
    sql, params = _compile(
        statements.update_student_contact(StudentNum(_HOSTILE), body),
    )
    assert sql.startswith("UPDATE student SET")
    assert "DROP TABLE" not in sql
    assert _HOSTILE in params.values()
    assert {"e@x", "9"} <= set(params.values())


def test_delete_student_binds_target():
    sql, params = _compile(statements.delete_student(StudentNum(_HOSTILE)))
    assert sql.startswith("DELETE FROM student")
    assert list(params.values()) == [_HOSTILE]


def test_select_students_ordered_by_last_then_first_name():
    sql, _ = _compile(statements.select_students())
    assert "ORDER BY student.`lName`, student.`fName`" in sql


def test_professor_courses_joins_teaches_and_orders_by_course():
    sql, params = _compile(statements.select_professor_courses(ProfessorId("P1")))
    assert "JOIN teaches" in sql
    assert "ORDER BY course.`courseID`" in sql
    assert list(params.values()) == ["P1"]


def test_course_enrollment_uses_left_join_and_count_ordering():
    sql, params = _compile(statements.select_course_enrollment())
    assert "LEFT OUTER JOIN attends" in sql
    assert "count(attends.`studentNum`)" in sql
    assert "`numStudents` DESC, course.`courseID`" in sql
    assert params == {}


def test_insert_faculty_binds_four_values_to_four_columns():
    body = FacultyCreate(
        facultyName="N", facultyOffice="O",
        facultyMainPhone="555", facultyEmail="f@u",
    )
    sql, params = _compile(statements.insert_faculty(body))
    assert sql.count("%s") == 4
    assert params["facultyPhone"] == "555"
    assert "facultyMainPhone" not in params


def test_select_faculty_is_select_star():
    sql, params = _compile(statements.select_faculty())
    assert sql.replace("\n", "").startswith("SELECT * FROM")
    assert "Faculty" in sql
    assert "facultyID" not in sql
    assert params == {}
