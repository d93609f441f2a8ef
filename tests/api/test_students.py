"""Student routes: insert/list/update/delete against a real SQLite store.

Invariants:
    - POST /add_user then GET /get_users contains the inserted record
    - PUT/DELETE touch exactly the targeted studentNum
    - Unknown studentNum → 404 and no rows change
    - Repeated DELETE → 404 (not a second success)
    - Invalid bodies → 400 before any statement runs
"""

from sqlalchemy import select

from unibridge.models import Student


def _payload(num="1001", first="Grace", last="Hopper"):
    return {
        "studentNum": num,
        "fName": first,
        "lName": last,
        "studentEmail": f"{first.lower()}@uni.test",
        "studentMainPhone": "555-0199",
    }


async def _all_students(store):
    async with store.session() as db:
        result = await db.execute(select(Student).order_by(Student.studentNum))
        return result.scalars().all()


# --- POST /add_user ----------------------------------------------------------

async def test_add_user_then_get_users_contains_record(client):
    payload = _payload()
    res = await client.post("/add_user", json=payload)
    assert res.status_code == 200
    assert res.json() == {"message": "User added successfully!"}

    res = await client.get("/get_users")
    assert res.status_code == 200
    assert payload in res.json()


async def test_add_user_accepts_numeric_identifiers(client):
    payload = _payload()
    payload["studentNum"] = 2002
    payload["studentMainPhone"] = 5550100

    res = await client.post("/add_user", json=payload)
    assert res.status_code == 200

    users = (await client.get("/get_users")).json()
    assert users[0]["studentNum"] == "2002"
    assert users[0]["studentMainPhone"] == "5550100"


async def test_add_user_duplicate_student_num_is_server_error(client):
    await client.post("/add_user", json=_payload())
    res = await client.post("/add_user", json=_payload(first="Other"))
    assert res.status_code == 500
    assert res.json() == {"error": "Database insert error"}


async def test_add_user_missing_field_is_rejected_before_store(client, store):
    payload = _payload()
    del payload["lName"]

    res = await client.post("/add_user", json=payload)

    assert res.status_code == 400
    body = res.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"][0]["field"] == "body.lName"
    assert await _all_students(store) == []


async def test_add_user_blank_field_is_rejected(client):
    res = await client.post("/add_user", json=_payload(first="   "))
    assert res.status_code == 400


# --- GET /get_users ----------------------------------------------------------

async def test_get_users_empty_store_returns_empty_list(client):
    res = await client.get("/get_users")
    assert res.status_code == 200
    assert res.json() == []


async def test_get_users_orders_by_last_then_first_name(client, seed, make_student):
    await seed(
        make_student("3", "Zoe", "Brown"),
        make_student("1", "Ann", "Smith"),
        make_student("2", "Abe", "Brown"),
    )
    res = await client.get("/get_users")
    assert [u["studentNum"] for u in res.json()] == ["2", "3", "1"]


async def test_get_users_record_keys_follow_column_order(client, seed, make_student):
    await seed(make_student("7"))
    record = (await client.get("/get_users")).json()[0]
    assert list(record) == [
        "studentNum", "fName", "lName", "studentEmail", "studentMainPhone",
    ]


# --- PUT /students/{studentNum} -----------------------------------------------

async def test_update_student_changes_only_target(client, store, seed, make_student):
    await seed(make_student("1"), make_student("2"))

    res = await client.put(
        "/students/1",
        json={"studentEmail": "new@uni.test", "studentMainPhone": "555-9999"},
    )

    assert res.status_code == 200
    assert res.json() == {"message": "Student updated successfully"}
    first, second = await _all_students(store)
    assert (first.studentEmail, first.studentMainPhone) == ("new@uni.test", "555-9999")
    assert (second.studentEmail, second.studentMainPhone) == ("2@uni.test", "555-0100")


async def test_update_with_unchanged_values_still_succeeds(client, seed, make_student):
    await seed(make_student("1"))
    res = await client.put(
        "/students/1",
        json={"studentEmail": "1@uni.test", "studentMainPhone": "555-0100"},
    )
    assert res.status_code == 200


async def test_update_unknown_student_is_404_and_mutates_nothing(
    client, store, seed, make_student,
):
    await seed(make_student("1"))

    res = await client.put(
        "/students/999",
        json={"studentEmail": "x@uni.test", "studentMainPhone": "1"},
    )

    assert res.status_code == 404
    assert res.json() == {"error": "Student '999' not found"}
    (only,) = await _all_students(store)
    assert only.studentEmail == "1@uni.test"


async def test_update_requires_both_contact_fields(client, seed, make_student):
    await seed(make_student("1"))
    res = await client.put("/students/1", json={"studentEmail": "x@uni.test"})
    assert res.status_code == 400


# --- DELETE /students/{studentNum} --------------------------------------------

async def test_delete_student_removes_only_target(client, seed, make_student):
    await seed(make_student("1"), make_student("2"))

    res = await client.delete("/students/1")

    assert res.status_code == 200
    assert res.json() == {"message": "Student deleted successfully"}
    remaining = [u["studentNum"] for u in (await client.get("/get_users")).json()]
    assert remaining == ["2"]


async def test_delete_unknown_student_is_404(client):
    res = await client.delete("/students/404")
    assert res.status_code == 404
    assert res.json() == {"error": "Student '404' not found"}


async def test_repeated_delete_is_404(client, seed, make_student):
    await seed(make_student("1"))
    assert (await client.delete("/students/1")).status_code == 200
    assert (await client.delete("/students/1")).status_code == 404


async def test_student_num_with_sql_is_treated_as_a_value(client, seed, make_student):
    await seed(make_student("1"))
    res = await client.delete("/students/1 OR 1=1")
    assert res.status_code == 404
    assert len((await client.get("/get_users")).json()) == 1


async def test_get_users_lists_rows_with_null_names(client, replace_table):
    await replace_table(
        "student",
        "CREATE TABLE student (studentNum TEXT PRIMARY KEY, fName TEXT, lName TEXT, "
        "studentEmail TEXT, studentMainPhone TEXT)",
        "INSERT INTO student VALUES ('9', NULL, 'Null', NULL, NULL)",
    )

    res = await client.get("/get_users")

    assert res.status_code == 200
    assert res.json() == [{
        "studentNum": "9", "fName": None, "lName": "Null",
        "studentEmail": None, "studentMainPhone": None,
    }]
