import pytest


def test_get_students(seeded_client):
    client, _ = seeded_client

    resp = client.get("/getStudents")

    assert resp.status_code == 200
    assert resp.json() == [
        {
            "id": "S101",
            "name": "Alice",
            "email": "alice@example.com",
            "dob": "2004-05-06",
            "gender": "Female",
        }
    ]


def test_get_students_pagination(test_app_client):
    client, _ = test_app_client
    for n in range(3):
        assert client.post("/addStudent", json={"id": f"S{200 + n}", "name": f"S {n}"}).status_code == 201

    resp = client.get("/getStudents", params={"limit": 1, "offset": 1})

    assert [s["id"] for s in resp.json()] == ["S201"]
    assert client.get("/getStudents", params={"limit": 0}).status_code == 422


def test_add_student(test_app_client):
    client, _ = test_app_client

    resp = client.post("/addStudent", json={"id": "S300", "name": "Ada", "email": "ada@example.com"})

    assert resp.status_code == 201
    assert resp.json()["message"] == "Student added"
    assert client.get("/getStudents").json()[0]["email"] == "ada@example.com"


def test_add_student_requires_id_and_name(test_app_client):
    client, _ = test_app_client

    assert client.post("/addStudent", json={"name": "No Id"}).status_code == 400
    assert client.post("/addStudent", json={"id": "S301"}).status_code == 400
    assert client.get("/getStudents").json() == []


def test_add_student_duplicate(seeded_client):
    client, _ = seeded_client

    assert client.post("/addStudent", json={"id": "S101", "name": "Clone"}).status_code == 409


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "S400", "name": "Ada", "dob": "06/05/2004"},
        {"id": "S400", "name": "Ada", "dob": "2004-13-01"},
        {"id": "S400", "name": "Ada", "dob": "2004-05-06T00:00:00"},
        {"id": "S400", "name": "Ada", "dob": 20040506},
        {"id": "S400", "name": "Ada", "gender": "x" * 33},
        {"id": 400, "name": "Ada"},
    ],
)
def test_add_student_rejects_malformed_fields(test_app_client, payload):
    client, _ = test_app_client

    resp = client.post("/addStudent", json=payload)

    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"] == "Invalid data"
    assert client.get("/getStudents").json() == []


def test_add_student_with_iso_dob(test_app_client):
    client, _ = test_app_client

    resp = client.post("/addStudent", json={"id": "S401", "name": "Ada", "dob": "2004-05-06"})

    assert resp.status_code == 201
    assert client.get("/getStudents").json()[0]["dob"] == "2004-05-06"
