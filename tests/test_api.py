import pytest


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"ok": True}


@pytest.fixture
def api_library(client):
    author = client.post("/authors", json={"author_name": "Haruki Murakami"}).get_json()["data"]
    category = client.post("/categories", json={"category_name": "Literary Fiction"}).get_json()["data"]
    book = client.post("/books/", json={
        "book_title": "Norwegian Wood",
        "author_id": author["author_id"],
        "category_id": category["category_id"],
        "publish_year": 1987,
    }).get_json()["data"]
    reader = client.post("/readers/", json={
        "reader_name": "Lin Meili",
        "register_date": "2023-03-15",
    }).get_json()["data"]
    return {"book_id": book["book_id"], "reader_id": reader["reader_id"]}


def test_create_book_ignores_availability_flag(client):
    response = client.post("/books/", json={"book_title": "Kafka on the Shore", "is_available": False})
    assert response.status_code == 201
    assert response.get_json()["data"]["is_available"] is True


def test_duplicate_category_returns_409(client):
    client.post("/categories", json={"category_name": "Poetry"})
    response = client.post("/categories", json={"category_name": "Poetry"})
    assert response.status_code == 409
    assert response.get_json()["success"] is False


def test_borrow_and_late_return(client, api_library):
    response = client.post("/borrow/", json={
        "reader_id": api_library["reader_id"],
        "book_id": api_library["book_id"],
        "borrow_date": "2024-06-01",
        "due_date": "2024-06-15",
    })
    assert response.status_code == 201
    borrow_id = response.get_json()["borrow_id"]
    assert response.get_json()["due_date"] == "2024-06-15T00:00:00"

    book = client.get(f"/books/{api_library['book_id']}").get_json()["data"]
    assert book["is_available"] is False

    response = client.post(f"/borrow/return/{borrow_id}", json={"return_date": "2024-06-20"})
    assert response.status_code == 200
    assert response.get_json()["fine_amount"] == 50

    book = client.get(f"/books/{api_library['book_id']}").get_json()["data"]
    assert book["is_available"] is True

    fines = client.get("/fines/?only_unpaid=1").get_json()["data"]
    assert [(f["borrow_id"], f["amount"]) for f in fines] == [(borrow_id, 50.0)]

    paid = client.post(f"/fines/pay/{borrow_id}").get_json()["data"]
    assert paid["is_paid"] is True


def test_double_return_returns_409(client, api_library):
    borrow_id = client.post("/borrow/", json={
        "reader_id": api_library["reader_id"],
        "book_id": api_library["book_id"],
        "borrow_date": "2024-06-01",
        "due_date": "2024-06-15",
    }).get_json()["borrow_id"]
    client.post(f"/borrow/return/{borrow_id}", json={"return_date": "2024-06-10"})

    response = client.post(f"/borrow/return/{borrow_id}", json={"return_date": "2024-06-11"})
    assert response.status_code == 409


def test_borrow_unavailable_book_returns_409(client, api_library):
    payload = {
        "reader_id": api_library["reader_id"],
        "book_id": api_library["book_id"],
        "borrow_date": "2024-06-01",
        "due_date": "2024-06-15",
    }
    assert client.post("/borrow/", json=payload).status_code == 201
    assert client.post("/borrow/", json=payload).status_code == 409


def test_borrow_validation_errors(client, api_library):
    response = client.post("/borrow/", json={"book_id": api_library["book_id"]})
    assert response.status_code == 400

    response = client.post("/borrow/", json={
        "reader_id": api_library["reader_id"],
        "book_id": api_library["book_id"],
        "borrow_date": "2024-06-15",
        "due_date": "2024-06-01",
    })
    assert response.status_code == 400

    response = client.post("/borrow/", json={
        "reader_id": api_library["reader_id"],
        "book_id": api_library["book_id"],
        "borrow_date": "not-a-date",
    })
    assert response.status_code == 400


def test_unknown_ids_return_404(client, api_library):
    response = client.post("/borrow/", json={"reader_id": 999, "book_id": api_library["book_id"]})
    assert response.status_code == 404
    assert client.post("/borrow/return/999", json={}).status_code == 404
    assert client.get("/books/999").status_code == 404
    assert client.get("/readers/999/history").status_code == 404


def test_reports(client, seeded):
    overdue = client.get("/reports/overdue?today=2024-06-01").get_json()["data"]
    assert [b["borrow_id"] for b in overdue] == [1]

    top = client.get("/reports/top-books?n=5").get_json()["data"]
    assert sorted(row["book_id"] for row in top) == [1, 2]

    assert client.get("/reports/hot-books").get_json()["data"] == []

    counts = client.get("/reports/reader-counts").get_json()["data"]
    assert counts[-1] == {"reader_name": "Wang Dajun", "total_borrowed": 0}

    history = client.get("/readers/2/history").get_json()["data"]
    assert history == [{
        "book_title": "Norwegian Wood",
        "borrow_date": "2024-05-02T10:00:00",
        "return_date": "2024-05-10T18:00:00",
    }]

    consistency = client.get("/reports/consistency").get_json()
    assert consistency["consistent"] is True


def test_delete_reader_endpoint(client, seeded):
    assert client.delete("/readers/1").status_code == 200
    book = client.get("/books/1").get_json()["data"]
    assert book["is_available"] is True
    assert client.get("/borrow/?reader_id=1").get_json()["data"] == []


@pytest.mark.parametrize("suffix", ["+00:00", "Z"])
def test_offset_timestamps_are_stored_as_utc(client, api_library, suffix):
    response = client.post("/borrow/", json={
        "reader_id": api_library["reader_id"],
        "book_id": api_library["book_id"],
        "borrow_date": "2024-06-01T10:00:00" + suffix,
        "due_date": "2024-06-15T10:00:00" + suffix,
    })
    assert response.status_code == 201
    borrow_id = response.get_json()["borrow_id"]
    assert response.get_json()["due_date"] == "2024-06-15T10:00:00"

    response = client.post(f"/borrow/return/{borrow_id}", json={"return_date": "2024-06-20T10:00:00" + suffix})
    assert response.status_code == 200
    assert response.get_json()["fine_amount"] == 50
    assert response.get_json()["return_date"] == "2024-06-20T10:00:00"

    book = client.get(f"/books/{api_library['book_id']}").get_json()["data"]
    assert book["is_available"] is True


def test_non_utc_offset_is_shifted(client, api_library):
    borrow_id = client.post("/borrow/", json={
        "reader_id": api_library["reader_id"],
        "book_id": api_library["book_id"],
        "borrow_date": "2024-06-01T10:00:00+02:00",
        "due_date": "2024-06-15T01:00:00+02:00",
    }).get_json()["borrow_id"]

    record = client.get(f"/borrow/{borrow_id}").get_json()["data"]
    assert record["borrow_date"] == "2024-06-01T08:00:00"
    assert record["due_date"] == "2024-06-14T23:00:00"


def test_reader_name_types(client):
    response = client.post("/readers/", json={"reader_name": 123})
    assert response.status_code == 201
    assert response.get_json()["data"]["reader_name"] == "123"

    response = client.post("/readers/", json={"reader_name": "   "})
    assert response.status_code == 400
    assert response.get_json()["success"] is False


@pytest.mark.parametrize(
    "payload",
    [
        {"author_id": "abc"},
        {"category_id": "xyz"},
        {"publish_year": "soon"},
    ],
)
def test_update_book_with_bad_fields_returns_400(client, seeded, payload):
    response = client.put("/books/1", json=payload)
    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_update_book_with_unknown_author_returns_404(client, seeded):
    assert client.put("/books/1", json={"author_id": 99}).status_code == 404


@pytest.mark.parametrize("path", ["/books", "/readers", "/fines", "/borrow"])
def test_collection_routes_without_trailing_slash(client, seeded, path):
    response = client.get(path)
    assert response.status_code == 200
    assert response.get_json()["success"] is True


def test_create_reader_without_trailing_slash(client):
    response = client.post("/readers", json={"reader_name": "Wang Dajun"})
    assert response.status_code == 201
