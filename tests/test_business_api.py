"""
Tests for clients, projects, finances, tasks, leads and the dashboard
"""


def create_client(client, name="Dana Levi", **extra):
    response = client.post("/api/clients", json={"name": name, "phone": "050-1234567", **extra})
    assert response.status_code == 201
    return response.json()


def create_project(client, client_id, price=1000):
    response = client.post("/api/projects", json={"client_id": client_id, "type": "Website", "price": price})
    assert response.status_code == 201
    return response.json()


def test_health(client):
    assert client.get("/").json() == {"status": "ok", "message": "Backend is running"}


# ----------------------
# Clients
# ----------------------
def test_client_crud(client):
    created = create_client(client, email="dana@example.com")
    assert created["id"] == 1
    assert created["total_paid"] == 0
    assert created["projects_count"] == 0
    assert client.get("/api/clients").json() == [created]
    assert client.get("/api/clients/1").json() == created

    assert client.delete("/api/clients/1").json()["success"] is True
    assert client.get("/api/clients/1").status_code == 404
    assert client.delete("/api/clients/1").status_code == 404


def test_blank_client_name_rejected(client):
    response = client.post("/api/clients", json={"name": "  "})
    assert response.status_code == 400
    assert response.json() == {"detail": "Client name is required"}


# ----------------------
# Projects and payments
# ----------------------
def test_project_lifecycle(client):
    owner = create_client(client)
    project = create_project(client, owner["id"])
    assert project["status"] == "in_progress"
    assert project["paid"] is False
    assert project["client_name"] == "Dana Levi"
    assert client.get("/api/clients/1").json()["projects_count"] == 1

    stats = client.get("/api/dashboard").json()
    assert stats["active_projects"] == 1
    assert stats["pending_payments"] == 1000.0

    completed = client.put(f"/api/projects/{project['id']}/status", json={"status": "completed"}).json()
    assert completed["status"] == "completed"
    assert completed["date_completed"]

    paid = client.put(f"/api/projects/{project['id']}/paid")
    assert paid.status_code == 200
    assert paid.json()["paid"] is True

    income = client.get("/api/income").json()
    assert len(income) == 1
    assert income[0]["amount"] == 1000.0
    assert income[0]["category"] == "project"
    assert client.get("/api/clients/1").json()["total_paid"] == 1000.0

    stats = client.get("/api/dashboard").json()
    assert stats["completed_projects"] == 1
    assert stats["total_income"] == 1000.0
    assert stats["pending_payments"] == 0


def test_project_cannot_be_paid_twice(client):
    owner = create_client(client)
    project = create_project(client, owner["id"])
    client.put(f"/api/projects/{project['id']}/paid")
    assert client.put(f"/api/projects/{project['id']}/paid").status_code == 400
    assert len(client.get("/api/income").json()) == 1


def test_invalid_project_status_rejected(client):
    owner = create_client(client)
    project = create_project(client, owner["id"])
    response = client.put(f"/api/projects/{project['id']}/status", json={"status": "archived"})
    assert response.status_code == 422


def test_project_for_unknown_client(client):
    response = client.post("/api/projects", json={"client_id": 5, "type": "Website", "price": 100})
    assert response.status_code == 404


def test_client_with_projects_cannot_be_deleted(client):
    owner = create_client(client)
    project = create_project(client, owner["id"])

    response = client.delete(f"/api/clients/{owner['id']}")
    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot delete client with existing projects"

    assert client.delete(f"/api/projects/{project['id']}").status_code == 200
    assert client.get(f"/api/clients/{owner['id']}").json()["projects_count"] == 0
    assert client.delete(f"/api/clients/{owner['id']}").status_code == 200


# ----------------------
# Income and expenses
# ----------------------
def test_income_and_expenses(client):
    assert client.post("/api/income", json={"amount": 500, "source": "Consulting"}).status_code == 201
    expense = client.post("/api/expenses", json={"amount": 120.5, "description": "Hosting"}).json()

    stats = client.get("/api/dashboard").json()
    assert stats["total_income"] == 500.0
    assert stats["total_expenses"] == 120.5
    assert stats["net_profit"] == 379.5

    assert client.delete(f"/api/expenses/{expense['id']}").status_code == 200
    assert client.get("/api/expenses").json() == []
    assert client.delete(f"/api/expenses/{expense['id']}").status_code == 404


def test_non_positive_amount_rejected(client):
    assert client.post("/api/income", json={"amount": 0}).status_code == 422
    assert client.post("/api/expenses", json={"amount": -5}).status_code == 422


# ----------------------
# Tasks
# ----------------------
def test_task_flow(client):
    task = client.post("/api/tasks", json={"title": "Call Dana", "priority": "high"}).json()
    assert task["status"] == "open"
    assert task["priority"] == "high"
    assert client.get("/api/dashboard").json()["open_tasks"] == 1

    done = client.put(f"/api/tasks/{task['id']}/complete").json()
    assert done["status"] == "completed"
    assert client.get("/api/dashboard").json()["open_tasks"] == 0

    assert client.delete(f"/api/tasks/{task['id']}").status_code == 200
    assert client.delete(f"/api/tasks/{task['id']}").status_code == 404


def test_blank_task_title_rejected(client):
    assert client.post("/api/tasks", json={"title": ""}).status_code == 400


# ----------------------
# Leads
# ----------------------
def test_lead_conversion(client):
    lead = client.post("/api/leads", json={"name": "Noa", "phone": "054-7654321", "source": "Facebook"}).json()
    assert lead["status"] == "new"
    assert client.get("/api/dashboard").json()["active_leads"] == 1

    converted = client.post(f"/api/leads/{lead['id']}/convert")
    assert converted.status_code == 200
    new_client = converted.json()
    assert new_client["name"] == "Noa"
    assert new_client["source"] == "Facebook"

    assert client.get("/api/leads").json()[0]["status"] == "converted"
    assert client.get("/api/dashboard").json()["active_leads"] == 0
    assert client.post(f"/api/leads/{lead['id']}/convert").status_code == 400
    assert len(client.get("/api/clients").json()) == 1


def test_convert_unknown_lead(client):
    assert client.post("/api/leads/3/convert").status_code == 404


# ----------------------
# Settings, data, backup, activities
# ----------------------
def test_settings(client):
    settings = client.get("/api/settings").json()
    assert settings["business_name"] == "Master Code"
    assert settings["phone"] == "052-209-1733"


def test_all_data_and_backup(client):
    create_client(client)
    data = client.get("/api/data").json()
    assert data["clients"][0]["name"] == "Dana Levi"

    backup = client.post("/api/backup")
    assert backup.status_code == 200
    assert backup.headers["content-disposition"].startswith("attachment; filename=backup-")
    assert backup.json()["clients"] == data["clients"]


def test_activities_paginated_newest_first(client):
    for name in ("First", "Second", "Third"):
        create_client(client, name=name)

    page = client.get("/api/activities", params={"page_size": 2}).json()
    assert page["total"] == 3
    assert len(page["data"]) == 2
    assert "Third" in page["data"][0]["message"]

    oldest = client.get("/api/activities", params={"order": "asc", "page_size": 1}).json()
    assert "First" in oldest["data"][0]["message"]


def test_activities_page_size_bounds(client):
    assert client.get("/api/activities", params={"page_size": 500}).status_code == 422


def post_raw(client, url, body):
    return client.post(url, content=body, headers={"Content-Type": "application/json"})


def test_non_finite_amounts_rejected(client):
    owner = create_client(client)
    for value in ("NaN", "Infinity"):
        project = post_raw(client, "/api/projects", f'{{"client_id": {owner["id"]}, "type": "Website", "price": {value}}}')
        income = post_raw(client, "/api/income", f'{{"amount": {value}, "source": "Consulting"}}')
        expense = post_raw(client, "/api/expenses", f'{{"amount": {value}, "description": "Hosting"}}')
        assert (project.status_code, income.status_code, expense.status_code) == (422, 422, 422)
    assert client.get("/api/projects").json() == []
    assert client.get("/api/dashboard").json()["total_income"] == 0


def test_storage_failure_is_logged_with_traceback(client, data_file, caplog):
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text("not json", encoding="utf-8")

    with caplog.at_level("ERROR", logger="main"):
        response = client.get("/api/clients")

    assert response.status_code == 500
    assert "not valid JSON" in response.json()["detail"]
    failures = [r for r in caplog.records if r.name == "main" and r.levelname == "ERROR"]
    assert failures and failures[0].exc_info is not None
