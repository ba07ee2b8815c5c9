from sqlmodel import Session, select

from models.models import Project, Task


def test_create_project_with_initial_tasks(client):
    response = client.post(
        "/api/projects",
        json={
            "name": "W",
            "description": "d",
            "startDate": "2024-01-01",
            "tasks": [{"title": "t1", "description": "d1", "dueDate": "2024-01-05"}],
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Project created successfully"
    assert body["data"]["startDate"].startswith("2024-01-01")
    assert len(body["data"]["tasks"]) == 1
    assert body["data"]["tasks"][0]["isCompleted"] is False
    assert body["data"]["tasks"][0]["projectId"] == body["data"]["id"]


def test_initial_tasks_keep_explicit_completion(make_project):
    project = make_project(tasks=[
        {"title": "a", "description": "a", "dueDate": "2024-01-02", "isCompleted": True},
        {"title": "b", "description": "b", "dueDate": "2024-01-03"},
        {"title": "c", "description": "c", "dueDate": "2024-01-04"},
    ])

    assert len(project["tasks"]) == 3
    completed = {task["title"]: task["isCompleted"] for task in project["tasks"]}
    assert completed == {"a": True, "b": False, "c": False}


def test_create_project_without_tasks(make_project):
    project = make_project()
    assert project["tasks"] == []


def test_create_project_requires_fields(client):
    response = client.post("/api/projects", json={"description": "d", "startDate": "2024-01-01"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"


def test_create_project_rejects_empty_name(client):
    response = client.post("/api/projects", json={"name": "", "description": "d", "startDate": "2024-01-01"})
    assert response.status_code == 400


def test_get_project_with_tasks(client, make_project):
    project = make_project(tasks=[{"title": "t1", "description": "d1", "dueDate": "2024-01-05"}])

    response = client.get(f"/api/projects/{project['id']}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Website"
    assert [task["title"] for task in data["tasks"]] == ["t1"]


def test_get_missing_project(client):
    response = client.get("/api/projects/999")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Project not found"}


def test_get_project_with_non_numeric_id(client):
    response = client.get("/api/projects/abc")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid project ID"


def test_list_projects_paginates(client, make_project):
    for i in range(3):
        make_project(name=f"Project {i}")

    response = client.get("/api/projects", params={"page": 1, "limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert len(body["data"]) == 2
    assert body["pagination"] == {"page": 1, "limit": 2, "total": 3, "pages": 2}

    second = client.get("/api/projects", params={"page": 2, "limit": 2}).json()
    assert len(second["data"]) == 1


def test_list_projects_search_matches_name_or_description(client, make_project):
    make_project(name="Website", description="Marketing refresh")
    make_project(name="Mobile", description="Companion app")
    make_project(name="Backend", description="API for the website")

    body = client.get("/api/projects", params={"search": "ebsite"}).json()

    assert sorted(project["name"] for project in body["data"]) == ["Backend", "Website"]
    assert body["pagination"]["total"] == 2


def test_list_projects_rejects_oversized_limit(client):
    response = client.get("/api/projects", params={"limit": 1000})
    assert response.status_code == 400


def test_update_project_is_partial(client, make_project):
    project = make_project(name="Old", description="keep me")

    response = client.put(f"/api/projects/{project['id']}", json={"name": "New"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "New"
    assert data["description"] == "keep me"
    assert response.json()["message"] == "Project updated successfully"


def test_update_missing_project(client):
    response = client.put("/api/projects/42", json={"name": "New"})
    assert response.status_code == 404


def test_delete_project_cascades_to_tasks(client, engine, make_project):
    project = make_project(tasks=[
        {"title": "t1", "description": "d1", "dueDate": "2024-01-05"},
        {"title": "t2", "description": "d2", "dueDate": "2024-01-06"},
    ])

    response = client.delete(f"/api/projects/{project['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Project deleted successfully"}
    with Session(engine) as session:
        assert session.get(Project, project["id"]) is None
        assert session.exec(select(Task)).all() == []
    assert client.get(f"/api/projects/{project['id']}").status_code == 404


def test_delete_missing_project(client):
    response = client.delete("/api/projects/7")
    assert response.status_code == 404


def test_project_stats(client, make_project):
    project = make_project(tasks=[
        {"title": "a", "description": "a", "dueDate": "2024-01-02", "isCompleted": True},
        {"title": "b", "description": "b", "dueDate": "2024-01-03"},
        {"title": "c", "description": "c", "dueDate": "2024-01-04"},
    ])

    response = client.get(f"/api/projects/{project['id']}/stats")

    assert response.status_code == 200
    assert response.json()["data"] == {
        "totalTasks": 3,
        "completedTasks": 1,
        "pendingTasks": 2,
        "completionPercentage": 33,
    }


def test_project_stats_without_tasks(client, make_project):
    project = make_project()

    data = client.get(f"/api/projects/{project['id']}/stats").json()["data"]

    assert data["totalTasks"] == 0
    assert data["completionPercentage"] == 0


def test_dates_are_sent_with_utc_marker(client, make_project):
    project = make_project(
        start_date="2024-01-01T10:30:00Z",
        tasks=[{"title": "t1", "description": "d1", "dueDate": "2024-01-05T12:00:00+03:00"}],
    )

    data = client.get(f"/api/projects/{project['id']}").json()["data"]

    assert data["startDate"] == "2024-01-01T10:30:00Z"
    assert data["tasks"][0]["dueDate"] == "2024-01-05T09:00:00Z"
    for value in (data["createdAt"], data["updatedAt"], data["tasks"][0]["createdAt"]):
        assert value.endswith("Z")


def test_search_treats_wildcards_literally(client, make_project):
    make_project(name="100% done")
    make_project(name="Alpha", description="first_draft")
    make_project(name="Beta", description="plain")

    percent = client.get("/api/projects", params={"search": "%"}).json()
    underscore = client.get("/api/projects", params={"search": "_"}).json()

    assert [project["name"] for project in percent["data"]] == ["100% done"]
    assert [project["name"] for project in underscore["data"]] == ["Alpha"]
