"""
Tests for the scripted FAQ chat
"""
from app.core.store import empty_dataset
from app.services.chat_service import HELP_TEXT, respond


def dataset():
    data = empty_dataset({})
    data["clients"] = [
        {"id": 1, "name": "Dana", "projects_count": 1},
        {"id": 2, "name": "Noa", "projects_count": 0},
    ]
    data["projects"] = [{"id": 1, "client_id": 1, "status": "in_progress", "paid": False, "price": 800}]
    data["income"] = [{"id": 1, "amount": 1500}]
    data["expenses"] = [{"id": 1, "amount": 250.5}]
    data["tasks"] = [{"id": 1, "status": "open"}, {"id": 2, "status": "completed"}]
    return data


def test_client_count():
    assert respond("How many clients do I have?", dataset()) == (
        "You have 2 clients in the system. 1 of them have projects."
    )


def test_finance_summary():
    answer = respond("What is my income this year?", dataset())
    assert "Total income: ₪1,500.00" in answer
    assert "Total expenses: ₪250.50" in answer
    assert "Net profit: ₪1,249.50" in answer


def test_hebrew_keywords():
    assert respond("כמה לקוחות יש לי?", dataset()).startswith("You have 2 clients")


def test_projects_and_tasks():
    assert respond("project status", dataset()).startswith("You have 1 active projects")
    assert respond("any tasks left?", dataset()) == "You have 1 open tasks and 1 completed tasks."


def test_recommendations():
    assert "unpaid" in respond("recommend something", dataset())
    assert respond("recommend something", empty_dataset({})) == "Everything looks great! Keep up the good work!"


def test_unknown_question_gets_help_text():
    assert respond("hello", dataset()) == HELP_TEXT


def test_chat_endpoint(client):
    response = client.post("/api/ai-chat", json={"message": "how many clients?"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["response"].startswith("You have 0 clients")
    assert body["timestamp"]
