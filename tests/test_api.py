def test_chat_submission(client):
    resp = client.post("/api/chat", json={"message": "Send a Slack message every morning"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is True
    assert body["message"]["role"] == "user"

    chat = client.get("/api/chat").json()
    assert chat["is_typing"] is True
    assert chat["typing_indicator"]["is_typing"] is True
    assert chat["typing_indicator"]["role"] == "assistant"
    assert chat["messages"][0]["content"] == "Send a Slack message every morning"

    # A second message while the reply is pending is ignored
    resp = client.post("/api/chat", json={"message": "hello again"})
    assert resp.json() == {"accepted": False, "message": None}


def test_blank_chat_submission_ignored(client):
    resp = client.post("/api/chat", json={"message": "   "})
    assert resp.json()["accepted"] is False
    assert client.get("/api/chat").json()["messages"] == []


def test_prompts(client):
    body = client.get("/api/prompts").json()
    assert len(body["example_prompts"]) == 4
    assert len(body["action_pills"]) == 6


def test_conversation_lifecycle(client):
    convs = client.get("/api/conversations").json()
    assert [c["id"] for c in convs][:2] == ["1", "5"]

    resp = client.post("/api/conversations/2/pin")
    assert resp.status_code == 200
    assert resp.json()["notice"]["title"] == "Chat pinned"
    assert resp.json()["conversation"]["pinned"] is True

    resp = client.patch("/api/conversations/2", json={"name": "X Integration"})
    assert resp.json()["conversation"]["name"] == "X Integration"
    assert resp.json()["notice"]["description"] == 'Chat has been renamed to "X Integration".'

    resp = client.patch("/api/conversations/2", json={"name": " "})
    assert resp.status_code == 400

    found = client.get("/api/conversations", params={"q": "x int"}).json()
    assert [c["id"] for c in found] == ["2"]

    resp = client.delete("/api/conversations/2")
    assert resp.json()["notice"]["title"] == "Chat deleted"
    assert client.delete("/api/conversations/2").status_code == 404


def test_switching_conversation_clears_chat(client):
    client.post("/api/chat", json={"message": "hello"})
    resp = client.post("/api/conversations/3/select")
    assert resp.json()["conversation"]["active"] is True

    chat = client.get("/api/chat").json()
    assert chat == {"messages": [], "is_typing": False, "typing_indicator": None}

    new = client.post("/api/conversations").json()["conversation"]
    assert new["name"] == "New Chat"
    assert client.post("/api/conversations/missing/select").status_code == 404


def test_demo_navigation(client):
    examples = client.get("/api/demo/examples").json()
    assert len(examples) == 4

    state = client.get("/api/demo").json()
    assert state["current_example_index"] == 0

    state = client.post("/api/demo/previous").json()
    assert state["current_example_index"] == 3
    assert examples[3]["user_question"].startswith(state["typed_question_prefix"])
    assert state["payload_revealed"] is False

    state = client.post("/api/demo/next").json()
    assert state["current_example_index"] == 0

    state = client.post("/api/demo/select/2").json()
    assert state["example_id"] == "data-sync"
    assert client.post("/api/demo/select/9").status_code == 404


def test_demo_transcript_and_payload(client):
    frames = client.get("/api/demo/examples/email-leads/transcript", params={"seed": 5}).json()
    assert frames[-1]["playback"]["payload_revealed"] is True
    assert frames[-1]["playback"]["phase"] == "payload_revealed"
    assert len(frames[-1]["playback"]["typed_step_lines"]) == 4
    assert frames == client.get("/api/demo/examples/email-leads/transcript", params={"seed": 5}).json()

    resp = client.get("/api/demo/examples/email-leads/payload")
    assert resp.status_code == 200
    assert "attachment" in resp.headers["content-disposition"]
    assert '"new-lead"' in resp.text

    assert client.get("/api/demo/examples/nope/payload").status_code == 404


def test_testimonials(client):
    first = client.get("/api/testimonials").json()
    assert first["total"] == 3
    nxt = client.post("/api/testimonials/next").json()
    assert nxt["index"] == (first["index"] + 1) % 3
    prev = client.post("/api/testimonials/previous").json()
    assert prev["index"] == first["index"]
