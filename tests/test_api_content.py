def _post(client, **overrides):
    payload = {"eventId": 1, "creatorId": 1, "title": "Post", "content": "Body"}
    payload.update(overrides)
    response = client.post("/api/content-posts", json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_post_resolves_platform_names(client):
    post = _post(client, platforms=[3, 2], tags=["launch"])
    assert post["platformNames"] == ["Instagram", "Twitter"]
    assert post["status"] == "draft"
    assert client.get(f"/api/content-posts/{post['id']}").json()["platformNames"] == ["Instagram", "Twitter"]


def test_default_listing_sorts_scheduled_desc_with_unscheduled_last(client):
    a = _post(client, title="A", scheduledFor="2025-08-01T09:00:00Z")
    b = _post(client, title="B")
    c = _post(client, title="C", scheduledFor="2025-08-05T09:00:00Z")

    listed = [p["id"] for p in client.get("/api/content-posts").json()]
    assert listed == [c["id"], a["id"], b["id"]]

    ascending = client.get("/api/content-posts", params={"sortBy": "scheduled_asc"}).json()
    assert [p["id"] for p in ascending] == [a["id"], c["id"], b["id"]]


def test_listing_filters(client):
    _post(client, title="Keynote", scheduledFor="2025-08-01T09:00:00Z", platforms=[1], tags=["speakers"])
    _post(client, title="Tickets", scheduledFor="2025-09-01T09:00:00Z", platforms=[2])
    _post(client, title="Draft")
    _post(client, title="Other", eventId=2)

    def listed(**params):
        return [p["title"] for p in client.get("/api/content-posts", params=params).json()]

    assert listed(eventId=2) == ["Other"]
    assert listed(platform=1) == ["Keynote"]
    assert listed(tag="speakers") == ["Keynote"]
    assert listed(searchTerm="ticket") == ["Tickets"]
    assert listed(startDate="2025-07-01T00:00:00Z", endDate="2025-08-15T00:00:00Z") == ["Keynote"]
    assert listed(eventId=1, status="draft", sortBy="created_asc") == ["Keynote", "Tickets", "Draft"]


def test_update_and_delete_post(client):
    post = _post(client)
    updated = client.put(f"/api/content-posts/{post['id']}", json={"status": "scheduled", "platforms": [4]})
    assert updated.status_code == 200
    assert updated.json()["platformNames"] == ["LinkedIn"]
    assert updated.json()["title"] == "Post"

    assert client.put(f"/api/content-posts/{post['id']}", json={"status": "archived"}).status_code == 400
    assert client.delete(f"/api/content-posts/{post['id']}").json() == {"message": "Content post deleted successfully"}
    assert client.get(f"/api/content-posts/{post['id']}").status_code == 404
    assert client.put("/api/content-posts/999", json={"title": "x"}).status_code == 404


def test_approvals_newest_first(client):
    post = _post(client)
    first = client.post("/api/content-approvals", json={"postId": post["id"], "approverId": 2, "status": "rejected"})
    second = client.post(
        "/api/content-approvals",
        json={"postId": post["id"], "approverId": 2, "status": "approved", "comments": "Looks good"},
    )
    assert first.status_code == 201

    approvals = client.get(f"/api/content-posts/{post['id']}/approvals").json()
    assert [a["id"] for a in approvals] == [second.json()["id"], first.json()["id"]]


def test_calendar_month_is_zero_based(client):
    for title, day in [("march", "2025-03-10"), ("april", "2025-04-02"), ("early march", "2025-03-01")]:
        response = client.post(
            "/api/calendar-entries", json={"eventId": 1, "title": title, "type": "milestone", "date": day}
        )
        assert response.status_code == 201

    march = client.get("/api/events/1/calendar", params={"month": 2, "year": 2025}).json()
    assert [e["title"] for e in march] == ["early march", "march"]
    assert len(client.get("/api/events/1/calendar").json()) == 3
    assert client.get("/api/events/1/calendar", params={"month": 12, "year": 2025}).status_code == 400


def test_calendar_entry_update_and_delete(client):
    entry = client.post(
        "/api/calendar-entries", json={"eventId": 1, "title": "Launch", "type": "post", "date": "2025-05-05"}
    ).json()

    updated = client.put(f"/api/calendar-entries/{entry['id']}", json={"color": "#ff0000"})
    assert updated.json()["color"] == "#ff0000"
    assert updated.json()["title"] == "Launch"

    assert client.delete(f"/api/calendar-entries/{entry['id']}").status_code == 200
    assert client.delete(f"/api/calendar-entries/{entry['id']}").status_code == 404
