from claim_system.core.enums import Role


def test_login_page_renders(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Login" in resp.data


def test_lecturer_login_redirects_to_submit(client):
    resp = client.post("/", data={"username": "lecturer", "password": "123"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/claims/submit")
    with client.session_transaction() as sess:
        assert sess["role"] == "Lecturer"
        assert sess["name"] == "Demo Lecturer"


def test_coordinator_login_redirects_to_manage(client):
    resp = client.post("/", data={"username": "coordinator", "password": "123"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/claims/manage")
    with client.session_transaction() as sess:
        assert sess["role"] == "Coordinator"


def test_bad_login_shows_error_and_sets_no_session(client):
    resp = client.post("/", data={"username": "lecturer", "password": "nope"})

    assert resp.status_code == 200
    assert b"Invalid username or password." in resp.data
    with client.session_transaction() as sess:
        assert "role" not in sess


def test_logged_in_user_visiting_login_goes_to_landing_page(client, login_as):
    login_as(Role.COORDINATOR)
    resp = client.get("/")
    assert resp.headers["Location"].endswith("/claims/manage")


def test_logout_clears_session_for_any_role(client):
    client.post("/", data={"username": "coordinator", "password": "123"})

    resp = client.get("/logout")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")
    with client.session_transaction() as sess:
        assert "role" not in sess
        assert "name" not in sess


def test_logout_when_anonymous_is_harmless(client):
    resp = client.get("/logout")
    assert resp.status_code == 302
