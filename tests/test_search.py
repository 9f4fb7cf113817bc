"""Search tests."""

from controllers.search_controller import build_search_condition


def _seed(register_user):
    register_user(name="Anan", email="anan@example.com", skills="go", city="Mumbai")
    register_user(name="Priya", email="priya@example.com", skills="banana, rust", city="Chennai")
    register_user(name="Kiran", email="kiran@example.com", skills="java", city="New Delhi")


def _emails(response):
    assert response.status_code == 200
    return sorted(profile["email"] for profile in response.json)


def test_search_both_empty_returns_nothing(client, register_user):
    _seed(register_user)
    assert client.get("/api/search").json == []
    assert client.get("/api/search?query=%20%20&location=").json == []


def test_build_search_condition_blank():
    assert build_search_condition(None, None) is None
    assert build_search_condition("  ", "\t") is None
    assert build_search_condition("go", None) is not None


def test_search_matches_name_or_skill(client, register_user):
    _seed(register_user)
    response = client.get("/api/search?query=ana")
    assert _emails(response) == ["anan@example.com", "priya@example.com"]


def test_search_is_case_insensitive(client, register_user):
    _seed(register_user)
    assert _emails(client.get("/api/search?query=RUST")) == ["priya@example.com"]
    assert _emails(client.get("/api/search?query=kIr")) == ["kiran@example.com"]


def test_search_location_substring(client, register_user):
    _seed(register_user)
    assert _emails(client.get("/api/search?location=delhi")) == ["kiran@example.com"]


def test_search_conditions_are_ored(client, register_user):
    _seed(register_user)
    response = client.get("/api/search?query=java&location=mumbai")
    assert _emails(response) == ["anan@example.com", "kiran@example.com"]


def test_search_trims_input(client, register_user):
    _seed(register_user)
    assert _emails(client.get("/api/search?query=%20go%20")) == ["anan@example.com"]


def test_search_no_match(client, register_user):
    _seed(register_user)
    assert client.get("/api/search?query=haskell").json == []


def test_search_text_is_literal(client, register_user):
    _seed(register_user)
    register_user(name="100% Dev", email="pct@example.com")
    assert _emails(client.get("/api/search?query=%25")) == ["pct@example.com"]
    assert client.get("/api/search?query=a_n").json == []


def test_search_results_are_external(client, register_user):
    _seed(register_user)
    for profile in client.get("/api/search?query=a").json:
        assert "uid" in profile
        assert "password_hash" not in profile
        assert "id" not in profile


def test_search_folds_non_ascii_case(client, register_user):
    register_user(name="Élodie", email="elodie@example.com", skills="Ökonomie", city="MÜNCHEN")
    register_user(name="Bob", email="bob@example.com", city="Berlin")
    assert _emails(client.get("/api/search", query_string={"query": "élodie"})) == ["elodie@example.com"]
    assert _emails(client.get("/api/search", query_string={"query": "ökonom"})) == ["elodie@example.com"]
    assert _emails(client.get("/api/search", query_string={"location": "münchen"})) == ["elodie@example.com"]
