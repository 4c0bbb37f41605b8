from tripdesk.schemas.catalog import UserCreate
from tripdesk.services.query_service import QueryService


def test_category_match_ignores_case(repository):
    queries = QueryService(repository)
    upper = [h.id for h in queries.get_hotels_by_category("LUXURY")]
    lower = [h.id for h in queries.get_hotels_by_category("luxury")]
    assert upper == lower == [1, 2, 3, 4, 5]


def test_category_matches_any_tag(repository):
    queries = QueryService(repository)
    assert [h.name for h in queries.get_hotels_by_category("heritage")] == [
        "Taj Lake Palace",
        "Taj Mahal Palace",
        "Kumarakom Lake Resort",
    ]


def test_unknown_category_is_empty_not_an_error(repository):
    assert QueryService(repository).get_hotels_by_category("Treehouse") == []


def test_category_is_exact_tag_not_substring(repository):
    assert QueryService(repository).get_hotels_by_category("Lux") == []


def test_list_hotels_with_and_without_category(repository):
    queries = QueryService(repository)
    assert len(queries.list_hotels()) == 6
    assert [h.id for h in queries.list_hotels(category="wellness")] == [5, 6]


def test_get_hotel_not_found_returns_none(repository):
    queries = QueryService(repository)
    assert queries.get_hotel(999999) is None
    assert queries.get_hotel(6).price_per_night == 15999


def test_get_flight_and_destination(repository):
    queries = QueryService(repository)
    assert queries.get_flight(1).airline == "Air India"
    assert queries.get_destination(2).name == "Jaipur"
    assert queries.get_destination(100) is None


def test_hotels_for_destination_match_location(repository):
    queries = QueryService(repository)
    udaipur = next(d for d in queries.list_destinations() if d.name == "Udaipur")
    kerala = next(d for d in queries.list_destinations() if d.name == "Kerala")
    goa = next(d for d in queries.list_destinations() if d.name == "Goa")

    assert [h.name for h in queries.get_hotels_for_destination(udaipur.id)] == ["Taj Lake Palace"]
    assert [h.name for h in queries.get_hotels_for_destination(kerala.id)] == ["Kumarakom Lake Resort"]
    assert queries.get_hotels_for_destination(goa.id) == []


def test_hotels_for_unknown_destination_is_none(repository):
    assert QueryService(repository).get_hotels_for_destination(999) is None


def test_user_lookup_by_username(repository):
    repository.create_user(UserCreate(username="rahul", password="secret", full_name="Rahul Mehta"))
    queries = QueryService(repository)
    assert queries.get_user_by_username("rahul").full_name == "Rahul Mehta"
    assert queries.get_user_by_username("nobody") is None
