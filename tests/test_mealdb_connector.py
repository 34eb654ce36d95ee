"""
Tests for the TheMealDB connector using a mocked requests session.

These tests never hit the network. They verify that:
- Each operation calls the right path with the right query parameters
- A null or missing "meals" list is treated as "no matches"
- Raw records are parsed into MealSummary / MealDetail models
- Network, HTTP and parse failures surface as MealDBError
"""

import os
from unittest.mock import Mock, patch

import pytest
import requests

from mealfinder.connectors.base import MealDBError
from mealfinder.connectors.mealdb_connector import MealDBConnector
from mealfinder.models import MealDetail, MealSummary

BASE_URL = "https://www.themealdb.com/api/json/v1/1"


def _response(payload):
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    return response


def _connector(payload=None, **kwargs):
    session = Mock()
    session.get.return_value = _response(payload)
    return MealDBConnector(base_url=BASE_URL, session=session, **kwargs), session


class TestRequests:
    """Endpoint paths and parameters must match TheMealDB's contract."""

    def test_search_by_name_hits_search_php(self):
        connector, session = _connector({"meals": None})
        connector.search_by_name("arrabiata")

        session.get.assert_called_once_with(
            f"{BASE_URL}/search.php", params={"s": "arrabiata"}, timeout=None
        )

    def test_filter_by_category_hits_filter_php(self):
        connector, session = _connector({"meals": None})
        connector.filter_by_category("Seafood")

        session.get.assert_called_once_with(
            f"{BASE_URL}/filter.php", params={"c": "Seafood"}, timeout=None
        )

    def test_lookup_by_id_hits_lookup_php(self):
        connector, session = _connector({"meals": None})
        connector.lookup_by_id("52771")

        session.get.assert_called_once_with(
            f"{BASE_URL}/lookup.php", params={"i": "52771"}, timeout=None
        )

    def test_list_categories_hits_list_php(self):
        connector, session = _connector({"meals": None})
        connector.list_categories()

        session.get.assert_called_once_with(
            f"{BASE_URL}/list.php", params={"c": "list"}, timeout=None
        )

    def test_trailing_slash_is_stripped_from_base_url(self):
        session = Mock()
        session.get.return_value = _response({"meals": None})
        connector = MealDBConnector(base_url=f"{BASE_URL}/", session=session)
        connector.list_categories()

        assert session.get.call_args[0][0] == f"{BASE_URL}/list.php"

    def test_explicit_timeout_is_passed_through(self):
        connector, session = _connector({"meals": None}, timeout=7.5)
        connector.search_by_name("soup")

        assert session.get.call_args[1]["timeout"] == 7.5

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "3"})
    def test_timeout_read_from_environment(self):
        connector, _ = _connector({"meals": None})
        assert connector.timeout == 3.0

    @patch.dict(os.environ, {"MEALDB_BASE_URL": "http://localhost:9000/api/"})
    @patch("mealfinder.connectors.mealdb_connector.requests.Session")
    def test_defaults_come_from_config(self, mock_session_class):
        connector = MealDBConnector()

        mock_session_class.assert_called_once_with()
        assert connector.base_url == "http://localhost:9000/api"


class TestParsing:
    """Responses are normalized into models; empty results are not errors."""

    @pytest.mark.parametrize("payload", [{"meals": None}, {"meals": []}, {}])
    def test_no_matches_returns_empty_list(self, payload):
        connector, _ = _connector(payload)
        assert connector.search_by_name("zzz") == []

    def test_search_results_are_full_records(self, arrabiata_raw):
        connector, _ = _connector({"meals": [arrabiata_raw]})
        meals = connector.search_by_name("arrabiata")

        assert len(meals) == 1
        assert isinstance(meals[0], MealDetail)
        assert meals[0].id == "52771"
        assert meals[0].name == "Spicy Arrabiata Penne"
        assert meals[0].area == "Italian"

    def test_filter_results_are_reduced_summaries(self):
        connector, _ = _connector({
            "meals": [
                {"strMeal": "Baked salmon", "strMealThumb": "https://img/1.jpg", "idMeal": "52959"},
                {"strMeal": "Fish pie", "strMealThumb": "https://img/2.jpg", "idMeal": "52802"},
            ]
        })
        meals = connector.filter_by_category("Seafood")

        assert [m.name for m in meals] == ["Baked salmon", "Fish pie"]
        assert all(type(m) is MealSummary for m in meals)
        assert meals[0].instructions is None
        assert meals[0].category is None

    def test_lookup_returns_first_meal(self, arrabiata_raw):
        connector, _ = _connector({"meals": [arrabiata_raw]})
        detail = connector.lookup_by_id("52771")

        assert isinstance(detail, MealDetail)
        assert detail.name == "Spicy Arrabiata Penne"

    def test_lookup_unknown_id_returns_none(self):
        connector, _ = _connector({"meals": None})
        assert connector.lookup_by_id("0") is None

    def test_list_categories_returns_names_in_order(self):
        connector, _ = _connector({
            "meals": [{"strCategory": "Beef"}, {"strCategory": "Chicken"}, {"strCategory": "Dessert"}]
        })
        assert connector.list_categories() == ["Beef", "Chicken", "Dessert"]

    def test_list_categories_skips_nameless_entries(self):
        connector, _ = _connector({"meals": [{"strCategory": "Beef"}, {}, {"strCategory": None}]})
        assert connector.list_categories() == ["Beef"]


class TestErrors:
    """Every failure mode is reported as MealDBError."""

    def test_connection_error(self):
        session = Mock()
        session.get.side_effect = requests.exceptions.ConnectionError("offline")
        connector = MealDBConnector(base_url=BASE_URL, session=session)

        with pytest.raises(MealDBError, match="search.php"):
            connector.search_by_name("soup")

    def test_http_error_status(self):
        session = Mock()
        response = _response({})
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("500 Server Error")
        session.get.return_value = response
        connector = MealDBConnector(base_url=BASE_URL, session=session)

        with pytest.raises(MealDBError):
            connector.filter_by_category("Beef")

    def test_invalid_json(self):
        session = Mock()
        response = _response(None)
        response.json.side_effect = ValueError("Expecting value")
        session.get.return_value = response
        connector = MealDBConnector(base_url=BASE_URL, session=session)

        with pytest.raises(MealDBError, match="Invalid JSON"):
            connector.list_categories()

    def test_non_object_payload(self):
        connector, _ = _connector(["not", "an", "object"])
        with pytest.raises(MealDBError, match="expected an object"):
            connector.search_by_name("soup")

    def test_meals_not_a_list(self):
        connector, _ = _connector({"meals": "oops"})
        with pytest.raises(MealDBError, match="not a list"):
            connector.search_by_name("soup")

    def test_unparseable_record(self):
        connector, _ = _connector({"meals": ["just a string"]})
        with pytest.raises(MealDBError, match="Could not parse"):
            connector.filter_by_category("Beef")

    def test_error_keeps_original_cause(self):
        session = Mock()
        cause = requests.exceptions.Timeout("slow")
        session.get.side_effect = cause
        connector = MealDBConnector(base_url=BASE_URL, session=session)

        with pytest.raises(MealDBError) as excinfo:
            connector.lookup_by_id("1")
        assert excinfo.value.__cause__ is cause
