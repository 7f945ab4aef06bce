"""
Unit tests for the default structured seed lookup.
"""

import pytest
from dataclasses import dataclass
from pathlib import Path
import sys

from pydantic import BaseModel

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "app"))

from autofill.lookup import AttributeLookup, SeedLookup, normalize_key


class Applicant(BaseModel):
    first_name: str
    age: int = 30


@dataclass
class Address:
    street: str
    zip_code: str


class Account:
    def __init__(self):
        self.username = "jdoe"
        self._token = "secret"


@pytest.fixture
def lookup():
    return AttributeLookup()


class TestAttributeLookup:
    """Test key-based lookup across seed shapes."""

    def test_mapping_exact_key(self, lookup):
        """Test an exact key match on a dict."""
        assert lookup.lookup({"email": "a@b.com"}, None, "email") == "a@b.com"

    def test_mapping_case_insensitive(self, lookup):
        """Test keys match regardless of case."""
        assert lookup.lookup({"Email": "a@b.com"}, None, "email") == "a@b.com"

    def test_normalized_key(self, lookup):
        """Test dashes, underscores and spaces are ignored."""
        assert lookup.lookup({"first_name": "Jane"}, None, "first-name") == "Jane"
        assert lookup.lookup({"first_name": "Jane"}, None, "FirstName") == "Jane"

    def test_exact_key_wins(self, lookup):
        """Test exact matches take precedence over looser ones."""
        seed = {"Name": "loose", "name": "exact"}
        assert lookup.lookup(seed, None, "name") == "exact"

    def test_pydantic_model(self, lookup):
        """Test fields of a pydantic model are readable."""
        seed = Applicant(first_name="Jane")
        assert lookup.lookup(seed, None, "first-name") == "Jane"
        assert lookup.lookup(seed, None, "age") == 30

    def test_dataclass(self, lookup):
        """Test fields of a dataclass are readable."""
        seed = Address(street="1 Main St", zip_code="98101")
        assert lookup.lookup(seed, None, "zipCode") == "98101"

    def test_plain_object_hides_private_attributes(self, lookup):
        """Test public attributes are readable and private ones are not."""
        seed = Account()
        assert lookup.lookup(seed, None, "username") == "jdoe"
        assert lookup.lookup(seed, None, "_token") is None

    @pytest.mark.parametrize("seed,key", [
        (None, "email"),
        ({"email": "a@b.com"}, "phone"),
        ({"email": "a@b.com"}, ""),
        ("scalar", "email"),
        ({"email": None}, "email"),
    ])
    def test_misses_return_none(self, lookup, seed, key):
        """Test every kind of miss reports None."""
        assert lookup.lookup(seed, None, key) is None


def test_contract_is_abstract():
    """Test the base contract must be implemented."""
    with pytest.raises(NotImplementedError):
        SeedLookup().lookup({}, None, "key")


def test_normalize_key():
    """Test key normalization."""
    assert normalize_key("First Name") == normalize_key("first_name") == "firstname"
