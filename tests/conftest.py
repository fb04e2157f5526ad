"""Shared test fixtures."""

from dataclasses import dataclass
from typing import List, Optional

import pytest


@dataclass
class Address:
    city: str
    zip_code: str


@dataclass
class Person:
    id: int
    name: str
    age: int
    email: Optional[str] = None
    address: Optional[Address] = None


@pytest.fixture
def people() -> List[Person]:
    """Fixture providing a valid list of people."""
    return [
        Person(id=1, name="alice", age=30, email="alice@example.com", address=Address("Oslo", "0150")),
        Person(id=2, name="bob", age=45, email="bob@example.com", address=Address("Bergen", "5003")),
        Person(id=3, name="carol", age=27, email="carol@example.com", address=Address("Oslo", "0151")),
    ]


@pytest.fixture
def records() -> List[dict]:
    """Fixture providing mapping elements."""
    return [
        {"id": 1, "name": "a"},
        {"id": 2, "name": "a"},
    ]
