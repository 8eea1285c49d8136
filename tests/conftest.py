"""Shared fixtures for json_typegen tests."""

import pytest

ALL_TARGETS = ["typescript", "java", "flutter", "swift", "go", "kotlin"]


@pytest.fixture
def user_sample():
    return {
        "id": 7,
        "name": "Ada",
        "score": 9.5,
        "active": True,
        "tags": ["admin", "dev"],
        "address": {"city": "London", "zip": "N1"},
        "orders": [{"sku": "A-1", "qty": 2}],
        "nickname": None,
    }


@pytest.fixture
def reserved_sample():
    return {"class": "x", "type": "y", "default": 1, "first-name": "z"}


@pytest.fixture(params=ALL_TARGETS)
def target(request):
    return request.param
