"""Fixtures for the AWS client tests."""
import pytest

from tests.fakes import FakeSession


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()
