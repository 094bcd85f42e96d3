import pytest
from pytest_factoryboy import register
from rest_framework.test import APIClient

from accounts.models import UserRole
from accounts.tests.factory import UserFactory, VerificationFactory
from authflow.services.tokens import issue_token_for_user
from menu.tests.factory import CategoryFactory, DishFactory, OrderFactory, RestaurantFactory

# factories as pytest fixtures: user_factory, restaurant_factory, ...
register(UserFactory)
register(VerificationFactory)
register(CategoryFactory)
register(RestaurantFactory)
register(DishFactory)
register(OrderFactory)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def authenticate():
    """authenticate(client, user) -> client carrying the user's bearer token"""
    def _authenticate(client, user):
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token_for_user(user)}")
        return client
    return _authenticate


@pytest.fixture
def owner(user_factory):
    return user_factory(email="owner@example.com", role=UserRole.OWNER)


@pytest.fixture
def other_owner(user_factory):
    return user_factory(email="other-owner@example.com", role=UserRole.OWNER)


@pytest.fixture
def client_user(user_factory):
    return user_factory(email="client@example.com", role=UserRole.CLIENT)


@pytest.fixture
def admin_user(user_factory):
    return user_factory(email="admin@example.com", role=UserRole.ADMIN, verified=True)
