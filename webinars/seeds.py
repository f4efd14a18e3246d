"""Seed users for local development and tests."""
from webinars.domain.entities import User

alice = User(id="alice", email="alice@gmail.com")
bob = User(id="bob", email="bob@gmail.com")

test_users = {
    "alice": alice,
    "bob": bob,
}
