# tests/test_sa/test_repositories/test_user_repository.py
import pytest
from lending.errors import ConstraintViolation, PreconditionViolation
from lending.sa.models import User
from lending.sa.repositories import UserRepository

@pytest.fixture
def user_repo(db_session):
    """Fixture to create a UserRepository instance."""
    return UserRepository(db_session)

def test_create_user(user_repo):
    user = user_repo.create(User(name="Alice", email="alice@example.com", phone_number="111", address="Here"))
    assert user.id is not None
    assert user.name == "Alice"

def test_create_duplicate_email(user_repo, sample_user):
    with pytest.raises(ConstraintViolation):
        user_repo.create(User(name="Someone else", email=sample_user.email))
    assert user_repo.count() == 1

def test_update_user(user_repo, sample_user):
    sample_user.name = "Tomasz"
    user_repo.update(sample_user)
    assert user_repo.find_by_id(sample_user.id).name == "Tomasz"

def test_get_by_email(user_repo, sample_user):
    assert user_repo.get_by_email("user@test.com") is sample_user
    assert user_repo.get_by_email("missing@test.com") is None

def test_delete_user_with_borrowings_fails(user_repo, sample_user, open_borrowing):
    with pytest.raises(PreconditionViolation) as exc_info:
        user_repo.delete(sample_user.id)
    assert exc_info.value.rule == "user_has_borrowings"
    assert user_repo.find_by_id(sample_user.id) is not None

def test_delete_user_with_returned_borrowing_fails(db_session, user_repo, sample_user, open_borrowing):
    open_borrowing.mark_returned()
    db_session.commit()
    with pytest.raises(PreconditionViolation):
        user_repo.delete(sample_user.id)

def test_delete_user(user_repo, sample_user):
    assert user_repo.delete(sample_user.id) is True
    assert user_repo.find_by_id(sample_user.id) is None

def test_delete_user_with_librarian_record(user_repo, sample_user, sample_librarian):
    """Librarian records do not block deleting their user"""
    assert user_repo.delete(sample_user.id) is True
