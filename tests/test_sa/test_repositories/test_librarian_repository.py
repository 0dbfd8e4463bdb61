# tests/test_sa/test_repositories/test_librarian_repository.py
import pytest
from datetime import date
from lending.errors import NotFound
from lending.sa.models import Librarian
from lending.sa.repositories import LibrarianRepository

@pytest.fixture
def librarian_repo(db_session):
    return LibrarianRepository(db_session)

def test_create_librarian(librarian_repo, sample_user):
    librarian = librarian_repo.create(Librarian(user_id=sample_user.id, hire_date=date(2023, 1, 1), position="Clerk"))
    assert librarian.id is not None
    assert librarian.user is sample_user

def test_update_librarian(librarian_repo, sample_librarian):
    sample_librarian.position = "Assistant Librarian"
    librarian_repo.update(sample_librarian)
    assert librarian_repo.find_by_id(sample_librarian.id).position == "Assistant Librarian"

def test_update_missing_librarian(librarian_repo):
    with pytest.raises(NotFound):
        librarian_repo.update(Librarian(id=77, user_id=1))

def test_delete_librarian(librarian_repo, sample_librarian, sample_user):
    assert librarian_repo.delete(sample_librarian.id) is True
    assert librarian_repo.find_by_id(sample_librarian.id) is None
