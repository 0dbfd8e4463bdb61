# tests/test_sa/test_repositories/test_borrowing_repository.py
import pytest
from datetime import date
from lending.errors import ConstraintViolation
from lending.sa.models import Borrowing, Copy, CopyStatus
from lending.sa.repositories import BorrowingRepository, CopyRepository

@pytest.fixture
def borrowing_repo(db_session):
    return BorrowingRepository(db_session)

def test_create_borrowing(borrowing_repo, sample_user, sample_copy):
    borrowing = borrowing_repo.create(
        Borrowing(user_id=sample_user.id, copy_id=sample_copy.id, borrow_date=date.today())
    )
    assert borrowing.id is not None
    assert borrowing.is_open

def test_create_borrowing_without_date(borrowing_repo, sample_user, sample_copy):
    with pytest.raises(ConstraintViolation):
        borrowing_repo.create(Borrowing(user_id=sample_user.id, copy_id=sample_copy.id))

def test_create_does_not_touch_copy_status(borrowing_repo, sample_user, sample_copy):
    """Moving the copy to Borrowed is up to the caller"""
    borrowing_repo.create(Borrowing(user_id=sample_user.id, copy_id=sample_copy.id, borrow_date=date.today()))
    assert sample_copy.status == CopyStatus.AVAILABLE

def test_update_return_date(borrowing_repo, open_borrowing):
    return_date = date(2024, 1, 12)
    open_borrowing.return_date = return_date
    borrowing_repo.update(open_borrowing)
    assert borrowing_repo.find_by_id(open_borrowing.id).return_date == return_date
    assert borrowing_repo.get_open() == []

def test_get_open(db_session, borrowing_repo, sample_user, sample_copy, open_borrowing):
    db_session.add(Borrowing(user_id=sample_user.id, copy_id=sample_copy.id,
                             borrow_date=date(2023, 1, 1), return_date=date(2023, 1, 2)))
    db_session.commit()
    assert borrowing_repo.get_open() == [open_borrowing]

def test_delete_borrowing_resets_copy(database, borrowing_repo, open_borrowing, sample_copy):
    assert sample_copy.status == CopyStatus.BORROWED
    assert borrowing_repo.delete(open_borrowing.id) is True
    assert borrowing_repo.find_by_id(open_borrowing.id) is None

    # The reset was committed together with the delete
    with database.get_db() as other:
        assert other.get(Copy, sample_copy.id).status == CopyStatus.AVAILABLE

def test_delete_returned_borrowing_resets_copy(db_session, borrowing_repo, open_borrowing, sample_copy):
    open_borrowing.return_date = date(2024, 2, 1)
    sample_copy.status = CopyStatus.WITHDRAWN
    db_session.commit()
    borrowing_repo.delete(open_borrowing.id)
    assert sample_copy.status == CopyStatus.AVAILABLE

def test_delete_borrowing_keeps_user_and_copy(db_session, borrowing_repo, open_borrowing, sample_user, sample_copy):
    borrowing_repo.delete(open_borrowing.id)
    assert CopyRepository(db_session).find_by_id(sample_copy.id) is not None
    assert db_session.get(type(sample_user), sample_user.id) is not None

def test_delete_borrowing_of_missing_copy(db_session, borrowing_repo, sample_user):
    orphan = borrowing_repo.create(Borrowing(user_id=sample_user.id, copy_id=4242, borrow_date=date.today()))
    assert borrowing_repo.delete(orphan.id) is True

def test_failed_commit_rolls_back_side_effect(db_session, borrowing_repo, open_borrowing, sample_copy, monkeypatch):
    """The copy reset is never visible without the delete"""
    def failing_commit():
        raise RuntimeError("disk full")

    monkeypatch.setattr(db_session, "commit", failing_commit)
    with pytest.raises(RuntimeError):
        borrowing_repo.delete(open_borrowing.id)
    monkeypatch.undo()

    assert borrowing_repo.find_by_id(open_borrowing.id) is not None
    assert db_session.get(Copy, sample_copy.id).status == CopyStatus.BORROWED

def test_delete_missing_borrowing_is_noop(borrowing_repo):
    assert borrowing_repo.delete(999) is False
