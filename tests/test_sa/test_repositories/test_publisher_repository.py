# tests/test_sa/test_repositories/test_publisher_repository.py
import pytest
from lending.errors import NotFound, PreconditionViolation
from lending.sa.models import Book, Publisher
from lending.sa.repositories import PublisherRepository

@pytest.fixture
def publisher_repo(db_session):
    return PublisherRepository(db_session)

def test_create_publisher(publisher_repo):
    publisher = publisher_repo.create(Publisher(name="NewPub Inc", address="1 Main St", contact="555"))
    assert publisher.id is not None
    assert publisher_repo.get_by_name("NewPub Inc") is publisher

def test_assign_book(publisher_repo, sample_publisher, sample_book):
    book = publisher_repo.assign_book(sample_book.id, sample_publisher.id)
    assert book.publisher_id == sample_publisher.id
    assert book.publisher == sample_publisher.name
    assert book.publisher_entity is sample_publisher

def test_detach_book(publisher_repo, sample_publisher, sample_book):
    publisher_repo.assign_book(sample_book.id, sample_publisher.id)
    book = publisher_repo.assign_book(sample_book.id, None)
    assert book.publisher_id is None

def test_assign_unknown_records(publisher_repo, sample_publisher, sample_book):
    with pytest.raises(NotFound):
        publisher_repo.assign_book(999, sample_publisher.id)
    with pytest.raises(NotFound):
        publisher_repo.assign_book(sample_book.id, 999)

def test_delete_referenced_publisher_fails(publisher_repo, sample_publisher, sample_book):
    publisher_repo.assign_book(sample_book.id, sample_publisher.id)
    with pytest.raises(PreconditionViolation) as exc_info:
        publisher_repo.delete(sample_publisher.id)
    assert exc_info.value.rule == "publisher_has_books"
    assert publisher_repo.find_by_id(sample_publisher.id) is not None

def test_free_text_publisher_name_does_not_block(db_session, publisher_repo, sample_publisher):
    """Only the publisher reference counts, not a matching name"""
    db_session.add(Book(title="Named only", author="X", isbn="ISBN-N", publisher=sample_publisher.name))
    db_session.commit()
    assert publisher_repo.delete(sample_publisher.id) is True

def test_delete_publisher(publisher_repo, sample_publisher):
    assert publisher_repo.delete(sample_publisher.id) is True
    assert publisher_repo.find_by_id(sample_publisher.id) is None
