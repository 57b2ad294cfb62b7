# tests/test_repositories/test_member_repository.py
import pytest
from sqlalchemy.exc import IntegrityError
from library_core.models import MemberStatus
from library_core.repositories import MemberRepository

@pytest.fixture
def member_repo(db_session):
    """Fixture to create a MemberRepository instance."""
    return MemberRepository(db_session)

def test_get_by_id(member_repo, sample_member):
    fetched = member_repo.get_by_id(sample_member.member_id)
    assert fetched is not None
    assert fetched.email == "test.member@example.com"

def test_get_by_email(member_repo, sample_member):
    assert member_repo.get_by_email("test.member@example.com").member_id == sample_member.member_id

def test_search_members(member_repo, seeded):
    assert [m.full_name for m in member_repo.search_members("smith")] == ["Jane Smith"]

def test_search_members_by_email(member_repo, seeded):
    assert [m.first_name for m in member_repo.search_members("bob.johnson@")] == ["Bob"]

def test_search_members_everyone(member_repo, seeded):
    assert [m.last_name for m in member_repo.search_members()] == ["Doe", "Johnson", "Smith"]

def test_create_member_defaults(member_repo):
    member = member_repo.create_member("New", "Member", "new.member@example.com", phone="555-9999")
    assert member.member_id is not None
    assert member.status == MemberStatus.ACTIVE
    assert member.join_date is not None

def test_create_member_bad_email(member_repo):
    with pytest.raises(IntegrityError):
        member_repo.create_member("Bad", "Email", "bad@nodot")

def test_create_member_duplicate_email(member_repo, sample_member):
    with pytest.raises(IntegrityError):
        member_repo.create_member("Twin", "Member", "test.member@example.com")

def test_update_status(member_repo, sample_member):
    updated = member_repo.update_status(sample_member.member_id, MemberStatus.SUSPENDED)
    assert updated.status == MemberStatus.SUSPENDED
    assert member_repo.get_members_by_status(MemberStatus.SUSPENDED) == [updated]

def test_update_status_nonexistent(member_repo):
    assert member_repo.update_status(999, MemberStatus.EXPIRED) is None

def test_delete_member(member_repo, sample_member):
    assert member_repo.delete_member(sample_member.member_id) is True
    assert member_repo.get_all() == []

def test_delete_member_with_loans(member_repo, sample_loan):
    with pytest.raises(IntegrityError):
        member_repo.delete_member(sample_loan.member_id)
