# library_core/repositories/member.py
from typing import List, Optional
from sqlalchemy import or_
from library_core.models import Member, MemberStatus
from .base import BaseRepository

class MemberRepository(BaseRepository[Member]):
    """Repository for managing Member entities."""

    model = Member

    def get_by_email(self, email: str) -> Optional[Member]:
        """Get a member by email address.

        Args:
            email: The email to search for

        Returns:
            The Member object if found, None otherwise
        """
        return self.session.query(Member).filter(Member.email == email).first()

    def search_members(self, query: Optional[str] = None, limit: int = 20) -> List[Member]:
        """Search members by name or email.

        Args:
            query: The search query string; empty returns everyone up to the limit
            limit: Maximum number of results to return (default: 20)

        Returns:
            List of matching Member objects ordered by last name
        """
        base_query = self.session.query(Member)
        if query:
            pattern = f"%{query}%"
            base_query = base_query.filter(or_(
                Member.first_name.ilike(pattern),
                Member.last_name.ilike(pattern),
                Member.email.ilike(pattern)
            ))
        return base_query.order_by(Member.last_name, Member.first_name).limit(limit).all()

    def get_members_by_status(self, status: MemberStatus) -> List[Member]:
        """Get all members with the given status.

        Args:
            status: Active, Suspended or Expired

        Returns:
            List of Member objects with that status
        """
        return self.session.query(Member).filter(Member.status == status).all()

    def create_member(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None
    ) -> Member:
        """Create a new member. join_date and status take their database defaults.

        Raises:
            IntegrityError: If the email is malformed or already registered
        """
        member = Member(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            address=address
        )
        self.session.add(member)
        self._commit()
        return member

    def update_status(self, member_id: int, status: MemberStatus) -> Optional[Member]:
        """Set a member's status.

        Args:
            member_id: The ID of the member to update
            status: The new status

        Returns:
            The updated Member object if found, None otherwise
        """
        member = self.get_by_id(member_id)
        if not member:
            return None

        member.status = status
        self._commit()
        return member

    def delete_member(self, member_id: int) -> bool:
        """Delete a member.

        Returns:
            True if the member was deleted, False if not found

        Raises:
            IntegrityError: If loans still reference the member
        """
        member = self.get_by_id(member_id)
        if not member:
            return False

        self.session.delete(member)
        self._commit()
        return True
