# library_core/exceptions.py

class LibraryError(Exception):
    """Base class for lending workflow errors"""

class BookNotFoundError(LibraryError):
    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book {book_id} not found")

class MemberNotFoundError(LibraryError):
    def __init__(self, member_id: int):
        self.member_id = member_id
        super().__init__(f"Member {member_id} not found")

class MemberNotActiveError(LibraryError):
    def __init__(self, member_id: int, status: str):
        self.member_id = member_id
        self.status = status
        super().__init__(f"Member {member_id} is {status}, only Active members can borrow")

class BookUnavailableError(LibraryError):
    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"No copies of book {book_id} are currently available")

class LoanNotFoundError(LibraryError):
    def __init__(self, loan_id: int):
        self.loan_id = loan_id
        super().__init__(f"Loan {loan_id} not found")

class LoanAlreadyReturnedError(LibraryError):
    def __init__(self, loan_id: int):
        self.loan_id = loan_id
        super().__init__(f"Loan {loan_id} has already been returned")

class InvalidLoanPeriodError(LibraryError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Loan period must be a whole number of days, at least 1 (got {value!r})")
