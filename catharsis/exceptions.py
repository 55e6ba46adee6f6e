class CatharsisError(Exception):
    """Base class for errors returned to the caller of a use case."""


class WrongWordError(CatharsisError):
    def __init__(self, guessed_word: str):
        super().__init__("Incorrect word")
        self.guessed_word = guessed_word


class AlreadyCompletedError(CatharsisError):
    def __init__(self, date: str):
        super().__init__("Already completed today")
        self.date = date


class ContentTooLongError(CatharsisError):
    def __init__(self, length: int, max_length: int):
        super().__init__(f"Content is {length} characters, limit is {max_length}")
        self.length = length
        self.max_length = max_length


class ConfirmationRequiredError(CatharsisError):
    def __init__(self):
        super().__init__("Reset requires confirmation")


class TicketStoreError(Exception):
    """Base class for errors raised by the ticket store."""


class DuplicateDateError(TicketStoreError):
    def __init__(self, date: str):
        super().__init__(f"A ticket for {date} already exists")
        self.date = date


class StoreUnavailableError(TicketStoreError):
    pass
