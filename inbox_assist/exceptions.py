"""Domain exceptions raised by mail provider collaborators."""


class MailProviderError(Exception):
    """A mail provider call failed (transport, parse or mailbox error)."""


class ThreadNotFoundError(MailProviderError):
    """The requested thread does not exist in the mailbox."""

    def __init__(self, thread_id: str):
        super().__init__(f"Thread not found: {thread_id}")
        self.thread_id = thread_id
