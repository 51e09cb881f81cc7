"""Application services wrapping infrastructure access."""

from .tickets import LoggingTicketService, SqlTicketService, TicketChanges, TicketService

__all__ = ["LoggingTicketService", "SqlTicketService", "TicketChanges", "TicketService"]
