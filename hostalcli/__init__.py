"""Console application for managing hostels, rooms, reservations, stays and reviews, kept in memory."""

__version__ = "0.1.0"