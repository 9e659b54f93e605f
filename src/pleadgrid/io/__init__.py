"""File helpers and the reportlab rendering backend."""
