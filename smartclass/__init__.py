"""
SmartClass Scheduling Backend
Faculty, grades, rooms, subjects, timetables, swaps, leaves and feedback
over a token-authenticated HTTP/JSON API.

Architecture:
- MongoDB: one collection per entity, no enforced references
- FastAPI: HTTP routing, validation, dependency-injected DB handle
- JWT: stateless tokens, bcrypt for stored passwords
"""

__version__ = "1.0.0"
