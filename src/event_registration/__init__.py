"""Event registration backend.

Participants register with their CPF for one or both event days, admins
check attendees in, and the system tracks certificate and evaluation state.
Organized by feature modules (registrations, capacity, checkin, ...) with a
thin Flask controller layer over service/repository layers.
"""

__version__ = "1.0.0"
