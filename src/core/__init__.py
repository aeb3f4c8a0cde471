"""
Core random utilities.

Stateless building blocks that depend only on an injected random engine
(no global mutable state, no locking).
"""
