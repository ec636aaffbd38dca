"""
Domain layer - Core business entities and domain logic.

This layer contains the employee entity and the errors it raises,
independent of configuration, logging or wiring concerns.
"""
