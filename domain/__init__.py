"""Domain layer for the event-coordination backend.

Entities, value objects and ports for users and the events they join,
decoupled from MongoDB and from any presentation layer.
"""
