"""Application layer: user commands and queries.

Commands and queries call the repository and turn its typed errors into
``Outcome`` values, logging the failure kind on the way.
"""
