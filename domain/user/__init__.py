"""User domain module.

Users are identified by a unique, case-sensitive username and keep an
ordered list of weak references to the events they participate in.
"""
