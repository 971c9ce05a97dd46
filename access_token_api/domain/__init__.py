"""Domain layer for the access token API.

Contains the error taxonomy and the value objects that encode token
state. Nothing in this package performs I/O.
"""
