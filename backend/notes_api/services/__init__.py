# Services package init
"""
Notes API — Services Layer
===========================

What:  Business logic between routes (HTTP) and the database (persistence).

Service Inventory:
    - NoteService: list, create, get, update and delete notes
"""
