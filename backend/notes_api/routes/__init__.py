# Routes package init
"""
Notes API — API Routes Package
===============================

Route Inventory:
    - notes.py:   GET    /api/notes          (list all notes)
                  GET    /api/notes/{id}     (get single note)
                  POST   /api/notes          (create)
                  PUT    /api/notes/{id}     (update)
                  DELETE /api/notes/{id}     (delete)
    - health.py:  GET    /health             (service health check)

Routes stay thin: extract path and body, call the service, pick the status
code. Error translation lives in the exception handlers in main.py.
"""
