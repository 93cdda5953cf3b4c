"""
Room Booking Backend — API Routes Package
===========================================

What:  HTTP route handlers (controllers) mapping verbs to service calls.

Route Inventory:
    - people.py:   /api/people    (person CRUD)
    - rooms.py:    /api/rooms     (room CRUD, availability, batch removal)
    - bookings.py: /api/bookings  (booking CRUD)
    - health.py:   /health        (service health check)
    - base.py:     ServiceResult → response mapping shared by the above

Routes stay thin: read the request, call one service operation, unwrap
the ServiceResult.
"""
