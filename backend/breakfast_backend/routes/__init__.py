# Routes package init
"""
Healthy Breakfast Backend — API Routes Package
==============================================

Route Inventory:
    - status.py:  GET /      (liveness text)
                  GET /api   (greeting text)
    - menu.py:    GET /api/menu  (breakfast menu)

Routes stay thin: they call a service or return a constant and leave
status codes for unmatched requests to the framework.
"""
