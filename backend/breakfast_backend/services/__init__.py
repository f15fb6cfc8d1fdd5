# Services package init
"""
Healthy Breakfast Backend — Services Layer
==========================================

Service Inventory:
    - MenuService: Read-only access to the static breakfast menu
"""
