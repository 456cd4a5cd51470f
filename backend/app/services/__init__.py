# Services package init
"""
Mobile Bazar Backend — Services Layer
=======================================

What:  Business logic layer sitting between routes (HTTP) and the database.
How:   One stateless service per collection, each exposed as a module-level
       singleton. Every operation validates its required inputs, then makes
       at most one driver call.

Service Inventory:
    - CollectionService (base): id parsing, serialization, driver error translation
    - ProductService: products (list, get, create, update, delete)
    - OrderService:   orders (list, list by email, create, delete, set status)
    - ReviewService:  review (list, create)
    - UserService:    users (admin check, create, upsert by email, grant admin)
"""
