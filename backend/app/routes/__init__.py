# Routes package init
"""
Mobile Bazar Backend — API Routes Package
===========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - products.py: GET/POST /products, GET/DELETE /products/{id}, PUT /updateProduct
    - orders.py:   GET/POST /orders, GET /ordersData, DELETE /orders/{id},
                   PUT /updateOrderStatus
    - reviews.py:  GET/POST /review
    - users.py:    GET /users/{email}, POST/PUT /users, PUT /users/admin
    - health.py:   GET / (banner), GET /health

Design Principle:
    Routes are THIN: extract request data, call one service method, return
    its result. Errors are raised, never rendered here; the handlers
    registered in main.py produce every error response.
"""
