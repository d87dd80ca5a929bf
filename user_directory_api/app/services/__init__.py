"""
Service layer.

Services hold the business logic and are independent of FastAPI; the
endpoints in ``api`` only parse requests and call into them.
"""
