"""
HTTP API for the movie catalog (FastAPI application, routers and schemas).
"""
