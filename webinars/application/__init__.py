"""
Application layer - Use cases.

Each use case orchestrates a repository lookup, the domain checks and the
write back. No direct dependencies on frameworks (FastAPI, etc.)
"""
