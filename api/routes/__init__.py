"""Route handlers following Single Responsibility Principle

Each router module handles a single resource/concept:
- files: namespace CRUD and uploads
- versions: version history and rollback
- indexing: indexing control, status and runtime config
- health: health/info endpoints
"""
