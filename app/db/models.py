from app.db.base import Base

# Import all models here
from app.models.provider import Provider

__all__ = ["Base", "Provider"]
