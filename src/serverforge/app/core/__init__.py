from serverforge.app.core.config import settings

__all__ = ['settings']
