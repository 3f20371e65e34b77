from serverforge.app.infrastructure.db.base import Base
from serverforge.app.infrastructure.db.init_db import init_db

__all__ = ['init_db', 'Base']
