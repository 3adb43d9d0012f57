from .base import Repository
from .sql import SqlModelRepository
