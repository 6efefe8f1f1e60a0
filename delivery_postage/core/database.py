"""
Declarative base for the entities a postage request references.

Only the mapping lives here. Sessions and engines belong to the host
application.
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
