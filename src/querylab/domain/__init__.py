"""Domain layer: entities and projection targets.

Classes here are plain Python objects. Persistence is attached to the
entities by `querylab.adapters.orm.start_mappers`.
"""

from .dto import MemberDto, UserDto
from .model import Member, Team

__all__ = ["Member", "Team", "MemberDto", "UserDto"]
